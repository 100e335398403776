"""
Occupancy period progress.
"""

import math
from datetime import date, datetime, time, timezone
from typing import Optional

from .models import RequestProgress, RequestStatus, SpaceRequest

SECONDS_PER_DAY = 86400

# Only a request that holds the space has a period to measure
MEASURED_STATUSES = frozenset({RequestStatus.APPROVED, RequestStatus.ACTIVE})


def _days(seconds: float) -> int:
    return math.ceil(seconds / SECONDS_PER_DAY)


def _end_of(available_to: date) -> datetime:
    return datetime.combine(available_to, time.min, tzinfo=timezone.utc)


def compute_progress(request: SpaceRequest, now: Optional[datetime] = None) -> RequestProgress:
    """
    Measure a request against its space's last available day.

    The period runs from ``started_at`` (or ``created_at`` before the
    gardener starts) to ``available_to``. Pending, rejected and completed
    requests, and spaces without an end date, report zero for everything.
    """
    available_to = request.space.available_to if request.space else None
    if request.status not in MEASURED_STATUSES or available_to is None:
        return RequestProgress(request_id=request.id, total_days=0, days_remaining=0, percent=0.0)

    now = now or datetime.now(timezone.utc)
    start = request.started_at or request.created_at
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    end = _end_of(available_to)

    total = max(1, _days((end - start).total_seconds()))
    elapsed = _days((now - start).total_seconds())
    remaining = max(0, _days((end - now).total_seconds()))
    percent = min(100.0, max(0.0, elapsed / total * 100))

    return RequestProgress(
        request_id=request.id,
        total_days=total,
        days_remaining=remaining,
        percent=round(percent, 1),
    )
