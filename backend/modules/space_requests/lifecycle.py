"""
Request lifecycle state machine.

    pending  --(owner approves)---> approved
    pending  --(owner rejects)----> rejected   [terminal]
    approved --(gardener starts)--> active
    active   --(either completes)-> completed  [terminal]

No edge skips a state and no edge goes backwards. Every target status has
exactly one incoming edge, so a requested target identifies the edge.
Authority for the edge is checked before adjacency.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models import RequestStatus
from .exceptions import InvalidStatusTransitionError, TransitionNotPermittedError


class Party(str, Enum):
    """Role a user plays on one particular request."""

    OWNER = "owner"        # Owns the requested space
    GARDENER = "gardener"  # Made the request


@dataclass(frozen=True)
class Transition:
    action: str
    source: RequestStatus
    target: RequestStatus
    parties: frozenset[Party]


TRANSITIONS: dict[RequestStatus, Transition] = {
    t.target: t
    for t in (
        Transition("approve", RequestStatus.PENDING, RequestStatus.APPROVED, frozenset({Party.OWNER})),
        Transition("reject", RequestStatus.PENDING, RequestStatus.REJECTED, frozenset({Party.OWNER})),
        Transition("start", RequestStatus.APPROVED, RequestStatus.ACTIVE, frozenset({Party.GARDENER})),
        Transition(
            "complete",
            RequestStatus.ACTIVE,
            RequestStatus.COMPLETED,
            frozenset({Party.OWNER, Party.GARDENER}),
        ),
    )
}


def parties_of(user_id: str, gardener_id: str, owner_id: Optional[str]) -> frozenset[Party]:
    """The parties a user plays on a request (empty for outsiders)."""
    parties = set()
    if user_id == gardener_id:
        parties.add(Party.GARDENER)
    if owner_id is not None and user_id == owner_id:
        parties.add(Party.OWNER)
    return frozenset(parties)


def allowed_targets(current: RequestStatus) -> list[RequestStatus]:
    """Statuses reachable from ``current`` in one step."""
    return [t.target for t in TRANSITIONS.values() if t.source == current]


def authorize_transition(
    request_id: str,
    user_id: str,
    parties: frozenset[Party],
    current: RequestStatus,
    target: RequestStatus,
) -> Transition:
    """
    Check that ``user_id`` may move a request from ``current`` to ``target``.

    Returns:
        The edge being taken.

    Raises:
        TransitionNotPermittedError: If none of the caller's parties may take the edge
        InvalidStatusTransitionError: If ``target`` is not one step from ``current``
    """
    transition = TRANSITIONS.get(target)
    if transition is None:
        # Nothing leads back to pending
        raise InvalidStatusTransitionError(request_id, current.value, target.value)

    if not parties & transition.parties:
        raise TransitionNotPermittedError(request_id, user_id, transition.action)

    if current != transition.source:
        raise InvalidStatusTransitionError(request_id, current.value, target.value)

    return transition
