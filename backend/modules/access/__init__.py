"""
Access module.

Entry credentials for approved requests: the gardener's QR token and the
public verifier that reads it.

Public API:
- IAccessService: Interface for verification and credential lookup
- AccessVerification, AccessResult, AccessCredential
"""

from .interfaces import IAccessService
from .models import AccessCredential, AccessResult, AccessVerification

__all__ = [
    "IAccessService",
    "AccessCredential",
    "AccessResult",
    "AccessVerification",
]
