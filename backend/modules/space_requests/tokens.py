"""
Access token generation.

Tokens are opaque, URL-safe and unguessable. Nothing about the request or
the gardener can be recovered from one; verification always goes back to
the database.
"""

import secrets

TOKEN_BYTES = 24


def generate_access_token() -> str:
    """Return a fresh random access token."""
    return secrets.token_urlsafe(TOKEN_BYTES)
