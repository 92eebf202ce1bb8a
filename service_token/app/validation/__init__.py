"""
Token validation package.

Validates compact-serialized JWTs signed with a shared HMAC secret:

- Checking token structure (three base64url segments).
- Verifying the signature against the header's declared algorithm.
- Checking expiry, not-before, audience and issuer per ValidationOptions.
- Unverified inspection helpers (header, claims, indented payload) that
  are named as such so they are never mistaken for a verified decode.
"""

from .token_validator import (
    SUPPORTED_ALGORITHMS,
    TokenValidator,
    TokenVerificationResponse,
    split_segments,
)

__all__ = [
    "SUPPORTED_ALGORITHMS",
    "TokenValidator",
    "TokenVerificationResponse",
    "split_segments",
]
