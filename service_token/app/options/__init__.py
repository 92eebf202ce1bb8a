"""
Token options package.

- models: SigningAlgorithm (closed set of HMAC schemes), TokenOptions
  (issuance parameters) and ValidationOptions (post-signature checks).

Unknown algorithms are rejected when options are built, not when a token
is signed.
"""

from .models import (
    DEFAULT_LIFETIME_MINUTES,
    SigningAlgorithm,
    TokenOptions,
    ValidationOptions,
)

__all__ = [
    "DEFAULT_LIFETIME_MINUTES",
    "SigningAlgorithm",
    "TokenOptions",
    "ValidationOptions",
]
