"""
Token issuance package.

- token_issuer: builds the registered + caller payload from TokenOptions
  and a ClaimsSet and signs it with the per-call secret.

The secret is only ever held on the call stack.
"""

from .token_issuer import SecretKey, TokenIssuer, check_secret

__all__ = ["SecretKey", "TokenIssuer", "check_secret"]
