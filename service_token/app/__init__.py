"""
Token service package.

Issues and verifies HMAC-signed JSON Web Tokens in the compact
serialization. It is intentionally small and focused:

- app.claims: Caller-owned ordered claims collection.
- app.options: Signing algorithms, issuance and validation options.
- app.issuance: Token signing.
- app.validation: Signature/claim verification and unverified inspection.
- app.service: TokenService facade wiring config and logging.

Design notes:
- Secrets are passed per call and never stored or logged.
- Package import performs no IO and reads no configuration; settings are
  loaded when a TokenService is constructed.
- Use the shared/ utilities for logging, config and errors.
"""

from .claims import Claim, ClaimsSet, add_claim, add_claims, get_claim_value
from .options import SigningAlgorithm, TokenOptions, ValidationOptions
from .issuance import TokenIssuer
from .validation import TokenValidator, TokenVerificationResponse
from .service import TokenService

__all__ = [
    "Claim",
    "ClaimsSet",
    "add_claim",
    "add_claims",
    "get_claim_value",
    "SigningAlgorithm",
    "TokenOptions",
    "ValidationOptions",
    "TokenIssuer",
    "TokenValidator",
    "TokenVerificationResponse",
    "TokenService",
]
