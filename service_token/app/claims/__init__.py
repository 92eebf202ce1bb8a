"""
Claims package.

A claims collection is an explicit, caller-owned ordered sequence handed to
the issuer and returned by the validator. There is no ambient identity
state: every operation receives the collection it works on.

Modules of interest:
- models: Claim, ClaimsSet and the payload mapping helpers.
"""

from .models import (
    RESERVED_CLAIMS,
    Claim,
    ClaimsSet,
    add_claim,
    add_claims,
    get_claim_value,
)

__all__ = [
    "RESERVED_CLAIMS",
    "Claim",
    "ClaimsSet",
    "add_claim",
    "add_claims",
    "get_claim_value",
]
