"""
Token issuance for the token service.
"""

from typing import Any, Dict, Optional, Union
import sys
import os

# Add shared directory to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..', '..'))

import jwt

from shared.logging import get_logger
from shared.errors import ConfigurationError
from ..claims import RESERVED_CLAIMS, ClaimsSet
from ..options import SigningAlgorithm, TokenOptions

SecretKey = Union[str, bytes]


class TokenIssuer:
    """Signs claims into compact-serialized JWTs."""

    def __init__(self):
        self.logger = get_logger("token.issuer")

    def issue(self, claims: ClaimsSet, secret: SecretKey, options: Optional[TokenOptions] = None) -> str:
        """Issue a signed token.

        The payload carries exp, nbf and iat, then aud/iss when set, then the
        caller claims in insertion order. Identical inputs (including
        timestamps) always produce the same token.
        """
        check_secret(secret)
        if options is None:
            options = TokenOptions()
        algorithm = SigningAlgorithm.parse(options.algorithm)

        payload = self.build_payload(claims, options)

        if len(secret) < algorithm.digest_size:
            self.logger.warning(
                "Secret shorter than HMAC digest size",
                algorithm=algorithm.value,
                minimum_bytes=algorithm.digest_size
            )

        token = jwt.encode(
            payload,
            secret,
            algorithm=algorithm.value,
            headers={"typ": "JWT"}
        )

        self.logger.debug(
            "Token issued",
            algorithm=algorithm.value,
            claims_count=len(claims),
            audience=options.audience,
            issuer=options.issuer
        )

        return token

    def build_payload(self, claims: ClaimsSet, options: TokenOptions) -> Dict[str, Any]:
        """Assemble the payload for ``claims`` under ``options``."""
        clashes = [type for type in claims.types if type in RESERVED_CLAIMS]
        if clashes:
            raise ConfigurationError(
                "Claim types collide with registered token fields",
                details={"claim_types": clashes}
            )

        payload: Dict[str, Any] = {
            "exp": options.expiry,
            "nbf": options.not_before,
            "iat": options.issued_at,
        }
        if options.audience is not None:
            payload["aud"] = options.audience
        if options.issuer is not None:
            payload["iss"] = options.issuer

        payload.update(claims.to_payload())
        return payload


def check_secret(secret: SecretKey) -> None:
    """Reject empty or non-text secrets; the value itself is never reported."""
    if not isinstance(secret, (str, bytes)):
        raise ConfigurationError(
            "Secret must be str or bytes",
            details={"secret_type": type(secret).__name__}
        )
    if not secret:
        raise ConfigurationError("Secret must not be empty")
