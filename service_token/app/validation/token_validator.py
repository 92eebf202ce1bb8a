"""
Token validation service for the token service.
"""

import binascii
import json
from typing import Any, Dict, List, Optional
import sys
import os

# Add shared directory to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..', '..'))

import jwt
from jwt.utils import base64url_decode
from pydantic import BaseModel

from shared.logging import get_logger
from shared.errors import (
    ClaimsValidationError,
    InvalidAudienceError,
    InvalidIssuerError,
    MalformedTokenError,
    SignatureMismatchError,
    TokenExpiredError,
    TokenNotYetValidError,
    TokenValidationError,
    UnsupportedAlgorithmError,
)
from ..claims import Claim, ClaimsSet
from ..issuance import SecretKey, check_secret
from ..options import SigningAlgorithm, ValidationOptions

SUPPORTED_ALGORITHMS = [algorithm.value for algorithm in SigningAlgorithm]


class TokenVerificationResponse(BaseModel):
    """Non-raising outcome of a token verification."""
    valid: bool
    claims: Optional[List[Claim]] = None
    error_code: Optional[str] = None
    error: Optional[str] = None


def split_segments(token: Any) -> List[str]:
    """Split a compact token into its three segments."""
    if not isinstance(token, str):
        raise MalformedTokenError(
            "Token must be a string",
            details={"token_type": type(token).__name__}
        )
    segments = token.split(".")
    if len(segments) != 3:
        raise MalformedTokenError(
            "Token must have exactly 3 segments",
            details={"segments": len(segments)}
        )
    return segments


def _decode_segment(segment: str, name: str) -> Dict[str, Any]:
    try:
        decoded = json.loads(base64url_decode(segment.encode("ascii")))
    except (UnicodeError, binascii.Error, ValueError) as e:
        raise MalformedTokenError(
            f"Token {name} is not valid base64url JSON",
            details={"segment": name, "reason": str(e)}
        ) from e

    if not isinstance(decoded, dict):
        raise MalformedTokenError(
            f"Token {name} must be a JSON object",
            details={"segment": name}
        )
    return decoded


class TokenValidator:
    """Token validation service."""

    def __init__(self, default_options: Optional[ValidationOptions] = None):
        self.default_options = default_options or ValidationOptions()
        self.logger = get_logger("token.validator")

    def validate(self, token: str, secret: SecretKey, options: Optional[ValidationOptions] = None) -> ClaimsSet:
        """Verify signature and registered claims, then return the caller claims.

        The claims returned are decoded from the payload that passed
        signature verification; registered fields are not included.
        """
        payload = self.decode_verified(token, secret, options)
        return ClaimsSet.from_payload(payload)

    def decode_verified(self, token: str, secret: SecretKey, options: Optional[ValidationOptions] = None) -> Dict[str, Any]:
        """Verify ``token`` and return its full payload."""
        options = options or self.default_options
        check_secret(secret)
        split_segments(token)

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=SUPPORTED_ALGORITHMS,
                audience=options.audience,
                issuer=options.issuer,
                leeway=options.leeway_seconds,
                options={
                    "verify_signature": True,
                    "verify_exp": options.verify_expiry,
                    "verify_nbf": options.verify_not_before,
                    "verify_iat": options.verify_not_before,
                    "verify_aud": options.audience is not None,
                    "verify_iss": options.issuer is not None,
                    # sub/jti may legitimately repeat and are then written as arrays
                    "verify_sub": False,
                    "verify_jti": False,
                    "require": list(options.required_claims),
                }
            )
        except jwt.PyJWTError as e:
            error = _translate(e)
            self.logger.warning(
                "Token verification failed",
                error_code=error.code,
                error=error.message
            )
            raise error from e

        self.logger.debug("Token verified successfully", claims_count=len(payload))
        return payload

    def verify(self, token: str, secret: SecretKey, options: Optional[ValidationOptions] = None) -> TokenVerificationResponse:
        """Validate without raising; failures carry the error code."""
        try:
            claims = self.validate(token, secret, options)
        except TokenValidationError as e:
            return TokenVerificationResponse(
                valid=False,
                error_code=e.code,
                error=e.message
            )

        return TokenVerificationResponse(valid=True, claims=list(claims))

    def extract_claims_unverified(self, token: str) -> ClaimsSet:
        """Decode caller claims WITHOUT checking the signature or any claim.

        Only for tokens whose authenticity is already guaranteed elsewhere
        (e.g. by the transport). Never use the result for authorization.
        """
        segments = split_segments(token)
        _decode_segment(segments[0], "header")
        return ClaimsSet.from_payload(_decode_segment(segments[1], "payload"))

    def get_unverified_header(self, token: str) -> Dict[str, Any]:
        """Decode the header segment without verification."""
        segments = split_segments(token)
        return _decode_segment(segments[0], "header")

    def decode_to_display(self, token: str) -> str:
        """Render the payload as indented JSON for inspection.

        The signature is not verified.
        """
        segments = split_segments(token)
        payload = _decode_segment(segments[1], "payload")
        return json.dumps(payload, indent=2, ensure_ascii=False)


def _translate(error: jwt.PyJWTError) -> TokenValidationError:
    """Map a PyJWT failure onto the toolkit's typed errors."""
    details = {"reason": str(error)}

    # Subclasses first: InvalidSignatureError derives from DecodeError.
    if isinstance(error, jwt.InvalidSignatureError):
        return SignatureMismatchError(details=details)
    if isinstance(error, jwt.InvalidAlgorithmError):
        return UnsupportedAlgorithmError(details=details)
    if isinstance(error, jwt.ExpiredSignatureError):
        return TokenExpiredError(details=details)
    if isinstance(error, jwt.ImmatureSignatureError):
        return TokenNotYetValidError(details=details)
    if isinstance(error, jwt.InvalidAudienceError):
        return InvalidAudienceError(details=details)
    if isinstance(error, jwt.InvalidIssuerError):
        return InvalidIssuerError(details=details)
    if isinstance(error, jwt.DecodeError):
        return MalformedTokenError(str(error), details=details)
    return ClaimsValidationError(str(error), details=details)
