"""
Token service facade.

Wires configuration and logging around the issuer and validator. The service
keeps no secret and no claims between calls, so one instance can be shared
across threads.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import sys
import os

# Add shared directory to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from shared.config import TokenConfig, get_config
from shared.logging import configure_logging, get_logger
from .claims import ClaimsSet
from .issuance import SecretKey, TokenIssuer
from .options import SigningAlgorithm, TokenOptions, ValidationOptions
from .validation import TokenValidator, TokenVerificationResponse


class TokenService:
    """Issue, validate and inspect HMAC-signed JWTs."""

    def __init__(self, config: Optional[TokenConfig] = None):
        self.config = config or get_config()
        configure_logging(self.config.service_name, self.config.log_level)
        self.logger = get_logger(f"{self.config.service_name}.service")
        self.default_algorithm = SigningAlgorithm.parse(self.config.default_algorithm)

        self.issuer = TokenIssuer()
        self.validator = TokenValidator(self.default_validation_options())

    def default_options(self, **overrides: Any) -> TokenOptions:
        """Issuance options built from the configured lifetime and algorithm."""
        now = datetime.now(timezone.utc)
        values: Dict[str, Any] = {
            "not_before": now,
            "issued_at": now,
            "expiry": now + timedelta(minutes=self.config.default_expiry_minutes),
            "algorithm": self.default_algorithm,
        }
        values.update(overrides)
        return TokenOptions(**values)

    def default_validation_options(self) -> ValidationOptions:
        """Strict unless the configuration opts out."""
        if self.config.strict_validation:
            return ValidationOptions(leeway_seconds=self.config.leeway_seconds)
        self.logger.warning("Strict token validation disabled by configuration")
        return ValidationOptions.lenient(leeway_seconds=self.config.leeway_seconds)

    def issue(self, claims: ClaimsSet, secret: SecretKey, options: Optional[TokenOptions] = None) -> str:
        """Issue a signed token for ``claims``."""
        return self.issuer.issue(claims, secret, options or self.default_options())

    def validate(self, token: str, secret: SecretKey, options: Optional[ValidationOptions] = None) -> ClaimsSet:
        """Verify ``token`` and return its caller claims; raises a TokenValidationError subclass."""
        return self.validator.validate(token, secret, options)

    def verify(self, token: str, secret: SecretKey, options: Optional[ValidationOptions] = None) -> TokenVerificationResponse:
        return self.validator.verify(token, secret, options)

    def decode_to_display(self, token: str) -> str:
        return self.validator.decode_to_display(token)

    def extract_claims_unverified(self, token: str) -> ClaimsSet:
        """Claims of ``token`` with NO signature check. Not an authorization check."""
        return self.validator.extract_claims_unverified(token)

    def get_unverified_header(self, token: str) -> Dict[str, Any]:
        return self.validator.get_unverified_header(token)
