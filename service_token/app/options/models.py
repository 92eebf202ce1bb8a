"""
Signing and validation options for the token service.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple
import sys
import os

# Add shared directory to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shared.errors import ConfigurationError

DEFAULT_LIFETIME_MINUTES = 60


class SigningAlgorithm(str, Enum):
    """Supported HMAC signing algorithms (JOSE names)."""
    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"

    @classmethod
    def parse(cls, value: Any) -> "SigningAlgorithm":
        """Resolve a JOSE name or an HMAC-SHA* alias, rejecting anything else."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(
                "Signing algorithm must be a non-empty string",
                details={"algorithm": repr(value)}
            )

        # XML-DSig style identifiers, e.g. ...xmldsig-more#hmac-sha256
        name = value.strip().rsplit("#", 1)[-1]
        key = name.upper().replace("-", "").replace("_", "")
        algorithm = _ALIASES.get(key)
        if algorithm is None:
            raise ConfigurationError(
                f"Unsupported signing algorithm: {value}",
                details={
                    "algorithm": value,
                    "supported": [member.value for member in cls]
                }
            )
        return algorithm

    @property
    def digest_size(self) -> int:
        """HMAC output size in bytes."""
        return int(self.value[2:]) // 8


_ALIASES: Dict[str, SigningAlgorithm] = {}
for _member in SigningAlgorithm:
    _bits = _member.value[2:]
    _ALIASES[_member.value] = _member
    _ALIASES[f"HMACSHA{_bits}"] = _member
    _ALIASES[f"HMACSHA{_bits}SIGNATURE"] = _member


def _utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TokenOptions(BaseModel):
    """Immutable signing parameters for a single issuance.

    Timestamps default to one clock reading taken at construction time:
    ``not_before`` and ``issued_at`` are now, ``expiry`` is now + 60 minutes.
    Naive datetimes are taken to be UTC.
    """

    model_config = ConfigDict(frozen=True)

    expiry: datetime
    not_before: datetime
    issued_at: datetime
    audience: Optional[str] = None
    issuer: Optional[str] = None
    algorithm: SigningAlgorithm = SigningAlgorithm.HS256

    @model_validator(mode="before")
    @classmethod
    def _default_timestamps(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        now = datetime.now(timezone.utc)
        data.setdefault("not_before", now)
        data.setdefault("issued_at", now)
        data.setdefault("expiry", now + timedelta(minutes=DEFAULT_LIFETIME_MINUTES))
        return data

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: Any) -> SigningAlgorithm:
        return SigningAlgorithm.parse(value)

    @field_validator("expiry", "not_before", "issued_at")
    @classmethod
    def _normalize_timezone(cls, value: datetime) -> datetime:
        return _utc(value)

    @model_validator(mode="after")
    def _check_window(self) -> "TokenOptions":
        if self.expiry < self.not_before:
            raise ConfigurationError(
                "Token expiry precedes its not-before time",
                details={
                    "expiry": self.expiry.isoformat(),
                    "not_before": self.not_before.isoformat()
                }
            )
        return self

    @classmethod
    def expiring_in(cls, minutes: int, **overrides: Any) -> "TokenOptions":
        """Options valid from now for ``minutes`` minutes."""
        now = datetime.now(timezone.utc)
        values: Dict[str, Any] = {
            "not_before": now,
            "issued_at": now,
            "expiry": now + timedelta(minutes=minutes),
        }
        values.update(overrides)
        return cls(**values)


class ValidationOptions(BaseModel):
    """Checks applied after a token's signature has been verified.

    Strict by default. Audience and issuer are only compared when an
    expected value is configured.
    """

    model_config = ConfigDict(frozen=True)

    verify_expiry: bool = True
    verify_not_before: bool = True
    audience: Optional[str] = None
    issuer: Optional[str] = None
    leeway_seconds: int = Field(default=0, ge=0)
    required_claims: Tuple[str, ...] = ()

    @classmethod
    def lenient(cls, **overrides: Any) -> "ValidationOptions":
        """Signature-only validation; temporal claims are not checked."""
        values: Dict[str, Any] = {"verify_expiry": False, "verify_not_before": False}
        values.update(overrides)
        return cls(**values)
