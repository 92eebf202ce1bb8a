"""
Claim data models for the token service.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional

# Registered claims written from TokenOptions; never treated as caller claims.
RESERVED_CLAIMS = ("exp", "nbf", "iat", "aud", "iss")


@dataclass(frozen=True)
class Claim:
    """A named attribute asserted about the token subject."""
    type: str
    value: str


class ClaimsSet:
    """Ordered, caller-owned collection of claims.

    Several claims may share a type (e.g. multiple roles); insertion order is
    kept so payloads are rendered deterministically.

    A token payload holds one entry per type, so a set decoded from a token
    lists types in first-occurrence order: ``[role:a, name:x, role:b]``
    comes back as ``[role:a, role:b, name:x]``. Order within a type is kept.
    """

    def __init__(self, claims: Optional[Iterable[Claim]] = None):
        self._claims: List[Claim] = list(claims or [])

    def add_claim(self, type: str, value: str) -> None:
        """Append a single claim."""
        self._claims.append(Claim(type, value))

    def add_claims(self, claims: Iterable[Claim]) -> None:
        """Append claims in the order given."""
        self._claims.extend(claims)

    def get_claim_value(self, type: str) -> Optional[str]:
        """Value of the first claim of ``type``, or None."""
        for claim in self._claims:
            if claim.type == type:
                return claim.value
        return None

    def find_all(self, type: str) -> List[str]:
        """Every value recorded for ``type``, in insertion order."""
        return [claim.value for claim in self._claims if claim.type == type]

    @property
    def types(self) -> List[str]:
        """Distinct claim types, ordered by first occurrence."""
        return list(dict.fromkeys(claim.type for claim in self._claims))

    def to_payload(self) -> Dict[str, Any]:
        """Render as flat payload entries.

        A type seen once maps to a string, a repeated type to a list.
        """
        payload: Dict[str, Any] = {}
        for type in self.types:
            values = self.find_all(type)
            payload[type] = values[0] if len(values) == 1 else values
        return payload

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ClaimsSet":
        """Build caller-level claims from a decoded payload, skipping registered fields."""
        claims = cls()
        for type, value in payload.items():
            if type in RESERVED_CLAIMS:
                continue
            if isinstance(value, list):
                for item in value:
                    claims.add_claim(type, _as_text(item))
            else:
                claims.add_claim(type, _as_text(value))
        return claims

    def __iter__(self) -> Iterator[Claim]:
        return iter(self._claims)

    def __len__(self) -> int:
        return len(self._claims)

    def __contains__(self, claim: object) -> bool:
        return claim in self._claims

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClaimsSet):
            return NotImplemented
        return self._claims == other._claims

    def __repr__(self) -> str:
        return f"ClaimsSet({self._claims!r})"


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def add_claim(claims: ClaimsSet, type: str, value: str) -> None:
    """Add a single claim to ``claims``."""
    claims.add_claim(type, value)


def add_claims(claims: ClaimsSet, items: Iterable[Claim]) -> None:
    """Add several claims to ``claims``."""
    claims.add_claims(items)


def get_claim_value(claims: ClaimsSet, type: str) -> Optional[str]:
    """Value of the first claim of ``type`` in ``claims``, or None."""
    return claims.get_claim_value(type)
