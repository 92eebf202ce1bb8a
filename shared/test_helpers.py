"""
Test helper functions and factory methods for the token toolkit.
"""

import json
from typing import Dict, Any, List
from datetime import datetime, timedelta, timezone
from dataclasses import dataclass, field
import jwt
from jwt.utils import base64url_decode, base64url_encode


TEST_SECRET = "test-secret-0123456789abcdef0123456789abcdef0123456789abcdef0123"
OTHER_SECRET = "other-secret-fedcba9876543210fedcba9876543210fedcba9876543210fe"


@dataclass
class TestUser:
    """Test user data."""
    user_id: str
    username: str
    email: str
    roles: List[str] = field(default_factory=list)

    def as_claims(self) -> List[tuple]:
        """(type, value) pairs in the order a caller would add them."""
        pairs = [
            ("sub", self.user_id),
            ("name", self.username),
            ("email", self.email),
        ]
        pairs.extend(("role", role) for role in self.roles)
        return pairs


class TestDataFactory:
    """Factory for creating test data."""

    @staticmethod
    def create_test_users() -> List[TestUser]:
        """Create test users."""
        return [
            TestUser(
                user_id="user1",
                username="john.doe",
                email="john.doe@example.com",
                roles=["user", "analyst"]
            ),
            TestUser(
                user_id="admin",
                username="admin",
                email="admin@example.com",
                roles=["admin"]
            )
        ]

    @staticmethod
    def create_time_window(lifetime_minutes: int = 60, offset_minutes: int = 0) -> Dict[str, datetime]:
        """Whole-second timestamps for TokenOptions, shifted by ``offset_minutes``."""
        now = datetime.now(timezone.utc).replace(microsecond=0) + timedelta(minutes=offset_minutes)
        return {
            "not_before": now,
            "issued_at": now,
            "expiry": now + timedelta(minutes=lifetime_minutes),
        }


def split_token(token: str) -> List[str]:
    """Split a compact token, asserting it has three segments."""
    segments = token.split(".")
    assert len(segments) == 3, f"expected 3 segments, got {len(segments)}"
    return segments


def decode_segment(segment: str) -> Dict[str, Any]:
    """Decode a header or payload segment."""
    return json.loads(base64url_decode(segment))


def tamper_signature(token: str, bit: int = 0) -> str:
    """Flip one bit of the decoded signature and re-encode it."""
    header, payload, signature = split_token(token)
    raw = bytearray(base64url_decode(signature))
    raw[bit // 8] ^= 1 << (bit % 8)
    return ".".join([header, payload, base64url_encode(bytes(raw)).decode("ascii")])


def replace_payload(token: str, payload: Dict[str, Any]) -> str:
    """Swap in a new payload while keeping the original signature."""
    header, _, signature = split_token(token)
    encoded = base64url_encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
    return ".".join([header, encoded.decode("ascii"), signature])


def replace_header(token: str, header: Dict[str, Any]) -> str:
    """Swap in a new header while keeping payload and signature."""
    _, payload, signature = split_token(token)
    encoded = base64url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    return ".".join([encoded.decode("ascii"), payload, signature])


def create_foreign_token(payload: Dict[str, Any], secret: str = TEST_SECRET, algorithm: str = "HS256") -> str:
    """Sign ``payload`` directly with PyJWT, bypassing the issuer."""
    return jwt.encode(payload, secret, algorithm=algorithm)


def create_unsigned_token(payload: Dict[str, Any]) -> str:
    """Build an ``alg: none`` token."""
    header = base64url_encode(json.dumps({"alg": "none", "typ": "JWT"}).encode("utf-8"))
    body = base64url_encode(json.dumps(payload).encode("utf-8"))
    return f"{header.decode('ascii')}.{body.decode('ascii')}."


# Global instances for easy access
test_data_factory = TestDataFactory()
