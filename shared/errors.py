"""
Shared error handling for the token toolkit.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class TokenServiceException(Exception):
    """Base exception for the token toolkit."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class ConfigurationError(TokenServiceException):
    """Bad secret, algorithm or options supplied at issuance."""

    def __init__(self, message: str = "Invalid token configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class TokenValidationError(TokenServiceException):
    """Base class for every reason a token can be rejected."""

    def __init__(self, code: str = "TOKEN_INVALID", message: str = "Token validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(code, message, details)


class MalformedTokenError(TokenValidationError):
    """Wrong segment count or an undecodable segment."""

    def __init__(self, message: str = "Malformed token", details: Optional[Dict[str, Any]] = None):
        super().__init__("MALFORMED_TOKEN", message, details)


class SignatureMismatchError(TokenValidationError):
    """Signature does not match header and payload."""

    def __init__(self, message: str = "Signature verification failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("SIGNATURE_MISMATCH", message, details)


class UnsupportedAlgorithmError(TokenValidationError):
    """Header declares an algorithm the verifier does not implement."""

    def __init__(self, message: str = "Unsupported signing algorithm", details: Optional[Dict[str, Any]] = None):
        super().__init__("UNSUPPORTED_ALGORITHM", message, details)


class TokenExpiredError(TokenValidationError):
    """Token is past its expiry."""

    def __init__(self, message: str = "Token has expired", details: Optional[Dict[str, Any]] = None):
        super().__init__("TOKEN_EXPIRED", message, details)


class TokenNotYetValidError(TokenValidationError):
    """Token is used before its not-before or issued-at time."""

    def __init__(self, message: str = "Token is not yet valid", details: Optional[Dict[str, Any]] = None):
        super().__init__("TOKEN_NOT_YET_VALID", message, details)


class InvalidAudienceError(TokenValidationError):
    """Token audience does not match the expected audience."""

    def __init__(self, message: str = "Invalid audience", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_AUDIENCE", message, details)


class InvalidIssuerError(TokenValidationError):
    """Token issuer does not match the expected issuer."""

    def __init__(self, message: str = "Invalid issuer", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_ISSUER", message, details)


class ClaimsValidationError(TokenValidationError):
    """Missing required claims or malformed registered claims."""

    def __init__(self, message: str = "Invalid claims", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_CLAIMS", message, details)
