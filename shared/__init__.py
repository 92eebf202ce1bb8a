"""
Shared utilities for the token toolkit.

This package aggregates common building blocks consumed by the token
service:

- config: Defaults via pydantic-settings (TOKEN_* environment variables)
- logging: Structured logging with secret redaction
- errors: Canonical error types and responses
- test_helpers: Factories and token tampering helpers for tests

Do not import from service_* packages into shared/.
"""
