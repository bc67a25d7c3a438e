"""
Shared utilities for the Items Access Layer.

This package aggregates common building blocks consumed by services:

- config: Configuration via pydantic-settings
- logging: Structured logging with request correlation
- errors: Canonical error types and responses

Do not import from service_* packages into shared/.
"""
