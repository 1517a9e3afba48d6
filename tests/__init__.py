"""
yookassa-connector Test Suite

This package contains all tests for the client including:
- Request pipeline tests (idempotency, retries, cancellation)
- Retry policy and rate limiter unit tests
- Transport tests against httpx.MockTransport
- Resource wrapper, configuration and registry tests
"""
