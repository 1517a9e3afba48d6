"""Async client for the YooKassa payments API."""

from .client import YooKassa
from .config import ConnectorSettings, get_settings
from .connector import Connector
from .exceptions import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    ForbiddenError,
    InvalidRequestError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestCancelledError,
    ServerError,
    ValidationError,
    YooKassaError,
)
from .models import Err, ErrorPayload, NormalizedResult, Ok, RequestDescriptor
from .rate_limiter import RateLimiter
from .registry import ClientRegistry, default_registry, get_client
from .retry import RetryPolicy

__version__ = "1.0.0"

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ClientRegistry",
    "ConfigurationError",
    "Connector",
    "ConnectorSettings",
    "Err",
    "ErrorPayload",
    "ForbiddenError",
    "InvalidRequestError",
    "NetworkError",
    "NormalizedResult",
    "NotFoundError",
    "Ok",
    "RateLimitError",
    "RateLimiter",
    "RequestCancelledError",
    "RequestDescriptor",
    "RetryPolicy",
    "ServerError",
    "ValidationError",
    "YooKassa",
    "YooKassaError",
    "default_registry",
    "get_client",
    "get_settings",
]
