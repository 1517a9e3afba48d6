"""Exceptions raised to callers of the YooKassa client."""

from typing import Any, Dict, Optional, Type


class YooKassaError(Exception):
    """Base exception for all client errors."""
    pass


class ConfigurationError(YooKassaError):
    """Raised when the client is constructed with invalid options."""
    pass


class ValidationError(YooKassaError):
    """Raised when request parameters fail client-side validation."""
    pass


class ApiError(YooKassaError):
    """Raised when an API call ends with an error result.

    Carries the fields of the API error envelope plus the idempotency key
    that was used for the call.
    """

    def __init__(
        self,
        code: str,
        description: str,
        error_id: Optional[str] = None,
        request_id: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(f"{code}: {description}" if description else code)
        self.code = code
        self.description = description
        self.error_id = error_id
        self.request_id = request_id
        self.payload = payload or {}

    @classmethod
    def from_result(cls, result) -> "ApiError":
        """Build the matching exception for an ``Err`` pipeline result."""
        error = result.error
        exc_class = _error_class_for(error.code)
        return exc_class(
            code=error.code,
            description=error.description,
            error_id=error.id,
            request_id=result.request_id,
            payload=error.model_dump(exclude_none=True),
        )


class InvalidRequestError(ApiError):
    """Raised when the API rejects request parameters."""
    pass


class AuthenticationError(ApiError):
    """Raised when the shop credentials are rejected."""
    pass


class ForbiddenError(ApiError):
    """Raised when the shop is not allowed to perform the operation."""
    pass


class NotFoundError(ApiError):
    """Raised when the requested object does not exist."""
    pass


class RateLimitError(ApiError):
    """Raised when API rate limits are exceeded."""
    pass


class ServerError(ApiError):
    """Raised when the API reports an internal failure."""
    pass


class NetworkError(ApiError):
    """Raised when no usable API response was received."""
    pass


class RequestCancelledError(ApiError):
    """Raised when a call was cancelled before it completed."""
    pass


_CODE_TO_ERROR: Dict[str, Type[ApiError]] = {
    "invalid_request": InvalidRequestError,
    "not_supported": InvalidRequestError,
    "method_not_allowed": InvalidRequestError,
    "invalid_credentials": AuthenticationError,
    "forbidden": ForbiddenError,
    "not_found": NotFoundError,
    "too_many_requests": RateLimitError,
    "internal_server_error": ServerError,
    "CANCELLED": RequestCancelledError,
    "RETRY_EXHAUSTED": NetworkError,
}


def _error_class_for(code: str) -> Type[ApiError]:
    if code in _CODE_TO_ERROR:
        return _CODE_TO_ERROR[code]
    # Synthesized codes are upper-case (HTTP_502, TIMEOUT, CONNECTION_ERROR)
    if code.isupper():
        return NetworkError
    return ApiError
