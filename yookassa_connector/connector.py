"""Request pipeline shared by every API call.

Each logical call gets one idempotency key, then runs an attempt loop through
the rate limiter and the HTTP transport. Failures are classified by the retry
policy and every outcome is returned as ``Ok`` or ``Err``; API-level failures
are never raised.
"""

import asyncio
import contextlib
import logging
import uuid
from typing import Any, Awaitable, Callable, Optional

from .config import ConnectorSettings
from .models import (
    AttemptFailure,
    AttemptSuccess,
    Err,
    ErrorPayload,
    NormalizedResult,
    Ok,
    RequestDescriptor,
)
from .rate_limiter import RateLimiter
from .retry import RetryPolicy
from .transport import HttpTransport

logger = logging.getLogger(__name__)

IDEMPOTENCE_HEADER = "Idempotence-Key"


class _Cancelled(Exception):
    pass


class Connector:
    """Executes request descriptors against the YooKassa API."""

    def __init__(
        self,
        settings: ConnectorSettings,
        *,
        transport: Optional[HttpTransport] = None,
        rate_limiter: Optional[RateLimiter] = None,
        retry_policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.settings = settings
        self.endpoint = settings.endpoint
        self.debug = settings.debug
        self.retries = settings.retries
        self.redirect_url = settings.redirect_url
        self._transport = transport or HttpTransport(
            base_url=settings.endpoint,
            shop_id=settings.shop_id,
            secret_key=settings.secret_key,
            timeout=settings.timeout_seconds,
            proxy=settings.proxy,
            debug=settings.debug,
        )
        self._rate_limiter = rate_limiter or RateLimiter(settings.max_rps)
        self._retry_policy = retry_policy or RetryPolicy(
            base_delay=settings.retry_delay_seconds,
            max_delay=settings.max_retry_delay_seconds,
        )
        self._sleep = sleep

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    @property
    def rate_limiter(self) -> RateLimiter:
        return self._rate_limiter

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    async def execute(
        self,
        descriptor: RequestDescriptor,
        *,
        cancel: Optional[asyncio.Event] = None,
    ) -> NormalizedResult:
        """Run one logical call and return its normalized result.

        ``cancel``, when set, abandons the current wait and returns an
        ``Err`` with code ``CANCELLED`` without further attempts.
        """
        key = descriptor.idempotency_key or str(uuid.uuid4())
        path = descriptor.render_path()
        last_failure: Optional[AttemptFailure] = None

        try:
            for attempt in range(self.retries + 1):
                await self._until_cancelled(self._rate_limiter.admit(), cancel)
                outcome = await self._until_cancelled(
                    self._transport.send(
                        descriptor.method,
                        path,
                        params=descriptor.params,
                        json=descriptor.data,
                        headers={IDEMPOTENCE_HEADER: key},
                    ),
                    cancel,
                )

                if isinstance(outcome, AttemptSuccess):
                    if self.debug:
                        logger.info(
                            "[YooKassa] %s %s succeeded on attempt %d (key=%s)",
                            descriptor.method, path, attempt + 1, key,
                        )
                    return Ok(data=outcome.body, request_id=key)

                retryable = self._retry_policy.is_retryable(outcome)
                if outcome.payload is not None and not retryable:
                    return Err(error=outcome.payload, request_id=key)

                last_failure = outcome
                if self.debug:
                    logger.info(
                        "[YooKassa] %s %s attempt %d failed: status=%s code=%s",
                        descriptor.method, path, attempt + 1,
                        outcome.status_code, outcome.error_code,
                    )

                if attempt < self.retries and retryable:
                    wait = self._retry_policy.backoff_delay(attempt)
                    if self.debug:
                        logger.info(
                            "[YooKassa] Retry attempt %d/%d, waiting %.3fs...",
                            attempt + 1, self.retries, wait,
                        )
                    await self._until_cancelled(self._sleep(wait), cancel)
                    continue
                break
        except _Cancelled:
            if self.debug:
                logger.info(
                    "[YooKassa] %s %s cancelled (key=%s)", descriptor.method, path, key
                )
            return Err(
                error=ErrorPayload(
                    id=key, code="CANCELLED", description="Request was cancelled"
                ),
                request_id=key,
            )

        return Err(error=self._final_error(last_failure, key), request_id=key)

    @staticmethod
    def _final_error(failure: Optional[AttemptFailure], key: str) -> ErrorPayload:
        if failure is None:
            return ErrorPayload(
                id=key, code="RETRY_EXHAUSTED", description="All retry attempts failed"
            )
        if failure.payload is not None:
            return failure.payload
        if failure.status_code is not None:
            reason = failure.reason or failure.message
            return ErrorPayload(
                id=key,
                code=f"HTTP_{failure.status_code}",
                description=f"HTTP {failure.status_code}: {reason}",
            )
        if failure.error_code:
            return ErrorPayload(
                id=key,
                code=failure.error_code,
                description=failure.message or "Network error occurred",
            )
        return ErrorPayload(
            id=key, code="RETRY_EXHAUSTED", description="All retry attempts failed"
        )

    @staticmethod
    async def _until_cancelled(
        awaitable: Awaitable[Any], cancel: Optional[asyncio.Event]
    ) -> Any:
        if cancel is None:
            return await awaitable
        if cancel.is_set():
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise _Cancelled()

        task = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            waiter.cancel()
        if task.done():
            return task.result()
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        raise _Cancelled()

    async def aclose(self) -> None:
        await self._transport.aclose()
