"""HTTP transport over a shared ``httpx.AsyncClient``."""

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from .models import AttemptFailure, AttemptOutcome, AttemptSuccess, ErrorPayload

logger = logging.getLogger(__name__)

USER_AGENT = "yookassa-connector/1.0.0"


async def _log_request(request: httpx.Request) -> None:
    logger.info(
        "[YooKassa] --> %s %s idempotence-key=%s",
        request.method,
        request.url,
        request.headers.get("Idempotence-Key"),
    )


async def _log_response(response: httpx.Response) -> None:
    logger.info(
        "[YooKassa] <-- %s %s %s",
        response.status_code,
        response.request.method,
        response.request.url,
    )


def _error_code(exc: httpx.RequestError) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return "TIMEOUT"
    if isinstance(exc, httpx.ConnectError):
        return "CONNECTION_ERROR"
    if isinstance(exc, httpx.ProxyError):
        return "PROXY_ERROR"
    if isinstance(exc, httpx.RemoteProtocolError):
        return "PROTOCOL_ERROR"
    if isinstance(exc, httpx.DecodingError):
        return "DECODING_ERROR"
    return "NETWORK_ERROR"


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpTransport:
    """Performs single HTTP round trips against the API.

    ``send`` reports every outcome as a value: 2xx responses become
    ``AttemptSuccess``; error statuses and transport exceptions become
    ``AttemptFailure``.
    """

    def __init__(
        self,
        base_url: str,
        shop_id: str,
        secret_key: str,
        timeout: float,
        proxy: Optional[str] = None,
        debug: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        event_hooks = {}
        if debug:
            event_hooks = {"request": [_log_request], "response": [_log_response]}
        self._client = httpx.AsyncClient(
            base_url=base_url,
            auth=httpx.BasicAuth(shop_id, secret_key),
            headers={"Content-Type": "application/json", "User-Agent": USER_AGENT},
            timeout=timeout,
            proxy=proxy,
            transport=transport,
            event_hooks=event_hooks,
            trust_env=False,
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Mapping[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> AttemptOutcome:
        try:
            response = await self._client.request(
                method, path, params=params, json=json, headers=headers
            )
        except httpx.RequestError as exc:
            return AttemptFailure(
                error_code=_error_code(exc),
                message=str(exc) or exc.__class__.__name__,
            )

        body = _decode_body(response)
        if response.is_success:
            return AttemptSuccess(
                status_code=response.status_code,
                body=body,
                headers=dict(response.headers),
            )
        return AttemptFailure(
            status_code=response.status_code,
            reason=response.reason_phrase,
            message=response.text[:500],
            payload=ErrorPayload.parse(body),
        )

    async def aclose(self) -> None:
        await self._client.aclose()
