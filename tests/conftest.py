"""
Pytest configuration and fixtures for yookassa-connector tests.
"""

import os
import sys
from typing import Callable, List

import httpx
import pytest

# Add project root to Python path for imports without installation
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(ROOT_DIR)

from yookassa_connector.config import ConnectorSettings  # noqa: E402
from yookassa_connector.connector import Connector  # noqa: E402
from yookassa_connector.transport import HttpTransport  # noqa: E402

SHOP_ID = "test_shop"
SECRET_KEY = "test_secret"


class SleepRecorder:
    """Stand-in for ``asyncio.sleep`` that records delays and returns at once."""

    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class FakeClock:
    """Manual monotonic clock whose ``sleep`` advances time."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, delay: float) -> None:
        self.sleeps.append(delay)
        self.now += delay


def error_body(code: str, description: str = "", error_id: str = "err-1") -> dict:
    return {"type": "error", "id": error_id, "code": code, "description": description}


@pytest.fixture
def settings() -> ConnectorSettings:
    """Settings with a high rate ceiling so tests are never throttled."""
    return ConnectorSettings(
        shop_id=SHOP_ID, secret_key=SECRET_KEY, max_rps=1000, retries=5
    )


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def make_connector(settings, sleep_recorder) -> Callable[..., Connector]:
    """Factory building a Connector whose HTTP calls go to ``handler``."""
    def factory(handler, **overrides) -> Connector:
        conn_settings = settings.model_copy(update=overrides) if overrides else settings
        transport = HttpTransport(
            base_url=conn_settings.endpoint,
            shop_id=conn_settings.shop_id,
            secret_key=conn_settings.secret_key,
            timeout=conn_settings.timeout_seconds,
            debug=conn_settings.debug,
            transport=httpx.MockTransport(handler),
        )
        connector = Connector(conn_settings, transport=transport, sleep=sleep_recorder)
        return connector

    return factory
