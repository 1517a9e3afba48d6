"""YooKassa API client."""

import logging
from typing import Any, Optional

import pydantic

from .config import ConnectorSettings
from .connector import Connector
from .exceptions import ConfigurationError
from .resources import PaymentsResource, ReceiptsResource, RefundsResource

logger = logging.getLogger(__name__)


class YooKassa:
    """Typed access to payments, refunds and receipts for one shop.

    Usage::

        async with YooKassa(shop_id="123", secret_key="test_...") as client:
            payment = await client.payments.create({...})
    """

    def __init__(
        self,
        shop_id: Optional[str] = None,
        secret_key: Optional[str] = None,
        *,
        settings: Optional[ConnectorSettings] = None,
        connector: Optional[Connector] = None,
        **options: Any,
    ) -> None:
        if connector is None:
            settings = settings or build_settings(shop_id, secret_key, **options)
            connector = Connector(settings)
        self.connector = connector
        self.shop_id = connector.settings.shop_id
        self.payments = PaymentsResource(connector)
        self.refunds = RefundsResource(connector)
        self.receipts = ReceiptsResource(connector)
        logger.info(
            "YooKassa client initialized for shop %s (endpoint=%s)",
            self.shop_id,
            connector.endpoint,
        )

    async def aclose(self) -> None:
        await self.connector.aclose()

    async def __aenter__(self) -> "YooKassa":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def build_settings(
    shop_id: Optional[str], secret_key: Optional[str], **options: Any
) -> ConnectorSettings:
    """Resolve client options into settings, failing fast on bad values.

    Raises:
        ConfigurationError: If credentials are missing or an option is invalid
    """
    values = {key: value for key, value in options.items() if value is not None}
    if shop_id is not None:
        values["shop_id"] = shop_id
    if secret_key is not None:
        values["secret_key"] = secret_key
    try:
        return ConnectorSettings(**values)
    except pydantic.ValidationError as exc:
        raise ConfigurationError(f"Invalid client configuration: {exc}") from exc
