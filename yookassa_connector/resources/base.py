"""Base class and validation helpers for resource wrappers."""

from decimal import Decimal, InvalidOperation
from typing import Any, AsyncIterator, Dict, Mapping, Optional

from ..connector import Connector
from ..endpoints import ENDPOINTS
from ..exceptions import ApiError, ValidationError
from ..models import Ok, RequestDescriptor


# ==================== Validation ====================

def validate_currency_code(currency: Any) -> bool:
    """Check for a three-letter upper-case ISO 4217 code."""
    return (
        isinstance(currency, str)
        and len(currency) == 3
        and currency.isalpha()
        and currency.isupper()
    )


def validate_amount(value: Any) -> bool:
    """Check that ``value`` is a positive decimal given as str, int or Decimal."""
    if isinstance(value, bool) or not isinstance(value, (str, int, Decimal)):
        return False
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError):
        return False
    return amount.is_finite() and amount > 0


def validate_amount_object(amount: Any, field: str = "amount") -> None:
    """Validate an API amount object ``{"value": "10.00", "currency": "RUB"}``.

    Raises:
        ValidationError: If the object is missing or malformed
    """
    if not isinstance(amount, Mapping):
        raise ValidationError(f"{field} must be an object with value and currency")
    if not validate_amount(amount.get("value")):
        raise ValidationError(f"Invalid {field} value: {amount.get('value')!r}")
    if not validate_currency_code(amount.get("currency")):
        raise ValidationError(f"Invalid currency code: {amount.get('currency')!r}")


# ==================== Base Resource ====================

class BaseResource:
    """Builds request descriptors for one API resource and runs them."""

    name: str = ""
    id_param: str = ""

    def __init__(self, connector: Connector) -> None:
        self._connector = connector

    def _descriptor(
        self,
        operation: str,
        *,
        object_id: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
        idempotency_key: Optional[str] = None,
    ) -> RequestDescriptor:
        endpoint = ENDPOINTS[self.name][operation]
        path_params = {self.id_param: str(object_id)} if object_id is not None else {}
        return RequestDescriptor(
            method=endpoint.method,
            path=endpoint.path,
            path_params=path_params,
            params=_drop_none(params) if params else None,
            data=dict(data) if data is not None else None,
            idempotency_key=idempotency_key,
        )

    async def _call(self, descriptor: RequestDescriptor) -> Any:
        """Execute ``descriptor``; unwrap ``Ok`` data or raise the mapped ApiError."""
        result = await self._connector.execute(descriptor)
        if isinstance(result, Ok):
            return result.data
        raise ApiError.from_result(result)

    async def create(
        self, params: Mapping[str, Any], idempotency_key: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self._call(
            self._descriptor("create", data=params, idempotency_key=idempotency_key)
        )

    async def list(self, **filters: Any) -> Dict[str, Any]:
        """Fetch one page of objects; pass ``cursor`` to continue a listing."""
        return await self._call(self._descriptor("list", params=filters))

    async def info(self, object_id: str) -> Dict[str, Any]:
        return await self._call(self._descriptor("info", object_id=object_id))

    async def iterate(self, **filters: Any) -> AsyncIterator[Dict[str, Any]]:
        """Yield every object across pages by following ``next_cursor``."""
        params = dict(filters)
        while True:
            page = await self.list(**params)
            if not isinstance(page, Mapping):
                return
            for item in page.get("items", []):
                yield item
            cursor = page.get("next_cursor")
            if not cursor:
                return
            params["cursor"] = cursor


def _drop_none(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in params.items() if value is not None}
