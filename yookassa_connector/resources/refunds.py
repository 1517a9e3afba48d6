"""Refunds resource."""

from typing import Any, Dict, Mapping, Optional

from ..exceptions import ValidationError
from .base import BaseResource, validate_amount_object


class RefundsResource(BaseResource):
    name = "refunds"
    id_param = "refund_id"

    async def create(
        self, params: Mapping[str, Any], idempotency_key: Optional[str] = None
    ) -> Dict[str, Any]:
        if not params.get("payment_id"):
            raise ValidationError("payment_id is required to create a refund")
        validate_amount_object(params.get("amount"))
        return await super().create(params, idempotency_key=idempotency_key)


__all__ = ["RefundsResource"]
