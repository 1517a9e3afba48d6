"""Receipts resource."""

from typing import Any, Dict, Mapping, Optional

from ..exceptions import ValidationError
from .base import BaseResource


class ReceiptType:
    PAYMENT = "payment"
    REFUND = "refund"


class ReceiptsResource(BaseResource):
    name = "receipts"
    id_param = "receipt_id"

    async def create(
        self, params: Mapping[str, Any], idempotency_key: Optional[str] = None
    ) -> Dict[str, Any]:
        if params.get("type") not in (ReceiptType.PAYMENT, ReceiptType.REFUND):
            raise ValidationError(f"Invalid receipt type: {params.get('type')!r}")
        if not params.get("items"):
            raise ValidationError("A receipt needs at least one item")
        return await super().create(params, idempotency_key=idempotency_key)


__all__ = ["ReceiptsResource"]
