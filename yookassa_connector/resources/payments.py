"""Payments resource."""

from typing import Any, Dict, Mapping, Optional

from .base import BaseResource, validate_amount_object


class PaymentsResource(BaseResource):
    """Payments, including two-stage capture and cancellation."""

    name = "payments"
    id_param = "payment_id"

    async def create(
        self, params: Mapping[str, Any], idempotency_key: Optional[str] = None
    ) -> Dict[str, Any]:
        """Create a payment.

        Args:
            params: Payment object, at least ``amount``
            idempotency_key: Key to reuse when repeating the same creation

        Returns:
            The created payment

        Raises:
            ValidationError: If ``amount`` is malformed
            ApiError: If the API rejects the payment
        """
        validate_amount_object(params.get("amount"))
        payload = dict(params)
        redirect_url = self._connector.redirect_url
        if redirect_url and "confirmation" not in payload:
            payload["confirmation"] = {"type": "redirect", "return_url": redirect_url}
        return await super().create(payload, idempotency_key=idempotency_key)

    async def capture(
        self,
        payment_id: str,
        params: Optional[Mapping[str, Any]] = None,
        idempotency_key: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Capture a ``waiting_for_capture`` payment, fully or for ``params['amount']``."""
        params = dict(params or {})
        if "amount" in params:
            validate_amount_object(params["amount"])
        return await self._call(
            self._descriptor(
                "capture",
                object_id=payment_id,
                data=params,
                idempotency_key=idempotency_key,
            )
        )

    async def cancel(
        self, payment_id: str, idempotency_key: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self._call(
            self._descriptor(
                "cancel", object_id=payment_id, data={}, idempotency_key=idempotency_key
            )
        )


__all__ = ["PaymentsResource"]
