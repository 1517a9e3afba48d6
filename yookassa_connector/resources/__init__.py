"""Resource wrappers for the YooKassa API."""

from .base import BaseResource, validate_amount, validate_amount_object, validate_currency_code
from .payments import PaymentsResource
from .receipts import ReceiptsResource
from .refunds import RefundsResource

__all__ = [
    "BaseResource",
    "PaymentsResource",
    "ReceiptsResource",
    "RefundsResource",
    "validate_amount",
    "validate_amount_object",
    "validate_currency_code",
]
