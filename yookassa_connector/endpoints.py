from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str
    description: str = ""


ENDPOINTS: Dict[str, Dict[str, Endpoint]] = {
    "payments": {
        "create": Endpoint("POST", "/payments", "Create a payment"),
        "list": Endpoint("GET", "/payments", "List payments"),
        "info": Endpoint("GET", "/payments/{payment_id}", "Get payment details"),
        "capture": Endpoint("POST", "/payments/{payment_id}/capture", "Capture a payment"),
        "cancel": Endpoint("POST", "/payments/{payment_id}/cancel", "Cancel a payment"),
    },
    "refunds": {
        "create": Endpoint("POST", "/refunds", "Create a refund"),
        "list": Endpoint("GET", "/refunds", "List refunds"),
        "info": Endpoint("GET", "/refunds/{refund_id}", "Get refund details"),
    },
    "receipts": {
        "create": Endpoint("POST", "/receipts", "Create a receipt"),
        "list": Endpoint("GET", "/receipts", "List receipts"),
        "info": Endpoint("GET", "/receipts/{receipt_id}", "Get receipt details"),
    },
}
