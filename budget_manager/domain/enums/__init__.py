"""列挙型モジュール."""
from .payment_method import PaymentMethod
from .provision_status import ProvisionStatus

__all__ = [
    "PaymentMethod",
    "ProvisionStatus",
]
