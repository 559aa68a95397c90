"""ドメインサービスモジュール."""
from .budget_availability_service import BudgetAvailabilityService
from .provision_fulfillment_service import ProvisionFulfillmentService
from .validation_service import ValidationService

__all__ = [
    "BudgetAvailabilityService",
    "ProvisionFulfillmentService",
    "ValidationService",
]
