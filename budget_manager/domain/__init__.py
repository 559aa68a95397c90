"""ドメイン層モジュール."""
from .entities import Category, Expense, Provision
from .enums import PaymentMethod, ProvisionStatus
from .errors import ValidationError
from .identifiers import CategoryId, ExpenseId, ProvisionId
from .ports import CategoryRepository, ExpenseRepository, ProvisionRepository
from .services import (
    BudgetAvailabilityService,
    ProvisionFulfillmentService,
    ValidationService,
)
from .value_objects import (
    ExecutiveSummary,
    Money,
    Period,
    ProvisionFulfillmentReport,
)

__all__ = [
    # Identifiers
    "CategoryId",
    "ExpenseId",
    "ProvisionId",
    # Enums
    "PaymentMethod",
    "ProvisionStatus",
    # Errors
    "ValidationError",
    # Value Objects
    "ExecutiveSummary",
    "Money",
    "Period",
    "ProvisionFulfillmentReport",
    # Entities
    "Category",
    "Expense",
    "Provision",
    # Ports
    "CategoryRepository",
    "ExpenseRepository",
    "ProvisionRepository",
    # Services
    "BudgetAvailabilityService",
    "ProvisionFulfillmentService",
    "ValidationService",
]
