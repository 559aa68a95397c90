"""ユースケースモジュール."""
from .create_category import CreateCategoryUseCase
from .create_expense import CreateExpenseUseCase
from .create_provision import CreateProvisionUseCase
from .delete_category import DeleteCategoryUseCase
from .delete_expense import DeleteExpenseUseCase
from .delete_provision import DeleteProvisionUseCase
from .get_categories import GetCategoriesUseCase
from .get_category import CategoryNotFoundError, GetCategoryUseCase
from .get_executive_summary import GetExecutiveSummaryUseCase
from .get_expense import ExpenseNotFoundError, GetExpenseUseCase
from .get_expenses import GetExpensesUseCase
from .get_provision import GetProvisionUseCase, ProvisionNotFoundError
from .get_provision_fulfillment_report import GetProvisionFulfillmentReportUseCase
from .get_provisions import GetProvisionsUseCase
from .sync_provision_fulfillment import (
    ProvisionConcurrencyError,
    SyncProvisionFulfillmentUseCase,
)
from .update_category import UpdateCategoryUseCase
from .update_expense import UpdateExpenseUseCase
from .update_provision import UpdateProvisionUseCase

__all__ = [
    # Category Use Cases
    "CreateCategoryUseCase",
    "GetCategoriesUseCase",
    "GetCategoryUseCase",
    "UpdateCategoryUseCase",
    "DeleteCategoryUseCase",
    # Expense Use Cases
    "CreateExpenseUseCase",
    "GetExpensesUseCase",
    "GetExpenseUseCase",
    "UpdateExpenseUseCase",
    "DeleteExpenseUseCase",
    # Provision Use Cases
    "CreateProvisionUseCase",
    "GetProvisionsUseCase",
    "GetProvisionUseCase",
    "UpdateProvisionUseCase",
    "DeleteProvisionUseCase",
    "SyncProvisionFulfillmentUseCase",
    # Report Use Cases
    "GetExecutiveSummaryUseCase",
    "GetProvisionFulfillmentReportUseCase",
    # Errors
    "CategoryNotFoundError",
    "ExpenseNotFoundError",
    "ProvisionNotFoundError",
    "ProvisionConcurrencyError",
]
