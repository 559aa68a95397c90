"""識別子モジュール."""
from .category_id import CategoryId
from .expense_id import ExpenseId
from .provision_id import ProvisionId

__all__ = [
    "CategoryId",
    "ExpenseId",
    "ProvisionId",
]
