"""ポートモジュール."""
from .category_repository import CategoryRepository
from .expense_repository import ExpenseRepository
from .provision_repository import ProvisionRepository

__all__ = [
    "CategoryRepository",
    "ExpenseRepository",
    "ProvisionRepository",
]
