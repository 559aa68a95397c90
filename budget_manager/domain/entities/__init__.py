"""エンティティモジュール."""
from .category import Category
from .expense import Expense
from .provision import Provision

__all__ = [
    "Category",
    "Expense",
    "Provision",
]
