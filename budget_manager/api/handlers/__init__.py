"""APIハンドラーモジュール."""
from .categories import categories_handler
from .expenses import expenses_handler
from .provisions import provisions_handler
from .reports import reports_handler

__all__ = [
    "categories_handler",
    "expenses_handler",
    "provisions_handler",
    "reports_handler",
]
