"""リポジトリ実装モジュール."""
from .dynamodb_category_repository import DynamoDBCategoryRepository
from .dynamodb_expense_repository import DynamoDBExpenseRepository
from .dynamodb_provision_repository import DynamoDBProvisionRepository
from .in_memory_category_repository import InMemoryCategoryRepository
from .in_memory_expense_repository import InMemoryExpenseRepository
from .in_memory_provision_repository import InMemoryProvisionRepository

__all__ = [
    "DynamoDBCategoryRepository",
    "DynamoDBExpenseRepository",
    "DynamoDBProvisionRepository",
    "InMemoryCategoryRepository",
    "InMemoryExpenseRepository",
    "InMemoryProvisionRepository",
]
