"""インフラストラクチャ層モジュール."""
from .repositories import (
    DynamoDBCategoryRepository,
    DynamoDBExpenseRepository,
    DynamoDBProvisionRepository,
    InMemoryCategoryRepository,
    InMemoryExpenseRepository,
    InMemoryProvisionRepository,
)

__all__ = [
    "DynamoDBCategoryRepository",
    "DynamoDBExpenseRepository",
    "DynamoDBProvisionRepository",
    "InMemoryCategoryRepository",
    "InMemoryExpenseRepository",
    "InMemoryProvisionRepository",
]
