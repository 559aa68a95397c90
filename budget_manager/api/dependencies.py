"""依存性注入コンテナ."""
from __future__ import annotations

import os
from dataclasses import dataclass

from budget_manager.domain.ports import (
    CategoryRepository,
    ExpenseRepository,
    ProvisionRepository,
)
from budget_manager.infrastructure import (
    InMemoryCategoryRepository,
    InMemoryExpenseRepository,
    InMemoryProvisionRepository,
)


def _use_dynamodb() -> bool:
    """DynamoDBを使用するか判定する."""
    # CATEGORY_TABLE_NAME が設定されていればDynamoDBを使用
    return os.environ.get("CATEGORY_TABLE_NAME") is not None


@dataclass
class Dependencies:
    """リポジトリをまとめて保持するコンテナ.

    インスタンスを組み立ててハンドラーに渡す。クラス変数に状態は持たない。
    """

    category_repository: CategoryRepository
    expense_repository: ExpenseRepository
    provision_repository: ProvisionRepository

    @classmethod
    def in_memory(cls) -> Dependencies:
        """インメモリ実装で組み立てる（ローカル開発・テスト用）."""
        return cls(
            category_repository=InMemoryCategoryRepository(),
            expense_repository=InMemoryExpenseRepository(),
            provision_repository=InMemoryProvisionRepository(),
        )

    @classmethod
    def dynamodb(cls) -> Dependencies:
        """DynamoDB実装で組み立てる."""
        from budget_manager.infrastructure import (
            DynamoDBCategoryRepository,
            DynamoDBExpenseRepository,
            DynamoDBProvisionRepository,
        )

        return cls(
            category_repository=DynamoDBCategoryRepository(),
            expense_repository=DynamoDBExpenseRepository(),
            provision_repository=DynamoDBProvisionRepository(),
        )

    @classmethod
    def from_env(cls) -> Dependencies:
        """環境変数に応じて組み立てる.

        CATEGORY_TABLE_NAME 環境変数が設定されている場合はDynamoDB実装を使用。
        そうでない場合はインメモリ実装を使用。
        """
        if _use_dynamodb():
            return cls.dynamodb()
        return cls.in_memory()
