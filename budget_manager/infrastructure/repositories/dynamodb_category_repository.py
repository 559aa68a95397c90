"""カテゴリリポジトリのDynamoDB実装."""
import logging
import os
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from budget_manager.domain.entities import Category
from budget_manager.domain.identifiers import CategoryId
from budget_manager.domain.ports import CategoryRepository
from budget_manager.domain.value_objects import Money, Period

logger = logging.getLogger(__name__)

PERIOD_INDEX = "period-index"


class DynamoDBCategoryRepository(CategoryRepository):
    """カテゴリリポジトリのDynamoDB実装."""

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "CATEGORY_TABLE_NAME", "budget-manager-category"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def save(self, category: Category) -> None:
        """カテゴリを保存する."""
        try:
            self._table.put_item(Item=self._to_dynamodb_item(category))
        except ClientError as e:
            logger.error(f"Failed to save category {category.category_id}: {e}")
            raise

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        """カテゴリIDで検索する."""
        response = self._table.get_item(Key={"category_id": category_id.value})
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def find_all(self) -> list[Category]:
        """すべてのカテゴリを取得する（期間・名前順）."""
        items = self._collect_items(self._table.scan)
        categories = [self._from_dynamodb_item(item) for item in items]
        return sorted(categories, key=lambda c: (c.period.value, c.name))

    def find_by_period(self, period: Period) -> list[Category]:
        """期間で検索する（GSI使用）."""
        items = self._collect_items(
            self._table.query,
            IndexName=PERIOD_INDEX,
            KeyConditionExpression=Key("period").eq(period.value),
        )
        categories = [self._from_dynamodb_item(item) for item in items]
        return sorted(categories, key=lambda c: c.name)

    def delete(self, category_id: CategoryId) -> None:
        """カテゴリを削除する."""
        self._table.delete_item(Key={"category_id": category_id.value})

    @staticmethod
    def _collect_items(operation: Callable[..., dict], **kwargs: Any) -> list[dict]:
        """LastEvaluatedKey を辿って全ページのアイテムを集める."""
        response = operation(**kwargs)
        items = response.get("Items", [])
        while response.get("LastEvaluatedKey"):
            response = operation(ExclusiveStartKey=response["LastEvaluatedKey"], **kwargs)
            items.extend(response.get("Items", []))
        return items

    @staticmethod
    def _to_dynamodb_item(category: Category) -> dict:
        """Category を DynamoDB アイテムに変換する."""
        item: dict = {
            "category_id": category.category_id.value,
            "name": category.name,
            "period": category.period.value,
            "monthly_budget": Decimal(category.monthly_budget.to_string()),
            "created_at": category.created_at.isoformat(),
            "updated_at": category.updated_at.isoformat(),
        }
        if category.notes is not None:
            item["notes"] = category.notes
        return item

    @staticmethod
    def _from_dynamodb_item(item: dict) -> Category:
        """DynamoDB アイテムから Category を復元する."""
        return Category(
            category_id=CategoryId(item["category_id"]),
            name=item["name"],
            period=Period(item["period"]),
            monthly_budget=Money.from_decimal(item["monthly_budget"]),
            notes=item.get("notes"),
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
        )
