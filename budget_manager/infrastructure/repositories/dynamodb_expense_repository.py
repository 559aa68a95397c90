"""支出リポジトリのDynamoDB実装."""
import logging
import os
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from budget_manager.domain.entities import Expense
from budget_manager.domain.enums import PaymentMethod
from budget_manager.domain.identifiers import CategoryId, ExpenseId, ProvisionId
from budget_manager.domain.ports import ExpenseRepository
from budget_manager.domain.value_objects import Money

logger = logging.getLogger(__name__)

CATEGORY_DATE_INDEX = "category_id-date-index"


class DynamoDBExpenseRepository(ExpenseRepository):
    """支出リポジトリのDynamoDB実装.

    引当IDでの検索と集計は GSI（結果整合）を使わず、ベーステーブルを
    強い整合性でスキャンする。
    """

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "EXPENSE_TABLE_NAME", "budget-manager-expense"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def save(self, expense: Expense) -> None:
        """支出を保存する."""
        try:
            self._table.put_item(Item=self._to_dynamodb_item(expense))
        except ClientError as e:
            logger.error(f"Failed to save expense {expense.expense_id}: {e}")
            raise

    def find_by_id(self, expense_id: ExpenseId) -> Expense | None:
        """支出IDで検索する."""
        response = self._table.get_item(Key={"expense_id": expense_id.value})
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def find_all(self) -> list[Expense]:
        """すべての支出を取得する（日付の新しい順）."""
        items = self._collect_items(self._table.scan)
        return self._sorted_newest_first(items)

    def find_by_category_id(self, category_id: CategoryId) -> list[Expense]:
        """カテゴリIDで検索する（GSI使用、日付の新しい順）."""
        items = self._collect_items(
            self._table.query,
            IndexName=CATEGORY_DATE_INDEX,
            KeyConditionExpression=Key("category_id").eq(category_id.value),
            ScanIndexForward=False,
        )
        return self._sorted_newest_first(items)

    def find_by_provision_id(self, provision_id: ProvisionId) -> list[Expense]:
        """引当IDで検索する（強い整合性）."""
        items = self._collect_items(
            self._table.scan,
            FilterExpression=Attr("provision_id").eq(provision_id.value),
            ConsistentRead=True,
        )
        return self._sorted_newest_first(items)

    def find_by_date_range(self, start_date: date, end_date: date) -> list[Expense]:
        """日付範囲（両端を含む）で検索する."""
        items = self._collect_items(
            self._table.scan,
            FilterExpression=Attr("date").between(
                start_date.isoformat(), end_date.isoformat()
            ),
        )
        return self._sorted_newest_first(items)

    def delete(self, expense_id: ExpenseId) -> None:
        """支出を削除する."""
        self._table.delete_item(Key={"expense_id": expense_id.value})

    def sum_amount_by_provision_id(self, provision_id: ProvisionId) -> Money:
        """引当に紐づく支出金額の合計を返す（強い整合性）.

        完了済みの書き込みはすべて合計に含まれる。
        """
        items = self._collect_items(
            self._table.scan,
            FilterExpression=Attr("provision_id").eq(provision_id.value),
            ProjectionExpression="amount",
            ConsistentRead=True,
        )
        total = Money.zero()
        for item in items:
            total = total.add(Money.from_decimal(item["amount"]))
        return total

    @staticmethod
    def _collect_items(operation: Callable[..., dict], **kwargs: Any) -> list[dict]:
        """LastEvaluatedKey を辿って全ページのアイテムを集める."""
        response = operation(**kwargs)
        items = response.get("Items", [])
        while response.get("LastEvaluatedKey"):
            response = operation(ExclusiveStartKey=response["LastEvaluatedKey"], **kwargs)
            items.extend(response.get("Items", []))
        return items

    def _sorted_newest_first(self, items: list[dict]) -> list[Expense]:
        expenses = [self._from_dynamodb_item(item) for item in items]
        return sorted(expenses, key=lambda e: (e.date, e.created_at), reverse=True)

    @staticmethod
    def _to_dynamodb_item(expense: Expense) -> dict:
        """Expense を DynamoDB アイテムに変換する."""
        item: dict = {
            "expense_id": expense.expense_id.value,
            "date": expense.date.isoformat(),
            "description": expense.description,
            "category_id": expense.category_id.value,
            "amount": Decimal(expense.amount.to_string()),
            "payment_method": expense.payment_method.value,
            "created_at": expense.created_at.isoformat(),
            "updated_at": expense.updated_at.isoformat(),
        }
        # 紐づけがない場合は属性ごと省く
        if expense.provision_id is not None:
            item["provision_id"] = expense.provision_id.value
        return item

    @staticmethod
    def _from_dynamodb_item(item: dict) -> Expense:
        """DynamoDB アイテムから Expense を復元する."""
        provision_id = None
        if item.get("provision_id"):
            provision_id = ProvisionId(item["provision_id"])

        return Expense(
            expense_id=ExpenseId(item["expense_id"]),
            date=date.fromisoformat(item["date"]),
            description=item["description"],
            category_id=CategoryId(item["category_id"]),
            amount=Money.from_decimal(item["amount"]),
            payment_method=PaymentMethod(item.get("payment_method", PaymentMethod.CASH.value)),
            provision_id=provision_id,
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
        )
