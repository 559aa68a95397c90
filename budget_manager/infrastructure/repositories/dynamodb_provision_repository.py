"""引当リポジトリのDynamoDB実装."""
import logging
import os
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from budget_manager.domain.entities import Provision
from budget_manager.domain.enums import ProvisionStatus
from budget_manager.domain.identifiers import CategoryId, ProvisionId
from budget_manager.domain.ports import ProvisionRepository
from budget_manager.domain.value_objects import Money

logger = logging.getLogger(__name__)

CATEGORY_DUE_DATE_INDEX = "category_id-due_date-index"
STATUS_DUE_DATE_INDEX = "status-due_date-index"


class DynamoDBProvisionRepository(ProvisionRepository):
    """引当リポジトリのDynamoDB実装.

    version 属性に対する条件付き書き込みで楽観ロックを行う。
    """

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "PROVISION_TABLE_NAME", "budget-manager-provision"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def save(self, provision: Provision) -> None:
        """引当を保存する."""
        item = self._to_dynamodb_item(provision)
        item["version"] = provision.version + 1
        try:
            self._table.put_item(Item=item)
        except ClientError as e:
            logger.error(f"Failed to save provision {provision.provision_id}: {e}")
            raise
        provision.version += 1

    def save_if_unchanged(self, provision: Provision, expected_version: int) -> bool:
        """保存済みの version が一致する場合のみ保存する."""
        item = self._to_dynamodb_item(provision)
        item["version"] = expected_version + 1
        if expected_version == 0:
            condition = Attr("provision_id").not_exists()
        else:
            condition = Attr("version").eq(expected_version)

        try:
            self._table.put_item(Item=item, ConditionExpression=condition)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                return False
            logger.error(f"Failed to save provision {provision.provision_id}: {e}")
            raise
        provision.version = expected_version + 1
        return True

    def find_by_id(self, provision_id: ProvisionId) -> Provision | None:
        """引当IDで検索する."""
        response = self._table.get_item(
            Key={"provision_id": provision_id.value},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def find_all(self) -> list[Provision]:
        """すべての引当を取得する（期日の早い順）."""
        items = self._collect_items(self._table.scan)
        return self._sorted_by_due_date(items)

    def find_by_category_id(self, category_id: CategoryId) -> list[Provision]:
        """カテゴリIDで検索する（GSI使用、期日の早い順）."""
        items = self._collect_items(
            self._table.query,
            IndexName=CATEGORY_DUE_DATE_INDEX,
            KeyConditionExpression=Key("category_id").eq(category_id.value),
        )
        return self._sorted_by_due_date(items)

    def find_open(self) -> list[Provision]:
        """未消化の引当を取得する（GSI使用、期日の早い順）."""
        items = self._collect_items(
            self._table.query,
            IndexName=STATUS_DUE_DATE_INDEX,
            KeyConditionExpression=Key("status").eq(ProvisionStatus.OPEN.value),
        )
        return self._sorted_by_due_date(items)

    def delete(self, provision_id: ProvisionId) -> None:
        """引当を削除する."""
        self._table.delete_item(Key={"provision_id": provision_id.value})

    @staticmethod
    def _collect_items(operation: Callable[..., dict], **kwargs: Any) -> list[dict]:
        """LastEvaluatedKey を辿って全ページのアイテムを集める."""
        response = operation(**kwargs)
        items = response.get("Items", [])
        while response.get("LastEvaluatedKey"):
            response = operation(ExclusiveStartKey=response["LastEvaluatedKey"], **kwargs)
            items.extend(response.get("Items", []))
        return items

    def _sorted_by_due_date(self, items: list[dict]) -> list[Provision]:
        provisions = [self._from_dynamodb_item(item) for item in items]
        return sorted(provisions, key=lambda p: p.due_date)

    @staticmethod
    def _to_dynamodb_item(provision: Provision) -> dict:
        """Provision を DynamoDB アイテムに変換する."""
        item: dict = {
            "provision_id": provision.provision_id.value,
            "item": provision.item,
            "category_id": provision.category_id.value,
            "amount": Decimal(provision.amount.to_string()),
            "used_amount": Decimal(provision.used_amount.to_string()),
            "due_date": provision.due_date.isoformat(),
            "status": provision.status.value,
            "created_at": provision.created_at.isoformat(),
            "updated_at": provision.updated_at.isoformat(),
            "version": provision.version,
        }
        if provision.notes is not None:
            item["notes"] = provision.notes
        return item

    @staticmethod
    def _from_dynamodb_item(item: dict) -> Provision:
        """DynamoDB アイテムから Provision を復元する."""
        return Provision(
            provision_id=ProvisionId(item["provision_id"]),
            item=item["item"],
            category_id=CategoryId(item["category_id"]),
            amount=Money.from_decimal(item["amount"]),
            due_date=date.fromisoformat(item["due_date"]),
            used_amount=Money.from_decimal(item.get("used_amount")),
            status=ProvisionStatus(item["status"]),
            notes=item.get("notes"),
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
            version=int(item.get("version", 0)),
        )
