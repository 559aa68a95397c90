"""引当エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

from ..enums import ProvisionStatus
from ..errors import ValidationError
from ..identifiers import CategoryId, ProvisionId
from ..value_objects import Money


@dataclass
class Provision:
    """将来の支出に備えて予約した予算（引当）.

    amount は常に負（予約された借方）。used_amount は紐づく支出の絶対値の合計を
    実体化したキャッシュで、正の値で保持する。version は楽観ロック用。
    """

    provision_id: ProvisionId
    item: str
    category_id: CategoryId
    amount: Money
    due_date: date
    used_amount: Money = field(default_factory=Money.zero)
    status: ProvisionStatus = ProvisionStatus.OPEN
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 0

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.amount.is_negative():
            raise ValidationError(
                "Provision amount must be negative (a reserved debit)",
                field="amount",
                value=self.amount.value,
            )
        if self.used_amount.is_negative():
            raise ValidationError(
                "Provision used amount cannot be negative",
                field="used_amount",
                value=self.used_amount.value,
            )

    @classmethod
    def create(
        cls,
        item: str,
        category_id: CategoryId,
        amount: Money,
        due_date: date,
        notes: Optional[str] = None,
    ) -> Provision:
        """新しい引当を作成する."""
        now = datetime.now(timezone.utc)
        return cls(
            provision_id=ProvisionId.generate(),
            item=item,
            category_id=category_id,
            amount=amount,
            due_date=due_date,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    def is_open(self) -> bool:
        """未消化か判定."""
        return self.status == ProvisionStatus.OPEN

    def is_closed(self) -> bool:
        """消化済か判定."""
        return self.status == ProvisionStatus.CLOSED

    def remaining_balance(self) -> Money:
        """引当の残額（|amount| - |used_amount|）."""
        return self.amount.absolute().subtract(self.used_amount.absolute())

    def is_fully_used(self) -> bool:
        """使用額が引当額に達しているか判定."""
        return self.used_amount.greater_than_or_equal(self.amount.absolute())

    def apply_used_amount(self, used_amount: Money) -> bool:
        """使用額を反映し、引当額に達していればクローズする.

        CLOSED から OPEN への自動遷移はない。

        Returns:
            今回の反映でクローズした場合 True
        """
        if used_amount.is_negative():
            raise ValidationError(
                "Provision used amount cannot be negative",
                field="used_amount",
                value=used_amount.value,
            )
        self.used_amount = used_amount
        self.touch()
        if self.is_open() and self.is_fully_used():
            self.status = ProvisionStatus.CLOSED
            return True
        return False

    def change_status(self, status: ProvisionStatus) -> None:
        """ステータスを手動で変更する."""
        self.status = status
        self.touch()

    def touch(self) -> None:
        """更新日時を現在時刻にする."""
        self.updated_at = datetime.now(timezone.utc)
