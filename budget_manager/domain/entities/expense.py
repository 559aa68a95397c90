"""支出エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

from ..enums import PaymentMethod
from ..errors import ValidationError
from ..identifiers import CategoryId, ExpenseId, ProvisionId
from ..value_objects import Money


@dataclass
class Expense:
    """カテゴリに対する実績の支出（借方）.

    金額は常に0以下で保持する。
    """

    expense_id: ExpenseId
    date: date
    description: str
    category_id: CategoryId
    amount: Money
    payment_method: PaymentMethod = PaymentMethod.CASH
    provision_id: Optional[ProvisionId] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.amount.is_positive():
            raise ValidationError(
                "Expense amount must be negative (a debit)",
                field="amount",
                value=self.amount.value,
            )

    @classmethod
    def create(
        cls,
        date: date,
        description: str,
        category_id: CategoryId,
        amount: Money,
        payment_method: PaymentMethod = PaymentMethod.CASH,
        provision_id: Optional[ProvisionId] = None,
    ) -> Expense:
        """新しい支出を作成する."""
        now = datetime.now(timezone.utc)
        return cls(
            expense_id=ExpenseId.generate(),
            date=date,
            description=description,
            category_id=category_id,
            amount=amount,
            payment_method=payment_method,
            provision_id=provision_id,
            created_at=now,
            updated_at=now,
        )

    def touch(self) -> None:
        """更新日時を現在時刻にする."""
        self.updated_at = datetime.now(timezone.utc)
