"""カテゴリエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ..errors import ValidationError
from ..identifiers import CategoryId
from ..value_objects import Money, Period


@dataclass
class Category:
    """月次予算を持つカテゴリ（予算の封筒）."""

    category_id: CategoryId
    name: str
    period: Period
    monthly_budget: Money
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.monthly_budget.is_positive():
            raise ValidationError(
                "Monthly budget must be positive",
                field="monthly_budget",
                value=self.monthly_budget.value,
            )

    @classmethod
    def create(
        cls,
        name: str,
        period: Period,
        monthly_budget: Money,
        notes: Optional[str] = None,
    ) -> Category:
        """新しいカテゴリを作成する."""
        now = datetime.now(timezone.utc)
        return cls(
            category_id=CategoryId.generate(),
            name=name,
            period=period,
            monthly_budget=monthly_budget,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    def touch(self) -> None:
        """更新日時を現在時刻にする."""
        self.updated_at = datetime.now(timezone.utc)
