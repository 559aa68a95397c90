"""エグゼクティブサマリーの値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..identifiers import CategoryId
from .money import Money
from .period import Period

SEMESTER_MONTHS = 6


@dataclass(frozen=True)
class ExecutiveSummary:
    """カテゴリ単位の予算消化状況.

    半期の値は月次の値を6倍しただけの単純な見込みであり、実績の合計ではない。
    """

    category_id: CategoryId
    category_name: str
    period: Period
    monthly_budget: Money
    monthly_spent: Money
    monthly_open_provisions: Money
    monthly_available: Money

    @property
    def semester_budget(self) -> Money:
        """半期の予算見込み."""
        return self.monthly_budget.multiply(SEMESTER_MONTHS)

    @property
    def semester_spent(self) -> Money:
        """半期の支出見込み."""
        return self.monthly_spent.multiply(SEMESTER_MONTHS)

    @property
    def semester_gross_available(self) -> Money:
        """引当を考慮しない半期の残予算見込み."""
        return self.monthly_budget.subtract(self.monthly_spent).multiply(SEMESTER_MONTHS)

    @property
    def semester_provision(self) -> Money:
        """半期の引当見込み."""
        return self.monthly_open_provisions.multiply(SEMESTER_MONTHS)

    @property
    def semester_real_available(self) -> Money:
        """引当を差し引いた半期の利用可能額見込み."""
        return self.monthly_available.multiply(SEMESTER_MONTHS)

    def to_dict(self) -> dict:
        """API応答用の辞書に変換する."""
        return {
            "category_id": self.category_id.value,
            "category_name": self.category_name,
            "period": self.period.value,
            "monthly_budget": self.monthly_budget.to_float(),
            "monthly_spent": self.monthly_spent.to_float(),
            "monthly_open_provisions": self.monthly_open_provisions.to_float(),
            "monthly_available": self.monthly_available.to_float(),
            "semester_budget": self.semester_budget.to_float(),
            "semester_spent": self.semester_spent.to_float(),
            "semester_gross_available": self.semester_gross_available.to_float(),
            "semester_provision": self.semester_provision.to_float(),
            "semester_real_available": self.semester_real_available.to_float(),
        }
