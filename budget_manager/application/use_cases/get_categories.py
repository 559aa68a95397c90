"""カテゴリ一覧取得ユースケース."""
from __future__ import annotations

from budget_manager.domain.entities import Category
from budget_manager.domain.ports import CategoryRepository
from budget_manager.domain.services import ValidationService
from budget_manager.domain.value_objects import Period


class GetCategoriesUseCase:
    """カテゴリ一覧取得ユースケース."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        """初期化."""
        self._category_repository = category_repository

    def execute(self, period: str | None = None) -> list[Category]:
        """カテゴリ一覧を取得する（期間指定時はその期間のみ）."""
        if period is None:
            return self._category_repository.find_all()
        ValidationService.validate_period_format(period, "period")
        return self._category_repository.find_by_period(Period(period))
