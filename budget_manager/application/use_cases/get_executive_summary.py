"""エグゼクティブサマリー取得ユースケース."""
from __future__ import annotations

from budget_manager.domain.entities import Category
from budget_manager.domain.identifiers import CategoryId
from budget_manager.domain.ports import (
    CategoryRepository,
    ExpenseRepository,
    ProvisionRepository,
)
from budget_manager.domain.services import BudgetAvailabilityService, ValidationService
from budget_manager.domain.value_objects import ExecutiveSummary, Period

from .get_category import CategoryNotFoundError


class GetExecutiveSummaryUseCase:
    """エグゼクティブサマリー取得ユースケース."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        expense_repository: ExpenseRepository,
        provision_repository: ProvisionRepository,
    ) -> None:
        """初期化."""
        self._category_repository = category_repository
        self._expense_repository = expense_repository
        self._provision_repository = provision_repository

    def execute(self, period: str | None = None) -> list[ExecutiveSummary]:
        """全カテゴリ（期間指定時はその期間のカテゴリ）のサマリーを取得する."""
        if period is None:
            categories = self._category_repository.find_all()
        else:
            ValidationService.validate_period_format(period, "period")
            categories = self._category_repository.find_by_period(Period(period))
        return [self._summarize(category) for category in categories]

    def execute_for_category(self, category_id: str) -> ExecutiveSummary:
        """1カテゴリのサマリーを取得する.

        Raises:
            CategoryNotFoundError: カテゴリが見つからない場合
        """
        category = self._category_repository.find_by_id(CategoryId(category_id))
        if category is None:
            raise CategoryNotFoundError(category_id)
        return self._summarize(category)

    def _summarize(self, category: Category) -> ExecutiveSummary:
        expenses = self._expense_repository.find_by_category_id(category.category_id)
        provisions = self._provision_repository.find_by_category_id(category.category_id)
        return BudgetAvailabilityService.summarize(category, expenses, provisions)
