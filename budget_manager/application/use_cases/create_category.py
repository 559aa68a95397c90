"""カテゴリ作成ユースケース."""
from __future__ import annotations

from budget_manager.domain.entities import Category
from budget_manager.domain.ports import CategoryRepository
from budget_manager.domain.services import ValidationService
from budget_manager.domain.value_objects import Money, Period

NAME_MAX_LENGTH = 100
NOTES_MAX_LENGTH = 500


class CreateCategoryUseCase:
    """カテゴリ作成ユースケース."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        """初期化."""
        self._category_repository = category_repository

    def execute(
        self,
        name: str,
        period: str,
        monthly_budget: int | float,
        notes: str | None = None,
    ) -> Category:
        """カテゴリを作成する.

        Raises:
            ValidationError: 入力値が不正な場合（すべての違反をまとめて送出）
        """
        errors = ValidationService.collect_errors([
            lambda: ValidationService.validate_non_empty_string(name, "name"),
            lambda: ValidationService.validate_max_length(name, NAME_MAX_LENGTH, "name"),
            lambda: ValidationService.validate_period_format(period, "period"),
            lambda: ValidationService.validate_monthly_budget(monthly_budget, "monthly_budget"),
            lambda: ValidationService.validate_max_length(notes, NOTES_MAX_LENGTH, "notes"),
        ])
        ValidationService.raise_if_errors(errors)

        category = Category.create(
            name=name.strip(),
            period=Period(period),
            monthly_budget=Money.of(monthly_budget),
            notes=notes.strip() if notes else None,
        )
        self._category_repository.save(category)
        return category
