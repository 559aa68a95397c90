"""カテゴリ更新ユースケース."""
from __future__ import annotations

from budget_manager.domain.entities import Category
from budget_manager.domain.identifiers import CategoryId
from budget_manager.domain.ports import CategoryRepository
from budget_manager.domain.services import ValidationService
from budget_manager.domain.value_objects import Money, Period

from .create_category import NAME_MAX_LENGTH, NOTES_MAX_LENGTH
from .get_category import CategoryNotFoundError


class UpdateCategoryUseCase:
    """カテゴリ更新ユースケース."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        """初期化."""
        self._category_repository = category_repository

    def execute(
        self,
        category_id: str,
        name: str | None = None,
        period: str | None = None,
        monthly_budget: int | float | None = None,
        notes: str | None = None,
    ) -> Category:
        """カテゴリを部分更新する.

        None の項目は変更しない。

        Raises:
            ValidationError: 入力値が不正な場合
            CategoryNotFoundError: カテゴリが見つからない場合
        """
        validations = []
        if name is not None:
            validations.append(lambda: ValidationService.validate_non_empty_string(name, "name"))
            validations.append(
                lambda: ValidationService.validate_max_length(name, NAME_MAX_LENGTH, "name")
            )
        if period is not None:
            validations.append(lambda: ValidationService.validate_period_format(period, "period"))
        if monthly_budget is not None:
            validations.append(
                lambda: ValidationService.validate_monthly_budget(monthly_budget, "monthly_budget")
            )
        if notes is not None:
            validations.append(
                lambda: ValidationService.validate_max_length(notes, NOTES_MAX_LENGTH, "notes")
            )
        ValidationService.raise_if_errors(ValidationService.collect_errors(validations))

        category = self._category_repository.find_by_id(CategoryId(category_id))
        if category is None:
            raise CategoryNotFoundError(category_id)

        if name is not None:
            category.name = name.strip()
        if period is not None:
            category.period = Period(period)
        if monthly_budget is not None:
            category.monthly_budget = Money.of(monthly_budget)
        if notes is not None:
            category.notes = notes.strip() or None
        category.touch()

        self._category_repository.save(category)
        return category
