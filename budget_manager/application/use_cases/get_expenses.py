"""支出一覧取得ユースケース."""
from __future__ import annotations

from datetime import date

from budget_manager.domain.entities import Expense
from budget_manager.domain.errors import ValidationError
from budget_manager.domain.identifiers import CategoryId, ProvisionId
from budget_manager.domain.ports import ExpenseRepository
from budget_manager.domain.services import ValidationService


class GetExpensesUseCase:
    """支出一覧取得ユースケース."""

    def __init__(self, expense_repository: ExpenseRepository) -> None:
        """初期化."""
        self._expense_repository = expense_repository

    def execute(
        self,
        category_id: str | None = None,
        provision_id: str | None = None,
        start_date: str | date | None = None,
        end_date: str | date | None = None,
    ) -> list[Expense]:
        """支出一覧を取得する.

        絞り込み条件はカテゴリ、引当、日付範囲の順に優先する。
        日付範囲は開始日と終了日の両方が必要。

        Raises:
            ValidationError: 日付範囲が不正な場合
        """
        if category_id:
            return self._expense_repository.find_by_category_id(CategoryId(category_id))
        if provision_id:
            return self._expense_repository.find_by_provision_id(ProvisionId(provision_id))
        if start_date is not None or end_date is not None:
            if start_date is None or end_date is None:
                raise ValidationError(
                    "start_date and end_date must be provided together",
                    field="start_date" if start_date is None else "end_date",
                )
            errors = ValidationService.collect_errors([
                lambda: ValidationService.validate_date(start_date, "start_date"),
                lambda: ValidationService.validate_date(end_date, "end_date"),
            ])
            ValidationService.raise_if_errors(errors)
            start = ValidationService.to_date(start_date, "start_date")
            end = ValidationService.to_date(end_date, "end_date")
            if start > end:
                raise ValidationError(
                    "start_date must be before or equal to end_date",
                    field="start_date",
                    value=start_date,
                )
            return self._expense_repository.find_by_date_range(start, end)
        return self._expense_repository.find_all()
