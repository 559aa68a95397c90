"""引当作成ユースケース."""
from __future__ import annotations

from datetime import date

from budget_manager.domain.entities import Provision
from budget_manager.domain.identifiers import CategoryId
from budget_manager.domain.ports import CategoryRepository, ProvisionRepository
from budget_manager.domain.services import ValidationService
from budget_manager.domain.value_objects import Money

from .get_category import CategoryNotFoundError

ITEM_MAX_LENGTH = 100
NOTES_MAX_LENGTH = 500


class CreateProvisionUseCase:
    """引当作成ユースケース."""

    def __init__(
        self,
        provision_repository: ProvisionRepository,
        category_repository: CategoryRepository,
    ) -> None:
        """初期化."""
        self._provision_repository = provision_repository
        self._category_repository = category_repository

    def execute(
        self,
        item: str,
        category_id: str,
        amount: int | float,
        due_date: str | date,
        notes: str | None = None,
    ) -> Provision:
        """引当を作成する.

        金額は符号に関わらず予約された借方（-|amount|）として保存する。

        Raises:
            ValidationError: 入力値が不正な場合
            CategoryNotFoundError: カテゴリが見つからない場合
        """
        errors = ValidationService.collect_errors([
            lambda: ValidationService.validate_non_empty_string(item, "item"),
            lambda: ValidationService.validate_max_length(item, ITEM_MAX_LENGTH, "item"),
            lambda: ValidationService.validate_provision_amount(amount, "amount"),
            lambda: ValidationService.validate_uuid(category_id, "category_id"),
            lambda: ValidationService.validate_date(due_date, "due_date"),
            lambda: ValidationService.validate_max_length(notes, NOTES_MAX_LENGTH, "notes"),
        ])
        ValidationService.raise_if_errors(errors)

        if self._category_repository.find_by_id(CategoryId(category_id)) is None:
            raise CategoryNotFoundError(category_id)

        provision = Provision.create(
            item=item.strip(),
            category_id=CategoryId(category_id),
            amount=Money.of(amount).absolute().negate(),
            due_date=ValidationService.to_date(due_date, "due_date"),
            notes=notes.strip() if notes else None,
        )
        self._provision_repository.save(provision)
        return provision
