"""引当更新ユースケース."""
from __future__ import annotations

from datetime import date

from budget_manager.domain.entities import Provision
from budget_manager.domain.enums import ProvisionStatus
from budget_manager.domain.identifiers import CategoryId, ProvisionId
from budget_manager.domain.ports import CategoryRepository, ProvisionRepository
from budget_manager.domain.services import ValidationService
from budget_manager.domain.value_objects import Money

from .create_provision import ITEM_MAX_LENGTH, NOTES_MAX_LENGTH
from .get_category import CategoryNotFoundError
from .get_provision import ProvisionNotFoundError
from .sync_provision_fulfillment import ProvisionConcurrencyError


class UpdateProvisionUseCase:
    """引当更新ユースケース."""

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
        provision_id: str,
        item: str | None = None,
        category_id: str | None = None,
        amount: int | float | None = None,
        due_date: str | date | None = None,
        notes: str | None = None,
        status: str | ProvisionStatus | None = None,
    ) -> Provision:
        """引当を部分更新する.

        status は手動でどちらの方向にも変更できる。status を指定せずに金額を
        変更した場合は、現在の使用額で消化判定をやり直す。

        Raises:
            ValidationError: 入力値が不正な場合
            ProvisionNotFoundError: 引当が見つからない場合
            CategoryNotFoundError: 変更先のカテゴリが見つからない場合
            ProvisionConcurrencyError: 同時に他の更新があった場合
        """
        validations = []
        if item is not None:
            validations.append(lambda: ValidationService.validate_non_empty_string(item, "item"))
            validations.append(
                lambda: ValidationService.validate_max_length(item, ITEM_MAX_LENGTH, "item")
            )
        if category_id is not None:
            validations.append(lambda: ValidationService.validate_uuid(category_id, "category_id"))
        if amount is not None:
            validations.append(lambda: ValidationService.validate_provision_amount(amount, "amount"))
        if due_date is not None:
            validations.append(lambda: ValidationService.validate_date(due_date, "due_date"))
        if notes is not None:
            validations.append(
                lambda: ValidationService.validate_max_length(notes, NOTES_MAX_LENGTH, "notes")
            )
        if status is not None:
            validations.append(
                lambda: ValidationService.validate_enum(status, ProvisionStatus, "status")
            )
        ValidationService.raise_if_errors(ValidationService.collect_errors(validations))

        provision = self._provision_repository.find_by_id(ProvisionId(provision_id))
        if provision is None:
            raise ProvisionNotFoundError(provision_id)
        expected_version = provision.version

        if category_id is not None:
            if self._category_repository.find_by_id(CategoryId(category_id)) is None:
                raise CategoryNotFoundError(category_id)
            provision.category_id = CategoryId(category_id)
        if item is not None:
            provision.item = item.strip()
        if due_date is not None:
            provision.due_date = ValidationService.to_date(due_date, "due_date")
        if notes is not None:
            provision.notes = notes.strip() or None
        if amount is not None:
            provision.amount = Money.of(amount).absolute().negate()

        if status is not None:
            provision.change_status(ProvisionStatus(status))
        elif amount is not None:
            provision.apply_used_amount(provision.used_amount)
        provision.touch()

        if not self._provision_repository.save_if_unchanged(provision, expected_version):
            raise ProvisionConcurrencyError(provision_id, 1)
        return provision
