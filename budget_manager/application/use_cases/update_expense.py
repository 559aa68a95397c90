"""支出更新ユースケース."""
from __future__ import annotations

import logging
from datetime import date

from budget_manager.domain.entities import Expense
from budget_manager.domain.enums import PaymentMethod
from budget_manager.domain.identifiers import CategoryId, ExpenseId, ProvisionId
from budget_manager.domain.ports import (
    CategoryRepository,
    ExpenseRepository,
    ProvisionRepository,
)
from budget_manager.domain.services import ValidationService
from budget_manager.domain.value_objects import Money

from .create_expense import DESCRIPTION_MAX_LENGTH
from .get_category import CategoryNotFoundError
from .get_expense import ExpenseNotFoundError
from .get_provision import ProvisionNotFoundError
from .sync_provision_fulfillment import SyncProvisionFulfillmentUseCase

logger = logging.getLogger(__name__)


class UpdateExpenseUseCase:
    """支出更新ユースケース."""

    def __init__(
        self,
        expense_repository: ExpenseRepository,
        category_repository: CategoryRepository,
        provision_repository: ProvisionRepository,
    ) -> None:
        """初期化."""
        self._expense_repository = expense_repository
        self._category_repository = category_repository
        self._provision_repository = provision_repository
        self._sync_provision = SyncProvisionFulfillmentUseCase(
            provision_repository, expense_repository
        )

    def execute(
        self,
        expense_id: str,
        date: str | date | None = None,
        description: str | None = None,
        category_id: str | None = None,
        amount: int | float | None = None,
        payment_method: str | PaymentMethod | None = None,
        provision_id: str | None = None,
        unlink_provision: bool = False,
    ) -> Expense:
        """支出を部分更新する.

        None の項目は変更しない。引当との紐づけを外すには unlink_provision を指定する。
        紐づけ先または金額が変わった場合は、変更前後の引当の使用額を同期する。

        Raises:
            ValidationError: 入力値が不正な場合
            ExpenseNotFoundError: 支出が見つからない場合
            CategoryNotFoundError: 変更先のカテゴリが見つからない場合
            ProvisionNotFoundError: 変更先の引当が見つからない場合
        """
        validations = []
        if date is not None:
            validations.append(lambda: ValidationService.validate_date(date, "date"))
        if description is not None:
            validations.append(
                lambda: ValidationService.validate_non_empty_string(description, "description")
            )
            validations.append(
                lambda: ValidationService.validate_max_length(
                    description, DESCRIPTION_MAX_LENGTH, "description"
                )
            )
        if category_id is not None:
            validations.append(lambda: ValidationService.validate_uuid(category_id, "category_id"))
        if amount is not None:
            validations.append(lambda: ValidationService.validate_expense_amount(amount, "amount"))
        if payment_method is not None:
            validations.append(
                lambda: ValidationService.validate_enum(
                    payment_method, PaymentMethod, "payment_method"
                )
            )
        if provision_id is not None:
            validations.append(
                lambda: ValidationService.validate_uuid(provision_id, "provision_id")
            )
        ValidationService.raise_if_errors(ValidationService.collect_errors(validations))

        expense = self._expense_repository.find_by_id(ExpenseId(expense_id))
        if expense is None:
            raise ExpenseNotFoundError(expense_id)
        if (
            category_id is not None
            and self._category_repository.find_by_id(CategoryId(category_id)) is None
        ):
            raise CategoryNotFoundError(category_id)
        if (
            provision_id is not None
            and self._provision_repository.find_by_id(ProvisionId(provision_id)) is None
        ):
            raise ProvisionNotFoundError(provision_id)

        # 存在確認がすべて済んでから反映する
        previous_provision_id = expense.provision_id
        previous_amount = expense.amount
        if category_id is not None:
            expense.category_id = CategoryId(category_id)
        if provision_id is not None:
            expense.provision_id = ProvisionId(provision_id)
        elif unlink_provision:
            expense.provision_id = None
        if date is not None:
            expense.date = ValidationService.to_date(date, "date")
        if description is not None:
            expense.description = description.strip()
        if amount is not None:
            expense.amount = Money.of(amount).absolute().negate()
        if payment_method is not None:
            expense.payment_method = PaymentMethod(payment_method)
        expense.touch()

        self._expense_repository.save(expense)

        link_changed = previous_provision_id != expense.provision_id
        amount_changed = not previous_amount.equals(expense.amount)
        if link_changed or amount_changed:
            affected_ids: list[ProvisionId] = []
            for affected_id in (previous_provision_id, expense.provision_id):
                if affected_id is not None and affected_id not in affected_ids:
                    affected_ids.append(affected_id)
            for affected_id in affected_ids:
                synced = self._sync_provision.execute(affected_id)
                if synced is None and affected_id == expense.provision_id:
                    # 紐づけ先の引当が更新の直後に削除された
                    logger.warning(
                        f"Provision {affected_id} was deleted while linking expense "
                        f"{expense.expense_id}; unlinking"
                    )
                    expense.provision_id = None
                    self._expense_repository.save(expense)
        return expense
