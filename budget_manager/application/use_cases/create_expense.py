"""支出作成ユースケース."""
from __future__ import annotations

import logging
from datetime import date

from budget_manager.domain.entities import Expense
from budget_manager.domain.enums import PaymentMethod
from budget_manager.domain.identifiers import CategoryId, ProvisionId
from budget_manager.domain.ports import (
    CategoryRepository,
    ExpenseRepository,
    ProvisionRepository,
)
from budget_manager.domain.services import ValidationService
from budget_manager.domain.value_objects import Money

from .get_category import CategoryNotFoundError
from .get_provision import ProvisionNotFoundError
from .sync_provision_fulfillment import SyncProvisionFulfillmentUseCase

logger = logging.getLogger(__name__)

DESCRIPTION_MAX_LENGTH = 200


class CreateExpenseUseCase:
    """支出作成ユースケース."""

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
        date: str | date,
        description: str,
        category_id: str,
        amount: int | float,
        payment_method: str | PaymentMethod = PaymentMethod.CASH,
        provision_id: str | None = None,
    ) -> Expense:
        """支出を作成する.

        金額は符号に関わらず借方（-|amount|）として保存する。引当に紐づく場合は
        保存後に引当の使用額を同期する。

        Raises:
            ValidationError: 入力値が不正な場合
            CategoryNotFoundError: カテゴリが見つからない場合
            ProvisionNotFoundError: 引当が見つからない場合
        """
        validations = [
            lambda: ValidationService.validate_non_empty_string(description, "description"),
            lambda: ValidationService.validate_max_length(
                description, DESCRIPTION_MAX_LENGTH, "description"
            ),
            lambda: ValidationService.validate_expense_amount(amount, "amount"),
            lambda: ValidationService.validate_uuid(category_id, "category_id"),
            lambda: ValidationService.validate_date(date, "date"),
            lambda: ValidationService.validate_enum(payment_method, PaymentMethod, "payment_method"),
        ]
        if provision_id is not None:
            validations.append(
                lambda: ValidationService.validate_uuid(provision_id, "provision_id")
            )
        ValidationService.raise_if_errors(ValidationService.collect_errors(validations))

        if self._category_repository.find_by_id(CategoryId(category_id)) is None:
            raise CategoryNotFoundError(category_id)
        linked_provision_id = ProvisionId(provision_id) if provision_id is not None else None
        if (
            linked_provision_id is not None
            and self._provision_repository.find_by_id(linked_provision_id) is None
        ):
            raise ProvisionNotFoundError(provision_id)

        expense = Expense.create(
            date=ValidationService.to_date(date, "date"),
            description=description.strip(),
            category_id=CategoryId(category_id),
            amount=Money.of(amount).absolute().negate(),
            payment_method=PaymentMethod(payment_method),
            provision_id=linked_provision_id,
        )
        self._expense_repository.save(expense)

        if (
            linked_provision_id is not None
            and self._sync_provision.execute(linked_provision_id) is None
        ):
            # 保存の直後に引当が削除された
            logger.warning(
                f"Provision {linked_provision_id} was deleted while linking expense "
                f"{expense.expense_id}; unlinking"
            )
            expense.provision_id = None
            self._expense_repository.save(expense)
        return expense
