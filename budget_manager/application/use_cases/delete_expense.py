"""支出削除ユースケース."""
from budget_manager.domain.identifiers import ExpenseId
from budget_manager.domain.ports import ExpenseRepository, ProvisionRepository

from .get_expense import ExpenseNotFoundError
from .sync_provision_fulfillment import SyncProvisionFulfillmentUseCase


class DeleteExpenseUseCase:
    """支出削除ユースケース."""

    def __init__(
        self,
        expense_repository: ExpenseRepository,
        provision_repository: ProvisionRepository,
    ) -> None:
        """初期化."""
        self._expense_repository = expense_repository
        self._sync_provision = SyncProvisionFulfillmentUseCase(
            provision_repository, expense_repository
        )

    def execute(self, expense_id: str) -> None:
        """支出を削除し、紐づいていた引当の使用額を同期する.

        Raises:
            ExpenseNotFoundError: 支出が見つからない場合
        """
        expense = self._expense_repository.find_by_id(ExpenseId(expense_id))
        if expense is None:
            raise ExpenseNotFoundError(expense_id)

        self._expense_repository.delete(expense.expense_id)
        if expense.provision_id is not None:
            self._sync_provision.execute(expense.provision_id)
