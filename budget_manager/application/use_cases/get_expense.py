"""支出取得ユースケース."""
from budget_manager.domain.entities import Expense
from budget_manager.domain.identifiers import ExpenseId
from budget_manager.domain.ports import ExpenseRepository


class ExpenseNotFoundError(Exception):
    """支出が見つからないエラー."""

    def __init__(self, expense_id: str) -> None:
        """初期化."""
        super().__init__(f'Expense with id "{expense_id}" not found')
        self.expense_id = expense_id


class GetExpenseUseCase:
    """支出取得ユースケース."""

    def __init__(self, expense_repository: ExpenseRepository) -> None:
        """初期化."""
        self._expense_repository = expense_repository

    def execute(self, expense_id: str) -> Expense:
        """支出を取得する."""
        expense = self._expense_repository.find_by_id(ExpenseId(expense_id))
        if expense is None:
            raise ExpenseNotFoundError(expense_id)
        return expense
