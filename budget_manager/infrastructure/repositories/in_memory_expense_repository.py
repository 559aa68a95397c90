"""支出リポジトリのインメモリ実装."""
import copy
from datetime import date

from budget_manager.domain.entities import Expense
from budget_manager.domain.identifiers import CategoryId, ExpenseId, ProvisionId
from budget_manager.domain.ports import ExpenseRepository
from budget_manager.domain.value_objects import Money


class InMemoryExpenseRepository(ExpenseRepository):
    """支出リポジトリのインメモリ実装（保存・取得はコピーで行う）."""

    def __init__(self) -> None:
        """初期化."""
        self._expenses: dict[str, Expense] = {}

    def save(self, expense: Expense) -> None:
        """支出を保存する."""
        self._expenses[expense.expense_id.value] = copy.copy(expense)

    def find_by_id(self, expense_id: ExpenseId) -> Expense | None:
        """支出IDで検索する."""
        stored = self._expenses.get(expense_id.value)
        return copy.copy(stored) if stored is not None else None

    def find_all(self) -> list[Expense]:
        """すべての支出を取得する（日付の新しい順）."""
        expenses = [copy.copy(e) for e in list(self._expenses.values())]
        return sorted(
            expenses,
            key=lambda e: (e.date, e.created_at),
            reverse=True,
        )

    def find_by_category_id(self, category_id: CategoryId) -> list[Expense]:
        """カテゴリIDで検索する."""
        return [e for e in self.find_all() if e.category_id == category_id]

    def find_by_provision_id(self, provision_id: ProvisionId) -> list[Expense]:
        """引当IDで検索する."""
        return [e for e in self.find_all() if e.provision_id == provision_id]

    def find_by_date_range(self, start_date: date, end_date: date) -> list[Expense]:
        """日付範囲（両端を含む）で検索する."""
        return [e for e in self.find_all() if start_date <= e.date <= end_date]

    def delete(self, expense_id: ExpenseId) -> None:
        """支出を削除する."""
        self._expenses.pop(expense_id.value, None)

    def sum_amount_by_provision_id(self, provision_id: ProvisionId) -> Money:
        """引当に紐づく支出金額の合計を返す."""
        total = Money.zero()
        for expense in list(self._expenses.values()):
            if expense.provision_id == provision_id:
                total = total.add(expense.amount)
        return total
