"""支出リポジトリインターフェース."""
from abc import ABC, abstractmethod
from datetime import date

from ..entities import Expense
from ..identifiers import CategoryId, ExpenseId, ProvisionId
from ..value_objects import Money


class ExpenseRepository(ABC):
    """支出リポジトリのインターフェース."""

    @abstractmethod
    def save(self, expense: Expense) -> None:
        """支出を保存する."""
        pass

    @abstractmethod
    def find_by_id(self, expense_id: ExpenseId) -> Expense | None:
        """支出IDで検索する."""
        pass

    @abstractmethod
    def find_all(self) -> list[Expense]:
        """すべての支出を取得する（日付の新しい順）."""
        pass

    @abstractmethod
    def find_by_category_id(self, category_id: CategoryId) -> list[Expense]:
        """カテゴリIDで検索する."""
        pass

    @abstractmethod
    def find_by_provision_id(self, provision_id: ProvisionId) -> list[Expense]:
        """引当IDで検索する（完了済みの書き込みをすべて反映する）."""
        pass

    @abstractmethod
    def find_by_date_range(self, start_date: date, end_date: date) -> list[Expense]:
        """日付範囲（両端を含む）で検索する."""
        pass

    @abstractmethod
    def delete(self, expense_id: ExpenseId) -> None:
        """支出を削除する."""
        pass

    @abstractmethod
    def sum_amount_by_provision_id(self, provision_id: ProvisionId) -> Money:
        """引当に紐づく支出金額の合計を返す（支出は負なので合計も0以下）.

        呼び出し前に完了した書き込みをすべて反映した値を返す（結果整合の読み取りは不可）。
        """
        pass
