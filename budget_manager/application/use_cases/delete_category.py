"""カテゴリ削除ユースケース."""
import logging

from budget_manager.domain.identifiers import CategoryId
from budget_manager.domain.ports import (
    CategoryRepository,
    ExpenseRepository,
    ProvisionRepository,
)

from .get_category import CategoryNotFoundError

logger = logging.getLogger(__name__)


class DeleteCategoryUseCase:
    """カテゴリ削除ユースケース.

    カテゴリに属する支出と引当も合わせて削除する。
    """

    def __init__(
        self,
        category_repository: CategoryRepository,
        expense_repository: ExpenseRepository,
        provision_repository: ProvisionRepository,
    ) -> None:
        """初期化."""
        self._category_repository = category_repository
        self._expense_repository = expense_repository
        self._provision_repository = provision_repository

    def execute(self, category_id: str) -> None:
        """カテゴリを削除する.

        Raises:
            CategoryNotFoundError: カテゴリが見つからない場合
        """
        target_id = CategoryId(category_id)
        if self._category_repository.find_by_id(target_id) is None:
            raise CategoryNotFoundError(category_id)

        expenses = self._expense_repository.find_by_category_id(target_id)
        for expense in expenses:
            self._expense_repository.delete(expense.expense_id)
        provisions = self._provision_repository.find_by_category_id(target_id)
        for provision in provisions:
            self._provision_repository.delete(provision.provision_id)
        self._category_repository.delete(target_id)

        logger.info(
            f"Deleted category {category_id} "
            f"with {len(expenses)} expenses and {len(provisions)} provisions"
        )
