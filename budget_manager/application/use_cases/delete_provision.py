"""引当削除ユースケース."""
import logging

from budget_manager.domain.identifiers import ProvisionId
from budget_manager.domain.ports import ExpenseRepository, ProvisionRepository

from .get_provision import ProvisionNotFoundError

logger = logging.getLogger(__name__)


class DeleteProvisionUseCase:
    """引当削除ユースケース.

    紐づいていた支出は削除せず、引当との紐づけだけを外す。
    引当を先に削除してから紐づく支出を読むため、削除と並行して紐づけられた支出も
    ここで外れるか、紐づけ側の同期で引当の不在を検知して外れる。
    """

    def __init__(
        self,
        provision_repository: ProvisionRepository,
        expense_repository: ExpenseRepository,
    ) -> None:
        """初期化."""
        self._provision_repository = provision_repository
        self._expense_repository = expense_repository

    def execute(self, provision_id: str) -> None:
        """引当を削除する.

        Raises:
            ProvisionNotFoundError: 引当が見つからない場合
        """
        target_id = ProvisionId(provision_id)
        if self._provision_repository.find_by_id(target_id) is None:
            raise ProvisionNotFoundError(provision_id)

        self._provision_repository.delete(target_id)
        expenses = self._expense_repository.find_by_provision_id(target_id)
        for expense in expenses:
            expense.provision_id = None
            expense.touch()
            self._expense_repository.save(expense)

        if expenses:
            logger.info(f"Unlinked {len(expenses)} expenses from deleted provision {provision_id}")
