"""引当消化同期ユースケース."""
import logging

from budget_manager.domain.entities import Provision
from budget_manager.domain.identifiers import ProvisionId
from budget_manager.domain.ports import ExpenseRepository, ProvisionRepository
from budget_manager.domain.services import ProvisionFulfillmentService

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5


class ProvisionConcurrencyError(Exception):
    """引当の更新が他の書き込みと競合し続けたエラー."""

    def __init__(self, provision_id: str, attempts: int) -> None:
        """初期化."""
        super().__init__(
            f'Provision with id "{provision_id}" was modified concurrently '
            f"({attempts} attempts)"
        )
        self.provision_id = provision_id
        self.attempts = attempts


class SyncProvisionFulfillmentUseCase:
    """引当の使用額を紐づく支出の合計から再計算し、消化状態を更新する.

    読み取り・集計・書き込みは version による比較付き保存で行い、
    競合した場合は最新の状態を読み直して再試行する。
    """

    def __init__(
        self,
        provision_repository: ProvisionRepository,
        expense_repository: ExpenseRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        """初期化."""
        self._provision_repository = provision_repository
        self._expense_repository = expense_repository
        self._max_attempts = max_attempts

    def execute(self, provision_id: ProvisionId) -> Provision | None:
        """引当の消化状態を同期する.

        Returns:
            更新後の引当。引当が存在しない場合は None

        Raises:
            ProvisionConcurrencyError: 再試行回数内に保存できなかった場合
        """
        for attempt in range(1, self._max_attempts + 1):
            provision = self._provision_repository.find_by_id(provision_id)
            if provision is None:
                return None

            expected_version = provision.version
            used_amount = self._expense_repository.sum_amount_by_provision_id(
                provision_id
            ).absolute()
            closed = ProvisionFulfillmentService.fulfill(provision, used_amount)

            if self._provision_repository.save_if_unchanged(provision, expected_version):
                if closed:
                    logger.info(
                        f"Provision {provision_id} closed: used {used_amount} "
                        f"of {provision.amount.absolute()}"
                    )
                return provision

            logger.warning(
                f"Version conflict on provision {provision_id} "
                f"(attempt {attempt}/{self._max_attempts})"
            )

        raise ProvisionConcurrencyError(provision_id.value, self._max_attempts)
