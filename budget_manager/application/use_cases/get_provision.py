"""引当取得ユースケース."""
from budget_manager.domain.entities import Provision
from budget_manager.domain.identifiers import ProvisionId
from budget_manager.domain.ports import ProvisionRepository


class ProvisionNotFoundError(Exception):
    """引当が見つからないエラー."""

    def __init__(self, provision_id: str) -> None:
        """初期化."""
        super().__init__(f'Provision with id "{provision_id}" not found')
        self.provision_id = provision_id


class GetProvisionUseCase:
    """引当取得ユースケース."""

    def __init__(self, provision_repository: ProvisionRepository) -> None:
        """初期化."""
        self._provision_repository = provision_repository

    def execute(self, provision_id: str) -> Provision:
        """引当を取得する."""
        provision = self._provision_repository.find_by_id(ProvisionId(provision_id))
        if provision is None:
            raise ProvisionNotFoundError(provision_id)
        return provision
