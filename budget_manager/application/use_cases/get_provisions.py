"""引当一覧取得ユースケース."""
from __future__ import annotations

from budget_manager.domain.entities import Provision
from budget_manager.domain.identifiers import CategoryId
from budget_manager.domain.ports import ProvisionRepository


class GetProvisionsUseCase:
    """引当一覧取得ユースケース."""

    def __init__(self, provision_repository: ProvisionRepository) -> None:
        """初期化."""
        self._provision_repository = provision_repository

    def execute(
        self,
        category_id: str | None = None,
        only_open: bool = False,
    ) -> list[Provision]:
        """引当一覧を取得する.

        カテゴリ指定が未消化のみの指定より優先される。
        """
        if category_id:
            return self._provision_repository.find_by_category_id(CategoryId(category_id))
        if only_open:
            return self._provision_repository.find_open()
        return self._provision_repository.find_all()
