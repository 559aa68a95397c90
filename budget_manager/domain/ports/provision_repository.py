"""引当リポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Provision
from ..identifiers import CategoryId, ProvisionId


class ProvisionRepository(ABC):
    """引当リポジトリのインターフェース."""

    @abstractmethod
    def save(self, provision: Provision) -> None:
        """引当を無条件に保存する.

        保存のたびに provision.version を1進める。
        """
        pass

    @abstractmethod
    def save_if_unchanged(self, provision: Provision, expected_version: int) -> bool:
        """保存済みの version が expected_version と一致する場合のみ保存する.

        比較と書き込みは不可分に行う。保存に成功すると provision.version は
        expected_version + 1 になる。

        Returns:
            保存できた場合 True、他の書き込みと競合した場合 False
        """
        pass

    @abstractmethod
    def find_by_id(self, provision_id: ProvisionId) -> Provision | None:
        """引当IDで検索する."""
        pass

    @abstractmethod
    def find_all(self) -> list[Provision]:
        """すべての引当を取得する."""
        pass

    @abstractmethod
    def find_by_category_id(self, category_id: CategoryId) -> list[Provision]:
        """カテゴリIDで検索する（期日の早い順）."""
        pass

    @abstractmethod
    def find_open(self) -> list[Provision]:
        """未消化の引当を取得する（期日の早い順）."""
        pass

    @abstractmethod
    def delete(self, provision_id: ProvisionId) -> None:
        """引当を削除する."""
        pass
