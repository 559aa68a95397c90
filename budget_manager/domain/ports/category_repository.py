"""カテゴリリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Category
from ..identifiers import CategoryId
from ..value_objects import Period


class CategoryRepository(ABC):
    """カテゴリリポジトリのインターフェース."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """カテゴリを保存する."""
        pass

    @abstractmethod
    def find_by_id(self, category_id: CategoryId) -> Category | None:
        """カテゴリIDで検索する."""
        pass

    @abstractmethod
    def find_all(self) -> list[Category]:
        """すべてのカテゴリを取得する."""
        pass

    @abstractmethod
    def find_by_period(self, period: Period) -> list[Category]:
        """期間で検索する."""
        pass

    @abstractmethod
    def delete(self, category_id: CategoryId) -> None:
        """カテゴリを削除する."""
        pass
