"""カテゴリリポジトリのインメモリ実装."""
import copy

from budget_manager.domain.entities import Category
from budget_manager.domain.identifiers import CategoryId
from budget_manager.domain.ports import CategoryRepository
from budget_manager.domain.value_objects import Period


class InMemoryCategoryRepository(CategoryRepository):
    """カテゴリリポジトリのインメモリ実装（保存・取得はコピーで行う）."""

    def __init__(self) -> None:
        """初期化."""
        self._categories: dict[str, Category] = {}

    def save(self, category: Category) -> None:
        """カテゴリを保存する."""
        self._categories[category.category_id.value] = copy.copy(category)

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        """カテゴリIDで検索する."""
        stored = self._categories.get(category_id.value)
        return copy.copy(stored) if stored is not None else None

    def find_all(self) -> list[Category]:
        """すべてのカテゴリを取得する（期間・名前順）."""
        categories = [copy.copy(c) for c in self._categories.values()]
        return sorted(categories, key=lambda c: (c.period.value, c.name))

    def find_by_period(self, period: Period) -> list[Category]:
        """期間で検索する."""
        return [c for c in self.find_all() if c.period == period]

    def delete(self, category_id: CategoryId) -> None:
        """カテゴリを削除する."""
        self._categories.pop(category_id.value, None)
