"""カテゴリ取得ユースケース."""
from budget_manager.domain.entities import Category
from budget_manager.domain.identifiers import CategoryId
from budget_manager.domain.ports import CategoryRepository


class CategoryNotFoundError(Exception):
    """カテゴリが見つからないエラー."""

    def __init__(self, category_id: str) -> None:
        """初期化."""
        super().__init__(f'Category with id "{category_id}" not found')
        self.category_id = category_id


class GetCategoryUseCase:
    """カテゴリ取得ユースケース."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        """初期化."""
        self._category_repository = category_repository

    def execute(self, category_id: str) -> Category:
        """カテゴリを取得する."""
        category = self._category_repository.find_by_id(CategoryId(category_id))
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category
