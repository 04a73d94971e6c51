"""In-memory category repository for testing."""

from typing import Optional

from twk.domain.model.category import Category
from twk.domain.repository.category import CategoryRepository
from twk.domain.value import CategoryId


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        self._categories: dict[CategoryId, Category] = {}
        self._name_index: dict[str, CategoryId] = {}

    async def save(self, category: Category) -> Category:
        previous = self._categories.get(category.id)
        if previous is not None:
            self._name_index.pop(previous.name, None)
        self._categories[category.id] = category
        self._name_index[category.name] = category.id
        return category

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        return self._categories.get(category_id)

    async def find_by_name(self, name: str) -> Optional[Category]:
        category_id = self._name_index.get(name)
        return self._categories.get(category_id) if category_id else None

    async def find_all(self, limit: int = 100) -> list[Category]:
        categories = sorted(self._categories.values(), key=lambda c: c.name)
        return categories[:limit]
