"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from twk.domain.model.category import Category
from twk.domain.value import CategoryId


class CategoryRepository(ABC):
    """Repository interface for Category entity."""

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save or update a category.

        Args:
            category: Category to save

        Returns:
            Saved category
        """
        pass

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID.

        Args:
            category_id: Category identifier

        Returns:
            Category if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find category by its exact name.

        Args:
            name: Category name

        Returns:
            Category if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> list[Category]:
        """Find all categories, ordered by name.

        Args:
            limit: Maximum number of categories to return
        """
        pass
