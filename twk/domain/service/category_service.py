"""Category domain service."""

from uuid import uuid4

import logfire

from twk.domain.error import NotFoundError, ValidationError
from twk.domain.model import Category
from twk.domain.repository import CategoryRepository
from twk.domain.value import CategoryId

from .base import Service


class CategoryService(Service):
    """Domain service for category operations."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        """Initialize category service.

        Args:
            category_repository: Category repository
        """
        self.category_repository = category_repository

    async def create_category(self, name: str) -> Category:
        """Create a category.

        Args:
            name: Display name, 1-100 characters and unique

        Returns:
            The stored category

        Raises:
            ValidationError: If a category with this name already exists
            pydantic.ValidationError: If the name is empty or too long
        """
        with logfire.span("category_service.create_category", name=name):
            if await self.category_repository.find_by_name(name):
                logfire.warn("Duplicate category name", name=name)
                raise ValidationError(f"Category already exists: {name}")

            category = Category(id=CategoryId(uuid4()), name=name)
            saved = await self.category_repository.save(category)
            logfire.info("Category created", category_id=str(saved.id), name=name)
            return saved

    async def get_category(self, category_id: CategoryId) -> Category:
        """Get a category by ID.

        Raises:
            NotFoundError: If the category does not exist
        """
        category = await self.category_repository.find_by_id(category_id)
        if not category:
            raise NotFoundError("Category", str(category_id))
        return category

    async def get_by_name(self, name: str) -> Category:
        """Get a category by name.

        Raises:
            NotFoundError: If no category has this name
        """
        category = await self.category_repository.find_by_name(name)
        if not category:
            raise NotFoundError("Category", name)
        return category

    async def list_categories(self, limit: int = 100) -> list[Category]:
        """All categories, ordered by name."""
        with logfire.span("category_service.list_categories", limit=limit):
            categories = await self.category_repository.find_all(limit=limit)
            logfire.info("Categories retrieved", count=len(categories))
            return categories
