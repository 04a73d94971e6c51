"""PostgreSQL implementation of Category repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from twk.domain.model import Category
from twk.domain.repository import CategoryRepository
from twk.domain.value import CategoryId
from twk.persistence.mappers import category_to_dict, row_to_category
from twk.persistence.tables import categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, category: Category) -> Category:
        """Save or update a category."""
        category_dict = category_to_dict(category)

        existing = await self.find_by_id(category.id)

        if existing:
            stmt = (
                update(categories_table)
                .where(categories_table.c.id == category.id)
                .values(**category_dict)
            )
        else:
            stmt = insert(categories_table).values(**category_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return category

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID."""
        stmt = select(categories_table).where(categories_table.c.id == category_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find category by name."""
        stmt = select(categories_table).where(categories_table.c.name == name)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_all(self, limit: int = 100) -> list[Category]:
        """Find all categories, ordered by name."""
        stmt = select(categories_table).order_by(categories_table.c.name).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_category(row._asdict()) for row in result.fetchall()]
