"""PostgreSQL implementation of Snippet repository."""

from typing import Optional

from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from twk.domain.model import Snippet
from twk.domain.repository import SnippetRepository
from twk.domain.value import CategoryId, SnippetId
from twk.persistence.mappers import row_to_snippet, snippet_to_dict
from twk.persistence.tables import snippets_table


class PostgresSnippetRepository(SnippetRepository):
    """PostgreSQL implementation of SnippetRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        """Find a snippet by ID."""
        stmt = select(snippets_table).where(snippets_table.c.id == snippet_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_snippet(row._asdict()) if row else None

    async def find_by_category(
        self, category_id: CategoryId, limit: int = 25, offset: int = 0
    ) -> list[Snippet]:
        """List a category's snippets, newest first."""
        return await self._find_page(
            snippets_table.c.category_id == category_id, limit, offset
        )

    async def find_recent(self, limit: int = 25, offset: int = 0) -> list[Snippet]:
        """List all snippets, newest first."""
        return await self._find_page(None, limit, offset)

    async def find_predictions(
        self, limit: int = 25, offset: int = 0
    ) -> list[Snippet]:
        """List prediction snippets, newest first."""
        return await self._find_page(
            snippets_table.c.is_prediction.is_(True), limit, offset
        )

    async def _find_page(
        self, condition: Optional[ColumnElement[bool]], limit: int, offset: int
    ) -> list[Snippet]:
        stmt = select(snippets_table)
        if condition is not None:
            stmt = stmt.where(condition)
        stmt = (
            stmt.order_by(snippets_table.c.created_at.desc()).limit(limit).offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_snippet(row._asdict()) for row in result.fetchall()]

    async def save(self, snippet: Snippet) -> Snippet:
        """Save a snippet (create or update)."""
        existing = await self.find_by_id(snippet.id)

        snippet_dict = snippet_to_dict(snippet)

        if existing:
            stmt = (
                snippets_table.update()
                .where(snippets_table.c.id == snippet.id)
                .values(**snippet_dict)
            )
        else:
            stmt = snippets_table.insert().values(**snippet_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return snippet

    async def delete(self, snippet_id: SnippetId) -> bool:
        """Delete a snippet."""
        stmt = delete(snippets_table).where(snippets_table.c.id == snippet_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
