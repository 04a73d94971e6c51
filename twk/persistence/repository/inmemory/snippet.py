"""In-memory snippet repository for testing."""

from typing import Optional

from twk.domain.model.snippet import Snippet
from twk.domain.repository.snippet import SnippetRepository
from twk.domain.value import CategoryId, SnippetId


class InMemorySnippetRepository(SnippetRepository):
    """In-memory implementation of SnippetRepository for testing."""

    def __init__(self) -> None:
        self._snippets: dict[SnippetId, Snippet] = {}

    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        return self._snippets.get(snippet_id)

    async def find_by_category(
        self, category_id: CategoryId, limit: int = 25, offset: int = 0
    ) -> list[Snippet]:
        """List a category's snippets, newest first."""
        return self._page(
            [s for s in self._snippets.values() if s.category_id == category_id],
            limit,
            offset,
        )

    async def find_recent(self, limit: int = 25, offset: int = 0) -> list[Snippet]:
        return self._page(list(self._snippets.values()), limit, offset)

    async def find_predictions(
        self, limit: int = 25, offset: int = 0
    ) -> list[Snippet]:
        snippets = [s for s in self._snippets.values() if s.is_prediction]
        return self._page(snippets, limit, offset)

    @staticmethod
    def _page(snippets: list[Snippet], limit: int, offset: int) -> list[Snippet]:
        snippets.sort(key=lambda s: s.created_at, reverse=True)
        return snippets[offset : offset + limit]

    async def save(self, snippet: Snippet) -> Snippet:
        self._snippets[snippet.id] = snippet
        return snippet

    async def delete(self, snippet_id: SnippetId) -> bool:
        return self._snippets.pop(snippet_id, None) is not None
