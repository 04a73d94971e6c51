"""Snippet repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from twk.domain.model.snippet import Snippet
from twk.domain.value import CategoryId, SnippetId


class SnippetRepository(ABC):
    """Repository for Snippet entity."""

    @abstractmethod
    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        """Find a snippet by ID.

        Args:
            snippet_id: The snippet's unique identifier

        Returns:
            The snippet if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_category(
        self, category_id: CategoryId, limit: int = 25, offset: int = 0
    ) -> list[Snippet]:
        """List a category's snippets, newest first."""
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 25, offset: int = 0) -> list[Snippet]:
        """List all snippets, newest first."""
        pass

    @abstractmethod
    async def find_predictions(
        self, limit: int = 25, offset: int = 0
    ) -> list[Snippet]:
        """List prediction snippets, newest first."""
        pass

    @abstractmethod
    async def save(self, snippet: Snippet) -> Snippet:
        """Save a snippet (create or update)."""
        pass

    @abstractmethod
    async def delete(self, snippet_id: SnippetId) -> bool:
        """Delete a snippet.

        Votes on the snippet are removed by the snippet service.

        Returns:
            True if a snippet was deleted, False if it did not exist
        """
        pass
