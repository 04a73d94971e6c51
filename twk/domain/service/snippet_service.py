"""Snippet domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from twk.domain.model import Snippet
from twk.domain.repository import SnippetRepository, VoteRepository
from twk.domain.value import CategoryId, SnippetId, UserId, VoteableType

from .base import Service
from .category_service import CategoryService

# Snippets per listing page
PAGE_SIZE = 25


class SnippetService(Service):
    """Domain service for snippet operations."""

    def __init__(
        self,
        snippet_repository: SnippetRepository,
        vote_repository: VoteRepository,
        category_service: CategoryService,
    ) -> None:
        """Initialize snippet service.

        Args:
            snippet_repository: Snippet repository
            vote_repository: Vote repository, for removing a snippet's votes
            category_service: Category service, for resolving categories
        """
        self.snippet_repository = snippet_repository
        self.vote_repository = vote_repository
        self.category_service = category_service

    async def create_snippet(
        self,
        user_id: UserId,
        content: str,
        category_id: Optional[CategoryId] = None,
        is_prediction: bool = False,
        expires_at: Optional[datetime] = None,
    ) -> Snippet:
        """Create and store a snippet.

        Args:
            user_id: Author
            content: The claim, 1-1000 characters
            category_id: Optional category
            is_prediction: Whether the claim is about the future
            expires_at: When a prediction resolves; required for predictions

        Returns:
            The stored snippet

        Raises:
            NotFoundError: If ``category_id`` names no category
            pydantic.ValidationError: If content or expiry are invalid
        """
        with logfire.span(
            "snippet_service.create_snippet",
            user_id=str(user_id),
            is_prediction=is_prediction,
        ):
            if category_id is not None:
                await self.category_service.get_category(category_id)
            snippet = Snippet(
                id=SnippetId(uuid4()),
                user_id=user_id,
                category_id=category_id,
                content=content,
                is_prediction=is_prediction,
                expires_at=expires_at,
            )
            saved = await self.snippet_repository.save(snippet)
            logfire.info("Snippet created", snippet_id=str(saved.id))
            return saved

    async def get_snippet(self, snippet_id: SnippetId) -> Optional[Snippet]:
        """Get a snippet by ID.

        Returns:
            Snippet if found, None otherwise
        """
        with logfire.span("snippet_service.get_snippet", snippet_id=str(snippet_id)):
            snippet = await self.snippet_repository.find_by_id(snippet_id)
            if not snippet:
                logfire.warn("Snippet not found", snippet_id=str(snippet_id))
            return snippet

    async def delete_snippet(self, snippet_id: SnippetId) -> bool:
        """Delete a snippet and its votes.

        Returns:
            True if deleted, False if it did not exist
        """
        with logfire.span(
            "snippet_service.delete_snippet", snippet_id=str(snippet_id)
        ):
            deleted = await self.snippet_repository.delete(snippet_id)
            if deleted:
                removed = await self.vote_repository.delete_by_voteable(
                    VoteableType.SNIPPET, snippet_id
                )
                logfire.info(
                    "Snippet deleted", snippet_id=str(snippet_id), votes_removed=removed
                )
            else:
                logfire.warn("Snippet to delete not found", snippet_id=str(snippet_id))
            return deleted

    async def list_by_category(
        self, category_id: CategoryId, limit: int = PAGE_SIZE, offset: int = 0
    ) -> list[Snippet]:
        """List a category's snippets, newest first."""
        with logfire.span(
            "snippet_service.list_by_category",
            category_id=str(category_id),
            limit=limit,
            offset=offset,
        ):
            return await self.snippet_repository.find_by_category(
                category_id, limit=limit, offset=offset
            )

    async def list_by_category_name(
        self, name: str, limit: int = PAGE_SIZE, offset: int = 0
    ) -> list[Snippet]:
        """List the snippets of the category called ``name``, newest first.

        Raises:
            NotFoundError: If no category has this name
        """
        category = await self.category_service.get_by_name(name)
        return await self.list_by_category(category.id, limit=limit, offset=offset)

    async def list_recent(
        self, limit: int = PAGE_SIZE, offset: int = 0
    ) -> list[Snippet]:
        """List all snippets, newest first."""
        with logfire.span("snippet_service.list_recent", limit=limit, offset=offset):
            return await self.snippet_repository.find_recent(limit=limit, offset=offset)

    async def list_predictions(
        self, limit: int = PAGE_SIZE, offset: int = 0
    ) -> list[Snippet]:
        """List prediction snippets, newest first."""
        with logfire.span(
            "snippet_service.list_predictions", limit=limit, offset=offset
        ):
            return await self.snippet_repository.find_predictions(
                limit=limit, offset=offset
            )
