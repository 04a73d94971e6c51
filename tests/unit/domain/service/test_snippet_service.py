"""Unit tests for SnippetService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from twk.domain.error import NotFoundError
from twk.domain.service import CategoryService, SnippetService, VoteService
from twk.domain.value import CategoryId, SnippetId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateSnippet:
    """Tests for create_snippet."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, unit_env):
        service = await unit_env.get(SnippetService)
        author = UserId(uuid4())

        snippet = await service.create_snippet(author, "Water boils at 100C")

        assert snippet.user_id == author
        assert await service.get_snippet(snippet.id) == snippet

    @pytest.mark.asyncio
    async def test_prediction_requires_expiry(self, unit_env):
        service = await unit_env.get(SnippetService)

        with pytest.raises(ValidationError):
            await service.create_snippet(
                UserId(uuid4()), "It will rain tomorrow", is_prediction=True
            )

    @pytest.mark.asyncio
    async def test_prediction(self, unit_env):
        service = await unit_env.get(SnippetService)
        expires = datetime.now(timezone.utc) + timedelta(days=1)

        snippet = await service.create_snippet(
            UserId(uuid4()),
            "It will rain tomorrow",
            is_prediction=True,
            expires_at=expires,
        )

        assert snippet.is_prediction
        assert snippet.expires_at == expires

    @pytest.mark.asyncio
    async def test_get_missing_snippet_returns_none(self, unit_env):
        service = await unit_env.get(SnippetService)

        assert await service.get_snippet(SnippetId(uuid4())) is None


class TestDeleteSnippet:
    @pytest.mark.asyncio
    async def test_delete_removes_votes(self, unit_env):
        service = await unit_env.get(SnippetService)
        vote_service = await unit_env.get(VoteService)
        snippet = await service.create_snippet(UserId(uuid4()), "Cats are mammals")
        await vote_service.cast_vote(snippet.id, UserId(uuid4()), True)

        deleted = await service.delete_snippet(snippet.id)

        assert deleted
        assert await service.get_snippet(snippet.id) is None
        assert await vote_service.votes_count(snippet.id) == 0

    @pytest.mark.asyncio
    async def test_delete_missing_snippet(self, unit_env):
        service = await unit_env.get(SnippetService)

        assert not await service.delete_snippet(SnippetId(uuid4()))


class TestListByCategory:
    @pytest.mark.asyncio
    async def test_newest_first_with_paging(self, unit_env):
        service = await unit_env.get(SnippetService)
        category_service = await unit_env.get(CategoryService)
        category = await category_service.create_category("Science")
        created = []
        for i in range(3):
            created.append(
                await service.create_snippet(
                    UserId(uuid4()), f"Claim {i}", category_id=category.id
                )
            )
        await service.create_snippet(UserId(uuid4()), "Uncategorized")

        listed = await service.list_by_category(category.id)
        page = await service.list_by_category(category.id, limit=1, offset=1)

        assert len(listed) == 3
        assert [s.created_at for s in listed] == sorted(
            (s.created_at for s in created), reverse=True
        )
        assert page == listed[1:2]

    @pytest.mark.asyncio
    async def test_by_category_name(self, unit_env):
        service = await unit_env.get(SnippetService)
        category_service = await unit_env.get(CategoryService)
        politics = await category_service.create_category("Politics")
        await category_service.create_category("Sports")
        snippet = await service.create_snippet(
            UserId(uuid4()), "Turnout was 60%", category_id=politics.id
        )

        assert await service.list_by_category_name("Politics") == [snippet]
        assert await service.list_by_category_name("Sports") == []

    @pytest.mark.asyncio
    async def test_unknown_category_name(self, unit_env):
        service = await unit_env.get(SnippetService)

        with pytest.raises(NotFoundError):
            await service.list_by_category_name("Astrology")

    @pytest.mark.asyncio
    async def test_create_in_unknown_category(self, unit_env):
        service = await unit_env.get(SnippetService)

        with pytest.raises(NotFoundError):
            await service.create_snippet(
                UserId(uuid4()), "Pluto is a planet", category_id=CategoryId(uuid4())
            )


class TestListRecent:
    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        service = await unit_env.get(SnippetService)
        older = await service.create_snippet(UserId(uuid4()), "First claim")
        newer = await service.create_snippet(UserId(uuid4()), "Second claim")
        backdated = newer.created_at - timedelta(hours=1)
        await service.snippet_repository.save(
            older.model_copy(update={"created_at": backdated})
        )

        listed = await service.list_recent()

        assert [s.id for s in listed] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_pages_of_twenty_five(self, unit_env):
        service = await unit_env.get(SnippetService)
        for i in range(30):
            await service.create_snippet(UserId(uuid4()), f"Claim {i}")

        first = await service.list_recent()
        second = await service.list_recent(offset=25)

        assert len(first) == 25
        assert len(second) == 5


class TestListPredictions:
    @pytest.mark.asyncio
    async def test_only_predictions(self, unit_env):
        service = await unit_env.get(SnippetService)
        expires = datetime.now(timezone.utc) + timedelta(days=7)
        prediction = await service.create_snippet(
            UserId(uuid4()),
            "It will snow next week",
            is_prediction=True,
            expires_at=expires,
        )
        await service.create_snippet(UserId(uuid4()), "It snowed last week")

        assert await service.list_predictions() == [prediction]
