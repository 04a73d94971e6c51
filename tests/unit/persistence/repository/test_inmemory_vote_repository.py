"""Unit tests for the in-memory vote repository."""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from twk.domain.model import Vote
from twk.domain.value import UserId, VoteableType, VoteId
from twk.persistence.repository.inmemory import InMemoryVoteRepository


def _vote(user_id, voteable_id, verdict=True, created_at=None) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id,
        voteable_id=voteable_id,
        verdict=verdict,
        created_at=created_at or datetime.now(timezone.utc),
    )


class TestAddIfAbsent:
    """The duplicate check and insert are one step."""

    @pytest.mark.asyncio
    async def test_first_vote_is_added(self):
        repo = InMemoryVoteRepository()
        vote = _vote(UserId(uuid4()), uuid4())

        assert await repo.add_if_absent(vote)
        assert await repo.find_by_user_and_voteable(
            vote.user_id, VoteableType.SNIPPET, vote.voteable_id
        ) == vote

    @pytest.mark.asyncio
    async def test_second_vote_is_refused(self):
        repo = InMemoryVoteRepository()
        user_id, item = UserId(uuid4()), uuid4()
        first = _vote(user_id, item, True)

        await repo.add_if_absent(first)
        added = await repo.add_if_absent(_vote(user_id, item, False))

        assert not added
        assert await repo.find_by_voteable(VoteableType.SNIPPET, item) == [first]

    @pytest.mark.asyncio
    async def test_concurrent_adds(self):
        repo = InMemoryVoteRepository()
        user_id, item = UserId(uuid4()), uuid4()

        results = await asyncio.gather(
            *(repo.add_if_absent(_vote(user_id, item)) for _ in range(20))
        )

        assert results.count(True) == 1
        assert await repo.count_by_voteable(VoteableType.SNIPPET, item) == 1


class TestQueries:
    @pytest.mark.asyncio
    async def test_count_by_verdict(self):
        repo = InMemoryVoteRepository()
        item = uuid4()
        for verdict in (True, False, True):
            await repo.add_if_absent(_vote(UserId(uuid4()), item, verdict))

        assert await repo.count_by_voteable(VoteableType.SNIPPET, item) == 3
        assert await repo.count_by_voteable(VoteableType.SNIPPET, item, True) == 2
        assert await repo.count_by_voteable(VoteableType.SNIPPET, item, False) == 1
        assert await repo.count_by_voteable(VoteableType.SNIPPET, uuid4()) == 0

    @pytest.mark.asyncio
    async def test_find_by_user_newest_first(self):
        repo = InMemoryVoteRepository()
        user_id = UserId(uuid4())
        now = datetime.now(timezone.utc)
        old = _vote(user_id, uuid4(), created_at=now - timedelta(days=2))
        new = _vote(user_id, uuid4(), created_at=now)
        middle = _vote(user_id, uuid4(), created_at=now - timedelta(days=1))
        for vote in (old, new, middle):
            await repo.add_if_absent(vote)

        assert await repo.find_by_user(user_id) == [new, middle, old]
        assert await repo.find_by_user(user_id, VoteableType.SNIPPET) == [
            new,
            middle,
            old,
        ]

    @pytest.mark.asyncio
    async def test_delete_by_voteable(self):
        repo = InMemoryVoteRepository()
        item, other = uuid4(), uuid4()
        for _ in range(2):
            await repo.add_if_absent(_vote(UserId(uuid4()), item))
        await repo.add_if_absent(_vote(UserId(uuid4()), other))

        removed = await repo.delete_by_voteable(VoteableType.SNIPPET, item)

        assert removed == 2
        assert await repo.count_by_voteable(VoteableType.SNIPPET, item) == 0
        assert await repo.count_by_voteable(VoteableType.SNIPPET, other) == 1
