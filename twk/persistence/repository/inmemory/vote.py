"""In-memory vote repository for testing."""

import asyncio
from typing import Optional
from uuid import UUID

from twk.domain.model.vote import Vote
from twk.domain.repository.vote import VoteRepository
from twk.domain.value import UserId, VoteableType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    ``add_if_absent`` holds a lock across the duplicate check and the append,
    matching the unique constraint used in PostgreSQL.
    """

    def __init__(self) -> None:
        self._votes: list[Vote] = []
        self._lock = asyncio.Lock()

    def _matches(
        self, vote: Vote, voteable_type: VoteableType, voteable_id: UUID
    ) -> bool:
        return vote.voteable_type == voteable_type and vote.voteable_id == UUID(
            str(voteable_id)
        )

    async def find_by_user_and_voteable(
        self,
        user_id: UserId,
        voteable_type: VoteableType,
        voteable_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and voteable item."""
        for vote in self._votes:
            if vote.user_id == user_id and self._matches(
                vote, voteable_type, voteable_id
            ):
                return vote
        return None

    async def find_by_user(
        self, user_id: UserId, voteable_type: Optional[VoteableType] = None
    ) -> list[Vote]:
        """Find all votes by a user, newest first."""
        votes = [
            v
            for v in self._votes
            if v.user_id == user_id
            and (voteable_type is None or v.voteable_type == voteable_type)
        ]
        # Stable sort keeps later inserts first among equal timestamps
        return sorted(reversed(votes), key=lambda v: v.created_at, reverse=True)

    async def find_by_voteable(
        self, voteable_type: VoteableType, voteable_id: UUID
    ) -> list[Vote]:
        """Find all votes on an item, in insertion order."""
        return [v for v in self._votes if self._matches(v, voteable_type, voteable_id)]

    async def add_if_absent(self, vote: Vote) -> bool:
        """Append the vote unless the user already voted on the item."""
        async with self._lock:
            existing = await self.find_by_user_and_voteable(
                vote.user_id, vote.voteable_type, vote.voteable_id
            )
            if existing:
                return False
            self._votes.append(vote)
            return True

    async def count_by_voteable(
        self,
        voteable_type: VoteableType,
        voteable_id: UUID,
        verdict: Optional[bool] = None,
    ) -> int:
        """Count votes on an item."""
        return sum(
            1
            for v in self._votes
            if self._matches(v, voteable_type, voteable_id)
            and (verdict is None or v.verdict == verdict)
        )

    async def delete_by_voteable(
        self, voteable_type: VoteableType, voteable_id: UUID
    ) -> int:
        """Delete every vote on an item."""
        kept = [v for v in self._votes if not self._matches(v, voteable_type, voteable_id)]
        removed = len(self._votes) - len(kept)
        self._votes = kept
        return removed
