"""PostgreSQL implementation of Vote repository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from twk.domain.model import Vote
from twk.domain.repository import VoteRepository
from twk.domain.value import UserId, VoteableType
from twk.persistence.mappers import row_to_vote, vote_to_dict
from twk.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _on_voteable(self, voteable_type: VoteableType, voteable_id: UUID):
        return and_(
            votes_table.c.voteable_type == voteable_type.value,
            votes_table.c.voteable_id == voteable_id,
        )

    async def find_by_user_and_voteable(
        self,
        user_id: UserId,
        voteable_type: VoteableType,
        voteable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            votes_table.c.user_id == user_id,
            self._on_voteable(voteable_type, voteable_id),
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user(
        self, user_id: UserId, voteable_type: Optional[VoteableType] = None
    ) -> list[Vote]:
        """Find all votes by a user, newest first."""
        stmt = select(votes_table).where(votes_table.c.user_id == user_id)
        if voteable_type is not None:
            stmt = stmt.where(votes_table.c.voteable_type == voteable_type.value)
        stmt = stmt.order_by(votes_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_voteable(
        self, voteable_type: VoteableType, voteable_id: UUID
    ) -> list[Vote]:
        """Find all votes on an item, oldest first."""
        stmt = (
            select(votes_table)
            .where(self._on_voteable(voteable_type, voteable_id))
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    def add_if_absent_statement(self, vote: Vote):
        """INSERT that does nothing when the user already voted on the item."""
        return (
            insert(votes_table)
            .values(**vote_to_dict(vote))
            .on_conflict_do_nothing(constraint="unique_vote")
            .returning(votes_table.c.id)
        )

    async def add_if_absent(self, vote: Vote) -> bool:
        """Insert the vote unless the unique constraint already holds one."""
        result = await self.session.execute(self.add_if_absent_statement(vote))
        inserted = result.scalar_one_or_none() is not None
        await self.session.flush()
        return inserted

    async def count_by_voteable(
        self,
        voteable_type: VoteableType,
        voteable_id: UUID,
        verdict: Optional[bool] = None,
    ) -> int:
        """Count votes on an item."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(self._on_voteable(voteable_type, voteable_id))
        )
        if verdict is not None:
            stmt = stmt.where(votes_table.c.verdict == verdict)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def delete_by_voteable(
        self, voteable_type: VoteableType, voteable_id: UUID
    ) -> int:
        """Delete every vote on an item."""
        stmt = delete(votes_table).where(self._on_voteable(voteable_type, voteable_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
