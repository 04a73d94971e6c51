"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from twk.domain.model.vote import Vote
from twk.domain.value import UserId, VoteableType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_user_and_voteable(
        self,
        user_id: UserId,
        voteable_type: VoteableType,
        voteable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            voteable_type: Type of item
            voteable_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, voteable_type: Optional[VoteableType] = None
    ) -> list[Vote]:
        """Find all votes cast by a user, newest first.

        Args:
            user_id: The user's ID
            voteable_type: Only votes on this type of item, if given

        Returns:
            List of votes by the user
        """
        pass

    @abstractmethod
    async def find_by_voteable(
        self, voteable_type: VoteableType, voteable_id: UUID
    ) -> list[Vote]:
        """Find all votes on a specific item, oldest first."""
        pass

    @abstractmethod
    async def add_if_absent(self, vote: Vote) -> bool:
        """Store ``vote`` unless its user already voted on the item.

        The check and the insert are one atomic step, so concurrent requests
        from the same user cannot both succeed.

        Args:
            vote: The vote to save

        Returns:
            True if the vote was stored, False if one already existed
        """
        pass

    @abstractmethod
    async def count_by_voteable(
        self,
        voteable_type: VoteableType,
        voteable_id: UUID,
        verdict: Optional[bool] = None,
    ) -> int:
        """Count votes on an item, optionally only those with ``verdict``."""
        pass

    @abstractmethod
    async def delete_by_voteable(
        self, voteable_type: VoteableType, voteable_id: UUID
    ) -> int:
        """Delete every vote on an item.

        Returns:
            Number of votes deleted
        """
        pass
