"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from twk.domain.model.user import User
from twk.domain.value import Login, UserId


class UserRepository(ABC):
    """Repository for User entity.

    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_login(self, login: Login) -> Optional[User]:
        """Find a user by login name."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
