"""In-memory user repository for testing."""

from typing import Optional

from twk.domain.model.user import User
from twk.domain.repository.user import UserRepository
from twk.domain.value import Login, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_login(self, login: Login) -> Optional[User]:
        """Find a user by their login."""
        for user in self._users.values():
            if user.login == login:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user."""
        self._users[user.id] = user
        return user
