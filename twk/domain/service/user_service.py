"""User domain service."""

from datetime import datetime, timezone
from typing import Optional

import logfire

from twk.domain.error import NotFoundError
from twk.domain.model import User
from twk.domain.repository import UserRepository
from twk.domain.value import Login, UserId
from twk.tztime import LocalTimeBuilder, TimeZoneRegistry

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self, user_repository: UserRepository, registry: TimeZoneRegistry
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            registry: Zone registry; its default zone is used for anonymous visitors
        """
        self.user_repository = user_repository
        self.registry = registry

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_login(self, login: Login) -> Optional[User]:
        """Get user by login, or None."""
        with logfire.span("user_service.get_by_login", login=login.root):
            user = await self.user_repository.find_by_login(login)
            if not user:
                logfire.warn("User not found", login=login.root)
            return user

    async def save_user(self, user: User) -> User:
        with logfire.span("user_service.save_user", user_id=str(user.id)):
            return await self.user_repository.save(user)

    async def update_time_zone(
        self, user_id: UserId, time_zone: Optional[str]
    ) -> User:
        """Change a user's preferred zone.

        Args:
            user_id: User ID
            time_zone: Alias or IANA name; None clears it (times show in UTC)

        Raises:
            NotFoundError: If user not found
            UnknownTimeZoneError: If the zone name does not resolve
        """
        with logfire.span(
            "user_service.update_time_zone", user_id=str(user_id), time_zone=time_zone
        ):
            user = await self.get_by_id(user_id)
            user.time_zone = time_zone
            saved = await self.user_repository.save(user)
            logfire.info(
                "User time zone updated", user_id=str(user_id), time_zone=time_zone
            )
            return saved

    async def record_login(
        self, user_id: UserId, at: Optional[datetime] = None
    ) -> User:
        """Stamp the user's last login time (UTC)."""
        with logfire.span("user_service.record_login", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            user.last_login_at = at or datetime.now(timezone.utc)
            return await self.user_repository.save(user)

    async def local_time_builder_for(
        self, user_id: Optional[UserId]
    ) -> LocalTimeBuilder:
        """Builder for the user's zone; the configured default when anonymous.

        A user with no stored zone gets UTC, matching the entity's own
        ``local_*`` accessors.

        Raises:
            NotFoundError: If a user ID is given but no such user exists
        """
        if user_id is None:
            return self.registry.default_builder()
        user = await self.get_by_id(user_id)
        if not user.time_zone:
            return LocalTimeBuilder.for_utc(self.registry)
        return self.registry.builder(user.time_zone)
