"""User entity.

Users post snippets and vote on other users' snippets. Each user may pick a
time zone; timestamps are stored in UTC and shown in that zone.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from twk.domain.value import Login, UserId
from twk.tztime import TimeZoneElement


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(TimeZoneElement):
    """User account with a preferred time zone.

    Unlike the other entities, users are mutable so the time zone can be
    changed in place; ``local_created_at`` and ``local_last_login_at`` follow
    the change.
    """

    __local_time_fields__ = ("created_at", "last_login_at")

    id: UserId
    login: Login
    email: Optional[str] = None
    enabled: bool = True
    created_at: datetime = Field(default_factory=_utcnow)
    last_login_at: Optional[datetime] = None
