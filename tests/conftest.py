"""Test configuration and fixtures."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import logfire
import pytest

from twk.domain.model import Snippet, User
from twk.domain.value import Login, SnippetId, UserId

# Spans and events stay local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    login: str = "alice", time_zone: Optional[str] = None, **fields
) -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        login=Login(login),
        time_zone=time_zone,
        **fields,
    )


def make_snippet(author_id: Optional[UserId] = None, **fields) -> Snippet:
    """Build a snippet with a fresh ID and default content."""
    fields.setdefault("content", "The moon landing happened in 1969")
    return Snippet(
        id=SnippetId(uuid4()),
        user_id=author_id or UserId(uuid4()),
        **fields,
    )


@pytest.fixture
def utc_instant() -> datetime:
    """Thursday 2007-12-13 08:36:26 UTC."""
    return datetime(2007, 12, 13, 8, 36, 26, tzinfo=timezone.utc)
