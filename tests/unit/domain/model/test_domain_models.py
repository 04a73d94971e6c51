"""Unit tests for domain entities."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from twk.domain.model import Category
from twk.domain.value import CategoryId
from twk.tztime import LocalTime
from tests.conftest import make_snippet, make_user


class TestSnippet:
    """Snippet validation rules."""

    def test_content_is_required(self):
        with pytest.raises(ValidationError):
            make_snippet(content="")

    def test_content_limit(self):
        make_snippet(content="x" * 1000)
        with pytest.raises(ValidationError):
            make_snippet(content="x" * 1001)

    def test_prediction_needs_expiry(self):
        with pytest.raises(ValidationError, match="expires_at"):
            make_snippet(is_prediction=True)

    def test_prediction_with_expiry(self):
        expires = datetime.now(timezone.utc) + timedelta(days=30)

        snippet = make_snippet(is_prediction=True, expires_at=expires)

        assert snippet.expires_at == expires

    def test_is_immutable(self):
        snippet = make_snippet()

        with pytest.raises(ValidationError):
            snippet.content = "changed"


class TestUser:
    """User time zone accessors."""

    def test_local_created_at(self):
        created = datetime(2008, 3, 31, 1, 27, 19, tzinfo=timezone.utc)
        user = make_user(time_zone="Pacific Time (US & Canada)", created_at=created)

        local = user.local_created_at

        assert isinstance(local, LocalTime)
        assert str(local) == "2008-03-30 18:27:19 PDT"

    def test_local_last_login_at_is_none_before_login(self):
        user = make_user()

        assert user.local_last_login_at is None

    def test_time_zone_can_change(self):
        created = datetime(2008, 1, 1, 12, tzinfo=timezone.utc)
        user = make_user(created_at=created)
        assert user.local_created_at.hour == 12

        user.time_zone = "Eastern Time (US & Canada)"

        assert user.local_created_at.hour == 7


class TestCategory:
    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            Category(id=CategoryId(uuid4()), name="")

    def test_name(self):
        assert Category(id=CategoryId(uuid4()), name="Science").name == "Science"
