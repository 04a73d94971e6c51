"""Unit tests for LocalizeTimestampUseCase."""

from datetime import datetime, timedelta, timezone

import pytest

from twk.application.usecase.user import (
    LocalizeTimestampRequest,
    LocalizeTimestampUseCase,
)
from twk.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

INSTANT = datetime(2007, 12, 13, 20, 36, 26)


class TestLocalizeTimestamp:
    """Formats of a UTC instant in the user's zone."""

    @pytest.mark.asyncio
    async def test_default_display_format(self, unit_env):
        use_case = await unit_env.get(LocalizeTimestampUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(
            make_user("lee", time_zone="Eastern Time (US & Canada)")
        )

        response = await use_case.execute(
            LocalizeTimestampRequest(user_id=str(user.id), instant=INSTANT)
        )

        assert response.text == "2007-12-13 03:36p EST"
        assert response.time_zone == "America/New_York"
        assert response.abbreviation == "EST"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "fmt,expected",
        [
            ("rfc2822", "Thu, 13 Dec 2007 15:36:26 -0500"),
            ("xmlschema", "2007-12-13T15:36:26-05:00"),
            ("httpdate", "Thu, 13 Dec 2007 20:36:26 GMT"),
        ],
    )
    async def test_wire_formats(self, unit_env, fmt, expected):
        use_case = await unit_env.get(LocalizeTimestampUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(
            make_user("lee", time_zone="Eastern Time (US & Canada)")
        )

        response = await use_case.execute(
            LocalizeTimestampRequest(user_id=str(user.id), instant=INSTANT, format=fmt)
        )

        assert response.text == expected

    @pytest.mark.asyncio
    async def test_custom_pattern(self, unit_env):
        use_case = await unit_env.get(LocalizeTimestampUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("lee", time_zone="Tokyo"))

        response = await use_case.execute(
            LocalizeTimestampRequest(
                user_id=str(user.id), instant=INSTANT, pattern="%H:%M %Z (%%Z)"
            )
        )

        assert response.text == "05:36 JST (%Z)"

    @pytest.mark.asyncio
    async def test_anonymous_uses_default_zone(self, unit_env):
        use_case = await unit_env.get(LocalizeTimestampUseCase)

        response = await use_case.execute(
            LocalizeTimestampRequest(instant=INSTANT, format="xmlschema")
        )

        assert response.text == "2007-12-13T20:36:26Z"
        assert response.abbreviation == "UTC"

    @pytest.mark.asyncio
    async def test_aware_instant_keeps_its_offset(self, unit_env):
        use_case = await unit_env.get(LocalizeTimestampUseCase)

        request = LocalizeTimestampRequest.model_validate(
            {"instant": "2008-04-10T21:25:00+02:00", "format": "xmlschema"}
        )
        response = await use_case.execute(request)

        assert response.text == "2008-04-10T19:25:00Z"

    @pytest.mark.asyncio
    async def test_aware_instant_in_user_zone(self, unit_env):
        use_case = await unit_env.get(LocalizeTimestampUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(
            make_user("lee", time_zone="Pacific Time (US & Canada)")
        )

        response = await use_case.execute(
            LocalizeTimestampRequest(
                user_id=str(user.id),
                instant=datetime(
                    2008, 4, 10, 21, 25, tzinfo=timezone(timedelta(hours=2))
                ),
                format="rfc2822",
            )
        )

        assert response.text == "Thu, 10 Apr 2008 12:25:00 -0700"
