"""Localize timestamp use case."""

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel

from twk.application.usecase.base import BaseUseCase
from twk.domain.service import UserService
from twk.domain.value import UserId

TimestampFormat = Literal["strftime", "rfc2822", "xmlschema", "httpdate"]


class LocalizeTimestampRequest(BaseModel):
    """Localize timestamp request.

    An aware ``instant`` is converted from its own offset; a naive one is
    read as UTC. ``pattern`` overrides the configured display pattern for
    the ``strftime`` format.
    """

    user_id: Optional[str] = None  # None for anonymous visitors
    instant: datetime
    format: TimestampFormat = "strftime"
    pattern: Optional[str] = None


class LocalizeTimestampResponse(BaseModel):
    """Localize timestamp response."""

    text: str
    time_zone: str
    abbreviation: str


class LocalizeTimestampUseCase(BaseUseCase):
    """Use case for showing a stored UTC time in a user's zone."""

    def __init__(self, user_service: UserService, display_format: str) -> None:
        """Initialize localize timestamp use case.

        Args:
            user_service: User domain service
            display_format: Default strftime pattern
        """
        self.user_service = user_service
        self.display_format = display_format

    async def execute(
        self, request: LocalizeTimestampRequest
    ) -> LocalizeTimestampResponse:
        """Execute localize timestamp flow.

        Raises:
            NotFoundError: If a user ID is given but no such user exists
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        builder = await self.user_service.local_time_builder_for(user_id)
        if request.instant.utcoffset() is not None:
            local = builder.convert(request.instant)
        else:
            local = builder.at_utc(request.instant)

        if request.format == "rfc2822":
            text = local.rfc2822()
        elif request.format == "xmlschema":
            text = local.xmlschema()
        elif request.format == "httpdate":
            text = local.httpdate()
        else:
            text = local.strftime(request.pattern or self.display_format)

        return LocalizeTimestampResponse(
            text=text,
            time_zone=local.time_zone_name,
            abbreviation=local.time_zone_abbreviation,
        )
