"""Cast vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from twk.application.usecase.base import BaseUseCase
from twk.domain.service import UserService, VoteService
from twk.domain.value import SnippetId, UserId, VoteTally


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    snippet_id: str  # UUID string
    user_id: str  # Voter's user ID
    verdict: bool


class CastVoteResponse(BaseModel):
    """Cast vote response.

    ``cast`` is False when the user had already voted; the tally is returned
    either way.
    """

    cast: bool
    tally: VoteTally
    created_at: Optional[str] = None  # XML Schema time in the voter's zone


class CastVoteUseCase(BaseUseCase):
    """Use case for voting a snippet true or false."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Cast vote response with the updated tally

        Raises:
            NotFoundError: If the voter or the snippet does not exist
        """
        user_id = UserId(UUID(request.user_id))
        snippet_id = SnippetId(UUID(request.snippet_id))

        builder = await self.user_service.local_time_builder_for(user_id)
        vote = await self.vote_service.cast_vote(snippet_id, user_id, request.verdict)
        tally = await self.vote_service.tally(snippet_id)

        if vote is None:
            return CastVoteResponse(cast=False, tally=tally)

        return CastVoteResponse(
            cast=True,
            tally=tally,
            created_at=builder.at_utc(vote.created_at).xmlschema(),
        )
