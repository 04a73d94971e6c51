"""Get tally use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from twk.application.usecase.base import BaseUseCase
from twk.domain.service import VoteService
from twk.domain.value import SnippetId, UserId, VoteTally


class GetTallyRequest(BaseModel):
    """Get tally request."""

    snippet_id: str  # UUID string
    viewer_id: Optional[str] = None  # Logged-in user, if any


class GetTallyResponse(BaseModel):
    """Get tally response."""

    tally: VoteTally
    voted: bool = False
    voted_yes: Optional[bool] = None


class GetTallyUseCase(BaseUseCase):
    """Use case for showing a snippet's votes and the viewer's own vote."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetTallyRequest) -> GetTallyResponse:
        snippet_id = SnippetId(UUID(request.snippet_id))
        tally = await self.vote_service.tally(snippet_id)

        if request.viewer_id is None:
            return GetTallyResponse(tally=tally)

        viewer_id = UserId(UUID(request.viewer_id))
        voted_yes = await self.vote_service.voted_yes_by_user(snippet_id, viewer_id)
        return GetTallyResponse(
            tally=tally, voted=voted_yes is not None, voted_yes=voted_yes
        )
