"""Vote domain service."""

from typing import Optional
from uuid import UUID, uuid4

import logfire

from twk.domain.error import NotFoundError
from twk.domain.model.vote import Vote
from twk.domain.repository import VoteRepository
from twk.domain.value import SnippetId, UserId, VoteableType, VoteId, VoteTally

from .base import Service
from .snippet_service import SnippetService


class VoteService(Service):
    """Domain service for vote operations.

    A user gets one vote per snippet. Voting again is ignored: the first vote
    stands and no error is raised.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        snippet_service: SnippetService,
        empty_total: float = 0.001,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            snippet_service: Snippet domain service
            empty_total: Total used for percentages when nobody has voted
        """
        self.vote_repository = vote_repository
        self.snippet_service = snippet_service
        self.empty_total = empty_total

    async def cast_vote(
        self, snippet_id: SnippetId, user_id: UserId, verdict: bool
    ) -> Optional[Vote]:
        """Record a user's verdict on a snippet.

        Args:
            snippet_id: Snippet ID
            user_id: Voter
            verdict: True for "true", False for "false"

        Returns:
            The stored vote, or None if the user had already voted

        Raises:
            NotFoundError: If the snippet does not exist
        """
        with logfire.span(
            "cast_vote",
            snippet_id=str(snippet_id),
            user_id=str(user_id),
            verdict=verdict,
        ):
            snippet = await self.snippet_service.get_snippet(snippet_id)
            if not snippet:
                logfire.warn("Vote on non-existent snippet", snippet_id=str(snippet_id))
                raise NotFoundError("Snippet", str(snippet_id))

            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                voteable_type=VoteableType.SNIPPET,
                voteable_id=UUID(str(snippet_id)),
                verdict=verdict,
            )

            if not await self.vote_repository.add_if_absent(vote):
                logfire.info(
                    "Duplicate vote ignored",
                    user_id=str(user_id),
                    snippet_id=str(snippet_id),
                )
                return None

            logfire.info(
                "Vote cast",
                vote_id=str(vote.id),
                snippet_id=str(snippet_id),
                verdict=verdict,
            )
            return vote

    async def votes_for(self, snippet_id: SnippetId) -> int:
        """Number of "true" votes."""
        return await self.vote_repository.count_by_voteable(
            VoteableType.SNIPPET, snippet_id, verdict=True
        )

    async def votes_against(self, snippet_id: SnippetId) -> int:
        """Number of "false" votes."""
        return await self.vote_repository.count_by_voteable(
            VoteableType.SNIPPET, snippet_id, verdict=False
        )

    async def votes_count(self, snippet_id: SnippetId) -> int:
        return await self.vote_repository.count_by_voteable(
            VoteableType.SNIPPET, snippet_id
        )

    async def find_vote(
        self, snippet_id: SnippetId, user_id: UserId
    ) -> Optional[Vote]:
        return await self.vote_repository.find_by_user_and_voteable(
            user_id, VoteableType.SNIPPET, snippet_id
        )

    async def voted_by_user(self, snippet_id: SnippetId, user_id: UserId) -> bool:
        """Whether the user has voted on the snippet either way."""
        return await self.find_vote(snippet_id, user_id) is not None

    async def voted_yes_by_user(
        self, snippet_id: SnippetId, user_id: UserId
    ) -> Optional[bool]:
        """The user's verdict, or None if they have not voted."""
        vote = await self.find_vote(snippet_id, user_id)
        return vote.verdict if vote else None

    async def users_who_voted(self, snippet_id: SnippetId) -> list[UserId]:
        """Voters on the snippet, in the order they voted."""
        votes = await self.vote_repository.find_by_voteable(
            VoteableType.SNIPPET, snippet_id
        )
        return [vote.user_id for vote in votes]

    async def find_votes_cast_by_user(self, user_id: UserId) -> list[Vote]:
        """All of a user's snippet votes, newest first."""
        return await self.vote_repository.find_by_user(
            user_id, voteable_type=VoteableType.SNIPPET
        )

    async def tally(self, snippet_id: SnippetId) -> VoteTally:
        """Yes/no counts and percentages for a snippet."""
        with logfire.span("vote_service.tally", snippet_id=str(snippet_id)):
            yes = await self.votes_for(snippet_id)
            no = await self.votes_against(snippet_id)
            return VoteTally(yes=yes, no=no, empty_total=self.empty_total)
