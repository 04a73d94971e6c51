"""Application layer DI providers."""

from dishka import Scope, provide

from twk.application.usecase.user import LocalizeTimestampUseCase
from twk.application.usecase.vote import CastVoteUseCase, GetTallyUseCase
from twk.config import TimeSettings
from twk.domain.service import UserService, VoteService
from twk.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_tally_use_case(self, vote_service: VoteService) -> GetTallyUseCase:
        """Provide get tally use case."""
        return GetTallyUseCase(vote_service=vote_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_localize_timestamp_use_case(
        self, user_service: UserService, time_settings: TimeSettings
    ) -> LocalizeTimestampUseCase:
        """Provide localize timestamp use case."""
        return LocalizeTimestampUseCase(
            user_service=user_service, display_format=time_settings.display_format
        )
