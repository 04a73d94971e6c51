"""Domain layer DI providers."""

from dishka import Scope, provide

from twk.config import VotingSettings
from twk.domain.repository import (
    CategoryRepository,
    SnippetRepository,
    UserRepository,
    VoteRepository,
)
from twk.domain.service import (
    CategoryService,
    SnippetService,
    UserService,
    VoteService,
)
from twk.tztime import TimeZoneRegistry
from twk.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(
        self, user_repository: UserRepository, registry: TimeZoneRegistry
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, registry=registry)

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(category_repository=category_repository)

    @provide
    def get_snippet_service(
        self,
        snippet_repository: SnippetRepository,
        vote_repository: VoteRepository,
        category_service: CategoryService,
    ) -> SnippetService:
        """Provide snippet domain service."""
        return SnippetService(
            snippet_repository=snippet_repository,
            vote_repository=vote_repository,
            category_service=category_service,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        snippet_service: SnippetService,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            snippet_service=snippet_service,
            empty_total=voting_settings.empty_total,
        )
