"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from twk.config import Settings, TimeSettings, VotingSettings
from twk.tztime import LocalTimeBuilder, TimeZoneRegistry
from twk.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_time_settings(self, settings: Settings) -> TimeSettings:
        return settings.time

    @provide(scope=Scope.APP)
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        return settings.voting

    @provide(scope=Scope.APP)
    def provide_time_zone_registry(self, time_settings: TimeSettings) -> TimeZoneRegistry:
        """Provide the zone registry with the configured default zone."""
        return TimeZoneRegistry(default_time_zone=time_settings.default_time_zone)

    @provide(scope=Scope.APP)
    def provide_default_local_time_builder(
        self, registry: TimeZoneRegistry
    ) -> LocalTimeBuilder:
        """Provide a builder for the configured default zone."""
        return registry.default_builder()
