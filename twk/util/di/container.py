"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from pydantic import ValidationError

from twk.config import Settings
from twk.util.di import PROVIDERS, get_provider
from twk.util.error import ConfigurationError
from twk.util.logging import get_logger, setup_logging
from twk.util.observability import configure_logfire

logger = get_logger(__name__)


def load_settings() -> Settings:
    """Load settings from the environment.

    Raises:
        ConfigurationError: If a value is missing or invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Logging and Logfire are configured first, so failures while building
    the container are reported.

    Returns:
        Configured DI container with production providers

    Raises:
        ConfigurationError: If the settings are invalid
    """
    settings = load_settings()
    setup_logging(settings)
    configure_logfire(settings)

    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    container = make_async_container(*provider_instances)
    logger.info(
        "Container built: environment=%s, default_time_zone=%s",
        settings.environment,
        settings.time.default_time_zone,
    )
    return container
