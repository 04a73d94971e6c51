"""User use cases."""

from .localize_timestamp import (
    LocalizeTimestampRequest,
    LocalizeTimestampResponse,
    LocalizeTimestampUseCase,
)

__all__ = [
    "LocalizeTimestampRequest",
    "LocalizeTimestampResponse",
    "LocalizeTimestampUseCase",
]
