"""Time zone name resolution.

Names are resolved against the legacy alias table first and then looked up
as IANA identifiers in the zone database. Resolved definitions are cached by
canonical name and shared for the life of the process.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import logfire

from twk.tztime.aliases import TIME_ZONE_ALIASES
from twk.tztime.error import UnknownTimeZoneError

if TYPE_CHECKING:
    from twk.tztime.builder import LocalTimeBuilder

UTC_ZONE_NAME = "UTC"


class TimeZoneRegistry:
    """Resolves zone names to ``ZoneInfo`` definitions.

    The registry never falls back to UTC for an unknown name; callers get an
    ``UnknownTimeZoneError`` instead. ``default_time_zone`` is the zone used
    by ``default_builder`` and is expected to come from configuration.
    """

    def __init__(
        self,
        aliases: Mapping[str, str] = TIME_ZONE_ALIASES,
        default_time_zone: str = UTC_ZONE_NAME,
    ) -> None:
        self._aliases = aliases
        self._cache: dict[str, ZoneInfo] = {}
        self.default_time_zone = default_time_zone
        # Fail at startup rather than on first use
        self.resolve(default_time_zone)

    def canonical_name(self, name: str) -> str:
        """Return the IANA identifier a name stands for (alias or canonical)."""
        return self._aliases.get(name, name)

    def resolve(self, name: str) -> ZoneInfo:
        """Resolve ``name`` to a zone definition.

        Args:
            name: Legacy alias (``"Eastern Time (US & Canada)"``) or IANA
                identifier (``"America/New_York"``)

        Returns:
            The shared zone definition

        Raises:
            UnknownTimeZoneError: If the name cannot be resolved
        """
        if not isinstance(name, str) or not name:
            raise UnknownTimeZoneError(name)

        canonical = self.canonical_name(name)
        zone = self._cache.get(canonical)
        if zone is not None:
            return zone

        try:
            zone = ZoneInfo(canonical)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise UnknownTimeZoneError(name) from e

        logfire.debug("Time zone resolved", name=name, canonical=canonical)
        # setdefault keeps the first stored definition if two callers race
        return self._cache.setdefault(canonical, zone)

    def is_known(self, name: str) -> bool:
        """Check whether a name resolves without raising."""
        try:
            self.resolve(name)
        except UnknownTimeZoneError:
            return False
        return True

    def aliases(self) -> Mapping[str, str]:
        """The alias table consulted before canonical lookup."""
        return self._aliases

    def builder(self, name: Optional[str] = None) -> "LocalTimeBuilder":
        """Create a builder for ``name``, or for the default zone."""
        from twk.tztime.builder import LocalTimeBuilder

        return LocalTimeBuilder(name or self.default_time_zone, registry=self)

    def default_builder(self) -> "LocalTimeBuilder":
        """Create a builder for the configured default zone."""
        return self.builder(self.default_time_zone)


_default_registry: Optional[TimeZoneRegistry] = None


def get_registry() -> TimeZoneRegistry:
    """The process-wide registry with the built-in alias table and UTC default."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TimeZoneRegistry()
    return _default_registry
