"""Time zone aware local times.

Resolve zone names (IANA or legacy labels), build ``LocalTime`` values in a
zone, and format them for display and the wire.
"""

from twk.tztime.aliases import TIME_ZONE_ALIASES
from twk.tztime.builder import LocalTimeBuilder
from twk.tztime.element import TimeZoneElement
from twk.tztime.error import (
    InvalidCalendarFieldsError,
    MissingSourceZoneError,
    TimeZoneError,
    UnknownTimeZoneError,
)
from twk.tztime.local_time import LocalTime
from twk.tztime.period import TimeZonePeriod
from twk.tztime.registry import UTC_ZONE_NAME, TimeZoneRegistry, get_registry

__all__ = [
    "TIME_ZONE_ALIASES",
    "UTC_ZONE_NAME",
    "LocalTime",
    "LocalTimeBuilder",
    "TimeZoneElement",
    "TimeZonePeriod",
    "TimeZoneRegistry",
    "get_registry",
    # Errors
    "TimeZoneError",
    "UnknownTimeZoneError",
    "MissingSourceZoneError",
    "InvalidCalendarFieldsError",
]
