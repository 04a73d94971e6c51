"""Builders for ``LocalTime`` values.

A ``LocalTimeBuilder`` is bound to one time zone and creates ``LocalTime``
values in it. The zone is given either as a name, IANA or legacy alias, or as
a ``ZoneInfo`` definition.

    builder = LocalTimeBuilder("America/New_York")
    builder.time_zone_name                         # 'America/New_York'

    builder = LocalTimeBuilder("Eastern Time (US & Canada)")
    builder.time_zone_name                         # 'Eastern Time (US & Canada)'

``now`` creates the current time and ``today`` the current day at 0:00, both
in the builder's zone. ``local`` takes fields already expressed in the zone;
``utc`` takes fields in Universal Time and converts them.

    builder.utc(2007, 12, 13, 3, 36, 26)     # 2007-12-12 22:36:26 EST
    builder.local(2007, 12, 13, 3, 36, 26)   # 2007-12-13 03:36:26 EST

``at_local`` and ``at_utc`` convert existing values. Both ignore whatever
zone the value carries: ``at_local`` reads its fields as local time,
``at_utc`` reads them as Universal Time. A ``LocalTime`` argument is always
converted properly from its own zone.

    time = datetime(2007, 12, 13, 3, 36, 26)
    builder.at_utc(time)     # 2007-12-12 22:36:26 EST
    builder.at_local(time)   # 2007-12-13 03:36:26 EST

``convert`` moves a value from another zone into this one, taking the source
zone from the value or from an explicit ``from_time_zone``:

    builder = LocalTimeBuilder("America/Los_Angeles")
    time = datetime(2008, 4, 10, 19, 25, tzinfo=timezone.utc)
    builder.convert(time)                        # 2008-04-10 12:25:00 PDT
    builder.convert(time, "America/New_York")    # 2008-04-10 16:25:00 PDT
"""

from datetime import date, datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Optional, Union
from zoneinfo import ZoneInfo

from twk.tztime.error import InvalidCalendarFieldsError, MissingSourceZoneError
from twk.tztime.local_time import LocalTime
from twk.tztime.period import TimeZonePeriod
from twk.tztime.registry import UTC_ZONE_NAME, TimeZoneRegistry, get_registry

TimeValue = Union[LocalTime, datetime, date, int, float]


def _wall_clock(*fields: int) -> datetime:
    try:
        return datetime(*fields)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidCalendarFieldsError(f"Invalid calendar fields {fields}: {e}") from e


def _fields(t: datetime) -> tuple[int, ...]:
    return (t.year, t.month, t.day, t.hour, t.minute, t.second, t.microsecond)


class LocalTimeBuilder:
    """Creates ``LocalTime`` values in one time zone.

    Builders are immutable and safe to share between threads.
    """

    __slots__ = ("_time_zone", "_time_zone_name", "_registry")

    def __init__(
        self,
        time_zone: Union[str, ZoneInfo],
        registry: Optional[TimeZoneRegistry] = None,
    ) -> None:
        """Create a builder for ``time_zone``.

        If a name is passed it is retained as ``time_zone_name``, so an alias
        reads back the way it was given. For a ``ZoneInfo`` the name is its key.

        Raises:
            UnknownTimeZoneError: If a name cannot be resolved
        """
        self._registry = registry or get_registry()
        if isinstance(time_zone, ZoneInfo):
            self._time_zone = time_zone
            self._time_zone_name = time_zone.key
        else:
            self._time_zone = self._registry.resolve(time_zone)
            self._time_zone_name = time_zone

    @classmethod
    def for_utc(cls, registry: Optional[TimeZoneRegistry] = None) -> "LocalTimeBuilder":
        """A builder in Universal Time."""
        return cls(UTC_ZONE_NAME, registry=registry)

    @property
    def time_zone(self) -> ZoneInfo:
        return self._time_zone

    @property
    def time_zone_name(self) -> str:
        """The name the builder was created with (alias or IANA identifier)."""
        return self._time_zone_name

    @property
    def registry(self) -> TimeZoneRegistry:
        return self._registry

    def __eq__(self, other) -> bool:
        if not isinstance(other, LocalTimeBuilder):
            return NotImplemented
        return (
            self._time_zone_name == other._time_zone_name
            and self._time_zone.key == other._time_zone.key
        )

    def __hash__(self) -> int:
        return hash((self._time_zone_name, self._time_zone.key))

    def __repr__(self) -> str:
        return f"LocalTimeBuilder({self._time_zone_name!r})"

    def _create(self, wall: datetime) -> LocalTime:
        return LocalTime(wall, self._time_zone)

    def _from_utc(self, utc_wall: datetime) -> LocalTime:
        aware = utc_wall.replace(tzinfo=timezone.utc).astimezone(self._time_zone)
        # Pin the period: the wall clock alone is ambiguous when clocks go back
        return LocalTime(
            aware.replace(tzinfo=None),
            self._time_zone,
            period=TimeZonePeriod.for_aware(aware),
        )

    # Current time

    def now(self) -> LocalTime:
        """The current day and time in this zone."""
        return self._from_utc(datetime.now(timezone.utc).replace(tzinfo=None))

    def today(self) -> LocalTime:
        """The current day in this zone, at 0:00."""
        t = self.now()
        return self.local(t.year, t.month, t.day)

    def today_at_local(self, *time: int) -> LocalTime:
        """Today with the given hour[, minute, second, microsecond] in this zone."""
        return self.day_at_local(self.today(), *time)

    today_at = today_at_local

    def today_at_utc(self, *time: int) -> LocalTime:
        """Today with the given hour[, minute, second, microsecond] in UTC."""
        return self.day_at_utc(self.today(), *time)

    today_at_gm = today_at_utc

    def day_at_local(self, reference: Union[LocalTime, date], *time: int) -> LocalTime:
        """The day of ``reference`` with the given time of day in this zone."""
        return self.local(reference.year, reference.month, reference.day, *time)

    day_at = day_at_local

    def day_at_utc(self, reference: Union[LocalTime, date], *time: int) -> LocalTime:
        """The day of ``reference`` with the given time of day in UTC."""
        return self.utc(reference.year, reference.month, reference.day, *time)

    day_at_gm = day_at_utc

    # Calendar fields

    def local(
        self,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> LocalTime:
        """A time whose fields are expressed in this zone.

        Fields are taken literally. A wall time skipped by a DST change is
        accepted and resolved with the offset in effect before the change.

        Raises:
            InvalidCalendarFieldsError: If the fields are out of range
        """
        return self._create(
            _wall_clock(year, month, day, hour, minute, second, microsecond)
        )

    def utc(
        self,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> LocalTime:
        """A time whose fields are in Universal Time, converted into this zone.

        Raises:
            InvalidCalendarFieldsError: If the fields are out of range
        """
        return self._from_utc(
            _wall_clock(year, month, day, hour, minute, second, microsecond)
        )

    gm = utc

    # Existing values

    def at_local(self, value: TimeValue, microseconds: int = 0) -> LocalTime:
        """Read ``value`` as a time in this zone, ignoring its own zone.

        A ``LocalTime`` is converted from its zone instead. Numbers are
        seconds since the epoch, read as UTC fields.
        """
        if isinstance(value, LocalTime):
            return self.convert(value)
        return self.local(*_fields(self._extract(value, microseconds)))

    at = at_local

    def at_utc(self, value: TimeValue, microseconds: int = 0) -> LocalTime:
        """Read ``value`` as Universal Time, ignoring its own zone, and convert.

        A ``LocalTime`` is converted from its zone instead.
        """
        if isinstance(value, LocalTime):
            return self.convert(value)
        return self.utc(*_fields(self._extract(value, microseconds)))

    at_gm = at_utc

    def convert(
        self,
        value: TimeValue,
        from_time_zone: Union[str, ZoneInfo, None] = None,
    ) -> LocalTime:
        """Convert ``value`` from another zone into this one.

        With ``from_time_zone`` the value is read as a wall-clock time in that
        zone (a ``LocalTime`` is first converted into it). Without it, a
        ``LocalTime`` is converted from its own zone and an aware ``datetime``
        from its own offset.

        Raises:
            MissingSourceZoneError: If no source zone is available
            UnknownTimeZoneError: If ``from_time_zone`` cannot be resolved
        """
        if from_time_zone is not None:
            source = LocalTimeBuilder(from_time_zone, registry=self._registry)
            return self._from_utc(source.at(value).to_utc().replace(tzinfo=None))

        if isinstance(value, LocalTime):
            if value.time_zone is self._time_zone:
                return value
            return self._from_utc(value.to_utc().replace(tzinfo=None))

        if isinstance(value, datetime) and value.utcoffset() is not None:
            utc_value = value.astimezone(timezone.utc).replace(tzinfo=None)
            return self._from_utc(utc_value)

        raise MissingSourceZoneError(value)

    # Parsing

    def parse_xmlschema(self, text: str) -> LocalTime:
        """Parse an XML Schema / ISO 8601 date-time.

        A value with a designator (``Z`` or ``+hh:mm``) is converted into this
        zone; one without is read as local time.

        Raises:
            InvalidCalendarFieldsError: If the string is not a date-time
        """
        try:
            parsed = datetime.fromisoformat(text.strip())
        except (AttributeError, ValueError) as e:
            raise InvalidCalendarFieldsError(f"Invalid XML Schema time: {text!r}") from e
        if parsed.utcoffset() is None:
            return self.local(*_fields(parsed))
        return self.convert(parsed)

    parse_iso8601 = parse_xmlschema

    def parse_rfc2822(self, text: str) -> LocalTime:
        """Parse an RFC 2822 date-time; ``-0000`` means Universal Time.

        Raises:
            InvalidCalendarFieldsError: If the string is not a date-time
        """
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError) as e:
            raise InvalidCalendarFieldsError(f"Invalid RFC 2822 time: {text!r}") from e
        if parsed.utcoffset() is None:
            return self.utc(*_fields(parsed))
        return self.convert(parsed)

    parse_rfc822 = parse_rfc2822

    def parse_httpdate(self, text: str) -> LocalTime:
        """Parse an HTTP-date (RFC 1123), which is always in GMT."""
        return self.parse_rfc2822(text)

    # Helpers

    @staticmethod
    def _extract(value: TimeValue, microseconds: int = 0) -> datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                seconds = datetime.fromtimestamp(value, timezone.utc)
            except (OverflowError, OSError, ValueError) as e:
                raise InvalidCalendarFieldsError(f"Invalid epoch seconds: {value!r}") from e
            return seconds.replace(tzinfo=None) + timedelta(microseconds=microseconds)
        raise TypeError(f"Cannot build a local time from {type(value).__name__}")
