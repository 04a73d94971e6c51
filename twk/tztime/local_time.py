"""Zone-carrying local time values.

A ``LocalTime`` wraps a naive ``datetime`` and a ``ZoneInfo``. The naive value
holds the wall-clock fields as seen in the zone; the true UTC instant is found
by subtracting the offset in effect at that wall-clock time. Values are
immutable and are normally created by a ``LocalTimeBuilder``.

``strftime``, ``rfc2822``, ``xmlschema`` and ``httpdate`` take the zone into
account. ``to_utc`` returns an aware UTC ``datetime``; ``to_date`` and
``to_datetime`` convert to UTC unless told otherwise.

    builder = LocalTimeBuilder("America/New_York")
    t = builder.local(2007, 12, 16, 10, 30)   # 2007-12-16 10:30:00 EST
    t + 86400                                 # 2007-12-17 10:30:00 EST
    t.to_utc()                                # 2007-12-16 15:30:00+00:00
"""

import re
from datetime import date, datetime, timedelta, timezone
from email.utils import format_datetime
from fractions import Fraction
from typing import Optional, Union
from zoneinfo import ZoneInfo

from twk.tztime.period import TimeZonePeriod

RFC2822_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
RFC2822_MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# %% must be matched first so an escaped directive is never substituted
_ZONE_DIRECTIVES = re.compile(r"%%|%Z|%P|%z")

Seconds = Union[int, float, timedelta]


def _as_delta(value: Seconds) -> timedelta:
    if isinstance(value, timedelta):
        return value
    return timedelta(seconds=value)


def _format_offset(offset: int, separator: str = "") -> str:
    sign = "-" if offset < 0 else "+"
    hours, minutes = divmod(abs(offset) // 60, 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _utc_of(value: Union["LocalTime", datetime]) -> datetime:
    if isinstance(value, LocalTime):
        return value.to_utc()
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class LocalTime:
    """A wall-clock time paired with the time zone it is expressed in."""

    __slots__ = ("_time", "_time_zone", "_period", "_utc")

    def __init__(
        self,
        time: datetime,
        time_zone: ZoneInfo,
        period: Optional[TimeZonePeriod] = None,
    ) -> None:
        """Wrap ``time`` as a wall-clock time in ``time_zone``.

        Args:
            time: The date and time in the desired zone. Any attached tzinfo
                is dropped; only the fields are kept.
            time_zone: The zone of the value
            period: The offset rules for ``time`` when the caller already
                knows them, as when converting from UTC. Resolved lazily
                from the wall clock otherwise.
        """
        if not isinstance(time, datetime):
            raise TypeError("The 'time' parameter must be a datetime")
        if not isinstance(time_zone, ZoneInfo):
            raise TypeError("The 'time_zone' parameter must be a ZoneInfo")
        self._time = time.replace(tzinfo=None, fold=0)
        self._time_zone = time_zone
        self._period = period
        self._utc: Optional[datetime] = None

    @property
    def time(self) -> datetime:
        """The naive wall-clock value."""
        return self._time

    @property
    def time_zone(self) -> ZoneInfo:
        return self._time_zone

    @property
    def time_zone_name(self) -> str:
        """The IANA identifier of the zone."""
        return self._time_zone.key

    # Period

    @property
    def time_zone_period(self) -> TimeZonePeriod:
        """The offset rules in effect at this wall-clock time (computed once)."""
        if self._period is None:
            # Deterministic, so concurrent first calls store equal values
            self._period = TimeZonePeriod.for_local(self._time_zone, self._time)
        return self._period

    @property
    def time_zone_abbreviation(self) -> str:
        return self.time_zone_period.abbreviation

    zone = time_zone_abbreviation

    @property
    def time_zone_offset(self) -> int:
        """Offset from UTC in seconds."""
        return self.time_zone_period.utc_total_offset

    utc_offset = time_zone_offset

    @property
    def offset_fraction(self) -> Fraction:
        """The offset as a fraction of a day."""
        return Fraction(self.time_zone_offset, 86_400)

    @property
    def dst(self) -> bool:
        return self.time_zone_period.dst

    @property
    def is_utc(self) -> bool:
        return self.time_zone_period.abbreviation == "UTC"

    # Conversion

    def to_utc(self) -> datetime:
        """The true instant as an aware UTC ``datetime`` (computed once)."""
        if self._utc is None:
            self._utc = self.time_zone_period.to_utc(self._time)
        return self._utc

    getutc = to_utc
    utc = to_utc

    def to_date(self, utc: bool = True) -> date:
        """The calendar date in UTC, or of the wall clock if ``utc`` is False."""
        t = self.to_utc() if utc else self._time
        return date(t.year, t.month, t.day)

    def to_datetime(self, utc: bool = True) -> datetime:
        """An aware ``datetime`` in UTC, or carrying the fixed zone offset."""
        if utc:
            return self.to_utc()
        return self._time.replace(
            tzinfo=timezone(timedelta(seconds=self.time_zone_offset), self.zone)
        )

    @property
    def local_day_seconds(self) -> int:
        """Seconds since local midnight."""
        return self._time.second + self._time.minute * 60 + self._time.hour * 3600

    day_seconds = local_day_seconds

    @property
    def utc_day_seconds(self) -> int:
        """``local_day_seconds`` shifted by the offset; may leave 0..86400."""
        return self.local_day_seconds - self.time_zone_offset

    # Arithmetic

    def __add__(self, value: Seconds) -> "LocalTime":
        if isinstance(value, (int, float, timedelta)):
            return LocalTime(self._time + _as_delta(value), self._time_zone)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, value):
        """Subtract seconds (giving a ``LocalTime``) or a time (giving seconds)."""
        if isinstance(value, (LocalTime, datetime)):
            return (self.to_utc() - _utc_of(value)).total_seconds()
        if isinstance(value, (int, float, timedelta)):
            return LocalTime(self._time - _as_delta(value), self._time_zone)
        return NotImplemented

    def __rsub__(self, value):
        if isinstance(value, datetime):
            return (_utc_of(value) - self.to_utc()).total_seconds()
        return NotImplemented

    # Comparison

    def _compare_key(self, value) -> Optional[datetime]:
        # Naive datetimes are not comparable, as with aware datetimes
        if isinstance(value, LocalTime):
            return value.to_utc()
        if isinstance(value, datetime) and value.utcoffset() is not None:
            return value.astimezone(timezone.utc)
        return None

    def __eq__(self, value) -> bool:
        other = self._compare_key(value)
        if other is None:
            return NotImplemented
        return self.to_utc() == other

    def __lt__(self, value) -> bool:
        other = self._compare_key(value)
        if other is None:
            return NotImplemented
        return self.to_utc() < other

    def __le__(self, value) -> bool:
        other = self._compare_key(value)
        if other is None:
            return NotImplemented
        return self.to_utc() <= other

    def __gt__(self, value) -> bool:
        other = self._compare_key(value)
        if other is None:
            return NotImplemented
        return self.to_utc() > other

    def __ge__(self, value) -> bool:
        other = self._compare_key(value)
        if other is None:
            return NotImplemented
        return self.to_utc() >= other

    def __hash__(self) -> int:
        return hash(self.to_utc())

    # Formatting

    def strftime(self, pattern: str) -> str:
        """Format the wall-clock time.

        All ``datetime.strftime`` directives are supported. In addition:

            %Z - Time zone abbreviation ('EDT')
            %z - Offset from UTC ('-0400')
            %P - Meridian indicator ('a' or 'p')
            %% - Literal '%'; '%%Z' gives '%Z'
        """

        def substitute(match: re.Match) -> str:
            directive = match.group(0)
            if directive == "%Z":
                return self.zone.replace("%", "%%")
            if directive == "%z":
                return _format_offset(self.time_zone_offset)
            if directive == "%P":
                return "p" if self._time.hour >= 12 else "a"
            return directive

        return self._time.strftime(_ZONE_DIRECTIVES.sub(substitute, pattern))

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return self.strftime(spec)

    def httpdate(self) -> str:
        """RFC 1123 date as used by HTTP, always in GMT.

        day-of-week, DD month-name CCYY hh:mm:ss GMT
        """
        return format_datetime(self.to_utc(), usegmt=True)

    rfc1123 = httpdate

    def rfc2822(self) -> str:
        """RFC 2822 date-time; the zone is -0000 for UTC and +-hhmm otherwise.

        day-of-week, DD month-name CCYY hh:mm:ss zone
        """
        t = self._time
        stamp = "%s, %02d %s %d %02d:%02d:%02d " % (
            RFC2822_DAY_NAMES[t.weekday()],
            t.day,
            RFC2822_MONTH_NAMES[t.month - 1],
            t.year,
            t.hour,
            t.minute,
            t.second,
        )
        if self.is_utc:
            return stamp + "-0000"
        return stamp + _format_offset(self.time_zone_offset)

    rfc822 = rfc2822

    def xmlschema(self, fraction_digits: Optional[int] = 0) -> str:
        """XML Schema dateTime; the zone designator is Z for UTC.

        CCYY-MM-DDThh:mm:ss[.sss]TZD

        Args:
            fraction_digits: Digits of fractional seconds. Digits past the
                sixth are padded with zeros.
        """
        t = self._time
        stamp = "%d-%02d-%02dT%02d:%02d:%02d" % (
            t.year,
            t.month,
            t.day,
            t.hour,
            t.minute,
            t.second,
        )
        if fraction_digits:
            micros = "%06d" % t.microsecond
            if fraction_digits <= 6:
                stamp += "." + micros[:fraction_digits]
            else:
                stamp += "." + micros + "0" * (fraction_digits - 6)
        if self.is_utc:
            return stamp + "Z"
        return stamp + _format_offset(self.time_zone_offset, ":")

    iso8601 = xmlschema

    def to_xml(self, options: Optional[dict] = None) -> str:
        """Same as ``xmlschema``; ``options`` is accepted and ignored."""
        return self.xmlschema()

    def __str__(self) -> str:
        return self.strftime("%Y-%m-%d %H:%M:%S %Z")

    def __repr__(self) -> str:
        return f"LocalTime({self}, {self.time_zone_name!r})"

    def __copy__(self) -> "LocalTime":
        return self

    def __deepcopy__(self, memo) -> "LocalTime":
        return self

    def __reduce__(self):
        return (LocalTime, (self._time, self._time_zone, self._period))

    # Wall-clock passthroughs

    @property
    def year(self) -> int:
        return self._time.year

    @property
    def month(self) -> int:
        return self._time.month

    @property
    def day(self) -> int:
        return self._time.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def microsecond(self) -> int:
        return self._time.microsecond

    @property
    def yday(self) -> int:
        """Day of the year (1..366)."""
        return self._time.timetuple().tm_yday

    def weekday(self) -> int:
        return self._time.weekday()

    def isoweekday(self) -> int:
        return self._time.isoweekday()

    def isocalendar(self):
        return self._time.isocalendar()

    def timetuple(self):
        return self._time.timetuple()

    def date(self) -> date:
        """The wall-clock calendar date."""
        return self._time.date()

    def ctime(self) -> str:
        return self._time.ctime()

    def replace(self, **fields) -> "LocalTime":
        """Replace wall-clock fields, keeping the zone."""
        if "tzinfo" in fields or "fold" in fields:
            raise TypeError("replace() on a LocalTime only accepts calendar fields")
        return LocalTime(self._time.replace(**fields), self._time_zone)
