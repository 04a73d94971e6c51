"""Resolved offset information for one wall-clock instant."""

from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict

# Days sampled when scanning a year for negative DST; closer than any such period
_SCAN_DAYS = range(0, 366, 10)


@lru_cache(maxsize=256)
def _negative_dst_standard(zone: tzinfo, year: int) -> Optional[timedelta]:
    """The standard offset of a zone that models DST as a negative save.

    The zone database describes Europe/Dublin (and Africa/Casablanca) with
    summer as standard time and winter as a negative adjustment. Returns the
    offset in force during the negative period of ``year``, or None when the
    zone has no such period that year.
    """
    start = datetime(year, 1, 1, 12, tzinfo=zone)
    for day in _SCAN_DAYS:
        sample = start + timedelta(days=day)
        save = sample.dst()
        if save is not None and save < timedelta(0):
            return sample.utcoffset()
    return None


class TimeZonePeriod(BaseModel):
    """UTC offset, abbreviation and DST state in effect at a wall-clock time."""

    model_config = ConfigDict(frozen=True)

    utc_total_offset: int  # seconds east of UTC, DST included
    std_offset: int  # DST adjustment in seconds, 0 outside DST
    abbreviation: str

    @property
    def utc_offset(self) -> int:
        """Standard offset from UTC, without the DST adjustment."""
        return self.utc_total_offset - self.std_offset

    @property
    def dst(self) -> bool:
        return self.std_offset != 0

    def to_utc(self, wall: datetime) -> datetime:
        """Convert a naive wall-clock time in this period to an aware UTC time."""
        return (wall - timedelta(seconds=self.utc_total_offset)).replace(
            tzinfo=timezone.utc
        )

    @classmethod
    def for_local(cls, zone: ZoneInfo, wall: datetime) -> "TimeZonePeriod":
        """Resolve the period for a naive wall-clock time in ``zone``.

        When the wall time is ambiguous (clocks turned back) the standard
        time reading wins. When it does not exist (clocks turned forward) the
        rule in effect before the transition is used.
        """
        early = cls.for_aware(wall.replace(tzinfo=zone, fold=0))
        late = cls.for_aware(wall.replace(tzinfo=zone, fold=1))
        ambiguous = early.utc_total_offset != late.utc_total_offset
        if ambiguous and early.dst and not late.dst:
            return late
        return early

    @classmethod
    def for_aware(cls, value: datetime) -> "TimeZonePeriod":
        """The period an aware ``datetime`` is already pinned to.

        A negative DST save is read the conventional way round: the period
        carrying it is standard time and the rest of the year is DST.
        """
        total = value.utcoffset()
        save = value.dst() or timedelta(0)
        if save < timedelta(0):
            save = timedelta(0)
        elif save == timedelta(0):
            standard = _negative_dst_standard(value.tzinfo, value.year)
            if standard is not None and total > standard:
                save = total - standard
        return cls(
            utc_total_offset=int(total.total_seconds()),
            std_offset=int(save.total_seconds()),
            abbreviation=value.tzname() or "",
        )
