"""Time zone errors."""

from twk.domain.error import DomainError, ValidationError


class TimeZoneError(DomainError):
    """Base error for time zone resolution and conversion."""

    pass


class UnknownTimeZoneError(TimeZoneError):
    """Raised when a name is neither a known alias nor a zone identifier."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Unknown time zone: {name!r}")


class MissingSourceZoneError(TimeZoneError):
    """Raised when a conversion has no zone to convert from."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Cannot convert {value!r} without a source time zone; "
            "pass from_time_zone or use an aware value"
        )


class InvalidCalendarFieldsError(TimeZoneError, ValidationError):
    """Raised when calendar fields or a timestamp string cannot form a time."""

    pass
