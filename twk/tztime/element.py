"""Time zone support for entities.

``TimeZoneElement`` is a pydantic base for entities that store a time zone
name and hand out ``LocalTime`` values in it. A builder is created lazily from
the stored name, or for UTC when no zone is stored.

    class Setting(TimeZoneElement):
        __local_time_fields__ = ("created_at", "get_now")

        created_at: datetime

        def get_now(self) -> datetime:
            return datetime.now(timezone.utc)

    setting = Setting(created_at=..., time_zone="Pacific Time (US & Canada)")
    setting.local_time_builder.now()   # 2008-03-31 18:27:19 PDT
    setting.created_at                 # UTC datetime
    setting.local_created_at           # LocalTime in PDT
    setting.local_get_now()            # LocalTime in PDT

Each name in ``__local_time_fields__`` gets a ``local_<name>`` accessor when
the class is defined: a property for fields and properties, a method for
methods. A ``datetime`` result is read as UTC and converted into the entity's
zone; any other result is returned unchanged.
"""

from datetime import datetime
from typing import Any, Callable, ClassVar, Optional, Union
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from twk.tztime.builder import LocalTimeBuilder
from twk.tztime.registry import UTC_ZONE_NAME, get_registry


def _localize(element: "TimeZoneElement", value: Any) -> Any:
    if isinstance(value, datetime):
        return element.local_time_builder.at_utc(value)
    return value


def _local_property(name: str) -> property:
    def getter(self: "TimeZoneElement") -> Any:
        return _localize(self, getattr(self, name))

    getter.__name__ = f"local_{name}"
    getter.__doc__ = f"``{name}`` converted into the entity's time zone."
    return property(getter)


def _local_method(name: str) -> Callable[..., Any]:
    def method(self: "TimeZoneElement", *args: Any, **kwargs: Any) -> Any:
        return _localize(self, getattr(self, name)(*args, **kwargs))

    method.__name__ = f"local_{name}"
    method.__doc__ = f"The result of ``{name}`` converted into the entity's time zone."
    return method


class TimeZoneElement(BaseModel):
    """Base for entities carrying a time zone and local time accessors."""

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    # UTC-valued fields or methods that get a local_<name> accessor
    __local_time_fields__: ClassVar[tuple[str, ...]] = ()

    time_zone: Optional[str] = None

    _local_time_builder: Optional[LocalTimeBuilder] = PrivateAttr(default=None)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        for name in cls.__local_time_fields__:
            accessor = f"local_{name}"
            if accessor in cls.__dict__:
                continue
            attribute = getattr(cls, name, None)
            if name in cls.model_fields or isinstance(attribute, property):
                setattr(cls, accessor, _local_property(name))
            elif callable(attribute):
                setattr(cls, accessor, _local_method(name))
            else:
                raise TypeError(
                    f"{cls.__name__}.__local_time_fields__ names {name!r}, "
                    "which is neither a field nor a method"
                )

    @field_validator("time_zone", mode="before")
    @classmethod
    def validate_time_zone(cls, v: Any) -> Optional[str]:
        """Blank clears the zone; anything else must resolve."""
        if v is None or v == "":
            return None
        if isinstance(v, ZoneInfo):
            v = v.key
        get_registry().resolve(v)
        return v

    @property
    def local_time_builder(self) -> LocalTimeBuilder:
        """The builder for the stored zone, or a UTC builder when none is set."""
        builder = self._local_time_builder
        if builder is None or builder.time_zone_name != (self.time_zone or UTC_ZONE_NAME):
            builder = (
                LocalTimeBuilder(self.time_zone)
                if self.time_zone
                else LocalTimeBuilder.for_utc()
            )
            self._local_time_builder = builder
        return builder

    def use_local_time_builder(self, builder: LocalTimeBuilder) -> None:
        """Adopt ``builder``, storing its zone name as ``time_zone``."""
        self.time_zone = builder.time_zone_name
        self._local_time_builder = builder

    def reset_local_time_builder(self) -> LocalTimeBuilder:
        """Clear the stored zone and fall back to UTC."""
        self.time_zone = None
        self._local_time_builder = LocalTimeBuilder.for_utc()
        return self._local_time_builder

    @property
    def time_zone_name(self) -> str:
        return self.local_time_builder.time_zone_name

    @property
    def time_zone_definition(self) -> ZoneInfo:
        return self.local_time_builder.time_zone

    def select_local_time_builder(
        self,
        local_time_builder: Optional[LocalTimeBuilder] = None,
        time_zone: Union[str, ZoneInfo, None] = None,
    ) -> LocalTimeBuilder:
        """Pick a builder for one call without changing the stored zone.

        An explicit builder wins, then a builder for ``time_zone``, then the
        entity's own builder.
        """
        if local_time_builder is not None:
            return local_time_builder
        if time_zone:
            return LocalTimeBuilder(time_zone)
        return self.local_time_builder
