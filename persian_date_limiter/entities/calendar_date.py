from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from datetime import date
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from datetime import tzinfo
from typing import Union
from zoneinfo import ZoneInfo

from persian_date_limiter.entities.constants import DEFAULT_DELIMITER
from persian_date_limiter.entities.constants import PERSIAN_MONTH_NAMES
from persian_date_limiter.entities.constants import PERSIAN_WEEKDAY_NAMES
from persian_date_limiter.utils.exceptions import InvalidDate
from persian_date_limiter.utils.persian_calendar_utils import from_astronomical_year
from persian_date_limiter.utils.persian_calendar_utils import is_leap_year
from persian_date_limiter.utils.persian_calendar_utils import julian_day_from_ordinal
from persian_date_limiter.utils.persian_calendar_utils import julian_to_persian
from persian_date_limiter.utils.persian_calendar_utils import month_length
from persian_date_limiter.utils.persian_calendar_utils import ordinal_from_julian_day
from persian_date_limiter.utils.persian_calendar_utils import persian_to_julian
from persian_date_limiter.utils.persian_calendar_utils import to_astronomical_year
from persian_date_limiter.utils.persian_calendar_utils import to_julian_day

TimeZoneLike = Union[None, str, tzinfo]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)

_DIGIT_TRANSLATION = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789")


def system_time_zone() -> tzinfo:
    return datetime.now().astimezone().tzinfo


def resolve_time_zone(time_zone: TimeZoneLike = None) -> tzinfo:
    """Turn a zone name, a tzinfo or ``None`` (system zone) into a tzinfo."""
    if time_zone is None:
        return system_time_zone()
    if isinstance(time_zone, str):
        return ZoneInfo(time_zone)
    return time_zone


def time_zone_id(time_zone: tzinfo) -> str:
    key = getattr(time_zone, "key", None)
    return key if key else str(time_zone)


@dataclass(frozen=True, eq=False)
class CalendarDate:
    """An instant in a timezone, with its Persian date fields.

    Instances are immutable; the Persian fields are computed once in the
    constructor from the wall-clock day of ``instant`` in its own zone.
    Dates order by instant, so two dates at the same instant in different
    zones are both <= each other, yet they compare equal only when the
    timezone matches too.
    """

    instant: datetime
    persian_year: int = field(init=False)
    persian_month: int = field(init=False)
    persian_day: int = field(init=False)

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None or self.instant.utcoffset() is None:
            raise ValueError("CalendarDate needs a timezone-aware datetime")
        offset_millis = self.instant.utcoffset() // ONE_MILLISECOND
        persian = julian_to_persian(to_julian_day(self.instant_millis + offset_millis))
        object.__setattr__(self, "persian_year", persian.year)
        object.__setattr__(self, "persian_month", persian.month)
        object.__setattr__(self, "persian_day", persian.day)

    # ─────────── factories ───────────
    @classmethod
    def from_persian(
        cls,
        year: int,
        month: int,
        day: int,
        time_zone: TimeZoneLike = None,
    ) -> "CalendarDate":
        """Midnight of a Persian date (0-based month) in ``time_zone``."""
        gregorian = date.fromordinal(ordinal_from_julian_day(persian_to_julian(year, month, day)))
        return cls(
            datetime(gregorian.year, gregorian.month, gregorian.day, tzinfo=resolve_time_zone(time_zone))
        )

    @classmethod
    def from_gregorian(
        cls,
        year: int,
        month: int,
        day: int,
        time_zone: TimeZoneLike = None,
    ) -> "CalendarDate":
        """Midnight of a Gregorian date (1-based month) in ``time_zone``."""
        return cls(datetime(year, month, day, tzinfo=resolve_time_zone(time_zone)))

    @classmethod
    def from_datetime(cls, value: datetime, time_zone: TimeZoneLike = None) -> "CalendarDate":
        """Wrap ``value``; naive values are read as wall-clock time in ``time_zone``."""
        if value.tzinfo is None:
            return cls(value.replace(tzinfo=resolve_time_zone(time_zone)))
        if time_zone is not None:
            return cls(value.astimezone(resolve_time_zone(time_zone)))
        return cls(value)

    @classmethod
    def from_millis(cls, instant_millis: int, time_zone: TimeZoneLike = None) -> "CalendarDate":
        return cls((EPOCH + instant_millis * ONE_MILLISECOND).astimezone(resolve_time_zone(time_zone)))

    @classmethod
    def now(cls, time_zone: TimeZoneLike = None) -> "CalendarDate":
        return cls(datetime.now(resolve_time_zone(time_zone)))

    @classmethod
    def parse(
        cls,
        text: str,
        delimiter: str = DEFAULT_DELIMITER,
        time_zone: TimeZoneLike = None,
    ) -> "CalendarDate":
        """Parse ``YYYY/MM/DD`` with a 1-based month; Persian digits are accepted."""
        parts = text.strip().translate(_DIGIT_TRANSLATION).split(delimiter)
        if len(parts) != 3:
            raise InvalidDate(f"Expected YEAR{delimiter}MONTH{delimiter}DAY, got '{text}'")
        try:
            year, month, day = (int(part) for part in parts)
        except ValueError as e:
            raise InvalidDate(f"Date parts must be integers, got '{text}'") from e
        return cls.from_persian(year, month - 1, day, time_zone)

    # ─────────── fields ───────────
    @property
    def instant_millis(self) -> int:
        return (self.instant - EPOCH) // ONE_MILLISECOND

    @property
    def time_zone(self) -> tzinfo:
        return self.instant.tzinfo

    @property
    def time_zone_id(self) -> str:
        return time_zone_id(self.instant.tzinfo)

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.persian_year)

    @property
    def month_name(self) -> str:
        return PERSIAN_MONTH_NAMES[self.persian_month]

    @property
    def weekday_name(self) -> str:
        # datetime.weekday() is Monday-first, the Persian week starts on Saturday
        return PERSIAN_WEEKDAY_NAMES[(self.instant.weekday() + 2) % 7]

    @property
    def julian_day(self) -> int:
        return julian_day_from_ordinal(self.instant.toordinal())

    def to_gregorian(self) -> date:
        return self.instant.date()

    def short_date(self, delimiter: str = DEFAULT_DELIMITER) -> str:
        """``YYYY/MM/DD`` with a 1-based month."""
        return (
            f"{self.persian_year:02d}{delimiter}"
            f"{self.persian_month + 1:02d}{delimiter}"
            f"{self.persian_day:02d}"
        )

    def long_date(self) -> str:
        """e.g. ``شنبه  01  خرداد  1361``"""
        return f"{self.weekday_name}  {self.persian_day:02d}  {self.month_name}  {self.persian_year}"

    # ─────────── derived dates ───────────
    def with_time_zone(self, time_zone: TimeZoneLike) -> "CalendarDate":
        """Same instant seen from another zone."""
        return CalendarDate(self.instant.astimezone(resolve_time_zone(time_zone)))

    def trim_to_midnight(self, time_zone: TimeZoneLike = None) -> "CalendarDate":
        """Midnight of this day, optionally after moving to ``time_zone`` first."""
        moved = self if time_zone is None else self.with_time_zone(time_zone)
        local = moved.instant
        return CalendarDate(datetime(local.year, local.month, local.day, tzinfo=local.tzinfo))

    def replace_time(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> "CalendarDate":
        return CalendarDate(
            self.instant.replace(hour=hour, minute=minute, second=second, microsecond=microsecond)
        )

    def add_days(self, amount: int) -> "CalendarDate":
        # aware datetime arithmetic is wall-clock arithmetic
        return CalendarDate(self.instant + timedelta(days=amount))

    def add_months(self, amount: int) -> "CalendarDate":
        """Move by Persian months; the day is clamped to the target month length."""
        total = self.persian_month + amount
        year = from_astronomical_year(to_astronomical_year(self.persian_year) + total // 12)
        return self._with_persian(year, total % 12, self.persian_day)

    def add_years(self, amount: int) -> "CalendarDate":
        year = from_astronomical_year(to_astronomical_year(self.persian_year) + amount)
        return self._with_persian(year, self.persian_month, self.persian_day)

    def _with_persian(self, year: int, month: int, day: int) -> "CalendarDate":
        day = min(day, month_length(year, month))
        gregorian = date.fromordinal(ordinal_from_julian_day(persian_to_julian(year, month, day)))
        local = self.instant
        return CalendarDate(
            local.replace(year=gregorian.year, month=gregorian.month, day=gregorian.day)
        )

    # ─────────── dunder helpers ───────────
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.instant_millis == other.instant_millis and self.time_zone_id == other.time_zone_id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.instant < other.instant

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.instant <= other.instant

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.instant > other.instant

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.instant >= other.instant

    def __hash__(self) -> int:
        return hash((self.instant_millis, self.time_zone_id))

    def __repr__(self) -> str:
        return (
            f"<CalendarDate {self.instant.isoformat()} [{self.time_zone_id}] "
            f"PersianDate={self.short_date()}>"
        )


def ensure_calendar_date(value: Union[CalendarDate, datetime], time_zone: TimeZoneLike = None) -> CalendarDate:
    if isinstance(value, CalendarDate):
        return value
    return CalendarDate.from_datetime(value, time_zone)


__all__ = [
    "CalendarDate",
    "TimeZoneLike",
    "ensure_calendar_date",
    "resolve_time_zone",
    "system_time_zone",
    "time_zone_id",
]
