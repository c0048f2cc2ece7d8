"""Default implementation of the date range limiter."""

from __future__ import annotations

from bisect import bisect_left
from datetime import date
from datetime import datetime
from datetime import timedelta
from datetime import tzinfo
from typing import Iterable
from typing import List
from typing import Optional
from typing import Set
from typing import Union

from persian_date_limiter import LOGGER
from persian_date_limiter.entities.calendar_date import CalendarDate
from persian_date_limiter.entities.calendar_date import TimeZoneLike
from persian_date_limiter.entities.calendar_date import ensure_calendar_date
from persian_date_limiter.entities.calendar_date import resolve_time_zone
from persian_date_limiter.entities.calendar_date import system_time_zone
from persian_date_limiter.entities.constants import DEFAULT_END_YEAR
from persian_date_limiter.entities.constants import DEFAULT_START_YEAR
from persian_date_limiter.entities.constants import PersianMonth
from persian_date_limiter.entities.limiter_state import LimiterState
from persian_date_limiter.use_cases.interfaces.date_range_limiter_interface import (
    DateRangeLimiterInterface,
)
from persian_date_limiter.utils.exceptions import InvalidRange
from persian_date_limiter.utils.persian_calendar_utils import julian_day_from_ordinal
from persian_date_limiter.utils.persian_calendar_utils import julian_to_persian
from persian_date_limiter.utils.persian_calendar_utils import month_length
from persian_date_limiter.utils.persian_calendar_utils import ordinal_from_julian_day
from persian_date_limiter.utils.persian_calendar_utils import persian_to_julian
from persian_date_limiter.utils.persian_calendar_utils import to_astronomical_year

DateLike = Union[CalendarDate, datetime]
ONE_DAY = timedelta(days=1)


def _persian_day(year: int, month: int, day: int) -> date:
    return date.fromordinal(ordinal_from_julian_day(persian_to_julian(year, month, day)))


def _last_persian_day(year: int) -> date:
    # Esfand has 29 or 30 days, never 31
    return _persian_day(year, PersianMonth.ESFAND, month_length(year, PersianMonth.ESFAND))


def _persian_year_of(day: date) -> int:
    return julian_to_persian(julian_day_from_ordinal(day.toordinal())).year


class DefaultDateRangeLimiter(DateRangeLimiterInterface):
    """Year bounds, min/max dates, selectable and disabled days for one picker.

    Days are kept as midnight-normalised calendar days, so time of day never
    affects a decision. Every query takes an optional ``time_zone`` used to
    normalise the requested date and to build the returned dates; it falls
    back to the limiter zone, then to the system zone.

    When selectable days are set they are the only source for the valid
    years and the start/end dates; year bounds and min/max dates apply
    otherwise. A disabled day is out of range even when it is selectable.

    Not thread-safe: callers sharing one instance between threads must
    synchronise access themselves.
    """

    def __init__(
        self,
        min_year: int = DEFAULT_START_YEAR,
        max_year: int = DEFAULT_END_YEAR,
        time_zone: TimeZoneLike = None,
    ) -> None:
        self._min_year = DEFAULT_START_YEAR
        self._max_year = DEFAULT_END_YEAR
        self._time_zone: Optional[tzinfo] = None
        self._min_day: Optional[date] = None
        self._max_day: Optional[date] = None
        self._selectable_days: List[date] = []
        self._disabled_days: Set[date] = set()

        self.set_year_range(min_year, max_year)
        if time_zone is not None:
            self.set_time_zone(time_zone)

    @classmethod
    def from_settings(cls, settings) -> "DefaultDateRangeLimiter":
        """Build a limiter from :class:`LimiterSettings`."""
        return cls(
            min_year=settings.min_year,
            max_year=settings.max_year,
            time_zone=settings.time_zone,
        )

    # ─────────── configuration ───────────
    def set_time_zone(self, time_zone: TimeZoneLike) -> None:
        self._time_zone = resolve_time_zone(time_zone) if time_zone is not None else None
        LOGGER.debug(f"Limiter time zone set to {self._time_zone}")

    def set_year_range(self, start_year: int, end_year: int) -> None:
        """Set the selectable years.

        Raises:
            InvalidDate: If either year is 0
            InvalidRange: If end < start, or a bound day falls outside the
                years ``datetime.date`` can hold
        """
        to_astronomical_year(start_year)
        to_astronomical_year(end_year)
        if end_year < start_year:
            LOGGER.error(f"Rejected year range {start_year}-{end_year}")
            raise InvalidRange(start_year, end_year)
        try:
            _persian_day(start_year, PersianMonth.FARVARDIN, 1)
            _last_persian_day(end_year)
        except (ValueError, OverflowError) as e:
            LOGGER.error(f"Rejected year range {start_year}-{end_year}: {e}")
            raise InvalidRange(
                start_year, end_year, "Year range is outside the supported calendar"
            ) from e
        self._min_year = start_year
        self._max_year = end_year
        LOGGER.debug(f"Year range set to {start_year}-{end_year}")

    def set_min_date(self, value: Optional[DateLike]) -> None:
        day = self._day_of(value) if value is not None else None
        self._check_date_bounds(day, self._max_day)
        self._min_day = day
        LOGGER.debug(f"Min date set to {self._min_day}")

    def set_max_date(self, value: Optional[DateLike]) -> None:
        day = self._day_of(value) if value is not None else None
        self._check_date_bounds(self._min_day, day)
        self._max_day = day
        LOGGER.debug(f"Max date set to {self._max_day}")

    def set_selectable_days(self, days: Iterable[DateLike]) -> None:
        self._selectable_days = sorted({self._day_of(day) for day in days})
        LOGGER.debug(f"{len(self._selectable_days)} selectable days set")

    def set_disabled_days(self, days: Iterable[DateLike]) -> None:
        self._disabled_days = {self._day_of(day) for day in days}
        LOGGER.debug(f"{len(self._disabled_days)} disabled days set")

    # ─────────── getters ───────────
    @property
    def time_zone(self) -> Optional[tzinfo]:
        return self._time_zone

    def get_min_date(self) -> Optional[CalendarDate]:
        return self._render(self._min_day, self._zone()) if self._min_day is not None else None

    def get_max_date(self) -> Optional[CalendarDate]:
        return self._render(self._max_day, self._zone()) if self._max_day is not None else None

    def get_selectable_days(self) -> Optional[List[CalendarDate]]:
        if not self._selectable_days:
            return None
        zone = self._zone()
        return [self._render(day, zone) for day in self._selectable_days]

    def get_disabled_days(self) -> Optional[List[CalendarDate]]:
        if not self._disabled_days:
            return None
        zone = self._zone()
        return [self._render(day, zone) for day in sorted(self._disabled_days)]

    # ─────────── range queries ───────────
    def get_min_year(self) -> int:
        if self._selectable_days:
            return _persian_year_of(self._selectable_days[0])
        # an explicit minimum date may only narrow the year range
        if self._min_day is not None:
            return max(self._min_year, min(_persian_year_of(self._min_day), self._max_year))
        return self._min_year

    def get_max_year(self) -> int:
        if self._selectable_days:
            return _persian_year_of(self._selectable_days[-1])
        if self._max_day is not None:
            return min(self._max_year, max(_persian_year_of(self._max_day), self._min_year))
        return self._max_year

    def get_start_date(self, time_zone: TimeZoneLike = None) -> CalendarDate:
        return self._render(self._start_day(), self._zone(time_zone))

    def get_end_date(self, time_zone: TimeZoneLike = None) -> CalendarDate:
        return self._render(self._end_day(), self._zone(time_zone))

    def is_out_of_range(self, year: int, month: int, day: int) -> bool:
        """True if the Persian date is disabled or not selectable.

        Raises:
            InvalidDate: If the triple names no real day
        """
        return self._is_out_of_range(_persian_day(year, month, day))

    def is_date_out_of_range(self, value: DateLike, time_zone: TimeZoneLike = None) -> bool:
        return self._is_out_of_range(self._day_of(value, time_zone))

    def set_to_nearest_date(self, value: DateLike, time_zone: TimeZoneLike = None) -> CalendarDate:
        """Snap ``value`` to the closest day that may be picked.

        Precedence:
        • selectable days set: the closer of the first selectable day on or
          after the request and the last one before it; a tie goes to the
          later day.
        • disabled days set: walk one day forward and one day backward at a
          time until a cursor lands on an enabled day; the backward cursor
          wins when both land in the same step.
        • otherwise clamp to the start/end date, or return ``value`` itself.
        """
        zone = self._zone(time_zone)
        requested = ensure_calendar_date(value, zone)
        day = self._day_of(requested, zone)

        if self._selectable_days:
            return self._render(self._nearest_selectable(day, zone), zone)

        if self._disabled_days:
            nearest = self._nearest_enabled(day)
            if nearest is not None:
                return self._render(nearest, zone)

        if self._is_before_min(day):
            LOGGER.debug(f"{day} is before the minimum, clamping to the start date")
            return self._render(self._clamp_start_day(), zone)
        if self._is_after_max(day):
            LOGGER.debug(f"{day} is after the maximum, clamping to the end date")
            return self._render(self._clamp_end_day(), zone)
        return requested

    # ─────────── persistence ───────────
    def to_state(self) -> LimiterState:
        zone = self._zone()
        return LimiterState(
            min_year=self._min_year,
            max_year=self._max_year,
            min_date=LimiterState.record(self.get_min_date()),
            max_date=LimiterState.record(self.get_max_date()),
            selectable_days=[LimiterState.record(self._render(d, zone)) for d in self._selectable_days],
            disabled_days=[LimiterState.record(self._render(d, zone)) for d in sorted(self._disabled_days)],
            **LimiterState.zone_fields(self._time_zone),
        )

    @classmethod
    def from_state(cls, state: LimiterState) -> "DefaultDateRangeLimiter":
        limiter = cls(state.min_year, state.max_year, state.restore_zone())
        if state.min_date is not None:
            limiter.set_min_date(state.min_date.to_calendar_date())
        if state.max_date is not None:
            limiter.set_max_date(state.max_date.to_calendar_date())
        limiter.set_selectable_days(record.to_calendar_date() for record in state.selectable_days)
        limiter.set_disabled_days(record.to_calendar_date() for record in state.disabled_days)
        return limiter

    def to_bytes(self) -> bytes:
        return self.to_state().model_dump_json().encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> "DefaultDateRangeLimiter":
        return cls.from_state(LimiterState.model_validate_json(data))

    # ─────────── helpers ───────────
    @staticmethod
    def _check_date_bounds(min_day: Optional[date], max_day: Optional[date]) -> None:
        if min_day is not None and max_day is not None and max_day < min_day:
            LOGGER.error(f"Rejected date range {min_day} - {max_day}")
            raise InvalidRange(min_day, max_day, "Max date must be on or after min date")

    def _zone(self, time_zone: TimeZoneLike = None) -> tzinfo:
        if time_zone is not None:
            return resolve_time_zone(time_zone)
        return self._time_zone if self._time_zone is not None else system_time_zone()

    def _day_of(self, value: DateLike, time_zone: TimeZoneLike = None) -> date:
        zone = self._zone(time_zone)
        return ensure_calendar_date(value, zone).with_time_zone(zone).to_gregorian()

    @staticmethod
    def _render(day: date, zone: tzinfo) -> CalendarDate:
        return CalendarDate(datetime(day.year, day.month, day.day, tzinfo=zone))

    def _first_day_of_min_year(self) -> date:
        return _persian_day(self._min_year, PersianMonth.FARVARDIN, 1)

    def _last_day_of_max_year(self) -> date:
        return _last_persian_day(self._max_year)

    def _start_day(self) -> date:
        if self._selectable_days:
            return self._selectable_days[0]
        return self._clamp_start_day()

    def _end_day(self) -> date:
        if self._selectable_days:
            return self._selectable_days[-1]
        return self._clamp_end_day()

    def _clamp_start_day(self) -> date:
        return self._min_day if self._min_day is not None else self._first_day_of_min_year()

    def _clamp_end_day(self) -> date:
        return self._max_day if self._max_day is not None else self._last_day_of_max_year()

    def _is_out_of_range(self, day: date) -> bool:
        return self._is_disabled(day) or not self._is_selectable(day)

    def _is_disabled(self, day: date) -> bool:
        if day in self._disabled_days:
            return True
        if self._selectable_days:
            return False
        return self._is_before_min(day) or self._is_after_max(day)

    def _is_selectable(self, day: date) -> bool:
        if not self._selectable_days:
            return True
        index = bisect_left(self._selectable_days, day)
        return index < len(self._selectable_days) and self._selectable_days[index] == day

    def _is_before_min(self, day: date) -> bool:
        return (self._min_day is not None and day < self._min_day) or _persian_year_of(day) < self._min_year

    def _is_after_max(self, day: date) -> bool:
        return (self._max_day is not None and day > self._max_day) or _persian_year_of(day) > self._max_year

    def _nearest_selectable(self, day: date, zone: tzinfo) -> date:
        index = bisect_left(self._selectable_days, day)
        higher = self._selectable_days[index] if index < len(self._selectable_days) else None
        lower = self._selectable_days[index - 1] if index > 0 else None

        if higher is None:
            return lower
        if lower is None or higher == day:
            return higher

        # elapsed milliseconds between midnights, which differ from whole days across DST changes
        midnight = self._render(day, zone).instant_millis
        high_distance = self._render(higher, zone).instant_millis - midnight
        low_distance = midnight - self._render(lower, zone).instant_millis
        LOGGER.debug(f"Nearest selectable to {day}: {lower} ({low_distance}) or {higher} ({high_distance})")
        return lower if low_distance < high_distance else higher

    def _nearest_enabled(self, day: date) -> Optional[date]:
        start, end = self._start_day(), self._end_day()
        forward = start if self._is_before_min(day) else day
        backward = end if self._is_after_max(day) else day

        while self._is_disabled(forward) and self._is_disabled(backward):
            if forward > end and backward < start:
                LOGGER.warning(f"No enabled day found around {day}")
                return None
            forward += ONE_DAY
            backward -= ONE_DAY

        if not self._is_disabled(backward):
            return backward
        return forward
