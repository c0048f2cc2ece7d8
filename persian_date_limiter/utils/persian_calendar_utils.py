"""Conversion between Julian day numbers and the Persian (Jalali) calendar.

The arithmetic follows the 2820-year grand cycle: a grand cycle holds
1029983 days and leap years are spread through it so that
``((year_in_cycle + 38) * 682) mod 2816 < 682``.

Months are 0-based (0 = Farvardin, 11 = Esfand) and days are 1-based.
Caller-visible years are historical years without a year zero: year ``-1``
is the year right before year ``1``. Internally everything runs on
astronomical years, where the year before ``1`` is ``0``.
"""
from __future__ import annotations

from typing import NamedTuple

from persian_date_limiter.entities.constants import CYCLE_BASE_YEAR
from persian_date_limiter.entities.constants import GRAND_CYCLE_DAYS
from persian_date_limiter.entities.constants import GRAND_CYCLE_YEARS
from persian_date_limiter.entities.constants import MILLIS_JULIAN_EPOCH
from persian_date_limiter.entities.constants import MILLIS_OF_A_DAY
from persian_date_limiter.entities.constants import PERSIAN_EPOCH
from persian_date_limiter.utils.exceptions import InvalidDate

# proleptic Gregorian ordinal 1 (0001-01-01) is Julian day 1721426
ORDINAL_TO_JULIAN_OFFSET = 1721425


class PersianDate(NamedTuple):
    year: int
    month: int
    day: int


def to_julian_day(instant_millis: int) -> int:
    """Julian day number containing the given epoch milliseconds."""
    return (instant_millis - MILLIS_JULIAN_EPOCH) // MILLIS_OF_A_DAY


def julian_day_to_millis(julian_day: int) -> int:
    """Epoch milliseconds of 00:00 UTC on the given Julian day."""
    return MILLIS_JULIAN_EPOCH + julian_day * MILLIS_OF_A_DAY


def to_astronomical_year(year: int) -> int:
    if year == 0:
        raise InvalidDate("Persian year 0 does not exist", year=year)
    return year if year > 0 else year + 1


def from_astronomical_year(year: int) -> int:
    return year if year > 0 else year - 1


def _is_astronomical_leap_year(year: int) -> bool:
    year_in_cycle = (year - CYCLE_BASE_YEAR) % GRAND_CYCLE_YEARS + CYCLE_BASE_YEAR
    return ((year_in_cycle + 38) * 682) % 2816 < 682


def _days_before_month(month: int) -> int:
    return 31 * month if month < 7 else 30 * month + 6


def _astronomical_to_julian(year: int, month: int, day: int) -> int:
    base = year - CYCLE_BASE_YEAR
    year_in_cycle = base % GRAND_CYCLE_YEARS + CYCLE_BASE_YEAR
    return (
        day
        + _days_before_month(month)
        + (year_in_cycle * 682 - 110) // 2816
        + (year_in_cycle - 1) * 365
        + (base // GRAND_CYCLE_YEARS) * GRAND_CYCLE_DAYS
        + PERSIAN_EPOCH
        - 1
    )


def is_leap_year(year: int) -> bool:
    """True when Esfand of ``year`` has 30 days."""
    return _is_astronomical_leap_year(to_astronomical_year(year))


def month_length(year: int, month: int) -> int:
    """Number of days in a 0-based Persian month."""
    if not 0 <= month <= 11:
        raise InvalidDate("Persian month must be within 0-11", year=year, month=month)
    if month < 6:
        return 31
    if month < 11:
        return 30
    return 30 if is_leap_year(year) else 29


def validate_persian_date(year: int, month: int, day: int) -> None:
    """Raise :class:`InvalidDate` unless the triple names a real day."""
    to_astronomical_year(year)
    length = month_length(year, month)
    if not 1 <= day <= length:
        raise InvalidDate(
            f"Day must be within 1-{length} for this month",
            year=year,
            month=month,
            day=day,
        )


def persian_to_julian(year: int, month: int, day: int) -> int:
    """Julian day number of a Persian date."""
    validate_persian_date(year, month, day)
    return _astronomical_to_julian(to_astronomical_year(year), month, day)


def julian_to_persian(julian_day: int) -> PersianDate:
    """Persian date of a Julian day number."""
    days_since_cycle_start = julian_day - _astronomical_to_julian(475, 0, 1)
    cycle, day_in_cycle = divmod(days_since_cycle_start, GRAND_CYCLE_DAYS)
    if day_in_cycle == GRAND_CYCLE_DAYS - 1:
        year_in_cycle = GRAND_CYCLE_YEARS
    else:
        aux1, aux2 = divmod(day_in_cycle, 366)
        year_in_cycle = (2134 * aux1 + 2816 * aux2 + 2815) // 1028522 + aux1 + 1
    year = year_in_cycle + GRAND_CYCLE_YEARS * cycle + CYCLE_BASE_YEAR

    day_of_year = julian_day - _astronomical_to_julian(year, 0, 1) + 1
    if day_of_year <= 186:
        month = (day_of_year - 1) // 31
    else:
        month = (day_of_year - 7) // 30
    day = julian_day - _astronomical_to_julian(year, month, 1) + 1
    return PersianDate(from_astronomical_year(year), month, day)


def julian_day_from_ordinal(ordinal: int) -> int:
    """Julian day number of a proleptic Gregorian ordinal (``date.toordinal()``)."""
    return ordinal + ORDINAL_TO_JULIAN_OFFSET


def ordinal_from_julian_day(julian_day: int) -> int:
    return julian_day - ORDINAL_TO_JULIAN_OFFSET
