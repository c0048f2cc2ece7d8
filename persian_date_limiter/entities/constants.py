from __future__ import annotations

from enum import IntEnum


class PersianMonth(IntEnum):
    """Zero-based Persian month indexes."""
    FARVARDIN = 0
    ORDIBEHESHT = 1
    KHORDAD = 2
    TIR = 3
    MORDAD = 4
    SHAHRIVAR = 5
    MEHR = 6
    ABAN = 7
    AZAR = 8
    DEY = 9
    BAHMAN = 10
    ESFAND = 11


# Epoch milliseconds of Julian day 0 (1970-01-01 is Julian day 2440588)
MILLIS_JULIAN_EPOCH = -210866803200000
MILLIS_OF_A_DAY = 86400000

# Julian day of 1 Farvardin, year 1
PERSIAN_EPOCH = 1948321

# 2820-year grand cycle
GRAND_CYCLE_YEARS = 2820
GRAND_CYCLE_DAYS = 1029983
CYCLE_BASE_YEAR = 474

DEFAULT_START_YEAR = 1300
DEFAULT_END_YEAR = 1500
DEFAULT_DELIMITER = "/"

PERSIAN_MONTH_NAMES = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)

# Saturday first
PERSIAN_WEEKDAY_NAMES = (
    "شنبه",
    "یکشنبه",
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنجشنبه",
    "جمعه",
)
