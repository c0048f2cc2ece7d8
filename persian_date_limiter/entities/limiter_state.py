from __future__ import annotations

from datetime import timedelta
from datetime import timezone
from datetime import tzinfo
from typing import List
from typing import Optional
from zoneinfo import ZoneInfo
from zoneinfo import ZoneInfoNotFoundError

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

from persian_date_limiter.entities.calendar_date import CalendarDate
from persian_date_limiter.entities.calendar_date import time_zone_id
from persian_date_limiter.entities.constants import DEFAULT_END_YEAR
from persian_date_limiter.entities.constants import DEFAULT_START_YEAR


def restore_time_zone(zone_id: str, utc_offset_seconds: int) -> tzinfo:
    """Rebuild a zone from its id, falling back to a fixed offset."""
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone(timedelta(seconds=utc_offset_seconds), zone_id)


class CalendarDateRecord(BaseModel):
    """Serializable form of a :class:`CalendarDate`."""

    model_config = ConfigDict(frozen=True)

    instant_millis: int
    time_zone_id: str
    utc_offset_seconds: int = 0

    @classmethod
    def from_calendar_date(cls, value: CalendarDate) -> "CalendarDateRecord":
        return cls(
            instant_millis=value.instant_millis,
            time_zone_id=value.time_zone_id,
            utc_offset_seconds=int(value.instant.utcoffset().total_seconds()),
        )

    def to_calendar_date(self) -> CalendarDate:
        return CalendarDate.from_millis(
            self.instant_millis,
            restore_time_zone(self.time_zone_id, self.utc_offset_seconds),
        )


class LimiterState(BaseModel):
    """Snapshot of every configurable field of a date range limiter."""

    min_year: int = DEFAULT_START_YEAR
    max_year: int = DEFAULT_END_YEAR
    min_date: Optional[CalendarDateRecord] = None
    max_date: Optional[CalendarDateRecord] = None
    selectable_days: List[CalendarDateRecord] = Field(default_factory=list)
    disabled_days: List[CalendarDateRecord] = Field(default_factory=list)
    time_zone_id: Optional[str] = None
    utc_offset_seconds: int = 0

    @model_validator(mode="after")
    def check_year_range(self) -> "LimiterState":
        if self.max_year < self.min_year:
            raise ValueError(
                f"max_year ({self.max_year}) must be larger than or equal to min_year ({self.min_year})"
            )
        return self

    @staticmethod
    def record(value: Optional[CalendarDate]) -> Optional[CalendarDateRecord]:
        return CalendarDateRecord.from_calendar_date(value) if value is not None else None

    @staticmethod
    def zone_fields(zone: Optional[tzinfo]) -> dict:
        if zone is None:
            return {"time_zone_id": None, "utc_offset_seconds": 0}
        offset = zone.utcoffset(None)
        return {
            "time_zone_id": time_zone_id(zone),
            "utc_offset_seconds": int(offset.total_seconds()) if offset is not None else 0,
        }

    def restore_zone(self) -> Optional[tzinfo]:
        if self.time_zone_id is None:
            return None
        return restore_time_zone(self.time_zone_id, self.utc_offset_seconds)
