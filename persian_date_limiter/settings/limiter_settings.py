from __future__ import annotations

from typing import Optional
from zoneinfo import ZoneInfo
from zoneinfo import ZoneInfoNotFoundError

from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator
from pydantic_settings import SettingsConfigDict

from persian_date_limiter import DEFAULT_PATH
from persian_date_limiter.entities.constants import DEFAULT_END_YEAR
from persian_date_limiter.entities.constants import DEFAULT_START_YEAR
from persian_date_limiter.utils.pydantic_advanced_settings import CustomizedSettings


class LimiterSettings(CustomizedSettings):
    min_year: int = Field(
        default=DEFAULT_START_YEAR,
        description="First selectable Persian year",
    )
    max_year: int = Field(
        default=DEFAULT_END_YEAR,
        description="Last selectable Persian year",
    )
    time_zone: Optional[str] = Field(
        default=None,
        description="IANA zone used for midnight normalisation, system zone when empty",
    )
    state_file_path: str = Field(
        default=f"{DEFAULT_PATH}/limiter_state.json",
        description="JSON file holding the persisted limiter state",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PERSIAN_LIMITER_",
        extra="ignore",
    )

    @field_validator("time_zone")
    @classmethod
    def check_time_zone(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {value}") from e
        return value

    @model_validator(mode="after")
    def check_year_range(self) -> "LimiterSettings":
        if self.max_year < self.min_year:
            raise ValueError(
                "Year end must be larger than or equal to year start "
                f"({self.min_year}-{self.max_year})"
            )
        return self
