from __future__ import annotations

from persian_date_limiter import DEFAULT_PATH
from persian_date_limiter.settings.limiter_settings import LimiterSettings

LIMITER_SETTINGS = LimiterSettings(_env_file=f"{DEFAULT_PATH}/.env")
