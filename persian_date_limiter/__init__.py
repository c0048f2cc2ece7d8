from __future__ import annotations

__version__ = "1.4.2"
__name__ = "persian_date_limiter"

import os
from pathlib import Path

from chromatrace import LoggingConfig, LoggingSettings

from persian_date_limiter.utils.basic_logger import loguru_logger


DEFAULT_PATH = Path(os.path.realpath(__file__)).parents[1]


logging_config = LoggingConfig(
    settings=LoggingSettings(
        application_level="DEBUG",
        enable_tracing=True,
        ignore_nan_trace=True,
        log_level="INFO",
        file_path="persian_date_limiter.log",
        enable_file_logging=False,
        max_bytes=10 * 1024 * 1024,
        backup_count=5,
    )
)
LOGGER = logging_config.get_logger(__name__)


__all__ = ["__version__", "__name__", "loguru_logger", "DEFAULT_PATH", "LOGGER"]
