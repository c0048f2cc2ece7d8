from __future__ import annotations

from persian_date_limiter.adapters.repositories.file_storage.limiter_state_repository import (
    FileLimiterStateRepository,
)

__all__ = ["FileLimiterStateRepository"]
