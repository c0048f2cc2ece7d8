"""Dependency injection configuration for the Persian date limiter."""

from __future__ import annotations

from typing import Optional

from lagom import Container, Singleton

from persian_date_limiter import LOGGER
from persian_date_limiter.adapters.default_date_range_limiter import DefaultDateRangeLimiter
from persian_date_limiter.adapters.repositories.file_storage import FileLimiterStateRepository
from persian_date_limiter.settings import LIMITER_SETTINGS
from persian_date_limiter.settings.limiter_settings import LimiterSettings
from persian_date_limiter.use_cases.interfaces.date_range_limiter_interface import (
    DateRangeLimiterInterface,
)
from persian_date_limiter.use_cases.interfaces.limiter_state_repository_interface import (
    LimiterStateRepositoryInterface,
)


def restore_or_create_limiter(
    settings: LimiterSettings,
    repository: LimiterStateRepositoryInterface,
) -> DefaultDateRangeLimiter:
    """Restore the stored limiter, or build a fresh one from settings.

    Args:
        settings: Limiter settings used when nothing is stored
        repository: Where a previous session may have saved its state

    Returns:
        The restored or newly configured limiter
    """
    state = repository.load()
    if state is None:
        LOGGER.info("No stored limiter state, using settings defaults")
        return DefaultDateRangeLimiter.from_settings(settings)
    LOGGER.info("Restored limiter state from storage")
    return DefaultDateRangeLimiter.from_state(state)


def configure_container(settings: Optional[LimiterSettings] = None) -> Container:
    """Configure the dependency injection container.

    Args:
        settings: Settings to bind; loaded from the environment when omitted

    Returns:
        Configured Lagom container
    """
    container = Container()

    container[LimiterSettings] = settings if settings is not None else LIMITER_SETTINGS

    # A) Bind INTERFACE -> ADAPTER
    container[LimiterStateRepositoryInterface] = Singleton(
        lambda c: FileLimiterStateRepository(c[LimiterSettings].state_file_path)
    )

    container[DateRangeLimiterInterface] = Singleton(
        lambda c: restore_or_create_limiter(
            c[LimiterSettings],
            c[LimiterStateRepositoryInterface],
        )
    )

    return container
