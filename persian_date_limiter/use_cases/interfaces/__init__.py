from __future__ import annotations

__all__ = [
    "DateRangeLimiterInterface",
    "LimiterStateRepositoryInterface",
]
