"""Interface for limiter state persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from persian_date_limiter.entities.limiter_state import LimiterState


class LimiterStateRepositoryInterface(ABC):
    """Interface for storing limiter snapshots between sessions."""

    @abstractmethod
    def save(self, state: LimiterState) -> None:
        """Persist a limiter snapshot, replacing any previous one."""
        pass

    @abstractmethod
    def load(self) -> Optional[LimiterState]:
        """Load the stored snapshot.

        Returns:
            The snapshot, or None when nothing usable is stored
        """
        pass

    @abstractmethod
    def delete(self) -> bool:
        """Remove the stored snapshot.

        Returns:
            True if a snapshot was removed, False otherwise
        """
        pass
