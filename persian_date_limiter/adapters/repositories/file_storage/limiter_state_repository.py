"""File storage implementation of the limiter state repository."""

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from persian_date_limiter import LOGGER
from persian_date_limiter.entities.limiter_state import LimiterState
from persian_date_limiter.use_cases.interfaces.limiter_state_repository_interface import (
    LimiterStateRepositoryInterface,
)


class FileLimiterStateRepository(LimiterStateRepositoryInterface):
    """JSON file based implementation of the limiter state repository."""

    def __init__(self, state_file_path: str):
        """Initialize the file-based limiter state repository.

        Args:
            state_file_path: Path to the JSON file holding the snapshot
        """
        self.state_file_path = Path(state_file_path)

    def save(self, state: LimiterState) -> None:
        """Write the snapshot, creating parent directories when needed.

        Args:
            state: The limiter snapshot to store
        """
        self.state_file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.state_file_path, "w", encoding="utf-8") as file:
            file.write(state.model_dump_json(indent=4))
        LOGGER.debug(f"Limiter state saved to {self.state_file_path}")

    def load(self) -> Optional[LimiterState]:
        """Read the snapshot from the file storage.

        Returns:
            The stored snapshot, or None if the file is missing or invalid
        """
        if not self.state_file_path.exists():
            LOGGER.warning(f"Limiter state file not found: {self.state_file_path}")
            return None

        try:
            with open(self.state_file_path, "r", encoding="utf-8") as file:
                return LimiterState.model_validate_json(file.read())
        except ValidationError as e:
            LOGGER.error(f"Invalid limiter state file {self.state_file_path}: {e}")
            return None
        except OSError as e:
            LOGGER.error(f"Error reading limiter state file: {str(e)}")
            return None

    def delete(self) -> bool:
        """Remove the snapshot file.

        Returns:
            True if a file was removed, False otherwise
        """
        if not self.state_file_path.exists():
            return False
        self.state_file_path.unlink()
        LOGGER.debug(f"Limiter state removed from {self.state_file_path}")
        return True
