"""Custom exceptions for the Persian date limiter."""

from typing import Any, Dict, Optional


class PersianDateLimiterError(Exception):
    """Base custom exception class.

    Attributes:
        message: The error message
        details: Optional structured context about the failure
    """

    def __init__(
        self,
        message: Dict[str, Any],
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize the custom exception.

        Args:
            message: The error message as a dictionary
            details: Optional structured context about the failure
        """
        self.message = message
        self.details = details if details else {}
        super().__init__(self.message)

    def to_json(self) -> Dict[str, Any]:
        """Convert the error to a JSON friendly dictionary.

        Returns:
            Message merged with the details
        """
        return {**self.message, **self.details}


class InvalidRange(PersianDateLimiterError, ValueError):
    """Raised when a configured maximum is smaller than the configured minimum."""

    def __init__(
        self,
        start: Any,
        end: Any,
        reason: str = "Year end must be larger than or equal to year start",
    ) -> None:
        super().__init__({"error": reason}, {"start": start, "end": end})


class InvalidDate(PersianDateLimiterError, ValueError):
    """Raised for a Persian year/month/day triple that names no real day."""

    def __init__(
        self,
        reason: str,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> None:
        super().__init__(
            {"error": reason},
            {"year": year, "month": month, "day": day},
        )
