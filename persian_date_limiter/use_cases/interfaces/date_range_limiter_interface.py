"""Interface for date range limiters."""

from abc import ABC, abstractmethod

from persian_date_limiter.entities.calendar_date import CalendarDate


class DateRangeLimiterInterface(ABC):
    """Decides which Persian calendar days a picker may offer."""

    @abstractmethod
    def get_min_year(self) -> int:
        """Get the first selectable Persian year."""
        pass

    @abstractmethod
    def get_max_year(self) -> int:
        """Get the last selectable Persian year."""
        pass

    @abstractmethod
    def get_start_date(self) -> CalendarDate:
        """Get the first selectable day.

        Returns:
            Midnight of the first day a user may pick
        """
        pass

    @abstractmethod
    def get_end_date(self) -> CalendarDate:
        """Get the last selectable day.

        Returns:
            Midnight of the last day a user may pick
        """
        pass

    @abstractmethod
    def is_out_of_range(self, year: int, month: int, day: int) -> bool:
        """Check whether a Persian date may not be picked.

        Args:
            year: Persian year
            month: 0-based Persian month
            day: 1-based day of month

        Returns:
            True if the day is disabled or not selectable, False otherwise
        """
        pass

    @abstractmethod
    def set_to_nearest_date(self, date: CalendarDate) -> CalendarDate:
        """Snap a requested day to the closest day that may be picked.

        Args:
            date: The requested day

        Returns:
            The requested day itself when it is valid, otherwise the closest valid day
        """
        pass
