import datetime
from abc import ABC, abstractmethod


class BaseBookingProvider(ABC):
    """
    Booking source used by the calendar.
    Implementations deliver already-validated Booking objects; fetching,
    authentication and retries are the implementation's business.
    """

    @abstractmethod
    def get_bookings(self, start_date, end_date):
        """
        Return the bookings overlapping [start_date, end_date].
        Returns: [Booking, Booking, ...]
        Failures propagate as exceptions (ProviderError, ConnectionError, ...);
        the caller decides how to recover.
        """
        pass


def system_today():
    """Default "today" provider for hosts that have no clock of their own."""
    return datetime.date.today()
