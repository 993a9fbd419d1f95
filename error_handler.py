# error_handler.py
"""
Centralized error handling for the booking calendar.
Classifies exceptions raised by booking sources and settings loading,
logs them and hands a user-facing description back to the caller.
"""

import logging
import time
from typing import Optional

from error_messages import ErrorMessages, CalendarError

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Error classification with logging and repeat-error suppression."""

    SUPPRESS_AFTER = 5         # errors
    SUPPRESS_WINDOW = 60       # seconds

    def __init__(self, clock=time.monotonic):
        self.logger = logging.getLogger(__name__)
        self.error_count = 0
        self.last_error_time = 0
        self.last_error_info = None
        self._clock = clock

    def handle_exception(self,
                         exception: Exception,
                         context: Optional[str] = None,
                         user_message: Optional[str] = None) -> dict:
        """
        Handle an exception with logging and classification.

        Args:
            exception: The exception that occurred
            context: Additional context about where the error occurred
            user_message: Custom user-friendly message (optional)

        Returns:
            dict: title, message, suggestions, code, plus 'critical' and
            'suppressed' flags for the caller's error banner
        """
        self.error_count += 1

        self.logger.error(
            f"Exception in {context or 'Unknown'}: {type(exception).__name__}: {exception}",
            exc_info=exception,
        )

        error_info = dict(self._classify_exception(exception, user_message))
        error_info['critical'] = self._is_critical_error(exception)
        error_info['suppressed'] = self._is_error_suppressed()
        self.last_error_info = error_info
        return error_info

    def _classify_exception(self, exception: Exception, user_message: Optional[str] = None) -> dict:
        """Classify exception and return appropriate error message info."""

        if user_message:
            return {
                'title': 'Error',
                'message': user_message,
                'suggestions': [],
                'code': 'CUSTOM_001'
            }

        if isinstance(exception, CalendarError):
            # Calendar exceptions carry their own messages
            return {
                'title': type(exception).__name__.replace('Error', ' Error'),
                'message': str(exception),
                'suggestions': list(exception.suggestions),
                'code': exception.error_code or 'CALENDAR_000'
            }
        elif isinstance(exception, FileNotFoundError):
            return ErrorMessages.FILE_NOT_FOUND
        elif isinstance(exception, PermissionError):
            return ErrorMessages.PERMISSION_ERROR
        elif isinstance(exception, ConnectionError):
            return ErrorMessages.NETWORK_ERROR
        elif isinstance(exception, TimeoutError):
            return ErrorMessages.CONNECTION_TIMEOUT
        elif isinstance(exception, ValueError):
            return ErrorMessages.INVALID_CONFIGURATION
        elif isinstance(exception, MemoryError):
            return ErrorMessages.MEMORY_ERROR
        else:
            return ErrorMessages.UNEXPECTED_ERROR

    def _is_critical_error(self, exception: Exception) -> bool:
        """Determine if an error should stop the host application."""
        critical_types = [
            MemoryError,
            SystemError,
        ]

        return any(isinstance(exception, error_type) for error_type in critical_types)

    def _is_error_suppressed(self) -> bool:
        """Check if the error banner should be suppressed due to frequency."""
        current_time = self._clock()

        if self.error_count > self.SUPPRESS_AFTER and (current_time - self.last_error_time) < self.SUPPRESS_WINDOW:
            return True

        self.last_error_time = current_time
        return False

    def reset_error_count(self):
        """Reset error count (after a successful reload)."""
        self.error_count = 0
        self.last_error_time = 0
        self.last_error_info = None
