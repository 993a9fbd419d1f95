# error_messages.py
"""
User-friendly error messages for the booking calendar.
Provides consistent, actionable error descriptions for the host application.
"""


class ErrorMessages:
    """Centralized error message definitions with recovery suggestions."""

    # Booking source errors
    NETWORK_ERROR = {
        'title': 'Network Connection Error',
        'message': 'Unable to reach the booking service. Please check your connection and try again.',
        'suggestions': [
            'Check your internet connection',
            'Try again in a few minutes'
        ],
        'code': 'NETWORK_001'
    }

    CONNECTION_TIMEOUT = {
        'title': 'Connection Timeout',
        'message': 'The booking service is taking too long to respond.',
        'suggestions': [
            'Try again later',
            'Contact support if problem persists'
        ],
        'code': 'NETWORK_002'
    }

    INVALID_BOOKING_RECORD = {
        'title': 'Invalid Booking Record',
        'message': 'A booking record could not be read and was skipped.',
        'suggestions': [
            'Check the pick-up and drop-off dates of the booking',
            'Report the booking id to support'
        ],
        'code': 'SOURCE_002'
    }

    # File system errors
    FILE_NOT_FOUND = {
        'title': 'File Not Found',
        'message': 'A required file could not be found.',
        'suggestions': [
            'Check the configured file path',
            'Default values will be used'
        ],
        'code': 'FILE_001'
    }

    PERMISSION_ERROR = {
        'title': 'Permission Denied',
        'message': 'The application does not have permission to access required files.',
        'suggestions': [
            'Check file and folder permissions'
        ],
        'code': 'FILE_002'
    }

    # Calendar usage errors
    INVALID_WINDOW_SIZE = {
        'title': 'Invalid Calendar Window',
        'message': 'The calendar can show 1, 2 or 3 months at a time.',
        'suggestions': [
            'Choose the single, double or triple month view'
        ],
        'code': 'CALENDAR_001'
    }

    INVALID_NAVIGATION = {
        'title': 'Invalid Navigation',
        'message': 'The calendar can only move to the previous or next window.',
        'suggestions': [
            'Use "prev" or "next"'
        ],
        'code': 'CALENDAR_002'
    }

    UNKNOWN_FILTER = {
        'title': 'Unknown Filter',
        'message': 'The requested booking filter does not exist.',
        'suggestions': [
            'Use one of: status, payment_status, car_id, owner_id, plate, search'
        ],
        'code': 'CALENDAR_003'
    }

    # Application errors
    MEMORY_ERROR = {
        'title': 'Insufficient Memory',
        'message': 'The application is running low on available memory.',
        'suggestions': [
            'Close other applications to free memory',
            'Restart the application'
        ],
        'code': 'APP_001'
    }

    UNEXPECTED_ERROR = {
        'title': 'Unexpected Error',
        'message': 'An unexpected error has occurred.',
        'suggestions': [
            'Try the operation again',
            'Report this issue to support with error details'
        ],
        'code': 'APP_002'
    }

    # Configuration errors
    INVALID_CONFIGURATION = {
        'title': 'Invalid Configuration',
        'message': 'The calendar configuration contains invalid data.',
        'suggestions': [
            'Check window_size and visible_cap in the settings file'
        ],
        'code': 'CONFIG_002'
    }

    @staticmethod
    def format_suggestions(suggestions):
        """
        Format suggestion list for display.

        Args:
            suggestions (list): List of suggestion strings

        Returns:
            str: Formatted suggestions string
        """
        if not suggestions:
            return ""

        if len(suggestions) == 1:
            return f"Suggestion: {suggestions[0]}"

        formatted = "Suggestions:\n"
        for i, suggestion in enumerate(suggestions, 1):
            formatted += f"{i}. {suggestion}\n"

        return formatted.strip()


class CalendarError(Exception):
    """Base exception class for booking calendar errors."""

    def __init__(self, message, error_code=None, suggestions=None):
        super().__init__(message)
        self.error_code = error_code
        self.suggestions = suggestions or []


class InvalidWindowSizeError(CalendarError, ValueError):
    """Raised when a window size outside 1..3 months is requested."""

    def __init__(self, window_size):
        info = ErrorMessages.INVALID_WINDOW_SIZE
        super().__init__(
            f"window_size must be 1, 2 or 3, got {window_size!r}",
            error_code=info['code'],
            suggestions=info['suggestions'],
        )
        self.window_size = window_size


class InvalidNavigationError(CalendarError, ValueError):
    """Raised for a navigation direction other than prev/next."""

    def __init__(self, direction):
        info = ErrorMessages.INVALID_NAVIGATION
        super().__init__(
            f"direction must be 'prev' or 'next', got {direction!r}",
            error_code=info['code'],
            suggestions=info['suggestions'],
        )
        self.direction = direction


class UnknownFilterError(CalendarError, KeyError):
    """Raised when a filter key is not one of the supported predicates."""

    def __init__(self, key):
        info = ErrorMessages.UNKNOWN_FILTER
        super().__init__(
            f"unknown filter key {key!r}",
            error_code=info['code'],
            suggestions=info['suggestions'],
        )
        self.key = key

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class BookingRecordError(CalendarError, ValueError):
    """Exception for booking records that cannot be parsed."""
    pass


class ProviderError(CalendarError):
    """Exception for booking source failures."""
    pass


class SettingsError(CalendarError):
    """Exception for settings and configuration errors."""
    pass
