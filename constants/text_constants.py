# constants/text_constants.py
"""
Text constants for the booking calendar.
All user-visible strings produced by the layout engine live here.
"""

# ============================================================================
# Calendar text
# ============================================================================
class CalendarText:
    # Month names (en-US, long form)
    MONTHS = [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December"
    ]

    MONTHS_SHORT = [
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
    ]

    # Sunday-first, matching the grid columns
    WEEKDAYS_SHORT = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

    YEAR_MONTH_FORMAT = "{month_name} {year}"
    RANGE_FORMAT = "{start} - {end}"
    SHORT_DATE_FORMAT = "{day:02d} {month_short}"
    MORE_BOOKINGS_FORMAT = "+{count} more"

    # Window sizes
    VIEW_MODE_LABELS = {
        1: "1 Month",
        2: "2 Months",
        3: "3 Months",
    }


# ============================================================================
# Booking text
# ============================================================================
class BookingText:
    STATUS_LABELS = {
        "CONFIRMED": "Confirmed",
        "PENDING": "Pending",
        "PROCESSING": "Processing",
        "COMPLETED": "Completed",
        "CANCELLED": "Cancelled",
    }

    PAYMENT_STATUS_LABELS = {
        "PAID": "Paid",
        "UNPAID": "Unpaid",
        "PARTIALLY_PAID": "Partially Paid",
        "REFUNDED": "Refunded",
        "PROCESSING": "Processing",
        "PENDING": "Pending",
        "FAILED": "Failed",
    }

    UNKNOWN_RENTER = "Unknown renter"
    UNKNOWN_CAR = "Unknown vehicle"
    TOOLTIP_FORMAT = "{renter} - {car}\n{start} - {end}"
    CAR_OPTION_FORMAT = "{make} {model} • {plate}"


# ============================================================================
# Filter text
# ============================================================================
class FilterText:
    TITLES = {
        "status": "Booking Status",
        "payment_status": "Payment Status",
        "car_id": "Vehicle",
        "owner_id": "Car Owner",
        "plate": "License Plate",
        "search": "Search",
    }

    ALL_VEHICLES = "All Vehicles"
    ALL_OWNERS = "All Owners"
    ALL_STATUSES = "All Statuses"
    ALL_PAYMENTS = "All Payments"


def format_text(template: str, **kwargs) -> str:
    """텍스트 템플릿 포맷팅"""
    return template.format(**kwargs)
