# views/labels.py
import datetime

from constants import CalendarText, BookingText, format_text


def month_label(year, month):
    """'March 2024'"""
    return format_text(CalendarText.YEAR_MONTH_FORMAT,
                       month_name=CalendarText.MONTHS[month - 1], year=year)


def window_label(months):
    """Label for a window of (year, month) pairs: 'March 2024' or 'March 2024 - May 2024'."""
    if not months:
        return ""
    first = month_label(*months[0])
    if len(months) == 1:
        return first
    return format_text(CalendarText.RANGE_FORMAT, start=first, end=month_label(*months[-1]))


def short_date(date: datetime.date):
    """'09 Mar'"""
    return format_text(CalendarText.SHORT_DATE_FORMAT,
                       day=date.day, month_short=CalendarText.MONTHS_SHORT[date.month - 1])


def status_label(status):
    if status is None:
        return ""
    key = getattr(status, 'value', status)
    return BookingText.STATUS_LABELS.get(key) or BookingText.PAYMENT_STATUS_LABELS.get(key, str(key))


def more_label(count):
    if count <= 0:
        return ""
    return format_text(CalendarText.MORE_BOOKINGS_FORMAT, count=count)


def booking_tooltip(booking):
    """Hover text for a booking bar: renter, car and the booked dates."""
    renter = booking.renter.full_name if booking.renter and booking.renter.full_name else BookingText.UNKNOWN_RENTER
    car = booking.car.display_name if booking.car and booking.car.display_name else BookingText.UNKNOWN_CAR
    return format_text(
        BookingText.TOOLTIP_FORMAT,
        renter=renter,
        car=car,
        start=short_date(booking.start_date),
        end=short_date(booking.end_date),
    )


def car_option_label(car):
    return format_text(BookingText.CAR_OPTION_FORMAT,
                       make=car.make, model=car.model, plate=car.plate_number).strip()


def weekday_headers():
    """Column headers for a grid row, Sunday first."""
    return list(CalendarText.WEEKDAYS_SHORT)


def view_mode_label(window_size):
    """'2 Months'"""
    return CalendarText.VIEW_MODE_LABELS.get(window_size, str(window_size))
