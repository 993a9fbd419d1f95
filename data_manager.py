# data_manager.py
import dataclasses
import datetime
import logging
from dataclasses import dataclass, field
from typing import Optional

from config import DEFAULT_WINDOW_SIZE, DEFAULT_VISIBLE_CAP, FILTER_KEYS
from constants import FilterText
from error_handler import ErrorHandler
from error_messages import UnknownFilterError
from models import BookingStatus, PaymentStatus
from providers.base_provider import system_today
from settings_manager import get_calendar_settings
from views.labels import status_label, car_option_label
from views.layout_calculator import layout_window
from views.month_grid import get_month_view_dates, navigate, validate_window_size, window_months

logger = logging.getLogger(__name__)


def _normalize(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _enum_value(value):
    value = getattr(value, 'value', value)
    return str(value).upper() if value is not None else None


@dataclass(frozen=True)
class FilterState:
    """Active booking filters. None means the predicate is cleared."""

    status: Optional[object] = None
    payment_status: Optional[object] = None
    car_id: Optional[object] = None
    owner_id: Optional[object] = None
    plate: Optional[str] = None
    search: Optional[str] = None

    @property
    def predicates(self):
        """Active predicates as a {key: value} dict."""
        return {key: getattr(self, key) for key in FILTER_KEYS if getattr(self, key) is not None}

    @property
    def is_active(self):
        return bool(self.predicates)

    def set(self, key, value):
        if key not in FILTER_KEYS:
            raise UnknownFilterError(key)
        return dataclasses.replace(self, **{key: _normalize(value)})

    def clear(self, key):
        return self.set(key, None)

    def clear_all(self):
        return FilterState()

    def replace(self, predicates):
        """A new state holding exactly the given predicates."""
        state = FilterState()
        for key, value in (predicates or {}).items():
            state = state.set(key, value)
        return state


def _matches(booking, key, value):
    if key == 'status':
        return _enum_value(booking.status) == _enum_value(value)
    if key == 'payment_status':
        return booking.payment_status is not None and _enum_value(booking.payment_status) == _enum_value(value)
    if key == 'car_id':
        return booking.car is not None and str(booking.car.id) == str(value)
    if key == 'owner_id':
        return booking.owner is not None and str(booking.owner.id) == str(value)
    if key == 'plate':
        return booking.car is not None and str(value).upper() in booking.car.plate_number.upper()
    if key == 'search':
        needle = str(value).lower()
        return any(needle in text.lower() for text in _search_texts(booking))
    raise UnknownFilterError(key)


def _search_texts(booking):
    texts = [str(booking.id)]
    if booking.renter:
        texts += [booking.renter.full_name, booking.renter.email]
    if booking.car:
        texts += [booking.car.display_name, booking.car.plate_number]
    return texts


def apply_filters(predicates, bookings):
    """
    Narrow bookings to the ones matching every active predicate.

    Args:
        predicates: FilterState or {key: value} mapping
        bookings: iterable of Booking

    Returns:
        list of Booking in input order (possibly empty)
    """
    if isinstance(predicates, FilterState):
        active = predicates.predicates
    else:
        active = FilterState().replace(predicates).predicates

    bookings = list(bookings)
    if not active:
        return bookings
    return [b for b in bookings if all(_matches(b, k, v) for k, v in active.items())]


def filter_options(bookings):
    """
    Select options for the filter panel.
    Cars and owners are the distinct ones among the bookings, in first-seen order;
    statuses and payments list every known value.
    """
    cars, owners = {}, {}
    for booking in bookings:
        if booking.car is not None and booking.car.id not in cars:
            cars[booking.car.id] = car_option_label(booking.car)
        if booking.owner is not None and booking.owner.id not in owners:
            owners[booking.owner.id] = booking.owner.full_name or str(booking.owner.id)
    return {
        'cars': [(None, FilterText.ALL_VEHICLES)] + list(cars.items()),
        'owners': [(None, FilterText.ALL_OWNERS)] + list(owners.items()),
        'statuses': [(None, FilterText.ALL_STATUSES)] + [(s.value, status_label(s)) for s in BookingStatus],
        'payments': [(None, FilterText.ALL_PAYMENTS)] + [(s.value, status_label(s)) for s in PaymentStatus],
    }


def active_filter_labels(filters, bookings=()):
    """(key, title, display value) for each active filter, for the filter chips."""
    options = filter_options(bookings)
    car_labels = {str(k): v for k, v in options['cars'] if k is not None}
    owner_labels = {str(k): v for k, v in options['owners'] if k is not None}

    labels = []
    for key, value in filters.predicates.items():
        if key in ('status', 'payment_status'):
            display = status_label(value)
        elif key == 'car_id':
            display = car_labels.get(str(value), str(value))
        elif key == 'owner_id':
            display = owner_labels.get(str(value), str(value))
        else:
            display = str(value)
        labels.append((key, FilterText.TITLES[key], display))
    return labels


@dataclass(frozen=True)
class ViewState:
    """Caller-owned calendar state: selection, filters and the visible window."""

    anchor_date: datetime.date
    window_size: int = DEFAULT_WINDOW_SIZE
    selected_booking_id: Optional[int] = None
    filters: FilterState = field(default_factory=FilterState)

    def select(self, booking_id):
        return dataclasses.replace(self, selected_booking_id=booking_id)

    def deselect(self):
        return dataclasses.replace(self, selected_booking_id=None)

    def with_filters(self, filters):
        # Selection is left alone; the details panel decides what to do
        return dataclasses.replace(self, filters=filters)

    def set_filter(self, key, value):
        return self.with_filters(self.filters.set(key, value))

    def clear_filters(self):
        return self.with_filters(self.filters.clear_all())

    def with_window_size(self, window_size):
        return dataclasses.replace(self, window_size=validate_window_size(window_size))

    def navigate(self, direction):
        return dataclasses.replace(self, anchor_date=navigate(direction, self.anchor_date, self.window_size))


def selected_booking(state, visible_bookings):
    """The selected booking if it is among visible_bookings, else None."""
    if state.selected_booking_id is None:
        return None
    for booking in visible_bookings:
        if booking.id == state.selected_booking_id:
            return booking
    return None


class DataManager:
    """
    Glue between a booking source and the layout engine for one screen.

    Holds the fetched bookings and the ViewState; everything it renders is
    computed on demand from those two.
    """

    def __init__(self, provider, today_provider=system_today, anchor_date=None,
                 window_size=DEFAULT_WINDOW_SIZE, visible_cap=DEFAULT_VISIBLE_CAP,
                 error_handler=None):
        self.provider = provider
        self.today_provider = today_provider
        self.visible_cap = visible_cap
        self.error_handler = error_handler or ErrorHandler()

        validate_window_size(window_size)
        self.state = ViewState(anchor_date=anchor_date or today_provider(), window_size=window_size)
        self.bookings = []
        self.last_error = None

    @classmethod
    def from_settings(cls, provider, settings=None, **kwargs):
        calendar_settings = get_calendar_settings(settings)
        kwargs.setdefault('window_size', calendar_settings['window_size'])
        kwargs.setdefault('visible_cap', calendar_settings['visible_cap'])
        return cls(provider, **kwargs)

    def visible_range(self):
        """First and last date shown by the current window."""
        months = window_months(self.state.anchor_date, self.state.window_size)
        start_date, _ = get_month_view_dates(*months[0])
        _, end_date = get_month_view_dates(*months[-1])
        return start_date, end_date

    def refresh(self):
        """
        Reload bookings for the visible window.

        Returns:
            bool: False when the source failed; bookings are then empty and
            last_error holds the classified error
        """
        start_date, end_date = self.visible_range()
        try:
            bookings = list(self.provider.get_bookings(start_date, end_date))
        except Exception as e:
            self.last_error = self.error_handler.handle_exception(
                e, context=f"loading bookings {start_date} - {end_date}")
            self.bookings = []
            return False

        self.bookings = bookings
        self.last_error = None
        self.error_handler.reset_error_count()
        logger.info(f"Loaded {len(bookings)} bookings for {start_date} - {end_date}")
        return True

    @property
    def visible_bookings(self):
        return apply_filters(self.state.filters, self.bookings)

    @property
    def selected_booking(self):
        return selected_booking(self.state, self.visible_bookings)

    def layout(self):
        return layout_window(
            self.visible_bookings,
            self.state.anchor_date,
            self.state.window_size,
            today=self.today_provider(),
            visible_cap=self.visible_cap,
            selected_booking_id=self.state.selected_booking_id,
        )

    def select(self, booking_id):
        self.state = self.state.select(booking_id)

    def deselect(self):
        self.state = self.state.deselect()

    def set_filter(self, key, value):
        self.state = self.state.set_filter(key, value)

    def clear_filter(self, key):
        self.state = self.state.with_filters(self.state.filters.clear(key))

    def clear_filters(self):
        self.state = self.state.clear_filters()

    def set_window_size(self, window_size, refresh=True):
        self.state = self.state.with_window_size(window_size)
        if refresh:
            self.refresh()

    def navigate(self, direction, refresh=True):
        self.state = self.state.navigate(direction)
        if refresh:
            self.refresh()

    def go_to_today(self, refresh=True):
        self.state = dataclasses.replace(self.state, anchor_date=self.today_provider())
        if refresh:
            self.refresh()
