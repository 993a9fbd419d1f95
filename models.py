# models.py
"""Value types shared by the grid builder, the placement engine and the filters.

Every type here is immutable; a render pass creates them and throws them away.
"""

import datetime
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Tuple

from dateutil import parser as dateutil_parser

from config import DAYS_PER_WEEK
from error_messages import BookingRecordError, ErrorMessages


class BookingStatus(Enum):
    """Booking lifecycle states."""

    CONFIRMED = "CONFIRMED"
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class PaymentStatus(Enum):
    """Payment states reported alongside a booking."""

    PAID = "PAID"
    UNPAID = "UNPAID"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    REFUNDED = "REFUNDED"
    PROCESSING = "PROCESSING"
    PENDING = "PENDING"
    FAILED = "FAILED"


@dataclass(frozen=True)
class PersonRef:
    """A renter or a car owner as seen by the calendar."""

    id: int
    first_name: str = ""
    last_name: str = ""
    email: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class CarRef:
    id: int
    make: str = ""
    model: str = ""
    plate_number: str = ""
    owner: Optional[PersonRef] = None

    @property
    def display_name(self) -> str:
        return f"{self.make} {self.model}".strip()


@dataclass(frozen=True)
class Booking:
    """A rental booking over the inclusive interval [start_date, end_date].

    Records are validated upstream; a record with start_date > end_date can
    still arrive and is treated as an empty interval.
    """

    id: int
    start_date: datetime.date
    end_date: datetime.date
    status: BookingStatus = BookingStatus.PENDING
    amount: Decimal = Decimal("0")
    car: Optional[CarRef] = None
    renter: Optional[PersonRef] = None
    owner: Optional[PersonRef] = None
    payment_status: Optional[PaymentStatus] = None

    def __post_init__(self):
        if self.owner is None and self.car is not None and self.car.owner is not None:
            object.__setattr__(self, 'owner', self.car.owner)

    @property
    def is_well_formed(self) -> bool:
        return self.start_date <= self.end_date

    @property
    def duration_days(self) -> int:
        """Number of calendar days covered, 0 for a malformed interval."""
        if not self.is_well_formed:
            return 0
        return (self.end_date - self.start_date).days + 1

    def covers(self, date: datetime.date) -> bool:
        return self.start_date <= date <= self.end_date


@dataclass(frozen=True)
class CalendarDay:
    date: datetime.date
    belongs_to_visible_month: bool
    is_today: bool = False


@dataclass(frozen=True)
class MonthGrid:
    """Six full weeks of CalendarDay cells around one month."""

    anchor_month: Tuple[int, int]
    days: Tuple[CalendarDay, ...]

    @property
    def first_date(self) -> datetime.date:
        return self.days[0].date

    @property
    def last_date(self) -> datetime.date:
        return self.days[-1].date

    @property
    def rows(self):
        return [self.days[i:i + DAYS_PER_WEEK] for i in range(0, len(self.days), DAYS_PER_WEEK)]

    def contains(self, date: datetime.date) -> bool:
        return self.first_date <= date <= self.last_date

    def index_of(self, date: datetime.date) -> int:
        """Cell index of a date, or -1 when the date lies outside the grid."""
        if not self.contains(date):
            return -1
        return (date - self.first_date).days


@dataclass(frozen=True)
class BarSegment:
    """The part of one booking drawn inside a single week row."""

    booking_id: int
    row: int
    start_column: int
    column_span: int

    @property
    def end_column(self) -> int:
        return self.start_column + self.column_span - 1


@dataclass(frozen=True)
class DayOverflow:
    """Same-day collisions for one date.

    The first covering booking is drawn as a bar; additional_booking_ids are
    the indicator marks shown next to it, capped by the caller.
    """

    date: datetime.date
    additional_booking_ids: Tuple[int, ...]
    total_count: int

    @property
    def hidden_count(self) -> int:
        """Bookings covered by neither the bar nor an indicator ("+N more")."""
        return max(self.total_count - 1 - len(self.additional_booking_ids), 0)


@dataclass(frozen=True)
class MonthLayout:
    grid: MonthGrid
    label: str
    segments: Tuple[BarSegment, ...] = ()
    overflows: Tuple[DayOverflow, ...] = ()


@dataclass(frozen=True)
class WindowLayout:
    anchor_date: datetime.date
    window_size: int
    label: str
    months: Tuple[MonthLayout, ...] = field(default_factory=tuple)

    @property
    def grids(self):
        return [month.grid for month in self.months]


def _parse_date(value, field_name, record_id):
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str) or not value:
        raise _record_error(f"booking {record_id}: missing {field_name}")
    try:
        # Only the local calendar day matters
        return dateutil_parser.isoparse(value).date()
    except (ValueError, OverflowError) as e:
        raise _record_error(f"booking {record_id}: invalid {field_name} {value!r}") from e


def _parse_person(data, field_name, record_id):
    if not data:
        return None
    if not isinstance(data, dict):
        raise _record_error(f"booking {record_id}: {field_name} must be an object")
    return PersonRef(
        id=data.get('id'),
        first_name=data.get('fName') or data.get('fname') or "",
        last_name=data.get('lName') or data.get('lname') or "",
        email=data.get('email') or "",
    )


def _parse_enum(enum_cls, value, field_name, record_id):
    if value is None or value == "":
        return None
    try:
        return enum_cls(str(value).upper())
    except ValueError as e:
        raise _record_error(f"booking {record_id}: unknown {field_name} {value!r}") from e


def _record_error(message):
    info = ErrorMessages.INVALID_BOOKING_RECORD
    return BookingRecordError(message, error_code=info['code'], suggestions=info['suggestions'])


def booking_from_record(record: dict) -> Booking:
    """
    Build a Booking from a booking-service record.

    The record uses the service's field names (pickUpDate, dropOffDate,
    bookingStatus, totalAmount, car, user, carOwnerId). Intervals with the
    pick-up after the drop-off are passed through unchanged.

    Raises:
        BookingRecordError: non-object record or nested field, missing id,
            unparseable dates, status or amount
    """
    if not isinstance(record, dict):
        raise _record_error(f"booking record must be an object, got {type(record).__name__}")
    record_id = record.get('id')
    if record_id is None:
        raise _record_error("booking record without id")

    start_date = _parse_date(record.get('pickUpDate', record.get('startDate')), 'pickUpDate', record_id)
    end_date = _parse_date(record.get('dropOffDate', record.get('endDate')), 'dropOffDate', record_id)

    status = _parse_enum(BookingStatus, record.get('bookingStatus', record.get('status')),
                         'bookingStatus', record_id)
    payment_status = _parse_enum(PaymentStatus, record.get('paymentStatus'), 'paymentStatus', record_id)

    try:
        amount = Decimal(str(record.get('totalAmount', record.get('amount', 0)) or 0))
    except InvalidOperation as e:
        raise _record_error(f"booking {record_id}: invalid totalAmount") from e

    car = None
    car_data = record.get('car')
    if car_data:
        if not isinstance(car_data, dict):
            raise _record_error(f"booking {record_id}: car must be an object")
        car = CarRef(
            id=car_data.get('id', record.get('carId')),
            make=car_data.get('make') or "",
            model=car_data.get('model') or "",
            plate_number=car_data.get('plateNumber') or "",
            owner=_parse_person(car_data.get('owner'), 'car.owner', record_id),
        )
    elif record.get('carId') is not None:
        car = CarRef(id=record['carId'])

    owner = None
    if (car is None or car.owner is None) and record.get('carOwnerId') is not None:
        owner = PersonRef(id=record['carOwnerId'])

    renter = _parse_person(record.get('user'), 'user', record_id)
    if renter is None and record.get('userId') is not None:
        renter = PersonRef(id=record['userId'])

    return Booking(
        id=record_id,
        start_date=start_date,
        end_date=end_date,
        status=status or BookingStatus.PENDING,
        amount=amount,
        car=car,
        renter=renter,
        owner=owner,
        payment_status=payment_status,
    )
