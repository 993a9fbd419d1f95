# tests/test_models.py
import datetime
import os
import sys
import unittest
from decimal import Decimal

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from error_messages import BookingRecordError
from models import booking_from_record, Booking, BookingStatus, PaymentStatus, CarRef, PersonRef
from views.labels import (booking_tooltip, window_label, status_label, more_label, short_date,
                         weekday_headers, view_mode_label)

D = datetime.date


def service_record(**overrides):
    """예약 서비스가 돌려주는 형태의 레코드"""
    record = {
        'id': 42,
        'userId': 7,
        'carId': 3,
        'pickUpDate': '2024-03-10T10:30:00.000Z',
        'dropOffDate': '2024-03-22T21:30:00.000Z',
        'totalDays': 13,
        'totalAmount': 1250.5,
        'bookingStatus': 'CONFIRMED',
        'paymentStatus': 'PAID',
        'carOwnerId': 11,
        'car': {
            'id': 3,
            'make': 'Toyota',
            'model': 'Corolla',
            'plateNumber': 'RAD 123A',
            'owner': {'id': 11, 'fName': 'Olive', 'lName': 'Owner', 'email': 'olive@example.com'},
        },
        'user': {'id': 7, 'fName': 'Benny', 'lName': 'Chrispin', 'email': 'benny@example.com'},
    }
    record.update(overrides)
    return record


class TestBookingFromRecord(unittest.TestCase):

    def test_full_record(self):
        booking = booking_from_record(service_record())
        self.assertEqual(booking.id, 42)
        self.assertEqual(booking.start_date, D(2024, 3, 10))
        self.assertEqual(booking.end_date, D(2024, 3, 22))
        self.assertEqual(booking.status, BookingStatus.CONFIRMED)
        self.assertEqual(booking.payment_status, PaymentStatus.PAID)
        self.assertEqual(booking.amount, Decimal("1250.5"))
        self.assertEqual(booking.car.plate_number, 'RAD 123A')
        self.assertEqual(booking.renter.full_name, 'Benny Chrispin')
        # owner comes from the car
        self.assertEqual(booking.owner.id, 11)
        self.assertEqual(booking.owner.full_name, 'Olive Owner')
        self.assertEqual(booking.duration_days, 13)

    def test_minimal_record(self):
        booking = booking_from_record({'id': 1, 'startDate': '2024-05-05', 'endDate': '2024-05-08',
                                       'carId': 9, 'carOwnerId': 4, 'userId': 2})
        self.assertEqual(booking.status, BookingStatus.PENDING)
        self.assertEqual(booking.amount, Decimal("0"))
        self.assertEqual(booking.car, CarRef(id=9))
        self.assertEqual(booking.owner, PersonRef(id=4))
        self.assertEqual(booking.renter, PersonRef(id=2))
        self.assertIsNone(booking.payment_status)

    def test_lowercase_status(self):
        booking = booking_from_record(service_record(bookingStatus='processing'))
        self.assertEqual(booking.status, BookingStatus.PROCESSING)

    def test_reversed_interval_passes_through(self):
        booking = booking_from_record(service_record(pickUpDate='2024-03-22', dropOffDate='2024-03-10'))
        self.assertFalse(booking.is_well_formed)
        self.assertEqual(booking.duration_days, 0)

    def test_invalid_records(self):
        for overrides in ({'id': None}, {'pickUpDate': 'not-a-date'}, {'dropOffDate': ''},
                          {'bookingStatus': 'LOST'}, {'totalAmount': 'lots'}):
            with self.assertRaises(BookingRecordError):
                booking_from_record(service_record(**overrides))

    def test_record_error_carries_code(self):
        with self.assertRaises(BookingRecordError) as ctx:
            booking_from_record(service_record(pickUpDate='garbage'))
        self.assertEqual(ctx.exception.error_code, 'SOURCE_002')

    def test_non_object_record_and_fields(self):
        for record in (None, 'oops', [1, 2], 42):
            with self.assertRaises(BookingRecordError):
                booking_from_record(record)
        for overrides in ({'user': 'bob'}, {'car': 'Toyota'}, {'car': {'id': 3, 'owner': 'olive'}}):
            with self.assertRaises(BookingRecordError):
                booking_from_record(service_record(**overrides))


class TestBooking(unittest.TestCase):

    def test_covers_is_inclusive(self):
        booking = Booking(id=1, start_date=D(2024, 3, 1), end_date=D(2024, 3, 3))
        self.assertTrue(booking.covers(D(2024, 3, 1)))
        self.assertTrue(booking.covers(D(2024, 3, 3)))
        self.assertFalse(booking.covers(D(2024, 3, 4)))

    def test_explicit_owner_wins(self):
        car = CarRef(id=1, owner=PersonRef(id=5))
        booking = Booking(id=1, start_date=D(2024, 3, 1), end_date=D(2024, 3, 1),
                          car=car, owner=PersonRef(id=6))
        self.assertEqual(booking.owner.id, 6)


class TestLabels(unittest.TestCase):

    def test_tooltip(self):
        booking = booking_from_record(service_record())
        self.assertEqual(booking_tooltip(booking), "Benny Chrispin - Toyota Corolla\n10 Mar - 22 Mar")

    def test_tooltip_without_references(self):
        booking = Booking(id=1, start_date=D(2024, 1, 2), end_date=D(2024, 1, 2))
        self.assertEqual(booking_tooltip(booking), "Unknown renter - Unknown vehicle\n02 Jan - 02 Jan")

    def test_window_label(self):
        self.assertEqual(window_label([]), "")
        self.assertEqual(window_label([(2024, 3)]), "March 2024")
        self.assertEqual(window_label([(2024, 11), (2024, 12), (2025, 1)]), "November 2024 - January 2025")

    def test_small_labels(self):
        self.assertEqual(status_label(BookingStatus.CANCELLED), "Cancelled")
        self.assertEqual(status_label("PARTIALLY_PAID"), "Partially Paid")
        self.assertEqual(status_label(None), "")
        self.assertEqual(more_label(2), "+2 more")
        self.assertEqual(more_label(0), "")
        self.assertEqual(short_date(D(2024, 12, 5)), "05 Dec")

    def test_grid_headers_and_view_modes(self):
        self.assertEqual(weekday_headers(), ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"])
        self.assertEqual([view_mode_label(n) for n in (1, 2, 3)], ["1 Month", "2 Months", "3 Months"])


if __name__ == '__main__':
    unittest.main()
