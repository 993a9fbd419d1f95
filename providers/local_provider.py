# providers/local_provider.py
import json
import logging

from .base_provider import BaseBookingProvider
from error_messages import BookingRecordError
from models import booking_from_record

logger = logging.getLogger(__name__)


class LocalBookingProvider(BaseBookingProvider):
    """Booking source backed by an in-memory list, optionally loaded from JSON."""

    def __init__(self, bookings=None):
        self._bookings = list(bookings or [])
        self.skipped_records = []

    @classmethod
    def from_records(cls, records):
        """Build a provider from booking-service records, skipping unreadable ones."""
        provider = cls()
        for record in records:
            try:
                provider._bookings.append(booking_from_record(record))
            except BookingRecordError as e:
                logger.warning(f"Skipping booking record: {e}")
                provider.skipped_records.append(record)
        return provider

    @classmethod
    def from_json_file(cls, path):
        """Load records from a JSON file holding a list or {"data": [...]}."""
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if isinstance(payload, dict):
            payload = payload.get("data", [])
        provider = cls.from_records(payload)
        logger.info(f"Loaded {len(provider._bookings)} bookings from {path}")
        return provider

    def get_bookings(self, start_date, end_date):
        return [b for b in self._bookings
                if b.start_date <= end_date and b.end_date >= start_date]

    def all_bookings(self):
        return list(self._bookings)
