# views/layout_calculator.py
import datetime
import logging
from collections import defaultdict

from config import DAYS_PER_WEEK, DEFAULT_VISIBLE_CAP
from models import BarSegment, DayOverflow, MonthLayout, WindowLayout
from .labels import month_label
from .month_grid import build_window

logger = logging.getLogger(__name__)


def _clip_to_grid(booking, grid):
    """Grid indices of the booking's first and last visible day, or None."""
    if not booking.is_well_formed:
        logger.debug(f"booking {booking.id}: start {booking.start_date} after end {booking.end_date}, skipped")
        return None

    draw_start_date = max(booking.start_date, grid.first_date)
    draw_end_date = min(booking.end_date, grid.last_date)
    if draw_start_date > draw_end_date:
        return None
    return grid.index_of(draw_start_date), grid.index_of(draw_end_date)


class MonthLayoutCalculator:
    """Bar segments and same-day overflow for one month grid.

    A booking is clipped to the grid, then cut at every week boundary so
    each segment lives in exactly one row. Overlapping segments are left
    as they are; draw order is up to the renderer.
    """

    def __init__(self, bookings, grid, visible_cap=DEFAULT_VISIBLE_CAP):
        self.bookings = list(bookings)
        self.grid = grid
        self.visible_cap = max(visible_cap, 0)

        self.segments = []
        self.bookings_by_date = defaultdict(list)

    def calculate(self):
        self.segments = []
        self.bookings_by_date = defaultdict(list)

        for booking in self.bookings:
            self._place_booking(booking)

        return self.segments, self._collect_overflows()

    def _place_booking(self, booking):
        indices = _clip_to_grid(booking, self.grid)
        if indices is None:
            return
        start_index, end_index = indices

        self.segments.extend(split_into_segments(booking.id, start_index, end_index))

        for index in range(start_index, end_index + 1):
            self.bookings_by_date[self.grid.days[index].date].append(booking.id)

    def _collect_overflows(self):
        overflows = []
        for day in self.grid.days:
            ids = self.bookings_by_date.get(day.date, [])
            if len(ids) > 1:
                overflows.append(DayOverflow(
                    date=day.date,
                    additional_booking_ids=tuple(ids[1:1 + self.visible_cap]),
                    total_count=len(ids),
                ))
        return overflows


def split_into_segments(booking_id, start_index, end_index):
    """Cut the cell range [start_index, end_index] at week-row boundaries."""
    segments = []
    index = start_index
    while index <= end_index:
        row = index // DAYS_PER_WEEK
        row_end_index = row * DAYS_PER_WEEK + DAYS_PER_WEEK - 1
        segment_end = min(end_index, row_end_index)
        segments.append(BarSegment(
            booking_id=booking_id,
            row=row,
            start_column=index % DAYS_PER_WEEK,
            column_span=segment_end - index + 1,
        ))
        index = segment_end + 1
    return segments


def place_bookings(bookings, grid):
    """
    Map each booking onto the week rows of a grid.

    Bookings outside the grid, and malformed intervals (start after end),
    contribute no segments. Output follows booking order, then row order.
    """
    segments = []
    for booking in bookings:
        indices = _clip_to_grid(booking, grid)
        if indices is None:
            continue
        segments.extend(split_into_segments(booking.id, *indices))
    return segments


def bookings_in_grid(bookings, grid):
    """Bookings with at least one day inside the grid."""
    return [b for b in bookings if _clip_to_grid(b, grid) is not None]


def aggregate_day(date: datetime.date, bookings):
    """Ids of the bookings covering date (inclusive on both ends), in input order."""
    return [b.id for b in bookings if b.start_date <= date <= b.end_date]


def compute_overflow(date: datetime.date, bookings, visible_cap=DEFAULT_VISIBLE_CAP):
    """
    Summarize same-day collisions for one date.

    The first covering booking is the bar-rendered one; up to visible_cap
    of the following ones become indicator marks. total_count is always
    the full number of covering bookings.
    """
    ids = aggregate_day(date, bookings)
    cap = max(visible_cap, 0)
    return DayOverflow(
        date=date,
        additional_booking_ids=tuple(ids[1:1 + cap]),
        total_count=len(ids),
    )


def stacking_order(segments, selected_booking_id=None):
    """Segments in draw order: the selected booking's segments last (topmost)."""
    if selected_booking_id is None:
        return list(segments)
    others = [s for s in segments if s.booking_id != selected_booking_id]
    selected = [s for s in segments if s.booking_id == selected_booking_id]
    return others + selected


def layout_month(bookings, grid, visible_cap=DEFAULT_VISIBLE_CAP, selected_booking_id=None):
    segments, overflows = MonthLayoutCalculator(bookings, grid, visible_cap).calculate()
    return MonthLayout(
        grid=grid,
        label=month_label(*grid.anchor_month),
        segments=tuple(stacking_order(segments, selected_booking_id)),
        overflows=tuple(overflows),
    )


def layout_window(bookings, anchor_date, window_size, today=None,
                  visible_cap=DEFAULT_VISIBLE_CAP, selected_booking_id=None):
    """
    Full layout pass for a window: grids, bar segments and overflow markers.

    Raises:
        InvalidWindowSizeError: window_size is not 1, 2 or 3
    """
    bookings = list(bookings)
    grids, label = build_window(anchor_date, window_size, today)
    months = tuple(layout_month(bookings, grid, visible_cap, selected_booking_id) for grid in grids)
    logger.debug(f"layout {label}: {len(bookings)} bookings, "
                 f"{sum(len(m.segments) for m in months)} segments")
    return WindowLayout(
        anchor_date=anchor_date,
        window_size=window_size,
        label=label,
        months=months,
    )
