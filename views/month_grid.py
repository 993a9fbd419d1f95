# views/month_grid.py
"""Month grids and multi-month windows.

A grid always holds six Sunday-first weeks (42 cells) so that row arithmetic
is identical for every month. A window is 1-3 consecutive grids.
"""
import datetime
import logging

from dateutil.relativedelta import relativedelta

from config import (CELLS_PER_GRID, MIN_WINDOW_SIZE, MAX_WINDOW_SIZE,
                    VIEW_MODES, NAVIGATION_DIRECTIONS)
from error_messages import InvalidWindowSizeError, InvalidNavigationError
from models import CalendarDay, MonthGrid
from .labels import window_label

logger = logging.getLogger(__name__)


def get_month_view_dates(year, month):
    """월간 뷰에 표시될 첫 날짜와 마지막 날짜 (일요일 시작, 6주)."""
    first_day_of_month = datetime.date(year, month, 1)
    # date.weekday(): Monday=0 .. Sunday=6 -> Sunday-based index
    offset = (first_day_of_month.weekday() + 1) % 7
    start_date = first_day_of_month - datetime.timedelta(days=offset)
    end_date = start_date + datetime.timedelta(days=CELLS_PER_GRID - 1)
    return start_date, end_date


def build_month_grid(anchor_date, today=None):
    """
    Build the 42-cell grid for the month containing anchor_date.

    Args:
        anchor_date: any date; only year and month are used
        today: the host's current date, used only for is_today

    Returns:
        MonthGrid
    """
    year, month = anchor_date.year, anchor_date.month
    start_date, _ = get_month_view_dates(year, month)

    days = []
    for i in range(CELLS_PER_GRID):
        current = start_date + datetime.timedelta(days=i)
        days.append(CalendarDay(
            date=current,
            belongs_to_visible_month=(current.year == year and current.month == month),
            is_today=(today is not None and current == today),
        ))
    return MonthGrid(anchor_month=(year, month), days=tuple(days))


def validate_window_size(window_size):
    if isinstance(window_size, bool) or not isinstance(window_size, int):
        raise InvalidWindowSizeError(window_size)
    if not MIN_WINDOW_SIZE <= window_size <= MAX_WINDOW_SIZE:
        raise InvalidWindowSizeError(window_size)
    return window_size


def window_size_for_view_mode(view_mode):
    """'single' / 'double' / 'triple' -> 1 / 2 / 3"""
    try:
        return VIEW_MODES[view_mode]
    except KeyError:
        raise InvalidWindowSizeError(view_mode) from None


def window_months(anchor_date, window_size):
    """(year, month) pairs shown by a window starting at anchor_date's month."""
    validate_window_size(window_size)
    first = datetime.date(anchor_date.year, anchor_date.month, 1)
    months = []
    for i in range(window_size):
        target = first + relativedelta(months=i)
        months.append((target.year, target.month))
    return months


def build_window(anchor_date, window_size, today=None):
    """
    Build the grids for a window of window_size consecutive months.

    Returns:
        (list of MonthGrid, label)

    Raises:
        InvalidWindowSizeError: window_size is not 1, 2 or 3
    """
    months = window_months(anchor_date, window_size)
    grids = [build_month_grid(datetime.date(year, month, 1), today) for year, month in months]
    return grids, window_label(months)


def navigate(direction, anchor_date, window_size):
    """
    Move the anchor by exactly window_size months.

    Consecutive windows never overlap and never skip a month. The day of
    month is kept where possible and clamped to the end of shorter months.
    """
    validate_window_size(window_size)
    if direction not in NAVIGATION_DIRECTIONS:
        raise InvalidNavigationError(direction)

    step = window_size if direction == "next" else -window_size
    new_anchor = anchor_date + relativedelta(months=step)
    logger.debug(f"navigate {direction}: {anchor_date} -> {new_anchor} (window {window_size})")
    return new_anchor
