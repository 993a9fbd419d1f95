# config.py
import os


def get_config_dir():
    """Get the directory that holds the optional settings file."""
    override = os.environ.get("BOOKING_CALENDAR_HOME")
    if override:
        return override
    return os.path.join(os.path.expanduser('~'), '.booking_calendar')


# --- File Paths ---
_CONFIG_DIR = get_config_dir()
SETTINGS_FILE = os.environ.get(
    "BOOKING_CALENDAR_SETTINGS",
    os.path.join(_CONFIG_DIR, "settings.json"),
)

# --- Calendar Grid ---
DAYS_PER_WEEK = 7
WEEKS_PER_GRID = 6  # fixed 6 rows, even for months that need only 4-5
CELLS_PER_GRID = DAYS_PER_WEEK * WEEKS_PER_GRID

# --- Window ---
MIN_WINDOW_SIZE = 1
MAX_WINDOW_SIZE = 3
DEFAULT_WINDOW_SIZE = 2
VIEW_MODES = {
    "single": 1,
    "double": 2,
    "triple": 3,
}
NAVIGATION_DIRECTIONS = ("prev", "next")

# --- Day Overflow ---
DEFAULT_VISIBLE_CAP = 2  # indicator marks shown next to the primary bar

# --- Filters ---
FILTER_KEYS = ("status", "payment_status", "car_id", "owner_id", "plate", "search")
