import json
import logging
import os

from config import (SETTINGS_FILE, DEFAULT_WINDOW_SIZE, DEFAULT_VISIBLE_CAP, VIEW_MODES,
                    MIN_WINDOW_SIZE, MAX_WINDOW_SIZE)
from error_messages import SettingsError, ErrorMessages

logger = logging.getLogger(__name__)


def load_settings(path=None):
    """설정 파일(settings.json)을 읽어와서 딕셔너리로 반환합니다."""
    path = path or SETTINGS_FILE
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError:
                logger.warning(f"Settings file {path} is corrupted, using defaults")
                return {}  # 파일이 손상되었을 경우 빈 딕셔너리 반환
        if not isinstance(data, dict):
            logger.warning(f"Settings file {path} does not hold an object, using defaults")
            return {}
        return data
    return {}  # 파일이 없을 경우 빈 딕셔너리 반환


def get_calendar_settings(settings=None):
    """
    Merge the calendar section of the settings with the defaults.

    Accepted keys: window_size (1-3), view_mode ("single"/"double"/"triple",
    used when window_size is absent) and visible_cap (>= 0).

    Raises:
        SettingsError: when a value has the wrong type or range
    """
    settings = settings or {}
    calendar_settings = settings.get("calendar", settings)
    if not isinstance(calendar_settings, dict):
        raise _invalid(f"calendar settings must be an object, got {type(calendar_settings).__name__}")

    window_size = calendar_settings.get("window_size")
    if window_size is None:
        view_mode = calendar_settings.get("view_mode")
        if view_mode is not None and view_mode not in VIEW_MODES:
            raise _invalid(f"view_mode must be one of {sorted(VIEW_MODES)}, got {view_mode!r}")
        window_size = VIEW_MODES.get(view_mode, DEFAULT_WINDOW_SIZE)

    if isinstance(window_size, bool) or not isinstance(window_size, int) \
            or not MIN_WINDOW_SIZE <= window_size <= MAX_WINDOW_SIZE:
        raise _invalid(f"window_size must be between {MIN_WINDOW_SIZE} and {MAX_WINDOW_SIZE}, got {window_size!r}")

    visible_cap = calendar_settings.get("visible_cap", DEFAULT_VISIBLE_CAP)
    if isinstance(visible_cap, bool) or not isinstance(visible_cap, int) or visible_cap < 0:
        raise _invalid(f"visible_cap must be a non-negative integer, got {visible_cap!r}")

    return {
        "window_size": window_size,
        "visible_cap": visible_cap,
    }


def _invalid(message):
    info = ErrorMessages.INVALID_CONFIGURATION
    return SettingsError(message, error_code=info['code'], suggestions=info['suggestions'])
