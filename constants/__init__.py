"""
Constants package.
Central place for the strings the layout engine hands to the renderer.
"""

from .text_constants import (
    CalendarText, BookingText, FilterText, format_text
)

__all__ = [
    'CalendarText', 'BookingText', 'FilterText', 'format_text',
]
