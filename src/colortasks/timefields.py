"""Hour and minute entry fields.

The fields are kept valid while the user types: anything that is not a digit
is dropped and a value past the end of the range is pulled back to the
largest allowed value instead of rejecting the keystroke.
"""

from __future__ import annotations

import re

from .exceptions import MissingTimeError

MAX_HOUR = 23
MAX_MINUTE = 59
FIELD_MAX_LENGTH = 2
NON_DIGIT_RE = re.compile(r"[^0-9]")
TIME_PLACEHOLDER = "Select time"


def clamp_field_input(raw: str, maximum: int, max_length: int = FIELD_MAX_LENGTH) -> str:
    """Sanitize the new content of a numeric field.

    Args:
        raw: Full field text after the keystroke (e.g. "9" + "9" -> "99")
        maximum: Largest value the field may hold
        max_length: Number of characters the field accepts

    Returns:
        Digits only, at most ``max_length`` of them, never above ``maximum``.
        Empty input stays empty.
    """
    digits = NON_DIGIT_RE.sub("", raw)[:max_length]
    if digits and int(digits) > maximum:
        return str(maximum)
    return digits


def clamp_hour_input(raw: str) -> str:
    """Sanitize the hour field (0-23)."""
    return clamp_field_input(raw, MAX_HOUR)


def clamp_minute_input(raw: str) -> str:
    """Sanitize the minute field (0-59)."""
    return clamp_field_input(raw, MAX_MINUTE)


def is_unset(value: int | str | None) -> bool:
    """True for a field the user has not filled in."""
    return value is None or (isinstance(value, str) and value.strip() == "")


def _to_int(value: int | str, label: str, maximum: int) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{label} must be an int or a digit string, got {value!r}")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise ValueError(f"{label} must contain only digits, got {value!r}")
        value = int(value)
    if not 0 <= value <= maximum:
        raise ValueError(f"{label} must be between 0 and {maximum}, got {value}")
    return value


def format_time(hour: int | str, minute: int | str) -> str:
    """Format an hour and a minute as zero-padded 24-hour ``HH:MM``.

    Both values must already be in range; the entry fields guarantee that.

    Raises:
        MissingTimeError: If either value is unset
        ValueError: If a value is out of range or not numeric
    """
    if is_unset(hour) or is_unset(minute):
        raise MissingTimeError()
    assert hour is not None and minute is not None
    return f"{_to_int(hour, 'hour', MAX_HOUR):02d}:{_to_int(minute, 'minute', MAX_MINUTE):02d}"


def time_is_complete(hours: str, minutes: str) -> bool:
    """True when both fields hold a value."""
    return bool(hours) and bool(minutes)


def time_label(hours: str, minutes: str) -> str:
    """Text for the button that opens the time dialog.

    Shows whatever has been typed so far, padded (an hour of "7" with no
    minutes reads "07:00"), or a placeholder when both fields are empty.
    """
    if not hours and not minutes:
        return TIME_PLACEHOLDER
    return f"{hours.rjust(2, '0')}:{minutes.rjust(2, '0')}"
