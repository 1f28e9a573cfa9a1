import re

from medcentre.core.exceptions import InvalidTimeError

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

SLOT_SEPARATOR = "-"
END_OF_DAY = 24 * 60


def parse_time(value: str) -> int:
    """Convert "HH:MM" to minutes since midnight; "24:00" is the end of the day."""
    match = _TIME_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise InvalidTimeError(f"invalid time {value!r}, expected HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if (hours, minutes) == (24, 0):
        return END_OF_DAY
    if hours > 23 or minutes > 59:
        raise InvalidTimeError(f"invalid time {value!r}, out of range")
    return hours * 60 + minutes


def format_time(minutes: int) -> str:
    """Minutes since midnight to zero-padded "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def slot_label(start: int, end: int) -> str:
    return f"{format_time(start)}{SLOT_SEPARATOR}{format_time(end)}"


def slot_start(label: str) -> str:
    return label.split(SLOT_SEPARATOR)[0]
