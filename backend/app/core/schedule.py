"""Schedule Normalizers — canonical date (YYYY-MM-DD) and time (HH:MM) strings.

Invariants:
    - normalize_date either returns YYYY-MM-DD or raises InvalidDateError
    - normalize_time never raises: unrecognized input comes back trimmed, verbatim
    - Missing date parts (e.g. "June 14") are filled from today, as dateutil does

Design Decisions:
    - dateutil.parser over hand-rolled formats: accepts "June 14, 2024", "2024-06-14",
      "14 Jun 2024", ISO timestamps — the same latitude organizers expect from a browser
    - Aware datetimes are shifted to UTC before taking the date; naive ones keep
      their calendar date
"""

import re
from datetime import datetime, timezone

from dateutil import parser as date_parser

from app.core.errors import InvalidDateError

_MERIDIEM = re.compile(r"[ap]m", re.IGNORECASE)
_CLOCK = re.compile(r"^(\d{1,2}):(\d{2})")

# Anchor date for parsing bare times; only the clock part is read back
_TIME_ANCHOR = datetime(2000, 1, 1)


def normalize_date(value: str) -> str:
    """Parse a date-like string and return it as YYYY-MM-DD."""
    try:
        parsed = date_parser.parse(value.strip())
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(value) from e
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """Return 24-hour HH:MM for H:MM, HH:MM[:SS] or H:MM AM/PM inputs."""
    trimmed = value.strip()

    if _MERIDIEM.search(trimmed):
        try:
            parsed = date_parser.parse(trimmed, default=_TIME_ANCHOR)
        except (ValueError, OverflowError):
            parsed = None
        if parsed is not None:
            return f"{parsed.hour:02d}:{parsed.minute:02d}"

    match = _CLOCK.match(trimmed)
    if match:
        return f"{int(match.group(1)):02d}:{match.group(2)}"

    return trimmed
