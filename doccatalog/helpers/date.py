"""Date helpers using moment-style format tokens (YYYY, MM, DD, HH, mm, ss)."""

import re
from datetime import date, datetime

_TOKEN_RE = re.compile(r"YYYY|MM|DD|HH|mm|ss")


def format_date(value: datetime | date | str, fmt: str) -> str:
    """Format a date, a datetime or an ISO string; invalid input gives ''."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return ""
    if not isinstance(value, datetime):
        if not isinstance(value, date):
            return ""
        value = datetime(value.year, value.month, value.day)

    tokens = {
        "YYYY": f"{value.year:04d}",
        "MM": f"{value.month:02d}",
        "DD": f"{value.day:02d}",
        "HH": f"{value.hour:02d}",
        "mm": f"{value.minute:02d}",
        "ss": f"{value.second:02d}",
    }
    return _TOKEN_RE.sub(lambda m: tokens[m.group(0)], fmt)


def is_date(value: object) -> bool:
    """Check whether a value is a date or datetime instance."""
    return isinstance(value, date)


def now(fmt: str | None = None) -> datetime | str:
    """Return the current local time, formatted when ``fmt`` is given."""
    current = datetime.now()
    return format_date(current, fmt) if fmt else current
