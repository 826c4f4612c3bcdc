"""Locale-independent date formatting for rendered events.

Month names are fixed to English so that output does not depend on the
process locale (``strftime("%B")`` would).

Examples:
    ```python
    format_date(0)                     # "01 January 1970"
    format_date(0, include_time=True)  # "01 January 1970 - 00:00"
    ```
"""

from __future__ import annotations

import datetime


MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_date(
    timestamp: int,
    include_time: bool = False,
    tz: datetime.tzinfo = datetime.UTC,
) -> str:
    """Format a unix timestamp as ``DD Month YYYY``.

    Args:
        timestamp: Unix time in seconds.
        include_time: Append `` - HH:MM`` in 24-hour form.
        tz: Timezone the date is rendered in.

    Raises:
        OverflowError, ValueError, OSError: If *timestamp* is outside the
            range supported by ``datetime``.
    """
    date = datetime.datetime.fromtimestamp(timestamp, tz)
    formatted = f"{date.day:02d} {MONTH_NAMES[date.month - 1]} {date.year}"
    if include_time:
        formatted += f" - {date.hour:02d}:{date.minute:02d}"
    return formatted
