"""
Time Tracked comment format.

A time-tracking comment starts with a marker line::

    ⏱️ **Time Tracked:** 2.5 Hours

optionally followed by a blank line and a free-text description, then a
``---`` separator and a footer. Only the marker line is significant when
reading comments back.
"""

import math
import re
from decimal import Decimal

from cronohub.exceptions import ValidationError

MARKER = "⏱️ **Time Tracked:**"
SEARCH_KEYWORD = '"Time Tracked"'
FOOTER = "<sub>**Logged with CronoHub**</sub>"

MIN_HOURS = 0.25
MAX_HOURS = 24

_TIME_TRACKED = re.compile(r"⏱️\s*\*\*Time Tracked:\*\*\s*([\d.]+)\s*Hours?", re.IGNORECASE)
# Longest numeric prefix, so "1.2.3" reads as 1.2.
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def decode_hours(body: str | None) -> float:
    """Hours recorded in a comment body, or 0 when it is not a time entry."""
    if not body:
        return 0.0

    match = _TIME_TRACKED.search(body)
    if not match:
        return 0.0

    number = _LEADING_NUMBER.match(match.group(1))
    if not number:
        return 0.0

    hours = float(number.group())
    return hours if math.isfinite(hours) else 0.0


def _format_hours(hours: float) -> str:
    hours = float(hours)
    if hours.is_integer():
        return str(int(hours))
    # Positional notation only; the marker regex does not read exponents.
    return format(Decimal(repr(hours)), "f")


def format_time_comment(hours: float, description: str = "") -> str:
    """Build the comment body for a time entry."""
    unit = "Hour" if hours == 1 else "Hours"
    body = f"{MARKER} {_format_hours(hours)} {unit}"

    description = (description or "").strip()
    if description:
        body += f"\n\n{description}"

    return body + f"\n\n---\n{FOOTER}"


def validate_hours(value: "float | int | str | None") -> float:
    """
    Coerce and check an hours value before logging it.

    Raises:
        ValidationError: If the value is missing, not a number, or outside (0, 24]
    """
    try:
        hours = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError("Please enter hours worked") from None

    if math.isnan(hours) or hours == 0:
        raise ValidationError("Please enter hours worked")

    if hours <= 0 or hours > MAX_HOURS:
        raise ValidationError(f"Hours must be between {MIN_HOURS} and {MAX_HOURS}")

    return hours
