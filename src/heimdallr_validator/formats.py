"""Syntax checks for packet fields that JSON Schema cannot express.

Both predicates are total: anything that is not a ``str`` is rejected rather
than raising.
"""
from __future__ import annotations

import re
from typing import Any

# xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx where x is a hex digit and y is 8, 9, a or b
UUID_V4_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)

_YEAR = r"(?:[1-9][0-9]*)?[0-9]{4}"
_MONTH = r"(?:1[0-2]|0[1-9])"
_DAY = r"(?:3[01]|0[1-9]|[12][0-9])"
_HOUR = r"(?:2[0-3]|[01][0-9])"
_MINUTE = r"[0-5][0-9]"
_SECOND = r"[0-5][0-9]"
_FRACTION = r"(?:\.[0-9]+)"
_TIMEZONE = rf"(?:Z|[+\-]{_HOUR}:{_MINUTE})"

_DATE = "-".join((_YEAR, _MONTH, _DAY))
_TIME = ":".join((_HOUR, _MINUTE, _SECOND))

# year-month-day(Thour:min:sec(.frac)?timezone)?
ISO8601_RE = re.compile(rf"{_DATE}(?:T{_TIME}{_FRACTION}?{_TIMEZONE})?")


def valid_uuid(value: Any) -> bool:
    """Return True if ``value`` is an RFC 4122 version 4 UUID string."""
    if not isinstance(value, str):
        return False
    return UUID_V4_RE.fullmatch(value) is not None


def valid_timestamp(value: Any) -> bool:
    """Return True if ``value`` is an ISO 8601 date or date-time string.

    A time of day must carry a timezone designator (``Z`` or ``+HH:MM``).
    Day numbers are not checked against the month, so ``2015-02-30`` passes.
    """
    if not isinstance(value, str):
        return False
    return ISO8601_RE.fullmatch(value) is not None
