"""Pure text → value coercion for the six flag kinds.

Every function in this module is a **pure** transformation: no I/O,
no side effects.  Each either returns the converted value or raises
:class:`~tinyflags.exceptions.CoercionError`; callers write the
destination only after a successful return.
"""

from __future__ import annotations

import calendar
import math
import re
import struct
import time
from collections.abc import Callable
from typing import Any

from tinyflags.core.limits import TIME_FORMAT, VALUE_CAPACITY
from tinyflags.core.models import FlagKind
from tinyflags.exceptions import CoercionError

INT_MIN: int = -(2**31)
INT_MAX: int = 2**31 - 1

_INT_RE = re.compile(r"\s*[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"""\s*[+-]?(?:
        (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
        |inf(?:inity)?
        |nan
    )""",
    re.VERBOSE | re.IGNORECASE,
)
_TIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}")


# ---------------------------------------------------------------------------
# Per-kind parsers
# ---------------------------------------------------------------------------

def parse_bool(text: str) -> bool:
    """Accept exactly ``"true"`` or ``"false"``."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise CoercionError(f"expected 'true' or 'false', got {text!r}")


def parse_string(text: str, capacity: int = VALUE_CAPACITY) -> str:
    """Return *text* truncated to *capacity* characters."""
    return text[:capacity]


def parse_int(text: str) -> int:
    """Parse a base-10 integer within the signed 32-bit range."""
    if _INT_RE.fullmatch(text) is None:
        raise CoercionError(f"not a base-10 integer: {text!r}")
    result = int(text)
    if not INT_MIN <= result <= INT_MAX:
        raise CoercionError(f"integer out of 32-bit range: {text}")
    return result


def parse_double(text: str) -> float:
    """Parse the leading decimal number of *text*, ignoring the process locale.

    Characters after the number are ignored (``"2.5x"`` gives ``2.5``);
    at least one must form a number.
    """
    match = _FLOAT_RE.match(text)
    if match is None:
        raise CoercionError(f"not a decimal number: {text!r}")
    return float(match.group())


def parse_float(text: str) -> float:
    """Parse like :func:`parse_double`, then round to single precision."""
    result = parse_double(text)
    try:
        return struct.unpack("f", struct.pack("f", result))[0]
    except OverflowError:
        return math.copysign(math.inf, result)


def parse_time(text: str) -> int:
    """Parse ``YYYY-MM-DDTHH:MM:SS`` (UTC) into seconds since the epoch."""
    if _TIME_RE.fullmatch(text) is None:
        raise CoercionError(f"expected time as {TIME_FORMAT}, got {text!r}")
    try:
        parsed = time.strptime(text, TIME_FORMAT)
    except ValueError as exc:
        raise CoercionError(f"invalid time {text!r}: {exc}") from exc
    return calendar.timegm(parsed)


def format_time(seconds: int) -> str:
    """Render epoch seconds in :data:`TIME_FORMAT` (UTC)."""
    return time.strftime(TIME_FORMAT, time.gmtime(seconds))


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_PARSERS: dict[FlagKind, Callable[[str], Any]] = {
    FlagKind.BOOL: parse_bool,
    FlagKind.INT: parse_int,
    FlagKind.FLOAT: parse_float,
    FlagKind.DOUBLE: parse_double,
    FlagKind.TIME: parse_time,
}


def coerce(kind: FlagKind, text: str, *, capacity: int = VALUE_CAPACITY) -> Any:
    """Convert *text* to a value of *kind*.

    ``BOOL`` here means config-file text; on the command line a bool
    flag consumes no text and is set by presence alone.

    Raises
    ------
    CoercionError
        When *text* is not a valid spelling for *kind*.
    """
    if kind is FlagKind.STRING:
        return parse_string(text, capacity)
    return _PARSERS[kind](text)
