"""Millisecond clock, busy-wait sleeping and lenient integer parsing."""

from __future__ import annotations

import time

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_UINT64 = 1 << 64
_UINT32 = 1 << 32
_INT32_SIGN = 1 << 31
_SLEEP_STEP_S = 0.0005


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(duration_ms: int) -> None:
    """Sleep in small steps until at least ``duration_ms`` milliseconds pass."""
    start = current_time_ms()
    while current_time_ms() - start < duration_ms:
        time.sleep(_SLEEP_STEP_S)


def parse_leading_int(text: str) -> int:
    """Parse a leading integer the way C ``atoi`` would, wrapping to 32 bits.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit.  Text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = (value * 10 + int(char)) % _UINT64
    if negative:
        value = (-value) % _UINT64
    value %= _UINT32
    return value - _UINT32 if value >= _INT32_SIGN else value