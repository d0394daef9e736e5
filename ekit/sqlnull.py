"""Nullable values that are valid only when the wrapped value is not zero."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

_ZERO_TIME = datetime.min
_ZERO_TIME_UTC = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class NullValue:
    """A value together with a flag telling whether it is non-NULL."""

    value: Any
    valid: bool


def new_null_string(val: str) -> NullValue:
    """Wrap a string; the empty string is NULL."""
    return NullValue(val, val != "")


def new_null_int64(val: int) -> NullValue:
    """Wrap an integer; zero is NULL."""
    return NullValue(val, val != 0)


def new_null_float64(val: float) -> NullValue:
    """Wrap a float; zero is NULL."""
    return NullValue(val, val != 0)


def new_null_bool(val: bool) -> NullValue:
    """Wrap a boolean; False is NULL."""
    return NullValue(val, bool(val))


def _is_zero_time(val: datetime | None) -> bool:
    if val is None:
        return True
    if val.tzinfo is None or val.utcoffset() is None:
        return val.replace(tzinfo=None) == _ZERO_TIME
    return val == _ZERO_TIME_UTC


def new_null_time(val: datetime | None) -> NullValue:
    """Wrap a datetime; None and 0001-01-01 00:00:00 UTC are NULL."""
    return NullValue(val, not _is_zero_time(val))


def new_null_bytes(val: bytes) -> NullValue:
    """Wrap bytes as a string; empty bytes are NULL."""
    data = bytes(val)
    return NullValue(data.decode("utf-8", errors="surrogateescape"), len(data) > 0)