"""
Time utility functions for timestamp parsing and formatting.

Timestamps travel through the engine as integer milliseconds since the Unix
epoch (UTC). Parsing delegates to pandas' generic datetime parser.

Time Complexity: O(1) per value
Memory: O(1)
"""

from typing import Optional

import pandas as pd

_EPOCH = pd.Timestamp(0, tz="UTC")
_ONE_MS = pd.Timedelta(milliseconds=1)

# Relative keywords pandas resolves against the wall clock
_WALL_CLOCK_KEYWORDS = frozenset({"now", "today"})


def to_epoch_ms(value: str) -> Optional[int]:
    """
    Convert a timestamp string to epoch milliseconds.

    Naive timestamps are read as UTC, offset-aware ones are converted to UTC.
    Returns None when the text cannot be parsed or names a relative
    wall-clock instant such as "now".
    """
    if not value or value.strip().lower() in _WALL_CLOCK_KEYWORDS:
        return None
    try:
        ts = pd.to_datetime(value, utc=True)
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(ts):
        return None
    return int((ts - _EPOCH) // _ONE_MS)


def format_epoch_ms(epoch_ms: int) -> str:
    """Render epoch milliseconds as an ISO-8601 UTC string with millisecond precision."""
    ts = pd.Timestamp(epoch_ms, unit="ms", tz="UTC")
    return ts.isoformat(timespec="milliseconds")
