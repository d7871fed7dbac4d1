"""
Window Scanner — Excessive Cancellation Detection.

Scans one company's ordered event sequence with a two-pointer window.

For each end position:
  1. shrink:  advance start while ts[end] - ts[start] > WINDOW_MS
  2. expand:  advance end while ts[end + 1] - ts[start] <= WINDOW_MS
  3. ratio  = cancelled quantity / max(ordered quantity, 1) over [start, end]

If ratio > CANCEL_RATIO_THRESHOLD in any window → company is excessive.

The start pointer never moves backward and the scan stops at the first
violating window.

Edge cases handled:
  - Empty sequence → never excessive
  - Window with no new orders → denominator floored at 1
  - Events exactly WINDOW_MS apart → same window

Time Complexity: O(T × w) where T = events, w = average window size
Memory: O(1) beyond the sequence
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from app.config import CANCEL_RATIO_THRESHOLD, MIN_ORDER_DENOMINATOR, WINDOW_MS
from core.record_parser import OrderKind, TradeEvent


@dataclass(frozen=True)
class WindowStats:
    """Totals for one inclusive window [start, end] of a company sequence."""

    start: int
    end: int
    start_ms: int
    end_ms: int
    total_orders: float
    total_cancels: float
    ratio: float
    threshold: float = CANCEL_RATIO_THRESHOLD

    @property
    def is_violation(self) -> bool:
        return self.ratio > self.threshold


def _window_stats(
    sequence: Sequence[TradeEvent],
    start: int,
    end: int,
    threshold: float,
) -> WindowStats:
    total_orders = 0.0
    total_cancels = 0.0

    # Sums are rebuilt per window so each ratio is exact
    for i in range(start, end + 1):
        event = sequence[i]
        if event.kind is OrderKind.NEW_ORDER:
            total_orders += event.quantity
        elif event.kind is OrderKind.CANCEL_OR_FILL:
            total_cancels += event.quantity

    ratio = total_cancels / max(total_orders, MIN_ORDER_DENOMINATOR)

    return WindowStats(
        start=start,
        end=end,
        start_ms=sequence[start].timestamp,
        end_ms=sequence[end].timestamp,
        total_orders=total_orders,
        total_cancels=total_cancels,
        ratio=ratio,
        threshold=threshold,
    )


def scan_windows(
    sequence: Sequence[TradeEvent],
    window_ms: int = WINDOW_MS,
    threshold: float = CANCEL_RATIO_THRESHOLD,
) -> Iterator[WindowStats]:
    """
    Lazily yield every window the two-pointer scan evaluates.

    Yields:
        WindowStats in increasing end order
    """
    n = len(sequence)
    start = 0
    end = 0

    while end < n:
        while sequence[end].timestamp - sequence[start].timestamp > window_ms:
            start += 1

        while (
            end + 1 < n
            and sequence[end + 1].timestamp - sequence[start].timestamp <= window_ms
        ):
            end += 1

        yield _window_stats(sequence, start, end, threshold)
        end += 1


def find_violating_window(
    sequence: Sequence[TradeEvent],
    window_ms: int = WINDOW_MS,
    threshold: float = CANCEL_RATIO_THRESHOLD,
) -> Optional[WindowStats]:
    """
    Return the first window whose cancel ratio exceeds the threshold.

    Scanning stops at that window; later windows are never evaluated.

    Returns:
        WindowStats of the first violation, or None if the company is well-behaved
    """
    for window in scan_windows(sequence, window_ms, threshold):
        if window.is_violation:
            return window
    return None


def is_excessive(
    sequence: Sequence[TradeEvent],
    window_ms: int = WINDOW_MS,
    threshold: float = CANCEL_RATIO_THRESHOLD,
) -> bool:
    """True if any window of the sequence violates the cancel ratio threshold."""
    return find_violating_window(sequence, window_ms, threshold) is not None
