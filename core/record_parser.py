"""
Record Parser — converts one raw trade line into a validated event.

Line format (no header):
    timestamp, company, orderType, quantity

  orderType "D" → new order
  orderType "F" → cancellation / fill

Any line with the wrong field count, an unparseable timestamp, an empty
company, an unknown order type or a non-numeric quantity is rejected by
returning None. Callers drop rejected lines and carry on.

Time Complexity: O(L) where L = line length
Memory: O(1)
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pandas as pd

from app.config import (
    CANCEL_OR_FILL_CODE,
    FIELD_COUNT,
    FIELD_DELIMITER,
    NEW_ORDER_CODE,
)
from utils.time_utils import to_epoch_ms


class OrderKind(Enum):
    NEW_ORDER = NEW_ORDER_CODE
    CANCEL_OR_FILL = CANCEL_OR_FILL_CODE

    @classmethod
    def from_code(cls, code: str) -> "OrderKind":
        """Map a wire token to its kind. Raises ValueError for unknown tokens."""
        return cls(code)


@dataclass(frozen=True)
class TradeEvent:
    timestamp: int  # epoch milliseconds, UTC
    company: str
    kind: OrderKind
    quantity: float


def _parse_quantity(value: str) -> Optional[float]:
    if not value:
        return None
    quantity = pd.to_numeric(value, errors="coerce")
    if pd.isna(quantity) or not math.isfinite(quantity):
        return None
    return float(quantity)


def parse_trade_line(line: str) -> Optional[TradeEvent]:
    """
    Parse one raw line into a TradeEvent.

    Returns:
        TradeEvent, or None if the line is malformed
    """
    parts = line.split(FIELD_DELIMITER)
    if len(parts) != FIELD_COUNT:
        return None

    raw_time, raw_company, raw_kind, raw_quantity = (p.strip() for p in parts)

    timestamp = to_epoch_ms(raw_time)
    if timestamp is None or not raw_company:
        return None

    try:
        kind = OrderKind.from_code(raw_kind)
    except ValueError:
        return None

    quantity = _parse_quantity(raw_quantity)
    if quantity is None:
        return None

    return TradeEvent(
        timestamp=timestamp,
        company=raw_company,
        kind=kind,
        quantity=quantity,
    )
