"""
JSON Output Formatter.

Produces the report structure:
{
    "excessive_companies": [...],
    "summary": {...}
}

Time Complexity: O(C log C) for sorting
Memory: O(C)
"""

from typing import Any, Dict, List, Set

from core.output.summary_builder import build_summary
from core.temporal.window_scanner import WindowStats
from utils.time_utils import format_epoch_ms


def _format_violation(company: str, window: WindowStats) -> Dict[str, Any]:
    return {
        "company": company,
        "window_start": format_epoch_ms(window.start_ms),
        "window_end": format_epoch_ms(window.end_ms),
        "total_orders": round(window.total_orders, 4),
        "total_cancels": round(window.total_cancels, 4),
        "cancel_ratio": round(window.ratio, 4),
    }


def format_output(
    violations: Dict[str, WindowStats],
    all_companies: Set[str],
    lines_read: int = 0,
    lines_rejected: int = 0,
) -> Dict[str, Any]:
    """Build the final JSON-compatible output dict."""
    excessive_companies: List[Dict[str, Any]] = [
        _format_violation(company, window) for company, window in violations.items()
    ]
    excessive_companies.sort(key=lambda x: (-x["cancel_ratio"], x["company"]))

    summary = build_summary(
        total_companies=len(all_companies),
        excessive_count=len(violations),
        lines_read=lines_read,
        lines_rejected=lines_rejected,
    )

    return {
        "excessive_companies": excessive_companies,
        "summary": summary,
    }
