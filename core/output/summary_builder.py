"""
Summary Builder — constructs analysis summary statistics.

Time Complexity: O(1)
Memory: O(1)
"""

from typing import Any, Dict


def build_summary(
    total_companies: int,
    excessive_count: int,
    lines_read: int = 0,
    lines_rejected: int = 0,
    processing_time: float = 0.0,
) -> Dict[str, Any]:
    """Build the summary block for the JSON output."""
    return {
        "total_companies_analyzed": total_companies,
        "excessive_companies_flagged": excessive_count,
        "well_behaved_companies": total_companies - excessive_count,
        "lines_read": lines_read,
        "lines_rejected": lines_rejected,
        "processing_time_seconds": round(processing_time, 2),
    }
