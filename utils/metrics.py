"""
Processing statistics tracker.

Keeps the summary of the most recent analysis plus running totals for the
/metrics endpoint.

Time Complexity: O(1) per operation
Memory: O(1)
"""

from typing import Any, Dict


class MetricsTracker:
    """Tracks analysis statistics across API calls."""

    def __init__(self):
        self._total_runs: int = 0
        self._companies_analyzed: int = 0
        self._companies_flagged: int = 0
        self._last_run: Dict[str, Any] | None = None

    def record(self, summary: Dict[str, Any]) -> None:
        """Record metrics from an analysis run."""
        self._total_runs += 1
        self._companies_analyzed += int(summary.get("total_companies_analyzed", 0))
        self._companies_flagged += int(summary.get("excessive_companies_flagged", 0))
        self._last_run = dict(summary)

    def get_metrics(self) -> Dict[str, Any]:
        """Return the latest metrics."""
        if self._last_run is None:
            return {"status": "no_processing_yet", "total_runs": 0}
        return {
            "status": "ready",
            "total_runs": self._total_runs,
            "total_companies_analyzed": self._companies_analyzed,
            "total_companies_flagged": self._companies_flagged,
            "last_run": self._last_run,
        }
