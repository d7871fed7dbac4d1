"""
Processing Service — Excessive Cancellations Checker.

Coordinates one analysis pass over a trade source:
   1. Read lines (streaming, one pass)
   2. Parse each line into a TradeEvent, dropping malformed lines
   3. Group events per company, preserving input order
   4. Scan each company's sequence for a violating 60s window
   5. Cache the result set for the lifetime of the checker

The source is either a path to a line-oriented file or any iterable of
lines. It is consumed at most once per checker instance.

Time Complexity: O(n × w) where n = lines, w = average window size
Memory: O(n) for the retained per-company sequences
"""

import contextlib
import logging
import os
import time
from typing import Any, Dict, Iterable, Iterator, Set, Union

from app.config import INPUT_ENCODING
from core.event_grouper import group_by_company
from core.output.json_formatter import format_output
from core.record_parser import TradeEvent, parse_trade_line
from core.temporal.window_scanner import WindowStats, find_violating_window

logger = logging.getLogger(__name__)

TradeSource = Union[str, "os.PathLike[str]", Iterable[str]]


@contextlib.contextmanager
def log_timer(label: str):
    start = time.time()
    yield
    elapsed = time.time() - start
    logger.info("Module [%s] took %.4f seconds", label, elapsed)


class ExcessiveCancellationsChecker:
    """Classifies companies by excessive order cancellation over one trade source."""

    def __init__(self, source: TradeSource):
        self._source = source
        self._analyzed: bool = False
        self._all_companies: Set[str] = set()
        self._violations: Dict[str, WindowStats] = {}
        self._lines_read: int = 0
        self._lines_rejected: int = 0
        self._error: Exception | None = None

    # ── Queries ───────────────────────────────────────────────────────

    def companies_involved_in_excessive_cancellations(self) -> Set[str]:
        """Return the companies involved in excessive cancelling."""
        self._analyze_trades()
        return set(self._violations)

    def total_number_of_well_behaved_companies(self) -> int:
        """Return the number of companies never involved in excessive cancelling."""
        self._analyze_trades()
        return len(self._all_companies) - len(self._violations)

    def all_companies(self) -> Set[str]:
        """Return every company with at least one parsed event."""
        self._analyze_trades()
        return set(self._all_companies)

    def violations(self) -> Dict[str, WindowStats]:
        """Return the first violating window of each excessive company."""
        self._analyze_trades()
        return dict(self._violations)

    def summary(self) -> Dict[str, Any]:
        return self.report()["summary"]

    def report(self) -> Dict[str, Any]:
        """
        Build the JSON-compatible report.

        Returns:
            dict with excessive_companies and summary
        """
        self._analyze_trades()
        return format_output(
            violations=self._violations,
            all_companies=self._all_companies,
            lines_read=self._lines_read,
            lines_rejected=self._lines_rejected,
        )

    # ── Analysis pass ─────────────────────────────────────────────────

    def _is_reopenable(self) -> bool:
        return isinstance(self._source, (str, os.PathLike))

    def _iter_lines(self) -> Iterator[str]:
        if self._is_reopenable():
            with open(self._source, "r", encoding=INPUT_ENCODING) as handle:
                for line in handle:
                    yield line.rstrip("\r\n")
        else:
            for line in self._source:
                yield line.rstrip("\r\n")

    def _iter_events(self, counters: Dict[str, int]) -> Iterator[TradeEvent]:
        for line in self._iter_lines():
            counters["read"] += 1
            trade = parse_trade_line(line)
            if trade is None:
                counters["rejected"] += 1
                logger.debug("Dropping malformed line %d: %r", counters["read"], line)
                continue
            yield trade

    def _analyze_trades(self) -> None:
        """Run the single analysis pass once; later calls reuse its result."""
        if self._analyzed:
            return
        if self._error is not None:
            raise self._error

        counters = {"read": 0, "rejected": 0}

        # 1-3. Read, parse and group
        try:
            with log_timer("ingest"):
                sequences, all_companies = group_by_company(self._iter_events(counters))
        except Exception as e:
            logger.error("Trade source failed after %d lines: %s", counters["read"], e)
            # Iterable sources cannot be re-read
            if not self._is_reopenable():
                self._error = e
            raise

        # 4. Window scan per company
        violations: Dict[str, WindowStats] = {}
        with log_timer("window_scan"):
            for company, trades in sequences.items():
                window = find_violating_window(trades)
                if window is not None:
                    violations[company] = window

        # 5. Publish the result only after a complete pass
        self._all_companies = all_companies
        self._violations = violations
        self._lines_read = counters["read"]
        self._lines_rejected = counters["rejected"]
        self._analyzed = True

        logger.info(
            "Analyzed %d lines (%d rejected): %d companies, %d excessive",
            self._lines_read,
            self._lines_rejected,
            len(all_companies),
            len(violations),
        )
