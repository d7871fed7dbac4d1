"""
Event Grouper — partitions parsed trade events by company.

Each company's events keep their input order. Companies themselves are
kept in order of first appearance.

Time Complexity: O(n)
Memory: O(n)
"""

from typing import Dict, Iterable, List, Set, Tuple

from core.record_parser import TradeEvent


def group_by_company(
    events: Iterable[TradeEvent],
) -> Tuple[Dict[str, List[TradeEvent]], Set[str]]:
    """
    Group events into per-company sequences.

    Returns:
        (sequences, all_companies)
        sequences: {company: [TradeEvent, ...]} in first-seen order
    """
    sequences: Dict[str, List[TradeEvent]] = {}
    all_companies: Set[str] = set()

    for event in events:
        all_companies.add(event.company)
        sequences.setdefault(event.company, []).append(event)

    return sequences, all_companies
