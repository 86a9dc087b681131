"""
Sorting for the updates feed.
"""

from typing import Iterable, List

from ingestion.strategies.classification import HIGH, LOW, MED, UpdateRecord

PRIORITY_ORDER = {HIGH: 0, MED: 1, LOW: 2}


def sort_updates(updates: Iterable[UpdateRecord]) -> List[UpdateRecord]:
    """
    Sort updates High, Med, Low, then latest first within a priority.

    Updates without a timestamp count as minute 0. The sort is stable, so
    ties keep their input order.
    """
    return sorted(
        updates,
        key=lambda u: (PRIORITY_ORDER[u.priority], -(u.timestamp_minutes or 0)),
    )
