"""
Feed Subsystem

This module contains the read-side helpers used to display classified updates:
- Sorting updates by priority and time
- Filtering by category, priority, tags, authors, broadcast mentions and text
- Facets (tags, authors, dates) and summary counts
"""

from .filters import (
    FeedFilter,
    apply_filters,
    feed_stats,
    get_all_authors,
    get_all_dates,
    get_all_tags,
)
from .sorting import PRIORITY_ORDER, sort_updates

__all__ = [
    "FeedFilter",
    "apply_filters",
    "feed_stats",
    "get_all_authors",
    "get_all_dates",
    "get_all_tags",
    "PRIORITY_ORDER",
    "sort_updates",
]
