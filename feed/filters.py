"""
Feed filtering, facets and counts.

Filters combine with AND across criteria; an empty criterion matches
everything.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ingestion.strategies.classification import HIGH, NOISE, UpdateRecord
from ingestion.strategies.parsing import has_broadcast_mention

from .sorting import sort_updates


@dataclass
class FeedFilter:
    """User-selected filter state for the updates feed."""

    categories: List[str] = field(default_factory=list)
    priorities: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    authors: List[str] = field(default_factory=list)
    only_mentions: bool = False
    search_query: str = ""

    def matches(self, update: UpdateRecord) -> bool:
        if self.categories and update.category not in self.categories:
            return False
        if self.priorities and update.priority not in self.priorities:
            return False
        if self.tags and not any(tag in update.tags for tag in self.tags):
            return False
        if self.authors and (not update.owner or update.owner not in self.authors):
            return False
        if self.only_mentions and not has_broadcast_mention(update.mentions):
            return False

        if self.search_query.strip():
            query = self.search_query.lower()
            haystacks = (update.title, update.summary, update.details)
            if not any(query in text.lower() for text in haystacks):
                return False

        return True


def apply_filters(
    updates: Sequence[UpdateRecord], feed_filter: FeedFilter
) -> List[UpdateRecord]:
    """Return the matching updates in feed order."""
    return sort_updates(u for u in updates if feed_filter.matches(u))


def get_all_tags(updates: Sequence[UpdateRecord]) -> List[str]:
    return sorted({tag for update in updates for tag in update.tags})


def get_all_authors(updates: Sequence[UpdateRecord]) -> List[str]:
    return sorted({update.owner for update in updates if update.owner})


def get_all_dates(updates: Sequence[UpdateRecord]) -> List[str]:
    """Unique logical dates, most recent first."""
    return sorted({update.date for update in updates if update.date}, reverse=True)


def feed_stats(
    updates: Sequence[UpdateRecord], displayed: Sequence[UpdateRecord]
) -> Dict[str, int]:
    """Counts shown above the feed."""
    return {
        "total": len(updates),
        "high": sum(1 for u in updates if u.priority == HIGH),
        "noise": sum(1 for u in updates if u.category == NOISE),
        "displayed": len(displayed),
    }
