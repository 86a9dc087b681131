"""
Tests for feed sorting, filtering and facets.
"""

from dataclasses import replace

from feed import (
    FeedFilter,
    apply_filters,
    feed_stats,
    get_all_authors,
    get_all_dates,
    get_all_tags,
    sort_updates,
)
from ingestion.strategies.classification import (
    HIGH,
    INCIDENT,
    LOW,
    MED,
    NOISE,
    PROTOCOL,
    UpdateRecord,
)


def make_update(uid, priority=MED, minutes=None, **fields):
    base = UpdateRecord(
        id=uid,
        category=fields.pop("category", PROTOCOL),
        priority=priority,
        title=f"Title {uid}",
        summary=f"Summary {uid}",
        details=f"Details {uid}",
        owner="Pat Lee",
        mentions=[],
        links=[],
        tags=[],
        source_message_id=uid,
        timestamp_text=None,
        timestamp_minutes=minutes,
        is_pinned=False,
    )
    return replace(base, **fields)


class TestSortUpdates:
    def test_priority_then_latest_first(self):
        updates = [
            make_update("low", LOW, 900),
            make_update("med-early", MED, 60),
            make_update("high", HIGH, 30),
            make_update("med-late", MED, 600),
        ]
        assert [u.id for u in sort_updates(updates)] == [
            "high",
            "med-late",
            "med-early",
            "low",
        ]

    def test_missing_time_sorts_as_midnight(self):
        updates = [
            make_update("none", MED, None),
            make_update("one", MED, 1),
            make_update("zero", MED, 0),
        ]
        assert [u.id for u in sort_updates(updates)] == ["one", "none", "zero"]

    def test_does_not_mutate_input(self):
        updates = [make_update("a", LOW), make_update("b", HIGH)]
        sort_updates(updates)
        assert [u.id for u in updates] == ["a", "b"]

    def test_sample_feed_starts_with_high(self, sample_updates):
        ordered = sort_updates(sample_updates)
        assert ordered[0].priority == HIGH
        assert ordered[-1].priority == LOW


class TestFilters:
    def test_empty_filter_keeps_everything(self, sample_updates):
        assert len(apply_filters(sample_updates, FeedFilter())) == len(sample_updates)

    def test_categories_and_priorities(self, sample_updates):
        result = apply_filters(
            sample_updates, FeedFilter(categories=[INCIDENT], priorities=[HIGH])
        )
        assert {u.owner for u in result} == {"Amanda Torres", "Daniel Raphael"}

    def test_tags_match_any(self, sample_updates):
        result = apply_filters(sample_updates, FeedFilter(tags=["Macros", "Routing"]))
        assert {u.owner for u in result} == {"Lindsay Burden", "Amanda Torres"}

    def test_authors_skip_missing_owner(self):
        updates = [make_update("a", owner=None), make_update("b", owner="Ann")]
        result = apply_filters(updates, FeedFilter(authors=["Ann"]))
        assert [u.id for u in result] == ["b"]

    def test_only_mentions(self, sample_updates):
        result = apply_filters(sample_updates, FeedFilter(only_mentions=True))
        assert {u.owner for u in result} == {
            "Jessica Booker",
            "Daniel Raphael",
            "Amanda Torres",
            "Michael Chen",
        }

    def test_search_query_is_case_insensitive(self, sample_updates):
        result = apply_filters(sample_updates, FeedFilter(search_query="BACKUP Link"))
        assert [u.owner for u in result] == ["Daniel Raphael"]

    def test_blank_search_query_is_ignored(self, sample_updates):
        result = apply_filters(sample_updates, FeedFilter(search_query="   "))
        assert len(result) == len(sample_updates)


class TestFacets:
    def test_tags_sorted_unique(self):
        updates = [make_update("a", tags=["b", "a"]), make_update("b", tags=["a"])]
        assert get_all_tags(updates) == ["a", "b"]

    def test_authors(self, sample_updates):
        authors = get_all_authors(sample_updates)
        assert authors == sorted(authors)
        assert len(authors) == 10

    def test_dates_most_recent_first(self):
        updates = [
            make_update("a", date="2024-01-14"),
            make_update("b", date="2024-01-15"),
            make_update("c"),
        ]
        assert get_all_dates(updates) == ["2024-01-15", "2024-01-14"]

    def test_stats(self, sample_updates):
        displayed = apply_filters(sample_updates, FeedFilter(priorities=[HIGH]))
        stats = feed_stats(sample_updates, displayed)
        assert stats["total"] == 10
        assert stats["noise"] == len([u for u in sample_updates if u.category == NOISE])
        assert stats["high"] == stats["displayed"] == 4
