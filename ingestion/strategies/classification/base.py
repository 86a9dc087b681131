"""
Record types and closed vocabularies for classified updates.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ingestion.strategies.parsing.base import (
    freeze_sequences,
    require_bool,
    require_minutes,
    require_str,
    require_str_list,
)

ANNOUNCEMENT = "Announcement"
PROTOCOL = "Protocol"
INCIDENT = "Incident"
REMINDER = "Reminder"
FYI = "FYI"
STAFFING_OOO = "Staffing/OOO"
NOISE = "Noise"

CATEGORIES = (ANNOUNCEMENT, PROTOCOL, INCIDENT, REMINDER, FYI, STAFFING_OOO, NOISE)

HIGH = "High"
MED = "Med"
LOW = "Low"

PRIORITIES = (HIGH, MED, LOW)


@dataclass(frozen=True)
class UpdateRecord:
    """
    A classified update derived from exactly one message record.

    Records are immutable and hashable; sequence fields are stored as tuples.
    """

    id: str
    category: str
    priority: str
    title: str
    summary: str
    details: str
    owner: Optional[str]
    mentions: Tuple[str, ...]
    links: Tuple[str, ...]
    tags: Tuple[str, ...]
    source_message_id: str
    timestamp_text: Optional[str]
    timestamp_minutes: Optional[int]
    is_pinned: bool
    date: Optional[str] = None

    def __post_init__(self):
        freeze_sequences(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category,
            "priority": self.priority,
            "title": self.title,
            "summary": self.summary,
            "details": self.details,
            "owner": self.owner,
            "mentions": list(self.mentions),
            "links": list(self.links),
            "tags": list(self.tags),
            "source_message_id": self.source_message_id,
            "timestamp_text": self.timestamp_text,
            "timestamp_minutes": self.timestamp_minutes,
            "is_pinned": self.is_pinned,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UpdateRecord":
        """
        Build a record from its serialized form.

        Raises:
            KeyError: if a required field is missing
            ValueError: if a field has the wrong type, or category or
                priority is outside the closed sets
        """
        category = require_str(data, "category")
        priority = require_str(data, "priority")
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category: {category!r}")
        if priority not in PRIORITIES:
            raise ValueError(f"Unknown priority: {priority!r}")

        return cls(
            id=require_str(data, "id"),
            category=category,
            priority=priority,
            title=require_str(data, "title"),
            summary=require_str(data, "summary", optional=True) or "",
            details=require_str(data, "details", optional=True) or "",
            owner=require_str(data, "owner", optional=True),
            mentions=require_str_list(data, "mentions"),
            links=require_str_list(data, "links"),
            tags=require_str_list(data, "tags"),
            source_message_id=require_str(data, "source_message_id"),
            timestamp_text=require_str(data, "timestamp_text", optional=True),
            timestamp_minutes=require_minutes(data, "timestamp_minutes"),
            is_pinned=require_bool(data, "is_pinned"),
            date=require_str(data, "date", optional=True),
        )
