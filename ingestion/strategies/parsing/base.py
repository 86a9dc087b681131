"""
Base parser interface and record types for transcript parsing.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

SEQUENCE_FIELDS = ("mentions", "links", "attachments", "tags")


def freeze_sequences(record: Any) -> None:
    """Store a frozen record's list fields as tuples."""
    for name in SEQUENCE_FIELDS:
        if hasattr(record, name):
            object.__setattr__(record, name, tuple(getattr(record, name)))


def require_str(data: Dict[str, Any], key: str, optional: bool = False) -> Optional[str]:
    """
    Read a string field from serialized data.

    Raises:
        KeyError: if a required field is missing
        ValueError: if the value is not a string (or None when optional)
    """
    value = data.get(key) if optional else data[key]
    if value is None and optional:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Field {key!r} must be a string, got {type(value).__name__}")
    return value


def require_str_list(data: Dict[str, Any], key: str) -> Tuple[str, ...]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"Field {key!r} must be a list of strings")
    return tuple(value)


def require_bool(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"Field {key!r} must be a boolean, got {type(value).__name__}")
    return value


def require_minutes(data: Dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    # bool is an int subclass but never a valid minute count
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"Field {key!r} must be an integer or null")
    return value


@dataclass
class ParsedBlock:
    """One author turn as found by the segmenter, before normalization."""

    author: Optional[str]
    timestamp_text: Optional[str]
    body_lines: List[str] = field(default_factory=list)
    raw_lines: List[str] = field(default_factory=list)
    is_thread_reply: bool = False
    is_pinned_context: bool = False


@dataclass(frozen=True)
class MessageRecord:
    """
    Standardized message representation for one author turn.

    Records are immutable and hashable; sequence fields are stored as tuples.
    """

    id: str
    author: Optional[str]
    timestamp_text: Optional[str]
    timestamp_minutes: Optional[int]
    is_thread_reply: bool
    is_pinned_context: bool
    mentions: Tuple[str, ...]
    body: str
    links: Tuple[str, ...]
    attachments: Tuple[str, ...]
    raw_block: str

    def __post_init__(self):
        freeze_sequences(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "author": self.author,
            "timestamp_text": self.timestamp_text,
            "timestamp_minutes": self.timestamp_minutes,
            "is_thread_reply": self.is_thread_reply,
            "is_pinned_context": self.is_pinned_context,
            "mentions": list(self.mentions),
            "body": self.body,
            "links": list(self.links),
            "attachments": list(self.attachments),
            "raw_block": self.raw_block,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MessageRecord":
        """
        Build a record from its serialized form.

        Raises:
            KeyError: if a required field is missing
            ValueError: if a field has the wrong type
        """
        return cls(
            id=require_str(data, "id"),
            author=require_str(data, "author", optional=True),
            timestamp_text=require_str(data, "timestamp_text", optional=True),
            timestamp_minutes=require_minutes(data, "timestamp_minutes"),
            is_thread_reply=require_bool(data, "is_thread_reply"),
            is_pinned_context=require_bool(data, "is_pinned_context"),
            mentions=require_str_list(data, "mentions"),
            body=require_str(data, "body"),
            links=require_str_list(data, "links"),
            attachments=require_str_list(data, "attachments"),
            raw_block=require_str(data, "raw_block", optional=True) or "",
        )


class BaseParser(ABC):
    """Abstract base class for transcript parsers."""

    @abstractmethod
    def parse_text(self, raw_text: str) -> List[MessageRecord]:
        """
        Parse a raw pasted transcript into message records.

        Args:
            raw_text: Full transcript as a single string

        Returns:
            Message records in document order
        """
        pass

    def get_parser_name(self) -> str:
        """
        Get the name of this parser.

        Returns:
            String name of the parser
        """
        return self.__class__.__name__
