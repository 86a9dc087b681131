"""
Rule-Based Update Classifier

Assigns each parsed message an operational category and priority, and
derives tags, a title and a summary from its body. Category and priority
are ordered decision lists: rules are tried top to bottom and the first
rule whose condition holds decides the result.

Categories: Announcement, Protocol, Incident, Reminder, FYI, Staffing/OOO, Noise
Priorities: High, Med, Low
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from ingestion.strategies.parsing import MessageRecord, has_broadcast_mention

from .base import (
    ANNOUNCEMENT,
    FYI,
    HIGH,
    INCIDENT,
    LOW,
    MED,
    NOISE,
    PROTOCOL,
    REMINDER,
    STAFFING_OOO,
    UpdateRecord,
)
from .patterns import (
    BRACKET_TAG_RE,
    DEFAULT_TAG_KEYWORDS,
    HASHTAG_RE,
    HIGH_PRIORITY_PATTERNS,
    INCIDENT_PATTERNS,
    NOISE_PATTERNS,
    PROTOCOL_PATTERNS,
    REMINDER_PATTERNS,
    STAFFING_PATTERNS,
    TITLE_BROADCAST_RE,
    matches_any,
)

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


class MessageSignals:
    """Pattern hits for one message body, computed once per classification."""

    def __init__(self, message: MessageRecord, noise_max_length: int):
        body = message.body
        self.body = body
        self.broadcast = has_broadcast_mention(message.mentions)
        self.pinned = message.is_pinned_context
        self.noise = matches_any(body, NOISE_PATTERNS)
        self.protocol = matches_any(body, PROTOCOL_PATTERNS)
        self.incident = matches_any(body, INCIDENT_PATTERNS)
        self.staffing = matches_any(body, STAFFING_PATTERNS)
        self.reminder = matches_any(body, REMINDER_PATTERNS)
        self.high_urgency = matches_any(body, HIGH_PRIORITY_PATTERNS)
        self.short = len(body) < noise_max_length

    @property
    def audience_wide(self) -> bool:
        return self.broadcast or self.pinned


Rule = Tuple[Callable[[MessageSignals], bool], str]

CATEGORY_RULES: Sequence[Rule] = (
    (
        lambda s: not s.audience_wide
        and (s.noise or (s.short and not s.protocol and not s.incident)),
        NOISE,
    ),
    (lambda s: s.staffing and not s.protocol and not s.broadcast, STAFFING_OOO),
    (lambda s: s.incident and s.audience_wide, INCIDENT),
    # Incident wording without a broadcast or pin is just an FYI
    (lambda s: s.incident, FYI),
    (lambda s: s.protocol, PROTOCOL),
    (lambda s: s.audience_wide, ANNOUNCEMENT),
    (lambda s: s.reminder, REMINDER),
)

PriorityRule = Tuple[Callable[[MessageSignals, str], bool], str]

PRIORITY_RULES: Sequence[PriorityRule] = (
    (lambda s, category: s.high_urgency, HIGH),
    (lambda s, category: s.broadcast and category in (PROTOCOL, INCIDENT), HIGH),
    (lambda s, category: category == INCIDENT and s.pinned, HIGH),
    (lambda s, category: category in (NOISE, STAFFING_OOO), LOW),
    (lambda s, category: category == FYI and not s.broadcast, LOW),
)


class RuleBasedClassifier:
    """Classifies message records into update records with ordered rules."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the classifier.

        Args:
            config: Configuration dictionary with options:
                - tag_keywords: Controlled vocabulary, tag -> trigger phrases
                - noise_max_length: Bodies shorter than this may be noise (default: 20)
                - title_max_length: Maximum title length (default: 80)
                - summary_max_length: Maximum summary length (default: 200)
        """
        self.config = config or {}
        self.tag_keywords: Mapping[str, Sequence[str]] = self.get_config_value(
            "tag_keywords", DEFAULT_TAG_KEYWORDS
        )
        self.noise_max_length = self.get_config_value("noise_max_length", 20)
        self.title_max_length = self.get_config_value("title_max_length", 80)
        self.summary_max_length = self.get_config_value("summary_max_length", 200)

    def get_config_value(self, key: str, default: Any = None) -> Any:
        """Get a configuration value with default fallback."""
        return self.config.get(key, default)

    def classify_category(self, signals: MessageSignals) -> str:
        for condition, category in CATEGORY_RULES:
            if condition(signals):
                return category
        return FYI

    def classify_priority(self, signals: MessageSignals, category: str) -> str:
        for condition, priority in PRIORITY_RULES:
            if condition(signals, category):
                return priority
        return MED

    def extract_tags(self, body: str) -> List[str]:
        """
        Extract tags from a message body.

        Controlled-vocabulary tags come first, in vocabulary order, followed
        by #hashtags and [BRACKET] tags in order of appearance.
        """
        tags: List[str] = []
        lower_body = body.lower()

        for tag, keywords in self.tag_keywords.items():
            if any(keyword in lower_body for keyword in keywords):
                if tag not in tags:
                    tags.append(tag)

        for hashtag in HASHTAG_RE.findall(body):
            if hashtag not in tags:
                tags.append(hashtag)

        for bracket_tag in BRACKET_TAG_RE.findall(body):
            if bracket_tag not in tags:
                tags.append(bracket_tag)

        return tags

    def generate_title(self, body: str, category: str) -> str:
        """Build a short title from the first body line."""
        first_line = body.split("\n")[0].strip()
        if len(first_line) > self.title_max_length:
            cut = self.title_max_length - len(ELLIPSIS)
            first_line = first_line[:cut] + ELLIPSIS

        title = TITLE_BROADCAST_RE.sub("", first_line).strip()
        if len(title) < 5:
            title = f"{category} Update"
        return title

    def generate_summary(self, body: str) -> str:
        """Join the first two non-blank body lines into a one-line summary."""
        lines = [line for line in body.split("\n") if line.strip()]
        summary = " ".join(lines[:2]).strip()
        if len(summary) > self.summary_max_length:
            cut = self.summary_max_length - len(ELLIPSIS)
            summary = summary[:cut] + ELLIPSIS
        return summary

    def classify_message(
        self, message: MessageRecord, date: Optional[str] = None
    ) -> UpdateRecord:
        """
        Classify a single message record.

        Args:
            message: Parsed message record
            date: Optional logical date supplied by the caller

        Returns:
            UpdateRecord derived from the message
        """
        signals = MessageSignals(message, self.noise_max_length)
        category = self.classify_category(signals)
        priority = self.classify_priority(signals, category)

        logger.debug(f"Classified {message.id} as {category}/{priority}")

        return UpdateRecord(
            id=f"update_{message.id}",
            category=category,
            priority=priority,
            title=self.generate_title(message.body, category),
            summary=self.generate_summary(message.body),
            details=message.body,
            owner=message.author,
            mentions=message.mentions,
            links=message.links,
            tags=self.extract_tags(message.body),
            source_message_id=message.id,
            timestamp_text=message.timestamp_text,
            timestamp_minutes=message.timestamp_minutes,
            is_pinned=message.is_pinned_context,
            date=date or None,
        )

    def classify_messages(
        self, messages: Sequence[MessageRecord], date: Optional[str] = None
    ) -> List[UpdateRecord]:
        """Classify messages, one update per message in the same order."""
        return [self.classify_message(message, date) for message in messages]
