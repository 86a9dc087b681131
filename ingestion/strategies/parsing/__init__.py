"""
Parsing Strategies

This module contains the strategy for parsing pasted Slack transcripts
into standardized message records, together with the line classifiers and
extractors it is built from.
"""

from .base import BaseParser, MessageRecord, ParsedBlock
from .extractors import (
    BROADCAST_MENTIONS,
    extract_attachments,
    extract_links,
    extract_mentions,
    has_broadcast_mention,
    parse_time_to_minutes,
)
from .line_rules import (
    is_attachment_line,
    is_author_line,
    is_canvas_updated_line,
    is_pinned_by_line,
    is_system_line,
    is_thread_reply_line,
    is_time_line,
    match_time_line,
)
from .slack_parser import SlackParser, blocks_to_messages, parse_to_blocks

__all__ = [
    "BaseParser",
    "MessageRecord",
    "ParsedBlock",
    "SlackParser",
    "parse_to_blocks",
    "blocks_to_messages",
    "BROADCAST_MENTIONS",
    "parse_time_to_minutes",
    "extract_mentions",
    "extract_links",
    "extract_attachments",
    "has_broadcast_mention",
    "is_attachment_line",
    "is_author_line",
    "is_canvas_updated_line",
    "is_pinned_by_line",
    "is_system_line",
    "is_thread_reply_line",
    "is_time_line",
    "match_time_line",
]
