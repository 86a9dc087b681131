"""
Slack transcript parser.

Parses text copied out of a Slack channel into standardized message records.
Parsing runs in two stages: the segmenter splits the transcript into
author-turn blocks, then the normalizer turns each block into a
MessageRecord (body cleanup, mentions, links, attachments).
"""

import hashlib
import logging
from typing import List

from .base import BaseParser, MessageRecord, ParsedBlock
from .extractors import (
    extract_attachments,
    extract_links,
    extract_mentions,
    parse_time_to_minutes,
)
from .line_rules import (
    is_attachment_line,
    is_author_line,
    is_canvas_updated_line,
    is_pinned_by_line,
    is_thread_reply_line,
    match_time_line,
)

logger = logging.getLogger(__name__)


def split_lines(raw_text: str) -> List[str]:
    """Split pasted text into lines, tolerating Windows line endings."""
    return raw_text.replace("\r\n", "\n").split("\n")


def parse_to_blocks(raw_text: str) -> List[ParsedBlock]:
    """
    Segment a raw transcript into author-turn blocks.

    A block opens on an author line immediately followed by a time line and
    runs until the next such header pair or the end of input. Lines before
    the first header are dropped.

    Args:
        raw_text: Full transcript as a single string

    Returns:
        Parsed blocks in document order
    """
    lines = split_lines(raw_text)
    blocks: List[ParsedBlock] = []

    current_block = None
    is_pinned_context = False

    i = 0
    while i < len(lines):
        line = lines[i]

        # "Pinned by" marks the next message as pinned
        if is_pinned_by_line(line):
            is_pinned_context = True
            i += 1
            continue

        if is_canvas_updated_line(line):
            i += 1
            continue

        timestamp_text = None
        if is_author_line(line) and i + 1 < len(lines):
            timestamp_text = match_time_line(lines[i + 1])

        if timestamp_text is not None:
            if current_block is not None:
                blocks.append(current_block)

            time_line = lines[i + 1]
            current_block = ParsedBlock(
                author=line.strip(),
                timestamp_text=timestamp_text,
                body_lines=[],
                raw_lines=[line, time_line],
                is_thread_reply=is_thread_reply_line(time_line),
                is_pinned_context=is_pinned_context,
            )
            is_pinned_context = False
            i += 2
            continue

        if current_block is not None:
            current_block.body_lines.append(line)
            current_block.raw_lines.append(line)

        i += 1

    if current_block is not None:
        blocks.append(current_block)

    logger.debug(f"Segmented {len(lines)} lines into {len(blocks)} blocks")
    return blocks


def make_message_id(position: int, raw_block: str) -> str:
    """Derive a stable message id from the block's position and raw text."""
    digest = hashlib.sha1(f"{position}:{raw_block}".encode("utf-8")).hexdigest()
    return f"msg_{digest[:12]}"


def block_to_message(block: ParsedBlock, position: int) -> MessageRecord:
    """Normalize one parsed block into a MessageRecord."""
    body = "\n".join(
        line.strip()
        for line in block.body_lines
        if not is_attachment_line(line) and line.strip()
    )

    # Mentions and links are taken from all lines, attachments included
    all_text = "\n".join(block.body_lines)
    raw_block = "\n".join(block.raw_lines)

    return MessageRecord(
        id=make_message_id(position, raw_block),
        author=block.author,
        timestamp_text=block.timestamp_text,
        timestamp_minutes=parse_time_to_minutes(block.timestamp_text),
        is_thread_reply=block.is_thread_reply,
        is_pinned_context=block.is_pinned_context,
        mentions=extract_mentions(all_text),
        body=body,
        links=extract_links(all_text),
        attachments=extract_attachments(block.body_lines),
        raw_block=raw_block,
    )


def blocks_to_messages(blocks: List[ParsedBlock]) -> List[MessageRecord]:
    """Convert parsed blocks to message records, preserving order."""
    return [block_to_message(block, position) for position, block in enumerate(blocks)]


class SlackParser(BaseParser):
    """Parser for text copied out of a Slack channel."""

    def parse_text(self, raw_text: str) -> List[MessageRecord]:
        """
        Parse a pasted Slack transcript into message records.

        Args:
            raw_text: Full transcript as a single string

        Returns:
            Message records in document order
        """
        messages = blocks_to_messages(parse_to_blocks(raw_text))
        logger.debug(f"{self.get_parser_name()} parsed {len(messages)} messages")
        return messages

    def get_parser_name(self) -> str:
        """Get parser name."""
        return "Slack"
