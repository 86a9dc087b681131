"""
Extractors that pull structured values out of message text.
"""

import re
from typing import Iterable, List, Optional

from .line_rules import is_attachment_line

TIME_TOKEN_RE = re.compile(r"(\d{1,2}):(\d{2})\s?(AM|PM)", re.IGNORECASE)
MENTION_RE = re.compile(r"@(channel|here|everyone|[A-Za-z][A-Za-z\s'-]+)")
LINK_RE = re.compile(r"https?://[^\s<>)]+")

BROADCAST_MENTIONS = ("@channel", "@here", "@everyone")


def parse_time_to_minutes(time_text: Optional[str]) -> Optional[int]:
    """
    Convert a Slack clock time to minutes since midnight.

    Args:
        time_text: Text containing a time such as "11:13 AM" or "2:45pm"

    Returns:
        Minutes since midnight, or None if no time could be found
    """
    if not time_text:
        return None

    match = TIME_TOKEN_RE.search(time_text)
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    period = match.group(3).upper()

    # Convert to 24-hour clock
    if period == "PM" and hours != 12:
        hours += 12
    elif period == "AM" and hours == 12:
        hours = 0

    return hours * 60 + minutes


def _unique(values: Iterable[str]) -> List[str]:
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


def extract_mentions(text: str) -> List[str]:
    """Extract @-mentions in first-occurrence order, without duplicates."""
    return _unique(f"@{match.group(1)}" for match in MENTION_RE.finditer(text))


def extract_links(text: str) -> List[str]:
    """Extract http(s) links in first-occurrence order, without duplicates."""
    return _unique(match.group(0) for match in LINK_RE.finditer(text))


def extract_attachments(lines: Iterable[str]) -> List[str]:
    """Collect attachment filenames in order of appearance (duplicates kept)."""
    attachments = []
    for line in lines:
        trimmed = line.strip()
        if is_attachment_line(trimmed):
            attachments.append(trimmed)
    return attachments


def has_broadcast_mention(mentions: Iterable[str]) -> bool:
    """Check for @channel, @here or @everyone among extracted mentions."""
    return any(mention in BROADCAST_MENTIONS for mention in mentions)
