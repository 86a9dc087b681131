"""
Line classifiers for pasted Slack transcripts.

A transcript message opens with two header lines:

    Jessica Booker
      11:13 AM

The author line is flush left, the time line is indented by at least two
spaces and may carry a "replied to a thread:" marker. Slack also pastes
system annotations ("Pinned by ...", "Canvas updated ...") and bare
attachment filenames between messages.
"""

import re
from typing import Optional

AUTHOR_LINE_RE = re.compile(r"[A-Za-z][A-Za-z\s'-]+")
TIME_LINE_RE = re.compile(r"^\s{2,}(\d{1,2}:\d{2}\s?(?:AM|PM))", re.IGNORECASE)
PINNED_BY_RE = re.compile(r"^Pinned by", re.IGNORECASE)
CANVAS_UPDATED_RE = re.compile(r"^Canvas updated", re.IGNORECASE)
THREAD_REPLY_RE = re.compile(r"replied to a thread", re.IGNORECASE)
ATTACHMENT_RE = re.compile(
    r"\.(png|jpg|jpeg|gif|pdf|doc|docx|xlsx|csv)$", re.IGNORECASE
)


def is_pinned_by_line(line: str) -> bool:
    return bool(PINNED_BY_RE.match(line.strip()))


def is_canvas_updated_line(line: str) -> bool:
    return bool(CANVAS_UPDATED_RE.match(line.strip()))


def is_system_line(line: str) -> bool:
    """Check if a line is a Slack system annotation rather than message text."""
    return is_pinned_by_line(line) or is_canvas_updated_line(line)


def is_attachment_line(line: str) -> bool:
    """
    Check if a line is a bare attachment reference.

    Matches filenames with a known document/image extension, plus pasted
    screenshot names such as "Screenshot 2024-01-15 at 10.02.11.png".
    """
    trimmed = line.strip()
    if ATTACHMENT_RE.search(trimmed):
        return True
    if trimmed.lower().startswith("screenshot") and (
        ".png" in trimmed or ".jpg" in trimmed
    ):
        return True
    return False


def is_author_line(line: str) -> bool:
    """
    Check if a line could be a message author line.

    Author lines are never indented and look like a person's name. Whether
    the line really opens a message is decided by the segmenter, which also
    requires a time line right after it.
    """
    trimmed = line.strip()
    if not trimmed:
        return False
    if line[0].isspace():
        return False
    if is_system_line(trimmed) or is_attachment_line(trimmed):
        return False
    return bool(AUTHOR_LINE_RE.fullmatch(trimmed))


def match_time_line(line: str) -> Optional[str]:
    """Return the timestamp text of an indented time line, or None."""
    match = TIME_LINE_RE.match(line)
    if not match:
        return None
    return match.group(1)


def is_time_line(line: str) -> bool:
    return match_time_line(line) is not None


def is_thread_reply_line(line: str) -> bool:
    return bool(THREAD_REPLY_RE.search(line))
