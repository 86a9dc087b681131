"""
Pattern families and controlled tag vocabulary used by the rule classifier.

All patterns are case-insensitive and searched anywhere in the message body
unless anchored.
"""

import re
from types import MappingProxyType


def _compile(patterns):
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


# Canonical tag -> lowercase trigger phrases, first hit wins
DEFAULT_TAG_KEYWORDS = MappingProxyType(
    {
        "LabCorp": ("labcorp", "lab corp"),
        "Quest": ("quest",),
        "Akute": ("akute",),
        "Intercom": ("intercom",),
        "Scheduling": ("scheduling", "schedule", "appointment", "appointments"),
        "Macros": ("macro", "macros"),
        "Employment Verification": ("employment verification", "employment verif"),
        "HRT Intake": ("hrt intake", "hrt"),
        "Routing": ("routing", "route", "routed"),
        "HIPAA": ("hipaa",),
        "Subscription": ("subscription", "subscriptions"),
        "Video Visit": ("video visit", "video visits", "telehealth"),
        "Tech Issue": ("tech issue", "technical issue", "error", "bug", "down"),
        "Protocol": ("protocol", "protocols"),
        "Billing": ("billing", "payment", "charge"),
    }
)

# Away/ack chatter
NOISE_PATTERNS = _compile(
    [
        r"taking\s+(my\s+)?break",
        r"quick\s+bio",
        r"bio\s+break",
        r"rebooting",
        r"restart(ing)?\s+(my\s+)?(computer|pc)",
        r"brb",
        r"be\s+right\s+back",
        r"stepping\s+away",
        r"^back$",
        r"^back!$",
        r"internet\s+outage",
        r"^thank(s|\s+you)!?$",
        r"^got\s+it!?$",
        r"^sounds\s+good!?$",
        r"^okay!?$",
        r"^ok!?$",
    ]
)

PROTOCOL_PATTERNS = _compile(
    [
        r"please\s+remember",
        r"protocol",
        r"do\s+the\s+following",
        r"follow\s+these\s+steps",
        r"should\s+not",
        r"must\s+not",
        r"cannot",
        r"do\s+not",
        r"don't",
        r"must\s+be",
        r"required\s+to",
        r"make\s+sure\s+(to|you)",
        r"always\s+ensure",
        r"never\s+do",
    ]
)

INCIDENT_PATTERNS = _compile(
    [
        r"issue",
        r"\bdown\b",
        r"\berror\b",
        r"not\s+working",
        r"broken",
        r"outage",
        r"problem",
        r"experiencing\s+issues",
        r"temporarily\s+unavailable",
        r"investigating",
        r"resolved",
        r"fixed",
    ]
)

STAFFING_PATTERNS = _compile(
    [
        r"\booo\b",
        r"out\s+of\s+office",
        r"away\s+mode",
        r"back\s+for\s+the\s+next",
        r"stepping\s+out",
        r"leaving\s+early",
        r"working\s+from\s+home",
        r"wfh",
        r"sick\s+day",
        r"pto",
        r"vacation",
        r"will\s+be\s+out",
        r"covering\s+for",
    ]
)

REMINDER_PATTERNS = _compile(
    [
        r"reminder",
        r"don't forget",
        r"remember to",
    ]
)

HIGH_PRIORITY_PATTERNS = _compile(
    [
        r"important",
        r"urgent",
        r"hipaa",
        r"immediately",
        r"asap",
        r"critical",
        r"action\s+required",
        r"do\s+not\s+do",
        r"must\s+stop",
        r"stop\s+doing",
    ]
)

HASHTAG_RE = re.compile(r"#[A-Za-z][A-Za-z0-9_-]*")
BRACKET_TAG_RE = re.compile(r"\[([A-Z][A-Z0-9_-]+)\]")

# Stripped from titles; case-sensitive like Slack renders them
TITLE_BROADCAST_RE = re.compile(r"@(channel|here|everyone)")


def matches_any(text, patterns) -> bool:
    """Check if text matches any compiled pattern in the family."""
    return any(pattern.search(text) for pattern in patterns)
