"""
Classification Strategies

This module contains the rule-based classifier that turns parsed message
records into categorized, prioritized update records.
"""

from .base import (
    ANNOUNCEMENT,
    CATEGORIES,
    FYI,
    HIGH,
    INCIDENT,
    LOW,
    MED,
    NOISE,
    PRIORITIES,
    PROTOCOL,
    REMINDER,
    STAFFING_OOO,
    UpdateRecord,
)
from .patterns import DEFAULT_TAG_KEYWORDS
from .rule_classifier import RuleBasedClassifier

__all__ = [
    "UpdateRecord",
    "RuleBasedClassifier",
    "DEFAULT_TAG_KEYWORDS",
    "CATEGORIES",
    "PRIORITIES",
    "ANNOUNCEMENT",
    "PROTOCOL",
    "INCIDENT",
    "REMINDER",
    "FYI",
    "STAFFING_OOO",
    "NOISE",
    "HIGH",
    "MED",
    "LOW",
]
