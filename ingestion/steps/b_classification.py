#!/usr/bin/env python3
"""
Classification Module

Classifies parsed message records into update records (category, priority,
tags, title, summary) and saves them as JSONL.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ingestion.steps.a_parsing import messages_path
from ingestion.steps.c_export import load_jsonl, save_jsonl
from ingestion.strategies.classification import RuleBasedClassifier, UpdateRecord
from ingestion.strategies.parsing import MessageRecord

logger = logging.getLogger(__name__)

_default_classifier = RuleBasedClassifier()


def classify_one(message: MessageRecord, date: Optional[str] = None) -> UpdateRecord:
    """Classify a single message record."""
    return _default_classifier.classify_message(message, date)


def classify(
    messages: Sequence[MessageRecord], date: Optional[str] = None
) -> List[UpdateRecord]:
    """Classify message records; output has the same length and order."""
    return _default_classifier.classify_messages(messages, date)


def updates_path(output_dir: Path, transcript_name: str) -> Path:
    return Path(output_dir) / f"{transcript_name}.updates.jsonl"


class UpdateClassifierStep:
    """Classifies the messages saved by the parsing step."""

    def __init__(
        self,
        output_dir: str = "./updates-parsed",
        config: Optional[Dict[str, Any]] = None,
    ):
        self.output_dir = Path(output_dir)
        self.classifier = RuleBasedClassifier(config)

    def process_transcript(
        self, transcript_name: str, date: Optional[str] = None
    ) -> List[UpdateRecord]:
        """
        Classify a parsed transcript and save its updates as JSONL.

        Args:
            transcript_name: Stem of the step-1 messages file
            date: Optional logical date to stamp on every update

        Returns:
            Update records in message order
        """
        context, records = load_jsonl(messages_path(self.output_dir, transcript_name))
        messages = [r for r in records if isinstance(r, MessageRecord)]
        if len(messages) != len(records):
            logger.warning(
                f"⚠ Skipped {len(records) - len(messages)} non-message records"
            )

        logger.info(f"🔍 Classifying {len(messages)} messages from {transcript_name}")
        updates = self.classifier.classify_messages(messages, date)

        context = dict(context)
        context["update_count"] = len(updates)
        context["date"] = date
        save_jsonl(updates_path(self.output_dir, transcript_name), updates, context)

        logger.info(f"✅ Classified {len(updates)} updates")
        return updates
