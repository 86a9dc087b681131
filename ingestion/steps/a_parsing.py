#!/usr/bin/env python3
"""
Parsing Module for Intermediate Representation Creation

Turns a pasted Slack transcript into message records and saves them as
JSONL for the classification step.
"""

import logging
from pathlib import Path
from typing import List, Optional

from ingestion.steps.c_export import save_jsonl
from ingestion.strategies.parsing import MessageRecord, SlackParser

logger = logging.getLogger(__name__)

_default_parser = SlackParser()


def parse(raw_text: str) -> List[MessageRecord]:
    """Parse raw transcript text into message records in document order."""
    return _default_parser.parse_text(raw_text)


def messages_path(output_dir: Path, transcript_name: str) -> Path:
    return Path(output_dir) / f"{transcript_name}.messages.jsonl"


class TranscriptParser:
    """Lightweight transcript parser that delegates parsing to a strategy class."""

    def __init__(self, output_dir: str = "./updates-parsed", parser_type: str = "slack"):
        self.output_dir = Path(output_dir)

        self.parsers = {
            "slack": SlackParser(),
        }
        if parser_type not in self.parsers:
            raise ValueError(f"Unknown parser type: {parser_type}")
        self.parser = self.parsers[parser_type]

    def read_transcript(self, input_path: Path) -> str:
        input_path = Path(input_path)
        if not input_path.exists():
            raise FileNotFoundError(input_path)

        with open(input_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def process_transcript(
        self, input_path: Path, transcript_name: Optional[str] = None
    ) -> List[MessageRecord]:
        """
        Parse a transcript file and save its messages as JSONL.

        Args:
            input_path: Path to the pasted transcript text
            transcript_name: Output file stem (default: input file stem)

        Returns:
            Parsed message records
        """
        input_path = Path(input_path)
        transcript_name = transcript_name or input_path.stem
        logger.info(f"🎯 Parsing transcript: {input_path}")

        messages = self.parser.parse_text(self.read_transcript(input_path))

        context = {
            "transcript_name": transcript_name,
            "source_format": self.parser.get_parser_name(),
            "message_count": len(messages),
            "authors": sorted({m.author for m in messages if m.author}),
        }
        save_jsonl(messages_path(self.output_dir, transcript_name), messages, context)

        logger.info(f"✅ Parsed {len(messages)} messages from {transcript_name}")
        return messages
