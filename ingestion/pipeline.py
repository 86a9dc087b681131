#!/usr/bin/env python3
"""
Ingestion Pipeline

Orchestrates the transcript pipeline for pasted Slack channel text.

Pipeline Steps:
1. Parse the raw transcript into message records
2. Classify messages into prioritized updates

Usage:
  # Run complete pipeline from step 1
  chat-updates transcripts/ic-channel.txt --date 2024-01-15

  # Re-classify the messages saved by a previous step 1 run
  chat-updates transcripts/ic-channel.txt --step 2

  # Print updates in feed order when done
  chat-updates transcripts/ic-channel.txt --sorted

Environment Variables:
- CHAT_UPDATES_OUTPUT_DIR (default ./updates-parsed)
- CHAT_UPDATES_LOG_LEVEL (default INFO)
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from feed import sort_updates
from ingestion.steps.a_parsing import TranscriptParser
from ingestion.steps.b_classification import UpdateClassifierStep

DEFAULT_OUTPUT_DIR = "./updates-parsed"

logger = logging.getLogger(__name__)


def setup_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse a pasted Slack transcript into prioritized updates"
    )
    parser.add_argument("transcript", help="Path to the pasted transcript text file")
    parser.add_argument(
        "--step",
        type=int,
        choices=[1, 2],
        default=1,
        help="Starting step (1-2, default: 1)",
    )
    parser.add_argument(
        "--date", default=None, help="Logical date the transcript is from"
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help=f"Directory for JSONL output (default: $CHAT_UPDATES_OUTPUT_DIR or {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--sorted",
        action="store_true",
        help="Print updates in feed order (priority, then latest first)",
    )
    return parser


def main(argv=None) -> int:
    """Main pipeline orchestrator."""
    load_dotenv()

    args = build_arg_parser().parse_args(argv)
    setup_logging(os.getenv("CHAT_UPDATES_LOG_LEVEL", "INFO"))

    output_dir = args.output_dir or os.getenv(
        "CHAT_UPDATES_OUTPUT_DIR", DEFAULT_OUTPUT_DIR
    )
    transcript_path = Path(args.transcript)
    transcript_name = transcript_path.stem

    print("🚀 Ingestion Pipeline")
    print(f"📊 Transcript: {transcript_path}")
    print(f"🔢 Starting from step: {args.step}")

    # Step 1: Parsing
    if args.step <= 1:
        print(f"\n🔍 Step 1: Parsing - {transcript_name}")
        try:
            TranscriptParser(output_dir).process_transcript(
                transcript_path, transcript_name
            )
            print("✅ Step 1 completed")
        except Exception as e:
            logger.error(f"❌ Step 1 failed: {e}")
            return 1

    # Step 2: Classification
    if args.step <= 2:
        print(f"\n🏷️ Step 2: Classification - {transcript_name}")
        try:
            updates = UpdateClassifierStep(output_dir).process_transcript(
                transcript_name, args.date
            )
            print("✅ Step 2 completed")
        except Exception as e:
            logger.error(f"❌ Step 2 failed: {e}")
            return 1

        if args.sorted:
            for update in sort_updates(updates):
                time_text = update.timestamp_text or "--:--"
                print(
                    f"[{update.priority}] {update.category} | {time_text} | "
                    f"{update.owner or 'unknown'}: {update.title}"
                )

    print("\n🎉 Pipeline completed successfully!")
    return 0


if __name__ == "__main__":
    exit(main())
