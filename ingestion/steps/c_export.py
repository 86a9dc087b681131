#!/usr/bin/env python3
"""
Export Module

Writes and reads the JSONL hand-off files shared by the pipeline steps.
Each file starts with a context line followed by one line per record:

    {"type": "context", "data": {...}}
    {"type": "message", ...}
    {"type": "update", ...}

Loading validates every line; malformed files raise ExportFormatError.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple, Union

from ingestion.strategies.classification import UpdateRecord
from ingestion.strategies.parsing import MessageRecord

logger = logging.getLogger(__name__)

Record = Union[MessageRecord, UpdateRecord]

RECORD_TYPES = {
    "message": MessageRecord,
    "update": UpdateRecord,
}


class ExportFormatError(ValueError):
    """Raised when an exported JSONL file cannot be read back."""


def _record_type(record: Record) -> str:
    if isinstance(record, MessageRecord):
        return "message"
    if isinstance(record, UpdateRecord):
        return "update"
    raise TypeError(f"Cannot export {type(record).__name__}")


def dump_jsonl(records: Sequence[Record], context: Dict[str, Any]) -> str:
    """Serialize records and their context as JSONL text."""
    lines = [json.dumps({"type": "context", "data": context}, ensure_ascii=False)]
    for record in records:
        record_dict = {"type": _record_type(record)}
        record_dict.update(record.to_dict())
        lines.append(json.dumps(record_dict, ensure_ascii=False))
    return "\n".join(lines) + "\n"


def save_jsonl(
    output_path: Path, records: Sequence[Record], context: Dict[str, Any]
) -> None:
    """Save records and their context in JSONL format."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(dump_jsonl(records, context))

    logger.info(f"💾 Saved JSONL: {output_path}")
    logger.info(f"📊 {len(records)} records written")


def loads_jsonl(text: str) -> Tuple[Dict[str, Any], List[Record]]:
    """
    Parse JSONL text produced by dump_jsonl.

    Returns:
        Tuple of (context, records)

    Raises:
        ExportFormatError: on invalid JSON, unknown record types or
            missing fields
    """
    context: Dict[str, Any] = {}
    records: List[Record] = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue

        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise ExportFormatError(f"Line {line_number}: invalid JSON ({e})") from e

        if not isinstance(data, dict):
            raise ExportFormatError(f"Line {line_number}: expected a JSON object")

        record_type = data.pop("type", None)
        if record_type == "context":
            context = data.get("data") or {}
            if not isinstance(context, dict):
                raise ExportFormatError(f"Line {line_number}: context must be an object")
            continue

        record_class = RECORD_TYPES.get(record_type)
        if record_class is None:
            raise ExportFormatError(
                f"Line {line_number}: unknown record type {record_type!r}"
            )

        try:
            records.append(record_class.from_dict(data))
        except KeyError as e:
            raise ExportFormatError(
                f"Line {line_number}: missing field {e.args[0]!r}"
            ) from e
        except (TypeError, ValueError) as e:
            raise ExportFormatError(f"Line {line_number}: {e}") from e

    return context, records


def load_jsonl(input_path: Path) -> Tuple[Dict[str, Any], List[Record]]:
    """Load a JSONL file written by save_jsonl."""
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(input_path)

    with open(input_path, "r", encoding="utf-8") as f:
        context, records = loads_jsonl(f.read())

    logger.info(f"📄 Loaded {len(records)} records from {input_path}")
    return context, records
