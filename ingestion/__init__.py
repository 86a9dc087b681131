"""
Ingestion Subsystem

This module contains all components related to transcript ingestion:
- Parsing pasted chat transcripts into message records
- Classifying messages into categorized, prioritized updates
- Exporting records as JSONL for downstream consumers
"""

from . import steps, strategies

__all__ = ["steps", "strategies"]
