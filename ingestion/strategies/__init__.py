"""
Ingestion Strategies Package

This package contains the strategy implementations used by the ingestion pipeline:
- Parsing strategies for pasted chat transcripts (Slack)
- Classification strategies for turning messages into prioritized updates
"""

from . import classification, parsing

__all__ = ["classification", "parsing"]
