"""
Transcript Processor Pipeline Steps

This directory contains the numbered pipeline steps for the transcript processor.
Each step represents a stage in the processing pipeline:

1. Parsing - Segments a pasted Slack transcript into message records
2. Classification - Assigns category, priority, tags, title and summary
3. Export - JSONL hand-off files shared by the steps

All steps use JSONL format throughout for consistency. The files are
numbered for easy identification of the processing order.
"""
