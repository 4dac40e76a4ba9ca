"""Functional core - pure business logic with no I/O."""

from .notes import (
    Note,
    SEPARATOR,
    TIMESTAMP_FORMAT,
    decode_line,
    encode_line,
    filter_notes,
    format_timestamp,
    notes_for_day,
    notes_for_week,
    parse_day,
    parse_timestamp,
)

__all__ = [
    "Note",
    "SEPARATOR",
    "TIMESTAMP_FORMAT",
    # Timestamps
    "format_timestamp",
    "parse_timestamp",
    "parse_day",
    # Queries
    "filter_notes",
    "notes_for_day",
    "notes_for_week",
    # Storage lines
    "encode_line",
    "decode_line",
]
