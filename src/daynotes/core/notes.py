"""Pure note domain logic - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
SEPARATOR = ";"

# strptime alone accepts "2024-9-4 7:05"; stored and typed timestamps are zero-padded
_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")

DAY = timedelta(days=1)
WEEK = timedelta(days=7)


@dataclass(frozen=True)
class Note:
    """A timestamped text note."""

    timestamp: datetime
    content: str

    def display(self) -> str:
        """Format the note for display."""
        return f"{format_timestamp(self.timestamp)}: {self.content}"

    def __str__(self) -> str:
        return self.display()


def format_timestamp(dt: datetime) -> str:
    return dt.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> datetime:
    """
    Parse a ``YYYY-MM-DD HH:MM`` timestamp.

    Raises:
        ValueError: if the text is not exactly in that format or names an
            impossible date or time.
    """
    if not _TIMESTAMP_RE.fullmatch(text):
        raise ValueError(f"Invalid timestamp {text!r}, expected YYYY-MM-DD HH:MM")
    return datetime.strptime(text, TIMESTAMP_FORMAT)


def parse_day(text: str) -> datetime:
    """Parse a plain ``YYYY-MM-DD`` date as midnight of that day."""
    return parse_timestamp(f"{text} 00:00")


def filter_notes(notes: list[Note], start: datetime, end: datetime) -> list[Note]:
    """
    Select notes strictly between start and end, oldest first.

    Both bounds are exclusive: a note stamped exactly at start or end is
    left out. Returns a new list; the input order is not touched.
    """
    selected = [n for n in notes if start < n.timestamp < end]
    return sorted(selected, key=lambda n: n.timestamp)


def notes_for_day(notes: list[Note], day: datetime) -> list[Note]:
    return filter_notes(notes, day, day + DAY)


def notes_for_week(notes: list[Note], start_of_week: datetime) -> list[Note]:
    return filter_notes(notes, start_of_week, start_of_week + WEEK)


def encode_line(note: Note) -> str:
    """Serialize a note to one storage line (without the newline)."""
    return f"{format_timestamp(note.timestamp)}{SEPARATOR}{note.content}"


def decode_line(line: str) -> Note | None:
    """
    Parse one storage line.

    Returns None if the line does not split into exactly two fields.
    Raises ValueError if it does but the timestamp field is malformed.

    Trailing empty fields count: "ts;" is a note with empty content and
    "ts;a;" has three fields and is skipped. Dropping trailing empties would
    lose empty notes on reload.
    """
    parts = line.split(SEPARATOR)
    if len(parts) != 2:
        return None
    stamp, content = parts
    return Note(timestamp=parse_timestamp(stamp), content=content)
