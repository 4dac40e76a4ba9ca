"""Flat-file notebook adapter."""

import logging
from datetime import datetime
from pathlib import Path

from daynotes.core.notes import Note, decode_line, encode_line, notes_for_day, notes_for_week

logger = logging.getLogger(__name__)


class FileNotebook:
    """
    In-memory note collection backed by a flat text file.

    Implements NoteStore protocol. Each note is one ``<timestamp>;<content>``
    line. Collection order is append order, not chronological.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._notes: list[Note] = []

    def __len__(self) -> int:
        return len(self._notes)

    def add(self, note: Note) -> None:
        """Append a note to the collection."""
        self._notes.append(note)

    def notes(self) -> list[Note]:
        """All notes in insertion order."""
        return list(self._notes)

    def notes_for_day(self, day: datetime) -> list[Note]:
        """Notes strictly inside the 24 hours after day, oldest first."""
        return notes_for_day(self._notes, day)

    def notes_for_week(self, start_of_week: datetime) -> list[Note]:
        """Notes strictly inside the 7 days after start_of_week, oldest first."""
        return notes_for_week(self._notes, start_of_week)

    def save_to(self, path: Path | str) -> None:
        """Overwrite path with every note in collection order."""
        path = Path(path)
        with path.open("w", encoding=self.encoding) as f:
            for note in self._notes:
                f.write(encode_line(note) + "\n")
        logger.info(f"Saved {len(self._notes)} notes to {path}")

    def load_from(self, path: Path | str) -> None:
        """
        Replace the collection with the notes stored at path.

        Lines that don't split into exactly two fields are skipped. Undecodable
        bytes become U+FFFD instead of failing the load. A bad
        timestamp raises ValueError and leaves the collection empty.
        """
        path = Path(path)
        self._notes.clear()

        loaded = []
        skipped = 0
        with path.open(encoding=self.encoding, errors="replace") as f:
            for lineno, line in enumerate(f, start=1):
                note = decode_line(line.rstrip("\r\n"))
                if note is None:
                    logger.debug(f"Skipping malformed line {lineno} in {path}")
                    skipped += 1
                    continue
                loaded.append(note)

        self._notes = loaded
        logger.info(f"Loaded {len(loaded)} notes from {path} ({skipped} skipped)")
