"""Note store interface."""

from datetime import datetime
from pathlib import Path
from typing import Protocol

from daynotes.core.notes import Note


class NoteStore(Protocol):
    """Interface for holding, querying and persisting notes."""

    def add(self, note: Note) -> None:
        """Append a note to the collection."""
        ...

    def notes(self) -> list[Note]:
        """All notes in insertion order."""
        ...

    def notes_for_day(self, day: datetime) -> list[Note]:
        """Notes strictly inside the 24 hours after day, oldest first."""
        ...

    def notes_for_week(self, start_of_week: datetime) -> list[Note]:
        """Notes strictly inside the 7 days after start_of_week, oldest first."""
        ...

    def save_to(self, path: Path | str) -> None:
        """Overwrite path with every note. Raises OSError on failure."""
        ...

    def load_from(self, path: Path | str) -> None:
        """Replace the collection with the notes stored at path. Raises OSError on failure."""
        ...
