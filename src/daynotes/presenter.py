"""Presenter layer between the CLI loop and the note store.

Turns raw user input into store calls, and store results or I/O failures
into messages for the view.
"""

import logging
from datetime import datetime
from pathlib import Path

from . import messages
from .core.notes import Note, parse_timestamp
from .ports import NotebookView, NoteStore

logger = logging.getLogger(__name__)


class NotebookPresenter:
    """Carries out user intents against a NoteStore and reports to a NotebookView."""

    def __init__(self, view: NotebookView, store: NoteStore, notes_path: Path | str):
        self.view = view
        self.store = store
        self.notes_path = Path(notes_path)

    def add_note(self, date_text: str, content: str) -> None:
        """
        Record a note stamped ``date_text`` (YYYY-MM-DD HH:MM).

        A malformed date raises ValueError; nothing is added in that case.
        """
        timestamp = parse_timestamp(date_text)
        self.store.add(Note(timestamp=timestamp, content=content))
        logger.debug(f"Added note at {timestamp}")
        self.view.display_message(messages.NOTE_ADDED)

    def load_notes(self) -> None:
        """Load the notes file and show everything in it, in file order."""
        try:
            self.store.load_from(self.notes_path)
        except OSError as e:
            logger.warning(f"Failed to load {self.notes_path}: {e}")
            self.view.display_message(messages.LOAD_FAILED.format(error=e))
            return

        self.view.display_notes(self.store.notes())

    def save_notes(self) -> None:
        """Write every note to the notes file."""
        try:
            self.store.save_to(self.notes_path)
        except OSError as e:
            logger.warning(f"Failed to save {self.notes_path}: {e}")
            self.view.display_message(messages.SAVE_FAILED.format(error=e))
            return

        self.view.display_message(messages.NOTES_SAVED)

    def get_notes(self) -> list[Note]:
        return self.store.notes()

    def get_notes_for_day(self, day: datetime) -> list[Note]:
        return self.store.notes_for_day(day)

    def get_notes_for_week(self, start_of_week: datetime) -> list[Note]:
        return self.store.notes_for_week(start_of_week)
