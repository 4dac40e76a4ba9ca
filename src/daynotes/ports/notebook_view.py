"""Notebook view interface."""

from typing import Protocol

from daynotes.core.notes import Note


class NotebookView(Protocol):
    """Interface for rendering notes and messages to the user."""

    def display_notes(self, notes: list[Note]) -> None:
        """Render a list of notes, or a placeholder when there are none."""
        ...

    def display_message(self, message: str) -> None:
        """Render a one-line message."""
        ...
