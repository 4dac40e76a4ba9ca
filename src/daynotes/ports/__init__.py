"""Ports - interfaces/protocols between the presenter and its collaborators."""

from .note_store import NoteStore
from .notebook_view import NotebookView

__all__ = [
    "NoteStore",
    "NotebookView",
]
