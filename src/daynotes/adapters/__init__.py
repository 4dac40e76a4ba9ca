"""Adapters - I/O implementations of ports."""

from .file_notebook import FileNotebook
from .console_view import ConsoleView

__all__ = [
    "FileNotebook",
    "ConsoleView",
]
