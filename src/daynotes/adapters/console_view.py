"""Console view adapter."""

import click

from daynotes import messages
from daynotes.core.notes import Note


class ConsoleView:
    """
    Terminal renderer.

    Implements NotebookView protocol. Writes through click.echo so output
    can be captured by click's test runner.
    """

    def display_notes(self, notes: list[Note]) -> None:
        if not notes:
            click.echo(messages.NO_NOTES)
            return

        for note in notes:
            click.echo(str(note))

    def display_message(self, message: str) -> None:
        click.echo(message)
