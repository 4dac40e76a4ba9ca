"""daynotes CLI - timestamped personal notes."""

import logging
from typing import Callable

import click

from . import messages
from .adapters.console_view import ConsoleView
from .adapters.file_notebook import FileNotebook
from .config import configure_logging, load_config
from .core.notes import parse_day
from .ports import NotebookView
from .presenter import NotebookPresenter

logger = logging.getLogger(__name__)


def prompt_line() -> str:
    """
    Read one raw line from stdin, without the line terminator.

    Empty lines are allowed. End of input aborts the way a click prompt does.
    """
    line = click.get_text_stream("stdin").readline()
    if not line:
        raise click.Abort()
    return line.rstrip("\r\n")


def run_loop(
    presenter: NotebookPresenter,
    view: NotebookView,
    read_line: Callable[[], str] = prompt_line,
) -> None:
    """
    Read commands until ``exit``.

    Date parse failures in add/day/week are deliberately not caught here:
    a ValueError ends the loop and the process. load/save report their own
    I/O errors and the loop carries on.
    """
    while True:
        view.display_message(messages.COMMAND_PROMPT)
        command = read_line()
        logger.debug(f"Command: {command!r}")

        match command:
            case "add":
                view.display_message(messages.DATE_PROMPT)
                date_text = read_line()
                view.display_message(messages.CONTENT_PROMPT)
                content = read_line()
                presenter.add_note(date_text, content)
            case "load":
                presenter.load_notes()
            case "save":
                presenter.save_notes()
            case "day":
                view.display_message(messages.DAY_PROMPT)
                day = parse_day(read_line())
                view.display_notes(presenter.get_notes_for_day(day))
            case "week":
                view.display_message(messages.WEEK_PROMPT)
                week_start = parse_day(read_line())
                view.display_notes(presenter.get_notes_for_week(week_start))
            case "exit":
                view.display_message(messages.FAREWELL)
                return
            case _:
                view.display_message(messages.UNKNOWN_COMMAND)


@click.command()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """daynotes - record and browse timestamped notes."""
    configure_logging(debug)

    config = load_config()
    view = ConsoleView()
    store = FileNotebook(encoding=config.encoding)
    presenter = NotebookPresenter(view, store, config.notes_file)

    run_loop(presenter, view)


if __name__ == "__main__":
    main()
