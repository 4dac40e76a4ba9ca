"""Configuration management for daynotes."""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

NOTES_FILE = "notes.txt"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Config:
    """daynotes configuration."""

    notes_file: Path = Path(NOTES_FILE)
    encoding: str = "utf-8"


def load_config(cwd: Path | str | None = None) -> Config:
    """
    Resolve the configuration for this run.

    There is no config file and no environment lookup: the notes file always
    lives in the working directory.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    config = Config(notes_file=base / NOTES_FILE)
    logger.debug(f"Using notes file {config.notes_file}")
    return config


def configure_logging(debug: bool) -> None:
    """Send log records to stderr when debugging; stay quiet otherwise."""
    if debug:
        logging.basicConfig(format=LOG_FORMAT, level=logging.DEBUG)
