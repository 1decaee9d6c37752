"""Read configuration files as raw text or tokenized lines."""

import logging
from pathlib import Path

from .errors import SourceUnavailableError

logger = logging.getLogger(__name__)


def file_to_string(path: str | Path) -> str:
    """Return the full text of a file.

    Raises:
        SourceUnavailableError: If the file is missing or unreadable
    """
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(f"Couldn't read {path}: {e}") from e
    logger.debug(f"Read {len(text)} chars from {path}")
    return text


def file_to_lines(path: str | Path) -> list[list[str]]:
    """Return a file's lines, each split into whitespace-delimited fields."""
    return [line.split() for line in file_to_string(path).splitlines()]
