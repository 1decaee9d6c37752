"""Run external commands and capture their output."""

import logging
import subprocess
from collections.abc import Sequence
from typing import NamedTuple

from .errors import CommandFailedError, CommandNotFoundError

logger = logging.getLogger(__name__)


class CommandOutput(NamedTuple):
    """Captured result of a finished command."""
    returncode: int
    stdout: str
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(args: Sequence[str]) -> CommandOutput:
    """Run a command to completion and capture its output.

    A non-zero exit status is returned, not raised: several backends answer
    a negative query that way.

    Args:
        args: Program name followed by its arguments

    Returns:
        CommandOutput with exit status, stdout and stderr as text

    Raises:
        CommandNotFoundError: If the program is not installed
        CommandFailedError: If the program exists but could not be started
    """
    args = list(args)
    logger.debug(f"Running: {' '.join(args)}")
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise CommandNotFoundError(args[0]) from e
    except OSError as e:
        raise CommandFailedError(f"Couldn't execute {args[0]}: {e}") from e

    if result.returncode != 0:
        logger.debug(f"{args[0]} exited with status {result.returncode}")
    return CommandOutput(result.returncode, result.stdout, result.stderr)
