"""Evaluate pyinfra facts against the local host."""

import logging
import shlex
from typing import Any

from pyinfra.api import FactBase

from .backends import probe
from .errors import CommandFailedError
from .process import run_command

logger = logging.getLogger(__name__)


def gather(fact_cls: type[FactBase], **kwargs: Any) -> Any:
    """Run a fact's command on this host and return the processed output.

    The program named by the fact's ``requires_command`` is probed first, so
    a missing tool surfaces as ``BackendNotFoundError`` rather than as an
    empty answer. A non-zero exit is fatal unless the fact sets
    ``ignore_errors``, in which case the fact's ``default`` is returned
    and the failed command's output is discarded.

    Args:
        fact_cls: FactBase subclass to evaluate
        **kwargs: Arguments for the fact's command

    Returns:
        Whatever the fact's ``process`` returns

    Raises:
        BackendNotFoundError: If the required program is missing
        CommandFailedError: If the command fails and errors are not ignored
    """
    fact = fact_cls()

    required = fact.requires_command(**kwargs)
    if required:
        probe([required])

    command = str(fact.command(**kwargs))
    result = run_command(shlex.split(command))

    if not result.ok:
        if not getattr(fact, "ignore_errors", False):
            raise CommandFailedError(
                f"Couldn't execute `{command}` (exit status {result.returncode}):"
                f"\n\t{result.stderr.strip()}"
            )
        logger.debug(f"`{command}` exited {result.returncode}, using {fact_cls.__name__} default")
        return fact.default()

    logger.debug(f"Gathered {fact_cls.__name__} from `{command}`")
    return fact.process(result.stdout.splitlines())
