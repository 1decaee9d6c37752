"""Select which backend program answers a family of checks."""

import logging
from collections.abc import Sequence

from .errors import BackendNotFoundError, CommandFailedError, CommandNotFoundError
from .process import run_command
from .settings import get_settings

logger = logging.getLogger(__name__)

# Package managers and the option that queries a single installed package
PACKAGE_MANAGERS: dict[str, str] = {
    "dpkg": "-s",
    "rpm": "-q",
    "pacman": "-Qs",
}


def probe(candidates: Sequence[str], probe_args: Sequence[str] | None = None) -> str:
    """Return the first candidate program that exists on this host.

    Each candidate is invoked with ``probe_args`` (``--version`` by default)
    in order. Only a missing executable rules a candidate out; a non-zero
    exit or any other start-up failure still counts as found.

    Args:
        candidates: Program names, highest priority first
        probe_args: Arguments for the probe invocation

    Returns:
        Name of the selected program

    Raises:
        BackendNotFoundError: If no candidate exists (including when there
            are no candidates at all)

    Example:
        >>> probe(["dpkg", "rpm", "pacman"])
        'dpkg'
    """
    if probe_args is None:
        probe_args = get_settings().probe_args

    attempted = list(candidates)
    for program in attempted:
        try:
            run_command([program, *probe_args])
        except CommandNotFoundError:
            logger.debug(f"Backend candidate not found: {program}")
            continue
        except CommandFailedError as e:
            logger.warning(f"Backend candidate {program} exists but failed to start: {e}")
        logger.debug(f"Selected backend: {program}")
        return program

    raise BackendNotFoundError(attempted)


def package_manager() -> str:
    """Probe for the host's package manager in configured priority order.

    Names without a known query option are skipped with a warning.

    Raises:
        BackendNotFoundError: If none of the configured managers exist
    """
    candidates = []
    for name in get_settings().package_managers:
        if name in PACKAGE_MANAGERS:
            candidates.append(name)
        else:
            logger.warning(f"Ignoring unsupported package manager: {name}")
    return probe(candidates)
