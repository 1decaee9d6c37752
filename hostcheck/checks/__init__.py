"""Hostcheck checks for asserting the state of the local host.

Each catalog entry is a factory that binds target values and returns a
check. Calling the check queries the host and returns a ``CheckResult``.

Check Categories:
    - Packages: installed packages, PPAs, yum repos, pacman IgnorePkg
    - systemd: unit state, sockets, timers, unit file status

Example:
    >>> from hostcheck.checks import get_check
    >>> check = get_check("systemctlactive", "nginx.service")
    >>> exit_code, message = check()
"""

import inspect
from collections.abc import Callable

from hostcheck.errors import ConfigurationError

# Base check class
from .base import BaseCheck

# Package checks
from .packages import (
    PPACheck,
    PackageInstalledCheck,
    PacmanIgnoreCheck,
    YumRepoCheck,
    installed,
    pacman_ignore,
    ppa,
    yum_repo_exists,
    yum_repo_fullname,
    yum_repo_url,
)

# systemd checks
from .systemctl import (
    SystemctlServiceCheck,
    SystemctlSocketCheck,
    SystemctlTimerCheck,
    SystemctlUnitFileCheck,
    systemctl_active,
    systemctl_loaded,
    systemctl_sock_path,
    systemctl_sock_unit,
    systemctl_timer,
    systemctl_timer_loaded,
    systemctl_unit_file_status,
)

CHECKS: dict[str, Callable[..., BaseCheck]] = {
    "installed": installed,
    "ppa": ppa,
    "yumrepo": yum_repo_exists,
    "yumrepourl": yum_repo_url,
    "yumrepofullname": yum_repo_fullname,
    "pacmanignore": pacman_ignore,
    "systemctlloaded": systemctl_loaded,
    "systemctlactive": systemctl_active,
    "systemctlsockpath": systemctl_sock_path,
    "systemctlsockunit": systemctl_sock_unit,
    "systemctltimer": systemctl_timer,
    "systemctltimerloaded": systemctl_timer_loaded,
    "systemctlunitfilestatus": systemctl_unit_file_status,
}


def check_parameters(name: str) -> list[str]:
    """Return the argument names a catalog check takes."""
    return list(inspect.signature(CHECKS[name]).parameters)


def get_check(name: str, *args: str) -> BaseCheck:
    """Build the named check with its target values.

    Args:
        name: Catalog name, case-insensitive (e.g. "installed")
        *args: Target values for the check's factory

    Returns:
        The check, ready to be called

    Raises:
        ConfigurationError: If the name is unknown or the argument count is wrong
    """
    key = name.lower()
    factory = CHECKS.get(key)
    if factory is None:
        raise ConfigurationError(f"Unknown check: {name}")

    try:
        inspect.signature(factory).bind(*args)
    except TypeError:
        expected = ", ".join(check_parameters(key))
        raise ConfigurationError(
            f"Check {key} takes {len(check_parameters(key))} argument(s) ({expected}), got {len(args)}"
        ) from None
    return factory(*args)


__all__ = [
    # Catalog
    "CHECKS",
    "check_parameters",
    "get_check",
    # Base
    "BaseCheck",
    # Packages
    "PPACheck",
    "PackageInstalledCheck",
    "PacmanIgnoreCheck",
    "YumRepoCheck",
    "installed",
    "pacman_ignore",
    "ppa",
    "yum_repo_exists",
    "yum_repo_fullname",
    "yum_repo_url",
    # systemd
    "SystemctlServiceCheck",
    "SystemctlSocketCheck",
    "SystemctlTimerCheck",
    "SystemctlUnitFileCheck",
    "systemctl_active",
    "systemctl_loaded",
    "systemctl_sock_path",
    "systemctl_sock_unit",
    "systemctl_timer",
    "systemctl_timer_loaded",
    "systemctl_unit_file_status",
]
