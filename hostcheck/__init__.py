"""
Hostcheck - Assertions about the state of a running host.

Hostcheck provides small, independent checks that inspect installed packages,
enabled repositories and systemd units, and report pass/fail with a
diagnostic message:

- Build a check from the catalog with its target value
- Call it to query the host
- Get back (exit_code, message): (0, "") on success, (1, report) on failure
"""

from .checks import CHECKS, BaseCheck, get_check
from .models import CheckResult
from .settings import HostcheckSettings, get_settings, reload_settings

__version__ = "0.1.0"
__all__ = [
    "BaseCheck",
    "CHECKS",
    "CheckResult",
    "HostcheckSettings",
    "get_check",
    "get_settings",
    "reload_settings",
]
