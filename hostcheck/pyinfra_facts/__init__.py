"""PyInfra facts describing the host queries Hostcheck runs.

Each fact names the program it needs, the command to run and how to turn
the command's output into structured data. They can be evaluated locally
with ``hostcheck.gather.gather`` or passed to ``host.get_fact`` in a
pyinfra deploy.
"""

from .packages import PackageQuery
from .systemd import SystemdSockets, SystemdTimers, SystemdUnitFiles, SystemdUnits

__all__ = [
    "PackageQuery",
    "SystemdSockets",
    "SystemdTimers",
    "SystemdUnitFiles",
    "SystemdUnits",
]
