"""systemd checks: unit state, sockets, timers and unit file status."""

from typing import Literal

from hostcheck.gather import gather
from hostcheck.models import CheckResult
from hostcheck.pyinfra_facts import (
    SystemdSockets,
    SystemdTimers,
    SystemdUnitFiles,
    SystemdUnits,
)
from hostcheck.reporting import report, success

from .base import BaseCheck

# Position of each state in a SystemdUnits row
UNIT_STATE_COLUMNS = {"loaded": 1, "active": 2}


class SystemctlServiceCheck(BaseCheck):
    """Check that a unit from ``systemctl list-units`` is loaded or active.

    Attributes:
        service: Unit name, e.g. "nginx.service"
        state: "loaded" to check the LOAD column, "active" for the ACTIVE column
    """

    service: str
    state: Literal["loaded", "active"] = "active"

    def run(self) -> CheckResult:
        position = UNIT_STATE_COLUMNS[self.state]
        observed = [
            row[position] for row in gather(SystemdUnits) if row[0] == self.service
        ]
        if self.state in observed:
            return success()
        return report(f"Service {self.service} did not have state", self.state, observed)


class SystemctlSocketCheck(BaseCheck):
    """Check that a socket is registered with systemd.

    Attributes:
        value: Socket path or unit name
        by: "path" to match the LISTEN column, "unit" to match the UNIT column
    """

    value: str
    by: Literal["path", "unit"] = "path"

    def run(self) -> CheckResult:
        values = gather(SystemdSockets)[self.by]
        if self.value in values:
            return success()
        return report("Socket not found", self.value, values)


class SystemctlTimerCheck(BaseCheck):
    """Check that a timer unit is listed by ``systemctl list-timers``.

    Attributes:
        unit: Timer unit name, e.g. "fstrim.timer"
        include_inactive: Also accept loaded timers that are not active
    """

    unit: str
    include_inactive: bool = False

    def run(self) -> CheckResult:
        timers = gather(SystemdTimers, include_inactive=self.include_inactive)
        if self.unit in timers:
            return success()
        return report("Timer not found", self.unit, timers)


class SystemctlUnitFileCheck(BaseCheck):
    """Check the status of a unit file, e.g. enabled, disabled or static.

    Attributes:
        unit: Unit file name
        status: Expected status
    """

    unit: str
    status: str

    def run(self) -> CheckResult:
        observed = [
            status for unit, status in gather(SystemdUnitFiles) if unit == self.unit
        ]
        if self.status in observed:
            return success()
        return report(f"Unit {self.unit} didn't have status", self.status, observed)


def systemctl_loaded(service: str) -> SystemctlServiceCheck:
    """Check that ``service`` is loaded."""
    return SystemctlServiceCheck(service=service, state="loaded")


def systemctl_active(service: str) -> SystemctlServiceCheck:
    """Check that ``service`` is active."""
    return SystemctlServiceCheck(service=service, state="active")


def systemctl_sock_path(path: str) -> SystemctlSocketCheck:
    """Check that a socket listening on ``path`` is registered."""
    return SystemctlSocketCheck(value=path, by="path")


def systemctl_sock_unit(name: str) -> SystemctlSocketCheck:
    """Check that the socket unit ``name`` is registered."""
    return SystemctlSocketCheck(value=name, by="unit")


def systemctl_timer(unit: str) -> SystemctlTimerCheck:
    """Check that the timer ``unit`` is running."""
    return SystemctlTimerCheck(unit=unit)


def systemctl_timer_loaded(unit: str) -> SystemctlTimerCheck:
    """Check that the timer ``unit`` is loaded, even if it is not active."""
    return SystemctlTimerCheck(unit=unit, include_inactive=True)


def systemctl_unit_file_status(unit: str, status: str) -> SystemctlUnitFileCheck:
    """Check that the unit file ``unit`` has ``status``."""
    return SystemctlUnitFileCheck(unit=unit, status=status)
