"""Tests for evaluating facts on the local host."""

import pytest

from hostcheck.errors import BackendNotFoundError, CommandFailedError
from hostcheck.gather import gather
from hostcheck.pyinfra_facts import PackageQuery, SystemdTimers, SystemdUnits

from .sample_output import LIST_TIMERS, LIST_UNITS, RPM_NOT_INSTALLED


def test_gather_probes_then_runs(fake_host):
    """Test the required program is probed before the query runs."""
    fake_host.add("systemctl --no-pager list-units", LIST_UNITS)
    rows = gather(SystemdUnits)
    assert ("nginx.service", "loaded", "active") in rows
    assert fake_host.calls == [
        ("systemctl", "--version"),
        ("systemctl", "--no-pager", "list-units"),
    ]


def test_gather_runs_command_once(fake_host):
    """Test every column comes from a single invocation."""
    fake_host.add("systemctl --no-pager list-units", LIST_UNITS)
    gather(SystemdUnits)
    listings = [call for call in fake_host.calls if "list-units" in call]
    assert len(listings) == 1


def test_gather_passes_arguments(fake_host):
    """Test fact arguments reach the command."""
    fake_host.add("systemctl --no-pager list-timers --all", LIST_TIMERS)
    assert "logrotate.timer" in gather(SystemdTimers, include_inactive=True)


def test_gather_missing_program(fake_host):
    """Test a missing tool is an environment error, not an empty answer."""
    fake_host.remove_program("systemctl")
    with pytest.raises(BackendNotFoundError):
        gather(SystemdUnits)


def test_gather_failed_command(fake_host):
    """Test a failing listing raises with the command's stderr."""
    fake_host.add(
        "systemctl --no-pager list-timers",
        returncode=1,
        stderr="System has not been booted with systemd as init system (PID 1).",
    )
    with pytest.raises(CommandFailedError, match="booted with systemd"):
        gather(SystemdTimers)


def test_gather_ignores_errors_when_fact_allows(fake_host):
    """Test a failed command yields the fact default when errors are ignored."""
    fake_host.add("rpm -q nginx", RPM_NOT_INSTALLED, returncode=1)
    assert gather(PackageQuery, manager="rpm", package="nginx") == []
