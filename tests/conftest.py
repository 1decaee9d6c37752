"""
Pytest configuration and fixtures for Hostcheck tests.
"""

import shlex
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

import hostcheck.settings
from hostcheck.errors import CommandNotFoundError
from hostcheck.process import CommandOutput


class FakeHost:
    """Stand-in for the process runner that serves canned command output.

    Programs answer ``--version`` unless removed with ``remove_program``.
    Any other command must be registered with ``add`` first.
    """

    def __init__(self):
        self.outputs = {}
        self.missing = set()
        self.calls = []

    def add(self, command, stdout="", returncode=0, stderr=""):
        self.outputs[tuple(shlex.split(command))] = CommandOutput(
            returncode, stdout, stderr
        )

    def remove_program(self, *programs):
        self.missing.update(programs)

    def __call__(self, args):
        args = tuple(args)
        self.calls.append(args)
        if args[0] in self.missing:
            raise CommandNotFoundError(args[0])
        if args in self.outputs:
            return self.outputs[args]
        if args[1:] == ("--version",):
            return CommandOutput(0, f"{args[0]} 1.0\n", "")
        raise AssertionError(f"Unexpected command: {' '.join(args)}")


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def fake_host():
    """Route every command Hostcheck runs through a FakeHost."""
    host = FakeHost()
    with patch("hostcheck.backends.run_command", host), patch(
        "hostcheck.gather.run_command", host
    ):
        yield host


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Give each test settings built from its own environment."""
    for var in (
        "HC_LOG_LEVEL",
        "HC_PACKAGE_MANAGERS",
        "HC_PROBE_ARGS",
        "HC_APT_SOURCES_PATH",
        "HC_YUM_CONF_PATH",
        "HC_PACMAN_CONF_PATH",
    ):
        monkeypatch.delenv(var, raising=False)
    hostcheck.settings._settings = None
    yield
    hostcheck.settings._settings = None
