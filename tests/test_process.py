"""Tests for the process runner."""

import subprocess
from unittest.mock import patch

import pytest

from hostcheck.errors import CommandFailedError, CommandNotFoundError
from hostcheck.process import CommandOutput, run_command


@patch("hostcheck.process.subprocess.run")
def test_run_command_captures_output(mock_run):
    """Test stdout, stderr and exit status are returned."""
    mock_run.return_value = subprocess.CompletedProcess(
        args=["dpkg", "-s", "nginx"], returncode=0, stdout="Package: nginx\n", stderr=""
    )
    result = run_command(["dpkg", "-s", "nginx"])
    assert result == CommandOutput(0, "Package: nginx\n", "")
    assert result.ok is True
    mock_run.assert_called_once_with(
        ["dpkg", "-s", "nginx"], capture_output=True, text=True
    )


@patch("hostcheck.process.subprocess.run")
def test_run_command_returns_non_zero_exit(mock_run):
    """Test a failing command is reported, not raised."""
    mock_run.return_value = subprocess.CompletedProcess(
        args=["rpm", "-q", "x"], returncode=1, stdout="package x is not installed\n", stderr=""
    )
    result = run_command(["rpm", "-q", "x"])
    assert result.returncode == 1
    assert result.ok is False


@patch("hostcheck.process.subprocess.run", side_effect=FileNotFoundError(2, "No such file"))
def test_run_command_missing_executable(mock_run):
    """Test a missing executable is distinguished from a failing one."""
    with pytest.raises(CommandNotFoundError) as exc_info:
        run_command(["pacman", "--version"])
    assert exc_info.value.program == "pacman"


@patch("hostcheck.process.subprocess.run", side_effect=PermissionError(13, "Permission denied"))
def test_run_command_unstartable_executable(mock_run):
    """Test other start-up failures raise CommandFailedError."""
    with pytest.raises(CommandFailedError, match="pacman"):
        run_command(["pacman", "--version"])
