"""Tests for reading configuration files."""

import pytest

from hostcheck.errors import EnvironmentUnavailableError, SourceUnavailableError
from hostcheck.sources import file_to_lines, file_to_string


def test_file_to_string(temp_dir):
    """Test the full file text is returned."""
    path = temp_dir / "pacman.conf"
    path.write_text("[options]\nIgnorePkg = foo\n")
    assert file_to_string(path) == "[options]\nIgnorePkg = foo\n"


def test_file_to_lines_tokenizes(temp_dir):
    """Test each line is split on whitespace, blank lines included."""
    path = temp_dir / "sources.list"
    path.write_text("deb http://archive.ubuntu.com/ubuntu focal main\n\n# comment line\n")
    assert file_to_lines(str(path)) == [
        ["deb", "http://archive.ubuntu.com/ubuntu", "focal", "main"],
        [],
        ["#", "comment", "line"],
    ]


def test_missing_file_raises(temp_dir):
    """Test an unreadable path is an environment error, not empty content."""
    with pytest.raises(SourceUnavailableError) as exc_info:
        file_to_string(temp_dir / "missing.conf")
    assert isinstance(exc_info.value, EnvironmentUnavailableError)
    assert "missing.conf" in str(exc_info.value)
