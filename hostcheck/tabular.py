"""Whitespace-delimited table parsing for command output and config files.

Output formats of the tools we read drift between versions, so these helpers
are lenient: a line too short for a requested column contributes nothing and
is never an error.
"""

import re
from collections.abc import Iterable, Sequence

COMMENT_PATTERN = re.compile(r"^\s*#")


def _lines(text: str | Iterable[str]) -> Iterable[str]:
    if isinstance(text, str):
        return text.splitlines()
    return text


def column(index: int, text: str | Iterable[str]) -> list[str]:
    """Return field ``index`` of every line that has at least ``index + 1`` fields.

    Args:
        index: Zero-based column position
        text: Raw text, or an iterable of lines, without a header line

    Returns:
        The column values in line order

    Example:
        >>> column(1, "nginx.service loaded\\nsshd.service loaded")
        ['loaded', 'loaded']
        >>> column(5, "a b")
        []
    """
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")

    values = []
    for line in _lines(text):
        fields = line.split()
        if len(fields) > index:
            values.append(fields[index])
    return values


def columns(indices: Sequence[int], text: str | Iterable[str]) -> list[tuple[str, ...]]:
    """Return several columns from one snapshot of output, aligned by line.

    A line is kept only if it has every requested field, so values in a
    returned row always come from the same line.

    Example:
        >>> columns((0, 2), "a b c\\nd e\\nf g h")
        [('a', 'c'), ('f', 'h')]
    """
    if not indices:
        return []
    if min(indices) < 0:
        raise ValueError(f"Column indices must be non-negative, got {list(indices)}")

    needed = max(indices) + 1
    rows = []
    for line in _lines(text):
        fields = line.split()
        if len(fields) >= needed:
            rows.append(tuple(fields[i] for i in indices))
    return rows


def table_body(
    text: str | Iterable[str],
    header: int = 1,
    footer: int = 0,
    stop_at_blank: bool = False,
) -> list[str]:
    """Drop ``header`` leading and ``footer`` trailing lines from tabular output.

    With ``stop_at_blank`` the table ends at the first blank line after the
    header, which drops legends and summaries of any length.
    """
    lines = list(_lines(text))
    if stop_at_blank:
        for position in range(header, len(lines)):
            if not lines[position].strip():
                lines = lines[:position]
                break
    end = max(header, len(lines) - footer)
    return lines[header:end]


def strip_comments(text: str | Iterable[str]) -> list[str]:
    """Return the lines that are not ``#`` comments."""
    return [line for line in _lines(text) if not COMMENT_PATTERN.match(line)]


def split_at_suffix(line: str, suffix: str) -> tuple[list[str], str] | None:
    """Split a row at its last field ending in ``suffix``.

    Returns the fields before that field and the field itself, or None if
    no field ends in ``suffix``. Taking the last match keeps a path such as
    ``/run/snapd.socket`` in the fields before the unit.

    Example:
        >>> split_at_suffix("kobject-uevent 1  systemd-udevd-kernel.socket  systemd-udevd.service", ".socket")
        (['kobject-uevent', '1'], 'systemd-udevd-kernel.socket')
    """
    fields = line.split()
    for position in range(len(fields) - 1, -1, -1):
        if fields[position].endswith(suffix):
            return fields[:position], fields[position]
    return None
