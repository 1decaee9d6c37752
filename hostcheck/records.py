"""Reassemble structured records from parallel columns of values."""

import logging
from collections.abc import Iterable, Sequence

from .errors import ConfigurationError
from .models import YumRepo

logger = logging.getLogger(__name__)

# Lookup names accepted for yum repo properties
REPO_PROPERTIES = {
    "name": "name",
    "url": "url",
    "fullname": "full_name",
    "full_name": "full_name",
}


def assemble(*value_columns: Sequence[str]) -> list[tuple[str, ...]]:
    """Zip columns into rows, stopping at the shortest column.

    Extra values in longer columns are dropped.
    """
    rows = list(zip(*value_columns))
    longest = max((len(col) for col in value_columns), default=0)
    if len(rows) < longest:
        logger.debug(f"Dropped {longest - len(rows)} unpaired values while assembling records")
    return rows


def short_name(full_name: str) -> str:
    """Return the last whitespace-delimited token of a repo's full name."""
    tokens = full_name.split()
    return tokens[-1] if tokens else ""


def assemble_yum_repos(full_names: Sequence[str], urls: Sequence[str]) -> list[YumRepo]:
    """Pair repo full names with base URLs by position.

    Args:
        full_names: Values of ``name=`` lines, in file order
        urls: Values of ``baseurl=`` lines, in file order

    Returns:
        One YumRepo per pair; ``len(result) == min(len(full_names), len(urls))``

    Example:
        >>> assemble_yum_repos(["Fedora 38 - x86_64 (updates)"], ["https://example.com/updates"])
        [YumRepo(name='(updates)', full_name='Fedora 38 - x86_64 (updates)', url='https://example.com/updates')]
    """
    return [
        YumRepo(name=short_name(full_name), full_name=full_name, url=url)
        for full_name, url in assemble(full_names, urls)
    ]


def repo_property(repos: Iterable[YumRepo], prop: str) -> list[str]:
    """Return the given property of every repo.

    Raises:
        ConfigurationError: If ``prop`` is not a yum repo property
    """
    field = REPO_PROPERTIES.get(prop.lower())
    if field is None:
        raise ConfigurationError(
            f"Yum repos don't have the requested property: {prop} "
            f"(choose from {sorted(REPO_PROPERTIES)})"
        )
    return [getattr(repo, field) for repo in repos]
