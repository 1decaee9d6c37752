"""PyInfra facts for package manager queries."""

import shlex
from typing import List

from pyinfra.api import FactBase

from hostcheck.backends import PACKAGE_MANAGERS


class PackageQuery(FactBase):
    """Raw output of a package manager's query for one package.

    Args:
        manager: Package manager program (dpkg, rpm or pacman)
        package: Package name to query

    Returns:
        Output lines of the query, empty when the package is unknown

    Example:
        lines = host.get_fact(PackageQuery, manager="dpkg", package="nginx")
    """

    # A non-zero exit is the manager's way of saying "not installed"; its
    # output (e.g. rpm's "package nginx is not installed") is not an answer
    ignore_errors = True

    @staticmethod
    def default() -> List[str]:
        return []

    def requires_command(self, manager: str, package: str) -> str:
        return manager

    def command(self, manager: str, package: str) -> str:
        """Generate the single-package query for ``manager``.

        Args:
            manager: Package manager program
            package: Package name to query

        Returns:
            Command string to execute
        """
        return f"{manager} {PACKAGE_MANAGERS[manager]} {shlex.quote(package)}"

    def process(self, output: List[str]) -> List[str]:
        return [line for line in output if line.strip()]
