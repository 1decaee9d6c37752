"""PyInfra facts for systemd listings.

Every fact reads one ``systemctl`` listing once and extracts all the columns
it needs from that single snapshot, so values in a row always belong to the
same unit.
"""

from typing import Dict, List, Tuple

from pyinfra.api import FactBase

from hostcheck.tabular import columns, split_at_suffix, table_body

SYSTEMCTL = "systemctl"

# systemctl marks failed units with a bullet in the leading gutter
STATUS_MARKERS = ("●", "*")


def _strip_marker(line: str) -> str:
    stripped = line.lstrip()
    for marker in STATUS_MARKERS:
        if stripped.startswith(marker + " "):
            return stripped[len(marker):]
    return line


class SystemdUnits(FactBase):
    """Units known to systemd with their load and active states.

    Returns:
        List of (unit, load, active) tuples

    Example:
        units = host.get_fact(SystemdUnits)
        # [("nginx.service", "loaded", "active"), ...]
    """

    def requires_command(self) -> str:
        return SYSTEMCTL

    def command(self) -> str:
        return f"{SYSTEMCTL} --no-pager list-units"

    def process(self, output: List[str]) -> List[Tuple[str, ...]]:
        body = [_strip_marker(line) for line in table_body(output, stop_at_blank=True)]
        return columns((0, 1, 2), body)


class SystemdSockets(FactBase):
    """Sockets registered with systemd.

    Returns:
        Dict with "path" (LISTEN column) and "unit" (UNIT column) value lists

    Example:
        sockets = host.get_fact(SystemdSockets)
        "/run/dbus/system_bus_socket" in sockets["path"]
    """

    def requires_command(self) -> str:
        return SYSTEMCTL

    def command(self) -> str:
        return f"{SYSTEMCTL} --no-pager list-sockets"

    def process(self, output: List[str]) -> Dict[str, List[str]]:
        sockets: Dict[str, List[str]] = {"path": [], "unit": []}
        for line in table_body(output, stop_at_blank=True):
            # LISTEN can span several fields, e.g. "kobject-uevent 1"
            split = split_at_suffix(line, ".socket")
            if split is None:
                continue
            listen, unit = split
            if listen:
                sockets["path"].append(" ".join(listen))
            sockets["unit"].append(unit)
        return sockets


class SystemdTimers(FactBase):
    """Timer units listed by systemd.

    Args:
        include_inactive: Also list loaded timers that are not active

    Returns:
        Timer unit names found in the listing

    Example:
        timers = host.get_fact(SystemdTimers, include_inactive=True)
    """

    def requires_command(self, include_inactive: bool = False) -> str:
        return SYSTEMCTL

    def command(self, include_inactive: bool = False) -> str:
        cmd = f"{SYSTEMCTL} --no-pager list-timers"
        if include_inactive:
            cmd += " --all"
        return cmd

    def process(self, output: List[str]) -> List[str]:
        timers = []
        for line in table_body(output, stop_at_blank=True):
            split = split_at_suffix(line, ".timer")
            if split is not None:
                timers.append(split[1])
        return timers


class SystemdUnitFiles(FactBase):
    """Installed unit files and their enablement status.

    The listing ends with a blank line and a "N unit files listed." summary,
    both of which are dropped.

    Returns:
        List of (unit_file, status) tuples

    Example:
        files = host.get_fact(SystemdUnitFiles)
        # [("sshd.service", "enabled"), ("getty@.service", "static"), ...]
    """

    def requires_command(self) -> str:
        return SYSTEMCTL

    def command(self) -> str:
        return f"{SYSTEMCTL} --no-pager list-unit-files"

    def process(self, output: List[str]) -> List[Tuple[str, ...]]:
        return columns((0, 1), table_body(output, footer=2))
