"""Package and repository checks for dpkg, rpm/yum and pacman hosts."""

import logging
import re
from urllib.parse import urlsplit

from pydantic import Field

from hostcheck.backends import package_manager
from hostcheck.gather import gather
from hostcheck.models import CheckResult, YumRepo
from hostcheck.pyinfra_facts import PackageQuery
from hostcheck.records import assemble_yum_repos, repo_property
from hostcheck.reporting import report, success
from hostcheck.settings import get_settings
from hostcheck.sources import file_to_lines, file_to_string
from hostcheck.tabular import COMMENT_PATTERN, strip_comments

from .base import BaseCheck

logger = logging.getLogger(__name__)

# First uncommented "IgnorePkg = a b c" line in pacman.conf
IGNORE_PKG_PATTERN = re.compile(r"^[ \t]*IgnorePkg[ \t]*=[ \t]*(.*)$", re.MULTILINE)


def get_apt_sources(path: str) -> list[str]:
    """Return the URL field of every uncommented apt source line.

    An options group between the type and the URL, such as
    ``deb [arch=amd64 signed-by=/etc/apt/keyrings/x.gpg] http://...``, is
    skipped.
    """
    urls = []
    for fields in file_to_lines(path):
        if not fields or COMMENT_PATTERN.match(fields[0]):
            continue
        position = 1
        if position < len(fields) and fields[position].startswith("["):
            while position < len(fields) and not fields[position].endswith("]"):
                position += 1
            position += 1
        if position < len(fields):
            urls.append(fields[position])
    return urls


def get_ppas(path: str) -> list[str]:
    """Return the apt source URLs that point at a PPA."""
    return [url for url in get_apt_sources(path) if "ppa" in url]


def valid_url(url: str) -> bool:
    try:
        urlsplit(url)
    except ValueError:
        return False
    return True


def get_yum_repos(path: str) -> list[YumRepo]:
    """Read repo records from the ``name=`` and ``baseurl=`` lines of a yum config."""
    full_names = []
    urls = []
    for line in strip_comments(file_to_string(path)):
        if line.startswith("name="):
            full_names.append(line[len("name="):])
        elif line.startswith("baseurl="):
            urls.append(line[len("baseurl="):])
    repos = assemble_yum_repos(full_names, urls)
    logger.debug(f"Found {len(repos)} yum repos in {path}")
    return repos


def get_ignored_packages(path: str) -> list[str]:
    """Return the packages listed on the first ``IgnorePkg`` line of pacman.conf."""
    match = IGNORE_PKG_PATTERN.search(file_to_string(path))
    if match is None:
        return []
    return match.group(1).split()


class PackageInstalledCheck(BaseCheck):
    """Check that a package is installed, using whichever package manager exists.

    Attributes:
        package: Package name to look for
    """

    package: str

    def run(self) -> CheckResult:
        manager = package_manager()
        output = gather(PackageQuery, manager=manager, package=self.package)
        if any(self.package in line for line in output):
            return success()
        return report(
            f"Package was not found (package manager: {manager})",
            self.package,
            output,
        )


class PPACheck(BaseCheck):
    """Check that a PPA is enabled in apt's sources list.

    Candidates are checked in file order. A candidate that is not a
    parseable URL stops the check with a failure, even if a later
    candidate would have matched.

    Attributes:
        name: Text the PPA URL must contain (e.g. "deadsnakes/ppa")
        path: apt sources file to read
    """

    name: str
    path: str = Field(default_factory=lambda: get_settings().apt_sources_path)

    def run(self) -> CheckResult:
        ppas = get_ppas(self.path)
        for ppa in ppas:
            if not valid_url(ppa):
                return report(f"PPA URL invalid: {ppa}", self.name, ppas)
            if self.name in ppa:
                return success()
        return report("PPA not found", self.name, ppas)


class YumRepoCheck(BaseCheck):
    """Check that a yum repo with the given property value is configured.

    Attributes:
        value: Expected property value
        prop: Repo property to compare: "name", "url" or "fullname"
        path: yum configuration file to read
    """

    value: str
    prop: str = "name"
    path: str = Field(default_factory=lambda: get_settings().yum_conf_path)

    def run(self) -> CheckResult:
        values = repo_property(get_yum_repos(self.path), self.prop)
        if self.value in values:
            return success()
        return report(f"Yum repo with given {self.prop} not found", self.value, values)


class PacmanIgnoreCheck(BaseCheck):
    """Check that a package is listed in pacman's IgnorePkg setting.

    Attributes:
        package: Package name expected in IgnorePkg
        path: pacman configuration file to read
    """

    package: str
    path: str = Field(default_factory=lambda: get_settings().pacman_conf_path)

    def run(self) -> CheckResult:
        packages = get_ignored_packages(self.path)
        if self.package in packages:
            return success()
        return report("Couldn't find package in IgnorePkg", self.package, packages)


def installed(package: str) -> PackageInstalledCheck:
    """Check that ``package`` is installed."""
    return PackageInstalledCheck(package=package)


def ppa(name: str) -> PPACheck:
    """Check that a PPA matching ``name`` is enabled."""
    return PPACheck(name=name)


def yum_repo_exists(name: str) -> YumRepoCheck:
    """Check that a yum repo with short name ``name`` is configured."""
    return YumRepoCheck(value=name, prop="name")


def yum_repo_url(url: str) -> YumRepoCheck:
    """Check that a yum repo with base URL ``url`` is configured."""
    return YumRepoCheck(value=url, prop="url")


def yum_repo_fullname(full_name: str) -> YumRepoCheck:
    """Check that a yum repo with full name ``full_name`` is configured."""
    return YumRepoCheck(value=full_name, prop="fullname")


def pacman_ignore(package: str) -> PacmanIgnoreCheck:
    """Check that ``package`` is in pacman's IgnorePkg list."""
    return PacmanIgnoreCheck(package=package)
