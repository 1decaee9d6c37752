"""
Hostcheck errors.

A failed check is not an error: it is reported as a ``CheckResult``. These
exceptions cover the cases where a check cannot produce an answer at all.
"""


class HostcheckError(Exception):
    """Base exception for all Hostcheck errors."""
    pass


class EnvironmentUnavailableError(HostcheckError):
    """The host lacks something a check needs in order to run."""
    pass


class BackendNotFoundError(EnvironmentUnavailableError):
    """None of the candidate backend programs could be found."""

    def __init__(self, attempted):
        self.attempted = list(attempted)
        super().__init__(f"No backend found. Attempted: {self.attempted}")


class CommandNotFoundError(EnvironmentUnavailableError):
    """The executable for a command is not installed or not on PATH."""

    def __init__(self, program: str):
        self.program = program
        super().__init__(f"Executable not found: {program}")


class CommandFailedError(EnvironmentUnavailableError):
    """A command could not be started, or exited non-zero where that is fatal."""
    pass


class SourceUnavailableError(EnvironmentUnavailableError):
    """A configuration file could not be read."""
    pass


class ConfigurationError(HostcheckError):
    """Errors in how a check was requested."""
    pass
