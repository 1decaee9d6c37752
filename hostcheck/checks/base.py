"""Base check class for Hostcheck."""

import logging
from typing import Optional

from pydantic import BaseModel

from hostcheck.models import CheckResult

logger = logging.getLogger(__name__)


class BaseCheck(BaseModel):
    """Base class for all host checks.

    A check binds its target values when constructed and does no I/O until
    it is called. Every call queries the host again; nothing is cached
    between calls.

    Attributes:
        description: Optional human-readable description of what this check verifies

    Example:
        >>> from hostcheck.reporting import success
        >>> class AlwaysPasses(BaseCheck):
        ...     def run(self) -> CheckResult:
        ...         return success()
        >>> AlwaysPasses()()
        CheckResult(exit_code=0, message='')
    """

    description: Optional[str] = None

    def run(self) -> CheckResult:
        """Query the host and compare against the target.

        Returns:
            CheckResult(0, "") on success, CheckResult(1, message) otherwise
        """
        raise NotImplementedError("Subclasses must implement run()")

    def __call__(self) -> CheckResult:
        result = self.run()
        outcome = "passed" if result.passed else "failed"
        logger.debug(f"{type(self).__name__} {outcome}")
        return result
