"""Uniform pass/fail results for checks.

Every negative check outcome goes through ``report`` so that failure
messages share one shape regardless of which check produced them.
"""

import logging
from collections.abc import Iterable

from .models import CheckResult, MismatchReport

logger = logging.getLogger(__name__)


def success() -> CheckResult:
    """Return the passing result: exit code 0 and no message."""
    return CheckResult(0, "")


def report(label: str, expected: str, candidates: Iterable[str]) -> CheckResult:
    """Build the failing result for a value that was not among the candidates.

    Args:
        label: Short description of what was not found
        expected: The value the check was looking for
        candidates: Values that were actually observed, in observation order

    Returns:
        CheckResult with exit code 1 and the rendered mismatch message

    Example:
        >>> report("Timer not found", "backup.timer", ["fstrim.timer"]).message
        'Timer not found\\n\\tExpected: backup.timer\\n\\tCandidates: [fstrim.timer]'
    """
    mismatch = MismatchReport(
        label=label, expected=expected, candidates=list(candidates)
    )
    logger.debug(
        f"Mismatch: {label} (expected {expected!r}, {len(mismatch.candidates)} candidates)"
    )
    return CheckResult(1, mismatch.render())
