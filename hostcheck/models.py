"""
Centralized models for Hostcheck.

This module contains the data passed between the check pipeline stages:
- CheckResult returned by every check invocation
- YumRepo records assembled from yum configuration
- MismatchReport describing why a check failed
"""

from typing import List, NamedTuple

from pydantic import BaseModel, Field


# =============================================================================
# Check Outcome
# =============================================================================

class CheckResult(NamedTuple):
    """Outcome of a single check: exit code 0 or 1 plus a diagnostic message."""
    exit_code: int
    message: str

    @property
    def passed(self) -> bool:
        return self.exit_code == 0


# =============================================================================
# Records
# =============================================================================

class YumRepo(BaseModel):
    """A repository entry reconstructed from yum configuration."""
    name: str
    full_name: str
    url: str


# =============================================================================
# Failure Reporting
# =============================================================================

class MismatchReport(BaseModel):
    """A target value that was not found among the observed candidates."""
    label: str
    expected: str
    candidates: List[str] = Field(default_factory=list)

    def render(self) -> str:
        """Render the report as a stable, line-oriented message."""
        candidates = ", ".join(self.candidates)
        return (
            f"{self.label}"
            f"\n\tExpected: {self.expected}"
            f"\n\tCandidates: [{candidates}]"
        )
