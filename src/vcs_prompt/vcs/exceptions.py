"""VCS exceptions for vcs-prompt.

Parsers raise these; providers turn them into ``ParseError`` prompt states
so the prompt never aborts.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vcs_prompt.vcs.base import VCSType


class VCSError(Exception):
    """Base exception for all VCS-related errors."""


class StatusParseError(VCSError):
    """Raised when a backend's status output cannot be classified."""

    def __init__(self, vcs_type: "VCSType", message: str) -> None:
        super().__init__(message)
        self.vcs_type = vcs_type
        self.message = message


class SpecialConditionError(StatusParseError):
    """Raised for a specific, actionable working copy condition."""


class UpgradeRequiredError(SpecialConditionError):
    """Raised when the working copy metadata needs an explicit upgrade."""
