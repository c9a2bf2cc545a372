"""Backend types and the common status provider interface.

Each backend provider combines detection with fetching status: a single
call to ``fetch_state`` either claims the directory and returns a prompt
state, or returns ``None`` so the next backend can be tried.
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vcs_prompt.models import PromptState


class VCSType(str, Enum):
    """Supported version control systems."""

    GIT = "git"
    HG = "hg"
    SVN = "svn"

    @property
    def display_name(self) -> str:
        """Get display name for the VCS type.

        Returns:
            Human-readable name
        """
        return {
            VCSType.GIT: "Git",
            VCSType.HG: "Mercurial",
            VCSType.SVN: "Subversion",
        }[self]

    @property
    def cli_command(self) -> str:
        """Get the CLI command name for this backend.

        Returns:
            CLI command name
        """
        return self.value


class StatusProvider(ABC):
    """Abstract base class for backend status providers."""

    vcs_type: VCSType

    @abstractmethod
    def fetch_state(self, path: Path) -> "PromptState | None":
        """Run the backend's status command for a directory.

        Args:
            path: Directory to inspect

        Returns:
            Prompt state if the backend owns the directory, None otherwise
        """

    def _parse_error(self, message: str, special: bool = False) -> "PromptState":
        """Build a ParseError state scoped to this backend.

        Args:
            message: Literal message to render
            special: True for an actionable special condition

        Returns:
            ParseError state
        """
        from vcs_prompt.models import ParseError

        return ParseError(vcs_type=self.vcs_type, message=message, special=special)
