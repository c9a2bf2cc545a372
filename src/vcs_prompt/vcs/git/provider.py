"""Git status provider."""

import logging
from pathlib import Path

import git

from vcs_prompt.models import PromptState, Status
from vcs_prompt.vcs.base import StatusProvider, VCSType
from vcs_prompt.vcs.exceptions import StatusParseError
from vcs_prompt.vcs.git.parser import parse_git_status

logger = logging.getLogger(__name__)

# Optional locks would let a prompt render write to .git/index.
STATUS_COMMAND = ["git", "--no-optional-locks", "status", "--porcelain", "--branch"]
NOT_A_REPOSITORY_STATUS = 128
NOT_A_REPOSITORY_MARKER = "not a git repository"


class GitStatusProvider(StatusProvider):
    """Runs ``git status`` once and uses its exit status for detection."""

    vcs_type = VCSType.GIT

    def fetch_state(self, path: Path) -> PromptState | None:
        """Fetch Git status for a directory.

        Args:
            path: Directory to inspect

        Returns:
            Prompt state, or None if the directory is not in a Git work tree
        """
        try:
            status, stdout, stderr = git.Git(str(path)).execute(
                STATUS_COMMAND,
                with_extended_output=True,
                with_exceptions=False,
                strip_newline_in_stdout=False,
            )
        except git.GitCommandNotFound:
            logger.debug("git executable not found")
            return None
        except OSError as e:
            logger.debug(f"git status could not run in {path}: {e}")
            return None

        logger.debug(f"git status exited with {status}")
        if status == NOT_A_REPOSITORY_STATUS and NOT_A_REPOSITORY_MARKER in stderr.lower():
            return None
        if status != 0:
            return self._parse_error(f"git status failed with exit code {status}")

        try:
            record = parse_git_status(stdout)
        except StatusParseError as e:
            return self._parse_error(e.message)

        return Status(record=record)
