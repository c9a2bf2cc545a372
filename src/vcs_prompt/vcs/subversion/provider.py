"""Subversion status provider."""

import logging
import os
import re
import subprocess
from pathlib import Path

from vcs_prompt.models import PromptState, Status
from vcs_prompt.vcs.base import StatusProvider, VCSType
from vcs_prompt.vcs.exceptions import SpecialConditionError, StatusParseError
from vcs_prompt.vcs.subversion.parser import parse_svn_status

logger = logging.getLogger(__name__)

# Without -u, svn status never contacts the repository.
STATUS_COMMAND = ["svn", "status", "--non-interactive", "--ignore-externals"]
# W155007/E155007: path is not a working copy.
NOT_A_WORKING_COPY_RE = re.compile(r"^svn: (?:warning: )?[WE]155007:", re.MULTILINE)


class SubversionStatusProvider(StatusProvider):
    """Runs ``svn status`` once and uses its diagnostics for detection."""

    vcs_type = VCSType.SVN

    def fetch_state(self, path: Path) -> PromptState | None:
        """Fetch Subversion status for a directory.

        Args:
            path: Directory to inspect

        Returns:
            Prompt state, or None if the directory is not a working copy
        """
        try:
            result = subprocess.run(
                STATUS_COMMAND,
                cwd=path,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                env={**os.environ, "LC_MESSAGES": "C"},
                check=False,
            )
        except OSError as e:
            logger.debug(f"svn status could not run in {path}: {e}")
            return None

        logger.debug(f"svn status exited with {result.returncode}")
        output = result.stdout or ""
        if NOT_A_WORKING_COPY_RE.search(output):
            return None

        try:
            record = parse_svn_status(output)
        except SpecialConditionError as e:
            return self._parse_error(e.message, special=True)
        except StatusParseError as e:
            return self._parse_error(e.message)

        if result.returncode != 0:
            return self._parse_error(f"svn status failed with exit code {result.returncode}")

        return Status(record=record)
