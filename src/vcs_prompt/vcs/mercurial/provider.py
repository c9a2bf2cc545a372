"""Mercurial status provider."""

import logging
from pathlib import Path

import hglib  # type: ignore[import-untyped]

from vcs_prompt.models import PromptState, Status
from vcs_prompt.vcs.base import StatusProvider, VCSType
from vcs_prompt.vcs.exceptions import StatusParseError
from vcs_prompt.vcs.mercurial.parser import parse_hg_summary

logger = logging.getLogger(__name__)


def find_repository_root(path: Path) -> Path | None:
    """Search a directory and its parents for a ``.hg`` directory.

    Args:
        path: Directory to start from

    Returns:
        Repository root, or None if no parent is a Mercurial repository
    """
    current = Path(path).resolve()
    while True:
        if (current / ".hg").is_dir():
            return current
        if current == current.parent:
            return None
        current = current.parent


class MercurialStatusProvider(StatusProvider):
    """Runs ``hg summary`` through a single command server.

    Ownership is decided from the ``.hg`` marker so that no process is
    spawned outside Mercurial repositories.
    """

    vcs_type = VCSType.HG

    def fetch_state(self, path: Path) -> PromptState | None:
        """Fetch Mercurial status for a directory.

        Args:
            path: Directory to inspect

        Returns:
            Prompt state, or None if the directory is not in a Mercurial repository
        """
        try:
            root = find_repository_root(path)
        except OSError as e:
            logger.debug(f"Cannot search {path} for a Mercurial repository: {e}")
            return None
        if root is None:
            return None

        try:
            client = hglib.open(str(root))
        except hglib.error.ServerError as e:
            logger.debug(f"hg command server failed to start: {e}")
            return self._parse_error("hg summary failed")
        except OSError as e:
            logger.debug(f"hg executable not available: {e}")
            return None

        try:
            output: bytes = client.rawcommand([b"summary"])
        except hglib.error.CommandError as e:
            logger.debug(f"hg summary exited with {e.ret}")
            return self._parse_error(f"hg summary failed with exit code {e.ret}")
        finally:
            client.close()

        try:
            record = parse_hg_summary(output.decode("utf-8", errors="replace"))
        except StatusParseError as e:
            return self._parse_error(e.message)

        return Status(record=record)
