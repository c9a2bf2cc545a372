"""Backend detection and provider factory.

Detection and status fetching are a single step: each provider in
``DETECTION_ORDER`` runs its status command and either claims the
directory or declines it.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from vcs_prompt.vcs.base import VCSType

if TYPE_CHECKING:
    from vcs_prompt.models import PromptState
    from vcs_prompt.vcs.base import StatusProvider

logger = logging.getLogger(__name__)

DETECTION_ORDER: tuple[VCSType, ...] = (VCSType.GIT, VCSType.HG, VCSType.SVN)


class VCSFactory:
    """Factory for creating status providers and detecting the owning backend."""

    @staticmethod
    def create_provider(vcs_type: VCSType) -> "StatusProvider":
        """Create a status provider instance.

        Args:
            vcs_type: Backend to create a provider for

        Returns:
            Status provider for the backend

        Raises:
            ValueError: If unsupported VCS type is specified
        """
        if vcs_type == VCSType.GIT:
            from vcs_prompt.vcs.git.provider import GitStatusProvider

            return GitStatusProvider()
        elif vcs_type == VCSType.HG:
            from vcs_prompt.vcs.mercurial.provider import MercurialStatusProvider

            return MercurialStatusProvider()
        elif vcs_type == VCSType.SVN:
            from vcs_prompt.vcs.subversion.provider import SubversionStatusProvider

            return SubversionStatusProvider()
        else:
            msg = f"Unsupported VCS type: {vcs_type}"
            raise ValueError(msg)

    @staticmethod
    def detect_state(
        path: Path | None = None,
        order: tuple[VCSType, ...] = DETECTION_ORDER,
    ) -> "PromptState":
        """Find the backend owning a directory and fetch its status.

        Backends are tried in order; the first one that claims the
        directory wins.

        Args:
            path: Directory to inspect (default: current directory)
            order: Backends to try, highest priority first

        Returns:
            The owning backend's prompt state, or NotInTree
        """
        from vcs_prompt.models import NotInTree

        if path is None:
            try:
                path = Path.cwd()
            except OSError as e:
                logger.debug(f"Current directory is unavailable: {e}")
                return NotInTree()

        directory = Path(path)
        for vcs_type in order:
            state = VCSFactory.create_provider(vcs_type).fetch_state(directory)
            if state is not None:
                logger.debug(f"{vcs_type.display_name} owns {directory}: {state.kind}")
                return state

        logger.debug(f"No backend owns {directory}")
        return NotInTree()
