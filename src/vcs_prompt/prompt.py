"""Prompt entry points.

``render_prompt`` is what the shell calls on every render. Nothing is kept
between calls apart from the session configuration.
"""

from pathlib import Path

from vcs_prompt.config import PromptConfig, load_config
from vcs_prompt.formatter import RecordFormatter
from vcs_prompt.models import PromptState
from vcs_prompt.vcs.factory import VCSFactory


def get_prompt_state(path: str | Path | None = None) -> PromptState:
    """Detect the owning backend and fetch its status.

    Args:
        path: Directory to inspect (default: current directory)

    Returns:
        Prompt state for the directory
    """
    return VCSFactory.detect_state(Path(path) if path is not None else None)


def render_prompt(path: str | Path | None = None, config: PromptConfig | None = None) -> str:
    """Render the version control indicator for a directory.

    Called with no arguments it inspects the current directory using the
    session configuration.

    Args:
        path: Directory to inspect (default: current directory)
        config: Configuration to format with (default: session configuration)

    Returns:
        Decorated indicator, or an empty string outside any working copy
    """
    formatter = RecordFormatter(config or load_config())
    return formatter.format(get_prompt_state(path))
