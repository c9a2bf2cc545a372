"""Colorized version-control status for interactive shell prompts."""

from vcs_prompt.prompt import get_prompt_state, render_prompt

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "get_prompt_state",
    "render_prompt",
]
