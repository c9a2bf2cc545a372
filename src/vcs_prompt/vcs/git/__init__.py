"""Git backend for vcs-prompt."""

from vcs_prompt.vcs.git.parser import parse_git_status
from vcs_prompt.vcs.git.provider import GitStatusProvider

__all__ = [
    "GitStatusProvider",
    "parse_git_status",
]
