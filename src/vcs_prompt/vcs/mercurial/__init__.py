"""Mercurial backend for vcs-prompt."""

from vcs_prompt.vcs.mercurial.parser import parse_hg_summary
from vcs_prompt.vcs.mercurial.provider import MercurialStatusProvider

__all__ = [
    "MercurialStatusProvider",
    "parse_hg_summary",
]
