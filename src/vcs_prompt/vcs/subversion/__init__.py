"""Subversion backend for vcs-prompt."""

from vcs_prompt.vcs.subversion.parser import parse_svn_status
from vcs_prompt.vcs.subversion.provider import SubversionStatusProvider

__all__ = [
    "SubversionStatusProvider",
    "parse_svn_status",
]
