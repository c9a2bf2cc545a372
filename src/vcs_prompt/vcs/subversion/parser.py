"""Parser for ``svn status`` output.

Each entry is seven status columns, a space and the path::

    M       trunk/setup.py
    ?       notes.txt
    A  +    renamed.py
            > moved from original.py

Only the first column is classified. Lines with a blank first column carry
property changes or move annotations and are not counted. Conflicted
entries are followed by a trailer that is skipped::

    C       conflict.txt
    Summary of conflicts:
      Text conflicts: 1
"""

import logging
import re

from vcs_prompt.models import StatusRecord
from vcs_prompt.vcs.base import VCSType
from vcs_prompt.vcs.exceptions import StatusParseError, UpgradeRequiredError

logger = logging.getLogger(__name__)

UNEXPECTED_OUTPUT = "unexpected svn status output"
UPGRADE_NEEDED = "'svn upgrade' needed"

UNTRACKED = "?"

_ENTRY_RE = re.compile(r"^[ ADMRCXI?!~][ MC][ L][ +][ SX][ KOTB][ C] .+$")
_CHANGELIST_RE = re.compile(r"^--- Changelist '.*':$")
# Trailer printed after conflicted entries, and tree-conflict descriptions.
_CONFLICT_SUMMARY_RE = re.compile(r"^Summary of conflicts:$")
_CONFLICT_TALLY_RE = re.compile(r"^  (?:Text conflicts|Property conflicts|Tree conflicts|Skipped paths): \d+.*$")
_CONFLICT_DETAIL_RE = re.compile(r"^ +> .+$")
# E155036: working copy too old for this client. Only svn's own
# diagnostic lines count, never entry paths.
_UPGRADE_RE = re.compile(r"^svn: (?:E155036:|.*'svn upgrade')", re.MULTILINE)

_SKIPPED_LINES = (_CHANGELIST_RE, _CONFLICT_SUMMARY_RE, _CONFLICT_TALLY_RE, _CONFLICT_DETAIL_RE)


def needs_upgrade(output: str) -> bool:
    """Check whether svn refused to read an old working copy format.

    Args:
        output: Raw ``svn status`` output with stderr merged

    Returns:
        True if the working copy must be upgraded first
    """
    return _UPGRADE_RE.search(output) is not None


def parse_svn_status(output: str) -> StatusRecord:
    """Classify ``svn status`` output into a status record.

    Renames are reported as an add and a delete and so count twice.

    Args:
        output: Raw ``svn status`` output with stderr merged

    Returns:
        Normalized status record with only untracked and changed counts

    Raises:
        UpgradeRequiredError: If the working copy metadata needs an upgrade
        StatusParseError: If any line has an unrecognized shape
    """
    if needs_upgrade(output):
        raise UpgradeRequiredError(VCSType.SVN, UPGRADE_NEEDED)

    untracked = changed = 0
    for line in output.splitlines():
        if not line.strip() or any(pattern.match(line) for pattern in _SKIPPED_LINES):
            continue
        if not _ENTRY_RE.match(line):
            logger.debug(f"Unrecognized svn status line: {line!r}")
            raise StatusParseError(VCSType.SVN, UNEXPECTED_OUTPUT)

        code = line[0]
        if code == UNTRACKED:
            untracked += 1
        elif code != " ":
            changed += 1

    return StatusRecord(
        vcs_type=VCSType.SVN,
        untracked_count=untracked,
        changed_count=changed,
    )
