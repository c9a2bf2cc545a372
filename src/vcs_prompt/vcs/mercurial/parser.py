"""Parser for ``hg summary`` output.

Only two lines matter::

    branch: default
    commit: 1 modified, 2 added, 1 unknown (new branch head)

A working copy without pending changes reports ``commit: (clean)``, and one
with only unknown files reports e.g. ``commit: 3 unknown (clean)``.
"""

import logging
import re

from vcs_prompt.models import StatusRecord
from vcs_prompt.vcs.base import VCSType
from vcs_prompt.vcs.exceptions import StatusParseError

logger = logging.getLogger(__name__)

UNEXPECTED_OUTPUT = "unexpected hg summary output"

CHANGED_KINDS = frozenset({"modified", "added", "removed", "renamed", "copied", "unresolved", "subrepos"})
# Mercurial does not record a missing file as removed until told to, so a
# deleted path is shown like an unknown one.
UNTRACKED_KINDS = frozenset({"unknown", "deleted"})

_BRANCH_RE = re.compile(r"^branch: (?P<branch>.+)$")
_COMMIT_RE = re.compile(
    r"^commit: (?P<counts>\d+ [a-z]+(?:, \d+ [a-z]+)*)?"
    r"(?P<notes>(?: ?\([^)]*\))*)$"
)


def _parse_commit_line(payload: str) -> tuple[int, int]:
    """Sum the enumerated change kinds of a ``commit:`` line.

    Args:
        payload: The full ``commit:`` line

    Returns:
        Tuple of (changed count, untracked count)

    Raises:
        StatusParseError: If the phrasing is neither clean nor enumerated counts
    """
    match = _COMMIT_RE.match(payload)
    if not match or not (match.group("counts") or match.group("notes")):
        raise StatusParseError(VCSType.HG, UNEXPECTED_OUTPUT)

    changed = untracked = 0
    counts = match.group("counts")
    if not counts:
        return changed, untracked

    for item in counts.split(", "):
        number, kind = item.split(" ", 1)
        if kind in CHANGED_KINDS:
            changed += int(number)
        elif kind in UNTRACKED_KINDS:
            untracked += int(number)
        else:
            logger.debug(f"Unknown hg summary change kind: {kind!r}")
            raise StatusParseError(VCSType.HG, UNEXPECTED_OUTPUT)

    return changed, untracked


def parse_hg_summary(output: str) -> StatusRecord:
    """Classify ``hg summary`` output into a status record.

    Args:
        output: Raw ``hg summary`` output

    Returns:
        Normalized status record with staged, ahead and behind counts at zero

    Raises:
        StatusParseError: If the branch or commit line is missing or malformed
    """
    branch = None
    commit_line = None
    for line in output.splitlines():
        if branch is None and (match := _BRANCH_RE.match(line)):
            branch = match.group("branch").strip()
        elif commit_line is None and line.startswith("commit:"):
            commit_line = line.rstrip()

    if not branch or commit_line is None:
        raise StatusParseError(VCSType.HG, UNEXPECTED_OUTPUT)

    changed, untracked = _parse_commit_line(commit_line)

    return StatusRecord(
        vcs_type=VCSType.HG,
        branch_label=branch,
        untracked_count=untracked,
        changed_count=changed,
    )
