"""Parser for ``git status --porcelain --branch`` output.

The first line is a branch header::

    ## main...origin/main [ahead 1, behind 2]
    ## No commits yet on main
    ## HEAD (no branch)

followed by one ``XY path`` line per entry, where ``X`` is the index status
and ``Y`` the worktree status. Renames and copies are a single line of the
form ``R  old -> new``.
"""

import logging
import re

from vcs_prompt.models import StatusRecord
from vcs_prompt.vcs.base import VCSType
from vcs_prompt.vcs.exceptions import StatusParseError

logger = logging.getLogger(__name__)

UNEXPECTED_OUTPUT = "unexpected git status output"

UNTRACKED = "?"
IGNORED = "!"
STATUS_CODES = frozenset(" MTADRCU?!")

_INITIAL_RE = re.compile(r"^(?:No commits yet|Initial commit) on \S.*$")
_HEADER_RE = re.compile(
    r"^(?P<branch>\S.*?)"
    r"(?:\.\.\.(?P<upstream>\S+))?"
    r"(?: \[(?P<tracking>[^\]]*)\])?$"
)
_AHEAD_RE = re.compile(r"\bahead (\d+)")
_BEHIND_RE = re.compile(r"\bbehind (\d+)")


def _parse_header(header: str) -> tuple[str, int, int]:
    """Parse the ``##`` branch header.

    Args:
        header: Header text after the leading ``## ``

    Returns:
        Tuple of (branch label, ahead count, behind count)

    Raises:
        StatusParseError: If no branch or initial-commit marker is recognized
    """
    if _INITIAL_RE.match(header):
        return header, 0, 0

    match = _HEADER_RE.match(header)
    if not match:
        raise StatusParseError(VCSType.GIT, UNEXPECTED_OUTPUT)

    tracking = match.group("tracking") or ""
    ahead = _AHEAD_RE.search(tracking)
    behind = _BEHIND_RE.search(tracking)
    return (
        match.group("branch"),
        int(ahead.group(1)) if ahead else 0,
        int(behind.group(1)) if behind else 0,
    )


def parse_git_status(output: str) -> StatusRecord:
    """Classify porcelain status output into a status record.

    A partially staged path counts as both staged and changed.

    Args:
        output: Raw ``git status --porcelain --branch`` output

    Returns:
        Normalized status record

    Raises:
        StatusParseError: If the header is missing or an entry is malformed
    """
    lines = [line for line in output.splitlines() if line]
    if not lines or not lines[0].startswith("## "):
        raise StatusParseError(VCSType.GIT, UNEXPECTED_OUTPUT)

    branch, ahead, behind = _parse_header(lines[0][3:])

    untracked = changed = staged = 0
    for line in lines[1:]:
        if len(line) < 4 or line[2] != " " or line[0] not in STATUS_CODES or line[1] not in STATUS_CODES:
            logger.debug(f"Unrecognized git status line: {line!r}")
            raise StatusParseError(VCSType.GIT, UNEXPECTED_OUTPUT)

        index_status, worktree_status = line[0], line[1]
        if index_status == IGNORED:
            continue
        if index_status == UNTRACKED and worktree_status == UNTRACKED:
            untracked += 1
            continue
        if index_status not in (" ", UNTRACKED):
            staged += 1
        if worktree_status not in (" ", UNTRACKED):
            changed += 1

    return StatusRecord(
        vcs_type=VCSType.GIT,
        branch_label=branch,
        untracked_count=untracked,
        changed_count=changed,
        staged_count=staged,
        ahead_count=ahead,
        behind_count=behind,
    )
