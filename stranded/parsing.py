"""
Parsers for the text git prints for the queries the inspector runs.

All parsers are lenient: blank or malformed lines are skipped and missing
pieces fall back to "untracked" / zero instead of raising.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from stranded.models import Change

BRANCH_LINE_RE = re.compile(r"^(?P<name>.+?)(\s+(?P<remote>.+?))?(\s+(?P<tracking>.+))?$")
AHEAD_RE = re.compile(r"ahead (\d+)")

UNTRACKED_RAW = "??"
UNTRACKED = "?"


@dataclass(frozen=True)
class BranchLine:
    name: str
    remote: Optional[str]
    tracking: Optional[str]


def non_blank_lines(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_has_remote(text: str) -> bool:
    """`git remote` prints one remote name per line, nothing if there are none."""
    return bool(text.strip())


def parse_status(text: str) -> List[Change]:
    """
    Parse `git status --porcelain` output into changes.

    The first token is the status code, with "??" (untracked) shortened to
    "?"; the second token is the path.
    """
    changes: List[Change] = []
    for line in non_blank_lines(text):
        tokens = [t for t in line.split(" ") if t]
        if len(tokens) < 2:
            continue
        changes.append(Change(kind=tokens[0].replace(UNTRACKED_RAW, UNTRACKED), path=tokens[1]))
    return changes


def parse_branch_line(line: str) -> Optional[BranchLine]:
    """
    Parse one `%(refname:short) %(upstream:short) %(upstream:track)` line.

    e.g. "main origin/main [ahead 2, behind 1]", "main origin/main", "topic".
    """
    match = BRANCH_LINE_RE.match(line.strip())
    if match is None or not match.group("name"):
        return None
    return BranchLine(
        name=match.group("name"),
        remote=match.group("remote") or None,
        tracking=match.group("tracking") or None,
    )


def parse_ahead(tracking: Optional[str]) -> int:
    """Number after "ahead " in a tracking annotation, 0 when absent."""
    if not tracking:
        return 0
    match = AHEAD_RE.search(tracking)
    return int(match.group(1)) if match else 0


def parse_log(text: str) -> List[str]:
    """One commit summary per non-blank line, in git's order (newest first)."""
    return non_blank_lines(text)
