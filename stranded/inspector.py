"""Query one repository with read-only git commands and summarise its state."""

from __future__ import annotations

import logging
from typing import List, Optional

from stranded.git import run_git
from stranded.models import Branch, RepositorySnapshot
from stranded.parsing import (
    non_blank_lines,
    parse_ahead,
    parse_branch_line,
    parse_has_remote,
    parse_log,
    parse_status,
)

log = logging.getLogger(__name__)

BRANCH_FORMAT = "%(refname:short) %(upstream:short) %(upstream:track)"
LOG_FORMAT = "%s (%ad)"


def has_remote(repo: str) -> bool:
    return parse_has_remote(run_git(["remote"], repo))


def fetch_all(repo: str) -> None:
    run_git(["fetch", "--all", "--quiet"], repo)


def get_unpushed_commits(repo: str, upstream: str, branch: str) -> List[str]:
    """Commits on `branch` that are not on `upstream`, newest first."""
    out = run_git(
        ["log", f"{upstream}..refs/heads/{branch}", f"--pretty=format:{LOG_FORMAT}", "--date=short"],
        repo,
    )
    return parse_log(out)


def get_branches(repo: str) -> List[Branch]:
    """
    Local branches that carry unsaved work.

    Branches tracking an upstream with nothing ahead are left out.
    """
    out = run_git(["for-each-ref", f"--format={BRANCH_FORMAT}", "refs/heads/"], repo)

    branches: List[Branch] = []
    for line in non_blank_lines(out):
        parsed = parse_branch_line(line)
        if parsed is None:
            continue
        branch = Branch(
            name=parsed.name,
            tracked=parsed.remote is not None,
            ahead=parse_ahead(parsed.tracking),
        )
        if not branch.retained:
            continue
        if branch.ahead > 0 and parsed.remote is not None:
            branch.commits = get_unpushed_commits(repo, parsed.remote, branch.name)
        branches.append(branch)
    return branches


def inspect_repository(repo: str, fetch: bool = False) -> Optional[RepositorySnapshot]:
    """
    Build a snapshot of `repo`, or return None if it has nothing unsaved.

    A repository without any remote is always reported. Raises GitError if
    any git query fails.
    """
    remote = has_remote(repo)
    if remote and fetch:
        log.debug("Fetching all remotes in %s", repo)
        fetch_all(repo)

    snapshot = RepositorySnapshot(
        path=repo,
        has_remote=remote,
        changes=parse_status(run_git(["status", "--porcelain"], repo)),
        branches=get_branches(repo),
    )
    if not snapshot.is_interesting:
        log.debug("Clean: %s", repo)
        return None
    return snapshot
