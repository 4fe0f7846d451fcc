"""Find git repository roots under one or more directory trees."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, Set

from stranded.errors import NotADirectory

log = logging.getLogger(__name__)

GIT_DIR = ".git"
PRUNED_DIRS = frozenset({"node_modules"})


def iter_git_repos(root: str) -> Iterator[str]:
    """Yield every directory under `root` (inclusive) that holds a .git directory."""
    for dirpath, dirnames, _filenames in os.walk(root):
        if GIT_DIR in dirnames:
            log.debug("Found git repo: %s", dirpath)
            yield os.path.abspath(dirpath)
        # Never descend into git metadata or dependency caches.
        dirnames[:] = [d for d in dirnames if d != GIT_DIR and d not in PRUNED_DIRS]


def find_repositories(paths: Iterable[str]) -> Set[str]:
    """
    Return the deduplicated set of repository roots found under `paths`.

    Every path is checked up front; the first one that is not a directory
    raises NotADirectory before anything is walked.
    """
    paths = list(paths)
    for path in paths:
        if not os.path.isdir(path):
            raise NotADirectory(path)

    repos: Set[str] = set()
    for path in paths:
        repos.update(iter_git_repos(os.path.abspath(path)))
    return repos
