"""Run the inspector over many repositories at once."""

from __future__ import annotations

import concurrent.futures as cf
import logging
from dataclasses import dataclass, field
from typing import Callable, Collection, List, Optional, Tuple

from stranded.errors import GitError
from stranded.inspector import inspect_repository
from stranded.models import RepositorySnapshot

log = logging.getLogger(__name__)


@dataclass
class ScanResult:
    snapshots: List[RepositorySnapshot] = field(default_factory=list)
    failures: List[Tuple[str, str]] = field(default_factory=list)  # (path, message)


def scan_repositories(
    repos: Collection[str],
    fetch: bool,
    format_path: Callable[[str], str],
    max_workers: Optional[int] = None,
) -> ScanResult:
    """
    Inspect every repository concurrently and keep the ones with unsaved work.

    Without `max_workers` every repository gets its own worker. A failing
    repository is logged and skipped; the others are unaffected. Results come
    back in completion order.
    """
    result = ScanResult()
    if not repos:
        return result

    workers = max_workers or len(repos)
    with cf.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = {ex.submit(inspect_repository, repo, fetch): repo for repo in repos}
        for future in cf.as_completed(futures):
            repo = futures[future]
            try:
                snapshot = future.result()
            except GitError as exc:
                log.error("Error checking %s: %s", format_path(repo), exc)
                result.failures.append((repo, str(exc)))
                continue
            if snapshot is not None:
                result.snapshots.append(snapshot)
    return result
