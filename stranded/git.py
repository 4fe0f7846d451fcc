from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Union

from stranded.errors import GitError

log = logging.getLogger(__name__)

GIT = "git"


def run_git(args: List[str], cwd: Union[str, Path]) -> str:
    """
    Run ``git <args>`` inside the repository root `cwd` and return its stdout.

    Repository discovery stops at `cwd`: a broken `.git` there is an error
    instead of falling through to an enclosing repository. Output that is
    not valid UTF-8 (e.g. ref names) is decoded with replacement characters.

    Raises GitError if git cannot be started or exits non-zero.
    """
    cmd = [GIT, *args]
    env = dict(os.environ)
    env["GIT_CEILING_DIRECTORIES"] = os.path.dirname(os.path.abspath(cwd))
    log.debug("Running command: %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise GitError(cmd, 127, f"Could not run git: {exc}") from exc

    if result.returncode != 0:
        log.debug("Failed stderr: %s", result.stderr.strip())
        raise GitError(cmd, result.returncode, result.stderr)
    return result.stdout
