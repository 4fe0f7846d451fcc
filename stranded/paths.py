from __future__ import annotations

import os
from typing import Callable, Optional


def format_relative(path: str, cwd: str) -> str:
    """
    Render `path` relative to `cwd`.

    "./sub/repo" for paths below cwd, "../other" above it, and
    "./ (name)" for cwd itself. Paths with no relative form (another
    drive on Windows) are returned unchanged.
    """
    try:
        rel = os.path.relpath(path, cwd)
    except ValueError:
        return path
    if rel == os.curdir:
        return f"./ ({os.path.basename(os.path.abspath(path))})"
    if not rel.startswith("."):
        rel = f"./{rel}"
    return rel


def make_path_formatter(absolute: bool, cwd: Optional[str] = None) -> Callable[[str], str]:
    if absolute:
        return lambda path: path
    base = cwd if cwd is not None else os.getcwd()
    return lambda path: format_relative(path, base)
