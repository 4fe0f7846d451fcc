from __future__ import annotations

from typing import List


class StrandedError(Exception):
    """Base class for errors raised by stranded."""


class NotADirectory(StrandedError):
    """An input path does not exist or is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"`{path}` is not a directory")
        self.path = path


class GitError(StrandedError):
    """A git command could not be run or exited non-zero."""

    def __init__(self, args: List[str], returncode: int, stderr: str) -> None:
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"Command failed (exit {returncode}): {' '.join(self.command)}"
        if self.stderr:
            message = f"{message}\n   ↳ {self.stderr}"
        super().__init__(message)
