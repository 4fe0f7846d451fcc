from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Change:
    kind: str  # porcelain status code, "?" for untracked files
    path: str  # relative to the repository root


@dataclass
class Branch:
    name: str
    tracked: bool
    ahead: int = 0
    commits: List[str] = field(default_factory=list)  # "subject (date)", newest first

    @property
    def retained(self) -> bool:
        """Untracked branches and branches ahead of their upstream carry unsaved work."""
        return not self.tracked or self.ahead > 0


@dataclass
class RepositorySnapshot:
    """Point-in-time state of one repository, as reported by git."""

    path: str
    has_remote: bool
    changes: List[Change] = field(default_factory=list)
    branches: List[Branch] = field(default_factory=list)

    @property
    def is_interesting(self) -> bool:
        return not self.has_remote or bool(self.changes) or bool(self.branches)

    @property
    def ahead_branches(self) -> List[Branch]:
        return [b for b in self.branches if b.ahead > 0]

    @property
    def unpushed_branches(self) -> List[Branch]:
        return [b for b in self.branches if b.tracked and b.ahead > 0]

    @property
    def untracked_branches(self) -> List[Branch]:
        return [b for b in self.branches if not b.tracked]

    @property
    def change_codes(self) -> str:
        return "".join(c.kind for c in self.changes)
