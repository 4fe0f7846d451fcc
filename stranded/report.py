"""Render repository snapshots for the terminal."""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence

from rich.console import Console
from rich.text import Text

from stranded.models import Branch, RepositorySnapshot

PathFormatter = Callable[[str], str]


def _branch_list(branches: Iterable[Branch], describe: Callable[[Branch], str]) -> str:
    return "(" + ", ".join(f"{b.name}: {describe(b)}" for b in branches) + ")"


def render_compact(snapshot: RepositorySnapshot, format_path: PathFormatter) -> Text:
    """One line: path, then only the parts that apply."""
    parts: List[Text] = [Text.assemble((format_path(snapshot.path), "bold"), ":")]
    if not snapshot.has_remote:
        parts.append(Text("no remote"))
    if snapshot.ahead_branches:
        parts.append(Text(_branch_list(snapshot.ahead_branches, lambda b: f"{b.ahead} ahead")))
    if snapshot.untracked_branches:
        parts.append(Text(_branch_list(snapshot.untracked_branches, lambda b: "untracked")))
    if snapshot.changes:
        parts.append(Text(f"[{snapshot.change_codes}]"))
    return Text(" ").join(parts)


def _commit_lines(branch: Branch) -> List[Text]:
    return [Text.assemble("      ", (commit, "dim")) for commit in branch.commits]


def render_verbose(snapshot: RepositorySnapshot, format_path: PathFormatter) -> List[Text]:
    lines: List[Text] = [Text(""), Text(format_path(snapshot.path), style="bold")]

    if not snapshot.has_remote:
        lines.append(Text("  no remote", style="italic"))

    if snapshot.changes:
        lines.append(Text(f"  uncommitted changes ({len(snapshot.changes)})", style="italic"))
        for change in snapshot.changes:
            lines.append(Text.assemble("    ", (change.kind, "bold"), f" {change.path}"))

    unpushed = snapshot.unpushed_branches
    if unpushed:
        lines.append(Text(f"  unpushed commits ({len(unpushed)})", style="italic"))
        for branch in unpushed:
            lines.append(Text.assemble("    ", (branch.name, "bold"), f" ({branch.ahead})"))
            lines.extend(_commit_lines(branch))

    untracked = snapshot.untracked_branches
    if untracked:
        lines.append(Text(f"  untracked branches ({len(untracked)})", style="italic"))
        for branch in untracked:
            lines.append(Text.assemble("    ", (branch.name, "bold")))
            lines.extend(_commit_lines(branch))

    return lines


def print_report(
    console: Console,
    snapshots: Sequence[RepositorySnapshot],
    compact: bool,
    format_path: PathFormatter,
) -> None:
    if not snapshots:
        console.print("No repositories with unsaved work found.")
        return

    count = len(snapshots)
    console.print(f"Found {count} repositor{'y' if count == 1 else 'ies'} with unsaved work:")
    for snapshot in snapshots:
        if compact:
            console.print(render_compact(snapshot, format_path), soft_wrap=True)
        else:
            for line in render_verbose(snapshot, format_path):
                console.print(line, soft_wrap=True)
