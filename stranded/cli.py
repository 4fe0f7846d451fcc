"""
Report git repositories under the given directories that hold unsaved work:
uncommitted changes, unpushed commits, branches without an upstream, or no
remote at all.

Exit code:
  0 - scan completed (per-repository git errors are reported but not fatal)
  1 - an argument is not a directory
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from stranded import __version__
from stranded.errors import NotADirectory
from stranded.locator import find_repositories
from stranded.paths import make_path_formatter
from stranded.report import print_report
from stranded.scanner import scan_repositories

log = logging.getLogger(__name__)


def configure_logging(quiet: bool, verbose: bool) -> None:
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stranded",
        description="Find git repositories with uncommitted changes or unpushed commits.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Directories to scan (default: current working directory).",
    )
    parser.add_argument(
        "-a",
        "--absolute",
        action="store_true",
        help="Print absolute paths instead of paths relative to the current directory.",
    )
    parser.add_argument(
        "-c",
        "--compact",
        action="store_true",
        help="One line per repository.",
    )
    parser.add_argument(
        "-f",
        "--fetch",
        action="store_true",
        help="Fetch all remotes before checking for unpushed commits (slow).",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Maximum number of repositories inspected at once (default: all).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Quiet mode: warnings and errors only.",
    )
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose mode: log every git command.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.max_workers is not None and args.max_workers < 1:
        parser.error("--max-workers must be at least 1")

    configure_logging(quiet=args.quiet, verbose=args.verbose)

    paths: List[str] = args.paths or [os.getcwd()]
    format_path = make_path_formatter(absolute=args.absolute)

    try:
        repos = find_repositories(paths)
    except NotADirectory as exc:
        Console(stderr=True).print(Text(f"error: {exc}", style="red"), soft_wrap=True)
        return 1

    log.info(
        "Checking %d repositories in %s",
        len(repos),
        ", ".join(format_path(os.path.abspath(p)) for p in paths),
    )

    result = scan_repositories(repos, fetch=args.fetch, format_path=format_path, max_workers=args.max_workers)
    print_report(Console(highlight=False), result.snapshots, compact=args.compact, format_path=format_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
