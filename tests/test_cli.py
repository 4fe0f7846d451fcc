"""Command-line entrypoint tests.

Checks argument defaults, exit codes and the end-to-end report for a small
tree of real repositories.
"""

from __future__ import annotations

import contextlib
import io
import os
import shutil
import subprocess
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from stranded import cli
from stranded.errors import GitError
from stranded.models import RepositorySnapshot
from stranded.scanner import ScanResult


def _run(argv):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = cli.main(argv)
    return code, out.getvalue(), err.getvalue()


class CliArgumentTests(unittest.TestCase):
    def test_defaults(self) -> None:
        args = cli.build_arg_parser().parse_args([])
        self.assertEqual(args.paths, [])
        self.assertFalse(args.absolute)
        self.assertFalse(args.compact)
        self.assertFalse(args.fetch)
        self.assertIsNone(args.max_workers)

    def test_short_flags(self) -> None:
        args = cli.build_arg_parser().parse_args(["-a", "-c", "-f", "one", "two"])
        self.assertTrue(args.absolute)
        self.assertTrue(args.compact)
        self.assertTrue(args.fetch)
        self.assertEqual(args.paths, ["one", "two"])

    def test_quiet_and_verbose_are_exclusive(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.build_arg_parser().parse_args(["-q", "-v"])

    def test_max_workers_must_be_positive(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--max-workers", "0"])
        self.assertEqual(ctx.exception.code, 2)


class CliMainTests(unittest.TestCase):
    def test_defaults_to_current_working_directory(self) -> None:
        with mock.patch.object(cli, "find_repositories", return_value=set()) as find, mock.patch.object(
            cli, "scan_repositories", return_value=ScanResult()
        ):
            code, out, _err = _run([])

        self.assertEqual(code, 0)
        find.assert_called_once_with([os.getcwd()])
        self.assertIn("No repositories with unsaved work found.", out)

    def test_regular_file_argument_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x\n", encoding="utf-8")
            with mock.patch.object(cli, "scan_repositories") as scan:
                code, out, err = _run([str(target)])

        self.assertEqual(code, 1)
        self.assertIn(str(target), err)
        self.assertIn("is not a directory", err)
        self.assertEqual(out, "")
        scan.assert_not_called()

    def test_options_reach_the_scanner_and_report(self) -> None:
        snapshot = RepositorySnapshot(path="/work/a", has_remote=False)
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(cli, "find_repositories", return_value={"/work/a"}), mock.patch.object(
                cli, "scan_repositories", return_value=ScanResult(snapshots=[snapshot])
            ) as scan:
                code, out, _err = _run(["-a", "-c", "-f", "--max-workers", "3", tmp])

        self.assertEqual(code, 0)
        _args, kwargs = scan.call_args
        self.assertTrue(kwargs["fetch"])
        self.assertEqual(kwargs["max_workers"], 3)
        self.assertEqual(kwargs["format_path"]("/work/a"), "/work/a")
        self.assertIn("/work/a: no remote", out)

    def test_per_repository_errors_do_not_change_exit_code(self) -> None:
        error = GitError(["git", "remote"], 128, "fatal: not a git repository")
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(cli, "find_repositories", return_value={"/work/broken"}), mock.patch(
                "stranded.scanner.inspect_repository", side_effect=error
            ):
                code, out, _err = _run(["-q", tmp])

        self.assertEqual(code, 0)
        self.assertIn("No repositories with unsaved work found.", out)


@unittest.skipIf(shutil.which("git") is None, "git is required for end-to-end CLI tests")
class CliEndToEndTests(unittest.TestCase):
    def test_reports_repository_without_remote(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            repo = root / "projects" / "a"
            repo.mkdir(parents=True)
            subprocess.run(["git", "init", "-q"], cwd=repo, check=True)
            (root / "node_modules" / "dep" / ".git").mkdir(parents=True)

            code, out, _err = _run(["-q", "-a", "-c", str(root)])

        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["Found 1 repository with unsaved work:", f"{repo}: no remote"])


if __name__ == "__main__":
    unittest.main()
