"""Command-line routing: subcommands, aliases and the bare restore position."""

from __future__ import annotations

import contextlib
import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from workdir import __main__ as cli


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        self.path_file = self.root / "workdir"
        self.path_file.touch()
        self.a = self.root / "a"
        self.b = self.root / "b"
        self.a.mkdir()
        self.b.mkdir()
        env = {
            "WORKDIR_PATH_FILE": str(self.path_file),
            "WORKDIR_COLOR": "never",
            "WORKDIR_LIMIT": "",
            "WORKDIR_DEBUG": "",
        }
        patcher = mock.patch.dict(os.environ, env)
        patcher.start()
        self.addCleanup(patcher.stop)
        stdin = mock.patch("sys.stdin", io.StringIO(""))
        stdin.start()
        self.addCleanup(stdin.stop)

    def run_cli(self, *argv: str) -> tuple[int, str, str]:
        out = io.StringIO()
        err = io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = cli.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def saved_paths(self) -> list[str]:
        return [p for p in self.path_file.read_text(encoding="utf-8").split("\n") if p]

    def test_save_then_bare_restore(self) -> None:
        code, out, _err = self.run_cli("save", str(self.a))
        self.assertEqual(code, 0)
        self.assertEqual(out, f"saved [1] {self.a}\n")

        code, out, _err = self.run_cli()
        self.assertEqual(code, 0)
        self.assertEqual(out, f"CHDIR {self.a}\n")

    def test_aliases(self) -> None:
        self.assertEqual(self.run_cli("s", str(self.a))[0], 0)
        self.assertEqual(self.run_cli("s", str(self.b), "2")[0], 0)
        self.assertEqual(self.saved_paths(), [str(self.a), str(self.b)])

        code, out, _err = self.run_cli("ls")
        self.assertEqual(code, 0)
        self.assertEqual(out, f"[1] {self.a}\n[2] {self.b}\n")

        code, out, _err = self.run_cli("res", "2", "--verbose")
        self.assertEqual(out, f"CHDIRV {self.b}\n")

        code, out, _err = self.run_cli("d", "1")
        self.assertEqual(code, 0)
        self.assertEqual(out, f"deleted [1] {self.a}\n")
        self.assertEqual(self.saved_paths(), [str(self.b)])

    def test_bare_position_with_verbose(self) -> None:
        self.path_file.write_text(f"{self.a}\n{self.b}\n", encoding="utf-8")
        code, out, _err = self.run_cli("-v", "2")
        self.assertEqual(code, 0)
        self.assertEqual(out, f"CHDIRV {self.b}\n")

    def test_errors_go_to_stderr_with_nonzero_exit(self) -> None:
        code, out, err = self.run_cli("restore", "3")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertEqual(err, "error: invalid value '3' for '[pos]': only 0 paths are saved\n")

    def test_position_outside_limit_is_a_usage_error(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["restore", "20"])
        self.assertEqual(ctx.exception.code, 2)

    def test_delete_requires_position(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["delete"])
        self.assertEqual(ctx.exception.code, 2)

    def test_limit_from_environment(self) -> None:
        with mock.patch.dict(os.environ, {"WORKDIR_LIMIT": "1"}):
            self.assertEqual(self.run_cli("save", str(self.a))[0], 0)
            code, _out, err = self.run_cli("save", str(self.b))
        self.assertEqual(code, 1)
        self.assertEqual(err, "error: limit of 1 saved paths reached\n")

    def test_invalid_limit_setting(self) -> None:
        with mock.patch.dict(os.environ, {"WORKDIR_LIMIT": "many"}):
            code, _out, err = self.run_cli("list")
        self.assertEqual(code, 1)
        self.assertIn("WORKDIR_LIMIT", err)

    def test_short_list_command(self) -> None:
        self.path_file.write_text(f"{self.a}\n{self.b}\n", encoding="utf-8")
        code, out, _err = self.run_cli("l")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [f"[1] {self.a}", f"[2] {self.b}"])

    def test_wrapper_command(self) -> None:
        code, out, _err = self.run_cli("wrapper", "zsh")
        self.assertEqual(code, 0)
        self.assertIn("wd() {", out)

    def test_info_command(self) -> None:
        code, out, _err = self.run_cli("info")
        self.assertEqual(code, 0)
        self.assertIn(f"path file: {self.path_file}", out)
        self.assertIn("limit: 19", out)


if __name__ == "__main__":
    unittest.main()
