"""Unit tests for utility functions (stackgen.utils).

Tests cover:
- run_command (success, failure, cwd, env vars, capture=False, timeout,
  missing executable)
- write_file (parents, truncation, no newline translation)
- Rich output helpers
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from stackgen.utils import (
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    run_command,
    write_file,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    async def test_successful_command(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "print('hello')"]
        )
        assert returncode == 0
        assert stdout == "hello"

    @pytest.mark.unit
    async def test_failed_command(self):
        returncode, _, _ = await run_command(
            [sys.executable, "-c", "import sys; sys.exit(3)"]
        )
        assert returncode == 3

    @pytest.mark.unit
    async def test_command_with_cwd(self, tmp_path: Path):
        returncode, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert returncode == 0
        assert Path(stdout).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    async def test_command_with_env(self):
        _, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.environ['STACKGEN_TEST_VAR'])"],
            env={"STACKGEN_TEST_VAR": "abc"},
        )
        assert stdout == "abc"

    @pytest.mark.unit
    async def test_capture_false_discards_output(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "print('noise')"], capture=False
        )
        assert returncode == 0
        assert stdout == ""
        assert stderr == ""

    @pytest.mark.unit
    async def test_timeout(self):
        returncode, _, stderr = await run_command(
            [sys.executable, "-c", "import time; time.sleep(10)"], timeout=1
        )
        assert returncode == -1
        assert "timed out" in stderr

    @pytest.mark.unit
    async def test_missing_executable_raises(self):
        with pytest.raises(OSError):
            await run_command(["stackgen-definitely-not-installed"])


# ---------------------------------------------------------------------------
# write_file
# ---------------------------------------------------------------------------


class TestWriteFile:
    @pytest.mark.unit
    def test_creates_parents(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "c.txt"
        write_file(target, "hello\n")
        assert target.read_text(encoding="utf-8") == "hello\n"

    @pytest.mark.unit
    def test_truncates_existing(self, tmp_path: Path):
        target = tmp_path / "f.txt"
        target.write_text("a much longer previous body", encoding="utf-8")
        write_file(target, "short")
        assert target.read_text(encoding="utf-8") == "short"

    @pytest.mark.unit
    def test_no_newline_translation(self, tmp_path: Path):
        target = tmp_path / "f.txt"
        write_file(target, "a\nb\r\nc")
        assert target.read_bytes() == b"a\nb\r\nc"

    @pytest.mark.unit
    def test_parent_is_a_file_raises(self, tmp_path: Path):
        (tmp_path / "blocker").write_text("", encoding="utf-8")
        with pytest.raises(OSError):
            write_file(tmp_path / "blocker" / "x.txt", "x")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "helper", [print_info, print_success, print_error, print_warning]
    )
    def test_prints_message(self, helper, capsys):
        helper("status line")
        assert "status line" in capsys.readouterr().out

    @pytest.mark.unit
    def test_square_brackets_are_not_markup(self, capsys):
        print_error("Error creating file [bold]x[/bold]: [Errno 13]")
        assert "[bold]x[/bold]" in capsys.readouterr().out

    @pytest.mark.unit
    def test_summary_table(self, capsys):
        print_summary_table({"Stack": "Next.js", "Files written": "1"}, title="Run")
        out = capsys.readouterr().out
        assert "Run" in out
        assert "Next.js" in out
        assert "Files written" in out

    @pytest.mark.unit
    def test_long_message_stays_on_one_line(self, capsys):
        message = "3. Copy the config object into src/firebaseConfig.ts " + "x" * 120
        print_info(message)
        assert message in capsys.readouterr().out.splitlines()
