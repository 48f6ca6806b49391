"""Shared pytest fixtures for the stackgen test suite.

Provides reusable fixtures for:
- Temporary output directories
- Scripted answer streams for the interactive prompts
- Pre-built generation configs for every stack/database combination
- A stand-in package manager executable
"""

from __future__ import annotations

import io
import os
import stat
from pathlib import Path

import pytest

from stackgen.scaffolder import GenerationConfig, Stack


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Not-yet-existing project root inside a temp directory."""
    return tmp_path / "project"


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every STACKGEN_* variable so tests see default configuration."""
    for key in list(os.environ):
        if key.startswith("STACKGEN_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Prompt input
# ---------------------------------------------------------------------------

@pytest.fixture
def answers():
    """Factory turning answer lines into a stream for ``collect_answers``."""

    def _make(*lines: str) -> io.StringIO:
        return io.StringIO("".join(f"{line}\n" for line in lines))

    return _make


# ---------------------------------------------------------------------------
# Generation configs
# ---------------------------------------------------------------------------

@pytest.fixture
def react_with_db() -> GenerationConfig:
    return GenerationConfig(stack=Stack.REACT_VITE_EXPRESS, needs_database=True)


@pytest.fixture
def react_no_db() -> GenerationConfig:
    return GenerationConfig(stack=Stack.REACT_VITE_EXPRESS, needs_database=False)


@pytest.fixture
def nextjs_with_db() -> GenerationConfig:
    return GenerationConfig(stack=Stack.NEXTJS, needs_database=True)


@pytest.fixture
def nextjs_no_db() -> GenerationConfig:
    return GenerationConfig(stack=Stack.NEXTJS, needs_database=False)


# ---------------------------------------------------------------------------
# Fake package manager
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_package_manager(tmp_path: Path):
    """Factory writing an executable shell script that stands in for npm.

    The script appends its working directory to ``calls.log`` next to it and
    exits with *exit_code*.  Returns ``(executable_path, log_path)``.
    """

    def _make(exit_code: int = 0) -> tuple[Path, Path]:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        log = bin_dir / "calls.log"
        script = bin_dir / "fake-npm"
        script.write_text(
            "#!/bin/sh\n"
            f'echo "$(pwd) $*" >> "{log}"\n'
            f"exit {exit_code}\n",
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script, log

    return _make
