"""CLI entrypoint smoke tests."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run_module(args: list[str], *, stdin: str | None = None) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    env["PYTHONIOENCODING"] = "utf-8"
    return subprocess.run(
        [sys.executable, "-m", "sanitize_filename.cli", *args],
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
        check=False,
    )


def test_cli_entrypoint_help() -> None:
    result = _run_module(["--help"])
    assert result.returncode == 0
    assert "usage: sanitize-filename" in result.stdout.lower()


def test_cli_entrypoint_stdin() -> None:
    result = _run_module(["--windows"], stdin="foobar...")
    assert result.returncode == 0
    assert result.stdout == "foobar\n"


def test_cli_entrypoint_version() -> None:
    result = _run_module(["--version"])
    assert result.returncode == 0
    assert result.stdout.startswith("sanitize-filename ")
