"""Integration tests for .env loading at CLI start."""

from __future__ import annotations

import os
from pathlib import Path

from sanitize_filename import cli


def test_env_file_loading(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("SANITIZE_FILENAME_TEST_KEY=loaded-from-env\n")
    monkeypatch.delenv("SANITIZE_FILENAME_TEST_KEY", raising=False)

    cli._load_dotenv_files()

    assert os.getenv("SANITIZE_FILENAME_TEST_KEY") == "loaded-from-env"


def test_env_file_does_not_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("SANITIZE_FILENAME_REPLACEMENT=from-file\n")
    monkeypatch.setenv("SANITIZE_FILENAME_REPLACEMENT", "from-env")

    cli._load_dotenv_files()

    assert os.getenv("SANITIZE_FILENAME_REPLACEMENT") == "from-env"


def test_env_file_drives_cli(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text(
        "SANITIZE_FILENAME_WINDOWS=false\nSANITIZE_FILENAME_REPLACEMENT=_\n"
    )

    assert cli.main(["a:b"]) == 0
    assert capsys.readouterr().out == "a_b\n"
