from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs the controller in-process with the logging bootstrap patched out and
checks exit codes and terminal output for each subcommand.
"""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from assetlink.interface.cli import app as cli_app


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the global logging configuration untouched."""
    with patch.object(cli_app, "configure_logging"), \
            patch.object(cli_app, "shutdown_logging") as shutdown:
        yield shutdown


def _write_config(tmp_path: Path, asset_root: Path) -> Path:
    config_file = tmp_path / "asset-link.config.json"
    config_file.write_text(json.dumps({
        "publicDir": str(asset_root),
        "outputFile": str(tmp_path / "gen" / "assetPaths.ts"),
    }), encoding="utf-8")
    return config_file


def test_init_creates_then_skips(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """TC-01: The second init reports the existing file and still succeeds."""
    assert cli_app.main(["init", "--dir", str(tmp_path)]) == 0
    assert (tmp_path / "asset-link.config.json").exists()
    assert "created" in capsys.readouterr().out

    assert cli_app.main(["init", "--dir", str(tmp_path)]) == 0
    assert "already exists" in capsys.readouterr().out


def test_generate_writes_module(tmp_path: Path, asset_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """TC-02: generate writes the module and prints a summary."""
    config_file = _write_config(tmp_path, asset_root)

    assert cli_app.main(["generate", "-c", str(config_file)]) == 0

    out = capsys.readouterr().out
    assert "generated successfully" in out
    assert "4 constants from 4 files" in out
    assert (tmp_path / "gen" / "assetPaths.ts").exists()


def test_generate_dry_run_prints_code(tmp_path: Path, asset_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """TC-03: Dry run prints the module instead of writing it."""
    config_file = _write_config(tmp_path, asset_root)

    assert cli_app.main(["generate", "-c", str(config_file), "--dry-run"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("/**")
    assert "export const logo = '/images/logo.png';" in out
    assert not (tmp_path / "gen").exists()


def test_generate_json_output(tmp_path: Path, asset_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """TC-04: --json prints the full result object."""
    config_file = _write_config(tmp_path, asset_root)

    assert cli_app.main(["generate", "-c", str(config_file), "--json", "--dry-run"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["ok"] is True
    assert data["dry_run"] is True
    assert data["written"] is False
    assert data["assets_generated"] == 4


def test_generate_failure_exit_code(tmp_path: Path, asset_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """TC-05: A malformed exclude pattern fails the run with exit code 1."""
    config_file = tmp_path / "bad.json"
    config_file.write_text(json.dumps({
        "root_dir": str(asset_root),
        "output_file": str(tmp_path / "out.ts"),
        "exclude_patterns": ["["],
    }), encoding="utf-8")

    assert cli_app.main(["generate", "-c", str(config_file)]) == 1
    assert "ERROR" in capsys.readouterr().err
    assert not (tmp_path / "out.ts").exists()


def test_watch_interrupt_returns_130(tmp_path: Path, asset_root: Path) -> None:
    """TC-06: Ctrl+C during watch ends with the conventional exit code."""
    config_file = _write_config(tmp_path, asset_root)

    with patch.object(cli_app, "watch", side_effect=KeyboardInterrupt):
        assert cli_app.main(["watch", "-c", str(config_file)]) == 130


def test_logging_is_shut_down_after_command(tmp_path: Path, asset_root: Path, no_logging_setup) -> None:
    """TC-07: The log listener is stopped once the command returns."""
    config_file = _write_config(tmp_path, asset_root)

    assert cli_app.main(["generate", "-c", str(config_file), "--dry-run"]) == 0
    no_logging_setup.assert_called_once_with()


def test_logging_is_shut_down_after_interrupt(tmp_path: Path, asset_root: Path, no_logging_setup) -> None:
    """TC-08: An interrupted watch still stops the log listener."""
    config_file = _write_config(tmp_path, asset_root)

    with patch.object(cli_app, "watch", side_effect=KeyboardInterrupt):
        cli_app.main(["watch", "-c", str(config_file)])

    no_logging_setup.assert_called_once_with()


def test_debug_logs_resolved_configuration(
        tmp_path: Path, asset_root: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """TC-09: The effective configuration is logged as JSON at debug level."""
    config_file = _write_config(tmp_path, asset_root)

    with caplog.at_level(logging.DEBUG):
        assert cli_app.main(["--debug", "generate", "-c", str(config_file), "--dry-run"]) == 0

    line = next(r.getMessage() for r in caplog.records if "Resolved configuration" in r.getMessage())
    data = json.loads(line.split(": ", 1)[1])
    assert data["root_dir"] == str(asset_root)
    assert data["mode"] == "static"
