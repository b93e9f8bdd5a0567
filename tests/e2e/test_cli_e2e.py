from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes,
stream output (stdout/stderr), and file system side effects.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "assetlink" / "main.py"


def run_cli(args: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH to ensure the package
    is resolvable without being installed in site-packages.

    Args:
        args: Command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def web_project(tmp_path: Path) -> Path:
    """
    Create a minimal web project.

    Structure:
    /project
      /public
        favicon.ico
        /images
          logo.png
    """
    project = tmp_path / "project"
    (project / "public" / "images").mkdir(parents=True)
    (project / "public" / "favicon.ico").write_bytes(b"\x00")
    (project / "public" / "images" / "logo.png").write_bytes(b"\x89PNG")
    return project


def test_init_then_generate(web_project: Path) -> None:
    """TC-01: init writes a config that generate picks up by default."""
    result = run_cli(["init"], cwd=web_project)
    assert result.returncode == 0, result.stderr
    assert (web_project / "asset-link.config.json").exists()

    result = run_cli(["generate"], cwd=web_project)
    assert result.returncode == 0, result.stderr

    output = web_project / "src" / "generated" / "assetPaths.ts"
    assert output.read_text(encoding="utf-8").endswith(
        "export const favicon = '/favicon.ico';\n"
        "export namespace images {\n"
        "  export const logo = '/images/logo.png';\n"
        "}\n"
    )


def test_generate_without_config_uses_defaults(web_project: Path) -> None:
    """TC-02: A missing config file falls back to defaults with a warning."""
    result = run_cli(["generate"], cwd=web_project)

    assert result.returncode == 0, result.stderr
    assert "not found" in result.stderr
    assert (web_project / "src" / "generated" / "assetPaths.ts").exists()


def test_json_dry_run(web_project: Path) -> None:
    """TC-03: JSON output on stdout, logs on stderr, nothing written."""
    result = run_cli(["generate", "--json", "--dry-run"], cwd=web_project)
    assert result.returncode == 0, result.stderr

    data: Dict[str, Any] = json.loads(result.stdout)
    assert data["ok"] is True
    assert data["assets_generated"] == 2
    assert data["summary"]["mode"] == "static"
    assert not (web_project / "src").exists()


def test_yaml_config_and_log_file(web_project: Path) -> None:
    """TC-04: YAML configuration with a rotating log file."""
    config_file = web_project / "assets.yaml"
    config_file.write_text(
        "publicDir: ./public\n"
        "outputFile: ./out/assets.ts\n"
        "groupByDirectory: false\n"
        "namingStrategy: PascalCase\n",
        encoding="utf-8",
    )
    log_file = web_project / "logs" / "run.log"

    result = run_cli(["--log-file", str(log_file), "generate", "-c", str(config_file)], cwd=web_project)

    assert result.returncode == 0, result.stderr
    code = (web_project / "out" / "assets.ts").read_text(encoding="utf-8")
    assert "export const Logo = '/images/logo.png';" in code
    assert "namespace" not in code
    assert log_file.exists()


def test_python_config_with_callbacks(web_project: Path) -> None:
    """TC-05: The Python template enables the callback naming mode."""
    assert run_cli(["init", "--format", "python"], cwd=web_project).returncode == 0

    result = run_cli(["generate", "-c", "asset-link.config.py"], cwd=web_project)

    assert result.returncode == 0, result.stderr
    code = (web_project / "src" / "generated" / "assetPaths.ts").read_text(encoding="utf-8")
    assert "export const logo = '/assets/images/logo.png';" in code


def test_invalid_pattern_fails(web_project: Path) -> None:
    """TC-06: A malformed exclude pattern ends with exit code 1."""
    (web_project / "bad.json").write_text(json.dumps({"excludePatterns": ["("]}), encoding="utf-8")

    result = run_cli(["generate", "-c", "bad.json"], cwd=web_project)

    assert result.returncode == 1
    assert "Invalid exclude pattern" in result.stderr


def test_usage_error_without_command(tmp_path: Path) -> None:
    """TC-07: argparse rejects a missing subcommand with exit code 2."""
    result = run_cli([], cwd=tmp_path)
    assert result.returncode == 2
