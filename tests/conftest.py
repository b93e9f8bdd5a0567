from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for raw configuration dictionaries and asset trees.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete raw configuration dictionary for testing.

    Reflects the structure defined in 'assetlink.domain.config'.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        # IO Paths
        "root_dir": "/tmp/test_public",
        "output_file": "/tmp/test_out/assetPaths.ts",

        # Filtering & Structure
        "exclude_patterns": [r"(^|/)\."],
        "group_by_directory": True,

        # Static Naming
        "naming_strategy": "camelCase",
        "include_extensions_in_names": False,
        "variable_prefix": "",
    }


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    """
    Create a small static asset directory.

    Structure:
    /public
      favicon.ico
      /images
        logo.png
        my-icon.svg
      /fonts
        inter.woff2
      .DS_Store
    """
    root = tmp_path / "public"
    (root / "images").mkdir(parents=True)
    (root / "fonts").mkdir()

    (root / "favicon.ico").write_bytes(b"\x00")
    (root / "images" / "logo.png").write_bytes(b"\x89PNG")
    (root / "images" / "my-icon.svg").write_text("<svg/>", encoding="utf-8")
    (root / "fonts" / "inter.woff2").write_bytes(b"wOF2")
    (root / ".DS_Store").write_bytes(b"")

    return root
