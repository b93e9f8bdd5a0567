from __future__ import annotations

"""
Domain Constants.

Centralized tool identity, configuration file names, and the fixed header
that prefixes every generated asset module.
"""

from typing import Dict

APP_NAME = "assetlink"
APP_VERSION = "1.0.0"

DEFAULT_CONFIG_FILE = "./asset-link.config.json"

# Template file names written by the 'init' command, keyed by format
CONFIG_TEMPLATE_NAMES: Dict[str, str] = {
    "json": "asset-link.config.json",
    "yaml": "asset-link.config.yaml",
    "python": "asset-link.config.py",
}

GENERATED_HEADER = (
    "/**\n"
    f" * This file is auto-generated by {APP_NAME}.\n"
    " * Do not edit this file directly.\n"
    " */\n"
    "\n"
)

INDENT_WIDTH = 2
