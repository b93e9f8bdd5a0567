from __future__ import annotations

"""
Configuration File Loader.

Reads a configuration file (JSON, YAML, or a Python module able to carry
callbacks), validates it, and freezes it into an AssetConfig. Any failure
to read or evaluate the file is logged and answered with the default
configuration, so the generation core never sees a malformed one.
"""

import importlib.util
import json
import logging
import os
import sys
from typing import Any, Dict, Optional

import yaml

from assetlink.core.pipeline.stages.validator import build_asset_config
from assetlink.domain.config import AssetConfig, get_default_asset_config, get_default_config
from assetlink.domain.constants import CONFIG_TEMPLATE_NAMES

logger = logging.getLogger(__name__)

# Attribute names looked up in Python configuration modules, in order
_MODULE_CONFIG_ATTRS = ("config", "CONFIG")


# ==============================================================================
# PUBLIC API
# ==============================================================================

def load_config(config_path: str) -> AssetConfig:
    """
    Load the configuration stored at the given path.

    Args:
        config_path: Path to a .json, .yaml/.yml or .py configuration file,
                     relative to the current working directory.

    Returns:
        AssetConfig: The validated configuration, or the default one if
                     the file is missing or cannot be loaded.
    """
    config_file = os.path.abspath(config_path)

    if not os.path.isfile(config_file):
        logger.warning(f"Configuration file not found at {config_file}, using default configuration.")
        return get_default_asset_config()

    try:
        raw = read_raw_config(config_file)
    except Exception as e:
        logger.error(f"Error loading configuration file {config_file}: {e}")
        logger.warning("Using default configuration.")
        return get_default_asset_config()

    config, warnings = build_asset_config(raw)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    logger.debug(f"Loaded {config.mode.value} configuration from {config_file}")
    return config


def read_raw_config(config_file: str) -> Dict[str, Any]:
    """
    Parse a configuration file into a raw dictionary.

    Raises:
        ValueError: If the file does not describe a mapping.
        OSError, json.JSONDecodeError, yaml.YAMLError: On read/parse errors.
        Exception: Whatever a Python configuration module raises.
    """
    _, ext = os.path.splitext(config_file)
    ext = ext.lower()

    if ext == ".py":
        data = _load_python_module(config_file)
    elif ext in (".yaml", ".yml"):
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    else:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping, got {type(data).__name__}")
    return data


def write_config_template(directory: str, fmt: str = "json") -> Optional[str]:
    """
    Create a starter configuration file for the 'init' command.

    Args:
        directory: Target directory.
        fmt: One of 'json', 'yaml' or 'python'.

    Returns:
        Optional[str]: The created file path, or None if it already exists.
    """
    if fmt not in CONFIG_TEMPLATE_NAMES:
        raise ValueError(f"Unknown configuration format: {fmt}")

    config_file = os.path.join(os.path.abspath(directory), CONFIG_TEMPLATE_NAMES[fmt])
    if os.path.exists(config_file):
        logger.info(f"Configuration file already exists: {config_file}")
        return None

    defaults = _template_defaults()
    if fmt == "json":
        content = json.dumps(defaults, indent=2) + "\n"
    elif fmt == "yaml":
        content = yaml.safe_dump(defaults, sort_keys=False)
    else:
        content = PYTHON_CONFIG_TEMPLATE

    os.makedirs(os.path.dirname(config_file), exist_ok=True)
    with open(config_file, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info(f"Configuration file created at {config_file}")
    return config_file


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _template_defaults() -> Dict[str, Any]:
    """Default configuration without the callback-only keys."""
    return {k: v for k, v in get_default_config().items() if v is not None}


def _load_python_module(config_file: str) -> Any:
    """
    Execute a Python configuration file as a fresh, unregistered module.

    The module is never added to sys.modules and no bytecode is cached for
    it, so edits are always picked up.

    Raises:
        ImportError: If no loader can be created for the file.
    """
    spec = importlib.util.spec_from_file_location("_assetlink_config", config_file)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load configuration module {config_file}")
    module = importlib.util.module_from_spec(spec)

    dont_write = sys.dont_write_bytecode
    sys.dont_write_bytecode = True
    try:
        spec.loader.exec_module(module)
    finally:
        sys.dont_write_bytecode = dont_write

    for attr in _MODULE_CONFIG_ATTRS:
        if hasattr(module, attr):
            return _as_mapping(getattr(module, attr))

    raise ValueError(f"No 'config' object defined in {config_file}")


def _as_mapping(obj: Any) -> Any:
    """Turn a config object into a dictionary of its public attributes."""
    if obj is None or isinstance(obj, (dict, str, bytes, int, float, list, tuple)):
        return obj
    return {name: getattr(obj, name) for name in dir(obj) if not name.startswith("_")}


PYTHON_CONFIG_TEMPLATE = '''"""
assetlink configuration with custom callbacks.
"""

import os


def path_to_variable_name(file_path, relative_path):
    # Example: convert 'my-awesome-image.png' to 'myAwesomeImage'
    name = os.path.splitext(os.path.basename(relative_path))[0]
    parts = "".join(c if c.isalnum() or c == "_" else "_" for c in name).split("_")
    return parts[0].lower() + "".join(p[:1].upper() + p[1:].lower() for p in parts[1:])


def transform_path_value(file_path, relative_path):
    # Example: serve assets from '/assets/' instead of '/'
    return "/assets/" + relative_path


def should_include_file(file_path, relative_path):
    # Example: skip source maps
    return not relative_path.endswith(".map")


config = {
    "root_dir": "./public",
    "output_file": "./src/generated/assetPaths.ts",
    "exclude_patterns": [r"(^|/)\\.", r"(^|/)node_modules/"],
    "group_by_directory": True,
    "path_to_variable_name": path_to_variable_name,
    "transform_path_value": transform_path_value,
    "should_include_file": should_include_file,
}
'''
