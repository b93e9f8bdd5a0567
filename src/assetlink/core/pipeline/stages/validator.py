from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between raw configuration sources (JSON, YAML,
Python modules, CLI) and the generation core. Handles key aliasing, type
coercion and default injection, then freezes the result into the
AssetConfig tagged union.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from assetlink.domain.config import (
    CALLBACK_FIELDS,
    CONFIG_KEY_ALIASES,
    AssetConfig,
    CallbackNaming,
    NamingStrategy,
    StaticNaming,
    default_exclude_patterns,
    get_default_config,
)
from assetlink.domain.errors import ConfigError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a raw configuration dictionary.

    Accepts both the snake_case keys and the camelCase keys of the
    JSON file format. Fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise ConfigError instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise ConfigError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    # 2. Key Aliasing
    merged: Dict[str, Any] = dict(defaults)
    for key, value in config.items():
        target = CONFIG_KEY_ALIASES.get(key, key)
        if target not in defaults:
            warnings.append(f"Unknown configuration key '{key}' ignored.")
            continue
        merged[target] = value

    # 3. Field Processing & Normalization
    for field in ("root_dir", "output_file"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["variable_prefix"] = _as_prefix(
        merged.get("variable_prefix"), warnings, strict
    )

    for field in ("group_by_directory", "include_extensions_in_names"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["exclude_patterns"] = _as_list_str(
        merged.get("exclude_patterns"), default_exclude_patterns(),
        "exclude_patterns", warnings, strict
    )

    merged["naming_strategy"] = _as_strategy(
        merged.get("naming_strategy"), defaults["naming_strategy"], warnings, strict
    )

    for field in CALLBACK_FIELDS:
        merged[field] = _as_callable(merged.get(field), field, warnings, strict)

    # 4. Mode Consistency
    if merged["path_to_variable_name"] is None:
        orphans = [f for f in CALLBACK_FIELDS[1:] if merged[f] is not None]
        if orphans:
            warnings.append(
                f"Callbacks {', '.join(orphans)} ignored: they require 'path_to_variable_name'."
            )

    return merged, warnings


def build_asset_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[AssetConfig, List[str]]:
    """
    Validate a raw configuration and freeze it into an AssetConfig.

    The naming mode is decided here, once: callback mode when a callable
    'path_to_variable_name' is present, static mode otherwise.

    Args:
        config: Raw configuration data.
        strict: If True, raise ConfigError instead of coercing.

    Returns:
        Tuple[AssetConfig, List[str]]: The immutable configuration and
                                       the validation warnings.
    """
    clean, warnings = validate_config(config, strict=strict)

    if clean["path_to_variable_name"] is not None:
        naming: Any = CallbackNaming(
            path_to_variable_name=clean["path_to_variable_name"],
            transform_path_value=clean["transform_path_value"],
            should_include_file=clean["should_include_file"],
        )
    else:
        naming = StaticNaming(
            naming_strategy=NamingStrategy(clean["naming_strategy"]),
            include_extensions_in_names=clean["include_extensions_in_names"],
            variable_prefix=clean["variable_prefix"],
        )

    asset_config = AssetConfig(
        root_dir=clean["root_dir"],
        output_file=clean["output_file"],
        exclude_patterns=tuple(clean["exclude_patterns"]),
        group_by_directory=clean["group_by_directory"],
        naming=naming,
    )
    return asset_config, warnings


def to_serializable(config: AssetConfig) -> Dict[str, Any]:
    """
    Flatten an AssetConfig into a JSON-friendly dictionary.

    Callbacks are reported by name only.
    """
    out: Dict[str, Any] = {
        "root_dir": config.root_dir,
        "output_file": config.output_file,
        "exclude_patterns": list(config.exclude_patterns),
        "group_by_directory": config.group_by_directory,
        "mode": config.mode.value,
    }
    naming = config.naming
    if isinstance(naming, StaticNaming):
        out["naming_strategy"] = naming.naming_strategy.value
        out["include_extensions_in_names"] = naming.include_extensions_in_names
        out["variable_prefix"] = naming.variable_prefix
    else:
        for field in CALLBACK_FIELDS:
            fn = getattr(naming, field)
            out[field] = getattr(fn, "__name__", repr(fn)) if fn is not None else None
    return out


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _fail(msg: str, warnings: List[str], strict: bool, suffix: str = "Using fallback.") -> None:
    """Raise in strict mode, otherwise record the problem as a warning."""
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} {suffix}")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    _fail(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_prefix(value: Any, warnings: List[str], strict: bool) -> str:
    """Prefixes are used verbatim, so whitespace is not stripped."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value

    _fail(
        f"Invalid field 'variable_prefix': expected str, received {type(value).__name__}.",
        warnings, strict
    )
    return ""


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        # Support numeric coercion (0/1)
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        # Support string coercion (human-friendly keywords)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    _fail(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """
    Ensure input is a list of strings, supporting CSV parsing.

    An explicitly empty list is kept: it disables every exclusion.
    """
    if value is None:
        return list(fallback)

    # Support CSV string to list conversion for CLI compatibility
    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return items

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                if item:
                    out.append(item)
            else:
                _fail(f"Invalid item in '{field}[{i}]': expected str.", warnings, strict, "Item discarded.")
        return out

    _fail(
        f"Invalid field '{field}': expected list[str], received {type(value).__name__}.",
        warnings, strict
    )
    return list(fallback)


def _as_strategy(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Ensure the naming strategy is one of the supported conventions."""
    if value is None:
        return fallback
    if isinstance(value, NamingStrategy):
        return value.value

    allowed = [s.value for s in NamingStrategy]
    if isinstance(value, str) and value.strip() in allowed:
        return value.strip()

    _fail(
        f"Invalid field 'naming_strategy': '{value}' is not one of {', '.join(allowed)}.",
        warnings, strict
    )
    return fallback


def _as_callable(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[Any]:
    """Accept None or a callable; anything else is dropped."""
    if value is None or callable(value):
        return value

    _fail(
        f"Invalid field '{field}': expected a function, received {type(value).__name__}.",
        warnings, strict, "Callback ignored."
    )
    return None
