from __future__ import annotations

"""
Identifier Naming Strategies.

Turns file and directory names into identifiers for the generated module.
Static mode applies a fixed pipeline (extension stripping, character
substitution, case conversion, prefixing); callback mode hands the decision
to the user's function and trusts its output.
"""

import posixpath
import re
from typing import Callable, Dict

from assetlink.domain.config import AssetConfig, NamingMode, NamingStrategy, StaticNaming

# -----------------------------------------------------------------------------
# REGEX CONSTANTS
# -----------------------------------------------------------------------------

_EXTENSION_RX = re.compile(r"\.[^/.]+\Z")
_INVALID_CHARS_RX = re.compile(r"[^a-zA-Z0-9_]")

# -----------------------------------------------------------------------------
# CASE CONVERSION
# -----------------------------------------------------------------------------

def _capitalize(part: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return part[:1].upper() + part[1:].lower()


def to_camel_case(processed: str) -> str:
    parts = processed.split("_")
    return parts[0].lower() + "".join(_capitalize(p) for p in parts[1:])


def to_pascal_case(processed: str) -> str:
    return "".join(_capitalize(p) for p in processed.split("_"))


def to_snake_case(processed: str) -> str:
    # Underscores from character substitution are kept as separators
    return processed.lower()


_CASE_CONVERTERS: Dict[NamingStrategy, Callable[[str], str]] = {
    NamingStrategy.CAMEL_CASE: to_camel_case,
    NamingStrategy.PASCAL_CASE: to_pascal_case,
    NamingStrategy.SNAKE_CASE: to_snake_case,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def static_name(relative_path: str, naming: StaticNaming) -> str:
    """
    Derive an identifier from the final component of a path.

    Args:
        relative_path: Root-relative path (or a bare segment).
        naming: Static naming rules.

    Returns:
        str: The identifier; empty when nothing survives the processing.
    """
    processed = posixpath.basename(relative_path)

    if not naming.include_extensions_in_names:
        processed = _EXTENSION_RX.sub("", processed)

    processed = _INVALID_CHARS_RX.sub("_", processed)
    identifier = _CASE_CONVERTERS[naming.naming_strategy](processed)

    if naming.variable_prefix:
        identifier = naming.variable_prefix + identifier

    return identifier


def name_for(path: str, relative_path: str, config: AssetConfig) -> str:
    """
    Compute the identifier for a file or directory segment.

    Args:
        path: Original path (or the segment itself for directories).
        relative_path: Root-relative form of the same path.
        config: Active configuration.

    Returns:
        str: The identifier to bind.
    """
    naming = config.naming
    if naming.mode is NamingMode.CALLBACK:
        return naming.path_to_variable_name(path, relative_path)
    return static_name(relative_path, naming)
