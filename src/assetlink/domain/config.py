from __future__ import annotations

"""
Configuration Domain Models.

Defines the immutable configuration consumed by the generation core. The
naming behavior is a tagged union: a configuration carries either a
StaticNaming (fixed case convention) or a CallbackNaming (user functions),
and the choice is fixed once, when the configuration is built.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# Callback Signatures
# -----------------------------------------------------------------------------
NameFn = Callable[[str, str], str]
ValueFn = Callable[[str, str], str]
IncludeFn = Callable[[str, str], bool]


class NamingMode(str, Enum):
    """Discriminant of the naming union."""
    STATIC = "static"
    CALLBACK = "callback"


class NamingStrategy(str, Enum):
    """Case conventions available in static mode."""
    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "PascalCase"
    SNAKE_CASE = "snake_case"


# -----------------------------------------------------------------------------
# Naming Variants
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class StaticNaming:
    """
    Rule-based naming driven by plain configuration values.

    Attributes:
        naming_strategy: Case convention applied to every identifier.
        include_extensions_in_names: Keep the file extension in the name.
        variable_prefix: Text prepended verbatim to every identifier.
    """
    naming_strategy: NamingStrategy = NamingStrategy.CAMEL_CASE
    include_extensions_in_names: bool = False
    variable_prefix: str = ""
    mode: NamingMode = field(default=NamingMode.STATIC, init=False)


@dataclass(frozen=True)
class CallbackNaming:
    """
    Naming, value and inclusion decisions delegated to user functions.

    Every function receives (path, relative_path).

    Attributes:
        path_to_variable_name: Produces the identifier; output used as-is.
        transform_path_value: Optional producer of the bound value.
        should_include_file: Optional inclusion predicate, consulted only
            after the exclude patterns let a file through.
    """
    path_to_variable_name: NameFn
    transform_path_value: Optional[ValueFn] = None
    should_include_file: Optional[IncludeFn] = None
    mode: NamingMode = field(default=NamingMode.CALLBACK, init=False)


Naming = Union[StaticNaming, CallbackNaming]


@dataclass(frozen=True)
class AssetConfig:
    """
    Fully resolved, read-only configuration of one generation run.

    Attributes:
        root_dir: Directory holding the assets.
        output_file: Destination of the generated module.
        exclude_patterns: Patterns removing files from the output.
        group_by_directory: Mirror directories as nested namespaces.
        naming: Static or callback naming variant.
    """
    root_dir: str
    output_file: str
    exclude_patterns: Tuple[str, ...] = ()
    group_by_directory: bool = True
    naming: Naming = field(default_factory=StaticNaming)

    @property
    def mode(self) -> NamingMode:
        return self.naming.mode


# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------
DEFAULT_ROOT_DIR = "./public"
DEFAULT_OUTPUT_FILE = "./src/generated/assetPaths.ts"

# Key aliases of the camelCase configuration file format
CONFIG_KEY_ALIASES: Dict[str, str] = {
    "publicDir": "root_dir",
    "rootDir": "root_dir",
    "outputFile": "output_file",
    "excludePatterns": "exclude_patterns",
    "groupByDirectory": "group_by_directory",
    "namingStrategy": "naming_strategy",
    "includeExtensionsInNames": "include_extensions_in_names",
    "variablePrefix": "variable_prefix",
    "pathToVariableName": "path_to_variable_name",
    "transformPathValue": "transform_path_value",
    "shouldIncludeFile": "should_include_file",
}

CALLBACK_FIELDS: Tuple[str, ...] = (
    "path_to_variable_name",
    "transform_path_value",
    "should_include_file",
)


def default_exclude_patterns() -> List[str]:
    """
    Get the default exclusion patterns.

    Patterns go through a plain '*' to '.*' expansion before being used
    as regular expressions, so these are written without '*': dotfiles and
    dot-directories at any depth, and anything under node_modules.
    """
    return [r"(^|/)\.", r"(^|/)node_modules/"]


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default raw configuration.

    Returns:
        Dict[str, Any]: Default values keyed by snake_case field name.
    """
    return {
        "root_dir": DEFAULT_ROOT_DIR,
        "output_file": DEFAULT_OUTPUT_FILE,
        "exclude_patterns": default_exclude_patterns(),
        "group_by_directory": True,

        # Static naming
        "naming_strategy": NamingStrategy.CAMEL_CASE.value,
        "include_extensions_in_names": False,
        "variable_prefix": "",

        # Callback naming
        "path_to_variable_name": None,
        "transform_path_value": None,
        "should_include_file": None,
    }


def get_default_asset_config() -> AssetConfig:
    """Build the default configuration in static mode."""
    raw = get_default_config()
    return AssetConfig(
        root_dir=raw["root_dir"],
        output_file=raw["output_file"],
        exclude_patterns=tuple(raw["exclude_patterns"]),
        group_by_directory=raw["group_by_directory"],
        naming=StaticNaming(),
    )
