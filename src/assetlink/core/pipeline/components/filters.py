from __future__ import annotations

"""
Asset Inclusion Filtering.

Implements the two-stage inclusion decision: exclude patterns first, then
the optional user predicate of callback mode. Exclude patterns use a
small glob dialect: every '*' becomes '.*' and the result is
searched as a regular expression anywhere in the relative path. Nothing
else is escaped, so '.' keeps its regex meaning and '**' spans directory
separators.
"""

import re
from functools import lru_cache
from typing import Iterable, List

from assetlink.domain.config import AssetConfig, NamingMode
from assetlink.domain.errors import InvalidPatternError

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def glob_to_regex(pattern: str) -> str:
    """
    Translate an exclude pattern into its regular expression source.

    Args:
        pattern: Raw exclude pattern.

    Returns:
        str: Regex source with each '*' expanded to '.*'.
    """
    return pattern.replace("*", ".*")


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern:
    """
    Compile one exclude pattern.

    Raises:
        InvalidPatternError: If the translated pattern is not a valid regex.
    """
    try:
        return re.compile(glob_to_regex(pattern))
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Compile a list of exclude patterns.

    Malformed patterns are not skipped: the first one aborts with
    InvalidPatternError.
    """
    return [compile_pattern(p) for p in patterns]


def matches_any(relative_path: str, patterns: Iterable[str]) -> bool:
    """
    Verify if a relative path matches at least one exclude pattern.

    Patterns are compiled lazily, one at a time, and evaluation stops at
    the first match.
    """
    return any(compile_pattern(p).search(relative_path) for p in patterns)

# -----------------------------------------------------------------------------
# INCLUSION DECISION
# -----------------------------------------------------------------------------

def is_included(path: str, relative_path: str, config: AssetConfig) -> bool:
    """
    Decide whether a file takes part in generation.

    Args:
        path: Original file path.
        relative_path: Root-relative form of the path.
        config: Active configuration.

    Returns:
        bool: False when an exclude pattern matches (the user predicate is
              then never called); otherwise the user predicate's answer in
              callback mode, or True.
    """
    if matches_any(relative_path, config.exclude_patterns):
        return False

    naming = config.naming
    if naming.mode is NamingMode.CALLBACK and naming.should_include_file is not None:
        return bool(naming.should_include_file(path, relative_path))

    return True
