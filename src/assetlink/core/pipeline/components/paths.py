from __future__ import annotations

"""
Asset Path Normalization.

Expresses discovered file paths relative to the configured asset root,
always with '/' separators regardless of the host platform.
"""

import os
import posixpath
from typing import List, Tuple


def to_posix(path: str) -> str:
    """Replace every backslash separator with a forward slash."""
    return path.replace("\\", "/")


def relativize(file_path: str, root_dir: str) -> str:
    """
    Compute the '/'-separated path of a file relative to the asset root.

    Both paths are compared in absolute form. A relative path that resolves
    (against the cwd) to a location under the root is made relative to it;
    any other relative path is taken as already root-relative and only
    normalized, which keeps the function idempotent. Absolute files outside
    the root produce a '../' prefixed result instead of an error.

    Args:
        file_path: Path supplied by the traversal (usually absolute).
        root_dir: Configured asset root (absolute or relative to the cwd).

    Returns:
        str: Normalized relative path.
    """
    root_abs = os.path.abspath(root_dir)

    if not os.path.isabs(file_path):
        candidate = os.path.abspath(to_posix(file_path))
        if not _is_within(candidate, root_abs):
            rel = posixpath.normpath(to_posix(file_path))
            return "" if rel == "." else rel
        file_path = candidate

    try:
        rel = os.path.relpath(os.path.abspath(file_path), root_abs)
    except ValueError:
        # Different drive on Windows: no relative form exists
        return to_posix(os.path.abspath(file_path))

    rel = to_posix(rel)
    return "" if rel == "." else rel


def split_segments(relative_path: str) -> Tuple[List[str], str]:
    """
    Split a relative path into its directory segments and leaf name.

    Empty segments are kept here; callers decide whether to skip them.
    """
    parts = relative_path.split("/")
    leaf = parts.pop() if parts else ""
    return parts, leaf


def _is_within(path: str, root_abs: str) -> bool:
    """Check whether an absolute path is the root or lies below it."""
    try:
        return os.path.commonpath([path, root_abs]) == root_abs
    except ValueError:
        return False
