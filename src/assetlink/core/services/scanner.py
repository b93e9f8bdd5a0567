from __future__ import annotations

"""
Asset Discovery Service.

Walks the asset root and lists every file it holds. Directory listing
order varies across platforms, so the result is sorted to keep generated
output identical between runs.
"""

import logging
import os
from typing import List

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def list_asset_files(root_dir: str, *, include_hidden: bool = False) -> List[str]:
    """
    Collect the absolute paths of all files under the asset root.

    Hidden entries (names starting with '.') are pruned unless requested,
    both for files and for whole directories.

    Args:
        root_dir: Asset root directory.
        include_hidden: Whether dotfiles and dot-directories are listed.

    Returns:
        List[str]: Sorted absolute file paths; empty if the root is missing.
    """
    root_abs = os.path.abspath(root_dir)
    if not os.path.isdir(root_abs):
        logger.warning(f"Asset directory not found: {root_abs}")
        return []

    found: List[str] = []
    for root, dirs, files in os.walk(root_abs):
        # In-place directory pruning to optimize traversal
        if not include_hidden:
            dirs[:] = [d for d in dirs if not d.startswith(".")]
        dirs.sort()

        for file_name in sorted(files):
            if not include_hidden and file_name.startswith("."):
                continue
            found.append(os.path.join(root, file_name))

    found.sort()
    logger.debug(f"Found {len(found)} files under {root_abs}")
    return found
