from __future__ import annotations

"""
Asset Tree Generator.

Folds a flat list of discovered files into the hierarchical structure the
code emitter renders. With directory grouping, every directory becomes a
nested group named through the same naming strategy as files; without it,
every asset lands at the root. Later insertions under an existing
identifier replace the earlier node.
"""

import logging
from typing import List, Optional, Sequence

from assetlink.core.pipeline.components.filters import is_included
from assetlink.core.pipeline.components.naming import name_for
from assetlink.core.pipeline.components.paths import relativize, split_segments
from assetlink.core.pipeline.components.values import value_for
from assetlink.domain.asset_models import AssetGroup, AssetLeaf
from assetlink.domain.config import AssetConfig

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        file_paths: Sequence[str],
        config: AssetConfig,
        log: Optional[logging.Logger] = None,
) -> AssetGroup:
    """
    Build the asset tree for one generation run.

    Args:
        file_paths: Discovered file paths, processed in the given order.
        config: Active configuration.
        log: Optional logger receiving per-file debug traces.

    Returns:
        AssetGroup: Root group owned exclusively by the caller.
    """
    tree: AssetGroup = {}

    for file_path in file_paths:
        relative_path = relativize(file_path, config.root_dir)

        if not is_included(file_path, relative_path, config):
            if log:
                log.debug(f"Excluded asset: {relative_path}")
            continue

        group_ids = _directory_identifiers(relative_path, config) if config.group_by_directory else []
        leaf_id = name_for(file_path, relative_path, config)
        leaf = AssetLeaf(value=value_for(file_path, relative_path, config))

        _insert(tree, group_ids, leaf_id, leaf)

        if log:
            log.debug(f"Asset '{'.'.join(group_ids + [leaf_id])}' -> {leaf.value}")

    return tree


def count_leaves(tree: AssetGroup) -> int:
    """Count the constants held by a tree, at every depth."""
    total = 0
    for node in tree.values():
        total += count_leaves(node) if isinstance(node, dict) else 1
    return total

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _directory_identifiers(relative_path: str, config: AssetConfig) -> List[str]:
    """
    Name every non-empty directory segment of a relative path.

    A segment is passed as both the path and the relative path, so callback
    mode names directories with the same function as files.
    """
    segments, _ = split_segments(relative_path)
    return [name_for(segment, segment, config) for segment in segments if segment]


def _insert(group: AssetGroup, group_ids: List[str], leaf_id: str, leaf: AssetLeaf) -> None:
    """
    Recursively place a leaf under a chain of group identifiers.

    Missing groups are created; a leaf sitting where a group is needed is
    replaced by a new group. The leaf itself overwrites any node already
    bound to its identifier.
    """
    if not group_ids:
        group[leaf_id] = leaf
        return

    head, rest = group_ids[0], group_ids[1:]
    child = group.get(head)
    if not isinstance(child, dict):
        child = {}
        group[head] = child

    _insert(child, rest, leaf_id, leaf)
