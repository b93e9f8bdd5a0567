from __future__ import annotations

"""
Asset Tree Data Models.

Recursive structure produced by the grouping engine and consumed by the
code emitter. Groups are plain insertion-ordered dictionaries; leaves are
small immutable records.
"""

from dataclasses import dataclass
from typing import Dict, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AssetLeaf:
    """
    Represents one asset binding in the tree.

    Attributes:
        value: String bound to the identifier in the generated module.
    """
    value: str

AssetNode = Union["AssetGroup", AssetLeaf]
AssetGroup = Dict[str, AssetNode]
