from __future__ import annotations

"""
Asset Module Renderer.

Converts an asset tree into TypeScript source: one 'export const' per
leaf, one 'export namespace' block per group, two spaces of indentation
per nesting level, in insertion order.
"""

from typing import List

from assetlink.domain.asset_models import AssetGroup, AssetLeaf
from assetlink.domain.constants import GENERATED_HEADER, INDENT_WIDTH

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render(tree: AssetGroup) -> str:
    """
    Render an asset tree as a complete module.

    Values are wrapped in single quotes without escaping; a value holding
    a quote character yields invalid TypeScript.

    Args:
        tree: Root group of the asset tree.

    Returns:
        str: Header comment followed by the declarations.
    """
    lines: List[str] = []
    render_tree_structure(tree, lines)
    return GENERATED_HEADER + "".join(lines)


def render_tree_structure(tree: AssetGroup, lines: List[str], depth: int = 0) -> None:
    """
    Recursively append the declarations of one group to an accumulator.

    Args:
        tree: Group to render.
        lines: Accumulator of newline-terminated output lines.
        depth: Nesting level of the group.
    """
    indent = " " * (depth * INDENT_WIDTH)

    for identifier, node in tree.items():
        # Scenario A: Node is a Group (Dictionary)
        if isinstance(node, dict):
            lines.append(f"{indent}export namespace {identifier} {{\n")
            render_tree_structure(node, lines, depth + 1)
            lines.append(f"{indent}}}\n")
            continue

        # Scenario B: Node is an asset (AssetLeaf)
        if isinstance(node, AssetLeaf):
            lines.append(f"{indent}export const {identifier} = '{node.value}';\n")
