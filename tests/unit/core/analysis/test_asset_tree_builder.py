from __future__ import annotations

"""
Unit tests for the Asset Tree Generator.

Verifies:
1. Directory grouping versus flat layout.
2. Last-writer-wins on identifier collisions.
3. Replacement of a leaf by a group when a directory reuses its name.
4. Callback-mode naming of directories and files alike.
"""

import logging
from unittest.mock import MagicMock

import pytest

from assetlink.core.analysis.tree_generator import build_tree, count_leaves
from assetlink.domain.asset_models import AssetLeaf
from assetlink.domain.config import AssetConfig, CallbackNaming, NamingStrategy, StaticNaming


def _config(**kwargs) -> AssetConfig:
    base = {"root_dir": "/site/public", "output_file": "/site/out.ts"}
    base.update(kwargs)
    return AssetConfig(**base)

# -----------------------------------------------------------------------------
# STRUCTURE
# -----------------------------------------------------------------------------

def test_grouped_tree_mirrors_directories() -> None:
    """TC-01: Each directory becomes a nested group."""
    tree = build_tree(
        ["/site/public/favicon.ico", "/site/public/images/icons/home.svg"],
        _config(),
    )

    assert tree == {
        "favicon": AssetLeaf("/favicon.ico"),
        "images": {"icons": {"home": AssetLeaf("/images/icons/home.svg")}},
    }


def test_flat_tree_without_grouping() -> None:
    """TC-02: All assets land at the root; values keep the full path."""
    tree = build_tree(
        ["images/logo.png", "fonts/inter.woff2"],
        _config(group_by_directory=False),
    )

    assert tree == {
        "logo": AssetLeaf("/images/logo.png"),
        "inter": AssetLeaf("/fonts/inter.woff2"),
    }


def test_insertion_order_follows_input() -> None:
    """TC-03: Keys appear in the order files were supplied."""
    tree = build_tree(["b.png", "a.png", "c.png"], _config())
    assert list(tree) == ["b", "a", "c"]


def test_empty_input_gives_empty_tree() -> None:
    """TC-04: No files, no nodes."""
    assert build_tree([], _config()) == {}

# -----------------------------------------------------------------------------
# COLLISIONS
# -----------------------------------------------------------------------------

def test_collision_last_writer_wins_and_keeps_position() -> None:
    """TC-05: 'logo.png' then 'logo.svg' bind 'logo' to the later value."""
    tree = build_tree(["logo.png", "banner.png", "logo.svg"], _config())

    assert tree["logo"] == AssetLeaf("/logo.svg")
    assert list(tree) == ["logo", "banner"]
    assert count_leaves(tree) == 2


def test_leaf_replaced_by_group_of_same_name() -> None:
    """TC-06: A directory sharing a file's identifier replaces the leaf."""
    tree = build_tree(["logo.png", "logo/dark.png"], _config())

    assert tree == {"logo": {"dark": AssetLeaf("/logo/dark.png")}}


def test_group_replaced_by_later_leaf() -> None:
    """TC-07: A later file sharing a group's identifier replaces the group."""
    tree = build_tree(["logo/dark.png", "logo.png"], _config())

    assert tree == {"logo": AssetLeaf("/logo.png")}


def test_constant_callback_collapses_tree() -> None:
    """TC-08: A callback returning one name for everything leaves a single node."""
    naming = CallbackNaming(path_to_variable_name=lambda path, rel: "x")
    tree = build_tree(["a/b.png", "c.png"], _config(naming=naming))

    assert tree == {"x": AssetLeaf("/c.png")}

# -----------------------------------------------------------------------------
# NAMING AND FILTERING INTEGRATION
# -----------------------------------------------------------------------------

def test_directories_named_with_strategy() -> None:
    """TC-09: Directory segments use the configured case convention."""
    naming = StaticNaming(naming_strategy=NamingStrategy.PASCAL_CASE, variable_prefix="A")
    tree = build_tree(["hero-images/big-one.jpg"], _config(naming=naming))

    assert tree == {"AHeroImages": {"ABigOne": AssetLeaf("/hero-images/big-one.jpg")}}


def test_callback_receives_segment_for_directories() -> None:
    """TC-10: Directory segments are passed as both path and relative path."""
    to_name = MagicMock(side_effect=lambda path, rel: rel.split("/")[-1].split(".")[0])
    naming = CallbackNaming(path_to_variable_name=to_name)

    tree = build_tree(["/site/public/img/a.png"], _config(naming=naming))

    assert tree == {"img": {"a": AssetLeaf("/img/a.png")}}
    assert to_name.call_args_list[0].args == ("img", "img")
    assert to_name.call_args_list[1].args == ("/site/public/img/a.png", "img/a.png")


def test_excluded_files_are_skipped_and_logged() -> None:
    """TC-11: Excluded files produce no node and a debug trace."""
    log = MagicMock(spec=logging.Logger)
    tree = build_tree(["a.png", "a.js.map"], _config(exclude_patterns=("*.map",)), log=log)

    assert tree == {"a": AssetLeaf("/a.png")}
    messages = [call.args[0] for call in log.debug.call_args_list]
    assert any("Excluded asset: a.js.map" in m for m in messages)


def test_doubled_separators_do_not_create_empty_groups() -> None:
    """TC-12: Empty segments are ignored when grouping."""
    tree = build_tree(["img//a.png"], _config())
    assert tree == {"img": {"a": AssetLeaf("/img/a.png")}}


def test_count_leaves_counts_nested_constants() -> None:
    tree = {"a": AssetLeaf("/a"), "g": {"b": AssetLeaf("/g/b"), "h": {"c": AssetLeaf("/g/h/c")}}}
    assert count_leaves(tree) == 3


def test_names_differing_only_in_spelling_collide() -> None:
    """TC-13: 'My File.png' and 'my_file.png' both become 'myFile'."""
    tree = build_tree(["My File.png", "my_file.png"], _config())
    assert tree == {"myFile": AssetLeaf("/my_file.png")}


def test_sibling_directories_become_sibling_namespaces() -> None:
    """TC-14: 'images/icon.png' and 'docs/readme.md' give two groups."""
    tree = build_tree(["images/icon.png", "docs/readme.md"], _config())
    assert list(tree) == ["images", "docs"]
    assert tree["docs"] == {"readme": AssetLeaf("/docs/readme.md")}


def test_callback_error_propagates_from_build_tree() -> None:
    """TC-15: A failing naming callback aborts the build with its own exception."""
    def to_name(path: str, rel: str) -> str:
        raise RuntimeError("naming failed")

    naming = CallbackNaming(path_to_variable_name=to_name)

    with pytest.raises(RuntimeError, match="naming failed"):
        build_tree(["images/logo.png"], _config(naming=naming))
