from __future__ import annotations

"""
Asset Value Transformation.

Computes the string bound to each generated constant.
"""

from assetlink.domain.config import AssetConfig, NamingMode


def default_value(relative_path: str) -> str:
    """Public URL of an asset served from the root: '/' + relative path."""
    return "/" + relative_path


def value_for(path: str, relative_path: str, config: AssetConfig) -> str:
    """
    Compute the value bound to an asset identifier.

    Callback mode defers to transform_path_value when one is configured;
    every other case uses the default public URL rule.
    """
    naming = config.naming
    if naming.mode is NamingMode.CALLBACK and naming.transform_path_value is not None:
        return naming.transform_path_value(path, relative_path)
    return default_value(relative_path)
