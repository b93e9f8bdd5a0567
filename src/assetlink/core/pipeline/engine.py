from __future__ import annotations

"""
Core generation pipeline.

This module coordinates one complete generation run:
1. Resolves the asset root and the output destination.
2. Discovers the asset files.
3. Builds and renders the asset tree.
4. Writes the module atomically (skipped in dry-run mode).

Any failure, including exceptions raised by user callbacks, ends the run
with an error result and leaves the output file untouched.
"""

import dataclasses
import logging
import os

from assetlink.core.analysis.tree_generator import build_tree, count_leaves
from assetlink.core.analysis.tree_renderer import render
from assetlink.core.pipeline.components.writer import output_is_current, write_output
from assetlink.core.services.scanner import list_asset_files
from assetlink.domain.config import AssetConfig
from assetlink.domain.pipeline_models import (
    GenerationResult,
    create_error_result,
    create_success_result,
)
from assetlink.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_generation(
        config: AssetConfig,
        *,
        dry_run: bool = False,
) -> GenerationResult:
    """
    Execute a full scan-generate-write cycle.

    Args:
        config: The resolved configuration.
        dry_run: If True, generate the code without writing it.

    Returns:
        GenerationResult: Object containing status, metrics and the code.
    """
    logger.info("Generation started.")

    # -------------------------------------------------------------------------
    # 1) Path Normalization
    # -------------------------------------------------------------------------
    cwd = os.getcwd()
    root_dir = normalize_path(config.root_dir, cwd)
    output_file = normalize_path(config.output_file, cwd)
    run_config = dataclasses.replace(config, root_dir=root_dir, output_file=output_file)

    # -------------------------------------------------------------------------
    # 2) Discovery
    # -------------------------------------------------------------------------
    logger.info(f"Scanning for assets in: {root_dir}")
    files = list_asset_files(root_dir)
    logger.info(f"Found {len(files)} files to process")
    if files:
        logger.debug(f"Sample file: {files[0]}")

    # -------------------------------------------------------------------------
    # 3) Tree Construction & Rendering
    # -------------------------------------------------------------------------
    try:
        tree = build_tree(files, run_config, log=logger)
        code = render(tree)
    except Exception as e:
        msg = f"Asset generation failed: {type(e).__name__}: {e}"
        logger.error(msg, exc_info=True)
        return create_error_result(msg, root_dir, output_file, len(files), dry_run)

    assets = count_leaves(tree)
    summary = {
        "mode": run_config.mode.value,
        "group_by_directory": run_config.group_by_directory,
        "unchanged": False,
    }

    # -------------------------------------------------------------------------
    # 4) Persistence
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info("Dry run: Skipping write of the generated module.")
        return create_success_result(
            root_dir, output_file, code, len(files), assets, written=False,
            dry_run=True, summary_extra=summary
        )

    try:
        if output_is_current(output_file, code):
            summary["unchanged"] = True
            logger.info(f"Asset paths file already up to date: {output_file}")
            written = False
        else:
            write_output(output_file, code)
            logger.info(f"Generated asset paths file at: {output_file}")
            written = True
    except OSError as e:
        msg = f"Failed to write output file {output_file}: {e}"
        logger.error(msg)
        return create_error_result(msg, root_dir, output_file, len(files), dry_run)

    return create_success_result(
        root_dir, output_file, code, len(files), assets, written=written,
        summary_extra=summary
    )
