from __future__ import annotations

"""
Generation Result Data Models.

Defines the result structure and factory functions used to report a
generation run from the engine to the interface layer (CLI and watcher).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a complete generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root_dir: Absolute asset directory that was scanned.
        output_file: Absolute destination of the generated module.
        files_found: Number of files returned by the scanner.
        assets_generated: Number of constants in the generated module.
        code: Generated module text (empty on failure).
        written: Whether the output file was written.
        dry_run: Whether writing was skipped on request.
        summary: Additional execution metadata.
    """
    ok: bool
    error: str

    root_dir: str
    output_file: str

    files_found: int = 0
    assets_generated: int = 0
    code: str = ""
    written: bool = False
    dry_run: bool = False

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        root_dir: str,
        output_file: str = "",
        files_found: int = 0,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None
) -> GenerationResult:
    """
    Create a failed generation result.

    Args:
        error: Detailed error description.
        root_dir: The scanned asset directory.
        output_file: Calculated output destination.
        files_found: Files discovered before the failure.
        dry_run: Whether the run was a simulation.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        GenerationResult: An immutable error result object.
    """
    return GenerationResult(
        ok=False,
        error=error,
        root_dir=root_dir,
        output_file=output_file,
        files_found=files_found,
        dry_run=dry_run,
        summary=summary_extra or {},
    )


def create_success_result(
        root_dir: str,
        output_file: str,
        code: str,
        files_found: int,
        assets_generated: int,
        written: bool,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None
) -> GenerationResult:
    """
    Create a successful generation result.

    Args:
        root_dir: The scanned asset directory.
        output_file: Destination of the generated module.
        code: Generated module text.
        files_found: Files discovered by the scanner.
        assets_generated: Constants emitted into the module.
        written: Whether the module reached the disk.
        dry_run: Whether the run was a simulation.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        GenerationResult: An immutable success result object.
    """
    return GenerationResult(
        ok=True,
        error="",
        root_dir=root_dir,
        output_file=output_file,
        files_found=files_found,
        assets_generated=assets_generated,
        code=code,
        written=written,
        dry_run=dry_run,
        summary=summary_extra or {},
    )
