from __future__ import annotations

"""
Asset Watcher: mtime polling with regeneration on change.

Takes a snapshot (path -> mtime) of the asset root every poll interval and
compares it with the previous one. Any added, removed or modified file
triggers exactly one regeneration for that poll cycle, no matter how many
files changed, so a burst of edits is debounced into a single run. Runs
happen inline on the polling thread and never overlap.
"""

import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from assetlink.core.pipeline.engine import run_generation
from assetlink.core.services.scanner import list_asset_files
from assetlink.domain.config import AssetConfig
from assetlink.domain.pipeline_models import GenerationResult

logger = logging.getLogger(__name__)

POLL_INTERVAL_S = 1.0

Snapshot = Dict[str, float]


@dataclass
class SnapshotDiff:
    """Files that differ between two snapshots."""
    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    changed: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.added or self.removed or self.changed)


def take_snapshot(root_dir: str) -> Snapshot:
    """
    Record the modification time of every visible file under the root.

    Files that vanish between listing and stat() are skipped.
    """
    snapshot: Snapshot = {}
    for path in list_asset_files(root_dir):
        try:
            snapshot[path] = os.stat(path).st_mtime
        except OSError:
            continue
    return snapshot


def diff_snapshots(old: Snapshot, new: Snapshot) -> SnapshotDiff:
    """Compare two snapshots; every list in the result is sorted."""
    return SnapshotDiff(
        added=sorted(p for p in new if p not in old),
        removed=sorted(p for p in old if p not in new),
        changed=sorted(p for p in new if p in old and new[p] != old[p]),
    )


def watch(
        config: AssetConfig,
        *,
        interval: float = POLL_INTERVAL_S,
        stop_event: Optional[threading.Event] = None,
        max_cycles: Optional[int] = None,
        on_result: Optional[Callable[[GenerationResult], None]] = None,
) -> None:
    """
    Generate once, then regenerate whenever the asset root changes.

    Runs until stop_event is set or max_cycles poll cycles have elapsed.
    A failed run is logged and watching continues.

    Args:
        config: The resolved configuration.
        interval: Seconds between poll cycles.
        stop_event: Optional event ending the loop when set.
        max_cycles: Optional limit on poll cycles (None = unbounded).
        on_result: Optional observer receiving every generation result.
    """
    stop = stop_event or threading.Event()
    root_dir = config.root_dir

    logger.info(f"Watching for changes in {root_dir} (poll every {interval:.1f}s)")

    previous = take_snapshot(root_dir)
    _regenerate(config, on_result)

    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        if stop.wait(interval):
            break
        cycles += 1

        current = take_snapshot(root_dir)
        diff = diff_snapshots(previous, current)
        previous = current

        if not diff:
            continue

        logger.info(
            f"Change detected: {len(diff.added)} added, "
            f"{len(diff.removed)} removed, {len(diff.changed)} changed"
        )
        _regenerate(config, on_result)

    logger.info("Watcher stopped.")


def _regenerate(
        config: AssetConfig,
        on_result: Optional[Callable[[GenerationResult], None]],
) -> GenerationResult:
    """Run one generation and report it to the observer."""
    result = run_generation(config)
    if not result.ok:
        logger.error(f"Regeneration failed: {result.error}")
    if on_result:
        on_result(result)
    return result
