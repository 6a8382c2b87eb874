"""Inventory scan orchestration.

Ties the pipeline together::

    acquisition -> discovery -> (per file) extraction -> aggregation

``InventoryScanner`` scans a directory; ``scan_source`` dispatches on a
``ScanConfig`` to the local, remote or bare acquisition mode.

Files are read and extracted independently, optionally on a thread pool.
Per-file results are collected in discovery order and merged once at the
end, so no state is shared between workers. A file that cannot be read is
skipped with a warning; only a missing root or a failed clone aborts the
scan.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from mcpscout.acquisition import DEFAULT_CLONE_TIMEOUT, clone_repository
from mcpscout.config import ScanConfig, SourceMode
from mcpscout.exceptions import FileReadSkipped
from mcpscout.inventory.aggregator import merge_inventories
from mcpscout.inventory.discovery import iter_source_files, read_source_file
from mcpscout.inventory.extractor import extract_declarations
from mcpscout.inventory.models import FileInventory, Inventory, SkippedFile

logger = logging.getLogger(__name__)


class InventoryScanner:
    """Builds an ``Inventory`` from a JS/TS source tree.

    Usage::

        scanner = InventoryScanner(max_workers=4)
        inventory = scanner.scan_local(Path("./weather-server"))
        print(inventory.summary.tool_count)

    Args:
        max_workers: Threads used to read and extract files. ``1`` runs
            everything on the calling thread.
    """

    def __init__(self, max_workers: int = 4) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.max_workers = max_workers

    def scan_local(self, root: Path | str) -> Inventory:
        """Scan a local directory tree.

        Raises:
            PathNotFoundError: If ``root`` does not exist.
        """
        files = list(iter_source_files(root))
        logger.info("Scanning %d candidate file(s) under %s", len(files), root)

        if self.max_workers == 1 or len(files) < 2:
            outcomes = [_process_file(path) for path in files]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                outcomes = list(pool.map(_process_file, files))

        results = [o for o in outcomes if isinstance(o, FileInventory)]
        skipped = [o for o in outcomes if isinstance(o, SkippedFile)]
        return merge_inventories(results, skipped)

    def scan_remote(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_CLONE_TIMEOUT,
        depth: int | None = 1,
    ) -> Inventory:
        """Clone a repository, scan it, and remove the clone.

        Raises:
            CloneFailedError: If the repository cannot be cloned.
        """
        with clone_repository(url, timeout=timeout, depth=depth) as checkout:
            return self.scan_local(checkout)


def _process_file(path: Path) -> FileInventory | SkippedFile:
    try:
        source = read_source_file(path)
    except FileReadSkipped as exc:
        logger.warning("Skipping %s: %s", path, exc.reason)
        return SkippedFile(path=path, reason=exc.reason)
    return extract_declarations(source.content, source.name)


def scan_source(config: ScanConfig) -> Inventory:
    """Run one scan as described by ``config``.

    Args:
        config: Validated scan settings.

    Returns:
        The scan's ``Inventory``. Bare mode returns an empty one without
        touching the filesystem.

    Raises:
        ConfigError: If ``config`` is incomplete for its mode.
        PathNotFoundError: Local mode with a missing root.
        CloneFailedError: Remote mode clone failure.
    """
    config.validate()
    if config.mode is SourceMode.BARE:
        return Inventory.empty()

    # validate() has checked the setting each mode needs.
    scanner = InventoryScanner(max_workers=config.max_workers)
    if config.mode is SourceMode.REMOTE:
        return scanner.scan_remote(
            config.repository_url,
            timeout=config.clone_timeout,
            depth=config.clone_depth,
        )
    return scanner.scan_local(config.source_path)
