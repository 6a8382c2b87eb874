"""Candidate source file discovery.

Walks a directory tree depth-first and yields every file that may hold
MCP server declarations. Dependency and hidden directories are pruned
without being descended into; only the file names are inspected here,
contents are read later by the scanner.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from mcpscout.exceptions import FileReadSkipped, PathNotFoundError
from mcpscout.inventory.models import SourceFile

logger = logging.getLogger(__name__)

# Literal, case-sensitive suffixes of candidate files.
SOURCE_EXTENSIONS: tuple[str, ...] = (".ts", ".js", ".mjs")

EXCLUDED_DIR_NAMES: frozenset[str] = frozenset({"node_modules"})


def _is_excluded(name: str) -> bool:
    return name in EXCLUDED_DIR_NAMES or name.startswith(".")


def is_candidate_file(name: str) -> bool:
    """Return True if a file name carries one of ``SOURCE_EXTENSIONS``."""
    return name.endswith(SOURCE_EXTENSIONS)


def iter_source_files(root: Path | str) -> Iterator[Path]:
    """Yield candidate source files under ``root``, depth first.

    Entries are visited in sorted name order so repeated scans of an
    unchanged tree produce the same sequence. Calling the function again
    restarts the walk.

    Args:
        root: Directory to walk.

    Yields:
        Absolute paths of candidate files.

    Raises:
        PathNotFoundError: If ``root`` does not exist or is not a directory.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise PathNotFoundError(root_path)
    yield from _walk(root_path.resolve())


def _walk(directory: Path) -> Iterator[Path]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        logger.warning("Cannot list directory: %s", directory, exc_info=True)
        return

    for entry in entries:
        # Hidden files are skipped along with hidden directories.
        if _is_excluded(entry.name):
            continue
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield from _walk(Path(entry.path))
        elif is_candidate_file(entry.name):
            yield Path(entry.path)


def read_source_file(path: Path) -> SourceFile:
    """Read and decode one candidate file.

    Raises:
        FileReadSkipped: If the file cannot be read or is not valid UTF-8.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise FileReadSkipped(path, f"read error: {exc.strerror or exc}") from exc
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FileReadSkipped(path, "not valid UTF-8 text") from exc
    return SourceFile(path=path, content=content, name=path.name)
