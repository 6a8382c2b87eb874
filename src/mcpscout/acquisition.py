"""Acquisition of the source tree to scan.

Local scans use the given path directly. Remote scans clone the
repository into a fresh scratch directory that exists only for the
duration of the ``clone_repository`` context; it is removed on every exit
path, including clone failures, timeouts and errors raised by the code
running inside the context.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from mcpscout.exceptions import CloneFailedError

logger = logging.getLogger(__name__)

DEFAULT_CLONE_TIMEOUT: float = 120.0

SCRATCH_PREFIX = "mcpscout-"


def _git_clone_command(url: str, target: Path, depth: int | None) -> list[str]:
    cmd = ["git", "clone", "--quiet"]
    if depth is not None:
        cmd += ["--depth", str(depth)]
    # "--" keeps a URL starting with "-" from being read as an option.
    cmd += ["--", url, str(target)]
    return cmd


def _stderr_tail(stderr: str | bytes | None, limit: int = 400) -> str:
    if not stderr:
        return ""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    return stderr.strip()[-limit:]


@contextmanager
def clone_repository(
    url: str,
    *,
    timeout: float = DEFAULT_CLONE_TIMEOUT,
    depth: int | None = 1,
) -> Iterator[Path]:
    """Clone ``url`` into a scratch directory and yield the checkout path.

    Args:
        url: Repository URL accepted by ``git clone``.
        timeout: Seconds before the clone is abandoned.
        depth: History depth for a shallow clone; None clones everything.

    Yields:
        Path of the checked-out working tree.

    Raises:
        CloneFailedError: If git exits non-zero, times out or is missing.
    """
    scratch = Path(tempfile.mkdtemp(prefix=SCRATCH_PREFIX))
    checkout = scratch / "repo"
    try:
        logger.info("Cloning %s into %s", url, checkout)
        try:
            proc = subprocess.run(
                _git_clone_command(url, checkout, depth),
                capture_output=True,
                text=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise CloneFailedError(url, f"timed out after {timeout:g}s") from exc
        except FileNotFoundError as exc:
            raise CloneFailedError(url, "git executable not found") from exc
        if proc.returncode != 0:
            detail = _stderr_tail(proc.stderr)
            reason = f"git exited with status {proc.returncode}"
            raise CloneFailedError(url, f"{reason}: {detail}" if detail else reason)
        yield checkout
    finally:
        shutil.rmtree(scratch, ignore_errors=True)
        if scratch.exists():
            logger.warning("Could not remove scratch directory %s", scratch)
        else:
            logger.debug("Removed scratch directory %s", scratch)
