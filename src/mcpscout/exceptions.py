"""mcpscout exception hierarchy.

All public exceptions inherit from McpScoutError, giving callers a single
base class to catch when they want to handle any mcpscout-specific failure
without swallowing unrelated errors.
"""

from __future__ import annotations


class McpScoutError(Exception):
    """Base exception for all mcpscout errors."""


class PathNotFoundError(McpScoutError):
    """Raised when the root path of a local scan does not exist.

    Fatal: the whole scan is aborted and the missing path is reported.
    """

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Source path not found: {path}")


class CloneFailedError(McpScoutError):
    """Raised when a remote repository cannot be fetched.

    Covers a non-zero ``git`` exit status, a clone that exceeded its
    timeout, and a missing ``git`` executable. The scratch directory is
    already removed by the time this propagates.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to clone {url}: {reason}")


class FileReadSkipped(McpScoutError):
    """Raised when a single source file cannot be read or decoded.

    Non-fatal. The scanner catches it, records a warning and moves on
    to the next file.
    """

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Skipped {path}: {reason}")


class ConfigError(McpScoutError):
    """Raised for invalid or unreadable scan configuration."""
