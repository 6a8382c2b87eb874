"""mcpscout: Source inventory extraction for MCP servers written in TS/JS."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
