"""Heuristic inventory of MCP server declarations in JS/TS source.

Public API::

    from mcpscout.inventory import InventoryScanner

    inventory = InventoryScanner().scan_local(Path("./my-server"))
    for tool in inventory.tools:
        print(tool.name, tool.input_schema)
"""

from __future__ import annotations

from mcpscout.inventory.aggregator import merge_inventories
from mcpscout.inventory.discovery import iter_source_files, read_source_file
from mcpscout.inventory.engine import InventoryScanner, scan_source
from mcpscout.inventory.extractor import extract_declarations
from mcpscout.inventory.models import (
    FileInventory,
    Inventory,
    InventorySummary,
    PromptEntry,
    ResourceEntry,
    SkippedFile,
    SourceFile,
    ToolCandidate,
    ToolEntry,
)
from mcpscout.inventory.schema import infer_input_schema
from mcpscout.inventory.signatures import SIGNATURES, Signature

__all__ = [
    "FileInventory",
    "Inventory",
    "InventoryScanner",
    "InventorySummary",
    "PromptEntry",
    "ResourceEntry",
    "SIGNATURES",
    "Signature",
    "SkippedFile",
    "SourceFile",
    "ToolCandidate",
    "ToolEntry",
    "extract_declarations",
    "infer_input_schema",
    "iter_source_files",
    "merge_inventories",
    "read_source_file",
    "scan_source",
]
