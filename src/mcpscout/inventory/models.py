"""Data models for the inventory engine.

Contains the value types produced while scanning a source tree: the
read-only ``SourceFile``, the three declaration entries (tools, resources,
prompts), the per-file ``FileInventory`` and the aggregate ``Inventory``
handed to downstream code generators.

Entries reference their originating file by base name only; they never
hold on to the ``SourceFile`` itself, so file contents can be released as
soon as a file has been extracted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Closed set of primitive type tags recovered by the schema inferencer.
PRIMITIVE_KINDS: tuple[str, ...] = ("string", "number", "boolean", "array", "object")


@dataclass(frozen=True)
class SourceFile:
    """A candidate source file read from disk.

    Attributes:
        path: Absolute path to the file.
        content: Decoded text content.
        name: Base name of the file (e.g. ``index.ts``).
    """

    path: Path
    content: str
    name: str


@dataclass(frozen=True)
class ToolEntry:
    """A tool declaration recovered from source.

    Attributes:
        name: Tool name; unique within one ``Inventory``.
        description: Declared description, or ``"<name> tool"`` when absent.
        input_schema: Shallow mapping of input field name to one of
            ``PRIMITIVE_KINDS``. Compared but not hashed.
        file: Base name of the file the tool was declared in.
    """

    name: str
    description: str
    input_schema: dict[str, str] = field(default_factory=dict, hash=False)
    file: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": dict(self.input_schema),
            "file": self.file,
        }


@dataclass(frozen=True)
class ResourceEntry:
    """A resource declaration. Duplicate names are kept."""

    name: str
    uri: str
    file: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "uri": self.uri, "file": self.file}


@dataclass(frozen=True)
class PromptEntry:
    """A prompt declaration. Duplicate names are kept."""

    name: str
    file: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "file": self.file}


@dataclass(frozen=True)
class ToolCandidate:
    """A tool match before cross-file deduplication.

    Attributes:
        entry: The extracted tool.
        rank: Precedence of the signature that produced it (lower wins).
        offset: Character offset of the match within its file.
    """

    entry: ToolEntry
    rank: int
    offset: int


@dataclass(frozen=True)
class FileInventory:
    """Everything extracted from a single file, in declaration order."""

    file: str
    tools: tuple[ToolCandidate, ...] = ()
    resources: tuple[ResourceEntry, ...] = ()
    prompts: tuple[PromptEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.tools or self.resources or self.prompts)


@dataclass(frozen=True)
class SkippedFile:
    """A file excluded from results because it could not be read."""

    path: Path
    reason: str


@dataclass(frozen=True)
class InventorySummary:
    """Cardinalities of the three entry sequences."""

    tool_count: int = 0
    resource_count: int = 0
    prompt_count: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "toolCount": self.tool_count,
            "resourceCount": self.resource_count,
            "promptCount": self.prompt_count,
        }


@dataclass
class Inventory:
    """Aggregated result of one scan.

    Produced fresh by every scan and owned by the caller. ``skipped`` is
    diagnostic only and is not part of the serialized form.

    Attributes:
        tools: Tools with unique names, in first-seen order.
        resources: Resources in discovery order.
        prompts: Prompts in discovery order.
        skipped: Files that could not be read during the scan.
    """

    tools: list[ToolEntry] = field(default_factory=list)
    resources: list[ResourceEntry] = field(default_factory=list)
    prompts: list[PromptEntry] = field(default_factory=list)
    skipped: list[SkippedFile] = field(default_factory=list)

    @classmethod
    def empty(cls) -> Inventory:
        return cls()

    @property
    def summary(self) -> InventorySummary:
        return InventorySummary(
            tool_count=len(self.tools),
            resource_count=len(self.resources),
            prompt_count=len(self.prompts),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.tools or self.resources or self.prompts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the shape consumed by the project generator."""
        return {
            "tools": [t.to_dict() for t in self.tools],
            "resources": [r.to_dict() for r in self.resources],
            "prompts": [p.to_dict() for p in self.prompts],
            "summary": self.summary.to_dict(),
        }
