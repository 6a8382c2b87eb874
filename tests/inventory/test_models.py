"""Tests for the inventory value types."""

from __future__ import annotations

from mcpscout.inventory.models import FileInventory, ToolCandidate, ToolEntry


class TestToolEntryIdentity:
    """Entries carry a dict schema yet stay usable as set members."""

    def test_hashable(self) -> None:
        entry = ToolEntry("search", "Find things", {"q": "string"}, "index.ts")
        assert hash(entry) == hash(ToolEntry("search", "Find things", {"q": "string"}, "index.ts"))

    def test_schema_still_compared(self) -> None:
        a = ToolEntry("search", "Find things", {"q": "string"})
        b = ToolEntry("search", "Find things", {"q": "number"})
        assert a != b
        assert len({a, b}) == 2

    def test_candidates_and_file_results_hashable(self) -> None:
        entry = ToolEntry("search", "Find things", {"q": "string"})
        candidate = ToolCandidate(entry=entry, rank=0, offset=12)
        assert candidate in {candidate}
        result = FileInventory(file="index.ts", tools=(candidate,))
        assert result in {result}

    def test_to_dict_copies_schema(self) -> None:
        entry = ToolEntry("search", "Find things", {"q": "string"}, "index.ts")
        data = entry.to_dict()
        data["inputSchema"]["extra"] = "boolean"
        assert entry.input_schema == {"q": "string"}
