"""Merging per-file extraction results into one ``Inventory``.

Per-file results are collected independently and merged once, on a
single thread, after every file has been processed. Merging never fails.

Tool names are unique across the whole inventory: for each name the
candidate with the best signature rank wins, ties going to the earliest
candidate in discovery order. The winner takes the position at which its
name was first seen. Resources and prompts are concatenated as found.
"""

from __future__ import annotations

from collections.abc import Iterable

from mcpscout.inventory.models import (
    FileInventory,
    Inventory,
    SkippedFile,
    ToolCandidate,
)


def merge_inventories(
    results: Iterable[FileInventory],
    skipped: Iterable[SkippedFile] = (),
) -> Inventory:
    """Build an ``Inventory`` from per-file results in discovery order.

    Args:
        results: Per-file results, in the order the files were discovered.
        skipped: Files that could not be read.

    Returns:
        A fresh ``Inventory`` owned by the caller.
    """
    inventory = Inventory(skipped=list(skipped))
    winners: dict[str, ToolCandidate] = {}

    for file_result in results:
        for cand in file_result.tools:
            current = winners.get(cand.entry.name)
            # dicts keep first-insertion order, so replacing a value keeps
            # the name in its first-seen slot.
            if current is None or cand.rank < current.rank:
                winners[cand.entry.name] = cand
        inventory.resources.extend(file_result.resources)
        inventory.prompts.extend(file_result.prompts)

    inventory.tools = [cand.entry for cand in winners.values()]
    return inventory
