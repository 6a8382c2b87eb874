"""Shallow input-schema inference for tool declarations.

Tool configs describe their inputs with validator expressions, usually
zod::

    inputSchema: {
        query: z.string().describe("Search terms"),
        limit: z.number().optional(),
        filters: z.object({ lang: z.string() }),
    }

The inferencer recovers ``{"query": "string", "limit": "number",
"filters": "object"}``: one entry per top-level field whose validator is
``<namespace>.<kind>(`` with ``kind`` in ``PRIMITIVE_KINDS``. Members of
nested objects are not flattened, and fields built from any other
expression (``z.enum``, ``z.union``, custom helpers) are skipped.
"""

from __future__ import annotations

import re

from mcpscout.inventory.blocks import find_block_end, mask_nested
from mcpscout.inventory.models import PRIMITIVE_KINDS

# Maximum distance between a tool signature and its ``inputSchema`` key.
SCHEMA_WINDOW = 1000

_SCHEMA_KEY = re.compile(r"(?<![\w$])inputSchema\s*:\s*\{")

_FIELD = re.compile(
    r"""(?<![\w$])(?:(?P<ident>[A-Za-z_$][\w$]*)|'(?P<sq>[^'\\]+)'|"(?P<dq>[^"\\]+)")"""
    r"\s*:\s*[A-Za-z_$][\w$]*\s*\.\s*"
    rf"(?P<kind>{'|'.join(PRIMITIVE_KINDS)})\s*\("
)


def infer_fields(text: str, open_index: int, close_index: int) -> dict[str, str]:
    """Map the top-level fields of a schema block to primitive kinds.

    Args:
        text: Full source text.
        open_index: Index of the block's opening brace.
        close_index: Index of the block's closing brace.

    Returns:
        Field name to kind, in order of first occurrence. A field declared
        twice keeps its first kind.
    """
    top = mask_nested(text, open_index + 1, close_index)
    keys = mask_nested(text, open_index + 1, close_index, strings=True)
    fields: dict[str, str] = {}
    for match in _FIELD.finditer(keys):
        group = next(g for g in ("ident", "sq", "dq") if match.group(g) is not None)
        name = top[match.start(group):match.end(group)]
        fields.setdefault(name, match.group("kind"))
    return fields


def infer_input_schema(
    text: str,
    config_open: int,
    config_close: int,
    anchor: int,
    window: int = SCHEMA_WINDOW,
) -> dict[str, str]:
    """Locate ``inputSchema: {...}`` in a tool config and infer its fields.

    Only the config block's own top-level ``inputSchema`` key is used, and
    it must begin within ``window`` characters of ``anchor`` (the start of
    the tool signature).

    Returns:
        The inferred field map, or an empty dict when the config has no
        recognizable schema block.
    """
    keys = mask_nested(text, config_open + 1, config_close, strings=True)
    match = _SCHEMA_KEY.search(keys)
    if match is None:
        return {}
    key_start = config_open + 1 + match.start()
    if key_start - anchor >= window:
        return {}
    schema_open = config_open + match.end()  # offset of "{" in ``text``
    schema_close = find_block_end(text, schema_open)
    if schema_close is None or schema_close > config_close:
        return {}
    return infer_fields(text, schema_open, schema_close)
