"""Per-file declaration extraction.

Applies every row of the signature catalog to one file's text and turns
the matches into entries. Extraction is a pure function of the text and
the file name, so files can be processed in any order (or in parallel)
and merged afterwards by the aggregator.

Every sequence is ordered by position in the file. Tool candidates keep
the rank of the signature that produced them and are not deduplicated
here: name uniqueness is enforced across the whole scan by the
aggregator, which sees every file.
"""

from __future__ import annotations

import logging
import re

from mcpscout.inventory.blocks import find_block_end, mask_nested
from mcpscout.inventory.models import (
    FileInventory,
    PromptEntry,
    ResourceEntry,
    ToolCandidate,
    ToolEntry,
)
from mcpscout.inventory.schema import infer_input_schema
from mcpscout.inventory.signatures import (
    STRING_LITERAL,
    ArgumentShape,
    DeclarationKind,
    Signature,
    literal_value,
    signatures_for,
)

logger = logging.getLogger(__name__)

_DESCRIPTION_KEY = re.compile(
    rf"(?<![\w$])description\s*:\s*(?P<value>{STRING_LITERAL})", re.DOTALL
)


def default_description(name: str) -> str:
    """Placeholder description for tools that declare none."""
    return f"{name} tool"


def extract_declarations(text: str, file_name: str) -> FileInventory:
    """Extract tool, resource and prompt declarations from one file.

    Args:
        text: Decoded file content.
        file_name: Base name recorded on every entry.

    Returns:
        A ``FileInventory``; empty when nothing matched.
    """
    tools = sorted(
        (
            candidate
            for sig in signatures_for(DeclarationKind.TOOL)
            for candidate in _match_tools(sig, text, file_name)
        ),
        key=lambda c: c.offset,
    )
    resources = sorted(
        (
            (m.start(), ResourceEntry(
                name=literal_value(m.group("name")),
                uri=literal_value(m.group("value")),
                file=file_name,
            ))
            for sig in signatures_for(DeclarationKind.RESOURCE)
            for m in _matches(sig, text)
            if len(m.group("value")) > 2
        ),
        key=lambda pair: pair[0],
    )
    prompts = sorted(
        (
            (m.start(), PromptEntry(name=literal_value(m.group("name")), file=file_name))
            for sig in signatures_for(DeclarationKind.PROMPT)
            for m in _matches(sig, text)
        ),
        key=lambda pair: pair[0],
    )
    result = FileInventory(
        file=file_name,
        tools=tuple(tools),
        resources=tuple(entry for _, entry in resources),
        prompts=tuple(entry for _, entry in prompts),
    )
    if not result.is_empty:
        logger.debug(
            "%s: %d tool(s), %d resource(s), %d prompt(s)",
            file_name, len(result.tools), len(result.resources), len(result.prompts),
        )
    return result


def _matches(sig: Signature, text: str) -> list[re.Match[str]]:
    # Empty names ('') never identify a declaration.
    return [m for m in sig.pattern.finditer(text) if len(m.group("name")) > 2]


def _match_tools(sig: Signature, text: str, file_name: str) -> list[ToolCandidate]:
    candidates: list[ToolCandidate] = []
    for m in _matches(sig, text):
        name = literal_value(m.group("name"))
        if sig.shape is ArgumentShape.CONFIG_BLOCK:
            entry = _tool_from_config(text, m, name, file_name)
        else:
            entry = ToolEntry(
                name=name,
                description=literal_value(m.group("value")) or default_description(name),
                input_schema={},
                file=file_name,
            )
        candidates.append(ToolCandidate(entry=entry, rank=sig.rank, offset=m.start()))
    return candidates


def _tool_from_config(
    text: str, match: re.Match[str], name: str, file_name: str,
) -> ToolEntry:
    """Build a tool from a ``registerTool(name, {...})`` match.

    When the config block is never closed (usually a quote inside a regex
    literal), the description is read up to the first ``}`` and no schema
    is inferred.
    """
    config_open = match.end() - 1
    config_close = find_block_end(text, config_open)
    if config_close is None:
        logger.debug("%s: unterminated config block for tool %r", file_name, name)
        brace = text.find("}", config_open + 1)
        region = text[config_open + 1:brace if brace != -1 else len(text)]
        desc_match = _DESCRIPTION_KEY.search(region)
        input_schema: dict[str, str] = {}
    else:
        region = mask_nested(text, config_open + 1, config_close)
        keys = mask_nested(text, config_open + 1, config_close, strings=True)
        desc_match = _DESCRIPTION_KEY.search(keys)
        input_schema = infer_input_schema(text, config_open, config_close, match.start())
    description = (
        literal_value(region[desc_match.start("value"):desc_match.end("value")])
        if desc_match else ""
    )
    return ToolEntry(
        name=name,
        description=description or default_description(name),
        input_schema=input_schema,
        file=file_name,
    )
