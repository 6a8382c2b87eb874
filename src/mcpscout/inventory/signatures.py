"""Declarative catalog of recognized declaration call shapes.

MCP servers built on the TypeScript SDK declare their capabilities with a
handful of registration calls on the server object::

    server.registerTool("search", { description: "...", inputSchema: {...} }, handler)
    server.tool("search", "Legacy description", handler)
    server.registerResource("config", "config://app", handler)
    server.registerPrompt("review", {...}, handler)

Rather than parsing the language, each call shape is described by one
``Signature`` row (receiver names, method names, argument shape) and
compiled to a regular expression. New shapes are supported by appending a
row to ``SIGNATURES``.

The table order is the precedence order: when two tool signatures yield
the same tool name, the row with the lower ``rank`` wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache


class DeclarationKind(str, Enum):
    """The three capability families a server can declare."""

    TOOL = "tool"
    RESOURCE = "resource"
    PROMPT = "prompt"


class ArgumentShape(str, Enum):
    """What follows the string-literal name in a recognized call."""

    CONFIG_BLOCK = "config_block"  # name, { ...config }
    DESCRIPTION = "description"  # name, "description"
    URI = "uri"  # name, "uri"
    NAME_ONLY = "name_only"  # name, ...


# Receiver identifiers the SDK examples use for the server object.
RECEIVERS: tuple[str, ...] = ("server", "mcpServer")


# ---------------------------------------------------------------------------
# String literal helpers
# ---------------------------------------------------------------------------

# One single-, double- or back-quoted literal with backslash escapes.
STRING_LITERAL = (
    r"(?:'(?:[^'\\]|\\.)*'"
    r'|"(?:[^"\\]|\\.)*"'
    r"|`(?:[^`\\]|\\.)*`)"
)

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def literal_value(literal: str) -> str:
    """Strip the delimiters from a matched literal and resolve escapes."""
    body = literal[1:-1]
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)


# ---------------------------------------------------------------------------
# Signature rows
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Signature:
    """One recognized registration call shape.

    Attributes:
        kind: Capability family the call declares.
        methods: Method names accepted after the receiver.
        shape: Shape of the arguments following the name literal.
        rank: Precedence among signatures of the same kind (lower wins).
        receivers: Accepted receiver identifiers.
    """

    kind: DeclarationKind
    methods: tuple[str, ...]
    shape: ArgumentShape
    rank: int = 0
    receivers: tuple[str, ...] = RECEIVERS

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled pattern with groups ``name`` and, where present, ``value``.

        For ``CONFIG_BLOCK`` the match ends just past the opening brace.
        """
        return _compile(self.receivers, self.methods, self.shape)

    @property
    def call_shape(self) -> str:
        """Human-readable rendering used by the ``signatures`` command."""
        args = {
            ArgumentShape.CONFIG_BLOCK: "'name', { description, inputSchema }",
            ArgumentShape.DESCRIPTION: "'name', 'description'",
            ArgumentShape.URI: "'name', 'uri'",
            ArgumentShape.NAME_ONLY: "'name', ...",
        }[self.shape]
        return f"{self.receivers[0]}.{'|'.join(self.methods)}({args})"


@lru_cache(maxsize=None)
def _compile(
    receivers: tuple[str, ...], methods: tuple[str, ...], shape: ArgumentShape,
) -> re.Pattern[str]:
    receiver = "|".join(re.escape(r) for r in receivers)
    method = "|".join(re.escape(m) for m in methods)
    head = (
        rf"(?<![\w$])(?:{receiver})\s*\.\s*(?:{method})\s*\(\s*"
        rf"(?P<name>{STRING_LITERAL})"
    )
    if shape is ArgumentShape.CONFIG_BLOCK:
        tail = r"\s*,\s*\{"
    elif shape in (ArgumentShape.DESCRIPTION, ArgumentShape.URI):
        tail = rf"\s*,\s*(?P<value>{STRING_LITERAL})"
    else:
        tail = ""
    return re.compile(head + tail, re.DOTALL)


SIGNATURES: tuple[Signature, ...] = (
    Signature(DeclarationKind.TOOL, ("registerTool",), ArgumentShape.CONFIG_BLOCK, rank=0),
    Signature(DeclarationKind.TOOL, ("tool",), ArgumentShape.DESCRIPTION, rank=1),
    Signature(DeclarationKind.RESOURCE, ("registerResource",), ArgumentShape.URI),
    Signature(DeclarationKind.PROMPT, ("registerPrompt", "prompt"), ArgumentShape.NAME_ONLY),
)


def signatures_for(kind: DeclarationKind) -> tuple[Signature, ...]:
    """Return the rows of ``SIGNATURES`` declaring ``kind``, in table order."""
    return tuple(sig for sig in SIGNATURES if sig.kind is kind)
