"""Brace-depth scanning over JavaScript/TypeScript text.

Declarations carry their configuration in object literals, and those
literals routinely nest (``inputSchema: { ... }`` inside the tool config).
A regular expression cannot find the matching ``}``, so this module walks
the text once, tracking nesting depth while stepping over string literals
and comments. Single- and double-quoted strings end at the line break, as
they do in JavaScript, so a stray quote cannot swallow the rest of the
file. It is not a tokenizer: regex literals and ``${...}`` template
substitutions are treated as plain text.

Two helpers are exported:

- ``find_block_end`` locates the brace closing a block.
- ``mask_nested`` blanks everything except the top level of a block, so
  key lookups (``description:``, schema fields) only see the block's own
  keys. Masking preserves length, so match offsets stay valid. With
  ``strings=True`` string contents are blanked as well, so a key pattern
  cannot match text quoted inside a value; the literal itself is then
  read from the unmasked view at the same offsets.
"""

from __future__ import annotations

from collections.abc import Iterator

_QUOTES = frozenset("'\"`")


def _tokens(text: str, start: int, end: int) -> Iterator[tuple[int, int, str]]:
    """Yield ``(begin, stop, kind)`` spans between ``start`` and ``end``.

    ``kind`` is ``"string"``, ``"comment"``, ``"open"``, ``"close"`` or
    ``"code"`` (a single character). Unterminated comments and template
    strings run to ``end``; other unterminated strings stop at the line
    break.
    """
    i = start
    while i < end:
        ch = text[i]
        if ch in _QUOTES:
            j = i + 1
            while j < end and text[j] != ch:
                if text[j] == "\n" and ch != "`":
                    break
                j += 2 if text[j] == "\\" else 1
            closed = j < end and text[j] == ch
            stop = min(j + 1 if closed else j, end)
            yield i, stop, "string"
            i = stop
        elif ch == "/" and text.startswith("//", i):
            j = text.find("\n", i, end)
            stop = end if j == -1 else j
            yield i, stop, "comment"
            i = stop
        elif ch == "/" and text.startswith("/*", i):
            j = text.find("*/", i + 2, end)
            stop = end if j == -1 else j + 2
            yield i, stop, "comment"
            i = stop
        elif ch == "{":
            yield i, i + 1, "open"
            i += 1
        elif ch == "}":
            yield i, i + 1, "close"
            i += 1
        else:
            yield i, i + 1, "code"
            i += 1


def find_block_end(text: str, open_index: int) -> int | None:
    """Return the index of the ``}`` closing the block opened at ``open_index``.

    Args:
        text: Source text.
        open_index: Index of an opening ``{``.

    Returns:
        Index of the matching closing brace, or None when the text ends
        before the block is closed.
    """
    if open_index >= len(text) or text[open_index] != "{":
        raise ValueError(f"no opening brace at index {open_index}")
    depth = 0
    for begin, _stop, kind in _tokens(text, open_index, len(text)):
        if kind == "open":
            depth += 1
        elif kind == "close":
            depth -= 1
            if depth == 0:
                return begin
    return None


def mask_nested(text: str, start: int, end: int, strings: bool = False) -> str:
    """Return ``text[start:end]`` with nested blocks and comments blanked.

    Characters inside ``{...}`` below the top level and inside comments are
    replaced with spaces; the braces of first-level blocks are kept so
    callers can still match ``key: {``. String literals at the top level
    are kept verbatim, or reduced to their delimiters when ``strings`` is
    true.
    """
    out: list[str] = []
    depth = 0
    for begin, stop, kind in _tokens(text, start, end):
        chunk = text[begin:stop]
        if kind == "open":
            out.append("{" if depth == 0 else " ")
            depth += 1
        elif kind == "close":
            depth = max(depth - 1, 0)
            out.append("}" if depth == 0 else " ")
        elif depth > 0 or kind == "comment":
            out.append(_blank(chunk))
        elif kind == "string" and strings:
            closer = chunk[-1] if len(chunk) > 1 and chunk[-1] == chunk[0] else ""
            out.append(chunk[0] + _blank(chunk[1:len(chunk) - len(closer)]) + closer)
        else:
            out.append(chunk)
    return "".join(out)


def _blank(chunk: str) -> str:
    # Newlines survive so line-anchored patterns still line up.
    return "".join("\n" if c == "\n" else " " for c in chunk)
