"""Tests for the brace-depth block scanner."""

from __future__ import annotations

import pytest

from mcpscout.inventory.blocks import find_block_end, mask_nested


class TestFindBlockEnd:
    """Locating the brace that closes a block."""

    def test_flat_block(self) -> None:
        text = "f({ a: 1 }, 2)"
        assert find_block_end(text, 2) == text.index("}")

    def test_nested_block(self) -> None:
        text = "{ a: { b: { c: 1 } }, d: 2 } tail"
        assert find_block_end(text, 0) == text.rindex("}")

    @pytest.mark.parametrize(
        "literal", ["'}'", '"}"', "`}`", "'\\'}'", '"a\\"}"'],
    )
    def test_braces_in_strings_ignored(self, literal: str) -> None:
        text = "{ s: " + literal + " }"
        assert find_block_end(text, 0) == len(text) - 1

    def test_braces_in_comments_ignored(self) -> None:
        text = "{\n  // closing } here\n  /* and { here */\n  a: 1\n}"
        assert find_block_end(text, 0) == len(text) - 1

    def test_unterminated_returns_none(self) -> None:
        assert find_block_end("{ a: { b: 1 }", 0) is None

    @pytest.mark.parametrize("quote", ["'", "\""])
    def test_quoted_string_ends_at_line_break(self, quote: str) -> None:
        text = "{\n  word: z.string().regex(/^[a-z" + quote + "]+$/),\n  max: 3\n}"
        assert find_block_end(text, 0) == len(text) - 1

    def test_template_string_spans_lines(self) -> None:
        text = "{ doc: `line one\n} still inside` }"
        assert find_block_end(text, 0) == len(text) - 1

    def test_escaped_line_break_continues_string(self) -> None:
        text = "{ s: 'a\\\n}' }"
        assert find_block_end(text, 0) == len(text) - 1

    def test_requires_opening_brace(self) -> None:
        with pytest.raises(ValueError):
            find_block_end("abc", 0)


class TestMaskNested:
    """Blanking everything below the top level."""

    def test_preserves_length(self) -> None:
        text = "a: 1, b: { c: { d: 2 } }, e: 'x'"
        assert len(mask_nested(text, 0, len(text))) == len(text)

    def test_nested_content_blanked(self) -> None:
        text = "a: 1, b: { c: 2 }, d: 3"
        masked = mask_nested(text, 0, len(text))
        assert "c" not in masked
        assert "b: {" in masked
        assert masked.rstrip().endswith("d: 3")

    def test_top_level_strings_kept(self) -> None:
        text = "description: 'has { brace', x: 1"
        assert mask_nested(text, 0, len(text)) == text

    def test_comments_blanked(self) -> None:
        text = "// description: 'old'\ndescription: 'new'"
        masked = mask_nested(text, 0, len(text))
        assert "old" not in masked
        assert "description: 'new'" in masked

    def test_string_contents_blanked_on_request(self) -> None:
        text = "a: 'x: z.number(', \"k\": 1"
        masked = mask_nested(text, 0, len(text), strings=True)
        assert len(masked) == len(text)
        assert masked == "a: '            ', \" \": 1"

    def test_unterminated_string_blanked_to_line_end(self) -> None:
        text = "a: /it's/,\nb: 1"
        masked = mask_nested(text, 0, len(text), strings=True)
        assert masked == "a: /it'   \nb: 1"
