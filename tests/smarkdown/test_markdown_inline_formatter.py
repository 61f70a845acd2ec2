"""Tests for the inline formatter."""

import pytest

from smarkdown import (
    MarkdownBoldNode,
    MarkdownEmphasisNode,
    MarkdownInlineCodeNode,
    MarkdownLinkNode,
    MarkdownTextNode,
    format_inline,
    format_links
)


class TestFormatInlineBasic:
    """Test plain text and single spans."""

    def test_empty_string(self):
        """Test that empty text produces no nodes."""
        assert format_inline("") == []

    def test_plain_text(self):
        """Test that text without markers is a single text node."""
        assert format_inline("plain text") == [MarkdownTextNode("plain text")]

    def test_bold(self):
        """Test a bold span surrounded by text."""
        assert format_inline("say **hi** now") == [
            MarkdownTextNode("say "),
            MarkdownBoldNode([MarkdownTextNode("hi")]),
            MarkdownTextNode(" now")
        ]

    def test_italic(self):
        """Test an italic span."""
        assert format_inline("*it*") == [MarkdownEmphasisNode([MarkdownTextNode("it")])]

    def test_inline_code(self):
        """Test an inline code span."""
        assert format_inline("use `x = 1` here") == [
            MarkdownTextNode("use "),
            MarkdownInlineCodeNode("x = 1"),
            MarkdownTextNode(" here")
        ]


class TestFormatInlineNesting:
    """Test nesting and precedence between rules."""

    def test_italic_inside_bold(self):
        """Test that bold bodies are formatted recursively."""
        assert format_inline("**a *b* c**") == [
            MarkdownBoldNode([
                MarkdownTextNode("a "),
                MarkdownEmphasisNode([MarkdownTextNode("b")]),
                MarkdownTextNode(" c")
            ])
        ]

    def test_code_span_is_not_formatted(self):
        """Test that markers inside a code span stay literal."""
        assert format_inline("`**not bold**`") == [MarkdownInlineCodeNode("**not bold**")]

    def test_link_inside_code_span_is_not_a_link(self):
        """Test that link syntax inside code is kept as code."""
        assert format_inline("`[a](b)`") == [MarkdownInlineCodeNode("[a](b)")]

    def test_leftmost_match_wins(self):
        """Test that an earlier italic span beats a later bold span."""
        assert format_inline("*a* **b**") == [
            MarkdownEmphasisNode([MarkdownTextNode("a")]),
            MarkdownTextNode(" "),
            MarkdownBoldNode([MarkdownTextNode("b")])
        ]

    def test_link_inside_bold(self):
        """Test that links inside bold text are recognised."""
        assert format_inline("**[a](b)**") == [MarkdownBoldNode([MarkdownLinkNode(label="a", href="b")])]

    def test_bold_split_across_link_label(self):
        """Test that bold spans are carved out before links are looked for."""
        assert format_inline("[**x**](u)") == [
            MarkdownTextNode("["),
            MarkdownBoldNode([MarkdownTextNode("x")]),
            MarkdownTextNode("](u)")
        ]

    def test_spaced_asterisks_form_italic(self):
        """Test that any pair of single asterisks delimits italic text."""
        assert format_inline("a * b * c") == [
            MarkdownTextNode("a "),
            MarkdownEmphasisNode([MarkdownTextNode(" b ")]),
            MarkdownTextNode(" c")
        ]


class TestFormatInlineUnterminated:
    """Test that unterminated markers are kept as text."""

    @pytest.mark.parametrize("text", [
        "**oops",
        "**",
        "*",
        "`",
        "``",
        "```",
        "2 * 3 = 6",
        "a `b",
        "[label](http://unfinished",
        "[label]",
        "[](x)",
        "[a]()",
        "[a] (b)",
    ])
    def test_literal_text(self, text):
        """Test that text with unmatched markers is a single text node."""
        assert format_inline(text) == [MarkdownTextNode(text)]

    @pytest.mark.parametrize("text", [
        "*" * 1000,
        "`" * 1000,
        "[" * 1000 + "]",
        "**a*" * 250,
        "[a](" * 250,
    ])
    def test_adversarial_input_terminates(self, text):
        """Test that long runs of marker characters are handled."""
        nodes = format_inline(text)
        assert nodes


class TestFormatLinks:
    """Test the link pass."""

    def test_link_with_surrounding_text(self):
        """Test a link between two pieces of text."""
        assert format_inline("see [docs](https://x.io) now") == [
            MarkdownTextNode("see "),
            MarkdownLinkNode(label="docs", href="https://x.io"),
            MarkdownTextNode(" now")
        ]

    def test_adjacent_links(self):
        """Test two links with nothing between them."""
        assert format_links("[a](b)[c](d)") == [
            MarkdownLinkNode(label="a", href="b"),
            MarkdownLinkNode(label="c", href="d")
        ]

    def test_label_may_contain_open_bracket(self):
        """Test that the label runs to the first closing bracket."""
        assert format_links("[a [b](c)") == [MarkdownLinkNode(label="a [b", href="c")]

    def test_label_is_not_formatted(self):
        """Test that link labels are kept verbatim."""
        assert format_links("[*x*](u)") == [MarkdownLinkNode(label="*x*", href="u")]

    def test_empty_text(self):
        """Test that empty text produces no nodes."""
        assert format_links("") == []
