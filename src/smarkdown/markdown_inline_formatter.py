"""
Inline formatter for streaming markdown.

Converts a single run of text into bold, italic, inline code, link and text
nodes.  Matching is done by scanning for delimiter positions rather than with
regular expressions so that every step provably consumes input: each match
hands a strictly shorter suffix back to the loop, and nested formatting is
only ever applied to the text between two delimiters.

Unterminated delimiters never raise; they simply fail to match and are left
in place as literal text.
"""

from typing import List, Tuple

from smarkdown.markdown_ast_node import (
    MarkdownInlineNode, MarkdownTextNode, MarkdownBoldNode, MarkdownEmphasisNode,
    MarkdownInlineCodeNode, MarkdownLinkNode
)


# Rule identifiers, in priority order.  When two rules match at the same
# offset the lower number wins.
_BOLD = 0
_ITALIC = 1
_CODE = 2


def _find_bold(text: str) -> Tuple[int, int] | None:
    """
    Find the leftmost `**...**` span with a non-empty body.

    Args:
        text: Text to search

    Returns:
        (start, close) offsets of the opening and closing delimiters, or None
    """
    start = text.find("**")
    if start == -1:
        return None

    # Any later opening delimiter could only use a closing delimiter that this
    # search would also find, so one attempt is enough.
    close = text.find("**", start + 3)
    if close == -1:
        return None

    return start, close


def _find_italic(text: str) -> Tuple[int, int] | None:
    """
    Find the leftmost `*...*` span with a non-empty body.

    Args:
        text: Text to search

    Returns:
        (start, close) offsets of the opening and closing delimiters, or None
    """
    start = text.find("*")
    if start == -1:
        return None

    close = text.find("*", start + 2)
    if close == -1:
        return None

    return start, close


def _find_code(text: str) -> Tuple[int, int] | None:
    """
    Find the leftmost backtick span whose body is non-empty and backtick-free.

    Args:
        text: Text to search

    Returns:
        (start, close) offsets of the opening and closing backticks, or None
    """
    start = text.find("`")
    while start != -1:
        close = text.find("`", start + 1)
        if close == -1:
            return None

        if close > start + 1:
            return start, close

        # Two adjacent backticks: the second one may still open a span.
        start = close

    return None


def _find_link(text: str) -> Tuple[int, int, int] | None:
    """
    Find the leftmost `[label](href)` with a non-empty label and href.

    Args:
        text: Text to search

    Returns:
        (start, label_close, href_close) offsets, or None
    """
    start = text.find("[")
    while start != -1:
        label_close = text.find("]", start + 1)
        if label_close == -1:
            return None

        if label_close > start + 1 and text.startswith("(", label_close + 1):
            href_close = text.find(")", label_close + 2)
            if href_close == -1:
                return None

            if href_close > label_close + 2:
                return start, label_close, href_close

        # Every opening bracket before label_close shares the same closing
        # bracket, so none of them can match either.
        start = text.find("[", label_close + 1)

    return None


def format_links(text: str) -> List[MarkdownInlineNode]:
    """
    Split plain text into text and link nodes.

    Link labels are not formatted further, and nothing inside a link is
    scanned again.

    Args:
        text: Text that has already had bold, italic and code spans removed

    Returns:
        List of text and link nodes, empty if the text is empty
    """
    nodes: List[MarkdownInlineNode] = []
    remaining = text

    while remaining:
        match = _find_link(remaining)
        if match is None:
            nodes.append(MarkdownTextNode(remaining))
            break

        start, label_close, href_close = match
        if start > 0:
            nodes.append(MarkdownTextNode(remaining[:start]))

        nodes.append(MarkdownLinkNode(
            label=remaining[start + 1:label_close],
            href=remaining[label_close + 2:href_close]
        ))
        remaining = remaining[href_close + 1:]

    return nodes


def format_inline(text: str) -> List[MarkdownInlineNode]:
    """
    Format a run of markdown text into inline nodes.

    Bold, italic and inline code spans are located first, taking the leftmost
    match and breaking ties in that priority order.  Text outside those spans
    is then scanned for links.  Bold and italic bodies are formatted
    recursively; inline code bodies are kept verbatim.

    Args:
        text: The text to format

    Returns:
        List of inline nodes, empty if the text is empty
    """
    nodes: List[MarkdownInlineNode] = []
    remaining = text

    while remaining:
        candidates = []
        bold = _find_bold(remaining)
        if bold is not None:
            candidates.append((bold[0], _BOLD, bold[1]))

        italic = _find_italic(remaining)
        if italic is not None:
            candidates.append((italic[0], _ITALIC, italic[1]))

        code = _find_code(remaining)
        if code is not None:
            candidates.append((code[0], _CODE, code[1]))

        if not candidates:
            nodes.extend(format_links(remaining))
            break

        start, rule, close = min(candidates)
        if start > 0:
            nodes.extend(format_links(remaining[:start]))

        if rule == _BOLD:
            nodes.append(MarkdownBoldNode(format_inline(remaining[start + 2:close])))
            remaining = remaining[close + 2:]
            continue

        if rule == _ITALIC:
            nodes.append(MarkdownEmphasisNode(format_inline(remaining[start + 1:close])))
            remaining = remaining[close + 1:]
            continue

        nodes.append(MarkdownInlineCodeNode(remaining[start + 1:close]))
        remaining = remaining[close + 1:]

    return nodes
