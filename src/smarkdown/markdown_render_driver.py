"""
Render driver for streamed markdown.

A streamed response is re-rendered in full every time its text changes.  No
attempt is made to diff against the previous document: each update scans the
whole snapshot again and runs the inline formatter over every block.  The
positional index of a block is offered as its key so a host UI can reuse
widgets across updates.  Keys are not stable when a block is inserted ahead of
existing ones; hosts must tolerate that.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from smarkdown.markdown_ast_node import (
    MarkdownBlockNode, MarkdownInlineNode, MarkdownTableNode, MarkdownBlockquoteNode,
    MarkdownHeadingNode, MarkdownListItemNode, MarkdownParagraphNode
)
from smarkdown.markdown_block_scanner import MarkdownBlockScanner
from smarkdown.markdown_inline_formatter import format_inline
from smarkdown.markdown_render_config import MarkdownRenderConfig


@dataclass
class MarkdownRenderedBlock:
    """
    A block together with its inline-formatted text.

    Which formatted fields are filled in depends on the block:

    - headings, list items and paragraphs use `content`
    - blockquotes use `lines`, one entry per quoted line
    - tables use `header` (one entry per cell) and `rows` (row, then cell)
    - code blocks, rules and blank lines have no formatted text
    """

    key: int
    block: MarkdownBlockNode
    content: List[MarkdownInlineNode] = field(default_factory=list)
    lines: List[List[MarkdownInlineNode]] = field(default_factory=list)
    header: List[List[MarkdownInlineNode]] = field(default_factory=list)
    rows: List[List[List[MarkdownInlineNode]]] = field(default_factory=list)


def render_block(key: int, block: MarkdownBlockNode) -> MarkdownRenderedBlock:
    """
    Run the inline formatter over the text of a single block.

    Args:
        key: Positional key for the block
        block: The scanned block

    Returns:
        The rendered block
    """
    rendered = MarkdownRenderedBlock(key=key, block=block)

    if isinstance(block, (MarkdownHeadingNode, MarkdownListItemNode, MarkdownParagraphNode)):
        rendered.content = format_inline(block.content)

    elif isinstance(block, MarkdownBlockquoteNode):
        rendered.lines = [format_inline(line) for line in block.lines]

    elif isinstance(block, MarkdownTableNode):
        rendered.header = [format_inline(cell) for cell in block.header]
        rendered.rows = [[format_inline(cell) for cell in row] for row in block.rows]

    return rendered


def render_document(text: str, scanner: MarkdownBlockScanner | None = None) -> List[MarkdownRenderedBlock]:
    """
    Render a complete text snapshot.

    Args:
        text: The markdown text
        scanner: Scanner to use, or None for a default one

    Returns:
        The rendered blocks, keyed by position
    """
    if scanner is None:
        scanner = MarkdownBlockScanner()

    return [render_block(key, block) for key, block in enumerate(scanner.scan(text))]


class MarkdownRenderDriver:
    """
    Re-renders a single streamed message each time its text changes.

    The driver only remembers the last snapshot it rendered.  If asked to
    render exactly the same text again it can return the previous result,
    since rendering is a pure function of the text.
    """

    def __init__(self, config: MarkdownRenderConfig | None = None) -> None:
        """
        Initialize the driver.

        Args:
            config: Render configuration, or None for defaults
        """
        self._config = config if config is not None else MarkdownRenderConfig.create_default()
        self._scanner = MarkdownBlockScanner(normalize_line_endings=self._config.normalize_line_endings)

        self._logger = logging.getLogger("MarkdownRenderDriver")

        self._text = ""
        self._document: List[MarkdownRenderedBlock] = []
        self._has_rendered = False
        self._render_count = 0

    @property
    def text(self) -> str:
        """The last text snapshot passed to the driver."""
        return self._text

    @property
    def document(self) -> List[MarkdownRenderedBlock]:
        """The document rendered from the last snapshot."""
        return self._document

    @property
    def render_count(self) -> int:
        """Number of full re-parses performed since the last reset."""
        return self._render_count

    def update(self, text: str) -> List[MarkdownRenderedBlock]:
        """
        Render a new snapshot of the message text.

        When the snapshot is identical to the previous one and reuse is
        enabled, the previous list object itself is returned.  Callers must
        treat the result as read-only; mutating it also changes what later
        identical updates and `document` return.

        Args:
            text: The full text of the message so far

        Returns:
            The rendered document for the snapshot
        """
        if self._config.reuse_unchanged_snapshot and self._has_rendered and text == self._text:
            return self._document

        self._text = text
        self._document = render_document(text, self._scanner)
        self._has_rendered = True
        self._render_count += 1

        self._logger.debug("Rendered %d characters into %d blocks", len(text), len(self._document))
        return self._document

    def append(self, delta: str) -> List[MarkdownRenderedBlock]:
        """
        Append a streamed delta to the message and re-render it.

        Args:
            delta: Newly received text

        Returns:
            The rendered document for the extended text
        """
        return self.update(self._text + delta)

    def reset(self) -> None:
        """Forget the current message."""
        self._text = ""
        self._document = []
        self._has_rendered = False
        self._render_count = 0
