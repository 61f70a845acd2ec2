"""
Render a rendered markdown document as HTML.

This is a reference host renderer.  It emits one element per block and
escapes all text and attribute values.  Links are only made live for
http, https and mailto targets or scheme-less relative references; any
other target, such as `javascript:`, is rendered as its plain label.
"""

import html
import logging
from typing import List
from urllib.parse import urlsplit

from smarkdown.markdown_ast_node import (
    MarkdownASTVisitor, MarkdownInlineNode, MarkdownTextNode, MarkdownBoldNode, MarkdownEmphasisNode,
    MarkdownInlineCodeNode, MarkdownLinkNode, MarkdownCodeBlockNode, MarkdownTableNode,
    MarkdownBlockquoteNode, MarkdownHeadingNode, MarkdownHorizontalRuleNode, MarkdownListItemNode,
    MarkdownBlankNode
)
from smarkdown.markdown_render_config import MarkdownRenderConfig
from smarkdown.markdown_render_driver import MarkdownRenderedBlock


_SAFE_LINK_SCHEMES = ("", "http", "https", "mailto")


def is_safe_href(href: str) -> bool:
    """
    Check whether a link target may be rendered as a live link.

    Args:
        href: The link target as written in the markdown

    Returns:
        True if the target has no scheme or an http, https or mailto scheme
    """
    try:
        scheme = urlsplit(href.strip()).scheme

    except ValueError:
        return False

    return scheme.lower() in _SAFE_LINK_SCHEMES


class MarkdownHTMLRenderer(MarkdownASTVisitor):
    """Visitor that renders blocks and inline nodes to HTML."""

    def __init__(self, config: MarkdownRenderConfig | None = None) -> None:
        """
        Initialize the renderer.

        Args:
            config: Render configuration, or None for defaults
        """
        super().__init__()
        self._config = config if config is not None else MarkdownRenderConfig.create_default()
        self._logger = logging.getLogger("MarkdownHTMLRenderer")

    def render(self, document: List[MarkdownRenderedBlock]) -> str:
        """
        Render a document to HTML.

        Args:
            document: The rendered blocks

        Returns:
            HTML with one element per line, one line per block
        """
        html_parts = [self.visit(rendered) for rendered in document]
        self._logger.debug("Rendered %d blocks to HTML", len(html_parts))
        return "\n".join(html_parts)

    def _render_inline(self, nodes: List[MarkdownInlineNode]) -> str:
        """
        Render a list of inline nodes.

        Args:
            nodes: The inline nodes

        Returns:
            The concatenated HTML
        """
        return "".join(self.visit(node) for node in nodes)

    def visit_MarkdownRenderedBlock(self, rendered: MarkdownRenderedBlock) -> str:  # pylint: disable=invalid-name
        """
        Render a single block.

        Args:
            rendered: The rendered block

        Returns:
            The HTML for the block
        """
        block = rendered.block

        if isinstance(block, MarkdownCodeBlockNode):
            language_class = ""
            if block.language:
                language_class = f' class="{html.escape(self._config.code_language_prefix + block.language)}"'

            return f"<pre><code{language_class}>{html.escape(block.content)}</code></pre>"

        if isinstance(block, MarkdownTableNode):
            header_cells = "".join(f"<th>{self._render_inline(cell)}</th>" for cell in rendered.header)
            body_rows = "".join(
                "<tr>" + "".join(f"<td>{self._render_inline(cell)}</td>" for cell in row) + "</tr>"
                for row in rendered.rows
            )
            return f"<table><thead><tr>{header_cells}</tr></thead><tbody>{body_rows}</tbody></table>"

        if isinstance(block, MarkdownBlockquoteNode):
            paragraphs = "".join(f"<p>{self._render_inline(line)}</p>" for line in rendered.lines)
            return f"<blockquote>{paragraphs}</blockquote>"

        if isinstance(block, MarkdownHeadingNode):
            return f"<h{block.level}>{self._render_inline(rendered.content)}</h{block.level}>"

        if isinstance(block, MarkdownHorizontalRuleNode):
            return "<hr />"

        if isinstance(block, MarkdownListItemNode):
            marker = html.escape(block.marker) if block.ordered else html.escape(self._config.bullet)
            margin = f"{block.indent * self._config.indent_unit_rem:g}rem"
            return (
                f'<div class="list-item" style="margin-left: {margin}">'
                f'<span class="list-marker">{marker}</span>'
                f'<span>{self._render_inline(rendered.content)}</span></div>'
            )

        if isinstance(block, MarkdownBlankNode):
            return '<div class="blank"></div>'

        return f"<p>{self._render_inline(rendered.content)}</p>"

    def visit_MarkdownTextNode(self, node: MarkdownTextNode) -> str:  # pylint: disable=invalid-name
        """Render a text node."""
        return html.escape(node.content)

    def visit_MarkdownBoldNode(self, node: MarkdownBoldNode) -> str:  # pylint: disable=invalid-name
        """Render a bold node."""
        return f"<strong>{self._render_inline(node.children)}</strong>"

    def visit_MarkdownEmphasisNode(self, node: MarkdownEmphasisNode) -> str:  # pylint: disable=invalid-name
        """Render an emphasis node."""
        return f"<em>{self._render_inline(node.children)}</em>"

    def visit_MarkdownInlineCodeNode(self, node: MarkdownInlineCodeNode) -> str:  # pylint: disable=invalid-name
        """Render an inline code node."""
        return f"<code>{html.escape(node.content)}</code>"

    def visit_MarkdownLinkNode(self, node: MarkdownLinkNode) -> str:  # pylint: disable=invalid-name
        """
        Render a link node.

        Links always open outside the chat view.  Targets with an unsafe
        scheme produce only the escaped label.

        Args:
            node: The link node

        Returns:
            The anchor element, or the label text for an unsafe target
        """
        if not is_safe_href(node.href):
            self._logger.debug("Dropping link with unsafe target %r", node.href)
            return html.escape(node.label)

        return (
            f'<a href="{html.escape(node.href)}" target="_blank" rel="noopener noreferrer">'
            f'{html.escape(node.label)}</a>'
        )
