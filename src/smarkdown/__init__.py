"""A streaming-safe markdown renderer for chat responses."""

from smarkdown.markdown_ast_node import (
    MarkdownASTVisitor,
    MarkdownBlankNode,
    MarkdownBlockNode,
    MarkdownBlockquoteNode,
    MarkdownBoldNode,
    MarkdownCodeBlockNode,
    MarkdownEmphasisNode,
    MarkdownHeadingNode,
    MarkdownHorizontalRuleNode,
    MarkdownInlineCodeNode,
    MarkdownInlineNode,
    MarkdownLinkNode,
    MarkdownListItemNode,
    MarkdownParagraphNode,
    MarkdownTableNode,
    MarkdownTextNode
)
from smarkdown.markdown_ast_printer import MarkdownASTPrinter
from smarkdown.markdown_ast_serializer import MarkdownASTSerializer, serialize_document, to_json
from smarkdown.markdown_block_scanner import MarkdownBlockScanner, scan_blocks
from smarkdown.markdown_exceptions import MarkdownConfigError, MarkdownError
from smarkdown.markdown_html_renderer import MarkdownHTMLRenderer
from smarkdown.markdown_inline_formatter import format_inline, format_links
from smarkdown.markdown_render_config import MarkdownRenderConfig
from smarkdown.markdown_render_driver import (
    MarkdownRenderDriver,
    MarkdownRenderedBlock,
    render_block,
    render_document
)
from smarkdown.markdown_table_splitter import split_table, split_table_row


__all__ = [
    "MarkdownASTPrinter",
    "MarkdownASTSerializer",
    "MarkdownASTVisitor",
    "MarkdownBlankNode",
    "MarkdownBlockNode",
    "MarkdownBlockScanner",
    "MarkdownBlockquoteNode",
    "MarkdownBoldNode",
    "MarkdownCodeBlockNode",
    "MarkdownConfigError",
    "MarkdownEmphasisNode",
    "MarkdownError",
    "MarkdownHTMLRenderer",
    "MarkdownHeadingNode",
    "MarkdownHorizontalRuleNode",
    "MarkdownInlineCodeNode",
    "MarkdownInlineNode",
    "MarkdownLinkNode",
    "MarkdownListItemNode",
    "MarkdownParagraphNode",
    "MarkdownRenderConfig",
    "MarkdownRenderDriver",
    "MarkdownRenderedBlock",
    "MarkdownTableNode",
    "MarkdownTextNode",
    "format_inline",
    "format_links",
    "render_block",
    "render_document",
    "scan_blocks",
    "serialize_document",
    "split_table",
    "split_table_row",
    "to_json"
]
