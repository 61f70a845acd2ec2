"""
Visitor class for serializing rendered markdown documents to JSON-compatible data
"""
import json
from typing import Any, Dict, List

from smarkdown.markdown_ast_node import (
    MarkdownASTVisitor, MarkdownInlineNode, MarkdownTextNode, MarkdownBoldNode, MarkdownEmphasisNode,
    MarkdownInlineCodeNode, MarkdownLinkNode, MarkdownCodeBlockNode, MarkdownTableNode,
    MarkdownBlockquoteNode, MarkdownHeadingNode, MarkdownHorizontalRuleNode, MarkdownListItemNode,
    MarkdownBlankNode
)
from smarkdown.markdown_render_driver import MarkdownRenderedBlock


class MarkdownASTSerializer(MarkdownASTVisitor):
    """Visitor that serializes rendered documents into dictionaries tagged with a "type" key."""

    def serialize(self, document: List[MarkdownRenderedBlock]) -> List[Dict[str, Any]]:
        """
        Serialize a document.

        Args:
            document: The rendered blocks

        Returns:
            One dictionary per block
        """
        return [self.visit(rendered) for rendered in document]

    def _inline(self, nodes: List[MarkdownInlineNode]) -> List[Dict[str, Any]]:
        """Serialize a list of inline nodes."""
        return [self.visit(node) for node in nodes]

    def visit_MarkdownRenderedBlock(self, rendered: MarkdownRenderedBlock) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a block and its formatted text."""
        block = rendered.block
        result: Dict[str, Any]

        if isinstance(block, MarkdownCodeBlockNode):
            result = {"type": "code_block", "language": block.language, "content": block.content}

        elif isinstance(block, MarkdownTableNode):
            result = {
                "type": "table",
                "header": [self._inline(cell) for cell in rendered.header],
                "rows": [[self._inline(cell) for cell in row] for row in rendered.rows]
            }

        elif isinstance(block, MarkdownBlockquoteNode):
            result = {"type": "blockquote", "lines": [self._inline(line) for line in rendered.lines]}

        elif isinstance(block, MarkdownHeadingNode):
            result = {"type": "heading", "level": block.level, "content": self._inline(rendered.content)}

        elif isinstance(block, MarkdownHorizontalRuleNode):
            result = {"type": "horizontal_rule"}

        elif isinstance(block, MarkdownListItemNode):
            result = {
                "type": "list_item",
                "indent": block.indent,
                "ordered": block.ordered,
                "marker": block.marker,
                "content": self._inline(rendered.content)
            }

        elif isinstance(block, MarkdownBlankNode):
            result = {"type": "blank"}

        else:
            result = {"type": "paragraph", "content": self._inline(rendered.content)}

        result["key"] = rendered.key
        return result

    def visit_MarkdownTextNode(self, node: MarkdownTextNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a text node."""
        return {"type": "text", "content": node.content}

    def visit_MarkdownBoldNode(self, node: MarkdownBoldNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a bold node."""
        return {"type": "bold", "children": self._inline(node.children)}

    def visit_MarkdownEmphasisNode(self, node: MarkdownEmphasisNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize an emphasis node."""
        return {"type": "emphasis", "children": self._inline(node.children)}

    def visit_MarkdownInlineCodeNode(self, node: MarkdownInlineCodeNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize an inline code node."""
        return {"type": "inline_code", "content": node.content}

    def visit_MarkdownLinkNode(self, node: MarkdownLinkNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a link node."""
        return {"type": "link", "label": node.label, "href": node.href}


def serialize_document(document: List[MarkdownRenderedBlock]) -> List[Dict[str, Any]]:
    """
    Serialize a document to JSON-compatible data.

    Args:
        document: The rendered blocks

    Returns:
        One dictionary per block
    """
    return MarkdownASTSerializer().serialize(document)


def to_json(document: List[MarkdownRenderedBlock], indent: int | None = 2) -> str:
    """
    Serialize a document to a JSON string.

    Args:
        document: The rendered blocks
        indent: JSON indentation, or None for compact output

    Returns:
        The JSON text
    """
    return json.dumps(serialize_document(document), indent=indent, ensure_ascii=False)
