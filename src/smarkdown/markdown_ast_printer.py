"""
Visitor class to print rendered markdown documents for debugging
"""
from typing import List

from smarkdown.markdown_ast_node import (
    MarkdownASTVisitor, MarkdownInlineNode, MarkdownTextNode, MarkdownBoldNode, MarkdownEmphasisNode,
    MarkdownInlineCodeNode, MarkdownLinkNode, MarkdownCodeBlockNode, MarkdownTableNode,
    MarkdownBlockquoteNode, MarkdownHeadingNode, MarkdownHorizontalRuleNode, MarkdownListItemNode,
    MarkdownBlankNode
)
from smarkdown.markdown_render_driver import MarkdownRenderedBlock


class MarkdownASTPrinter(MarkdownASTVisitor):
    """Visitor that formats the document structure as an indented tree."""
    def __init__(self) -> None:
        """Initialize the printer with zero indentation."""
        super().__init__()
        self.indent_level = 0
        self._lines: List[str] = []

    def _emit(self, text: str) -> None:
        """
        Add a line at the current indentation.

        Args:
            text: The line to add
        """
        self._lines.append(f"{'  ' * self.indent_level}{text}")

    def _emit_inline(self, label: str, nodes: List[MarkdownInlineNode]) -> None:
        """
        Add a labelled line followed by its inline nodes, indented one level.

        Args:
            label: Label for the group
            nodes: Inline nodes to print beneath the label
        """
        self._emit(label)
        self.indent_level += 1
        for node in nodes:
            self.visit(node)

        self.indent_level -= 1

    def format(self, document: List[MarkdownRenderedBlock]) -> str:
        """
        Format a document as a tree.

        Args:
            document: The rendered blocks

        Returns:
            The tree, one node per line
        """
        self.indent_level = 0
        self._lines = []
        for rendered in document:
            self.visit(rendered)

        return "\n".join(self._lines)

    def print_document(self, document: List[MarkdownRenderedBlock]) -> None:
        """
        Print a document tree to stdout.

        Args:
            document: The rendered blocks
        """
        print(self.format(document))

    def visit_MarkdownRenderedBlock(self, rendered: MarkdownRenderedBlock) -> None:  # pylint: disable=invalid-name
        """
        Print a block and its formatted text.

        Args:
            rendered: The rendered block
        """
        block = rendered.block
        prefix = f"[{rendered.key}] "

        if isinstance(block, MarkdownCodeBlockNode):
            self._emit(f"{prefix}CodeBlock (language '{block.language}')")
            self.indent_level += 1
            self._emit(f"Content: {block.content!r}")
            self.indent_level -= 1
            return

        if isinstance(block, MarkdownTableNode):
            self._emit(f"{prefix}Table")
            self.indent_level += 1
            self._emit("Header")
            self.indent_level += 1
            for cell in rendered.header:
                self._emit_inline("Cell", cell)

            self.indent_level -= 1
            for row in rendered.rows:
                self._emit("Row")
                self.indent_level += 1
                for cell in row:
                    self._emit_inline("Cell", cell)

                self.indent_level -= 1

            self.indent_level -= 1
            return

        if isinstance(block, MarkdownBlockquoteNode):
            self._emit(f"{prefix}Blockquote")
            self.indent_level += 1
            for line in rendered.lines:
                self._emit_inline("Line", line)

            self.indent_level -= 1
            return

        if isinstance(block, MarkdownHeadingNode):
            self._emit_inline(f"{prefix}Heading (level {block.level})", rendered.content)
            return

        if isinstance(block, MarkdownHorizontalRuleNode):
            self._emit(f"{prefix}HorizontalRule")
            return

        if isinstance(block, MarkdownListItemNode):
            kind = "ordered" if block.ordered else "unordered"
            self._emit_inline(f"{prefix}ListItem ({kind}, indent {block.indent}, marker '{block.marker}')", rendered.content)
            return

        if isinstance(block, MarkdownBlankNode):
            self._emit(f"{prefix}Blank")
            return

        self._emit_inline(f"{prefix}Paragraph", rendered.content)

    def visit_MarkdownTextNode(self, node: MarkdownTextNode) -> None:  # pylint: disable=invalid-name
        """Print a text node."""
        self._emit(f"Text: {node.content!r}")

    def visit_MarkdownBoldNode(self, node: MarkdownBoldNode) -> None:  # pylint: disable=invalid-name
        """Print a bold node and its children."""
        self._emit_inline("Bold", node.children)

    def visit_MarkdownEmphasisNode(self, node: MarkdownEmphasisNode) -> None:  # pylint: disable=invalid-name
        """Print an emphasis node and its children."""
        self._emit_inline("Emphasis", node.children)

    def visit_MarkdownInlineCodeNode(self, node: MarkdownInlineCodeNode) -> None:  # pylint: disable=invalid-name
        """Print an inline code node."""
        self._emit(f"InlineCode: {node.content!r}")

    def visit_MarkdownLinkNode(self, node: MarkdownLinkNode) -> None:  # pylint: disable=invalid-name
        """Print a link node."""
        self._emit(f"Link ({node.href}): {node.label!r}")
