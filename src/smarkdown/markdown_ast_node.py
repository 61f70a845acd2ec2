"""
Node types for the streaming markdown engine.

Blocks carry the raw, unformatted text of the lines they were scanned from.
Inline nodes are produced from that text by the inline formatter.  All nodes
are plain value objects: they compare structurally, own their children, and
hold no references back to their parents.
"""

from dataclasses import dataclass, field
from typing import Any, List, Union


@dataclass
class MarkdownCodeBlockNode:
    """Fenced code block.  The content is kept exactly as it appeared between the fences."""

    language: str
    content: str


@dataclass
class MarkdownTableNode:
    """Pipe table.  Rows are not padded to the header width."""

    header: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)


@dataclass
class MarkdownBlockquoteNode:
    """Run of consecutive quoted lines, with the quote prefix removed."""

    lines: List[str] = field(default_factory=list)


@dataclass
class MarkdownHeadingNode:
    """Heading (levels 1 through 6)."""

    level: int
    content: str


@dataclass
class MarkdownHorizontalRuleNode:
    """Horizontal rule."""


@dataclass
class MarkdownListItemNode:
    """
    A single list item line.

    List items are never grouped into lists; the indent is only a visual offset.
    """

    indent: int
    ordered: bool
    marker: str
    content: str


@dataclass
class MarkdownBlankNode:
    """Blank line."""


@dataclass
class MarkdownParagraphNode:
    """Any line that is not recognised as another block."""

    content: str


@dataclass
class MarkdownTextNode:
    """Plain text."""

    content: str


@dataclass
class MarkdownBoldNode:
    """Bold (strong) text."""

    children: List["MarkdownInlineNode"] = field(default_factory=list)


@dataclass
class MarkdownEmphasisNode:
    """Italic (emphasised) text."""

    children: List["MarkdownInlineNode"] = field(default_factory=list)


@dataclass
class MarkdownInlineCodeNode:
    """Inline code span.  The content is never formatted further."""

    content: str


@dataclass
class MarkdownLinkNode:
    """Link.  Both the label and the href are kept verbatim."""

    label: str
    href: str


MarkdownBlockNode = Union[
    MarkdownCodeBlockNode,
    MarkdownTableNode,
    MarkdownBlockquoteNode,
    MarkdownHeadingNode,
    MarkdownHorizontalRuleNode,
    MarkdownListItemNode,
    MarkdownBlankNode,
    MarkdownParagraphNode,
]

MarkdownInlineNode = Union[
    MarkdownTextNode,
    MarkdownBoldNode,
    MarkdownEmphasisNode,
    MarkdownInlineCodeNode,
    MarkdownLinkNode,
]


class MarkdownASTVisitor:
    """
    Base visitor class for markdown node traversal.

    Dispatches to a `visit_<ClassName>` method when one exists, otherwise to
    `generic_visit`.
    """

    def visit(self, node: Any) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: Any) -> List[Any]:
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit

        Returns:
            A list of results from visiting each child, empty for leaf nodes
        """
        results = []
        for child in getattr(node, "children", []):
            results.append(self.visit(child))

        return results
