"""
Block scanner for streaming markdown.

The scanner makes a single forward pass over the lines of a message and
classifies every line into exactly one block.  It is called from scratch on
every update of a streamed response, so it keeps no state between calls and
has no failure path: text that has been cut off part way through a construct
degrades to paragraphs, blank lines or an implicitly closed code block.
"""

import logging
import re
from typing import List, Tuple

from smarkdown.markdown_ast_node import (
    MarkdownBlockNode, MarkdownCodeBlockNode, MarkdownBlockquoteNode, MarkdownHeadingNode,
    MarkdownHorizontalRuleNode, MarkdownListItemNode, MarkdownBlankNode, MarkdownParagraphNode
)
from smarkdown.markdown_table_splitter import split_table


class MarkdownBlockScanner:
    """
    Scanner that splits markdown text into a flat sequence of blocks.

    Paragraph lines and list item lines are never merged: each source line
    produces its own block.
    """

    def __init__(self, normalize_line_endings: bool = True) -> None:
        """
        Initialize the scanner.

        Args:
            normalize_line_endings: Convert CRLF line endings to LF before scanning
        """
        self._normalize_line_endings = normalize_line_endings

        self._list_item_pattern = re.compile(r'^(\s*)([-*]|[0-9]+\.)\s')
        self._horizontal_rules = ("---", "***")

        self._logger = logging.getLogger("MarkdownBlockScanner")

    def scan(self, text: str) -> List[MarkdownBlockNode]:
        """
        Scan markdown text into blocks.

        Args:
            text: The markdown text, possibly truncated at any point

        Returns:
            List of block nodes, empty for empty text
        """
        if not text:
            return []

        if self._normalize_line_endings:
            text = text.replace("\r\n", "\n")

        lines = text.split("\n")
        blocks: List[MarkdownBlockNode] = []

        i = 0
        while i < len(lines):
            block, i = self._scan_block(lines, i)
            blocks.append(block)

        self._logger.debug("Scanned %d lines into %d blocks", len(lines), len(blocks))
        return blocks

    def _scan_block(self, lines: List[str], i: int) -> Tuple[MarkdownBlockNode, int]:
        """
        Classify the line at index i, consuming any following lines that belong to the same block.

        Args:
            lines: All lines of the text
            i: Index of the first unconsumed line

        Returns:
            The block and the index of the next unconsumed line
        """
        line = lines[i]
        stripped = line.strip()

        if line.startswith("```"):
            return self._scan_code_block(lines, i)

        if stripped.startswith("|"):
            return self._scan_table(lines, i)

        if line.startswith("> "):
            return self._scan_blockquote(lines, i)

        if line.startswith("#"):
            return self._scan_heading(line), i + 1

        if stripped in self._horizontal_rules:
            return MarkdownHorizontalRuleNode(), i + 1

        list_match = self._list_item_pattern.match(line)
        if list_match:
            marker = list_match.group(2)
            return MarkdownListItemNode(
                indent=len(list_match.group(1)),
                ordered=marker[0].isdigit(),
                marker=marker,
                content=line[list_match.end():]
            ), i + 1

        if not stripped:
            return MarkdownBlankNode(), i + 1

        return MarkdownParagraphNode(line), i + 1

    def _scan_code_block(self, lines: List[str], i: int) -> Tuple[MarkdownBlockNode, int]:
        """
        Consume a fenced code block.

        Everything up to a closing fence at least as long as the opening one is
        taken verbatim.  If no closing fence has arrived yet the block runs to
        the end of the text.

        Args:
            lines: All lines of the text
            i: Index of the opening fence line

        Returns:
            The code block and the index of the line after the closing fence
        """
        opening = lines[i]
        fence_length = len(opening) - len(opening.lstrip("`"))
        language = opening[fence_length:].strip()

        content_lines: List[str] = []
        i += 1
        while i < len(lines):
            if self._is_closing_fence(lines[i], fence_length):
                i += 1
                break

            content_lines.append(lines[i])
            i += 1

        return MarkdownCodeBlockNode(language=language, content="\n".join(content_lines)), i

    def _is_closing_fence(self, line: str, fence_length: int) -> bool:
        """
        Check whether a line closes a code block.

        Args:
            line: The line to check
            fence_length: Number of backticks in the opening fence

        Returns:
            True if the line consists only of at least fence_length backticks
        """
        stripped = line.strip()
        return len(stripped) >= fence_length and stripped == "`" * len(stripped)

    def _scan_table(self, lines: List[str], i: int) -> Tuple[MarkdownBlockNode, int]:
        """
        Consume a run of pipe-prefixed lines.

        Args:
            lines: All lines of the text
            i: Index of the first pipe line

        Returns:
            A table, or a paragraph if the run is a single line, and the next index
        """
        start = i
        while i < len(lines) and lines[i].strip().startswith("|"):
            i += 1

        table_lines = lines[start:i]
        if len(table_lines) < 2:
            return MarkdownParagraphNode(table_lines[0]), i

        return split_table(table_lines), i

    def _scan_blockquote(self, lines: List[str], i: int) -> Tuple[MarkdownBlockNode, int]:
        """
        Consume a run of quoted lines.

        Args:
            lines: All lines of the text
            i: Index of the first quoted line

        Returns:
            The blockquote and the next index
        """
        quoted: List[str] = []
        while i < len(lines) and lines[i].startswith("> "):
            quoted.append(lines[i][2:])
            i += 1

        return MarkdownBlockquoteNode(quoted), i

    def _scan_heading(self, line: str) -> MarkdownHeadingNode:
        """
        Build a heading from a line starting with '#'.

        Runs of more than six '#' characters are clamped to level 6.

        Args:
            line: The heading line

        Returns:
            The heading node
        """
        run_length = len(line) - len(line.lstrip("#"))
        return MarkdownHeadingNode(level=min(run_length, 6), content=line[run_length:].strip())


def scan_blocks(text: str) -> List[MarkdownBlockNode]:
    """
    Scan markdown text into blocks using a default scanner.

    Args:
        text: The markdown text

    Returns:
        List of block nodes
    """
    return MarkdownBlockScanner().scan(text)
