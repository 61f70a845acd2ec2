"""Split runs of pipe-delimited lines into table cells."""

from typing import List

from smarkdown.markdown_ast_node import MarkdownTableNode


def split_table_row(line: str) -> List[str]:
    """
    Split a single pipe-delimited line into trimmed cells.

    Fragments that are empty after trimming (including the ones produced by
    leading and trailing pipes) are dropped.

    Args:
        line: The raw table line

    Returns:
        List of cell strings
    """
    return [cell.strip() for cell in line.split("|") if cell.strip()]


def split_table(lines: List[str]) -> MarkdownTableNode:
    """
    Build a table from a run of pipe-delimited lines.

    The first line is the header and the second is taken to be the separator
    row.  The separator is discarded without being checked.  Rows are not
    padded or truncated to the header width.

    Args:
        lines: Consecutive table lines, header first

    Returns:
        A table node
    """
    if not lines:
        return MarkdownTableNode()

    header = split_table_row(lines[0])
    rows = [split_table_row(line) for line in lines[2:]]
    return MarkdownTableNode(header=header, rows=rows)
