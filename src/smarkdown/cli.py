"""
Command-line interface for rendering markdown files.
"""

import argparse
import logging
import sys
from typing import List

from smarkdown.markdown_ast_printer import MarkdownASTPrinter
from smarkdown.markdown_ast_serializer import to_json
from smarkdown.markdown_block_scanner import MarkdownBlockScanner
from smarkdown.markdown_exceptions import MarkdownError
from smarkdown.markdown_html_renderer import MarkdownHTMLRenderer
from smarkdown.markdown_render_config import MarkdownRenderConfig
from smarkdown.markdown_render_driver import MarkdownRenderDriver, MarkdownRenderedBlock, render_document


logger = logging.getLogger("smarkdown")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="smarkdown",
        description="Render markdown the way a streaming chat view does",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s reply.md                          # Print the block tree
  %(prog)s --format html reply.md            # Render to HTML
  %(prog)s --stream --chunk-size 4 reply.md  # Replay as a token stream
  cat reply.md | %(prog)s --format json      # Read from stdin
        """
    )
    parser.add_argument('file', nargs='?', default='-', help='Markdown file to render (default: stdin)')
    parser.add_argument('--config', '-c', help='YAML render configuration file')
    parser.add_argument('--format', '-f', choices=['tree', 'html', 'json'], default='tree',
                        help='Output format')
    parser.add_argument('--stream', action='store_true',
                        help='Replay the text in chunks through the render driver')
    parser.add_argument('--chunk-size', type=int, default=16,
                        help='Characters per chunk when streaming')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    return parser


def _read_text(path: str) -> str:
    """
    Read the markdown source.

    The bytes are decoded without newline translation, so the scanner sees
    the line endings the input actually has.

    Args:
        path: File path, or '-' for stdin

    Returns:
        The text

    Raises:
        MarkdownError: If the input is not valid UTF-8
    """
    if path == '-':
        stdin_bytes = getattr(sys.stdin, 'buffer', None)
        if stdin_bytes is None:
            return sys.stdin.read()

        data = stdin_bytes.read()

    else:
        with open(path, 'rb') as f:
            data = f.read()

    try:
        return data.decode('utf-8')

    except UnicodeDecodeError as e:
        source = "stdin" if path == '-' else path
        raise MarkdownError(f"{source} is not valid UTF-8: {e}", {"path": path, "position": e.start}) from e


def _stream(text: str, config: MarkdownRenderConfig, chunk_size: int) -> List[MarkdownRenderedBlock]:
    """
    Feed text through a render driver a chunk at a time.

    Args:
        text: The full text
        config: Render configuration
        chunk_size: Characters per chunk

    Returns:
        The document after the last chunk

    Raises:
        MarkdownError: If the streamed result differs from a one-shot render
    """
    driver = MarkdownRenderDriver(config)
    chunks = [text[i:i + chunk_size] for i in range(0, len(text), chunk_size)]
    for chunk in chunks:
        driver.append(chunk)

    expected = render_document(text, MarkdownBlockScanner(config.normalize_line_endings))
    if driver.document != expected:
        raise MarkdownError("Streamed document does not match a single render of the same text")

    print(f"Streamed {len(chunks)} chunks with {driver.render_count} re-parses", file=sys.stderr)
    return driver.document


def _format(document: List[MarkdownRenderedBlock], output_format: str, config: MarkdownRenderConfig) -> str:
    """Format a document for output."""
    if output_format == 'html':
        return MarkdownHTMLRenderer(config).render(document)

    if output_format == 'json':
        return to_json(document)

    return MarkdownASTPrinter().format(document)


def main(argv: List[str] | None = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments, or None to use sys.argv

    Returns:
        Process exit status
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if args.chunk_size < 1:
        print("Error: --chunk-size must be at least 1")
        return 1

    try:
        config = MarkdownRenderConfig.create_default()
        if args.config:
            config = MarkdownRenderConfig.load_from_file(args.config)

        text = _read_text(args.file)

        if args.stream:
            document = _stream(text, config, args.chunk_size)

        else:
            document = MarkdownRenderDriver(config).update(text)

    except (MarkdownError, OSError) as e:
        logger.error("Failed to render %s: %s", args.file, e)
        print(f"Error: {e}")
        return 1

    output = _format(document, args.format, config)
    if output:
        print(output)

    return 0
