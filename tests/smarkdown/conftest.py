"""Shared fixtures and utilities for markdown rendering tests."""

from pathlib import Path
from typing import List

import pytest

from smarkdown import (
    MarkdownBlockScanner,
    MarkdownHTMLRenderer,
    MarkdownRenderConfig,
    MarkdownRenderDriver
)


@pytest.fixture
def scanner():
    """Create a block scanner with default settings."""
    return MarkdownBlockScanner()


@pytest.fixture
def driver():
    """Create a render driver with default settings."""
    return MarkdownRenderDriver()


@pytest.fixture
def driver_custom():
    """Factory for render drivers with custom configuration."""
    def _create_driver(**kwargs):
        return MarkdownRenderDriver(MarkdownRenderConfig(**kwargs))
    return _create_driver


@pytest.fixture
def html_renderer():
    """Create an HTML renderer with default settings."""
    return MarkdownHTMLRenderer()


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding markdown/JSON fixture pairs."""
    return Path(__file__).parent / "fixtures"


class MarkdownTestHelpers:
    """Helper utilities for markdown testing."""

    @staticmethod
    def prefixes(text: str) -> List[str]:
        """Every prefix of a text, shortest first, including the empty string and the text itself."""
        return [text[:i] for i in range(len(text) + 1)]

    @staticmethod
    def chunks(text: str, size: int) -> List[str]:
        """Split text into chunks of at most size characters."""
        return [text[i:i + size] for i in range(0, len(text), size)]


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return MarkdownTestHelpers()
