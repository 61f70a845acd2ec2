"""Tests for the HTML renderer."""

import pytest

from smarkdown import MarkdownHTMLRenderer, MarkdownRenderConfig, render_document


def render_html(text, renderer=None):
    """Render markdown text to HTML with a default renderer."""
    if renderer is None:
        renderer = MarkdownHTMLRenderer()

    return renderer.render(render_document(text))


class TestBlocks:
    """Test block-level HTML."""

    @pytest.mark.parametrize("text,expected", [
        ("## Title", "<h2>Title</h2>"),
        ("---", "<hr />"),
        ("   ", '<div class="blank"></div>'),
        ("plain", "<p>plain</p>"),
        ("> a\n> *b*", "<blockquote><p>a</p><p><em>b</em></p></blockquote>"),
    ])
    def test_simple_blocks(self, html_renderer, text, expected):
        """Test headings, rules, blanks, paragraphs and blockquotes."""
        assert render_html(text, html_renderer) == expected

    def test_code_block_with_language(self, html_renderer):
        """Test that code is escaped and labelled with its language."""
        assert render_html("```js\nif (a < b) {}\n```", html_renderer) == (
            '<pre><code class="language-js">if (a &lt; b) {}</code></pre>'
        )

    def test_code_block_without_language(self, html_renderer):
        """Test that no class is added when there is no language."""
        assert render_html("```\nx\n```", html_renderer) == "<pre><code>x</code></pre>"

    def test_table(self, html_renderer):
        """Test table structure."""
        assert render_html("|a|b|\n|-|-|\n|1|**2**|", html_renderer) == (
            "<table><thead><tr><th>a</th><th>b</th></tr></thead>"
            "<tbody><tr><td>1</td><td><strong>2</strong></td></tr></tbody></table>"
        )

    def test_unordered_list_item(self, html_renderer):
        """Test that unordered items use the bullet glyph."""
        assert render_html("- item", html_renderer) == (
            '<div class="list-item" style="margin-left: 0rem">'
            '<span class="list-marker">•</span><span>item</span></div>'
        )

    def test_ordered_nested_list_item(self, html_renderer):
        """Test that ordered items keep their marker and indent is converted to a margin."""
        assert render_html("  3. third", html_renderer) == (
            '<div class="list-item" style="margin-left: 1rem">'
            '<span class="list-marker">3.</span><span>third</span></div>'
        )

    def test_one_line_per_block(self, html_renderer):
        """Test that blocks are separated by newlines."""
        assert render_html("a\nb", html_renderer) == "<p>a</p>\n<p>b</p>"

    def test_empty_document(self, html_renderer):
        """Test rendering an empty document."""
        assert html_renderer.render([]) == ""


class TestInline:
    """Test inline HTML and escaping."""

    def test_formatting(self, html_renderer):
        """Test bold, italic and inline code."""
        assert render_html("**a** *b* `c`", html_renderer) == (
            "<p><strong>a</strong> <em>b</em> <code>c</code></p>"
        )

    def test_text_is_escaped(self, html_renderer):
        """Test that markup in model output is escaped."""
        assert render_html("**bold** <script>alert(1)</script>", html_renderer) == (
            "<p><strong>bold</strong> &lt;script&gt;alert(1)&lt;/script&gt;</p>"
        )

    def test_inline_code_is_escaped(self, html_renderer):
        """Test that inline code content is escaped."""
        assert render_html("`<b>`", html_renderer) == "<p><code>&lt;b&gt;</code></p>"

    def test_link(self, html_renderer):
        """Test that links open externally and have escaped attributes."""
        assert render_html('[a & b](http://x?a=1&b="2")', html_renderer) == (
            '<p><a href="http://x?a=1&amp;b=&quot;2&quot;" target="_blank" rel="noopener noreferrer">'
            'a &amp; b</a></p>'
        )

    @pytest.mark.parametrize("text", [
        "[x](javascript:alert(1)",
        "[x](JavaScript:alert)",
        "[x]( javascript:void 0)",
        "[x](data:text/html;base64,PHNjcmlwdD4=)",
        "[x](vbscript:msgbox)",
    ])
    def test_unsafe_link_renders_label_only(self, html_renderer, text):
        """Test that links with script-capable schemes are not made live."""
        assert render_html(text, html_renderer) == "<p>x</p>"

    @pytest.mark.parametrize("href", ["https://example.com", "mailto:a@b.c", "/docs/page", "#section"])
    def test_safe_link_targets(self, html_renderer, href):
        """Test that web, mail and relative targets stay live."""
        assert f'<a href="{href}"' in render_html(f"[x]({href})", html_renderer)

    def test_unsafe_link_keeps_verbatim_href_in_document(self):
        """Test that only the HTML output drops the target, not the AST."""
        document = render_document("[x](javascript:alert(1)")
        assert document[0].content[0].href == "javascript:alert(1"


def test_custom_configuration():
    """Test bullet, indent and language class settings."""
    renderer = MarkdownHTMLRenderer(MarkdownRenderConfig(bullet="-", indent_unit_rem=1.0, code_language_prefix="lang-"))
    assert render_html("  * x\n```py\ny\n```", renderer) == (
        '<div class="list-item" style="margin-left: 2rem">'
        '<span class="list-marker">-</span><span>x</span></div>\n'
        '<pre><code class="lang-py">y</code></pre>'
    )
