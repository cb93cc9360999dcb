"""Tests for TXT handler."""

import pytest
from pathlib import Path

from styled_markdown.formats.txt_handler import TXTHandler
from styled_markdown.formatting.ir import (
    FontSpec,
    StyledDocument,
    StyledRun,
    TextStyle,
)
from styled_markdown.formatting.parser import MarkdownParser


class TestTXTHandler:
    """Tests for the TXT format handler."""

    @pytest.fixture
    def handler(self) -> TXTHandler:
        return TXTHandler(spacing_unit=10.0)

    def test_supported_extensions(self, handler: TXTHandler):
        """Test that handler supports .txt and .md extensions."""
        assert ".txt" in handler.supported_extensions
        assert ".md" in handler.supported_extensions

    def test_write_plain_text(self, handler: TXTHandler, tmp_path: Path):
        """Test writing plain text without formatting."""
        doc = StyledDocument(runs=(StyledRun(text="Hello, world!", starts_line=True),))

        output_path = tmp_path / "output.txt"
        handler.write(doc, output_path)

        assert output_path.read_text(encoding="utf-8") == "Hello, world!"

    def test_write_italic_text(self, handler: TXTHandler):
        """Test writing italic text with markdown."""
        doc = StyledDocument(
            runs=(
                StyledRun(text="She ", starts_line=True),
                StyledRun(text="ran", style=TextStyle.ITALIC),
                StyledRun(text=" quickly."),
            )
        )

        assert handler.render(doc) == "She *ran* quickly."

    def test_write_italic_with_asterisk(self, handler: TXTHandler):
        """Test italic text containing an asterisk uses underscores."""
        doc = StyledDocument(
            runs=(StyledRun(text="a*b", style=TextStyle.ITALIC, starts_line=True),)
        )

        assert handler.render(doc) == "_a*b_"

    def test_write_numeric_emphasis(self, handler: TXTHandler):
        """Test bold italic digits are written between asterisks."""
        doc = StyledDocument(
            runs=(
                StyledRun(
                    text="7",
                    style=TextStyle.BOLD | TextStyle.ITALIC,
                    starts_line=True,
                ),
            )
        )

        assert handler.render(doc) == "*7*"

    def test_write_headings_rules_and_spacing(self, handler: TXTHandler):
        """Test line-level constructs."""
        doc = StyledDocument(
            runs=(
                StyledRun(text="Title", style=TextStyle.BOLD, heading_level=1, starts_line=True),
                StyledRun(text="", horizontal_rule=True, preceding_spacing=10.0, starts_line=True),
                StyledRun(text="Sub", style=TextStyle.BOLD, heading_level=2, starts_line=True),
                StyledRun(text="body", preceding_spacing=20.0, starts_line=True),
            )
        )

        assert handler.render(doc) == "# Title\n\n---\n## Sub\n\n\nbody"

    def test_roundtrip_through_parser(self, base_font: FontSpec):
        """Test that parse -> write -> parse preserves the document."""
        original = "# Title\n\nSome *text* and *1*.\n---\n## Next\n\n\nend\n\n"
        parser = MarkdownParser()
        handler = TXTHandler()

        doc = parser.parse(original, base_font)
        again = parser.parse(handler.render(doc), base_font)

        assert again == doc

    @pytest.mark.parametrize(
        "source",
        [
            "__a_",
            "x__a_",
            "**word**",
            "**7*",
            "_7_",
            "*7*",
            "*a**b*",
            "*a*_b*c_",
            "_a*b_",
            "_x_ *1*",
            "a * b",
            "*a* b *c",
            "# __a__",
            "# x * y",
            "# *a* _b_",
            "## 7*7",
        ],
    )
    def test_rendered_text_parses_back(self, base_font: FontSpec, source: str):
        """Test literal delimiters next to emphasis survive a parse -> write -> parse."""
        parser = MarkdownParser()
        handler = TXTHandler()

        doc = parser.parse(source, base_font)
        again = parser.parse(handler.render(doc), base_font)

        assert again == doc

    def test_literal_delimiter_before_span(self, handler: TXTHandler, base_font: FontSpec):
        """Test a literal underscore before an italic run reuses the underscore."""
        doc = MarkdownParser().parse("__a_", base_font)

        assert handler.render(doc) == "__a_"

    def test_heading_with_literal_delimiters(self, handler: TXTHandler, base_font: FontSpec):
        """Test heading text holding delimiters is wrapped so they stay literal."""
        doc = MarkdownParser().parse("# __a__", base_font)

        assert doc[0].text == "_a_"
        assert handler.render(doc) == "# *_a_*"
