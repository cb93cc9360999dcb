"""Tests for the file converter."""

import json

import pytest
from pathlib import Path

from styled_markdown.config import Settings
from styled_markdown.core.converter import ConversionError, DocumentConverter
from styled_markdown.formats import DOCXHandler, TXTHandler
from styled_markdown.formatting.ir import FontSpec


class TestDocumentConverter:
    """Tests for DocumentConverter."""

    @pytest.fixture
    def converter(self, settings: Settings) -> DocumentConverter:
        return DocumentConverter(settings=settings)

    def test_uses_settings_font_and_options(self, converter: DocumentConverter):
        """Test the base font and options come from settings."""
        assert converter.base_font == FontSpec("Helvetica", 10.0)
        assert converter.parser.options.heading1_scale == 2.0
        assert converter.parser.options.spacing_unit == 10.0

    def test_base_font_override(self, settings: Settings):
        """Test an explicit base font wins over settings."""
        converter = DocumentConverter(settings=settings, base_font=FontSpec("Georgia", 14.0))

        doc = converter.convert_text("# Title")

        assert doc[0].font == FontSpec("Georgia", 28.0, bold=True)

    def test_convert_file_to_json(self, converter: DocumentConverter, tmp_markdown_file: Path, tmp_path: Path):
        """Test converting a markdown file to JSON."""
        output_path = tmp_path / "out.json"

        document = converter.convert_file(tmp_markdown_file, output_path)

        data = json.loads(output_path.read_text(encoding="utf-8"))
        assert len(data["runs"]) == len(document)

    def test_convert_file_to_docx(self, converter: DocumentConverter, tmp_markdown_file: Path, tmp_path: Path):
        """Test converting a markdown file to DOCX."""
        output_path = tmp_path / "out.docx"

        converter.convert_file(tmp_markdown_file, output_path)

        assert output_path.exists()

    def test_missing_input(self, converter: DocumentConverter, tmp_path: Path):
        """Test a missing input raises ConversionError."""
        with pytest.raises(ConversionError, match="not found"):
            converter.convert_file(tmp_path / "missing.md", tmp_path / "out.txt")

    def test_unsupported_input(self, converter: DocumentConverter, tmp_path: Path):
        """Test a non-markdown input raises ConversionError."""
        source = tmp_path / "book.pdf"
        source.write_bytes(b"%PDF")

        with pytest.raises(ConversionError, match="Unsupported input format"):
            converter.read_file(source)

    def test_unsupported_output(self, converter: DocumentConverter, tmp_markdown_file: Path, tmp_path: Path):
        """Test an unknown output extension raises ConversionError."""
        with pytest.raises(ConversionError, match="Unsupported file format"):
            converter.convert_file(tmp_markdown_file, tmp_path / "out.pdf")

    def test_handler_for(self, converter: DocumentConverter):
        """Test handlers get the configured spacing unit."""
        handler = converter.handler_for(Path("notes.md"))

        assert isinstance(handler, TXTHandler)
        assert handler.spacing_unit == 10.0
        assert isinstance(converter.handler_for(Path("x.DOCX")), DOCXHandler)
