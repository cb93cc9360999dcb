"""File conversion orchestrator."""

from pathlib import Path
from typing import Optional

from styled_markdown.config import Settings, get_settings
from styled_markdown.formats import SOURCE_EXTENSIONS, FormatHandler, get_handler
from styled_markdown.formatting.ir import FontSpec, StyledDocument
from styled_markdown.formatting.parser import MarkdownParser


class ConversionError(Exception):
    """Error during file conversion."""

    pass


class DocumentConverter:
    """Orchestrates the file conversion pipeline.

    Pipeline:
    1. Read markdown source text
    2. Parse to styled runs with the configured base font and options
    3. Write through the handler chosen by the output extension
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        base_font: Optional[FontSpec] = None,
    ) -> None:
        """Initialize the converter.

        Args:
            settings: Application settings (default: global settings)
            base_font: Base font override (default: built from settings)
        """
        self.settings = settings or get_settings()
        self.base_font = base_font or self.settings.base_font()
        self.parser = MarkdownParser(options=self.settings.conversion_options())

    def convert_text(self, markdown_text: str) -> StyledDocument:
        """Convert markdown text with the configured base font."""
        return self.parser.parse(markdown_text, self.base_font)

    def read_file(self, input_path: Path) -> str:
        """Read a markdown source file.

        Raises:
            ConversionError: If the file is missing or not a markdown source
        """
        if not input_path.exists():
            raise ConversionError(f"Input file not found: {input_path}")

        if input_path.suffix.lower() not in SOURCE_EXTENSIONS:
            raise ConversionError(
                f"Unsupported input format: {input_path.suffix}. "
                f"Supported: {', '.join(SOURCE_EXTENSIONS)}"
            )

        return input_path.read_text(encoding="utf-8")

    def convert_file(self, input_path: Path, output_path: Path) -> StyledDocument:
        """Convert a markdown file and write it in the output's format.

        Args:
            input_path: Markdown source file
            output_path: Destination; its extension selects the handler

        Returns:
            The StyledDocument that was written
        """
        handler = self.handler_for(output_path)
        document = self.convert_text(self.read_file(input_path))
        handler.write(document, output_path)
        return document

    def handler_for(self, output_path: Path) -> FormatHandler:
        """Instantiate the handler for an output path's extension."""
        try:
            handler_class = get_handler(output_path.suffix)
        except ValueError as e:
            raise ConversionError(str(e)) from e
        return handler_class(spacing_unit=self.settings.spacing_unit)
