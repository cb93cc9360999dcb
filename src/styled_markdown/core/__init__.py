"""File conversion for Styled Markdown."""

from styled_markdown.core.converter import ConversionError, DocumentConverter

__all__ = [
    "ConversionError",
    "DocumentConverter",
]
