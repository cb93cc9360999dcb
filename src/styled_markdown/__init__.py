"""Styled Markdown - convert a small markdown subset into styled text runs."""

__version__ = "0.1.0"

from styled_markdown.formatting import (
    ConversionOptions,
    FontDerivationError,
    FontSpec,
    MarkdownParser,
    StyledDocument,
    StyledRun,
    TextStyle,
    convert,
)

__all__ = [
    "__version__",
    "ConversionOptions",
    "FontDerivationError",
    "FontSpec",
    "MarkdownParser",
    "StyledDocument",
    "StyledRun",
    "TextStyle",
    "convert",
]
