"""Formatting engine: markdown text to styled runs."""

from styled_markdown.formatting.ir import (
    TextStyle,
    LineKind,
    FontSpec,
    StyledRun,
    StyledDocument,
)
from styled_markdown.formatting.fonts import FontDerivationError, FontDeriver
from styled_markdown.formatting.classifier import (
    ClassifiedLine,
    classify_line,
    classify_lines,
)
from styled_markdown.formatting.tokenizer import InlineFragment, tokenize_inline
from styled_markdown.formatting.parser import (
    ConversionOptions,
    MarkdownParser,
    convert,
)

__all__ = [
    "TextStyle",
    "LineKind",
    "FontSpec",
    "StyledRun",
    "StyledDocument",
    "FontDerivationError",
    "FontDeriver",
    "ClassifiedLine",
    "classify_line",
    "classify_lines",
    "InlineFragment",
    "tokenize_inline",
    "ConversionOptions",
    "MarkdownParser",
    "convert",
]
