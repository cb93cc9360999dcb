"""Output format handlers for Styled Markdown."""

from styled_markdown.formats.base import FormatHandler
from styled_markdown.formats.txt_handler import TXTHandler
from styled_markdown.formats.docx_handler import DOCXHandler
from styled_markdown.formats.json_handler import JSONHandler
from styled_markdown.formats.console import ConsoleRenderer

__all__ = [
    "FormatHandler",
    "TXTHandler",
    "DOCXHandler",
    "JSONHandler",
    "ConsoleRenderer",
]

# Map file extensions to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    ".txt": TXTHandler,
    ".md": TXTHandler,
    ".docx": DOCXHandler,
    ".json": JSONHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())

# Markdown sources accepted as input
SOURCE_EXTENSIONS = (".md", ".markdown", ".txt")


def get_handler(extension: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a file extension."""
    ext = extension.lower()
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported file format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
