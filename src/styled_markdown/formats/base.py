"""Abstract base class for output format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from styled_markdown.formatting.ir import StyledDocument, StyledRun
from styled_markdown.formatting.parser import DEFAULT_SPACING_UNIT


def blank_lines_before(run: StyledRun, spacing_unit: float = DEFAULT_SPACING_UNIT) -> int:
    """Number of blank lines that realize a run's preceding spacing."""
    if spacing_unit <= 0 or run.preceding_spacing <= 0:
        return 0
    return round(run.preceding_spacing / spacing_unit)


class FormatHandler(ABC):
    """Abstract base class for output format handlers.

    Each handler projects a StyledDocument onto one concrete target
    format and can write the result to a file.

    Args:
        spacing_unit: Points of preceding spacing that make one blank line
    """

    def __init__(self, spacing_unit: float = DEFAULT_SPACING_UNIT) -> None:
        self.spacing_unit = spacing_unit

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.docx',))."""
        ...

    @abstractmethod
    def render(self, document: StyledDocument) -> Any:
        """Project the document onto the handler's target object.

        Args:
            document: The StyledDocument to render

        Returns:
            The format-specific object (string, python-docx Document, ...)
        """
        ...

    @abstractmethod
    def write(self, document: StyledDocument, path: Path) -> None:
        """Write styled document to file.

        Args:
            document: The StyledDocument with styled runs
            path: Path to write the output document
        """
        ...
