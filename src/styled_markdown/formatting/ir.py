"""Intermediate Representation for styled text.

This module defines the data structures that bridge raw markdown input
to format-specific rendering. The engine only ever produces these
objects; adapters in ``styled_markdown.formats`` project them onto
terminals, Word documents and so on.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, Flag, auto
from typing import Optional


class TextStyle(Flag):
    """Text styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()


class LineKind(Enum):
    """Classification of a single physical source line."""

    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HORIZONTAL_RULE = "horizontal_rule"
    BLANK = "blank"
    PARAGRAPH = "paragraph"

    @property
    def heading_level(self) -> int:
        """Heading level for this kind (0 for non-headings)."""
        if self is LineKind.HEADING1:
            return 1
        if self is LineKind.HEADING2:
            return 2
        return 0


@dataclass(frozen=True)
class FontSpec:
    """Base font supplied by the caller.

    Attributes:
        family: Font family name
        size: Point size
        bold: Bold trait
        italic: Italic trait
    """

    family: str
    size: float
    bold: bool = False
    italic: bool = False

    def derive(
        self,
        *,
        bold: bool = False,
        italic: bool = False,
        scale: float = 1.0,
    ) -> "FontSpec":
        """Return a font of the same family with extra traits and a scaled size."""
        if self.size <= 0:
            raise ValueError(f"Font size must be positive, got {self.size}")
        if scale <= 0:
            raise ValueError(f"Font scale must be positive, got {scale}")
        return FontSpec(
            family=self.family,
            size=self.size * scale,
            bold=self.bold or bold,
            italic=self.italic or italic,
        )


@dataclass(frozen=True)
class StyledRun:
    """A contiguous run of text with one uniform attribute set.

    Attributes:
        text: The text content (empty only for rule markers and spacing runs)
        style: Combined style flags (BOLD, ITALIC, or both)
        heading_level: 0 for body text, 1 or 2 for headings
        preceding_spacing: Vertical space (points) before this run's line
        font: Font derived for this run
        horizontal_rule: Whether this run is a horizontal rule marker
        starts_line: Whether this run begins a new source line
    """

    text: str
    style: TextStyle = TextStyle.NONE
    heading_level: int = 0
    preceding_spacing: float = 0.0
    font: Optional[FontSpec] = None
    horizontal_rule: bool = False
    starts_line: bool = False

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return TextStyle.BOLD in self.style

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return TextStyle.ITALIC in self.style

    @property
    def is_spacing(self) -> bool:
        """Check if this run only carries vertical spacing."""
        return not self.text and not self.horizontal_rule

    def with_spacing(self, spacing: float) -> "StyledRun":
        """Return a copy of this run with a different preceding spacing."""
        return replace(self, preceding_spacing=spacing)

    def to_dict(self) -> dict:
        """Serialize the run to plain Python types."""
        data = {
            "text": self.text,
            "bold": self.bold,
            "italic": self.italic,
            "heading_level": self.heading_level,
            "preceding_spacing": self.preceding_spacing,
            "horizontal_rule": self.horizontal_rule,
            "starts_line": self.starts_line,
        }
        if self.font is not None:
            data["font"] = {
                "family": self.font.family,
                "size": self.font.size,
                "bold": self.font.bold,
                "italic": self.font.italic,
            }
        return data

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class StyledDocument:
    """Complete styled document ready for rendering.

    Attributes:
        runs: Styled runs in document order
    """

    runs: tuple[StyledRun, ...] = field(default_factory=tuple)

    @property
    def plain_text(self) -> str:
        """Get all run text without styling or line breaks."""
        return "".join(run.text for run in self.runs)

    @property
    def lines(self) -> list[list[StyledRun]]:
        """Group runs into source lines using ``starts_line``."""
        lines: list[list[StyledRun]] = []
        for run in self.runs:
            if run.starts_line or not lines:
                lines.append([])
            lines[-1].append(run)
        return lines

    def to_dict(self) -> dict:
        """Serialize the document to plain Python types."""
        return {"runs": [run.to_dict() for run in self.runs]}

    def __len__(self) -> int:
        return len(self.runs)

    def __iter__(self):
        return iter(self.runs)

    def __getitem__(self, index: int) -> StyledRun:
        return self.runs[index]
