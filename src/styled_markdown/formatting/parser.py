"""Markdown parser for converting raw text to styled runs."""

from dataclasses import dataclass
from typing import Any, Optional

from styled_markdown.formatting.classifier import ClassifiedLine, classify_lines
from styled_markdown.formatting.fonts import FontDeriver, derive_font
from styled_markdown.formatting.ir import (
    LineKind,
    StyledDocument,
    StyledRun,
    TextStyle,
)
from styled_markdown.formatting.tokenizer import tokenize_inline


DEFAULT_HEADING1_SCALE = 1.6
DEFAULT_HEADING2_SCALE = 1.3
DEFAULT_SPACING_UNIT = 12.0  # points per blank line
DEFAULT_MAX_BLANK_LINES = 2


@dataclass(frozen=True)
class ConversionOptions:
    """Tunable constants for the document assembler.

    Attributes:
        heading1_scale: Size multiplier for level 1 headings
        heading2_scale: Size multiplier for level 2 headings
        spacing_unit: Points of vertical space per blank line
        max_blank_lines: Cap on blank lines counted before a line
    """

    heading1_scale: float = DEFAULT_HEADING1_SCALE
    heading2_scale: float = DEFAULT_HEADING2_SCALE
    spacing_unit: float = DEFAULT_SPACING_UNIT
    max_blank_lines: int = DEFAULT_MAX_BLANK_LINES

    def __post_init__(self) -> None:
        if self.heading2_scale <= 1.0:
            raise ValueError(
                f"heading2_scale must be greater than 1.0, got {self.heading2_scale}"
            )
        if self.heading1_scale <= self.heading2_scale:
            raise ValueError(
                "heading1_scale must be greater than heading2_scale "
                f"({self.heading1_scale} <= {self.heading2_scale})"
            )
        if self.spacing_unit < 0:
            raise ValueError(f"spacing_unit must be >= 0, got {self.spacing_unit}")
        if self.max_blank_lines < 0:
            raise ValueError(
                f"max_blank_lines must be >= 0, got {self.max_blank_lines}"
            )

    def heading_scale(self, level: int) -> float:
        """Font scale for a heading level (1.0 for body text)."""
        if level == 1:
            return self.heading1_scale
        if level == 2:
            return self.heading2_scale
        return 1.0

    def spacing_for(self, blank_lines: int) -> float:
        """Vertical spacing for a run of blank lines, capped."""
        return min(blank_lines, self.max_blank_lines) * self.spacing_unit


class MarkdownParser:
    """Parse markdown text into a StyledDocument.

    The parser holds only immutable configuration, so one instance can
    be shared freely between threads.
    """

    def __init__(
        self,
        options: Optional[ConversionOptions] = None,
        font_deriver: Optional[FontDeriver] = None,
    ) -> None:
        self.options = options or ConversionOptions()
        self.font_deriver = font_deriver

    def parse(self, markdown_text: str, base_font: Any) -> StyledDocument:
        """Convert markdown text to a StyledDocument.

        Args:
            markdown_text: Raw markdown-like text (may be empty)
            base_font: Caller-supplied base font handle

        Returns:
            StyledDocument with one or more runs per non-blank line

        Raises:
            FontDerivationError: If the font deriver fails
        """
        if base_font is None:
            raise ValueError("base_font is required")

        runs: list[StyledRun] = []
        fonts: dict[tuple[bool, bool, float], Any] = {}
        pending_blanks = 0

        def font_for(bold: bool, italic: bool, scale: float) -> Any:
            key = (bold, italic, scale)
            if key not in fonts:
                fonts[key] = derive_font(
                    self.font_deriver, base_font, bold=bold, italic=italic, scale=scale
                )
            return fonts[key]

        for line in classify_lines(markdown_text):
            if line.kind is LineKind.BLANK:
                pending_blanks += 1
                continue

            spacing = self.options.spacing_for(pending_blanks)
            pending_blanks = 0
            line_runs = self._line_runs(line, font_for)
            runs.append(line_runs[0].with_spacing(spacing))
            runs.extend(line_runs[1:])

        spacing = self.options.spacing_for(pending_blanks)
        if spacing > 0:
            runs.append(
                StyledRun(
                    text="",
                    preceding_spacing=spacing,
                    font=font_for(False, False, 1.0),
                    starts_line=True,
                )
            )

        return StyledDocument(runs=tuple(runs))

    def _line_runs(self, line: ClassifiedLine, font_for) -> list[StyledRun]:
        """Build the runs for one non-blank classified line."""
        if line.kind is LineKind.HORIZONTAL_RULE:
            return [
                StyledRun(
                    text="",
                    font=font_for(False, False, 1.0),
                    horizontal_rule=True,
                    starts_line=True,
                )
            ]

        fragments = tokenize_inline(line.content)

        level = line.kind.heading_level
        if level:
            # Headings are a single bold run; inline delimiters are consumed
            # but their emphasis is not carried over.
            scale = self.options.heading_scale(level)
            return [
                StyledRun(
                    text="".join(fragment.text for fragment in fragments),
                    style=TextStyle.BOLD,
                    heading_level=level,
                    font=font_for(True, False, scale),
                    starts_line=True,
                )
            ]

        return [
            StyledRun(
                text=fragment.text,
                style=fragment.style,
                font=font_for(fragment.bold, fragment.italic, 1.0),
                starts_line=index == 0,
            )
            for index, fragment in enumerate(fragments)
        ]


def convert(
    markdown_text: str,
    base_font: Any,
    options: Optional[ConversionOptions] = None,
    font_deriver: Optional[FontDeriver] = None,
) -> StyledDocument:
    """Convert markdown text to a StyledDocument in one call."""
    return MarkdownParser(options=options, font_deriver=font_deriver).parse(
        markdown_text, base_font
    )
