"""Plain text file handler."""

import re
from pathlib import Path

from styled_markdown.formats.base import FormatHandler, blank_lines_before
from styled_markdown.formatting.ir import StyledDocument, StyledRun
from styled_markdown.formatting.tokenizer import DELIMITERS, DIGITS


HORIZONTAL_RULE_TEXT = "---"


class TXTHandler(FormatHandler):
    """Handler for plain text (.txt) and markdown (.md) files.

    Output uses the same markdown subset the parser reads:
    - # / ## prefixes for headings
    - *italic* or _italic_, whichever reads back as the same run
    - --- for horizontal rules
    - blank lines for paragraph spacing
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt", ".md")

    def render(self, document: StyledDocument) -> str:
        """Render the document back to markdown-styled text."""
        lines: list[str] = []
        ends_with_spacing = False

        for line in document.lines:
            first = line[0]
            lines.extend([""] * blank_lines_before(first, self.spacing_unit))

            ends_with_spacing = first.is_spacing
            if ends_with_spacing:
                continue

            if first.horizontal_rule:
                lines.append(HORIZONTAL_RULE_TEXT)
            elif first.heading_level:
                prefix = "#" * first.heading_level
                lines.append(f"{prefix} {self._format_heading_text(first.text)}")
            else:
                lines.append(self._format_paragraph(line))

        content = "\n".join(lines)
        if ends_with_spacing:
            content += "\n"
        return content

    def write(self, document: StyledDocument, path: Path) -> None:
        """Write styled document as markdown-styled plain text."""
        path.write_text(self.render(document), encoding="utf-8")

    @staticmethod
    def _format_paragraph(runs: list[StyledRun]) -> str:
        """Write one paragraph line so the parser reads back the same runs."""
        parts: list[str] = []
        literal_before = ""
        for run in runs:
            text = run.text
            if run.italic:
                delimiter = TXTHandler._italic_delimiter(run, literal_before)
                text = f"{delimiter}{text}{delimiter}"
                literal_before = ""
            else:
                literal_before = text[-1:]
            parts.append(text)
        return "".join(parts)

    @staticmethod
    def _italic_delimiter(run: StyledRun, literal_before: str) -> str:
        if run.bold:
            return "*"
        # A literal delimiter right before a span is only kept literal
        # when the span opens with the same character.
        if literal_before in DELIMITERS:
            return literal_before
        if run.text in DIGITS or "*" in run.text:
            return "_"
        return "*"

    @staticmethod
    def _format_heading_text(text: str) -> str:
        """Write heading text so inline delimiters come back as literal text.

        Headings drop emphasis, so each piece is wrapped in a span whose
        delimiter it does not contain.
        """
        if not any(char in DELIMITERS for char in text):
            return text
        pieces = re.split(r"(\*)", text)
        return "".join(
            "_*_" if piece == "*" else f"*{piece}*"
            for piece in pieces
            if piece
        )
