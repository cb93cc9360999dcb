"""Terminal rendering with Rich."""

from rich.text import Text

from styled_markdown.formats.base import blank_lines_before
from styled_markdown.formatting.ir import StyledDocument, StyledRun
from styled_markdown.formatting.parser import DEFAULT_SPACING_UNIT


HEADING_STYLES = {
    1: "bold underline",
    2: "bold",
}
RULE_CHAR = "─"
RULE_STYLE = "dim"


class ConsoleRenderer:
    """Convert a StyledDocument into a Rich Text object for the terminal."""

    def __init__(
        self,
        width: int = 60,
        spacing_unit: float = DEFAULT_SPACING_UNIT,
    ) -> None:
        self.width = width
        self.spacing_unit = spacing_unit

    def render(self, document: StyledDocument) -> Text:
        text = Text()

        for index, line in enumerate(document.lines):
            first = line[0]
            if index:
                text.append("\n")
            text.append("\n" * blank_lines_before(first, self.spacing_unit))

            if first.horizontal_rule:
                text.append(RULE_CHAR * self.width, style=RULE_STYLE)
                continue

            for run in line:
                if run.text:
                    text.append(run.text, style=self._style_for(run))

        return text

    @staticmethod
    def _style_for(run: StyledRun) -> str:
        if run.heading_level:
            return HEADING_STYLES[run.heading_level]
        parts = []
        if run.bold:
            parts.append("bold")
        if run.italic:
            parts.append("italic")
        return " ".join(parts)
