"""JSON dump of styled runs."""

import json
from pathlib import Path

from styled_markdown.formats.base import FormatHandler
from styled_markdown.formatting.ir import StyledDocument
from styled_markdown.formatting.parser import DEFAULT_SPACING_UNIT


class JSONHandler(FormatHandler):
    """Handler writing the run sequence as JSON for other renderers."""

    def __init__(self, spacing_unit: float = DEFAULT_SPACING_UNIT, indent: int = 2) -> None:
        super().__init__(spacing_unit)
        self.indent = indent

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".json",)

    def render(self, document: StyledDocument) -> str:
        return json.dumps(document.to_dict(), indent=self.indent, ensure_ascii=False)

    def write(self, document: StyledDocument, path: Path) -> None:
        path.write_text(self.render(document), encoding="utf-8")
