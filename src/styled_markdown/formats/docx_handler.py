"""Microsoft Word (.docx) file handler."""

from pathlib import Path

from docx import Document
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt

from styled_markdown.formats.base import FormatHandler
from styled_markdown.formatting.ir import FontSpec, StyledDocument, StyledRun


HEADING_STYLES = {
    1: "Heading 1",
    2: "Heading 2",
}
RULE_COLOR = "CCCCCC"


class DOCXHandler(FormatHandler):
    """Handler for Microsoft Word (.docx) files.

    Uses python-docx with one paragraph per source line and run-level
    bold, italic, font family and size taken from each StyledRun.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".docx",)

    def render(self, document: StyledDocument) -> Document:
        """Build a python-docx Document from the styled runs."""
        doc = Document()

        for line in document.lines:
            first = line[0]

            if first.horizontal_rule:
                para = self._add_horizontal_line(doc)
            else:
                style = HEADING_STYLES.get(first.heading_level)
                para = doc.add_paragraph(style=style) if style else doc.add_paragraph()
                for run_data in line:
                    if run_data.text:
                        self._add_run(para, run_data)

            if first.preceding_spacing:
                para.paragraph_format.space_before = Pt(first.preceding_spacing)

        return doc

    def write(self, document: StyledDocument, path: Path) -> None:
        """Write styled document to DOCX file."""
        self.render(document).save(path)

    def _add_run(self, para, run_data: StyledRun) -> None:
        run = para.add_run(run_data.text)
        run.bold = run_data.bold
        run.italic = run_data.italic

        font = run_data.font
        if isinstance(font, FontSpec):
            run.font.name = font.family
            run.font.size = Pt(font.size)

    def _add_horizontal_line(self, doc: Document):
        """Add a horizontal line separator."""
        para = doc.add_paragraph()

        # Create horizontal line using paragraph border
        pPr = para._p.get_or_add_pPr()
        pBdr = OxmlElement("w:pBdr")
        bottom = OxmlElement("w:bottom")
        bottom.set(qn("w:val"), "single")
        bottom.set(qn("w:sz"), "6")
        bottom.set(qn("w:space"), "1")
        bottom.set(qn("w:color"), RULE_COLOR)
        pBdr.append(bottom)
        pPr.append(pBdr)
        return para
