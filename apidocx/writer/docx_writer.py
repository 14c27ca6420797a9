"""
Word (.docx) writer backend built on python-docx.

Usage:
    with DocxWriter(Path("api.docx")) as writer:
        writer.write(document)
        writer.save()

The python-docx document handle is created on enter and released on exit,
whether or not the build succeeded. `save()` serializes to a temporary file
next to the target and moves it into place, so a failed run never leaves a
partial file at the output path.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

import docx
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_BREAK
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, Twips

from apidocx.schemas import Borders, Document, HeaderFooterLine, Paragraph, StyledRun

logger = logging.getLogger(__name__)

_ALIGNMENTS = {
    "left": WD_ALIGN_PARAGRAPH.LEFT,
    "center": WD_ALIGN_PARAGRAPH.CENTER,
    "right": WD_ALIGN_PARAGRAPH.RIGHT,
}

# pPr children that must follow w:pBdr in schema order
_AFTER_PBDR = (
    "w:shd", "w:tabs", "w:suppressAutoHyphens", "w:kinsoku", "w:wordWrap",
    "w:overflowPunct", "w:topLinePunct", "w:autoSpaceDE", "w:autoSpaceDN",
    "w:bidi", "w:adjustRightInd", "w:snapToGrid", "w:spacing", "w:ind",
    "w:contextualSpacing", "w:mirrorIndents", "w:suppressOverlap", "w:jc",
    "w:textDirection", "w:textAlignment", "w:textboxTightWrap",
    "w:outlineLvl", "w:divId", "w:cnfStyle", "w:rPr", "w:sectPr", "w:pPrChange",
)


class WriterError(RuntimeError):
    """Raised when the writer is used outside its open scope."""


class DocxWriter:
    """Serialize a styled Document into a .docx file."""

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self._docx = None

    def __enter__(self) -> "DocxWriter":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> None:
        self._docx = docx.Document()
        logger.debug(f"Opened document handle for {self.output_path}")

    def close(self) -> None:
        if self._docx is not None:
            self._docx = None
            logger.debug(f"Released document handle for {self.output_path}")

    @property
    def is_open(self) -> bool:
        return self._docx is not None

    def _require_open(self):
        if self._docx is None:
            raise WriterError("Writer is not open")
        return self._docx

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def write(self, document: Document) -> None:
        """Render header, footer and all paragraphs into the open handle."""
        word = self._require_open()
        section = word.sections[0]
        self._write_header_footer(section.header, document.header)
        self._write_header_footer(section.footer, document.footer)
        for paragraph in document.paragraphs:
            self._write_paragraph(word.add_paragraph(), paragraph)

    def _write_header_footer(self, part, lines: List[HeaderFooterLine]) -> None:
        if not lines:
            return
        part.is_linked_to_previous = False
        # A fresh header/footer part starts with one empty paragraph
        first = part.paragraphs[0] if part.paragraphs else part.add_paragraph()
        targets = [first] + [part.add_paragraph() for _ in lines[1:]]
        for target, line in zip(targets, lines):
            target.alignment = _ALIGNMENTS[line.alignment]
            run = target.add_run("" if line.page_number else line.text)
            _set_font(run, line.font, line.size_pt)
            if line.page_number:
                _add_page_number_field(run)

    def _write_paragraph(self, target, paragraph: Paragraph) -> None:
        target.alignment = _ALIGNMENTS[paragraph.alignment]
        fmt = target.paragraph_format
        fmt.line_spacing = paragraph.line_spacing
        if paragraph.indent_left is not None:
            fmt.left_indent = Twips(paragraph.indent_left)
        if paragraph.first_line_indent is not None:
            fmt.first_line_indent = Twips(paragraph.first_line_indent)
        if paragraph.spacing_before_lines:
            spacing = target._p.get_or_add_pPr().get_or_add_spacing()
            spacing.set(qn("w:beforeLines"), str(paragraph.spacing_before_lines))
        if paragraph.borders.is_set():
            _set_borders(target, paragraph.borders)
        for run in paragraph.runs:
            self._write_run(target, run)

    def _write_run(self, target, run: StyledRun) -> None:
        if run.kind == "page_break":
            target.add_run().add_break(WD_BREAK.PAGE)
            return
        if run.kind == "line_break":
            target.add_run().add_break()
            return
        out = target.add_run(run.text)
        _set_font(out, run.font, run.size_pt)
        out.bold = run.bold
        out.italic = run.italic

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, output_path: Optional[Path] = None) -> Path:
        """
        Persist the document.

        Raises:
            OSError: If the target directory cannot be written
        """
        word = self._require_open()
        target = Path(output_path or self.output_path)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
        try:
            with os.fdopen(fd, "wb") as stream:
                word.save(stream)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved {target}")
        return target


def _set_font(run, font: str, size_pt: float) -> None:
    if font:
        run.font.name = font
        # East Asian text uses its own font slot
        run._element.get_or_add_rPr().get_or_add_rFonts().set(qn("w:eastAsia"), font)
    run.font.size = Pt(size_pt)


def _set_borders(target, borders: Borders) -> None:
    pPr = target._p.get_or_add_pPr()
    pBdr = OxmlElement("w:pBdr")
    for side in ("top", "left", "bottom", "right"):
        style = getattr(borders, side)
        if style is None:
            continue
        edge = OxmlElement(f"w:{side}")
        edge.set(qn("w:val"), style)
        edge.set(qn("w:sz"), "4")
        edge.set(qn("w:space"), "1")
        edge.set(qn("w:color"), "auto")
        pBdr.append(edge)
    pPr.insert_element_before(pBdr, *_AFTER_PBDR)


def _add_page_number_field(run) -> None:
    """Insert a PAGE field into a run."""
    begin = OxmlElement("w:fldChar")
    begin.set(qn("w:fldCharType"), "begin")
    instr = OxmlElement("w:instrText")
    instr.set(qn("xml:space"), "preserve")
    instr.text = "PAGE"
    end = OxmlElement("w:fldChar")
    end.set(qn("w:fldCharType"), "end")
    run._r.append(begin)
    run._r.append(instr)
    run._r.append(end)
