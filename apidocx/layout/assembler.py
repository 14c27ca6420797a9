"""
Document assembler - main orchestration logic.

Builds header, footer, cover page and body (via StructureWalker), then hands
the finished document to the writer backend. The writer is acquired before
the build starts and released on every exit path.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from apidocx.config import BuildOptions
from apidocx.layout.labels import format_long_date, get_labels
from apidocx.layout.styles import HEADER_FONT_SIZE, StylePreset
from apidocx.layout.walker import ParagraphComposer, StructureWalker
from apidocx.schemas import Document, DocumentationTree, HeaderFooterLine
from apidocx.writer import DocxWriter

logger = logging.getLogger(__name__)

# (text attribute, font size, bold, space before in hundredths of a line)
COVER_FIELDS = (
    ("title", 28, True, 800),
    ("subtitle", 20, True, 200),
    ("version", 18, False, 300),
    ("date", 16, False, 800),
    ("company", 20, False, 300),
)


class DocumentAssembler:
    """
    Assemble one document from a documentation tree.

    Build order:
    1. Header
    2. Footer
    3. Cover page
    4. Body (StructureWalker)
    5. Serialize and persist (writer backend)
    """

    def __init__(
        self,
        options: BuildOptions,
        today: Optional[date] = None,
        writer_factory: Callable[[Path], DocxWriter] = DocxWriter,
    ):
        """
        Initialize the assembler.

        Args:
            options: Build options
            today: Date shown on the cover page (default: today)
            writer_factory: Creates the writer backend for an output path
        """
        self.options = options
        self.today = today or date.today()
        self.writer_factory = writer_factory

    def build(self, tree: DocumentationTree) -> Document:
        """Build the styled document in memory (steps 1-4)."""
        document = Document()
        composer = ParagraphComposer(document, self.options)

        logger.info("[1/5] Building header...")
        document.header = self.make_header()

        logger.info("[2/5] Building footer...")
        document.footer = self.make_footer()

        logger.info("[3/5] Building cover page...")
        self.make_cover_page(composer)

        logger.info(f"[4/5] Building body ({len(tree.classes)} classes)...")
        StructureWalker(composer, get_labels(self.options.locale)).walk(tree)

        return document

    def create(self, tree: DocumentationTree) -> Path:
        """
        Build the document and persist it to the configured output path.

        Returns:
            Path of the written file

        Raises:
            Any error raised while building or writing; nothing is persisted then.
        """
        output_path = Path(self.options.file)
        with self.writer_factory(output_path) as writer:
            document = self.build(tree)
            logger.info(f"[5/5] Writing {output_path}...")
            writer.write(document)
            writer.save()
        logger.info(f"Document written: {output_path} ({len(document.paragraphs)} paragraphs)")
        return output_path

    def make_header(self):
        text = f"{self.options.title} {self.options.subtitle}"
        return [HeaderFooterLine(text=text, alignment="left", font=self.options.font1, size_pt=HEADER_FONT_SIZE)]

    def make_footer(self):
        return [
            HeaderFooterLine(alignment="center", page_number=True, font=self.options.font1, size_pt=HEADER_FONT_SIZE),
            HeaderFooterLine(
                text=self.options.copyright,
                alignment="right",
                font=self.options.font1,
                size_pt=HEADER_FONT_SIZE,
            ),
        ]

    def make_cover_page(self, composer: ParagraphComposer) -> None:
        values = {
            "title": self.options.title,
            "subtitle": self.options.subtitle,
            "version": self.options.version,
            "date": format_long_date(self.today, self.options.locale),
            "company": self.options.company,
        }
        for name, size, bold, spaces in COVER_FIELDS:
            cursor = composer.paragraph(StylePreset.COVER, spaces=spaces)
            cursor.style = cursor.style.sized(size, bold=bold)
            composer.write(cursor, values[name])


def run_build(tree: DocumentationTree, options: BuildOptions, today: Optional[date] = None) -> bool:
    """
    Build and write a document, reporting success as a boolean.

    Failures are logged with their diagnostic and reported as False.
    """
    try:
        DocumentAssembler(options, today=today).create(tree)
    except Exception as e:
        logger.exception(f"Document build failed: {e}")
        return False
    return True
