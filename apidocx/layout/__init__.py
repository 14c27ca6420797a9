"""
Document layout: style presets, labels, the structure walker and the
assembler that ties them together.
"""

from .styles import StylePreset, PRESETS, RunStyle, new_paragraph
from .labels import Labels, LABELS, get_labels, format_long_date
from .walker import ParagraphComposer, ParagraphCursor, StructureWalker
from .assembler import DocumentAssembler, run_build

__all__ = [
    "StylePreset",
    "PRESETS",
    "RunStyle",
    "new_paragraph",
    "Labels",
    "LABELS",
    "get_labels",
    "format_long_date",
    "ParagraphComposer",
    "ParagraphCursor",
    "StructureWalker",
    "DocumentAssembler",
    "run_build",
]
