"""
Style presets.

A fixed table of named paragraph/run formatting bundles. Every paragraph the
walker or assembler creates goes through `new_paragraph`, which returns the
formatted (still empty) paragraph together with the base run style for text
written into it.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from apidocx.schemas import Alignment, Borders, Paragraph, StyledRun

# Line spacing is expressed in 240ths of a line: 276 is the baseline "auto"
# spacing, 240 is single spacing.
BASE_LINE_SPACING = 276 / 240
TITLE_LINE_SPACING = 240 / 240

BODY_FONT_SIZE = 9
HEADER_FONT_SIZE = 8
BORDER_STYLE = "dashed"


class StylePreset(str, Enum):
    COVER = "cover"
    CHAPTER_TITLE = "chapter_title"
    TITLE = "title"
    SUB_TITLE = "sub_title"
    SECTION = "section"
    DEFAULT = "default"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class PresetSpec:
    """Formatting attributes of one preset."""
    size_pt: float = BODY_FONT_SIZE
    bold: bool = False
    alignment: Alignment = "left"
    first_line_indent: Optional[int] = None
    borders: Borders = field(default_factory=Borders)
    line_spacing: float = BASE_LINE_SPACING
    has_text: bool = True


_BOX = Borders(top=BORDER_STYLE, bottom=BORDER_STYLE, left=BORDER_STYLE, right=BORDER_STYLE)

PRESETS = {
    StylePreset.COVER: PresetSpec(alignment="center"),
    StylePreset.CHAPTER_TITLE: PresetSpec(size_pt=20, bold=True),
    StylePreset.TITLE: PresetSpec(
        size_pt=14,
        first_line_indent=100,
        borders=_BOX,
        line_spacing=TITLE_LINE_SPACING,
    ),
    StylePreset.SUB_TITLE: PresetSpec(size_pt=14),
    StylePreset.SECTION: PresetSpec(size_pt=10),
    StylePreset.DEFAULT: PresetSpec(),
    StylePreset.SEPARATOR: PresetSpec(borders=Borders(bottom=BORDER_STYLE), has_text=False),
}


@dataclass(frozen=True)
class RunStyle:
    """Base run formatting for text written into a paragraph."""
    font: str
    size_pt: float = BODY_FONT_SIZE
    bold: bool = False
    italic: bool = False

    def with_font(self, font: str) -> "RunStyle":
        return replace(self, font=font)

    def sized(self, size_pt: float, bold: Optional[bool] = None) -> "RunStyle":
        """Copy with a different size (and optionally weight), e.g. for cover fields."""
        return replace(self, size_pt=size_pt, bold=self.bold if bold is None else bold)

    def run(self, text: str) -> StyledRun:
        return StyledRun(text=text, font=self.font, size_pt=self.size_pt, bold=self.bold, italic=self.italic)


def new_paragraph(
    preset: StylePreset,
    font: str,
    spaces: int = 0,
    indent: Optional[int] = 0,
) -> Tuple[Paragraph, RunStyle]:
    """
    Create an empty paragraph formatted with a preset.

    Args:
        preset: Preset to apply
        font: Body font family for the run style
        spaces: Space before the paragraph, in hundredths of a line
        indent: Left indent in twips (None leaves it unset)

    Returns:
        (paragraph, run style for text written into it)
    """
    spec = PRESETS[preset]
    paragraph = Paragraph(
        alignment=spec.alignment,
        indent_left=indent if spec.has_text else None,
        first_line_indent=spec.first_line_indent,
        spacing_before_lines=spaces if spec.has_text else 0,
        line_spacing=spec.line_spacing,
        borders=spec.borders,
    )
    return paragraph, RunStyle(font=font, size_pt=spec.size_pt, bold=spec.bold)
