"""
Centralized Pydantic schemas for apidocx.

This module is the single source of truth for the data models used while
building a document:

- Documentation tree: PackageUnit, ClassUnit, MemberUnit, CallableUnit and the
  DocumentationTree that holds them (read-only input)
- Styled document: StyledRun, Paragraph, Borders, HeaderFooterLine and the
  append-only Document handed to the writer backend
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict, Optional, Literal


# ============================================================================
# DOCUMENTATION TREE SCHEMAS
# ============================================================================

class PackageUnit(BaseModel):
    """A package (namespace) of documented classes."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Package name, e.g. 'com.example.util'")
    comment_text: str = Field("", description="Raw package comment (markup dialect)")


class ParameterUnit(BaseModel):
    """A single declared parameter of a constructor or method."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Parameter name")
    type_name: str = Field(description="Fully qualified parameter type")


class MemberUnit(BaseModel):
    """A field or enum constant."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["field", "enum_constant"] = Field("field", description="Member kind discriminator")
    name: str = Field(description="Member name")
    modifiers: str = Field("", description="Modifier string, e.g. 'public static final'")
    comment_text: str = Field("", description="Raw member comment")


class CallableUnit(BaseModel):
    """A constructor or method."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["constructor", "method"] = Field("method", description="Callable kind discriminator")
    name: str = Field(description="Callable name")
    modifiers: str = Field("", description="Modifier string")
    parameters: List[ParameterUnit] = Field(default_factory=list, description="Parameters in declaration order")
    param_comments: Dict[str, str] = Field(
        default_factory=dict,
        description="Parameter name -> comment (from @param tags)"
    )
    return_type_name: str = Field("void", description="Fully qualified return type ('void' for none)")
    return_comment: str = Field("", description="Text of the first @return tag")
    thrown_types: List[str] = Field(default_factory=list, description="Qualified names of declared exceptions")
    throws_comments: Dict[str, str] = Field(
        default_factory=dict,
        description="Exception qualified name -> comment (from @throws tags)"
    )
    comment_text: str = Field("", description="Raw callable comment")


class ClassUnit(BaseModel):
    """
    A documented class.

    The superclass chain is ordered immediate parent first; the breadcrumb
    renders it reversed.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "ArrayList",
                "qualified_name": "java.util.ArrayList",
                "package": "java.util",
                "modifiers": "public",
                "superclass_chain": ["java.util.AbstractList", "java.util.AbstractCollection", "java.lang.Object"],
                "interfaces": ["java.util.List", "java.util.RandomAccess"],
                "comment_text": "Resizable-array implementation of the {@code List} interface.",
                "version_tags": [],
                "author_tags": ["Josh Bloch"],
            }
        },
    )

    name: str = Field(description="Simple class name")
    qualified_name: str = Field(description="Fully qualified class name")
    package: str = Field(description="Name of the containing package")
    modifiers: str = Field("", description="Modifier string, e.g. 'public abstract'")
    superclass_chain: List[str] = Field(
        default_factory=list,
        description="Qualified ancestor names, immediate parent first"
    )
    interfaces: List[str] = Field(default_factory=list, description="Qualified interface names")
    comment_text: str = Field("", description="Raw class comment")
    version_tags: List[str] = Field(default_factory=list, description="@version tag texts")
    author_tags: List[str] = Field(default_factory=list, description="@author tag texts")
    enum_constants: List[MemberUnit] = Field(default_factory=list)
    fields: List[MemberUnit] = Field(default_factory=list)
    constructors: List[CallableUnit] = Field(default_factory=list)
    methods: List[CallableUnit] = Field(default_factory=list)


class DocumentationTree(BaseModel):
    """
    Complete documentation tree supplied by a documentation model provider.

    `classes` is the traversal order and may interleave packages.
    """
    model_config = ConfigDict(frozen=True)

    packages: List[PackageUnit] = Field(default_factory=list)
    classes: List[ClassUnit] = Field(default_factory=list)

    def package_of(self, class_unit: ClassUnit) -> PackageUnit:
        """Resolve the containing package, synthesizing one if it is not listed."""
        for package in self.packages:
            if package.name == class_unit.package:
                return package
        return PackageUnit(name=class_unit.package)


# ============================================================================
# STYLED DOCUMENT SCHEMAS
# ============================================================================

Alignment = Literal["left", "center", "right"]


class StyledRun(BaseModel):
    """A run of uniformly styled text, or a line/page break."""
    kind: Literal["text", "line_break", "page_break"] = "text"
    text: str = ""
    font: str = ""
    size_pt: float = 9
    bold: bool = False
    italic: bool = False


class Borders(BaseModel):
    """Four-sided paragraph border; each side holds a border style name or None."""
    model_config = ConfigDict(frozen=True)

    top: Optional[str] = None
    bottom: Optional[str] = None
    left: Optional[str] = None
    right: Optional[str] = None

    def is_set(self) -> bool:
        return any((self.top, self.bottom, self.left, self.right))


class Paragraph(BaseModel):
    """A paragraph of runs plus its formatting."""
    runs: List[StyledRun] = Field(default_factory=list)
    alignment: Alignment = "left"
    indent_left: Optional[int] = Field(None, description="Left indent in twips (None = unset)")
    first_line_indent: Optional[int] = Field(None, description="First line indent in twips")
    spacing_before_lines: int = Field(0, description="Space before, in hundredths of a line")
    line_spacing: float = Field(1.15, description="Line spacing as a multiple of single spacing")
    borders: Borders = Field(default_factory=Borders)

    def text(self) -> str:
        """Plain text of the paragraph, line breaks rendered as newlines."""
        parts = []
        for run in self.runs:
            if run.kind == "text":
                parts.append(run.text)
            elif run.kind == "line_break":
                parts.append("\n")
        return "".join(parts)


class HeaderFooterLine(BaseModel):
    """One line of header or footer content."""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    alignment: Alignment = "left"
    page_number: bool = Field(False, description="Render a page-number field instead of text")
    font: str = ""
    size_pt: float = 8


class Document(BaseModel):
    """Append-only styled document."""
    header: List[HeaderFooterLine] = Field(default_factory=list)
    footer: List[HeaderFooterLine] = Field(default_factory=list)
    paragraphs: List[Paragraph] = Field(default_factory=list)

    def append(self, paragraph: Paragraph) -> Paragraph:
        self.paragraphs.append(paragraph)
        return paragraph

    @property
    def last_paragraph(self) -> Optional[Paragraph]:
        return self.paragraphs[-1] if self.paragraphs else None
