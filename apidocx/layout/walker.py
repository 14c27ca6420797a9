"""
Structure walker.

Walks the documentation tree in tree order and appends the document body:
a chapter per package (at first encounter), a page per class, and a member
block per enum constant, field, constructor and method.

All paragraph creation goes through `ParagraphComposer`, which applies style
presets and turns comment markup into runs.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Union

from apidocx.config import BuildOptions
from apidocx.layout.labels import Labels, get_labels
from apidocx.layout.styles import RunStyle, StylePreset, new_paragraph
from apidocx.markup import parse_markup
from apidocx.schemas import (
    CallableUnit,
    ClassUnit,
    Document,
    DocumentationTree,
    MemberUnit,
    PackageUnit,
    Paragraph,
    StyledRun,
)
from apidocx.utils import simple_type_name, simplify_type_name

logger = logging.getLogger(__name__)

# Breadcrumb indentation (two full-width spaces) and connector
_CRUMB_INDENT = "　　 "
_CRUMB_CONNECTOR = "　└ "


@dataclass
class ParagraphCursor:
    """Where text is currently written: a paragraph and the run style for it."""
    paragraph: Paragraph
    style: RunStyle


class ParagraphComposer:
    """Appends styled paragraphs and runs to a Document."""

    def __init__(self, document: Document, options: BuildOptions):
        self.document = document
        self.options = options

    def paragraph(
        self,
        preset: StylePreset = StylePreset.DEFAULT,
        spaces: int = 0,
        indent: Optional[int] = 0,
    ) -> ParagraphCursor:
        """Append a new paragraph formatted with `preset`."""
        paragraph, style = new_paragraph(preset, self.options.font1, spaces=spaces, indent=indent)
        self.document.append(paragraph)
        return ParagraphCursor(paragraph, style)

    def separator(self) -> None:
        self.paragraph(StylePreset.SEPARATOR)

    def page_break(self) -> None:
        """Append a page break to the last paragraph."""
        last = self.document.last_paragraph
        if last is None:
            last = self.paragraph().paragraph
        last.runs.append(StyledRun(kind="page_break"))

    def line_break(self, cursor: ParagraphCursor) -> None:
        cursor.paragraph.runs.append(StyledRun(kind="line_break"))

    def write(self, cursor: ParagraphCursor, text: str) -> ParagraphCursor:
        """
        Write comment markup at the cursor.

        A paragraph break opens a new default paragraph that keeps the
        previous paragraph's left indent and the cursor's run style; the
        cursor is moved there. Inline-tagged runs use the alternate font at
        the same size.
        """
        for token in parse_markup(text):
            if token.kind == "paragraph_break":
                indent = cursor.paragraph.indent_left
                paragraph, _ = new_paragraph(StylePreset.DEFAULT, self.options.font1, indent=indent)
                self.document.append(paragraph)
                cursor.paragraph = paragraph
            elif token.kind == "line_break":
                self.line_break(cursor)
            elif token.variant == "inline_tagged":
                cursor.paragraph.runs.append(cursor.style.with_font(self.options.font2).run(token.text))
            else:
                cursor.paragraph.runs.append(cursor.style.run(token.text))
        return cursor

    def write_paragraph(
        self,
        text: str,
        preset: StylePreset = StylePreset.DEFAULT,
        spaces: int = 0,
        indent: Optional[int] = 0,
    ) -> ParagraphCursor:
        """Append a paragraph and write `text` into it."""
        return self.write(self.paragraph(preset, spaces=spaces, indent=indent), text)

    def write_lines(self, cursor: ParagraphCursor, lines: Sequence[str]) -> ParagraphCursor:
        """Write several texts into one paragraph, separated by line breaks."""
        for i, line in enumerate(lines):
            if i > 0:
                self.line_break(cursor)
            cursor = self.write(cursor, line)
        return cursor


def _join(*parts: str) -> str:
    return " ".join(part for part in parts if part)


def breadcrumb_lines(class_unit: ClassUnit) -> List[str]:
    """
    Inheritance breadcrumb: root-most ancestor first, the class itself last.

    Every entry after the root is indented by its depth and prefixed with a
    connector glyph.
    """
    chain = list(reversed(class_unit.superclass_chain)) + [class_unit.qualified_name]
    lines = []
    for depth, name in enumerate(chain):
        prefix = ""
        if depth > 0:
            prefix = _CRUMB_INDENT * (depth - 1) + _CRUMB_CONNECTOR
        lines.append(prefix + name)
    return lines


def member_signature(member: MemberUnit) -> str:
    return _join(member.modifiers, member.name)


def parameter_signature(callable_unit: CallableUnit) -> str:
    return ", ".join(
        f"{simplify_type_name(param.type_name)} {param.name}" for param in callable_unit.parameters
    )


def callable_signature(callable_unit: CallableUnit) -> str:
    """Signature line: modifiers, return type (methods only), name and parameters."""
    return_type = ""
    if callable_unit.kind == "method":
        return_type = simplify_type_name(callable_unit.return_type_name)
    return _join(
        callable_unit.modifiers,
        return_type,
        f"{callable_unit.name}({parameter_signature(callable_unit)})",
    )


def _with_comment(text: str, comment: Optional[str]) -> str:
    if comment:
        return f"{text} - {comment}"
    return text


def parameter_lines(callable_unit: CallableUnit) -> List[str]:
    """One line per parameter; comments are matched by parameter name."""
    return [
        _with_comment(f"{i}) {param.name}", callable_unit.param_comments.get(param.name))
        for i, param in enumerate(callable_unit.parameters, 1)
    ]


def returns_line(callable_unit: CallableUnit) -> Optional[str]:
    """Returns-section text, or None for constructors and void methods."""
    if callable_unit.kind != "method":
        return None
    return_type = simplify_type_name(callable_unit.return_type_name)
    if return_type == "void":
        return None
    return _with_comment(return_type, callable_unit.return_comment)


def throws_lines(callable_unit: CallableUnit) -> List[str]:
    """One line per thrown type; comments are matched by qualified name."""
    return [
        _with_comment(simple_type_name(thrown), callable_unit.throws_comments.get(thrown))
        for thrown in callable_unit.thrown_types
    ]


class StructureWalker:
    """
    Render the document body from a documentation tree.

    Classes are rendered in tree order, never re-sorted. A package chapter is
    emitted once, before the first class of that package.
    """

    def __init__(self, composer: ParagraphComposer, labels: Optional[Labels] = None):
        self.composer = composer
        self.labels = labels or get_labels(composer.options.locale)
        # Ordered, duplicate-free; scoped to one walk
        self.emitted_packages: Dict[str, PackageUnit] = {}

    def walk(self, tree: DocumentationTree) -> None:
        self.emitted_packages = {}
        for class_unit in tree.classes:
            package = tree.package_of(class_unit)
            if package.name not in self.emitted_packages:
                self.write_package_chapter(package)
            self.write_class_page(class_unit)
        logger.info(
            f"Rendered {len(tree.classes)} classes in {len(self.emitted_packages)} packages"
        )

    def write_package_chapter(self, package: PackageUnit) -> None:
        logger.debug(f"Package chapter: {package.name}")
        c = self.composer
        c.page_break()
        c.write_paragraph(self.labels.package.format(name=package.name), StylePreset.CHAPTER_TITLE)
        if package.comment_text:
            c.separator()
            c.write_paragraph(package.comment_text)
        self.emitted_packages[package.name] = package

    def write_class_page(self, class_unit: ClassUnit) -> None:
        logger.debug(f"Class page: {class_unit.qualified_name}")
        c = self.composer
        labels = self.labels

        c.page_break()
        c.write_paragraph(labels.package.format(name=class_unit.package))
        c.write_paragraph(labels.class_.format(name=class_unit.name), StylePreset.CHAPTER_TITLE, spaces=100)
        c.write_lines(c.paragraph(), breadcrumb_lines(class_unit))

        if class_unit.interfaces:
            c.write_paragraph(labels.interfaces, StylePreset.SECTION, spaces=100)
            c.write_paragraph(", ".join(class_unit.interfaces), indent=200)

        c.write_paragraph(_join(class_unit.modifiers, class_unit.name), StylePreset.SUB_TITLE, spaces=200)
        c.write_paragraph(class_unit.comment_text)

        self._write_tag_section(labels.version, class_unit.version_tags)
        self._write_tag_section(labels.author, class_unit.author_tags)

        self._write_group(labels.enum_constants_detail, class_unit.enum_constants, self.write_member_block)
        self._write_group(labels.fields_detail, class_unit.fields, self.write_member_block)
        self._write_group(labels.constructors_detail, class_unit.constructors, self.write_callable_block)
        self._write_group(labels.methods_detail, class_unit.methods, self.write_callable_block)

    def _write_tag_section(self, label: str, texts: List[str]) -> None:
        if not texts:
            return
        self.composer.write_paragraph(label, StylePreset.SECTION, spaces=100)
        self.composer.write_lines(self.composer.paragraph(indent=200), texts)

    def _write_group(
        self,
        title: str,
        members: Sequence[Union[MemberUnit, CallableUnit]],
        render: Callable,
    ) -> None:
        if not members:
            return
        self.composer.write_paragraph(title, StylePreset.TITLE, spaces=100)
        for i, member in enumerate(members):
            if i > 0:
                self.composer.separator()
            render(member)

    def write_member_block(self, member: MemberUnit) -> None:
        """Field / enum constant: title, signature, description."""
        c = self.composer
        c.write_paragraph(_join(member.name, self.labels.kind(member.kind)), StylePreset.SUB_TITLE, spaces=100)
        c.write_paragraph(member_signature(member))
        c.write_paragraph(member.comment_text, indent=200)

    def write_callable_block(self, callable_unit: CallableUnit) -> None:
        """Constructor / method: title, signature, description, parameters, returns, throws."""
        c = self.composer
        labels = self.labels
        c.write_paragraph(
            _join(callable_unit.name, labels.kind(callable_unit.kind)), StylePreset.SUB_TITLE, spaces=100
        )
        c.write_paragraph(callable_signature(callable_unit))
        if callable_unit.comment_text:
            c.write_paragraph(callable_unit.comment_text, indent=200)

        if callable_unit.parameters:
            c.write_paragraph(labels.parameters, StylePreset.SECTION, spaces=100)
            for line in parameter_lines(callable_unit):
                c.write_paragraph(line, indent=200)

        returns = returns_line(callable_unit)
        if returns is not None:
            c.write_paragraph(labels.returns, StylePreset.SECTION, spaces=100)
            c.write_paragraph(returns, indent=200)

        if callable_unit.thrown_types:
            c.write_paragraph(labels.throws, StylePreset.SECTION, spaces=100)
            for line in throws_lines(callable_unit):
                c.write_paragraph(line, indent=200)
