"""Tests for the structure walker and paragraph composer."""

import pytest

from apidocx.layout import LABELS, ParagraphComposer, StructureWalker, StylePreset
from apidocx.layout.walker import (
    breadcrumb_lines,
    callable_signature,
    parameter_lines,
    returns_line,
    throws_lines,
)
from apidocx.schemas import CallableUnit, ClassUnit, Document, DocumentationTree, ParameterUnit


def render(tree, options):
    document = Document()
    StructureWalker(ParagraphComposer(document, options)).walk(tree)
    return document


def texts(document):
    return [p.text() for p in document.paragraphs]


def chapter_titles(document):
    return [
        p.text() for p in document.paragraphs
        if p.runs and any(r.kind == "text" and r.size_pt == 20 and r.bold for r in p.runs)
    ]


def page_breaks(document):
    return sum(1 for p in document.paragraphs for r in p.runs if r.kind == "page_break")


def paragraph_with(document, text):
    for p in document.paragraphs:
        if p.text() == text:
            return p
    raise AssertionError(f"No paragraph with text {text!r}")


class TestComposer:
    def test_page_break_on_empty_document_creates_paragraph(self, options):
        document = Document()
        ParagraphComposer(document, options).page_break()

        assert len(document.paragraphs) == 1
        assert [r.kind for r in document.paragraphs[0].runs] == ["page_break"]

    def test_page_break_attaches_to_last_paragraph(self, options):
        document = Document()
        composer = ParagraphComposer(document, options)
        composer.write_paragraph("Hello")
        composer.page_break()

        assert len(document.paragraphs) == 1
        assert [r.kind for r in document.paragraphs[0].runs] == ["text", "page_break"]

    def test_inline_tagged_run_uses_alternate_font(self, options):
        document = Document()
        cursor = ParagraphComposer(document, options).write_paragraph(
            "See {@code foo(x)} for detail.", StylePreset.SECTION
        )

        runs = cursor.paragraph.runs
        assert [(r.text, r.font) for r in runs] == [
            ("See ", "Meiryo UI"),
            ("foo(x)", "Consolas"),
            (" for detail.", "Meiryo UI"),
        ]
        assert {r.size_pt for r in runs} == {10}

    def test_paragraph_break_keeps_indent_and_run_style(self, options):
        document = Document()
        composer = ParagraphComposer(document, options)
        cursor = composer.write_paragraph("one<p>two", StylePreset.SUB_TITLE, indent=200)

        first, second = document.paragraphs
        assert cursor.paragraph is second
        assert second.indent_left == 200
        assert second.spacing_before_lines == 0
        assert second.runs[0].size_pt == 14
        assert first.text() == "one"
        assert second.text() == "two"

    def test_separator_has_bottom_border_only(self, options):
        document = Document()
        ParagraphComposer(document, options).separator()

        separator = document.paragraphs[0]
        assert separator.runs == []
        assert separator.indent_left is None
        assert separator.borders.bottom == "dashed"
        assert separator.borders.top is None

    def test_write_lines_separates_with_line_breaks(self, options):
        document = Document()
        composer = ParagraphComposer(document, options)
        composer.write_lines(composer.paragraph(), ["a", "b", "c"])

        assert texts(document) == ["a\nb\nc"]


class TestSignatures:
    def test_breadcrumb(self, store_class):
        assert breadcrumb_lines(store_class) == [
            "java.lang.Object",
            "　└ com.acme.core.AbstractStore",
            "　　 　└ com.acme.core.Store",
        ]

    def test_breadcrumb_without_ancestors(self):
        lone = ClassUnit(name="Root", qualified_name="Root", package="")

        assert breadcrumb_lines(lone) == ["Root"]

    def test_method_signature_simplifies_types(self, store_class):
        assert callable_signature(store_class.methods[0]) == (
            "public String get(String key, Optional<String> fallback)"
        )

    def test_constructor_signature_has_no_return_type(self, store_class):
        assert callable_signature(store_class.constructors[0]) == "public Store(int capacity)"

    def test_parameter_lines_match_comments_by_name(self, store_class):
        assert parameter_lines(store_class.methods[0]) == ["1) key - lookup key", "2) fallback"]

    def test_parameter_comments_never_attach_by_position(self):
        comments = {"left": "first operand", "right": "second operand"}
        add = CallableUnit(
            name="add",
            parameters=[ParameterUnit(name="right", type_name="int"), ParameterUnit(name="left", type_name="int")],
            param_comments=comments,
        )
        negate = CallableUnit(
            name="negate",
            parameters=[ParameterUnit(name="value", type_name="int")],
            param_comments=comments,
        )

        assert parameter_lines(add) == ["1) right - second operand", "2) left - first operand"]
        assert parameter_lines(negate) == ["1) value"]

    def test_returns_line(self, store_class):
        get, clear = store_class.methods
        assert returns_line(get) == "String - the stored value"
        assert returns_line(clear) is None
        assert returns_line(store_class.constructors[0]) is None

    def test_returns_line_without_comment(self):
        size = CallableUnit(name="size", return_type_name="int")

        assert returns_line(size) == "int"

    def test_throws_lines_use_simple_names(self, store_class):
        assert throws_lines(store_class.methods[0]) == [
            "IOException - on read failure",
            "StoreException",
        ]


class TestStructureWalker:
    def test_package_chapters_emitted_once_in_first_encounter_order(self, tree, options):
        document = render(tree, options)

        assert [t for t in chapter_titles(document) if t.endswith("パッケージ")] == [
            "com.acme.core パッケージ",
            "com.acme.util パッケージ",
        ]

    def test_one_page_break_per_chapter_and_class(self, tree, options):
        assert page_breaks(render(tree, options)) == 5

    def test_classes_rendered_in_tree_order(self, tree, options):
        titles = [t for t in chapter_titles(render(tree, options)) if t.endswith("クラス")]

        assert titles == ["Store クラス", "Strings クラス", "Color クラス"]

    def test_package_comment_follows_separator(self, tree, options):
        document = render(tree, options)
        lines = texts(document)
        index = lines.index("Core types.")

        assert document.paragraphs[index - 1].borders.bottom == "dashed"
        assert lines[index - 2] == "com.acme.core パッケージ"

    def test_package_without_comment_has_no_separator(self, tree, options):
        lines = texts(render(tree, options))
        chapter = lines.index("com.acme.util パッケージ")

        # chapter title is followed directly by the class page's package caption
        assert lines[chapter + 1] == "com.acme.util パッケージ"
        assert lines[chapter + 2] == "Strings クラス"

    def test_class_page_sections_in_order(self, tree, options):
        lines = texts(render(tree, options))
        expected = [
            "com.acme.core パッケージ",
            "Store クラス",
            "java.lang.Object\n　└ com.acme.core.AbstractStore\n　　 　└ com.acme.core.Store",
            "すべての実装されたインタフェース:",
            "java.io.Closeable, com.acme.core.Named",
            "public Store",
            "Key value store.",
            "Use #open first.",
            "バージョン:",
            "1.2",
            "作成者:",
            "Alice\nBob",
            "フィールドの詳細",
            "size フィールド",
            "private int size",
            "Entry count.",
            "",
            "name フィールド",
            "private String name",
            "",
            "コンストラクタの詳細",
            "Store コンストラクタ",
            "public Store(int capacity)",
            "パラメータ:",
            "1) capacity - initial capacity",
            "メソッドの詳細",
            "get メソッド",
            "public String get(String key, Optional<String> fallback)",
            "Returns a value.",
            "パラメータ:",
            "1) key - lookup key",
            "2) fallback",
            "戻り値:",
            "String - the stored value",
            "例外:",
            "IOException - on read failure",
            "StoreException",
            "",
            "clear メソッド",
            "public void clear()",
        ]
        start = lines.index("Store クラス") - 1

        assert lines[start:start + len(expected)] == expected

    def test_class_comment_paragraph_break_keeps_inline_font(self, tree, options):
        document = render(tree, options)
        paragraph = paragraph_with(document, "Use #open first.")

        assert [r.font for r in paragraph.runs if r.kind == "text"] == ["Meiryo UI", "Consolas", "Meiryo UI"]

    def test_void_method_has_no_returns_section(self, tree, options):
        lines = texts(render(tree, options))
        clear = lines.index("clear メソッド")

        assert "戻り値:" not in lines[clear:lines.index("Strings クラス")]

    def test_group_titles_are_boxed(self, tree, options):
        title = paragraph_with(render(tree, options), "フィールドの詳細")

        assert title.borders.is_set()
        assert title.first_line_indent == 100
        assert title.line_spacing == 1.0
        assert title.runs[0].size_pt == 14

    def test_enum_constants_separated(self, tree, options):
        document = render(tree, options)
        lines = texts(document)
        start = lines.index("定数の詳細")

        assert lines[start:start + 8] == [
            "定数の詳細",
            "RED 列挙型定数",
            "public static final RED",
            "",
            "",
            "GREEN 列挙型定数",
            "public static final GREEN",
            "",
        ]
        assert document.paragraphs[start + 4].borders.bottom == "dashed"

    def test_class_without_package_entry_gets_synthesized_chapter(self, options):
        tree = DocumentationTree(classes=[
            ClassUnit(name="Orphan", qualified_name="x.Orphan", package="x"),
        ])

        assert chapter_titles(render(tree, options)) == ["x パッケージ", "Orphan クラス"]

    def test_english_labels(self, tree, english_options):
        lines = texts(render(tree, english_options))

        assert "Package com.acme.core" in lines
        assert "Class Store" in lines
        assert "Method Detail" in lines
        assert "get method" in lines
        assert "Enum Constant Detail" in lines

    def test_walker_state_is_reset_per_walk(self, tree, options):
        document = Document()
        walker = StructureWalker(ParagraphComposer(document, options), LABELS["ja"])
        walker.walk(tree)
        walker.walk(tree)

        assert list(walker.emitted_packages) == ["com.acme.core", "com.acme.util"]
        assert page_breaks(document) == 10

    def test_parameter_without_type_prefix_stays_qualified(self, options):
        method = CallableUnit(
            name="put",
            parameters=[ParameterUnit(name="item", type_name="com.acme.Item")],
        )

        assert callable_signature(method) == "void put(com.acme.Item item)"


@pytest.mark.parametrize("locale,label", [("ja", "メソッドの詳細"), ("en", "Method Detail")])
def test_labels_by_locale(locale, label):
    assert LABELS[locale].methods_detail == label
