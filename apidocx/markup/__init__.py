"""Comment markup parsing."""

from .parser import (
    MarkupToken,
    PARAGRAPH_BREAK,
    LINE_BREAK,
    split_paragraphs,
    collapse_line_terminators,
    insert_sentence_breaks,
    split_lines,
    strip_tags,
    decode_entities,
    extract_inline_tags,
    parse_paragraph,
    parse_markup,
)

__all__ = [
    "MarkupToken",
    "PARAGRAPH_BREAK",
    "LINE_BREAK",
    "split_paragraphs",
    "collapse_line_terminators",
    "insert_sentence_breaks",
    "split_lines",
    "strip_tags",
    "decode_entities",
    "extract_inline_tags",
    "parse_paragraph",
    "parse_markup",
]
