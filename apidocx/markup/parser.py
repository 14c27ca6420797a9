"""
Comment markup parser.

Converts one raw documentation comment into an ordered sequence of tokens:
paragraph breaks, pseudo-line breaks (inside one paragraph) and text runs.
Text runs are either plain (``default``) or the payload of an inline
documentation tag such as ``{@code foo}`` (``inline_tagged``).

The conversion is an ordered pipeline of pure text transforms:

1. split_paragraphs       - split on <p>/<P> markers
2. collapse_line_terminators - merge soft-wrapped source lines
3. insert_sentence_breaks - newline after '. ' and after '。'
4. split_lines            - pseudo-lines inside one paragraph
5. strip_tags             - drop simple <tag> / </tag> sequences
6. decode_entities        - decode the six supported entities
7. extract_inline_tags    - split a line into default / inline-tagged runs
"""

import re
from dataclasses import dataclass
from typing import List, Literal, Tuple

TokenKind = Literal["paragraph_break", "line_break", "text"]
RunVariant = Literal["default", "inline_tagged"]

# \s is ASCII whitespace only: a full-width space (U+3000) is text
_PARAGRAPH_MARKER = re.compile(r"\s*<[pP]>\s*", re.ASCII)
_LINE_TERMINATOR_RUN = re.compile(r"\s*[\r\n]+\s*", re.ASCII)
_PERIOD_BREAK = re.compile(r"\.\s+", re.ASCII)
_FULLWIDTH_PERIOD_BREAK = re.compile(r"。\s*", re.ASCII)
_SIMPLE_TAG = re.compile(r"\s*</?([a-z]+|[A-Z]+)>\s*", re.ASCII)
_INLINE_TAG = re.compile(r"\{@([A-Za-z]+)\s*([^}]*)\}", re.ASCII)
_ASCII_WHITESPACE = " \t\n\r\f\v"

# &amp; must stay last so that '&amp;lt;' decodes to '&lt;', not '<'
_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&nbsp;", " "),
    ("&amp;", "&"),
)


@dataclass(frozen=True)
class MarkupToken:
    """One parser output item."""
    kind: TokenKind
    text: str = ""
    variant: RunVariant = "default"


PARAGRAPH_BREAK = MarkupToken("paragraph_break")
LINE_BREAK = MarkupToken("line_break")


def split_paragraphs(text: str) -> List[str]:
    """Split on paragraph markers; k markers always yield k+1 chunks."""
    return _PARAGRAPH_MARKER.split(text)


def collapse_line_terminators(text: str) -> str:
    """Collapse every whitespace run containing a line terminator into one space."""
    return _LINE_TERMINATOR_RUN.sub(" ", text)


def insert_sentence_breaks(text: str) -> str:
    """Put a newline after each sentence terminator, consuming trailing whitespace."""
    text = _PERIOD_BREAK.sub(".\n", text)
    return _FULLWIDTH_PERIOD_BREAK.sub("。\n", text)


def split_lines(text: str) -> List[str]:
    """Split on newlines, dropping trailing empty lines (at least one line is kept)."""
    lines = text.split("\n")
    while len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def strip_tags(line: str) -> str:
    """Remove simple open/close tags together with surrounding whitespace."""
    return _SIMPLE_TAG.sub("", line)


def decode_entities(line: str) -> str:
    """Decode &lt; &gt; &quot; &apos; &nbsp; and &amp;."""
    for entity, char in _ENTITIES:
        line = line.replace(entity, char)
    return line


def extract_inline_tags(line: str) -> List[Tuple[str, RunVariant]]:
    """
    Split a line into (text, variant) runs.

    Text between inline tags becomes ``default`` runs (empty ones are
    skipped); a tag's trimmed payload becomes an ``inline_tagged`` run unless
    it is empty. The tag name itself is discarded. A line that yields no run
    at all produces one empty ``default`` run.
    """
    runs: List[Tuple[str, RunVariant]] = []
    pos = 0
    for match in _INLINE_TAG.finditer(line):
        preceding = line[pos:match.start()]
        if preceding:
            runs.append((preceding, "default"))
        payload = match.group(2).strip(_ASCII_WHITESPACE)
        if payload:
            runs.append((payload, "inline_tagged"))
        pos = match.end()

    trailing = line[pos:]
    if trailing or not runs:
        runs.append((trailing, "default"))
    return runs


def parse_paragraph(chunk: str) -> List[MarkupToken]:
    """Tokenize one paragraph chunk (no paragraph breaks in the output)."""
    tokens: List[MarkupToken] = []
    chunk = insert_sentence_breaks(collapse_line_terminators(chunk))
    for i, line in enumerate(split_lines(chunk)):
        if i > 0:
            tokens.append(LINE_BREAK)
        line = decode_entities(strip_tags(line))
        for text, variant in extract_inline_tags(line):
            tokens.append(MarkupToken("text", text, variant))
    return tokens


def parse_markup(text: str) -> List[MarkupToken]:
    """
    Parse a raw comment into paragraph breaks, line breaks and text runs.

    Args:
        text: Raw comment text (may be empty)

    Returns:
        Ordered tokens; paragraph breaks only ever appear between paragraphs

    Example:
        >>> [t.text for t in parse_markup("See {@code foo(x)} for detail.")]
        ['See ', 'foo(x)', ' for detail.']
    """
    tokens: List[MarkupToken] = []
    for i, chunk in enumerate(split_paragraphs(text or "")):
        if i > 0:
            tokens.append(PARAGRAPH_BREAK)
        tokens.extend(parse_paragraph(chunk))
    return tokens
