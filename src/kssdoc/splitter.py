"""Split stylesheet sources into KSS blocks."""

from __future__ import annotations

import re
from dataclasses import dataclass

from kssdoc.comment_utils import comment_body_lines, normalize_newlines
from kssdoc.exceptions import BlockParseError
from kssdoc.schemas import RawBlock

# Syntaxes without ``//`` line comments.
_BLOCK_COMMENT_ONLY = frozenset({"css"})
_STYLEGUIDE_LINE_RE = re.compile(r"^\s*style\s?guide\s+\S", re.IGNORECASE)
_LINE_COMMENT_RE = re.compile(r"^[ \t]*//.*(?:\n|$)", re.MULTILINE)


@dataclass
class _Comment:
    start: int
    end: int
    text: str


def get_blocks(contents: str, syntax: str) -> list[RawBlock]:
    """Return the KSS blocks of a source file in source order.

    Each block holds the raw KSS comment and the code between it and the next
    KSS comment.

    Raises:
        BlockParseError: If a block comment is never closed.
    """
    source = normalize_newlines(contents)
    comments = [
        comment
        for comment in _find_comments(source, allow_line_comments=syntax.lower() not in _BLOCK_COMMENT_ONLY)
        if _is_kss_comment(comment.text)
    ]

    blocks: list[RawBlock] = []
    for index, comment in enumerate(comments):
        code_end = comments[index + 1].start if index + 1 < len(comments) else len(source)
        code = source[comment.end : code_end]
        blocks.append(RawBlock(kss=comment.text, code=code if code.strip() else None))
    return blocks


def _is_kss_comment(text: str) -> bool:
    return any(_STYLEGUIDE_LINE_RE.match(line) for line in comment_body_lines(text))


def _find_comments(source: str, *, allow_line_comments: bool) -> list[_Comment]:
    comments: list[_Comment] = []
    position = 0
    length = len(source)
    while position < length:
        char = source[position]
        if char in "\"'":
            position = _skip_string(source, position)
            continue
        if source.startswith("/*", position):
            end = source.find("*/", position + 2)
            if end == -1:
                line = source.count("\n", 0, position) + 1
                raise BlockParseError(f"Unterminated comment starting on line {line}")
            comments.append(_Comment(position, end + 2, source[position : end + 2]))
            position = end + 2
            continue
        if allow_line_comments and source.startswith("//", position) and _at_line_start(source, position):
            comment = _consume_line_comments(source, position)
            comments.append(comment)
            position = comment.end
            continue
        position += 1
    return comments


def _at_line_start(source: str, position: int) -> bool:
    line_start = source.rfind("\n", 0, position) + 1
    return not source[line_start:position].strip()


def _consume_line_comments(source: str, position: int) -> _Comment:
    """Merge consecutive ``//`` lines into a single comment."""
    start = source.rfind("\n", 0, position) + 1
    end = start
    while True:
        match = _LINE_COMMENT_RE.match(source, end)
        if not match or match.end() == end:
            break
        end = match.end()
    text = source[start:end].rstrip("\n")
    return _Comment(start, start + len(text), text)


def _skip_string(source: str, position: int) -> int:
    quote = source[position]
    index = position + 1
    while index < len(source):
        char = source[index]
        if char == "\\":
            index += 2
            continue
        if char == quote or char == "\n":
            return index + 1
        index += 1
    return index
