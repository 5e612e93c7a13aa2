"""Shared helpers for reading stylesheet comment text."""

from __future__ import annotations

import re

_COMMENT_LINE_RE = re.compile(
    r"^(?P<prefix>\s*(?:/\*+|\*(?!/)|//+)?\s?)(?P<body>.*?)(?P<suffix>\s*\*+/\s*)?$"
)


def normalize_newlines(text: str) -> str:
    """Convert CRLF/CR line endings to LF and expand tabs."""
    return text.replace("\r\n", "\n").replace("\r", "\n").expandtabs(2)


def split_comment_line(line: str) -> tuple[str, str, str]:
    """Split a comment line into (marker prefix, body, closing suffix)."""
    match = _COMMENT_LINE_RE.match(line)
    if match is None:  # pragma: no cover - the pattern matches any single line
        return "", line, ""
    return match.group("prefix"), match.group("body"), match.group("suffix") or ""


def comment_body_lines(text: str) -> list[str]:
    """Return the comment text with ``/* */``, ``*`` and ``//`` markers removed."""
    return [split_comment_line(line)[1] for line in normalize_newlines(text).split("\n")]
