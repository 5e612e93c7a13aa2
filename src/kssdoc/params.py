"""Auxiliary ``sg-*`` parameters embedded in KSS comments."""

from __future__ import annotations

import re

from kssdoc.comment_utils import normalize_newlines, split_comment_line
from kssdoc.config import KSSDOC_PARAM_PREFIX

_STYLEGUIDE_RE = re.compile(r"^\s*style\s?guide\s+\S", re.IGNORECASE)


def _param_re(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"^\s*{re.escape(prefix)}(?P<name>[\w-]+)\s*:\s?(?P<value>.*)$")


def _camel_case(name: str) -> str:
    head, *rest = name.split("-")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _param_spans(lines: list[str], prefix: str) -> list[tuple[str, int, int]]:
    """Locate parameters as (name, first line, end line exclusive)."""
    param_re = _param_re(prefix)
    spans: list[tuple[str, int, int]] = []
    index = 0
    while index < len(lines):
        match = param_re.match(split_comment_line(lines[index])[1])
        if not match:
            index += 1
            continue
        end = index + 1
        while end < len(lines):
            body = split_comment_line(lines[end])[1]
            if not body.strip() or param_re.match(body) or _STYLEGUIDE_RE.match(body):
                break
            end += 1
        spans.append((match.group("name"), index, end))
        index = end
    return spans


def get_additional_params(text: str, *, prefix: str = KSSDOC_PARAM_PREFIX) -> dict[str, str]:
    """Extract non-standard ``<prefix>name: value`` parameters from a comment.

    Values may continue on following lines until a blank line or another
    parameter. Names are returned camel-cased without the prefix.
    """
    lines = normalize_newlines(text).split("\n")
    params: dict[str, str] = {}
    param_re = _param_re(prefix)
    for name, start, end in _param_spans(lines, prefix):
        first = param_re.match(split_comment_line(lines[start])[1])
        values = [first.group("value")] if first else []
        values.extend(split_comment_line(line)[1] for line in lines[start + 1 : end])
        params[_camel_case(name)] = "\n".join(values).strip()
    return params


def sanitize_params(text: str, *, prefix: str = KSSDOC_PARAM_PREFIX) -> str:
    """Remove parameter lines from a comment, keeping its comment markers intact."""
    lines = normalize_newlines(text).split("\n")
    for _, start, end in _param_spans(lines, prefix):
        for index in range(start, end):
            marker, _, suffix = split_comment_line(lines[index])
            lines[index] = (marker.rstrip() + " " + suffix.strip()).strip() if suffix else marker.rstrip()
    return "\n".join(lines)
