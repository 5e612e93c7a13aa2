"""Parse KSS comment text into structured sections."""

from __future__ import annotations

import re
import textwrap
from dataclasses import dataclass, field

from kssdoc.comment_utils import comment_body_lines
from kssdoc.exceptions import BlockParseError

_REFERENCE_RE = re.compile(r"^\s*style\s?guide\s+(?P<reference>.+?)\s*$", re.IGNORECASE)
_MARKUP_RE = re.compile(r"^\s*markup:\s*", re.IGNORECASE)
_WEIGHT_RE = re.compile(r"^\s*weight:\s*(?P<weight>.*?)\s*$", re.IGNORECASE)
_DEPRECATED_RE = re.compile(r"^\s*deprecated:", re.IGNORECASE)
_EXPERIMENTAL_RE = re.compile(r"^\s*experimental:", re.IGNORECASE)
_MODIFIER_RE = re.compile(r"^(?P<name>[.:][^\s]+)\s+-\s+(?P<description>.*)$")
_CUSTOM_RE = re.compile(r"^\s*(?P<name>[\w-]+):\s*(?P<value>.*)$", re.DOTALL)


@dataclass
class ParseOptions:
    """Options for KSS parsing.

    Attributes:
        custom: Names of custom ``Name: value`` properties to capture. Values
            are stored on the section under the lower camel-cased name.
    """

    custom: list[str] = field(default_factory=list)


@dataclass
class ParsedModifier:
    """A modifier as written in the comment, before rendering."""

    name: str
    description: str

    @property
    def class_name(self) -> str:
        name = self.name.replace(":", " pseudo-class-").replace(".", " ")
        return " ".join(name.split())


@dataclass
class ParsedSection:
    """Raw structured content of one KSS section."""

    reference: str
    header: str = ""
    description: str = ""
    modifiers: list[ParsedModifier] = field(default_factory=list)
    markup: str | None = None
    weight: int = 0
    deprecated: bool = False
    experimental: bool = False
    custom: dict[str, str] = field(default_factory=dict)


def parse_kss(text: str, options: ParseOptions | None = None) -> list[ParsedSection]:
    """Parse a KSS comment into zero or more sections.

    Each ``Styleguide <reference>`` paragraph closes one section; paragraphs
    after the last reference are not part of any section.

    Raises:
        BlockParseError: If a ``Weight:`` value is not an integer.
    """
    opts = options or ParseOptions()
    custom_names = {name.lower(): name for name in opts.custom}

    sections: list[ParsedSection] = []
    pending: list[str] = []
    for paragraph in _paragraphs(text):
        *body, last_line = paragraph.split("\n")
        match = _REFERENCE_RE.match(last_line)
        if not match:
            pending.append(paragraph)
            continue
        if body:
            pending.append("\n".join(body))
        reference = match.group("reference").rstrip(".").strip()
        sections.append(_build_section(reference, pending, custom_names))
        pending = []
    return sections


def _paragraphs(text: str) -> list[str]:
    body = textwrap.dedent("\n".join(comment_body_lines(text)))
    paragraphs = re.split(r"\n[ \t]*\n", body)
    return [paragraph.strip("\n").rstrip() for paragraph in paragraphs if paragraph.strip()]


def _build_section(
    reference: str, paragraphs: list[str], custom_names: dict[str, str]
) -> ParsedSection:
    section = ParsedSection(reference=reference)
    description: list[str] = []
    for paragraph in paragraphs:
        if _MARKUP_RE.match(paragraph):
            section.markup = _MARKUP_RE.sub("", paragraph, count=1).strip("\n")
            continue

        weight_match = _WEIGHT_RE.match(paragraph)
        if weight_match and "\n" not in paragraph:
            section.weight = _parse_weight(weight_match.group("weight"), reference)
            continue

        modifiers = _parse_modifiers(paragraph)
        if modifiers:
            section.modifiers.extend(modifiers)
            continue

        custom_match = _CUSTOM_RE.match(paragraph)
        if custom_match and custom_match.group("name").lower() in custom_names:
            key = _lower_camel(custom_names[custom_match.group("name").lower()])
            section.custom[key] = custom_match.group("value").strip()
            continue

        if _DEPRECATED_RE.match(paragraph):
            section.deprecated = True
        elif _EXPERIMENTAL_RE.match(paragraph):
            section.experimental = True
        description.append(paragraph.strip())

    if description:
        section.header = description[0]
        section.description = "\n\n".join(description[1:])
    return section


def _parse_weight(value: str, reference: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise BlockParseError(
            f"Invalid weight {value!r} in section {reference!r}"
        ) from exc


def _parse_modifiers(paragraph: str) -> list[ParsedModifier]:
    """Parse a modifier list paragraph, or return [] if it is not one."""
    modifiers: list[ParsedModifier] = []
    for line in paragraph.split("\n"):
        match = _MODIFIER_RE.match(line)
        if match:
            modifiers.append(
                ParsedModifier(
                    name=match.group("name"),
                    description=match.group("description").strip(),
                )
            )
        elif modifiers and line[:1].isspace() and line.strip():
            modifiers[-1].description += " " + line.strip()
        else:
            return []
    return modifiers


def _lower_camel(name: str) -> str:
    head, *rest = re.split(r"[\s_-]+", name.strip())
    return head.lower() + "".join(part.capitalize() for part in rest)
