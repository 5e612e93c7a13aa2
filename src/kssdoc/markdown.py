"""Render KSS description text from Markdown to HTML."""

from __future__ import annotations

import re
from typing import Iterable

from markdown_it import MarkdownIt

from kssdoc.config import KSSDOC_EXCLUDED_LINKS

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML processing (pip install beautifulsoup4)."
    ) from exc


_MD = MarkdownIt("commonmark", {"html": True})
_STYLEGUIDE_TAGS = ["p", "a", "li", "pre", "h1", "h2", "h3", "h4", "h5", "h6"]
_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
STYLEGUIDE_CLASS = "sg"


def render_markdown(
    text: str | None, *, no_wrapper: bool = False, style_guide: bool = False
) -> str:
    """Render Markdown text into an HTML fragment.

    Parameters
    ----------
    text : str | None
        Markdown source. Empty or missing text renders as an empty string.
    no_wrapper : bool
        If True, a single wrapping ``<p>`` element is removed so the result can
        be embedded as inline HTML (used for section headers).
    style_guide : bool
        If True, the rendered HTML is passed through :func:`process_html`.
    """
    if not text:
        return ""
    html = _MD.render(text)
    if style_guide:
        html = process_html(html)
    if no_wrapper:
        return strip_paragraph_wrapper(html)
    return html


def process_html(html: str, *, exclude_links: Iterable[str] = KSSDOC_EXCLUDED_LINKS) -> str:
    """Prepare rendered HTML for a style-guide page.

    Adds the ``sg`` class to text elements, removes links whose ``href`` starts
    with one of ``exclude_links`` and names every heading after its text.
    """
    soup = BeautifulSoup(html, "lxml")
    root = soup.body or soup

    for tag in root.find_all(_STYLEGUIDE_TAGS):
        classes = tag.get("class", [])
        if STYLEGUIDE_CLASS not in classes:
            tag["class"] = [*classes, STYLEGUIDE_CLASS]

    prefixes = tuple(link for link in exclude_links if link)
    if prefixes:
        for link in root.find_all("a", href=True):
            if link["href"].startswith(prefixes):
                link.decompose()

    for heading in root.find_all(_HEADING_TAGS):
        heading["name"] = dasherize(heading.get_text())

    return root.decode_contents()


def dasherize(text: str) -> str:
    """Replace whitespace with dashes and lower-case the text."""
    return re.sub(r"\s", "-", text).lower()


def strip_paragraph_wrapper(html: str) -> str:
    """Remove the outer ``<p>`` when it is the only top-level element."""
    soup = BeautifulSoup(html, "lxml")
    root = soup.body or soup
    children = [
        child
        for child in root.children
        if not (isinstance(child, NavigableString) and not child.strip())
    ]
    if len(children) == 1 and isinstance(children[0], Tag) and children[0].name == "p":
        return children[0].decode_contents()
    return html
