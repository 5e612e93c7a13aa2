"""Build normalized sections from raw KSS blocks."""

from __future__ import annotations

import logging
import warnings

from pydantic import ValidationError

from kssdoc.config import KSSDOC_PARAM_PREFIX
from kssdoc.exceptions import BlockParseError, MultipleSectionWarning
from kssdoc.kss_parser import ParsedSection, ParseOptions, parse_kss
from kssdoc.markdown import render_markdown
from kssdoc.params import get_additional_params, sanitize_params
from kssdoc.schemas import Modifier, RawBlock, Section

logger = logging.getLogger(__name__)

_MULTIPLE_SECTIONS_MESSAGE = (
    "KSS splitter returned more than 1 KSS block. "
    "Styleguide might not be properly generated."
)


def build_section(block: RawBlock, options: ParseOptions | None = None) -> list[Section]:
    """Convert one raw block into a list of at most one section.

    Raises:
        BlockParseError: If the block cannot be parsed or the merged
            parameters do not validate.
    """
    additional_params = get_additional_params(block.kss, prefix=KSSDOC_PARAM_PREFIX)
    sanitized = sanitize_params(block.kss, prefix=KSSDOC_PARAM_PREFIX)

    try:
        parsed = parse_kss(sanitized, options)
    except BlockParseError as exc:
        logger.error("Error processing KSS block: %s", exc)
        raise

    if not parsed:
        return []
    if len(parsed) > 1:
        logger.warning(_MULTIPLE_SECTIONS_MESSAGE)
        warnings.warn(_MULTIPLE_SECTIONS_MESSAGE, MultipleSectionWarning, stacklevel=2)

    fields = _section_fields(parsed[0])
    fields.update(additional_params)

    css = trim_linebreaks(block.code)
    if css:
        fields["css"] = css

    try:
        section = Section.model_validate(fields)
    except ValidationError as exc:
        logger.error("Error processing KSS block %r: %s", parsed[0].reference, exc)
        raise BlockParseError(
            f"Invalid section {parsed[0].reference!r}: {exc}"
        ) from exc
    return [section]


def trim_linebreaks(text: str | None) -> str | None:
    """Remove leading and trailing line breaks."""
    if not text:
        return text
    return text.strip("\r\n")


def _section_fields(parsed: ParsedSection) -> dict[str, object]:
    fields: dict[str, object] = dict(parsed.custom)
    fields.update(
        header=render_markdown(parsed.header, no_wrapper=True),
        description=render_markdown(parsed.description),
        modifiers=[
            Modifier(
                id=index,
                name=modifier.name,
                description=render_markdown(modifier.description, no_wrapper=True),
                class_name=modifier.class_name,
                markup=parsed.markup,
            )
            for index, modifier in enumerate(parsed.modifiers, start=1)
        ],
        deprecated=parsed.deprecated,
        experimental=parsed.experimental,
        reference=parsed.reference,
        markup=parsed.markup,
        weight=parsed.weight,
    )
    return fields
