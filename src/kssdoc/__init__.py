"""kssdoc: extract KSS style-guide sections from stylesheet sources."""

from kssdoc.builder import build_section
from kssdoc.exceptions import (
    BlockParseError,
    KssDocError,
    MultipleSectionWarning,
    ReferenceCollisionError,
)
from kssdoc.kss_parser import ParseOptions
from kssdoc.pipeline import parse_kss_sections
from kssdoc.schemas import Modifier, RawBlock, Section
from kssdoc.sorter import sort_sections

__all__ = [
    "BlockParseError",
    "KssDocError",
    "Modifier",
    "MultipleSectionWarning",
    "ParseOptions",
    "RawBlock",
    "ReferenceCollisionError",
    "Section",
    "build_section",
    "parse_kss_sections",
    "sort_sections",
]
