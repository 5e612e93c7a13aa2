"""Shared schemas for kssdoc."""

from kssdoc.schemas.blocks import RawBlock
from kssdoc.schemas.sections import Modifier, Section

__all__ = ["Modifier", "RawBlock", "Section"]
