"""Section models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Modifier(BaseModel):
    """A named variant of a section's markup."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., ge=1)
    name: str
    description: str = ""
    class_name: str = Field(default="", alias="className")
    markup: str | None = None


class Section(BaseModel):
    """A documented style-guide section.

    Attributes:
        header: Inline HTML for the section title.
        description: HTML description.
        modifiers: Modifiers in declaration order, ids starting at 1.
        deprecated: Whether the section is marked deprecated.
        experimental: Whether the section is marked experimental.
        reference: Hierarchical reference. Numeric once resolved.
        string_reference: Original text reference, set only when the
            reference was rewritten to its numeric form.
        weight: Ordering weight among siblings.
        markup: Raw markup template.
        css: Code following the KSS comment in the source file.
        file: Source file path.
        syntax: Source file extension.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    header: str = ""
    description: str = ""
    modifiers: list[Modifier] = Field(default_factory=list)
    deprecated: bool = False
    experimental: bool = False
    reference: str
    string_reference: str | None = Field(default=None, alias="stringReference")
    weight: int = 0
    markup: str | None = None
    css: str | None = None
    file: str | None = None
    syntax: str | None = None

    def to_json(self) -> dict[str, Any]:
        """Return the camelCase JSON representation of the section."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
