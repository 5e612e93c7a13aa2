"""Custom exceptions for kssdoc."""


class KssDocError(Exception):
    """Base exception for kssdoc operations."""


class BlockParseError(KssDocError):
    """A KSS block could not be parsed into a section."""


class ReferenceCollisionError(KssDocError):
    """Two sections resolve to the same reference."""

    def __init__(self, reference: str, previous_header: str, current_header: str) -> None:
        self.reference = reference
        self.previous_header = previous_header
        self.current_header = current_header
        super().__init__(
            f"Two sections defined with same reference {reference}: "
            f'"{previous_header}" and "{current_header}"'
        )


class MultipleSectionWarning(UserWarning):
    """A single KSS block produced more than one section."""
