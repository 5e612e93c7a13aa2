"""Sort sections and resolve their references to unique numeric chains.

Sorting follows the kss-node ordering rules: references are compared chunk by
chunk (chunks are delimited by ``.`` or `` - ``), sibling weights take
precedence over the chunk text, digit-only chunks compare numerically and
anything else compares case-insensitively.

Resolution walks the sorted sections once, keeping an auto-increment counter
per depth. Sections with text references get the counter path as their new
``reference`` and keep the original text in ``string_reference``. Sections
whose references are already numeric are left as they are.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Iterable

from kssdoc.exceptions import ReferenceCollisionError
from kssdoc.schemas import Section

_DASH_DELIMITER_RE = re.compile(r"\s+-\s+")
_NUMERIC_CHUNK_RE = re.compile(r"^\d+$")
_NUMERIC_REFERENCE_RE = re.compile(r"^[\d.\-]+$")


def normalize_reference(reference: str) -> str:
    """Lower-case a reference and use ``.`` as its only delimiter."""
    return _DASH_DELIMITER_RE.sub(".", reference.lower())


def split_reference(reference: str) -> list[str]:
    """Split a reference into its normalized chunks."""
    return normalize_reference(reference).split(".")


def build_weight_map(sections: Iterable[Section]) -> dict[str, int]:
    """Map each section's own normalized reference to its weight."""
    return {normalize_reference(section.reference): section.weight or 0 for section in sections}


def _weight_at(reference: str, depth: int, weight_map: dict[str, int]) -> int:
    prefix = ".".join(split_reference(reference)[: depth + 1])
    return weight_map.get(prefix, 0)


def compare_sections(a: Section, b: Section, weight_map: dict[str, int]) -> int:
    """Comparator ordering two sections by reference.

    Returns a negative number if ``a`` sorts first, positive if ``b`` does and
    0 when the references are equivalent.
    """
    chunks_a = split_reference(a.reference)
    chunks_b = split_reference(b.reference)

    for depth in range(max(len(chunks_a), len(chunks_b))):
        chunk_a = chunks_a[depth] if depth < len(chunks_a) else ""
        chunk_b = chunks_b[depth] if depth < len(chunks_b) else ""
        if not chunk_a or not chunk_b:
            if chunk_a or chunk_b:
                # The reference that ran out of chunks goes first.
                return 1 if chunk_a else -1
            continue
        if chunk_a == chunk_b:
            continue

        weight_a = _weight_at(a.reference, depth, weight_map)
        weight_b = _weight_at(b.reference, depth, weight_map)
        if weight_a != weight_b:
            return weight_a - weight_b
        if _NUMERIC_CHUNK_RE.match(chunk_a) and _NUMERIC_CHUNK_RE.match(chunk_b):
            return int(chunk_a) - int(chunk_b)
        return 1 if chunk_a > chunk_b else -1

    return 0


@dataclass
class _ResolveState:
    """Accumulator threaded through the reference resolution pass."""

    auto_increment: list[int] = field(default_factory=lambda: [0])
    previous_chunks: list[str] = field(default_factory=list)
    previous_section: Section | None = None
    # Resolved reference -> header of the section holding it.
    emitted: dict[str, str] = field(default_factory=dict)


def _increment_index(previous: list[str], current: list[str]) -> int:
    index = 0
    for depth, chunk in enumerate(previous):
        if depth >= len(current) or chunk != current[depth]:
            break
        index = depth + 1
    return index


def _resolve_step(state: _ResolveState, section: Section) -> _ResolveState:
    chunks = split_reference(section.reference)
    auto_increment = list(state.auto_increment)
    index = _increment_index(state.previous_chunks, chunks)

    if index < len(auto_increment):
        auto_increment[index] += 1
        auto_increment = auto_increment[: index + 1]
    elif len(chunks) <= index:
        previous_header = state.previous_section.header if state.previous_section else ""
        raise ReferenceCollisionError(section.reference, previous_header, section.header)

    auto_increment.extend(1 for _ in range(len(auto_increment), len(chunks)))

    is_numeric = bool(_NUMERIC_REFERENCE_RE.match(section.reference))
    if is_numeric:
        resolved = section.reference
    else:
        resolved = ".".join(str(counter) for counter in auto_increment)
    if resolved in state.emitted:
        raise ReferenceCollisionError(resolved, state.emitted[resolved], section.header)
    state.emitted[resolved] = section.header

    if not is_numeric:
        section.string_reference = section.reference
        section.reference = resolved

    return _ResolveState(
        auto_increment=auto_increment,
        previous_chunks=chunks,
        previous_section=section,
        emitted=state.emitted,
    )


def resolve_references(sections: list[Section]) -> list[Section]:
    """Assign numeric references to already sorted sections, in place.

    Raises:
        ReferenceCollisionError: If two consecutive sections share the same
            reference chain, or a resolved reference is already taken.
    """
    state = _ResolveState()
    for section in sections:
        state = _resolve_step(state, section)
    return sections


def sort_sections(sections: Iterable[Section]) -> list[Section]:
    """Return sorted copies of ``sections`` with resolved references.

    The input sections are not modified. Ties keep their input order.

    Raises:
        ReferenceCollisionError: If two sections resolve to the same reference.
    """
    owned = [section.model_copy(deep=True) for section in sections]
    weight_map = build_weight_map(owned)
    ordered = sorted(owned, key=cmp_to_key(lambda a, b: compare_sections(a, b, weight_map)))
    return resolve_references(ordered)
