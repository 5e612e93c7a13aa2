"""Pipeline turning stylesheet sources into sorted KSS sections."""

from __future__ import annotations

import asyncio
import logging
from pathlib import PurePath
from typing import Mapping

from kssdoc.builder import build_section
from kssdoc.config import KSSDOC_MAX_CONCURRENCY
from kssdoc.kss_parser import ParseOptions
from kssdoc.schemas import RawBlock, Section
from kssdoc.sorter import sort_sections
from kssdoc.splitter import get_blocks

logger = logging.getLogger(__name__)


def syntax_for_path(file_path: str) -> str:
    """Return the stylesheet syntax implied by a file extension."""
    return PurePath(file_path).suffix[1:]


async def parse_kss_sections(
    files: Mapping[str, str],
    options: ParseOptions | None = None,
) -> list[Section]:
    """Parse KSS sections from stylesheet sources.

    Args:
        files: Mapping of file path to file contents. Iteration order decides
            the order of sections that compare equal.
        options: Parsing options shared by every block.

    Returns:
        Sections in display order with resolved references.

    Raises:
        BlockParseError: If any block fails to parse.
        ReferenceCollisionError: If two sections resolve to the same reference.
    """
    opts = options or ParseOptions()
    semaphore = asyncio.Semaphore(KSSDOC_MAX_CONCURRENCY)

    results = await asyncio.gather(
        *(
            parse_file(
                contents,
                file_path,
                syntax_for_path(file_path),
                opts,
                semaphore=semaphore,
            )
            for file_path, contents in files.items()
        )
    )

    sections = [section for file_sections in results for section in file_sections]
    logger.debug("Sorting %d sections from %d files", len(sections), len(files))
    return sort_sections(sections)


async def parse_file(
    contents: str,
    file_path: str,
    syntax: str,
    options: ParseOptions | None = None,
    *,
    semaphore: asyncio.Semaphore | None = None,
) -> list[Section]:
    """Build the sections of one file, tagged with its path and syntax."""
    if not contents:
        return []

    blocks = get_blocks(contents, syntax)
    logger.debug("Found %d KSS blocks in %s", len(blocks), file_path)
    limiter = semaphore or asyncio.Semaphore(KSSDOC_MAX_CONCURRENCY)

    results = await asyncio.gather(
        *(_build_block(block, options, limiter) for block in blocks)
    )

    sections: list[Section] = []
    for block_sections in results:
        for section in block_sections:
            section.syntax = syntax
            section.file = file_path
            sections.append(section)
    return sections


async def _build_block(
    block: RawBlock, options: ParseOptions | None, semaphore: asyncio.Semaphore
) -> list[Section]:
    async with semaphore:
        return await asyncio.to_thread(build_section, block, options)
