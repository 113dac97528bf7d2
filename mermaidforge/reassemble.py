# mermaidforge/reassemble.py
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .models.blocks import FencedBlock


def replace_lines(lines: Sequence[str], start: int, end: int, new_lines: Sequence[str]) -> List[str]:
    """Return a copy of `lines` with lines[start:end + 1] replaced by `new_lines`."""
    return [*lines[:start], *new_lines, *lines[end + 1:]]


def splice_blocks(
    lines: Sequence[str],
    replacements: Iterable[Tuple[FencedBlock, Sequence[str]]],
) -> List[str]:
    """
    Apply every (block, replacement) pair to `lines`.

    Block coordinates refer to the original `lines`. Splicing runs from the
    last block to the first so a replacement of a different length never
    shifts a span that has not been applied yet.
    """
    result = list(lines)
    for block, new_lines in sorted(replacements, key=lambda r: r[0].start_line, reverse=True):
        result = replace_lines(result, block.start_line, block.end_line, new_lines)
    return result
