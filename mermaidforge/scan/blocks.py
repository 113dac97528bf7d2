# mermaidforge/scan/blocks.py
from __future__ import annotations

from typing import List, Sequence

from ..models.blocks import FencedBlock
from .fences import DIAGRAM_LANGUAGE, FenceSpan, scan_fences


def _strip_prefix(line: str, prefix: str) -> str:
    # Lines that don't carry the exact prefix pass through untouched.
    if prefix and line.startswith(prefix):
        return line[len(prefix):]
    return line


def extract_block(lines: Sequence[str], span: FenceSpan) -> FencedBlock:
    """Materialize a scanned span into a FencedBlock with de-indented content."""
    opener = span.opener
    body = [_strip_prefix(lines[j], opener.indent) for j in range(span.start + 1, span.end)]
    return FencedBlock(
        start_line=span.start,
        end_line=span.end,
        fence_char=opener.char,
        fence_len=opener.length,
        indent_prefix=opener.indent,
        info_string=opener.info,
        content="\n".join(body),
    )


def find_mermaid_blocks(lines: Sequence[str], *, language: str = DIAGRAM_LANGUAGE) -> List[FencedBlock]:
    """
    Return every top-level diagram block in `lines`, in document order.

    `lines` must already be split on LF with CRLF normalized away.
    """
    return [extract_block(lines, span) for span in scan_fences(lines, language=language)]
