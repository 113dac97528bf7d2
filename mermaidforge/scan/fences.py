# mermaidforge/scan/fences.py
"""
Line scanner for fenced code blocks.

The scanner is a two-state machine (outside a fence / inside one). While
inside a fence every line is inert content until the matching closer
arrives: same fence character, run at least as long as the opener, nothing
but whitespace after it. Lines that look like openers inside a fence do not
nest, so a ```mermaid block quoted inside a ````markdown example is never
picked up.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..models.fence import BACKTICK, FENCE_CHARS, MAX_FENCE_INDENT, MIN_FENCE_LEN, FenceLine

DIAGRAM_LANGUAGE = "mermaid"


@dataclass(frozen=True)
class FenceSpan:
    """Line indices of a closed candidate fence, plus its opening line."""
    start: int
    end: int
    opener: FenceLine


def parse_fence_line(line: str) -> Optional[FenceLine]:
    """
    Classify a single line (without its line terminator).

    Returns a FenceLine if the line is, after at most three leading spaces, a
    run of 3+ backticks or tildes; None otherwise. Backtick fences may not
    carry a backtick in their info string, otherwise ```foo`` inline code at
    the start of a line would open a block.
    """
    spaces = 0
    while spaces < MAX_FENCE_INDENT and spaces < len(line) and line[spaces] == " ":
        spaces += 1
    indent, rest = line[:spaces], line[spaces:]

    if len(rest) < MIN_FENCE_LEN or rest[0] not in FENCE_CHARS:
        return None

    char = rest[0]
    run = len(rest) - len(rest.lstrip(char))
    if run < MIN_FENCE_LEN:
        return None

    info = rest[run:].strip()
    if char == BACKTICK and BACKTICK in info:
        return None

    return FenceLine(indent=indent, char=char, length=run, info=info)


def scan_fences(lines: Sequence[str], *, language: str = DIAGRAM_LANGUAGE) -> List[FenceSpan]:
    """
    Walk `lines` once, top to bottom, and return the spans of every closed
    top-level fence whose language token equals `language` (case-insensitive).

    A fence still open at end of input is dropped along with its candidate.
    """
    language = language.lower()
    spans: List[FenceSpan] = []

    open_fence: Optional[FenceLine] = None   # None means "outside"
    open_start = -1
    is_candidate = False

    for i, line in enumerate(lines):
        fence = parse_fence_line(line)
        if fence is None:
            continue

        if open_fence is None:
            open_fence = fence
            open_start = i
            is_candidate = fence.language == language
        elif fence.closes(open_fence):
            if is_candidate:
                spans.append(FenceSpan(start=open_start, end=i, opener=open_fence))
            open_fence = None
            is_candidate = False

    return spans
