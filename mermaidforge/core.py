# mermaidforge/core.py
from __future__ import annotations

import logging
from typing import Optional, Union

from ._logging import resolve_logger
from .models.mode import RenderMode
from .reassemble import splice_blocks
from .render.adapter import render_block
from .render.engine import LayoutEngine, MermaidAsciiCLI
from .scan.blocks import find_mermaid_blocks


def render_mermaid_blocks(
    content: str,
    mode: Union[str, RenderMode] = RenderMode.PLAIN,
    max_width: int = 0,
    *,
    engine: Optional[LayoutEngine] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> str:
    """
    Replace every top-level ```mermaid block in `content` with a text drawing.

    `mode` is plain, ascii or unicode (any case); plain returns `content`
    as-is, and so does any unrecognised mode. `max_width` is the document
    width in columns, 0 or less for unbounded. `engine` defaults to the
    mermaid-ascii executable.

    Documents without a diagram block come back as the very same string, so
    CRLF line endings survive. Once something is replaced the result is
    joined with LF. Diagrams the engine rejects are replaced by an inline
    error notice followed by their original source; this function does not
    raise for any input.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)

    if not content:
        return content

    render_mode = RenderMode.parse(mode)
    if render_mode is RenderMode.PLAIN:
        if not isinstance(mode, RenderMode) and (mode or "").strip().lower() not in ("plain", "raw"):
            lg.debug("Unknown render mode %r, leaving document unchanged", mode)
        return content

    lines = content.replace("\r\n", "\n").split("\n")
    blocks = find_mermaid_blocks(lines)
    if not blocks:
        return content
    lg.debug("Found %d mermaid block(s)", len(blocks))

    if engine is None:
        engine = MermaidAsciiCLI()

    replacements = [
        (block, render_block(block, engine, render_mode.use_ascii, max_width, logger=lg))
        for block in blocks
    ]
    return "\n".join(splice_blocks(lines, replacements))
