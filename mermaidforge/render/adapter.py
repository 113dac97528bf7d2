# mermaidforge/render/adapter.py
from __future__ import annotations

import logging
from typing import List, Optional

from .._logging import NoopLogger
from ..errors import RenderError
from ..models.blocks import FencedBlock
from .engine import LayoutEngine, LayoutResult

# Columns reserved for the replacement block's own fence and indent.
CODE_BLOCK_MARGIN = 4
REPLACEMENT_FENCE = "```"
ERROR_LABEL = "mermaid render error: "


def effective_width(max_width: int, indent_prefix: str) -> int:
    """
    Width budget handed to the layout engine.

    Non-positive `max_width` means unbounded and stays 0. Otherwise the
    indent and CODE_BLOCK_MARGIN are subtracted, clamped at 0.
    """
    if max_width <= 0:
        return 0
    return max(0, max_width - len(indent_prefix) - CODE_BLOCK_MARGIN)


def _indent(prefix: str, lines: List[str]) -> List[str]:
    return [prefix + line for line in lines]


def success_lines(block: FencedBlock, rendered: str) -> List[str]:
    """Wrap rendered glyphs in a plain ``` fence at the block's indentation."""
    body = rendered.rstrip("\n\r\t ").split("\n")
    return _indent(block.indent_prefix, [REPLACEMENT_FENCE, *body, REPLACEMENT_FENCE])


def failure_lines(block: FencedBlock, message: str) -> List[str]:
    """
    A visible error notice followed by the original block, untouched.

    Both end up in the document so the reader sees why the diagram was not
    drawn and can still read its source.
    """
    message_lines = message.split("\n")
    notice = [REPLACEMENT_FENCE, ERROR_LABEL + message_lines[0], *message_lines[1:], REPLACEMENT_FENCE]
    return [
        *_indent(block.indent_prefix, notice),
        block.opening_fence,
        *_indent(block.indent_prefix, block.content.split("\n")),
        block.closing_fence,
    ]


def render_block(
    block: FencedBlock,
    engine: LayoutEngine,
    use_ascii: bool,
    max_width: int,
    *,
    logger: Optional[logging.Logger] = None,
) -> List[str]:
    """Return the replacement lines for `block` (rendered diagram or error notice)."""
    log = logger or NoopLogger()
    budget = effective_width(max_width, block.indent_prefix)

    try:
        result = engine.layout(block.content, use_ascii=use_ascii, max_width=budget)
    except RenderError as e:
        result = LayoutResult(error=str(e))
    except Exception as e:
        log.exception("Line %d: layout engine crashed", block.start_line + 1)
        result = LayoutResult(error=f"{type(e).__name__}: {e}")

    if result.error is None and result.text is None:
        result = LayoutResult(error="layout engine returned no output")

    if result.error is not None:
        log.warning("Line %d: mermaid render failed: %s", block.start_line + 1, result.error)
        return failure_lines(block, result.error)

    return success_lines(block, result.text)
