from .adapter import CODE_BLOCK_MARGIN, effective_width, failure_lines, render_block, success_lines
from .engine import EngineConfig, LayoutEngine, LayoutResult, MermaidAsciiCLI

__all__ = [
    "CODE_BLOCK_MARGIN",
    "EngineConfig",
    "LayoutEngine",
    "LayoutResult",
    "MermaidAsciiCLI",
    "effective_width",
    "failure_lines",
    "render_block",
    "success_lines",
]
