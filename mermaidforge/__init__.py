from .core import render_mermaid_blocks
from .errors import (
    InvalidModeError,
    InvalidWidthError,
    MermaidForgeError,
    RenderError,
)
from .models import FencedBlock, FenceLine, RenderMode
from .reassemble import replace_lines, splice_blocks
from .render import (
    EngineConfig,
    LayoutEngine,
    LayoutResult,
    MermaidAsciiCLI,
    effective_width,
    render_block,
)
from .scan import find_mermaid_blocks, parse_fence_line, scan_fences

__version__ = "0.1.0"

__all__ = [
    "render_mermaid_blocks",
    "find_mermaid_blocks",
    "parse_fence_line",
    "scan_fences",
    "render_block",
    "effective_width",
    "replace_lines",
    "splice_blocks",
    "FencedBlock",
    "FenceLine",
    "RenderMode",
    "EngineConfig",
    "LayoutEngine",
    "LayoutResult",
    "MermaidAsciiCLI",
    "MermaidForgeError",
    "InvalidModeError",
    "InvalidWidthError",
    "RenderError",
]
