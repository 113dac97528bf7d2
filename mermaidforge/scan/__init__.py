from .blocks import extract_block, find_mermaid_blocks
from .fences import DIAGRAM_LANGUAGE, FenceSpan, parse_fence_line, scan_fences

__all__ = [
    "DIAGRAM_LANGUAGE",
    "FenceSpan",
    "extract_block",
    "find_mermaid_blocks",
    "parse_fence_line",
    "scan_fences",
]
