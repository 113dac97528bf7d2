from .blocks import FencedBlock
from .fence import FenceLine
from .mode import RenderMode

__all__ = ["FencedBlock", "FenceLine", "RenderMode"]
