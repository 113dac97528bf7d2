from .text import display_width, max_line_width

__all__ = ["display_width", "max_line_width"]
