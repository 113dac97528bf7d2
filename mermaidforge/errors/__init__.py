# mermaidforge/errors/__init__.py
"""
Exception hierarchy.

The document transform itself never raises. These are raised at the option
boundary (mode / width resolution) and, optionally, by layout engines that
prefer exceptions over returning a failed LayoutResult.
"""


class MermaidForgeError(Exception):
    """Base class for all mermaidforge errors."""


class InvalidModeError(MermaidForgeError, ValueError):
    """A render mode outside plain / ascii / unicode was requested."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f'invalid --render-mermaid value "{value}": expected one of plain, ascii, unicode'
        )


class InvalidWidthError(MermaidForgeError, ValueError):
    """A negative or non-integer width was requested."""


class RenderError(MermaidForgeError):
    """The layout engine rejected a diagram. The message is shown inline."""


__all__ = ["MermaidForgeError", "InvalidModeError", "InvalidWidthError", "RenderError"]
