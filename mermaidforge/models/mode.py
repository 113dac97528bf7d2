# mermaidforge/models/mode.py
from __future__ import annotations

from enum import Enum
from typing import Union

from ..errors import InvalidModeError

_ALIASES = {"raw": "plain"}


class RenderMode(str, Enum):
    """How diagram blocks are rendered.

    PLAIN leaves the document untouched. ASCII and UNICODE choose the glyph
    set the layout engine draws with.
    """

    PLAIN = "plain"
    ASCII = "ascii"
    UNICODE = "unicode"

    @property
    def use_ascii(self) -> bool:
        return self is RenderMode.ASCII

    @classmethod
    def parse(cls, value: Union[str, "RenderMode", None], *, strict: bool = False) -> "RenderMode":
        """
        Resolve a mode name case-insensitively.

        Unknown names fall back to PLAIN unless `strict` is set, in which case
        InvalidModeError is raised. Option parsing uses strict mode; the
        transform itself stays lenient so it can never fail on a bad mode.
        """
        if isinstance(value, cls):
            return value
        key = (value or "").strip().lower()
        key = _ALIASES.get(key, key)
        for mode in cls:
            if mode.value == key:
                return mode
        if strict:
            raise InvalidModeError(str(value))
        return cls.PLAIN
