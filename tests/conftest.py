# conftest.py - pytest configuration
from typing import List, Tuple

import pytest

from mermaidforge.render.engine import LayoutResult


class FakeEngine:
    """
    Stand-in layout engine.

    Draws every node name it can find as a box on a single row, clipped to the
    width budget, and rejects sources whose first line is not a known diagram
    keyword. Records every call for assertions.
    """

    KEYWORDS = ("graph", "flowchart", "sequencediagram", "classdiagram", "erdiagram", "statediagram")

    def __init__(self) -> None:
        self.calls: List[Tuple[str, bool, int]] = []

    def layout(self, source: str, *, use_ascii: bool, max_width: int) -> LayoutResult:
        self.calls.append((source, use_ascii, max_width))
        lines = [l.strip() for l in source.split("\n") if l.strip()]
        if not lines or not lines[0].split()[0].lower().startswith(self.KEYWORDS):
            return LayoutResult(error=f"Syntax error: unexpected '{lines[0] if lines else ''}'")

        names: List[str] = []
        for line in lines[1:]:
            for token in line.replace("-->", " ").replace("->>", " ").replace(":", " ").split():
                if token not in names:
                    names.append(token)

        h, v, tl, tr, bl, br = ("-", "|", "+", "+", "+", "+") if use_ascii else ("─", "│", "┌", "┐", "└", "┘")
        top = " ".join(tl + h * (len(n) + 2) + tr for n in names)
        mid = " ".join(v + " " + n + " " + v for n in names)
        bot = " ".join(bl + h * (len(n) + 2) + br for n in names)
        rows = [top, mid, bot]
        if max_width > 0:
            rows = [r[:max_width] for r in rows]
        return LayoutResult(text="\n".join(rows) + "\n\n")


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()
