# mermaidforge/utils/text.py
import wcwidth


def display_width(text: str) -> int:
    """
    Terminal columns occupied by `text`.

    Wide (CJK) characters count as two columns; zero-width and non-printable
    characters count as none. Box-drawing characters are one column.
    """
    width = 0
    for char in text:
        w = wcwidth.wcwidth(char)
        # wcwidth returns -1 for non-printable characters
        if w > 0:
            width += w
    return width


def max_line_width(text: str) -> int:
    """Widest line of `text` in terminal columns, 0 for empty text."""
    if not text:
        return 0
    return max(display_width(line) for line in text.split("\n"))
