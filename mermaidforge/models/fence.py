from dataclasses import dataclass

BACKTICK = "`"
TILDE = "~"
FENCE_CHARS = (BACKTICK, TILDE)
MIN_FENCE_LEN = 3
MAX_FENCE_INDENT = 3


@dataclass(frozen=True)
class FenceLine:
    """A line that opens or closes a fenced code block."""
    indent: str           # literal leading spaces (0-3)
    char: str             # '`' or '~'
    length: int           # run length (>=3)
    info: str             # stripped text after the run

    @property
    def language(self) -> str:
        """First whitespace-delimited token of the info string, lowercased."""
        parts = self.info.split()
        return parts[0].lower() if parts else ""

    def closes(self, opener: "FenceLine") -> bool:
        """True if this line is a valid closer for `opener`."""
        return self.char == opener.char and self.length >= opener.length and not self.info
