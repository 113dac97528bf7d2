from dataclasses import dataclass


@dataclass(frozen=True)
class FencedBlock:
    """A finalized top-level diagram block, addressed by original line indices."""

    start_line: int       # opening fence line
    end_line: int         # closing fence line (inclusive)
    fence_char: str
    fence_len: int
    indent_prefix: str
    info_string: str
    content: str          # de-indented lines strictly between the fences

    def __post_init__(self) -> None:
        if self.end_line <= self.start_line:
            raise ValueError(f"end_line ({self.end_line}) must be after start_line ({self.start_line})")
        if self.fence_len < 3:
            raise ValueError(f"fence_len must be >= 3, got {self.fence_len}")

    @property
    def opening_fence(self) -> str:
        return self.indent_prefix + self.fence_char * self.fence_len + self.info_string

    @property
    def closing_fence(self) -> str:
        return self.indent_prefix + self.fence_char * self.fence_len
