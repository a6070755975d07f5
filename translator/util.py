from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Span:
    """A half-open range of character offsets into a program."""

    start: int
    end: int

    @classmethod
    def default(cls):
        return cls(-1, -1)

    @property
    def unknown(self) -> bool:
        return self.start < 0

    def __and__(self, other: Span) -> Span:
        if self.unknown:
            return other
        if other.unknown:
            return self
        return Span(min(self.start, other.start), max(self.end, other.end))

    def line_col(self, program: str, offset: int) -> Tuple[int, int]:
        # 1-indexed line, 0-indexed column
        offset = min(max(offset, 0), len(program))
        line = program.count("\n", 0, offset) + 1
        column = offset - (program.rfind("\n", 0, offset) + 1)
        return line, column

    def lines(self, program: str) -> Tuple[int, int]:
        return (
            self.line_col(program, self.start)[0],
            self.line_col(program, max(self.start, self.end - 1))[0],
        )

    @property
    def position_str(self) -> str:
        if self.unknown:
            return "an unknown position"
        if self.end - self.start > 1:
            return f"positions [{self.start}-{self.end - 1}]"
        return f"position [{self.start}]"


class Colors:
    RED = "\033[31m"
    ENDC = "\033[m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
