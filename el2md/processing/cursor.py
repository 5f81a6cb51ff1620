"""
Positional reader over the lines of a `SourceDocument`.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence


class Cursor:
    """An index into an immutable line sequence.

    Moving past the end is a no-op; `at_end` then reports true. Lookahead is
    done on a `copy`, never on a cursor another scan is using.
    """

    def __init__(self, lines: Sequence[str], position: int = 0, stop: Optional[int] = None) -> None:
        self.lines = lines
        self.stop = len(lines) if stop is None else min(stop, len(lines))
        self.position = min(max(position, 0), self.stop)

    def __repr__(self) -> str:
        return f"Cursor(position={self.position}, stop={self.stop})"

    def at_end(self) -> bool:
        return self.position >= self.stop

    def peek(self) -> Optional[str]:
        """Return the current line without consuming it, or ``None`` at the end."""
        if self.at_end():
            return None
        return self.lines[self.position]

    def peek_matches(self, pattern: re.Pattern) -> bool:
        line = self.peek()
        return line is not None and pattern.match(line) is not None

    def advance(self, n: int = 1) -> None:
        self.position = min(self.position + n, self.stop)

    def skip_while(self, pattern: re.Pattern) -> int:
        """Advance past consecutive lines matching ``pattern``; return how many."""
        skipped = 0
        while self.peek_matches(pattern):
            self.advance()
            skipped += 1
        return skipped

    def find(self, pattern: re.Pattern) -> Optional[int]:
        """Return the index of the next line matching ``pattern`` without moving."""
        for index in range(self.position, self.stop):
            if pattern.match(self.lines[index]):
                return index
        return None

    def copy(self) -> "Cursor":
        return Cursor(self.lines, self.position, self.stop)

    def bounded(self, stop: int) -> "Cursor":
        """Return a copy that treats ``stop`` as the end of input."""
        return Cursor(self.lines, self.position, stop)
