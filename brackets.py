"""
Bracket Depth Log

Append-only record of every bracket seen during tokenization, as
(position, depth, bracket) entries. The depth after a '(' is one more than
before it, after a ')' one less.
"""

from dataclasses import dataclass
from typing import Iterator, List

from tokens import Bracket, LEFT_PAREN, RIGHT_PAREN


@dataclass(frozen=True)
class BracketDepth:
    position: int
    depth: int
    bracket: Bracket


class BracketDepthLog:
    """Tracks nesting depth and recovers where an unclosed '(' was opened."""

    def __init__(self):
        self.entries: List[BracketDepth] = []

    def open(self, position: int, bracket: Bracket = LEFT_PAREN):
        self.entries.append(BracketDepth(position, self.depth() + 1, bracket))

    def close(self, position: int, bracket: Bracket = RIGHT_PAREN):
        self.entries.append(BracketDepth(position, self.depth() - 1, bracket))

    def depth(self) -> int:
        """Depth of the most recent entry, 0 when empty."""
        if not self.entries:
            return 0
        return self.entries[-1].depth

    def find_unmatched_open_position(self) -> int:
        """
        Position reported for an unclosed '(' at the end of input.

        Walks the log backwards and stops at the first entry, opening or
        closing, whose depth equals the final depth. For "((5)" that is the
        ')' at 3, the point after which the residual depth never changed.

        Raises:
            ValueError: if every bracket is matched
        """
        final_depth = self.depth()
        if final_depth <= 0:
            raise ValueError("No unmatched '(' in the bracket log")

        for entry in reversed(self.entries):
            if entry.depth == final_depth:
                return entry.position

        # Unreachable: the last entry always carries the final depth
        raise ValueError("Bracket log is inconsistent")

    def clear(self):
        self.entries = []

    def __len__(self):
        return len(self.entries)

    def __iter__(self) -> Iterator[BracketDepth]:
        return iter(self.entries)
