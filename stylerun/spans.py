# spans.py

from dataclasses import dataclass
from typing import Any, Hashable

@dataclass
class OpenStyleSpan:
    """An attribute that has been set and not yet closed."""
    key: Hashable
    value: Any
    start: int

    def close(self, end: int) -> "StyleRange":
        """Close the span at `end` and return the finished range."""
        return StyleRange(key=self.key, value=self.value, start=self.start, end=end)

@dataclass(frozen=True)
class StyleRange:
    """
    A finished attribute interval in unit coordinates.

    `end` is exclusive. A range with start == end is legal and is kept.
    """
    key: Hashable
    value: Any
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def covers(self, position: int) -> bool:
        return self.start <= position < self.end
