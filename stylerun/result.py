# result.py

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterator, List, Tuple

from .exceptions import InvariantError
from .spans import StyleRange
from .units import Attachment, ContentUnit, unit_text

@dataclass(frozen=True)
class StyledText:
    """
    The finished product of a StyleRunAccumulator.

    Holds the content units and every closed style range, both as tuples so
    the value cannot be mutated after it leaves the builder. Ranges keep the
    order they were emitted in, including zero-length ones. Results compare
    by value but are not hashable.
    """
    units: Tuple[ContentUnit, ...] = ()
    ranges: Tuple[StyleRange, ...] = ()

    # Values and payloads are opaque and may be unhashable
    __hash__ = None

    def __post_init__(self):
        size = len(self.units)
        for r in self.ranges:
            if not 0 <= r.start <= r.end <= size:
                raise InvariantError(
                    f"Range {r.key!r} [{r.start}, {r.end}) outside buffer of {size} units"
                )

    def __len__(self) -> int:
        return len(self.units)

    def __str__(self) -> str:
        return self.plain

    @property
    def plain(self) -> str:
        """Text content with each attachment shown as its placeholder."""
        return ''.join(unit_text(u) for u in self.units)

    @property
    def attachments(self) -> List[Tuple[int, Attachment]]:
        return [(i, u) for i, u in enumerate(self.units) if isinstance(u, Attachment)]

    def ranges_for(self, key: Hashable) -> List[StyleRange]:
        """Return the ranges of one attribute in emission order."""
        return [r for r in self.ranges if r.key == key]

    def attributes_at(self, position: int) -> Dict[Hashable, Any]:
        """Return the attributes applied to the unit at `position`."""
        return {r.key: r.value for r in self.ranges if r.covers(position)}

    def char_offsets(self) -> List[int]:
        """
        Map unit positions to code point offsets into `plain`.

        The list has one entry per unit plus a final entry for the end of
        the text, so a range [start, end) maps to
        [offsets[start], offsets[end]).
        """
        offsets = [0]
        for unit in self.units:
            offsets.append(offsets[-1] + len(unit_text(unit)))
        return offsets

    def segments(self) -> Iterator[Tuple[str, Dict[Hashable, Any]]]:
        """
        Yield maximal runs of units that share the same attributes.

        Yields:
            (text, attributes) pairs covering the whole content in order.
        """
        if not self.units:
            return
        bounds = {0, len(self.units)}
        for r in self.ranges:
            if not r.is_empty:
                bounds.update((r.start, r.end))
        edges = sorted(bounds)
        text, attrs = '', None
        for start, end in zip(edges, edges[1:]):
            current = self.attributes_at(start)
            chunk = ''.join(unit_text(u) for u in self.units[start:end])
            if attrs is not None and current != attrs:
                yield text, attrs
                text = ''
            text, attrs = text + chunk, current
        yield text, attrs
