# accumulator.py

from collections import abc
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple, Union

from .attributes import LINK, StyleSheet
from .logger import Logger
from .result import StyledText
from .spans import OpenStyleSpan, StyleRange
from .units import Attachment, ContentUnit, segment, OBJECT_REPLACEMENT_CHAR

Content = Union[str, bytes, Attachment]

class StyleRunAccumulator:
    """
    Fluent builder for styled text that tracks offsets for the caller.

    Styling is prospective: `set` affects content appended after the call and
    stays in effect until `unset`, `unset_all` or `finalize`. Positions are
    counted in content units (grapheme clusters and attachments), so a range
    boundary can never split a character.

    Example:
        text = (StyleRunAccumulator()
                .append("Hello ")
                .set(BOLD, True).append("world").unset(BOLD)
                .endl()
                .link("https://example.com", "docs")
                .finalize())
    """
    def __init__(self, defaults: Optional[Mapping[Hashable, Any]] = None,
                 logger: Optional[Logger] = None):
        """
        Args:
            defaults: Attributes opened at position 0, as if `set` had been
                called for each before any content.
            logger: Optional Logger; a disabled one is created when omitted.
        """
        self.logger = logger or Logger(__name__)
        self._buffer: List[ContentUnit] = []
        self._open_spans: Dict[Hashable, OpenStyleSpan] = {}
        self._finished: List[StyleRange] = []
        if defaults:
            self.set_many(defaults)

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def cursor(self) -> int:
        """Current end-of-buffer position."""
        return len(self._buffer)

    def is_open(self, key: Hashable) -> bool:
        return key in self._open_spans

    def append(self, content: Content) -> "StyleRunAccumulator":
        """Append text (split into grapheme clusters) or a single attachment."""
        if isinstance(content, Attachment):
            self._buffer.append(content)
        elif isinstance(content, (str, bytes, bytearray)):
            self._buffer.extend(segment(content))
        else:
            raise TypeError(
                f"Cannot append {type(content).__name__}; expected str, bytes or Attachment"
            )
        return self

    def attach(self, payload: Any, size: Tuple[float, float] = (0, 0),
               placeholder: str = OBJECT_REPLACEMENT_CHAR) -> "StyleRunAccumulator":
        """Append an inline object that occupies exactly one position."""
        return self.append(Attachment(payload=payload, size=size, placeholder=placeholder))

    def endl(self) -> "StyleRunAccumulator":
        return self.append("\n")

    def tab(self) -> "StyleRunAccumulator":
        return self.append("\t")

    def set(self, key: Hashable, value: Any) -> "StyleRunAccumulator":
        """
        Start applying `key` with `value` at the cursor.

        An open span of the same key is closed first, even if it is still
        empty, so overrides never overlap or leave a gap.
        """
        if key in self._open_spans:
            self.logger.debug(f"Overriding open attribute {key!r} at {self.cursor}")
            self._close(key)
        self._open_spans[key] = OpenStyleSpan(key=key, value=value, start=self.cursor)
        return self

    def set_many(self, attributes: Mapping[Hashable, Any]) -> "StyleRunAccumulator":
        for key, value in attributes.items():
            self.set(key, value)
        return self

    def apply(self, sheet: StyleSheet, name: str) -> "StyleRunAccumulator":
        """Set every attribute of a named preset."""
        return self.set_many(sheet.get(name))

    def unset(self, keys: Union[Hashable, Iterable[Hashable]]) -> "StyleRunAccumulator":
        """
        Stop applying one key or a group of keys; unknown keys are ignored.

        Lists, sets, views and iterators are groups. Any other hashable
        value, a tuple included, is a single key.
        """
        grouped = (isinstance(keys, (list, set, frozenset, abc.Iterator))
                   or not isinstance(keys, abc.Hashable))
        if not grouped:
            keys = [keys]
        for key in keys:
            if key in self._open_spans:
                self._close(key)
        return self

    def unset_all(self) -> "StyleRunAccumulator":
        for key in list(self._open_spans):
            self._close(key)
        return self

    def link(self, url: str, text: Optional[str] = None) -> "StyleRunAccumulator":
        """Append `text` (the url itself when omitted) as a link to `url`."""
        return self.set(LINK, url).append(url if text is None else text).unset(LINK)

    def styled(self, text: Content,
               attributes: Mapping[Hashable, Any]) -> "StyleRunAccumulator":
        """
        Append content with `attributes` applied to exactly that content.

        Attributes that were already open resume with their previous value
        afterwards.
        """
        previous = {k: self._open_spans[k].value for k in attributes if k in self._open_spans}
        self.set_many(attributes).append(text).unset(list(attributes))
        return self.set_many(previous)

    def finalize(self) -> StyledText:
        """
        Close every open span at the end of the buffer and snapshot the result.

        Safe to call more than once; later calls add no ranges.
        """
        if self._open_spans:
            self.logger.debug(f"Auto-closing {len(self._open_spans)} open attribute(s)")
        self.unset_all()
        self.logger.debug(
            f"Finalized {len(self._buffer)} units with {len(self._finished)} ranges"
        )
        return StyledText(units=tuple(self._buffer), ranges=tuple(self._finished))

    def _close(self, key: Hashable) -> None:
        span = self._open_spans.pop(key)
        self._finished.append(span.close(self.cursor))
