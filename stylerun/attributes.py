# attributes.py

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Hashable, Mapping, Optional, Tuple

# Common attribute keys. The accumulator accepts any hashable key; these are
# the ones the display layer knows how to render.
BOLD = 'bold'
ITALIC = 'italic'
UNDERLINE = 'underline'
STRIKE = 'strike'
COLOR = 'color'
BACKGROUND = 'bgcolor'
FONT = 'font'
LINK = 'link'
TOOLTIP = 'tooltip'
SHADOW = 'shadow'
PARAGRAPH = 'paragraph'

@dataclass(frozen=True)
class Shadow:
    """Value for the SHADOW attribute."""
    color: Optional[str] = None
    offset: Tuple[float, float] = (0, -1)
    blur: float = 0

@dataclass(frozen=True)
class ParagraphStyle:
    """Value for the PARAGRAPH attribute."""
    alignment: str = 'left'
    line_spacing: float = 0
    indent: float = 0

class StyleSheet:
    """
    Read-only collection of named attribute presets.

    Example:
        sheet = StyleSheet({'title': {BOLD: True, COLOR: 'PINK'}})
        builder.apply(sheet, 'title').append("Heading")
    """
    def __init__(self, presets: Optional[Mapping[str, Mapping[Hashable, Any]]] = None):
        self._presets = MappingProxyType({
            name: MappingProxyType(dict(attrs))
            for name, attrs in (presets or {}).items()
        })

    def __contains__(self, name: str) -> bool:
        return name in self._presets

    def __iter__(self):
        return iter(self._presets)

    def get(self, name: str) -> Mapping[Hashable, Any]:
        """Return a preset by name, raising KeyError for unknown names."""
        if name not in self._presets:
            raise KeyError(f"Style preset '{name}' is not defined")
        return self._presets[name]

    def extend(self, presets: Mapping[str, Mapping[Hashable, Any]]) -> "StyleSheet":
        """Return a new sheet with `presets` added or replacing existing names."""
        merged: Dict[str, Mapping[Hashable, Any]] = dict(self._presets)
        merged.update(presets)
        return StyleSheet(merged)
