# units.py

from dataclasses import dataclass
from typing import Any, List, Tuple, Union

import regex

# One extended grapheme cluster per match
GRAPHEME = regex.compile(r'\X')
LONE_SURROGATE = regex.compile('[\ud800-\udfff]')

REPLACEMENT_CHAR = '\ufffd'
OBJECT_REPLACEMENT_CHAR = '\ufffc'

@dataclass(frozen=True)
class TextUnit:
    """One user-perceived character: a single extended grapheme cluster."""
    text: str

    def __str__(self) -> str:
        return self.text

@dataclass(frozen=True)
class Attachment:
    """
    An inline object (typically an image) occupying one buffer position.

    The payload is never inspected; the size is the intended display size
    as (width, height) and is only carried through to renderers.
    """
    payload: Any
    size: Tuple[float, float] = (0, 0)
    placeholder: str = OBJECT_REPLACEMENT_CHAR

    def __str__(self) -> str:
        return self.placeholder

ContentUnit = Union[TextUnit, Attachment]

def clean_text(content: Union[str, bytes]) -> str:
    """Decode bytes as UTF-8 and replace anything that is not valid text with U+FFFD."""
    if isinstance(content, (bytes, bytearray)):
        return bytes(content).decode('utf-8', errors='replace')
    return LONE_SURROGATE.sub(REPLACEMENT_CHAR, content)

def segment(content: Union[str, bytes]) -> List[TextUnit]:
    """
    Split text into grapheme-cluster units.

    Args:
        content: Text to split. Bytes are decoded as UTF-8 first.

    Returns:
        One TextUnit per extended grapheme cluster, empty for empty input.
    """
    text = clean_text(content)
    if not text:
        return []
    return [TextUnit(g) for g in GRAPHEME.findall(text)]

def unit_text(unit: ContentUnit) -> str:
    """Return the characters a text renderer shows for a unit."""
    return unit.text if isinstance(unit, TextUnit) else unit.placeholder
