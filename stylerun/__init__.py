# __init__.py

from .logger import Logger
from .exceptions import StyleRunError, InvariantError
from .units import TextUnit, Attachment, segment
from .spans import OpenStyleSpan, StyleRange
from .result import StyledText
from .attributes import StyleSheet, Shadow, ParagraphStyle
from .accumulator import StyleRunAccumulator
from .display import Display

__all__ = [
    "StyleRunAccumulator",
    "StyledText",
    "StyleRange",
    "OpenStyleSpan",
    "TextUnit",
    "Attachment",
    "segment",
    "StyleSheet",
    "Shadow",
    "ParagraphStyle",
    "Display",
    "Logger",
    "StyleRunError",
    "InvariantError",
]
