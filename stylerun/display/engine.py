# display/engine.py

from io import StringIO
from typing import Any, Dict, Optional

from rich.color import ColorParseError
from rich.console import Console
from rich.style import Style
from rich.text import Text

from ..logger import Logger
from ..result import StyledText
from .definitions import StyleDefinitions

class RenderEngine:
    """
    Turns a StyledText into Rich renderables and ANSI output.
    """
    def __init__(self, definitions: Optional[StyleDefinitions] = None,
                 width: int = 80, logger: Optional[Logger] = None):
        """Initialize with style definitions and an output width."""
        self.definitions = definitions or StyleDefinitions()
        self.width = width
        self.logger = logger or Logger(__name__)

        # Rich console writing to memory; output is collected with capture()
        self._rich_console = Console(
            force_terminal=True,
            color_system="truecolor",
            file=StringIO(),
            highlight=False,
            width=width
        )

    def get_style(self, attributes: Dict[Any, Any]) -> Optional[Style]:
        """
        Return the Rich style for a set of attributes.

        Returns None when no attribute has a handler or a colour cannot be
        parsed.
        """
        props = self.definitions.properties(attributes)
        if not props:
            return None
        for name in ('color', 'bgcolor'):
            if name in props:
                props[name] = self.definitions.resolve_color(props[name], 'rich')
        try:
            return Style(**props)
        except ColorParseError as e:
            self.logger.debug(f"Unusable colour in {attributes!r}: {e}")
            return None

    def to_text(self, result: StyledText) -> Text:
        """
        Build a Rich Text whose spans follow the result's style ranges.

        Unit positions are converted to code point offsets, so each span
        starts and ends on a grapheme boundary.
        """
        text = Text(result.plain, end="")
        offsets = result.char_offsets()
        for r in result.ranges:
            if r.is_empty:
                continue
            style = self.get_style({r.key: r.value})
            if style is None:
                self.logger.debug(f"No terminal style for attribute {r.key!r}, skipped")
                continue
            text.stylize(style, offsets[r.start], offsets[r.end])
        return text

    def render_ansi(self, result: StyledText) -> str:
        """Render to a string of ANSI escape sequences."""
        with self._rich_console.capture() as capture:
            self._rich_console.print(self.to_text(result), end="", soft_wrap=True)
        return capture.get()

    def print(self, result: StyledText, console: Optional[Console] = None) -> None:
        """Print the result to `console`, or to stdout."""
        (console or Console(highlight=False)).print(self.to_text(result))
