# display/strategies.py

from typing import Any, Dict, List

from prompt_toolkit.formatted_text import FormattedText

from ..result import StyledText
from .definitions import StyleDefinitions

class StyleStrategies:
    """
    Alternative output formats for prompt_toolkit based interfaces.
    """
    def __init__(self, definitions: StyleDefinitions):
        self.definitions = definitions

    def style_string(self, attributes: Dict[Any, Any]) -> str:
        """
        Build a prompt_toolkit style string such as "bold fg:#ff87d7".

        Links have no prompt_toolkit equivalent and are shown underlined.
        """
        props = self.definitions.properties(attributes)
        parts: List[str] = []
        for flag in ('bold', 'italic', 'underline', 'strike'):
            if props.get(flag):
                parts.append(flag)
        if props.get('link') and 'underline' not in parts:
            parts.append('underline')
        if props.get('color'):
            parts.append(f"fg:{self.definitions.resolve_color(props['color'], 'hex')}")
        if props.get('bgcolor'):
            parts.append(f"bg:{self.definitions.resolve_color(props['bgcolor'], 'hex')}")
        return ' '.join(parts)

    def to_formatted_text(self, result: StyledText) -> FormattedText:
        """Convert a result into (style, text) fragments."""
        return FormattedText([
            (self.style_string(attrs), text)
            for text, attrs in result.segments()
        ])
