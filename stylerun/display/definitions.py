# display/definitions.py

from typing import Any, Callable, Dict, Hashable, Optional

from .. import attributes as attr

Handler = Callable[[Any], Dict[str, Any]]

def _flag(name: str) -> Handler:
    return lambda value: {name: bool(value)}

def _passthrough(name: str) -> Handler:
    return lambda value: {name: value}

class StyleDefinitions:
    """
    Maps attribute keys to terminal style properties.

    Each handler turns an attribute value into a dict of backend-neutral
    properties (bold, italic, underline, strike, color, bgcolor, link).
    Colour values are resolved later by the backend, first against the
    named colour table and otherwise passed through unchanged.
    """
    def __init__(
        self,
        colors: Optional[Dict[str, Dict[str, str]]] = None,
        handlers: Optional[Dict[Hashable, Handler]] = None
    ):
        """Initialize definitions with optional custom colours and handlers."""
        self._default_colors = {
            'GREEN': {'ansi': '\033[38;5;47m', 'rich': 'green3', 'hex': '#00ff5f'},
            'PINK': {'ansi': '\033[38;5;212m', 'rich': 'pink1', 'hex': '#ff87d7'},
            'BLUE': {'ansi': '\033[38;5;75m', 'rich': 'blue1', 'hex': '#5fafff'},
            'GRAY': {'ansi': '\033[38;5;245m', 'rich': 'gray50', 'hex': '#8a8a8a'},
            'YELLOW': {'ansi': '\033[38;5;227m', 'rich': 'yellow1', 'hex': '#ffff5f'},
            'WHITE': {'ansi': '\033[38;5;255m', 'rich': 'white', 'hex': '#eeeeee'}
        }
        self._default_handlers = {
            attr.BOLD: _flag('bold'),
            attr.ITALIC: _flag('italic'),
            attr.UNDERLINE: _flag('underline'),
            attr.STRIKE: _flag('strike'),
            attr.COLOR: _passthrough('color'),
            attr.BACKGROUND: _passthrough('bgcolor'),
            attr.LINK: _passthrough('link'),
        }

        self.colors = colors if colors is not None else self._default_colors.copy()
        self.handlers = self._default_handlers.copy()
        if handlers:
            self.handlers.update(handlers)

    def get_color(self, name: str) -> Dict[str, str]:
        """Get a color configuration by name."""
        return self.colors.get(name, {'ansi': '', 'rich': '', 'hex': ''})

    def resolve_color(self, value: Any, backend: str) -> Any:
        """Return the backend's spelling of a named colour, or `value` as given."""
        if isinstance(value, str) and value in self.colors:
            return self.colors[value].get(backend) or value
        return value

    def properties(self, attributes: Dict[Hashable, Any]) -> Dict[str, Any]:
        """
        Merge the properties of every attribute that has a handler.

        Returns:
            Properties dict; keys without a handler contribute nothing.
        """
        props: Dict[str, Any] = {}
        for key, value in attributes.items():
            handler = self.handlers.get(key)
            if handler:
                props.update(handler(value))
        return props

    def add_handler(self, key: Hashable, handler: Handler) -> None:
        """Register a handler for a new attribute key."""
        if key in self.handlers:
            raise ValueError(f"Handler for attribute '{key}' already exists")
        self.handlers[key] = handler
