# display/__init__.py

from typing import Optional

from ..logger import Logger
from .definitions import StyleDefinitions
from .engine import RenderEngine
from .strategies import StyleStrategies

class Display:
    """
    Coordinates the terminal renderers for finished styled text.

    Component Hierarchy:
    StyleDefinitions (base) → RenderEngine / StyleStrategies
    """
    def __init__(self, definitions: Optional[StyleDefinitions] = None,
                 width: int = 80, logger: Optional[Logger] = None):
        """Initialize components in dependency order."""
        self.definitions = definitions or StyleDefinitions()
        self.engine = RenderEngine(definitions=self.definitions, width=width, logger=logger)
        self.strategies = StyleStrategies(self.definitions)

    def to_formatted_text(self, result):
        return self.strategies.to_formatted_text(result)

    def __getattr__(self, name):
        """Delegate unknown attribute access to the render engine."""
        engine = self.__dict__.get('engine')
        if engine is None:
            raise AttributeError(name)
        return getattr(engine, name)

__all__ = ['Display', 'RenderEngine', 'StyleDefinitions', 'StyleStrategies']
