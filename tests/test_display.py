# test_display.py

import pytest
from io import StringIO
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rich.console import Console
from rich.style import Style
from rich.text import Span

from stylerun import StyleRunAccumulator, Display, Shadow
from stylerun.attributes import BOLD, COLOR, ITALIC, LINK, SHADOW, BACKGROUND
from stylerun.display import StyleDefinitions


class TestRenderEngine:
    """Rich rendering of finished styled text."""

    def setup_method(self):
        self.logger = Mock()
        self.display = Display(logger=self.logger)

    def test_spans_follow_ranges(self):
        result = (StyleRunAccumulator().append("AB").set(BOLD, True).append("CD")
                  .unset(BOLD).append("E").finalize())
        text = self.display.to_text(result)
        assert text.plain == "ABCDE"
        assert text.spans == [Span(2, 4, Style(bold=True))]

    def test_spans_use_code_point_offsets(self):
        result = (StyleRunAccumulator().append("\U0001F44D\U0001F3FD")
                  .set(ITALIC, True).append("x").finalize())
        text = self.display.to_text(result)
        assert text.spans == [Span(2, 3, Style(italic=True))]

    def test_named_colour_is_resolved(self):
        result = StyleRunAccumulator().set(COLOR, "PINK").append("hi").finalize()
        (span,) = self.display.to_text(result).spans
        assert span.style == Style(color="pink1")

    def test_unnamed_colour_passes_through(self):
        result = StyleRunAccumulator().set(BACKGROUND, "#102030").append("hi").finalize()
        (span,) = self.display.to_text(result).spans
        assert span.style == Style(bgcolor="#102030")

    def test_link_style(self):
        result = StyleRunAccumulator().link("https://example.com", "site").finalize()
        (span,) = self.display.to_text(result).spans
        assert span.style.link == "https://example.com"

    def test_unknown_attribute_is_skipped_and_logged(self):
        result = StyleRunAccumulator().set(SHADOW, Shadow(color="GRAY")).append("x").finalize()
        assert self.display.to_text(result).spans == []
        assert self.logger.debug.called

    def test_empty_ranges_are_not_rendered(self):
        result = StyleRunAccumulator().append("a").set(BOLD, True).unset(BOLD).finalize()
        assert self.display.to_text(result).spans == []

    def test_unparseable_colour_is_skipped_and_logged(self):
        result = (StyleRunAccumulator().set(COLOR, "notacolor").set(BOLD, True)
                  .append("x").finalize())
        text = self.display.to_text(result)
        assert text.spans == [Span(0, 1, Style(bold=True))]
        assert any("notacolor" in c.args[0] for c in self.logger.debug.call_args_list)
        assert "x" in self.display.render_ansi(result)

    def test_render_ansi(self):
        result = StyleRunAccumulator().append("plain ").set(BOLD, True).append("bold").finalize()
        output = self.display.render_ansi(result)
        assert "\x1b[1m" in output
        assert "bold" in output

    def test_print_to_console(self):
        buffer = StringIO()
        console = Console(file=buffer, force_terminal=False, width=40)
        result = StyleRunAccumulator().append("hello").finalize()
        self.display.print(result, console=console)
        assert buffer.getvalue() == "hello\n"


class TestStyleStrategies:
    """prompt_toolkit fragments."""

    def setup_method(self):
        self.display = Display()

    def test_formatted_text_fragments(self):
        result = (StyleRunAccumulator().append("a")
                  .set(BOLD, True).set(COLOR, "PINK").append("b")
                  .unset(BOLD).append("c").finalize())
        assert self.display.to_formatted_text(result) == [
            ("", "a"),
            ("bold fg:#ff87d7", "b"),
            ("fg:#ff87d7", "c"),
        ]

    def test_link_is_underlined(self):
        result = StyleRunAccumulator().link("https://x.y", "x").finalize()
        assert self.display.to_formatted_text(result) == [("underline", "x")]


class TestStyleDefinitions:

    def test_custom_handler(self):
        definitions = StyleDefinitions()
        definitions.add_handler(SHADOW, lambda value: {'italic': True})
        assert definitions.properties({SHADOW: Shadow()}) == {'italic': True}

    def test_duplicate_handler_rejected(self):
        with pytest.raises(ValueError):
            StyleDefinitions().add_handler(BOLD, lambda value: {})

    def test_get_color(self):
        definitions = StyleDefinitions()
        assert definitions.get_color('GREEN')['rich'] == 'green3'
        assert definitions.get_color('NOPE') == {'ansi': '', 'rich': '', 'hex': ''}

    def test_link_properties(self):
        assert StyleDefinitions().properties({LINK: "u"}) == {'link': "u"}
