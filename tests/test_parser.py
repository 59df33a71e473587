"""Tests for the placeholder text parser."""

import pytest

from makinilya.interpolation.parser import TextParseError, TextParser, parse
from makinilya.models.segment import PlaceholderSegment, TextSegment


@pytest.fixture
def parser() -> TextParser:
    return TextParser()


def _reconstruct(segments: list) -> str:
    return "".join(segment.raw for segment in segments)


class TestTextParserAccepts:
    def test_empty_input(self, parser: TextParser) -> None:
        assert parser.parse("") == []

    def test_pure_literal(self, parser: TextParser) -> None:
        text = "It was a dark night.\nThe rain } fell }} hard."
        segments = parser.parse(text)
        assert segments == [TextSegment(text=text)]

    def test_single_placeholder(self, parser: TextParser) -> None:
        segments = parser.parse("{{ name }}")
        assert segments == [PlaceholderSegment(path=("name",), raw="{{ name }}")]

    def test_dotted_path(self, parser: TextParser) -> None:
        segments = parser.parse("Hi, {{ names.mc }}.")
        assert len(segments) == 3
        assert segments[0] == TextSegment(text="Hi, ")
        assert isinstance(segments[1], PlaceholderSegment)
        assert segments[1].path == ("names", "mc")
        assert segments[1].dotted == "names.mc"
        assert segments[2] == TextSegment(text=".")

    @pytest.mark.parametrize(
        "text",
        ["{{ name }}", "{{ name32 }}", "{{ name_32 }}", "{{ name_32.long }}", "{{_private}}"],
    )
    def test_valid_identifiers(self, parser: TextParser, text: str) -> None:
        segments = parser.parse(text)
        assert len(segments) == 1
        assert isinstance(segments[0], PlaceholderSegment)

    def test_whitespace_around_dots_is_ignored(self, parser: TextParser) -> None:
        segments = parser.parse("{{\n  names . author\t.full  }}")
        assert segments[0].path == ("names", "author", "full")
        assert segments[0].dotted == "names.author.full"

    def test_no_whitespace_needed(self, parser: TextParser) -> None:
        segments = parser.parse("{{a.b}}")
        assert segments[0].path == ("a", "b")

    def test_adjacent_placeholders(self, parser: TextParser) -> None:
        segments = parser.parse("{{ a }}{{ b }}{{ c.d }}")
        assert [s.dotted for s in segments] == ["a", "b", "c.d"]
        assert all(isinstance(s, PlaceholderSegment) for s in segments)

    def test_multiline_literals_preserved(self, parser: TextParser) -> None:
        text = "Line one\n\nLine {{ n }} two\r\nthree\n"
        segments = parser.parse(text)
        assert segments[0] == TextSegment(text="Line one\n\nLine ")
        assert segments[2] == TextSegment(text=" two\r\nthree\n")

    def test_module_level_parse(self) -> None:
        assert parse("x {{ y }}")[1].dotted == "y"


class TestSegmentConcatenation:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain",
            "Hello. My name is {{ name }}.",
            "{{ a }}{{b.c}}",
            "Dear {{  reader . name }},\n\nyours, {{ names.author.full }}\n",
            "closing }} braces are literal",
        ],
    )
    def test_raw_spellings_rebuild_input(self, parser: TextParser, text: str) -> None:
        assert _reconstruct(parser.parse(text)) == text

    def test_deterministic(self, parser: TextParser) -> None:
        text = "A {{ b }} C {{ d.e }}"
        assert parser.parse(text) == parser.parse(text)


class TestTextParserRejects:
    @pytest.mark.parametrize(
        "text",
        [
            "{{ }}",
            "{{ 32 }}",
            "{{ name..long }}",
            "{{ name_32..long }}",
            "{{ .name }}",
            "{{ name. }}",
            "{{ na me }}",
            "{{ name-x }}",
            "{{ name",
            "{{ name }",
            "Hello {{",
            "{{{ name }}}",
        ],
    )
    def test_malformed_placeholder(self, parser: TextParser, text: str) -> None:
        with pytest.raises(TextParseError) as excinfo:
            parser.parse(text)
        assert excinfo.value.line >= 1
        assert excinfo.value.column >= 1
        assert excinfo.value.message

    def test_error_location_empty_body(self, parser: TextParser) -> None:
        with pytest.raises(TextParseError) as excinfo:
            parser.parse("{{ }}")
        assert (excinfo.value.line, excinfo.value.column) == (1, 4)
        assert "expected identifier" in excinfo.value.message

    def test_error_location_on_later_line(self, parser: TextParser) -> None:
        text = "First line.\nSecond {{ ok }} line.\nThird {{ 9lives }}."
        with pytest.raises(TextParseError) as excinfo:
            parser.parse(text)
        assert excinfo.value.line == 3
        assert excinfo.value.column == 10
        assert "line 3, column 7" in excinfo.value.message

    def test_unterminated_reports_end_of_input(self, parser: TextParser) -> None:
        with pytest.raises(TextParseError) as excinfo:
            parser.parse("Hi {{ name")
        assert (excinfo.value.line, excinfo.value.column) == (1, 11)
        assert "end of input" in excinfo.value.message

    def test_error_string_format(self, parser: TextParser) -> None:
        with pytest.raises(TextParseError) as excinfo:
            parser.parse("{{ 32 }}")
        assert str(excinfo.value).startswith("[line 1:4] expected identifier")
        assert excinfo.value.title is None

    def test_error_is_value_error(self, parser: TextParser) -> None:
        with pytest.raises(ValueError):
            parser.parse("{{ }}")
