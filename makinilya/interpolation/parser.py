"""Parser for Makinilya text: literal prose with ``{{ dotted.path }}`` placeholders.

Grammar::

    text        := (literal | placeholder)*
    placeholder := "{{" ws* path ws* "}}"
    path        := identifier (ws* "." ws* identifier)*
    identifier  := [A-Za-z_][A-Za-z0-9_]*

Every ``{{`` opens a placeholder; there is no escape sequence. A lone ``}}``
outside a placeholder is ordinary literal text.
"""

import re

from makinilya.models.segment import PlaceholderSegment, Segment, TextSegment

OPEN_DELIMITER = "{{"
CLOSE_DELIMITER = "}}"
PATH_SEPARATOR = "."

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_WHITESPACE_RE = re.compile(r"\s*")


class TextParseError(ValueError):
    """Raised when a text unit contains a malformed placeholder.

    Attributes:
        line: 1-based line of the failure point.
        column: 1-based column of the failure point.
        message: What the parser expected at that point.
        title: Identity of the offending text unit, attached by callers.
    """

    def __init__(self, line: int, column: int, message: str) -> None:
        self.line = line
        self.column = column
        self.message = message
        self.title: str | None = None
        super().__init__(f"[line {line}:{column}] {message}")


def _location(text: str, pos: int) -> tuple[int, int]:
    """Convert a string offset into a 1-based (line, column) pair."""
    line = text.count("\n", 0, pos) + 1
    line_start = text.rfind("\n", 0, pos) + 1
    return line, pos - line_start + 1


def _describe(text: str, pos: int) -> str:
    if pos >= len(text):
        return "end of input"
    return repr(text[pos])


class TextParser:
    """Splits a text unit into literal and placeholder segments.

    The parser is total over well-formed input: joining the ``raw`` spelling
    of every returned segment reproduces the input exactly.
    """

    def parse(self, text: str) -> list[Segment]:
        """Parse a text unit.

        Args:
            text: The raw scene text.

        Returns:
            Ordered segments. Empty input gives an empty list.

        Raises:
            TextParseError: If a placeholder is malformed or unterminated.
        """
        segments: list[Segment] = []
        pos = 0

        while pos < len(text):
            opener = text.find(OPEN_DELIMITER, pos)
            if opener == -1:
                segments.append(TextSegment(text=text[pos:]))
                break
            if opener > pos:
                segments.append(TextSegment(text=text[pos:opener]))
            placeholder, pos = self._parse_placeholder(text, opener)
            segments.append(placeholder)

        return segments

    def _parse_placeholder(self, text: str, opener: int) -> tuple[PlaceholderSegment, int]:
        """Parse the placeholder starting at ``opener``.

        Returns:
            The segment and the offset just past its closing delimiter.
        """
        path: list[str] = []
        pos = opener + len(OPEN_DELIMITER)

        while True:
            pos = _WHITESPACE_RE.match(text, pos).end()
            match = _IDENTIFIER_RE.match(text, pos)
            if match is None:
                raise self._error(text, pos, opener, "expected identifier")
            path.append(match.group())

            pos = _WHITESPACE_RE.match(text, match.end()).end()
            if text.startswith(CLOSE_DELIMITER, pos):
                end = pos + len(CLOSE_DELIMITER)
                return PlaceholderSegment(path=tuple(path), raw=text[opener:end]), end
            if not text.startswith(PATH_SEPARATOR, pos):
                raise self._error(text, pos, opener, f"expected `{PATH_SEPARATOR}` or `{CLOSE_DELIMITER}`")
            pos += len(PATH_SEPARATOR)

    def _error(self, text: str, pos: int, opener: int, expected: str) -> TextParseError:
        line, column = _location(text, pos)
        open_line, open_column = _location(text, opener)
        return TextParseError(
            line,
            column,
            f"{expected}, found {_describe(text, pos)} "
            f"(placeholder opened at line {open_line}, column {open_column})",
        )


_default_parser = TextParser()


def parse(text: str) -> list[Segment]:
    """Parse ``text`` with a shared :class:`TextParser`."""
    return _default_parser.parse(text)
