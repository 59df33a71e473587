"""Segments produced by the text parser."""

from pydantic import BaseModel, ConfigDict, Field


class TextSegment(BaseModel):
    """Literal text copied through unchanged, newlines included."""

    model_config = ConfigDict(frozen=True)

    text: str

    @property
    def raw(self) -> str:
        return self.text


class PlaceholderSegment(BaseModel):
    """A ``{{ dotted.path }}`` reference.

    ``path`` holds the identifier components in order; ``raw`` is the
    placeholder exactly as written, delimiters and whitespace included.
    """

    model_config = ConfigDict(frozen=True)

    path: tuple[str, ...] = Field(min_length=1)
    raw: str

    @property
    def dotted(self) -> str:
        """The path rendered with single dots and no whitespace."""
        return ".".join(self.path)


Segment = TextSegment | PlaceholderSegment
