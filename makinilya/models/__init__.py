"""Data models for Makinilya."""

from makinilya.models.context import Context, Data, stringify
from makinilya.models.segment import PlaceholderSegment, Segment, TextSegment
from makinilya.models.story import Content, Part, Story, walk, word_count

__all__ = [
    "Content",
    "Context",
    "Data",
    "Part",
    "PlaceholderSegment",
    "Segment",
    "Story",
    "TextSegment",
    "stringify",
    "walk",
    "word_count",
]
