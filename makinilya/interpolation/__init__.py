"""Text parsing and story interpolation."""

from makinilya.interpolation.interpolator import StoryInterpolator, check, interpolate
from makinilya.interpolation.parser import TextParseError, TextParser, parse

__all__ = [
    "StoryInterpolator",
    "TextParseError",
    "TextParser",
    "check",
    "interpolate",
    "parse",
]
