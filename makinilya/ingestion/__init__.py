"""Project ingestion: draft and context loading."""

from makinilya.ingestion.context_loader import ContextError, load_context, parse_context
from makinilya.ingestion.story_loader import StoryLoader, load_story

__all__ = ["ContextError", "StoryLoader", "load_context", "load_story", "parse_context"]
