"""Story interpolation: resolve placeholders across a whole story tree."""

import logging

from makinilya.interpolation.parser import TextParseError, TextParser
from makinilya.models.context import Context, stringify
from makinilya.models.segment import PlaceholderSegment, Segment
from makinilya.models.story import Content, Part, Story

logger = logging.getLogger(__name__)


class StoryInterpolator:
    """Walks a story tree and resolves or collects its placeholders.

    Two modes share the same depth-first, document-order walk:

    1. Build (:meth:`interpolate`): every placeholder is replaced by its
       stringified context value. A missing path resolves to an empty
       string; ``check`` is the tool for finding those.
    2. Check (:meth:`check`): no context is needed; the full dotted path of
       every placeholder is collected, duplicates included.

    Both modes abort on the first malformed text unit. The
    :class:`TextParseError` propagates with ``title`` set to the offending
    content node's title, and no partial result is returned.

    Args:
        parser: Parser used for each content node. Defaults to a new
                :class:`TextParser`.
    """

    def __init__(self, parser: TextParser | None = None) -> None:
        self._parser = parser or TextParser()

    def interpolate(self, node: Story, context: Context) -> Story:
        """Build a new tree with every content source resolved.

        Args:
            node: Root of the tree to interpolate. It is not modified.
            context: Variables to resolve placeholders against.

        Returns:
            A tree of identical shape, titles and order.

        Raises:
            TextParseError: If any content node fails to parse.
        """
        if isinstance(node, Content):
            segments = self._parse(node)
            resolved = "".join(self._resolve(segment, context, node.title) for segment in segments)
            return Content(title=node.title, source=resolved)

        return Part(
            title=node.title,
            children=[self.interpolate(child, context) for child in node.children],
        )

    def check(self, node: Story) -> list[str]:
        """List the dotted path of every placeholder in document order.

        Raises:
            TextParseError: If any content node fails to parse.
        """
        if isinstance(node, Content):
            return [
                segment.dotted
                for segment in self._parse(node)
                if isinstance(segment, PlaceholderSegment)
            ]

        identifiers: list[str] = []
        for child in node.children:
            identifiers.extend(self.check(child))
        return identifiers

    def _parse(self, content: Content) -> list[Segment]:
        logger.debug("Parsing content '%s' (%d chars)", content.title, len(content.source))
        try:
            return self._parser.parse(content.source)
        except TextParseError as exc:
            if exc.title is None:
                exc.title = content.title
            raise

    def _resolve(self, segment: Segment, context: Context, title: str) -> str:
        if not isinstance(segment, PlaceholderSegment):
            return segment.text

        value = context.get(segment.path)
        if value is None:
            logger.debug("Unresolved placeholder '%s' in '%s'", segment.dotted, title)
            return ""
        return stringify(value)


_default_interpolator = StoryInterpolator()


def interpolate(node: Story, context: Context) -> Story:
    """Interpolate ``node`` with a shared :class:`StoryInterpolator`."""
    return _default_interpolator.interpolate(node, context)


def check(node: Story) -> list[str]:
    """Collect the placeholders of ``node`` with a shared :class:`StoryInterpolator`."""
    return _default_interpolator.check(node)
