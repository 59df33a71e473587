"""Story tree data models.

A story is a tree of parts (chapters, acts) whose leaves are content nodes
(scenes). Each part owns its children outright and their order is the
manuscript order.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class Content(BaseModel):
    """A scene: one raw text unit, titled after its file."""

    kind: Literal["content"] = "content"
    title: str
    source: str = ""


class Part(BaseModel):
    """An organizational node titled after its directory.

    ``children`` may mix parts and content; an empty part is legal and
    contributes nothing to the manuscript.
    """

    kind: Literal["part"] = "part"
    title: str
    children: list[Story] = Field(default_factory=list)

    def push(self, node: Story) -> None:
        """Append a child node."""
        self.children.append(node)

    def parts(self) -> list[Part]:
        return [child for child in self.children if isinstance(child, Part)]

    def contents(self) -> list[Content]:
        return [child for child in self.children if isinstance(child, Content)]


Story = Annotated[Union[Part, Content], Field(discriminator="kind")]

Part.model_rebuild()


def walk(node: Story) -> Iterator[Story]:
    """Yield ``node`` and all of its descendants depth-first, in document order."""
    yield node
    if isinstance(node, Part):
        for child in node.children:
            yield from walk(child)


def word_count(node: Story) -> int:
    """Count whitespace-separated words across every content node."""
    return sum(
        len(item.source.split()) for item in walk(node) if isinstance(item, Content)
    )
