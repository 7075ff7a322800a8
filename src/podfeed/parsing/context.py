"""Open-element tracking for the streaming feed parser."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel

from podfeed.models import Episode, Podcast
from podfeed.parsing.fields import FieldTable


@dataclass
class TagContext:
    """One open element.

    ``target`` is the model that children of this element populate, and
    ``fields`` the dispatch table applied to their text.
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    target: BaseModel | None = None
    fields: FieldTable | None = None


class TagContextStack:
    """Stack of currently open elements, innermost last."""

    def __init__(self) -> None:
        self._contexts: list[TagContext] = []

    def __len__(self) -> int:
        return len(self._contexts)

    @property
    def depth(self) -> int:
        return len(self._contexts)

    @property
    def current(self) -> TagContext | None:
        return self._contexts[-1] if self._contexts else None

    @property
    def parent(self) -> TagContext | None:
        return self._contexts[-2] if len(self._contexts) > 1 else None

    def push(self, name: str, attributes: dict[str, str] | None = None) -> TagContext:
        context = TagContext(name=name, attributes=dict(attributes or {}))
        self._contexts.append(context)
        return context

    def pop(self) -> TagContext | None:
        """Close the current element. Popping an empty stack does nothing."""
        if not self._contexts:
            return None
        return self._contexts.pop()

    def ancestors(self) -> Iterator[TagContext]:
        """Iterate from the parent of the current element up to the root."""
        return reversed(self._contexts[:-1])


@dataclass
class ParseState:
    """Everything one parse call mutates, threaded through the event handlers."""

    podcast: Podcast = field(default_factory=Podcast)
    stack: TagContextStack = field(default_factory=TagContextStack)
    episode: Episode | None = None
