"""
Closed paths: the last vertex is linked back to the first.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TypeVar

from sets.ordered import OrderedSequence

T = TypeVar("T", bound=Hashable)


class Cycle(OrderedSequence[T]):
    """A cycle visiting its vertices in sequence order, then wrapping around."""

    def __init__(self, vertices: Iterable[T] = ()) -> None:
        super().__init__(vertices)

    @classmethod
    def of(cls, *vertices: T) -> Cycle[T]:
        return cls(vertices)

    def successor(self, t: T) -> T:
        """The vertex after t, wrapping from the tail to the head."""
        elements = self.elements
        return elements[(self.index_of(t) + 1) % len(elements)]

    def predecessor(self, t: T) -> T:
        """The vertex before t, wrapping from the head to the tail."""
        elements = self.elements
        return elements[(self.index_of(t) - 1) % len(elements)]


__all__ = ["Cycle"]
