"""
Graph edges.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TypeVar

from errors import NotFound
from sets.ordered import OrderedSequence

T = TypeVar("T", bound=Hashable)


class Link(OrderedSequence[T]):
    """
    An edge tying two distinct elements together.

    The endpoints are stored in the order given, but as a set a link is
    unordered: Link(a, b) == Link(b, a).
    """

    def __init__(self, first: T, second: T) -> None:
        super().__init__((first, second))

    @classmethod
    def of(cls, pair: tuple[T, T]) -> Link[T]:
        first, second = pair
        return cls(first, second)

    def next(self, start: T) -> T:
        """
        The endpoint start is tied to.

        Raises:
            NotFound: If start is not an endpoint of the link.
        """
        first, second = self.elements
        if start == first:
            return second
        if start == second:
            return first
        raise NotFound(f"{start!r} is not an endpoint of {self!r}")


__all__ = ["Link"]
