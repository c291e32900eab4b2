"""
Open paths: graphs whose vertices form an ordered sequence.

Each vertex is linked to its predecessor and successor; the two endpoints
have a single neighbour.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING, TypeVar

from sets.ordered import OrderedSequence
from utils.preconditions import check_argument

if TYPE_CHECKING:
    from graphs.node import HierarchyNode

T = TypeVar("T", bound=Hashable)


class Path(OrderedSequence[T]):
    """A path visiting its vertices in sequence order."""

    def __init__(self, vertices: Iterable[T] = ()) -> None:
        super().__init__(vertices)

    @classmethod
    def of(cls, *vertices: T) -> Path[T]:
        return cls(vertices)

    @staticmethod
    def from_string(s: str) -> Path[HierarchyNode[str]]:
        """
        A chain of character nodes, each the child of the previous one.

        Example:
            >>> [n.depth for n in Path.from_string("abc")]
            [0, 1, 2]
        """
        from graphs.node import HierarchyNode

        nodes: list[HierarchyNode[str]] = []
        for char in s:
            nodes.append(HierarchyNode(char, nodes[-1] if nodes else None))
        return Path(nodes)

    def sub_path(self, v1: T, v2: T) -> Path[T]:
        """
        The vertices from v1 to v2, both included, walking in that direction.

        Raises:
            InvalidArgument: If v1 or v2 is not on the path.
        """
        check_argument(
            v1 in self.positions and v2 in self.positions,
            f"Both {v1!r} and {v2!r} must lie on the path",
        )
        i, j = self.positions[v1], self.positions[v2]
        if i <= j:
            return Path(self.elements[i : j + 1])
        return Path(reversed(self.elements[j : i + 1]))

    def find_path_between(self, v1: T, v2: T) -> Path[T]:
        """The only path from v1 to v2 along this path."""
        return self.sub_path(v1, v2)

    def reverse(self) -> Path[T]:
        """The same vertices walked from the end to the beginning."""
        return Path(reversed(self.elements))

    def add(self, other: Iterable[T]) -> Path[T]:
        """
        This path followed by other.

        Raises:
            InvalidArgument: If the two paths share a vertex.
        """
        return Path(self.elements + tuple(other))

    def __add__(self, other: Iterable[T]) -> Path[T]:
        """Alias for `add`: `p + q` means p then q."""
        return self.add(other)


__all__ = ["Path"]
