"""
Hierarchical nodes for trees.

A HierarchyNode knows its parent, its depth and the path from itself up to
the root of its hierarchy; parents do not reference their children. Nodes
are built top-down: a parent exists before any of its children.

The only mutable state is a parent's children counter and lock flag, both
updated through `_register_child` when a child is constructed. A locked node
accepts no further children. Construction of siblings from several threads
needs external synchronisation.

Example:
        1
       / \\
      2   3
     / \\   \\
    4   5   6

    >>> root = HierarchyNode(1)
    >>> two, three = root.create_child(2), root.create_child(3)
    >>> four = two.create_child(4)
    >>> [n.value for n in four.hierarchy()]
    [4, 2, 1]
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from graphs.path import Path
from sets.finite import FiniteSet
from utils.preconditions import check_argument

V = TypeVar("V")


class HierarchyNode(Generic[V]):
    """
    A tree node with a parent back-reference and a cached hierarchy.

    Nodes are compared by identity: two nodes holding equal values are
    distinct nodes.
    """

    __slots__ = (
        "value",
        "parent",
        "depth",
        "_ancestry",
        "_hierarchy",
        "_children_count",
        "_locked",
    )

    def __init__(self, value: V, parent: HierarchyNode[V] | None = None) -> None:
        """
        Args:
            value: Value stored in the node.
            parent: Parent node, None for a root.

        Raises:
            InvalidArgument: If the parent is locked.
        """
        if parent is not None:
            parent._register_child()
        self.value = value
        self.parent = parent
        self.depth: int = 0 if parent is None else parent.depth + 1
        self._ancestry: tuple[HierarchyNode[V], ...] = (self,) + (
            () if parent is None else parent._ancestry
        )
        self._hierarchy: Path[HierarchyNode[V]] = Path(self._ancestry)
        self._children_count = 0
        self._locked = False

    def _register_child(self) -> None:
        check_argument(not self._locked, f"Node {self} is locked and takes no children")
        self._children_count += 1

    def create_child(self, value: V) -> HierarchyNode[V]:
        return HierarchyNode(value, self)

    def hierarchy(self) -> Path[HierarchyNode[V]]:
        """Path from this node up to the root of its hierarchy, both included."""
        return self._hierarchy

    @property
    def root(self) -> HierarchyNode[V]:
        return self._ancestry[-1]

    @property
    def children_count(self) -> int:
        return self._children_count

    def is_root(self) -> bool:
        return self.parent is None

    def has_children(self) -> bool:
        return self._children_count != 0

    def is_parent_of(self, potential_child: HierarchyNode[V]) -> bool:
        return potential_child.parent is self

    def is_ancestor_of(self, node: HierarchyNode[V]) -> bool:
        return self in node._ancestry

    def lock(self) -> HierarchyNode[V]:
        """Forbids new children. Locking twice changes nothing."""
        self._locked = True
        return self

    def is_locked(self) -> bool:
        return self._locked

    @staticmethod
    def lock_all(*nodes: HierarchyNode[V]) -> FiniteSet[HierarchyNode[V]]:
        """Locks every node and returns them as a set."""
        return FiniteSet(frozenset(node.lock() for node in nodes))

    @staticmethod
    def are_related(node1: HierarchyNode[V], node2: HierarchyNode[V]) -> bool:
        """Whether one node is a (possibly distant) ancestor of the other."""
        return node1.is_ancestor_of(node2) or node2.is_ancestor_of(node1)

    @staticmethod
    def are_related_rootless(node1: HierarchyNode[V], node2: HierarchyNode[V]) -> bool:
        """
        Whether two nodes lie on the same chain of single-child nodes.

        Two nodes are related iff they belong to the same branch of nodes
        with at most one child each, counting from the deeper node upwards.
        For the tree in the module docstring, {1..6} splits into
        {4}, {5}, {3, 6}, {2}, {1}.

        Note: relates every node to itself, and is symmetric.
        """
        if node1 is node2:
            return True
        if not HierarchyNode.are_related(node1, node2):
            return False

        deeper = node1 if node1.depth > node2.depth else node2
        chain = _takewhile_single_child(deeper._ancestry)
        return node1 in chain and node2 in chain

    def __repr__(self) -> str:
        return f"HierarchyNode({self.value!r}, depth={self.depth})"

    def __str__(self) -> str:
        return str(self.value)


def _takewhile_single_child(
    ancestry: Iterable[HierarchyNode[V]],
) -> list[HierarchyNode[V]]:
    chain = []
    for node in ancestry:
        if node.children_count > 1:
            break
        chain.append(node)
    return chain


__all__ = ["HierarchyNode"]
