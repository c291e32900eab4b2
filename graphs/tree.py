"""
Trees of hierarchy nodes.

A Tree is the set of its HierarchyNodes, pointed at its root. The parent
links stored in the nodes give the tree structure, so the tree itself only
keeps the node set, the root and the maximum depth.

Shortest paths are found through the lowest common ancestor (LCA) of the two
endpoints, using the hierarchies cached in the nodes: the cost depends on the
depth of the tree, not on its size.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import constants
from graphs.link import Link
from graphs.node import HierarchyNode
from graphs.path import Path
from sets.finite import FiniteSet
from sets.pointed import PointedSet
from utils.preconditions import check_argument
from utils.traversal import (
    breadth_first_preorder,
    depth_first_postorder,
    depth_first_preorder,
)

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass(frozen=True, eq=False, repr=False, init=False)
class Tree(PointedSet[HierarchyNode[V]], Generic[V]):
    """
    A connected tree (not a forest) of HierarchyNodes.

    Attributes:
        point: The root, i.e. the node of minimal depth. None when empty.
        max_depth: Depth of the deepest node, -1 when empty.
    """

    max_depth: int

    def __init__(
        self,
        nodes: Iterable[HierarchyNode[V]] = (),
        check_roots: bool | None = None,
    ) -> None:
        """
        Args:
            nodes: The nodes of the tree.
            check_roots: Verify that every node hangs from the same root.
                Defaults to constants.CHECK_TREE_ROOTS.

        Raises:
            InvalidArgument: If the check is on and the nodes come from
                different hierarchies.
        """
        members = FiniteSet(frozenset(nodes))
        if members.is_empty():
            self._assign(members.data, None, -1)
            return

        if constants.CHECK_TREE_ROOTS if check_roots is None else check_roots:
            roots = members.image(lambda node: node.root)
            check_argument(
                roots.cardinality() == 1,
                f"Tree nodes hang from {roots.cardinality()} different roots: {roots!r}",
            )

        root = members.min_of(lambda node: node.depth)
        deepest = members.max_of(lambda node: node.depth)
        self._assign(members.data, root, deepest.depth)

    def _assign(
        self,
        data: frozenset[HierarchyNode[V]],
        root: HierarchyNode[V] | None,
        max_depth: int,
    ) -> None:
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "point", root)
        object.__setattr__(self, "max_depth", max_depth)

    @classmethod
    def _with_root(
        cls, nodes: FiniteSet[HierarchyNode[V]], root: HierarchyNode[V]
    ) -> Tree[V]:
        """Tree with a known root, skipping the hierarchy check."""
        tree = cls.__new__(cls)
        deepest = nodes.max_of(lambda node: node.depth)
        tree._assign(nodes.data, root, deepest.depth)
        return tree

    @classmethod
    def empty(cls) -> Tree[Any]:
        return cls()

    def __repr__(self) -> str:
        return f"Tree(root={self.point!r}, size={len(self.data)}, max_depth={self.max_depth})"

    # -- Structure ---------------------------------------------------------

    @property
    def root(self) -> HierarchyNode[V]:
        """The root node to which every node is linked."""
        return self.get_element_or_throw()

    def min_depth(self) -> int:
        return self.root.depth

    def total_depth(self) -> int:
        """Number of levels below the root."""
        return self.max_depth - self.root.depth

    def nodes_at_depth(self, target_depth: int) -> FiniteSet[HierarchyNode[V]]:
        return self.such_that(lambda node: node.depth == target_depth)

    def children_of(
        self, point: HierarchyNode[V]
    ) -> FiniteSet[HierarchyNode[V]] | None:
        """
        The nodes of this tree whose parent is point, None for a leaf.

        Siblings share no root among themselves, so they come back as a
        plain set rather than a Tree.
        """
        children = self.nodes_at_depth(point.depth + 1).such_that(point.is_parent_of)
        return None if children.is_empty() else children

    def leaves(self) -> FiniteSet[HierarchyNode[V]]:
        """Nodes with no child in this tree."""
        parents = self.such_that(lambda node: not node.is_root()).image(
            lambda node: node.parent
        )
        return self.minus_set(parents)

    def edge_links(self) -> FiniteSet[Link[HierarchyNode[V]]]:
        """A link from every node to its parent, when the parent is in the tree."""
        return self.such_that(
            lambda node: node.parent is not None and node.parent in self.data
        ).image(lambda node: Link(node, node.parent))

    def subtree_at(self, point: HierarchyNode[V]) -> Tree[V]:
        """The nodes of this tree descending from point, rooted at point."""
        check_argument(point in self.data, f"{point!r} is not in the tree")
        return Tree._with_root(self.such_that(point.is_ancestor_of), point)

    def add(self, path: Iterable[HierarchyNode[V]]) -> Tree[V]:
        """This tree grown by the nodes of a path."""
        return Tree(self.union(path))

    # -- Traversals --------------------------------------------------------

    def _children_lists(self) -> dict[HierarchyNode[V], list[HierarchyNode[V]]]:
        children: dict[HierarchyNode[V], list[HierarchyNode[V]]] = defaultdict(list)
        for node in self.data:
            if node.parent is not None and node.parent in self.data:
                children[node.parent].append(node)
        return children

    def breadth_first(self) -> Iterator[HierarchyNode[V]]:
        """Nodes level by level, root first."""
        children = self._children_lists()
        return breadth_first_preorder(lambda node: children.get(node, ()), self.point)

    def depth_first(self, postorder: bool = False) -> Iterator[HierarchyNode[V]]:
        """Nodes depth-first, each parent before its children (after them with postorder)."""
        children = self._children_lists()
        traversal = depth_first_postorder if postorder else depth_first_preorder
        return traversal(lambda node: children.get(node, ()), self.point)

    # -- Path-finding ------------------------------------------------------

    def find_path_between(
        self, node1: HierarchyNode[V], node2: HierarchyNode[V]
    ) -> Path[HierarchyNode[V]]:
        """
        The shortest path from node1 to node2, both included.

        If one node is an ancestor of the other, the path is a slice of the
        deeper node's hierarchy. Otherwise it climbs from node1 to the lowest
        common ancestor, then descends to node2.

        Raises:
            InvalidArgument: If either node is not in the tree, or the path
                runs through an ancestor the tree does not contain.
        """
        check_argument(
            node1 in self.data and node2 in self.data,
            f"Both {node1!r} and {node2!r} must be in the tree",
        )
        hierarchy1 = node1.hierarchy()
        hierarchy2 = node2.hierarchy()
        common = hierarchy1.intersection(hierarchy2)

        if node1 in common or node2 in common:
            deeper = node1 if node1.depth >= node2.depth else node2
            path = deeper.hierarchy().sub_path(node1, node2)
        else:
            check_argument(
                not common.is_empty(), f"{node1!r} and {node2!r} have no common ancestor"
            )
            ancestor = common.max_of(lambda node: node.depth)
            logger.debug(f"Lowest common ancestor of {node1} and {node2} is {ancestor}")
            climb = hierarchy1.sub_path(node1, ancestor)
            descent = hierarchy2.sub_path(node2, ancestor).reverse()
            path = climb.add(descent.sub_sequence(1, len(descent)))

        check_argument(
            self.contains_set(path),
            f"Path {path!r} leaves the tree: missing {path.minus_set(self)!r}",
        )
        return path


__all__ = ["Tree"]
