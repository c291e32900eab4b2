"""
General graphs: arbitrary vertices and edges.

The vertex set of a ConcreteGraph is a PartitionSet whose classes are the
connected components of the graph. Components are computed once, at
construction, with scipy's sparse-graph connected component labelling.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import connected_components

from graphs.link import Link
from sets.finite import FiniteSet
from sets.pair import OptionalPair, Side
from sets.partition import PartitionSet
from utils.preconditions import check_argument

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class ConcreteGraph(Generic[T]):
    """
    An undirected graph.

    Attributes:
        vertices: The vertices, partitioned into connected components.
        edges: The links between vertices.
    """

    vertices: PartitionSet[T]
    edges: FiniteSet[Link[T]]

    @classmethod
    def of(
        cls, points: Iterable[T], edges: Iterable[Link[T]] = ()
    ) -> ConcreteGraph[T]:
        """
        Builds a graph, deriving its connected components.

        Raises:
            InvalidArgument: If an edge has an endpoint outside of points.
        """
        vertices = FiniteSet(frozenset(points))
        links = FiniteSet(frozenset(edges))
        for link in links:
            check_argument(
                vertices.contains_set(link),
                f"Edge {link!r} has an endpoint outside of the vertices",
            )
        return cls(PartitionSet(connected_classes(vertices, links)), links)

    @classmethod
    def from_direct_sum(
        cls, tagged: Iterable[OptionalPair[T, Link[T]]]
    ) -> ConcreteGraph[T]:
        """Builds a graph from vertices tagged LEFT and edges tagged RIGHT."""
        points: list[T] = []
        edges: list[Link[T]] = []
        for pair in tagged:
            match pair.side:
                case Side.LEFT:
                    points.append(pair.left)
                case Side.RIGHT:
                    edges.append(pair.right)
        return cls.of(points, edges)

    def as_direct_sum(self) -> FiniteSet[OptionalPair[T, Link[T]]]:
        """Vertices and edges in a single set, tagged by kind."""
        return self.vertices.direct_sum(self.edges)


def connected_classes(
    vertices: FiniteSet[T], edges: FiniteSet[Link[T]]
) -> list[frozenset[T]]:
    """
    Splits vertices into the connected components induced by edges.

    Args:
        vertices: The vertices of the graph.
        edges: Links whose endpoints all belong to vertices.

    Returns:
        One frozenset per connected component.
    """
    if vertices.is_empty():
        return []

    ordered = tuple(vertices)
    index = {vertex: i for i, vertex in enumerate(ordered)}
    endpoints = tuple(link.elements for link in edges)

    rows = np.fromiter((index[a] for a, _ in endpoints), dtype=np.intp, count=len(endpoints))
    cols = np.fromiter((index[b] for _, b in endpoints), dtype=np.intp, count=len(endpoints))
    adjacency = csr_matrix(
        (np.ones(len(endpoints), dtype=np.int8), (rows, cols)),
        shape=(len(ordered), len(ordered)),
    )

    count, labels = connected_components(adjacency, directed=False)
    classes: list[list[T]] = [[] for _ in range(count)]
    for vertex, label in zip(ordered, labels):
        classes[label].append(vertex)

    logger.debug(
        f"{len(ordered)} vertices and {len(endpoints)} edges form {count} components"
    )
    return [frozenset(c) for c in classes]


__all__ = ["ConcreteGraph", "connected_classes"]
