"""
Capabilities shared by every graph variant.

The variant set is closed: a Graph is a ConcreteGraph, a Cycle, a Path or a
Tree. Each capability matches on the variant instead of relying on methods
overridden in subclasses.

Functions:
    vertex_set(graph)                 - The vertex container
    edge_set(graph)                   - The set of Links
    neighbours(graph, point)          - Adjacent vertices, None when there are none
    on(graph, points)                 - Restriction to a subset of the vertices
    connected_component(graph, point) - Maximal connected subgraph around point
    connected_components(graph)       - All connected components
    flow(graph, chooser, start)       - Caller-directed walk
    flow_by(graph, key, start)        - Walk to the neighbour maximising key
    neighbours_of(graph, subset)      - Vertices reachable from subset
    are_connected(graph, v1, v2)      - Whether two vertices share a component
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Hashable, Iterable
from typing import Any, NoReturn, TypeVar

from typing_extensions import TypeAliasType

from graphs.concrete import ConcreteGraph
from graphs.cycle import Cycle
from graphs.link import Link
from graphs.path import Path
from graphs.tree import Tree
from localtypes import Chooser, Projection
from sets.finite import FiniteSet, empty_set, union_of
from sets.ordered import OrderedSequence
from sets.partition import PartitionSet
from utils.preconditions import check_argument

logger = logging.getLogger(__name__)

_T = TypeVar("_T", bound=Hashable)
Graph = TypeAliasType(
    "Graph", ConcreteGraph[_T] | Cycle[_T] | Path[_T] | Tree[Any], type_params=(_T,)
)


def _not_a_graph(graph: object) -> NoReturn:
    raise TypeError(f"Not a graph variant: {type(graph).__name__}")


def vertex_set(graph: Graph[Any]) -> FiniteSet[Any]:
    match graph:
        case ConcreteGraph(vertices=vertices):
            return vertices
        case Cycle() | Path() | Tree():
            return graph
        case _:
            _not_a_graph(graph)


def edge_set(graph: Graph[Any]) -> FiniteSet[Link[Any]]:
    match graph:
        case ConcreteGraph(edges=edges):
            return edges
        case Cycle():
            if len(graph) < 2:
                return empty_set()
            return FiniteSet(
                frozenset(Link(v, graph.successor(v)) for v in graph.elements)
            )
        case Path():
            return FiniteSet(
                frozenset(Link(a, b) for a, b in itertools.pairwise(graph.elements))
            )
        case Tree():
            return graph.edge_links()
        case _:
            _not_a_graph(graph)


def neighbours(graph: Graph[Any], point: Any) -> FiniteSet[Any] | None:
    """
    The vertices adjacent to point.

    Returns None when point is isolated or not a vertex. For a tree, the
    neighbours of a node are the children of its parent (its siblings and
    itself); the root has none.
    """
    if point not in vertex_set(graph):
        return None

    match graph:
        case ConcreteGraph(edges=edges):
            adjacent = edges.such_that(lambda link: point in link).image(
                lambda link: link.next(point)
            )
            return None if adjacent.is_empty() else PartitionSet.single(adjacent)
        case Cycle():
            if len(graph) < 2:
                return None
            around = (graph.predecessor(point), graph.successor(point))
            return OrderedSequence(dict.fromkeys(around))
        case Path():
            i = graph.index_of(point)
            adjacent = graph.elements[max(i - 1, 0) : i] + graph.elements[i + 1 : i + 2]
            return OrderedSequence(adjacent) if adjacent else None
        case Tree():
            if point.parent is None:
                return None
            return graph.children_of(point.parent)
        case _:
            _not_a_graph(graph)


def on(graph: Graph[Any], points: Iterable[Any]) -> ConcreteGraph[Any]:
    """The graph restricted to points, keeping the edges lying entirely inside."""
    restricted = vertex_set(graph).intersection(frozenset(points))
    return ConcreteGraph.of(restricted, edge_set(graph).such_that(restricted.contains_set))


def connected_component(graph: Graph[Any], point: Any) -> Graph[Any]:
    """
    The maximal connected subgraph containing point.

    Raises:
        InvalidArgument: If point is not a vertex of the graph.
    """
    check_argument(point in vertex_set(graph), f"{point!r} is not a vertex of the graph")
    match graph:
        case ConcreteGraph(vertices=vertices):
            return on(graph, vertices.component(point))
        case Cycle() | Path() | Tree():
            return graph
        case _:
            _not_a_graph(graph)


def connected_components(graph: Graph[Any]) -> FiniteSet[Graph[Any]]:
    match graph:
        case ConcreteGraph(vertices=vertices):
            return vertices.components.image(lambda component: on(graph, component))
        case Cycle() | Path() | Tree():
            return FiniteSet.of(graph)
        case _:
            _not_a_graph(graph)


def _unvisited(options: FiniteSet[Any], visited: set[Any]) -> FiniteSet[Any] | None:
    """Options not visited yet, in the same kind of container, or None."""
    match options:
        case PartitionSet():
            remaining = options.minus_set(visited)
            return None if remaining.is_empty() else PartitionSet.single(remaining)
        case OrderedSequence():
            remaining = tuple(e for e in options if e not in visited)
            return OrderedSequence(remaining) if remaining else None
        case _:
            remaining = options.minus_set(visited)
            return None if remaining.is_empty() else remaining


def flow(
    graph: Graph[Any],
    chooser: Chooser[FiniteSet[Any], Any],
    start: Any,
) -> OrderedSequence[Any]:
    """
    Walks the graph from start, letting chooser pick each next vertex.

    At every step chooser receives the neighbours of the current vertex that
    the walk has not visited yet and returns one of them. The walk stops when
    there is none left. On a tree the walk only descends: chooser receives
    the children of the current node, and the walk ends on a leaf.

    Returns:
        The visited vertices, from start to the last one.

    Raises:
        InvalidArgument: If start is not a vertex, or chooser returns a
            vertex it was not offered.
    """
    check_argument(start in vertex_set(graph), f"{start!r} is not a vertex of the graph")

    match graph:
        case Tree():
            step: Callable[[Any], FiniteSet[Any] | None] = graph.children_of
        case _:
            step = lambda point: neighbours(graph, point)  # noqa: E731

    walk = [start]
    visited = {start}
    current = start
    while (candidates := step(current)) is not None and (
        options := _unvisited(candidates, visited)
    ) is not None:
        chosen = chooser(options)
        check_argument(
            chosen in options,
            f"Chooser picked {chosen!r}, which is not an available neighbour of {current!r}",
        )
        walk.append(chosen)
        visited.add(chosen)
        current = chosen

    logger.debug(f"Flow from {start!r} visited {len(walk)} vertices")
    return OrderedSequence(walk)


def flow_by(
    graph: Graph[Any], key: Projection[Any], start: Any
) -> OrderedSequence[Any]:
    """Flow always moving to the available neighbour maximising key."""
    return flow(graph, lambda options: max(options, key=key), start)


def neighbours_of(graph: Graph[Any], subset: Iterable[Any]) -> FiniteSet[Any]:
    """
    Every vertex reachable in one or more steps from a vertex of subset.

    Neighbour sets are unioned in until no new vertex appears; the vertex set
    is finite, so the fixed point is always reached.
    """
    closure: FiniteSet[Any] = empty_set()
    frontier = FiniteSet(frozenset(subset))
    while not frontier.is_empty():
        step = union_of(
            adjacent
            for point in frontier
            if (adjacent := neighbours(graph, point)) is not None
        )
        frontier = step.minus_set(closure)
        closure = closure.union(step)
    return closure


def are_connected(graph: Graph[Any], v1: Any, v2: Any) -> bool:
    return connected_component(graph, v1) == connected_component(graph, v2)


__all__ = [
    "Graph",
    "vertex_set",
    "edge_set",
    "neighbours",
    "on",
    "connected_component",
    "connected_components",
    "flow",
    "flow_by",
    "neighbours_of",
    "are_connected",
]
