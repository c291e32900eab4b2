"""
Tests for the graphs package: links, general graphs, paths and cycles.

Tree-specific behaviour is tested in test_tree.py.
"""

import pytest

from errors import InvalidArgument, NotFound
from graphs import (
    ConcreteGraph,
    Cycle,
    Link,
    Path,
    are_connected,
    connected_component,
    connected_components,
    edge_set,
    flow,
    flow_by,
    neighbours,
    neighbours_of,
    on,
    vertex_set,
)
from sets import OrderedSequence, PartitionSet, empty_set


class TestLink:
    def test_unordered(self):
        assert Link(1, 2) == Link(2, 1)
        assert hash(Link(1, 2)) == hash(Link(2, 1))
        assert Link.of((1, 2)) == Link(1, 2)

    def test_next(self):
        link = Link("a", "b")
        assert link.next("a") == "b"
        assert link.next("b") == "a"

    def test_next_of_stranger(self):
        with pytest.raises(NotFound):
            Link("a", "b").next("c")

    def test_loop_rejected(self):
        with pytest.raises(InvalidArgument):
            Link("a", "a")


def two_islands() -> ConcreteGraph:
    """
    1 - 2 - 3    4 - 5    6
    """
    return ConcreteGraph.of(
        range(1, 7), [Link(1, 2), Link(2, 3), Link(4, 5)]
    )


class TestConcreteGraph:
    def test_components(self):
        graph = two_islands()
        assert isinstance(graph.vertices, PartitionSet)
        assert graph.vertices.components == {
            frozenset({1, 2, 3}),
            frozenset({4, 5}),
            frozenset({6}),
        }

    def test_edge_endpoint_outside(self):
        with pytest.raises(InvalidArgument):
            ConcreteGraph.of({1, 2}, [Link(1, 3)])

    def test_empty_graph(self):
        graph = ConcreteGraph.of(())
        assert graph.vertices.is_empty()
        assert connected_components(graph) == empty_set()

    def test_are_connected(self):
        graph = two_islands()
        assert are_connected(graph, 1, 3)
        assert are_connected(graph, 6, 6)
        assert not are_connected(graph, 1, 4)

    def test_connected_component(self):
        component = connected_component(two_islands(), 5)
        assert vertex_set(component) == {4, 5}
        assert edge_set(component) == {Link(4, 5)}

    def test_connected_component_of_stranger(self):
        with pytest.raises(InvalidArgument):
            connected_component(two_islands(), 42)

    def test_connected_components(self):
        components = connected_components(two_islands())
        assert components.cardinality() == 3
        assert {c.vertices.cardinality() for c in components} == {3, 2, 1}

    def test_neighbours(self):
        graph = two_islands()
        assert neighbours(graph, 2) == {1, 3}
        assert isinstance(neighbours(graph, 2), PartitionSet)
        assert neighbours(graph, 6) is None
        assert neighbours(graph, 42) is None

    def test_neighbours_of(self):
        graph = two_islands()
        assert neighbours_of(graph, {1}) == {1, 2, 3}
        assert neighbours_of(graph, {3, 5}) == {1, 2, 3, 4, 5}
        assert neighbours_of(graph, {6}) == empty_set()

    def test_on(self):
        restricted = on(two_islands(), {1, 2, 4, 42})
        assert restricted.vertices == {1, 2, 4}
        assert restricted.edges == {Link(1, 2)}
        assert restricted.vertices.number_of_components() == 2

    def test_direct_sum(self):
        graph = two_islands()
        tagged = graph.as_direct_sum()
        assert tagged.cardinality() == 6 + 3
        assert ConcreteGraph.from_direct_sum(tagged) == graph

    def test_flow_by(self):
        graph = two_islands()
        walk = flow_by(graph, lambda v: v, 1)
        assert isinstance(walk, OrderedSequence)
        assert walk.to_list() == [1, 2, 3]
        assert flow_by(graph, lambda v: v, 2).to_list() == [2, 3]
        assert flow_by(graph, lambda v: -v, 2).to_list() == [2, 1]
        assert flow_by(graph, lambda v: v, 6).to_list() == [6]

    def test_flow_rejects_bad_choice(self):
        with pytest.raises(InvalidArgument):
            flow(two_islands(), lambda options: 5, 1)

    def test_flow_from_stranger(self):
        with pytest.raises(InvalidArgument):
            flow_by(two_islands(), lambda v: v, 42)


class TestPath:
    path = Path.of("a", "b", "c")

    def test_neighbours(self):
        assert neighbours(self.path, "a") == {"b"}
        assert neighbours(self.path, "b") == {"a", "c"}
        assert neighbours(self.path, "c") == {"b"}
        assert neighbours(Path.of("a"), "a") is None

    def test_edges(self):
        assert edge_set(self.path) == {Link("a", "b"), Link("b", "c")}
        assert edge_set(Path.of("a")) == empty_set()

    def test_one_component(self):
        assert connected_components(self.path) == {self.path}
        assert connected_component(self.path, "b") is self.path
        assert are_connected(self.path, "a", "c")

    def test_sub_path(self):
        assert self.path.sub_path("a", "b").to_list() == ["a", "b"]
        assert self.path.sub_path("c", "a").to_list() == ["c", "b", "a"]
        assert self.path.find_path_between("b", "b").to_list() == ["b"]

    def test_sub_path_outside(self):
        with pytest.raises(InvalidArgument):
            self.path.sub_path("a", "z")

    def test_reverse(self):
        assert self.path.reverse().to_list() == ["c", "b", "a"]
        assert self.path.reverse().reverse().to_list() == self.path.to_list()

    def test_add(self):
        joined = self.path + Path.of("d", "e")
        assert isinstance(joined, Path)
        assert joined.to_list() == ["a", "b", "c", "d", "e"]
        with pytest.raises(InvalidArgument):
            self.path.add(["c"])

    def test_on(self):
        restricted = on(self.path, {"a", "c"})
        assert restricted.vertices == {"a", "c"}
        assert restricted.edges == empty_set()

    def test_flow(self):
        assert flow_by(self.path, ord, "a").to_list() == ["a", "b", "c"]
        assert flow_by(self.path, ord, "b").to_list() == ["b", "c"]

    def test_from_string(self):
        chain = Path.from_string("abc")
        assert [n.value for n in chain] == ["a", "b", "c"]
        assert [n.depth for n in chain] == [0, 1, 2]
        assert chain.tail().parent is chain.at(1)


class TestCycle:
    cycle = Cycle.of("a", "b", "c")

    def test_wrap_around(self):
        assert self.cycle.successor("c") == "a"
        assert self.cycle.predecessor("a") == "c"

    def test_neighbours(self):
        assert neighbours(self.cycle, "a") == {"b", "c"}
        assert neighbours(Cycle.of("a", "b"), "a") == {"b"}
        assert neighbours(Cycle.of("a"), "a") is None

    def test_edges(self):
        assert edge_set(self.cycle) == {Link("a", "b"), Link("b", "c"), Link("c", "a")}
        assert edge_set(Cycle.of("a", "b")) == {Link("a", "b")}
        assert edge_set(Cycle.of("a")) == empty_set()

    def test_one_component(self):
        assert connected_components(self.cycle).cardinality() == 1
        assert are_connected(self.cycle, "a", "c")

    def test_neighbours_of(self):
        assert neighbours_of(self.cycle, {"a"}) == {"a", "b", "c"}

    def test_flow_goes_around_once(self):
        assert flow_by(self.cycle, ord, "a").to_list() == ["a", "c", "b"]
