"""
Tests for sets/ordered.py and sets/pointed.py.

Tests positional sequences, indexed sets and sets ordered by a relation.
"""

import pytest

from errors import EmptySet, InvalidArgument
from sets import (
    Comparison,
    FiniteSet,
    IndexedSet,
    Order,
    OrderedSequence,
    OrderedSet,
    PointedSet,
)


class TestOrderedSequence:
    seq = OrderedSequence(["a", "b", "c"])

    def test_positions(self):
        assert self.seq.at(0) == "a"
        assert self.seq.index_of("c") == 2
        assert self.seq.to_list() == ["a", "b", "c"]
        assert list(self.seq) == ["a", "b", "c"]

    def test_still_a_set(self):
        assert self.seq == {"c", "b", "a"}
        assert OrderedSequence(["c", "b", "a"]) == self.seq

    def test_duplicates_rejected(self):
        with pytest.raises(InvalidArgument):
            OrderedSequence([1, 2, 1])

    def test_out_of_range(self):
        with pytest.raises(InvalidArgument):
            self.seq.at(3)
        with pytest.raises(InvalidArgument):
            self.seq.index_of("z")

    def test_head_and_tail(self):
        assert self.seq.head() == "a"
        assert self.seq.tail() == "c"
        with pytest.raises(EmptySet):
            OrderedSequence().head()
        with pytest.raises(EmptySet):
            OrderedSequence().tail()

    def test_next_saturates_at_tail(self):
        assert self.seq.next("a") == "b"
        assert self.seq.next("c") == "c"

    def test_prev_saturates_at_head(self):
        assert self.seq.prev("c") == "b"
        assert self.seq.prev("a") == "a"

    def test_sub_sequence(self):
        assert self.seq.sub_sequence(1, 3).to_list() == ["b", "c"]
        assert self.seq.sub_sequence(2, 2).to_list() == []

    def test_image_keeps_first_occurrence(self):
        seq = OrderedSequence([3, -1, 1, 2])
        assert seq.image(abs).to_list() == [3, 1, 2]

    def test_positional_order(self):
        assert self.seq.compare("a", "c") is Comparison.LESS
        assert self.seq.minima() == {"a"}
        assert self.seq.maxima() == {"c"}
        assert self.seq.more_than("a") == {"b", "c"}
        assert self.seq.less_than("b") == {"a"}

    def test_compare_requires_membership(self):
        with pytest.raises(InvalidArgument):
            self.seq.compare("a", "z")


class TestIndexedSet:
    def test_from_mapping(self):
        indexed = IndexedSet.from_mapping({"one": 1, "two": 2})
        assert indexed == {1, 2}
        assert indexed.at("two") == 2

    def test_image_keeps_indices(self):
        indexed = IndexedSet.from_mapping({"one": 1, "two": 2})
        doubled = indexed.image(lambda x: 2 * x)
        assert doubled == {2, 4}
        assert doubled.at("two") == 4


class TestOrderedSet:
    def test_partial_order_extrema(self):
        # Divisibility on {2, 3, 4, 12}
        def divides(t, u):
            if t == u:
                return Comparison.EQUAL
            if u % t == 0:
                return Comparison.LESS
            if t % u == 0:
                return Comparison.GREATER
            return None

        ordered = OrderedSet(frozenset({2, 3, 4, 12}), Order(divides))
        assert ordered.minima() == {2, 3}
        assert ordered.maxima() == {12}
        assert ordered.more_than(2) == {4, 12}
        assert ordered.equal_to(3) == {3}


class TestPointedSet:
    def test_point_is_returned(self):
        pointed = PointedSet(frozenset({1, 2, 3}), 2)
        assert pointed.get_element_or_throw() == 2
        assert pointed == FiniteSet.of(1, 2, 3)

    def test_point_must_be_member(self):
        with pytest.raises(InvalidArgument):
            PointedSet(frozenset({1, 2}), 5)

    def test_empty_pointed_set(self):
        pointed = PointedSet(frozenset(), None)
        with pytest.raises(EmptySet):
            pointed.get_element_or_throw()
