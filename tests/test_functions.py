"""Tests for sets/functions.py"""

import pytest

from errors import InvalidArgument
from sets import (
    Comparison,
    Equation,
    Equivalence,
    FiniteSet,
    Order,
    Relation,
    SetFunction,
)


class TestSetFunction:
    square = SetFunction(lambda x: x * x)
    s = FiniteSet.of(-2, -1, 0, 1, 2)

    def test_call_and_image(self):
        assert self.square(3) == 9
        assert self.square.image_of(self.s) == {0, 1, 4}

    def test_pre_images(self):
        assert self.square.pre_image_of_element(4).solve_in(self.s) == {-2, 2}
        assert self.square.pre_image_of({0, 1}).solve_in(self.s) == {-1, 0, 1}

    def test_composition(self):
        increment = SetFunction(lambda x: x + 1)
        assert self.square.compose(increment)(2) == 9
        assert self.square.and_then(increment)(2) == 5

    def test_identity(self):
        assert SetFunction.identity()("x") == "x"


class TestEquation:
    even = Equation(lambda x: x % 2 == 0)
    positive = Equation(lambda x: x > 0)
    s = FiniteSet.of(-2, -1, 0, 1, 2)

    def test_solve_in(self):
        assert self.even.solve_in(self.s) == {-2, 0, 2}

    def test_combinators(self):
        assert (self.even & self.positive).solve_in(self.s) == {2}
        assert (self.even | self.positive).solve_in(self.s) == {-2, 0, 1, 2}
        assert (~self.even).solve_in(self.s) == {-1, 1}


class TestRelations:
    def test_partial_apply(self):
        minus = Relation(lambda t, u: t - u)
        assert minus.partial_apply(10)(3) == 7

    def test_relates_pair(self):
        same_parity = Equivalence(lambda t, u: t % 2 == u % 2)
        assert same_parity.relates_pair(FiniteSet.of(1, 3))
        assert not same_parity.relates_pair(FiniteSet.of(1, 2))

    def test_relates_pair_requires_two_elements(self):
        same_parity = Equivalence(lambda t, u: t % 2 == u % 2)
        with pytest.raises(InvalidArgument):
            same_parity.relates_pair(FiniteSet.of(1, 2, 3))

    def test_check_on_valid(self):
        Equivalence(lambda t, u: t % 3 == u % 3).check_on(FiniteSet.of(*range(9)))

    def test_check_on_not_reflexive(self):
        with pytest.raises(InvalidArgument, match="reflexive"):
            Equivalence(lambda t, u: t != u).check_on(FiniteSet.of(1, 2))

    def test_check_on_not_symmetric(self):
        with pytest.raises(InvalidArgument, match="symmetric"):
            Equivalence(lambda t, u: t <= u).check_on(FiniteSet.of(1, 2))

    def test_check_on_not_transitive(self):
        close = Equivalence(lambda t, u: abs(t - u) <= 1)
        with pytest.raises(InvalidArgument, match="transitive"):
            close.check_on(FiniteSet.of(1, 2, 3))


class TestOrder:
    def test_comparison_of(self):
        assert Comparison.of(-5) is Comparison.LESS
        assert Comparison.of(0) is Comparison.EQUAL
        assert Comparison.of(0.5) is Comparison.GREATER

    def test_natural(self):
        order = Order.natural()
        assert order.compare(1, 2) is Comparison.LESS
        assert order.compare("b", "a") is Comparison.GREATER

    def test_by_key(self):
        by_length = Order.by_key(len)
        assert by_length.compare("aa", "b") is Comparison.GREATER
        assert by_length.compare("a", "b") is Comparison.EQUAL
