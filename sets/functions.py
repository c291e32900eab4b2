"""
Functions, predicates and relations over set elements.

Hierarchy:
    SetFunction   - element function, liftable to an image operator on sets
    Equation      - element predicate, solvable in a set
    Relation      - binary function on elements
    ├── Equivalence - boolean relation used to partition sets
    └── Order       - relation to a Comparison, used to order sets

The classes wrap plain callables, so any function or lambda can be promoted
where a SetFunction or Equation is expected.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Hashable, Set
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from utils.preconditions import check_argument

if TYPE_CHECKING:
    from sets.finite import FiniteSet

T = TypeVar("T", bound=Hashable)
U = TypeVar("U", bound=Hashable)
V = TypeVar("V", bound=Hashable)
R = TypeVar("R")


@dataclass(frozen=True)
class SetFunction(Generic[T, U]):
    """An element-to-element function that also maps sets to their images."""

    function: Callable[[T], U]

    def __call__(self, t: T) -> U:
        return self.function(t)

    def image_of(self, s: FiniteSet[T]) -> FiniteSet[U]:
        """Lifts this function to sets: the set of f(t) for t in s."""
        return s.image(self.function)

    def pre_image_of(self, targets: Set[U]) -> Equation[T]:
        """Equation locating the elements mapped inside targets."""
        return Equation(lambda t: self.function(t) in targets)

    def pre_image_of_element(self, target: U) -> Equation[T]:
        """Equation locating the elements mapped onto target."""
        return Equation(lambda t: self.function(t) == target)

    def compose(self, before: Callable[[V], T]) -> SetFunction[V, U]:
        """self ∘ before"""
        return SetFunction(lambda v: self.function(before(v)))

    def and_then(self, after: Callable[[U], V]) -> SetFunction[T, V]:
        """after ∘ self"""
        return SetFunction(lambda t: after(self.function(t)))

    @staticmethod
    def identity() -> SetFunction[Any, Any]:
        return SetFunction(_identity)


def _identity(t: Any) -> Any:
    return t


@dataclass(frozen=True)
class Equation(Generic[T]):
    """
    A predicate on elements.

    Solving an equation in a set yields the subset of its solutions.
    `a & b`, `a | b` and `~a` build conjunctions, disjunctions and negations.
    """

    predicate: Callable[[T], bool]

    def __call__(self, t: T) -> bool:
        return self.predicate(t)

    def solve_in(self, s: FiniteSet[T]) -> FiniteSet[T]:
        return s.such_that(self.predicate)

    def __and__(self, other: Callable[[T], bool]) -> Equation[T]:
        return Equation(lambda t: self.predicate(t) and other(t))

    def __or__(self, other: Callable[[T], bool]) -> Equation[T]:
        return Equation(lambda t: self.predicate(t) or other(t))

    def __invert__(self) -> Equation[T]:
        return Equation(lambda t: not self.predicate(t))


@dataclass(frozen=True)
class Relation(Generic[T, R]):
    """A binary function on elements of the same type."""

    relate: Callable[[T, T], R]

    def __call__(self, t: T, u: T) -> R:
        return self.relate(t, u)

    def partial_apply(self, t: T) -> SetFunction[T, R]:
        """The function u -> relate(t, u)."""
        return SetFunction(lambda u: self.relate(t, u))


@dataclass(frozen=True)
class Equivalence(Relation[T, bool]):
    """
    A boolean relation expected to be reflexive, symmetric and transitive.

    The expectation is not enforced on construction; `check_on` verifies it
    over a given set.
    """

    def relates_pair(self, pair: FiniteSet[T]) -> bool:
        """Applies the relation to the two elements of a 2-element set."""
        check_argument(
            pair.cardinality() == 2,
            f"Expected a pair, got a set of {pair.cardinality()} elements",
        )
        first, second = pair
        return self.relate(first, second)

    def check_on(self, s: Set[T]) -> None:
        """
        Verifies the equivalence axioms on s.

        Performs |s|² relation evaluations. Transitivity is checked through
        the classes: for a reflexive, symmetric relation it holds iff related
        elements have identical classes.

        Raises:
            InvalidArgument: If an axiom fails, naming the witnesses.
        """
        elements = tuple(s)
        related = {
            (x, y): bool(self.relate(x, y))
            for x, y in itertools.product(elements, repeat=2)
        }
        for x in elements:
            check_argument(related[x, x], f"Relation is not reflexive at {x!r}")
        for x, y in itertools.combinations(elements, 2):
            check_argument(
                related[x, y] == related[y, x],
                f"Relation is not symmetric on ({x!r}, {y!r})",
            )

        classes = {
            x: frozenset(y for y in elements if related[x, y]) for x in elements
        }
        for x, y in itertools.combinations(elements, 2):
            if related[x, y]:
                check_argument(
                    classes[x] == classes[y],
                    f"Relation is not transitive through ({x!r}, {y!r})",
                )


class Comparison(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, difference: int | float) -> Comparison:
        """Maps the sign of a difference to a Comparison."""
        return cls((difference > 0) - (difference < 0))


@dataclass(frozen=True)
class Order(Relation[T, Comparison]):
    """A relation telling how two elements compare."""

    def compare(self, t: T, u: T) -> Comparison:
        return self.relate(t, u)

    @staticmethod
    def natural() -> Order[Any]:
        """The order given by the elements' own < and >."""
        return Order(lambda t, u: Comparison.of((t > u) - (t < u)))

    @staticmethod
    def by_key(key: Callable[[T], Any]) -> Order[T]:
        """Compares elements through a key function."""

        def compare_keys(t: T, u: T) -> Comparison:
            kt, ku = key(t), key(u)
            return Comparison.of((kt > ku) - (kt < ku))

        return Order(compare_keys)


__all__ = [
    "SetFunction",
    "Equation",
    "Relation",
    "Equivalence",
    "Comparison",
    "Order",
]
