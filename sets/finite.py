"""
Immutable finite sets with set algebra.

FiniteSet wraps a frozenset and implements `collections.abc.Set`, so it
compares equal to (and hashes like) any set holding the same elements.
Every operation returns a new FiniteSet; nothing is mutated in place.

Operations:
    union, intersection, minus, minus_set  - algebra over one or many operands
    such_that                              - conjunctive filter
    image                                  - element-wise map, collapsing duplicates
    power_set                              - all subsets, enumerated by bitmask
    direct_sum, product                    - tagged union and cartesian product
    min_of, max_of, get_element_or_throw   - element extraction
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable, Iterator, Set
from dataclasses import dataclass
from typing import Any, Generic

import numpy as np

import constants
from errors import EmptySet
from localtypes import Predicate, Projection, T, U
from sets.functions import Equation
from sets.pair import OptionalPair
from utils.parallel import parallel_map
from utils.preconditions import check_argument

logger = logging.getLogger(__name__)



@dataclass(frozen=True, eq=False, repr=False)
class FiniteSet(Set, Generic[T]):
    """A finite, immutable set of hashable values."""

    data: frozenset[T]

    def __post_init__(self) -> None:
        if not isinstance(self.data, frozenset):
            object.__setattr__(self, "data", frozenset(self.data))

    @classmethod
    def of(cls, *elements: T) -> FiniteSet[T]:
        return FiniteSet(frozenset(elements))

    # -- collections.abc.Set protocol -------------------------------------

    def __contains__(self, element: object) -> bool:
        return element in self.data

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __hash__(self) -> int:
        return hash(self.data)

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> FiniteSet[Any]:
        # Operators (&, |, -, ^) always build plain sets, whatever the subclass
        return FiniteSet(frozenset(it))

    def __repr__(self) -> str:
        inner = ", ".join(sorted(repr(e) for e in self.data))
        return f"{type(self).__name__}({{{inner}}})"

    # -- Membership --------------------------------------------------------

    def contains(self, element: T) -> bool:
        return element in self.data

    def contains_set(self, other: Iterable[T]) -> bool:
        return self.data.issuperset(other)

    def is_subset_of(self, other: Iterable[T]) -> bool:
        return self.data.issubset(other)

    def predicate_contains(self) -> Equation[T]:
        """Equation satisfied exactly by the members of this set."""
        return Equation(self.data.__contains__)

    def cardinality(self) -> int:
        return len(self.data)

    def is_empty(self) -> bool:
        return not self.data

    # -- Element extraction ------------------------------------------------

    def get_element(self, predicate: Predicate[T] | None = None) -> T | None:
        """Some element satisfying predicate (any element if None), or None."""
        return next(
            (e for e in self.data if predicate is None or predicate(e)), None
        )

    def get_element_or_throw(self) -> T:
        if not self.data:
            raise EmptySet("Tried to get element from empty set.")
        return next(iter(self.data))

    def min_of(self, f: Projection[T]) -> T:
        """Element minimising the numeric projection f."""
        if not self.data:
            raise EmptySet("Tried to get the minimum of an empty set.")
        return min(self.data, key=f)

    def max_of(self, f: Projection[T]) -> T:
        """Element maximising the numeric projection f."""
        if not self.data:
            raise EmptySet("Tried to get the maximum of an empty set.")
        return max(self.data, key=f)

    # -- Algebra -----------------------------------------------------------

    def such_that(
        self, *predicates: Predicate[T], parallel: bool = False
    ) -> FiniteSet[T]:
        """Subset of the elements satisfying all predicates."""

        def satisfies(e: T) -> bool:
            return all(p(e) for p in predicates)

        if parallel:
            elements = tuple(self.data)
            kept = parallel_map(satisfies, elements)
            return FiniteSet(frozenset(e for e, k in zip(elements, kept) if k))
        return FiniteSet(frozenset(filter(satisfies, self.data)))

    def image(self, f: Callable[[T], U], parallel: bool = False) -> FiniteSet[U]:
        """
        The set of f(e) for every element e.

        Distinct elements with equal images collapse: the image of a set
        can be smaller than the set.
        """
        if parallel:
            return FiniteSet(frozenset(parallel_map(f, self.data)))
        return FiniteSet(frozenset(map(f, self.data)))

    def union(self, *others: Iterable[T]) -> FiniteSet[T]:
        return FiniteSet(self.data.union(*others))

    def intersection(self, *others: Set[T]) -> FiniteSet[T]:
        return self.such_that(*(other.__contains__ for other in others))

    def minus_set(self, other: Set[T]) -> FiniteSet[T]:
        return self.such_that(lambda e: e not in other)

    def minus(self, element: T) -> FiniteSet[T]:
        return self.such_that(lambda e: e != element)

    def direct_sum(self, *others: FiniteSet[U]) -> FiniteSet[OptionalPair[T, U]]:
        """
        Disjoint union: a copy of this set tagged LEFT, next to copies of the
        others tagged RIGHT.
        """
        return self.image(OptionalPair.left_of).union(
            *(other.image(OptionalPair.right_of) for other in others)
        )

    def product(self, *others: Iterable[U]) -> FiniteSet[tuple[T, U]]:
        """Cartesian product of this set with the union of the others."""
        return FiniteSet(frozenset(itertools.product(self.data, union_of(others))))

    def power_set(self) -> FiniteSet[FiniteSet[T]]:
        """
        The set of all subsets.

        Subsets are enumerated iteratively: bit i of the mask k tells whether
        the i-th element belongs to the k-th subset. The empty set has the
        power set {∅}.

        Raises:
            InvalidArgument: If constants.MAX_POWER_SET_CARDINALITY is set
                and the cardinality exceeds it.
        """
        elements = tuple(self.data)
        n = len(elements)
        limit = constants.MAX_POWER_SET_CARDINALITY
        check_argument(
            limit is None or n <= limit,
            f"Refusing to enumerate the 2^{n} subsets of a set of {n} elements",
        )
        masks = np.arange(1 << n, dtype=np.int64)
        membership = ((masks[:, None] >> np.arange(n)) & 1).astype(bool)
        logger.debug(f"Enumerating {len(masks)} subsets of {n} elements")
        return FiniteSet(
            frozenset(
                FiniteSet(frozenset(elements[i] for i in np.flatnonzero(row)))
                for row in membership
            )
        )

    def set_iterator(self) -> Iterator[FiniteSet[T]]:
        """Iterates over the subsets of this set."""
        return iter(self.power_set())


def empty_set() -> FiniteSet[Any]:
    return _EMPTY


def union_of(sets: Iterable[Iterable[T]]) -> FiniteSet[T]:
    """Union of every set in a collection of sets."""
    return FiniteSet(frozenset(itertools.chain.from_iterable(sets)))


_EMPTY: FiniteSet[Any] = FiniteSet(frozenset())


__all__ = ["FiniteSet", "empty_set", "union_of"]
