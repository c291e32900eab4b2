"""
Sets carrying extra structure on their elements.

Hierarchy:
    FiniteSet
    ├── IndexedSet       - elements reachable through an index function
    ├── OrderedBase      - queries shared by sets carrying an Order
    │   └── OrderedSet   - a set with an explicit Order relation
    └── OrderedSequence  - indexed by position 0..n-1, ordered by position

An OrderedSequence is still a set: its elements are unique. Building one from
an iterable with repeated values raises InvalidArgument instead of silently
dropping the repeats. Equality stays set equality; compare `to_list()` when
the order matters.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from typing_extensions import override

from errors import EmptySet
from localtypes import I
from sets.finite import FiniteSet
from sets.functions import Comparison, Order
from utils.parallel import parallel_map
from utils.preconditions import check_argument

T = TypeVar("T", bound=Hashable)
U = TypeVar("U", bound=Hashable)


@dataclass(frozen=True, eq=False, repr=False)
class IndexedSet(FiniteSet[T], Generic[T, I]):
    """A set whose elements can be fetched through an index function."""

    indexer: Callable[[I], T]

    def at(self, index: I) -> T:
        return self.indexer(index)

    @classmethod
    def from_mapping(cls, mapping: Mapping[I, T]) -> IndexedSet[T, I]:
        frozen = dict(mapping)
        return IndexedSet(frozenset(frozen.values()), frozen.__getitem__)

    @override
    def image(self, f: Callable[[T], U], parallel: bool = False) -> IndexedSet[U, I]:
        """Image of the set, still indexed by the same indices."""
        at = self.at
        return IndexedSet(
            super().image(f, parallel=parallel).data, lambda index: f(at(index))
        )


class OrderedBase(FiniteSet[T]):
    """Order queries; subclasses provide the `order` attribute."""

    order: Order[T]

    def compare(self, t: T, u: T) -> Comparison:
        check_argument(
            t in self.data and u in self.data,
            f"Cannot compare {t!r} and {u!r}: not both members of the set",
        )
        return self.order.compare(t, u)

    def minima(self) -> FiniteSet[T]:
        """Elements with no smaller element in the set."""
        return self.such_that(
            lambda p: all(
                self.order.compare(q, p) is not Comparison.LESS for q in self.data
            )
        )

    def maxima(self) -> FiniteSet[T]:
        """Elements with no greater element in the set."""
        return self.such_that(
            lambda p: all(
                self.order.compare(q, p) is not Comparison.GREATER for q in self.data
            )
        )

    def more_than(self, t: T) -> FiniteSet[T]:
        return self.such_that(lambda p: self.order.compare(t, p) is Comparison.LESS)

    def less_than(self, t: T) -> FiniteSet[T]:
        return self.such_that(
            lambda p: self.order.compare(t, p) is Comparison.GREATER
        )

    def equal_to(self, t: T) -> FiniteSet[T]:
        return self.such_that(lambda p: self.order.compare(t, p) is Comparison.EQUAL)


@dataclass(frozen=True, eq=False, repr=False)
class OrderedSet(OrderedBase[T]):
    """A set ordered by an explicit (possibly partial) Order."""

    order: Order[T]


@dataclass(frozen=True, eq=False, repr=False, init=False)
class OrderedSequence(IndexedSet[T, int], OrderedBase[T]):
    """
    A set with a total order given by integer position.

    Attributes:
        elements: The elements in positional order.
    """

    elements: tuple[T, ...]
    positions: Mapping[T, int]

    def __init__(self, elements: Iterable[T] = ()) -> None:
        items = tuple(elements)
        positions = {e: i for i, e in enumerate(items)}
        check_argument(
            len(positions) == len(items),
            f"Ordered sequence elements must be unique, got {items!r}",
        )
        object.__setattr__(self, "data", frozenset(items))
        object.__setattr__(self, "indexer", items.__getitem__)
        object.__setattr__(self, "elements", items)
        object.__setattr__(self, "positions", positions)

    @override
    def __iter__(self) -> Iterator[T]:
        return iter(self.elements)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.elements)!r})"

    @property
    def order(self) -> Order[T]:  # type: ignore[override]
        positions = self.positions
        return Order(lambda t, u: Comparison.of(positions[t] - positions[u]))

    @override
    def at(self, index: int) -> T:
        check_argument(
            0 <= index < len(self.elements),
            f"Position {index} outside of a sequence of {len(self.elements)}",
        )
        return self.elements[index]

    def index_of(self, t: T) -> int:
        check_argument(t in self.positions, f"{t!r} is not in the sequence")
        return self.positions[t]

    def to_list(self) -> list[T]:
        return list(self.elements)

    def head(self) -> T:
        if not self.elements:
            raise EmptySet("Empty sequence has no head.")
        return self.elements[0]

    def tail(self) -> T:
        if not self.elements:
            raise EmptySet("Empty sequence has no tail.")
        return self.elements[-1]

    def next(self, t: T) -> T:
        """The element after t; the tail is its own successor."""
        index = self.index_of(t)
        return t if index == len(self.elements) - 1 else self.elements[index + 1]

    def prev(self, t: T) -> T:
        """The element before t; the head is its own predecessor."""
        index = self.index_of(t)
        return t if index == 0 else self.elements[index - 1]

    def sub_sequence(self, start: int, stop: int) -> OrderedSequence[T]:
        """Elements at positions start (inclusive) to stop (exclusive)."""
        return OrderedSequence(self.elements[start:stop])

    @override
    def image(
        self, f: Callable[[T], U], parallel: bool = False
    ) -> OrderedSequence[U]:
        """
        Image keeping positional order.

        When f maps several elements to the same value, the value keeps the
        position of its first preimage.
        """
        mapped = parallel_map(f, self.elements) if parallel else map(f, self.elements)
        return OrderedSequence(dict.fromkeys(mapped))


__all__ = ["IndexedSet", "OrderedBase", "OrderedSet", "OrderedSequence"]
