"""
Sets decomposed into equivalence classes.

A PartitionSet is a FiniteSet together with its `components`: non-empty,
pairwise disjoint subsets whose union is the whole set. Partitions are built
either from explicit classes or from an equivalence relation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import TypeVar

import constants
from sets.finite import FiniteSet
from sets.functions import Equivalence
from utils.preconditions import check_argument

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True, eq=False, repr=False, init=False)
class PartitionSet(FiniteSet[T]):
    """
    A set with its decomposition into disjoint equivalence classes.

    Attributes:
        components: The set of equivalence classes.
    """

    components: FiniteSet[FiniteSet[T]]
    class_of: Mapping[T, FiniteSet[T]]

    def __init__(self, components: Iterable[Iterable[T]] = ()) -> None:
        """
        Builds a partition from explicit classes.

        Raises:
            InvalidArgument: If a class is empty or two classes overlap.
        """
        classes = FiniteSet(frozenset(FiniteSet(frozenset(c)) for c in components))
        class_of: dict[T, FiniteSet[T]] = {}
        for component in classes:
            check_argument(not component.is_empty(), "Partition classes must be non-empty")
            for element in component:
                check_argument(
                    element not in class_of,
                    f"{element!r} lies in two classes: {class_of.get(element)!r} and {component!r}",
                )
                class_of[element] = component
        object.__setattr__(self, "data", frozenset(class_of))
        object.__setattr__(self, "components", classes)
        object.__setattr__(self, "class_of", class_of)

    @classmethod
    def single(cls, data: Iterable[T]) -> PartitionSet[T]:
        """Partition with a single class (no class for the empty set)."""
        elements = frozenset(data)
        return cls((elements,) if elements else ())

    @classmethod
    def from_relation(
        cls,
        data: FiniteSet[T],
        relation: Equivalence[T] | Callable[[T, T], bool],
        validate: bool | None = None,
    ) -> PartitionSet[T]:
        """
        Derives the partition induced by an equivalence relation.

        Each element e is mapped to its class {x in data : relation(e, x)};
        equal classes coalesce since the result is a set of sets.

        Args:
            data: The set to partition.
            relation: Expected reflexive, symmetric and transitive.
            validate: Run the full equivalence check first. Defaults to
                constants.VALIDATE_EQUIVALENCE.

        Raises:
            InvalidArgument: If validation fails, or if the derived classes
                overlap or do not cover data.
        """
        equivalence = (
            relation if isinstance(relation, Equivalence) else Equivalence(relation)
        )
        if constants.VALIDATE_EQUIVALENCE if validate is None else validate:
            equivalence.check_on(data)

        classes = data.image(
            lambda e: equivalence.partial_apply(e)
            .pre_image_of_element(True)
            .solve_in(data)
        )
        partition = cls(classes)
        check_argument(
            partition.data == data.data,
            f"Relation classes do not cover the set: missing {data.minus_set(partition)!r}",
        )
        logger.debug(
            f"Partitioned {data.cardinality()} elements into {partition.number_of_components()} classes"
        )
        return partition

    def component(self, t: T) -> FiniteSet[T]:
        """The equivalence class in which t lies."""
        check_argument(t in self.class_of, f"{t!r} is not in the partitioned set")
        return self.class_of[t]

    def are_equivalent(self, t: T, u: T) -> bool:
        return self.component(t) == self.component(u)

    def representing(self, component: FiniteSet[T]) -> T:
        """An element of the given class."""
        check_argument(
            component in self.components, f"{component!r} is not a class of the partition"
        )
        return component.get_element_or_throw()

    def representants(self) -> FiniteSet[T]:
        """One element per equivalence class."""
        return self.components.image(self.representing)

    def number_of_components(self) -> int:
        return self.components.cardinality()


__all__ = ["PartitionSet"]
