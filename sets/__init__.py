"""
Finite set algebra.

This package provides immutable finite sets and the structures derived from
them:

**Finite sets** (finite.py)
    Union, intersection, difference, filtering, images, power sets.
    - FiniteSet, empty_set, union_of

**Functions** (functions.py)
    Element functions lifted to sets, predicates solved in sets, relations.
    - SetFunction, Equation, Relation, Equivalence, Order, Comparison

**Ordered sets** (ordered.py)
    - IndexedSet, OrderedSet, OrderedSequence

**Partitions** (partition.py)
    - PartitionSet

**Pointed sets and tagged pairs** (pointed.py, pair.py)
    - PointedSet, OptionalPair, Side

The graph structures built on these sets live in graphs/.
"""

from .finite import FiniteSet, empty_set, union_of
from .functions import (
    Comparison,
    Equation,
    Equivalence,
    Order,
    Relation,
    SetFunction,
)
from .ordered import IndexedSet, OrderedBase, OrderedSequence, OrderedSet
from .pair import OptionalPair, Side
from .partition import PartitionSet
from .pointed import PointedSet

__all__ = [
    # Finite sets
    "FiniteSet",
    "empty_set",
    "union_of",
    # Functions
    "SetFunction",
    "Equation",
    "Relation",
    "Equivalence",
    "Order",
    "Comparison",
    # Ordered sets
    "IndexedSet",
    "OrderedBase",
    "OrderedSet",
    "OrderedSequence",
    # Partitions
    "PartitionSet",
    # Pointed sets and tagged pairs
    "PointedSet",
    "OptionalPair",
    "Side",
]
