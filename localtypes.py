"""
Type definitions shared by the set and graph packages.
"""

from collections.abc import Callable, Hashable
from typing import TypeVar

from typing_extensions import TypeAliasType

# Basic type variables for generic operations
T = TypeVar("T", bound=Hashable)
U = TypeVar("U", bound=Hashable)
I = TypeVar("I")  # noqa: E741

E = TypeVar("E")
V = TypeVar("V")

Predicate = TypeAliasType("Predicate", Callable[[E], bool], type_params=(E,))
Projection = TypeAliasType("Projection", Callable[[E], float], type_params=(E,))

# A chooser receives the neighbours of the current vertex and picks one
Chooser = TypeAliasType("Chooser", Callable[[V], E], type_params=(V, E))


__all__ = [
    "T",
    "U",
    "I",
    "Predicate",
    "Projection",
    "Chooser",
]
