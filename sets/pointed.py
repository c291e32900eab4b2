"""
Sets with a distinguished element.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import TypeVar

from typing_extensions import override

from sets.finite import FiniteSet
from utils.preconditions import check_argument

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True, eq=False, repr=False)
class PointedSet(FiniteSet[T]):
    """
    A set remembering one of its elements.

    Attributes:
        point: The distinguished element, None only for the empty set.
    """

    point: T | None

    def __post_init__(self) -> None:
        super().__post_init__()
        check_argument(
            self.point in self.data if self.data else self.point is None,
            f"Point {self.point!r} is not an element of the set",
        )

    @override
    def get_element_or_throw(self) -> T:
        if self.point is None:
            return super().get_element_or_throw()
        return self.point


__all__ = ["PointedSet"]
