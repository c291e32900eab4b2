"""
Tagged values for disjoint unions.

An OptionalPair holds a value on exactly one of its two sides; the side
records which operand of a direct sum the value came from.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from utils.preconditions import check_argument

L = TypeVar("L")
R = TypeVar("R")
A = TypeVar("A")
B = TypeVar("B")


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OptionalPair(Generic[L, R]):
    """
    A pair with exactly one populated slot.

    Attributes:
        left: The value when it comes from the left operand, else None.
        right: The value when it comes from the right operand, else None.
    """

    left: L | None
    right: R | None

    def __post_init__(self) -> None:
        check_argument(
            (self.left is None) != (self.right is None),
            f"Exactly one side must be populated, got ({self.left!r}, {self.right!r})",
        )

    @classmethod
    def left_of(cls, value: L) -> OptionalPair[L, Any]:
        return cls(value, None)

    @classmethod
    def right_of(cls, value: R) -> OptionalPair[Any, R]:
        return cls(None, value)

    @classmethod
    def of(cls, pair: tuple[L | None, R | None]) -> OptionalPair[L, R]:
        left, right = pair
        return cls(left, right)

    @property
    def side(self) -> Side:
        return Side.LEFT if self.right is None else Side.RIGHT

    @property
    def value(self) -> L | R:
        return self.left if self.right is None else self.right  # type: ignore[return-value]

    def flat_map(
        self, function: Callable[[L | None, R | None], OptionalPair[A, B]]
    ) -> OptionalPair[A, B]:
        """Dispatches on the populated side, passing None for the other."""
        match self.side:
            case Side.LEFT:
                return function(self.left, None)
            case Side.RIGHT:
                return function(None, self.right)

    def __str__(self) -> str:
        return f"{self.side.value}:{self.value}"


__all__ = ["Side", "OptionalPair"]
