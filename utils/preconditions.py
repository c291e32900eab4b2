"""
Precondition checking.

    check_argument(condition, message) - raise InvalidArgument unless condition holds
"""

from errors import InvalidArgument, UnsupportedOperation


class Preconditions:
    """Namespace for argument checks. Not meant to be instantiated."""

    def __init__(self) -> None:
        raise UnsupportedOperation("Preconditions is a namespace, not a type")

    @staticmethod
    def check_argument(condition: bool, message: str = "") -> None:
        if not condition:
            raise InvalidArgument(message)


check_argument = Preconditions.check_argument


__all__ = ["Preconditions", "check_argument"]
