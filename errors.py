"""
Error taxonomy for the set algebra and the structures built on it.

Every contract violation raises immediately at the call that detects it:
    InvalidArgument       - a precondition does not hold
    EmptySet              - an element was requested from an empty set
    NotFound              - a lookup target is absent (e.g. a Link endpoint)
    UnsupportedOperation  - structural misuse of a utility
"""


class SetAlgebraError(Exception):
    """Base class of every error raised by this library."""


class InvalidArgument(SetAlgebraError, ValueError):
    pass


class EmptySet(SetAlgebraError, LookupError):
    pass


class NotFound(SetAlgebraError, LookupError):
    pass


class UnsupportedOperation(SetAlgebraError, TypeError):
    pass


__all__ = [
    "SetAlgebraError",
    "InvalidArgument",
    "EmptySet",
    "NotFound",
    "UnsupportedOperation",
]
