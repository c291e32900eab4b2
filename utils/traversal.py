"""
Tree traversal utilities.

Traversals:
    breadth_first_preorder(after, root) - nodes level by level, root first
    depth_first_preorder(after, root)   - parent before children
    depth_first_postorder(after, root)  - children before parent

`after` maps a node to an iterable of its children. Nothing is recursive:
the depth-first traversals keep a stack of child iterators, so a chain of
nodes deeper than the recursion limit is traversed without error.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")

_EXHAUSTED = object()


def breadth_first_preorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    if root is None:
        return
    level = [root]
    while level:
        yield from level
        level = [child for node in level for child in after(node)]


def depth_first_preorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    if root is None:
        return
    yield root
    pending = [iter(after(root))]
    while pending:
        child = next(pending[-1], _EXHAUSTED)
        if child is _EXHAUSTED:
            pending.pop()
            continue
        yield child
        pending.append(iter(after(child)))


def depth_first_postorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    """Each node is yielded once its last child iterator is exhausted."""
    if root is None:
        return
    pending: list[tuple[T, Iterator[T]]] = [(root, iter(after(root)))]
    while pending:
        node, children = pending[-1]
        child = next(children, _EXHAUSTED)
        if child is _EXHAUSTED:
            pending.pop()
            yield node
        else:
            pending.append((child, iter(after(child))))


__all__ = [
    "breadth_first_preorder",
    "depth_first_preorder",
    "depth_first_postorder",
]
