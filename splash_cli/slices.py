"""Small functional helpers over iterables."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")


def map_items(items: Iterable[T], fn: Callable[[T], U]) -> list[U]:
    """Apply ``fn`` to every item and return the results as a list."""
    return [fn(item) for item in items]


def filter_items(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the items for which ``predicate`` holds."""
    return [item for item in items if predicate(item)]


def reduce_items(initial: U, items: Iterable[T], fn: Callable[[U, T, int], U]) -> U:
    """Fold ``items`` into ``initial``; ``fn`` receives (accumulator, item, index)."""
    accumulator = initial
    for index, item in enumerate(items):
        accumulator = fn(accumulator, item, index)
    return accumulator


def some(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if ``predicate`` holds for at least one item."""
    return any(predicate(item) for item in items)


def every(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Evaluate ``predicate`` on every item and return its verdict on the last one.

    An empty iterable gives False.
    """
    verdict = False
    for item in items:
        verdict = bool(predicate(item))
    return verdict