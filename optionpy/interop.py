from __future__ import annotations
from typing import Callable, Iterable, Mapping, TypeVar

from .option import Option, Some, NONE

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def detect(items: Iterable[T], predicate: Callable[[T], bool]) -> Option[T]:
    """First element of ``items`` satisfying ``predicate``, or ``NONE``."""
    for x in items:
        if predicate(x):
            return Some(x)
    return NONE


def fetch(mapping: Mapping[K, V], key: K) -> Option[V]:
    # membership first so defaultdict never grows
    if key in mapping:
        return Some(mapping[key])
    return NONE
