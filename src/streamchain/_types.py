from __future__ import annotations

from collections.abc import Callable
from typing import Literal, NamedTuple

# callbacks: the trailing index argument is optional, see `_utils.with_arity`

type Predicate[T] = Callable[[T, int], object] | Callable[[T], object]
"""A function deciding on an element, optionally given its index."""
type Mapping[T, R] = Callable[[T, int], R] | Callable[[T], R]
"""A function transforming an element, optionally given its index."""
type Consumer[T] = Callable[[T, int], object] | Callable[[T], object]
"""A function called for its side effects on an element, optionally given its index."""
type Update[T] = Callable[[T, int], T] | Callable[[T], T]
"""A function computing the next value from the previous one, optionally given an index."""
type Fold[U, T] = Callable[[U, T, int], U] | Callable[[U, T], U]
"""A function combining an accumulator and an element, optionally given an index."""
type Equality[T] = Callable[[T, T], object]
"""A function telling whether two elements are equal."""

# strategies

type ChunkStrategy = Literal["dropEnd", "keepEnd", "strict", "fill"]
"""How `chunk` handles a trailing group smaller than the chunk size."""
type ZipStrategy = Literal["shortest", "longest", "strict"]
"""How `zip` handles sources of unequal length."""

CHUNK_STRATEGIES: frozenset[str] = frozenset({"dropEnd", "keepEnd", "strict", "fill"})
ZIP_STRATEGIES: frozenset[str] = frozenset({"shortest", "longest", "strict"})

# Iterations result types


class Enumerated[T](NamedTuple):
    """Represents an item with its associated index in an enumeration.

    See `enumerate()` for details.
    """

    idx: int
    """The index of the item in the enumeration."""
    value: T
    """The value of the item."""

    def __repr__(self) -> str:
        return f"({self.idx}, {self.value.__repr__()})"
