from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Iterator
from typing import overload

from .._errors import InvalidArgumentError
from .._results import NONE, Option, Some
from .._types import Equality, Fold
from .._utils import with_arity

logger = logging.getLogger(__name__)


class Cycle[T](Iterator[T]):
    """Replay an iterable indefinitely, saving its elements on the first pass.

    Note:
        O(n) auxiliary space, where n is the length of the source.
    """

    __slots__ = ("_exhausted", "_it", "_pos", "_saved")

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it = iter(iterable)
        self._saved: list[T] = []
        self._pos = 0
        self._exhausted = False

    def __next__(self) -> T:
        if not self._exhausted:
            try:
                element = next(self._it)
            except StopIteration:
                if not self._saved:
                    raise
                self._exhausted = True
            else:
                self._saved.append(element)
                return element
        element = self._saved[self._pos]
        self._pos = (self._pos + 1) % len(self._saved)
        return element


def cycle[T](iterable: Iterable[T]) -> Iterator[T]:
    """Repeat the elements of **iterable** indefinitely.

    **Warning** ⚠️
        This creates an infinite iterator, unless **iterable** is empty.

    Args:
        iterable (Iterable[T]): Source elements.

    Returns:
        Iterator[T]: The source elements, over and over. Empty if the source is empty.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.take(sc.cycle([1, 2, 3]), 7))
    [1, 2, 3, 1, 2, 3, 1]
    >>> list(sc.cycle([]))
    []

    ```
    """
    return Cycle(iterable)


class Dedup[T](Iterator[T]):
    """Collapse runs of consecutive equal elements into their first element.

    Only the last yielded element is kept, so non adjacent repeats are preserved.

    Args:
        iterable (Iterable[T]): Source elements.
        eq (Equality[T]): Called as `eq(element, last)`. Defaults to `operator.eq`.
    """

    __slots__ = ("_eq", "_it", "_last")

    def __init__(self, iterable: Iterable[T], eq: Equality[T] = operator.eq) -> None:
        self._it = iter(iterable)
        self._eq = eq
        self._last: Option[T] = NONE
        logger.debug("dedup adapter created with eq=%r", eq)

    def __next__(self) -> T:
        if self._last.is_none():
            first = next(self._it)
            self._last = Some(first)
            return first
        last = self._last.unwrap()
        for element in self._it:
            if not self._eq(element, last):
                self._last = Some(element)
                return element
        raise StopIteration


def dedup[T](iterable: Iterable[T], *, eq: Equality[T] = operator.eq) -> Iterator[T]:
    """Remove consecutive duplicates.

    The first element is always yielded.
    Every following element is yielded only if `eq(element, last)` is false, `last` being the previously yielded element.

    Args:
        iterable (Iterable[T]): Source elements.
        eq (Equality[T]): Equality function. Defaults to `operator.eq`.

    Returns:
        Iterator[T]: The elements, with contiguous runs collapsed.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.dedup([1, 2, 2, 3, 3, 3, 4, 4, 4, 4, 3, 3, 3, 2, 2, 1]))
    [1, 2, 3, 4, 3, 2, 1]
    >>> list(sc.dedup(["a", "A", "b"], eq=lambda e, last: e.lower() == last.lower()))
    ['a', 'b']

    ```
    """
    return Dedup(iterable, eq)


class Scan[T, U](Iterator[U]):
    """Running fold over an iterable.

    Without **initial**, the first element seeds the accumulator and is yielded as-is; the following fold calls receive indices from 1.

    With **initial**, the accumulator starts from its value, which is not yielded; fold calls receive indices from 0.

    Args:
        iterable (Iterable[T]): Source elements.
        fold (Fold[U, T]): Called as `fold(acc, element, index)`, the index being optional.
        initial (Option[U]): Starting accumulator. Defaults to `NONE`.
    """

    __slots__ = ("_acc", "_fold", "_index", "_it", "_seeded")

    def __init__(
        self, iterable: Iterable[T], fold: Fold[U, T], initial: Option[U] = NONE
    ) -> None:
        if not isinstance(initial, Option):
            msg = f"initial must be an Option, got {type(initial).__name__}"
            raise InvalidArgumentError(msg)
        self._it = iter(iterable)
        self._fold = with_arity(fold, 3)
        self._seeded = initial.is_some()
        self._acc: U | None = initial.unwrap() if self._seeded else None
        self._index = 0 if self._seeded else 1
        logger.debug("scan adapter created, initial given: %s", self._seeded)

    def __next__(self) -> U:
        if not self._seeded:
            first: U = next(self._it)  # type: ignore[assignment]
            self._acc = first
            self._seeded = True
            return first
        acc = self._fold(self._acc, next(self._it), self._index)
        self._acc = acc
        self._index += 1
        return acc


@overload
def scan[T](iterable: Iterable[T], fold: Fold[T, T]) -> Iterator[T]: ...
@overload
def scan[T, U](
    iterable: Iterable[T], fold: Fold[U, T], initial: Option[U]
) -> Iterator[U]: ...
def scan[T, U](
    iterable: Iterable[T], fold: Fold[U, T], initial: Option[U] = NONE
) -> Iterator[U]:
    """Yield every intermediate value of a left fold.

    Args:
        iterable (Iterable[T]): Source elements.
        fold (Fold[U, T]): Function of the accumulator, the element, and optionally the index.
        initial (Option[U]): Starting accumulator. Defaults to `NONE`, in which case the first element is used and yielded.

    Returns:
        Iterator[U]: The successive accumulator values.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.scan([3, 1, 4, 1, 5], lambda a, e: a + e))
    [3, 4, 8, 9, 14]
    >>> list(sc.scan("abc", lambda a, e, i: a + e + str(i), sc.Some("X")))
    ['Xa0', 'Xa0b1', 'Xa0b1c2']
    >>> list(sc.scan([], lambda a, e: a + e, sc.Some(0)))
    []

    ```
    """
    return Scan(iterable, fold, initial)
