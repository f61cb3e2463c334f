from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator
from enum import Enum, auto
from typing import Any

from .._errors import IncompleteChunkError, InvalidArgumentError
from .._results import NONE, Option
from .._types import CHUNK_STRATEGIES, ChunkStrategy

logger = logging.getLogger(__name__)


class _WindowState(Enum):
    FILLING = auto()
    SLIDING = auto()
    DONE = auto()


class Window[T](Iterator[tuple[T, ...]]):
    """Sliding windows of a fixed size over an iterable.

    The adapter owns a circular buffer of **size** slots.

    Each new element overwrites the logically oldest slot, and the window is yielded as a fresh tuple ordered from oldest to newest.

    Args:
        iterable (Iterable[T]): Source elements.
        size (int): Number of elements in each window.

    Raises:
        InvalidArgumentError: If **size** is not strictly positive.
    """

    __slots__ = ("_buffer", "_front", "_it", "_size", "_state")

    def __init__(self, iterable: Iterable[T], size: int) -> None:
        if size <= 0:
            msg = f"Cannot yield sliding windows of size <= 0 (got {size})"
            raise InvalidArgumentError(msg)
        self._it = iter(iterable)
        self._size = size
        self._buffer: list[T] = []
        self._front = 0
        self._state = _WindowState.FILLING
        logger.debug("window adapter created with size=%d", size)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size})"

    def __next__(self) -> tuple[T, ...]:
        match self._state:
            case _WindowState.FILLING:
                self._buffer.extend(itertools.islice(self._it, self._size))
                if len(self._buffer) < self._size:
                    self._state = _WindowState.DONE
                    self._buffer.clear()
                    raise StopIteration
                self._state = _WindowState.SLIDING
                return tuple(self._buffer)
            case _WindowState.SLIDING:
                try:
                    element = next(self._it)
                except StopIteration:
                    self._state = _WindowState.DONE
                    raise
                self._buffer[self._front] = element
                self._front = (self._front + 1) % self._size
                return (*self._buffer[self._front :], *self._buffer[: self._front])
            case _WindowState.DONE:
                raise StopIteration


def window[T](iterable: Iterable[T], size: int) -> Iterator[tuple[T, ...]]:
    """Yield every contiguous window of **size** elements.

    Yields `max(0, len(iterable) - size + 1)` tuples.

    Args:
        iterable (Iterable[T]): Source elements.
        size (int): Number of elements in each window.

    Returns:
        Iterator[tuple[T, ...]]: The windows, oldest element first.

    Raises:
        InvalidArgumentError: If **size** is not strictly positive, raised immediately.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.window("abcd", 2))
    [('a', 'b'), ('b', 'c'), ('c', 'd')]
    >>> list(sc.window("abc", 4))
    []

    ```
    """
    return Window(iterable, size)


windowed = window


class Chunk[T](Iterator[tuple[T, ...]]):
    """Consecutive non-overlapping groups of a fixed size.

    The trailing group, when smaller than **size**, is handled according to **strategy**:

    - `dropEnd`: discarded.
    - `keepEnd`: yielded as-is.
    - `strict`: `IncompleteChunkError` is raised by the pull that finds it.
    - `fill`: padded to **size** with the value of **fill_value**.

    Args:
        iterable (Iterable[T]): Source elements.
        size (int): Number of elements in each group.
        strategy (ChunkStrategy): Trailing group policy. Defaults to `dropEnd`.
        fill_value (Option[T]): Padding value, required by the `fill` strategy. Defaults to `NONE`.

    Raises:
        InvalidArgumentError: On a non positive **size**, an unknown **strategy**, or `fill` without a **fill_value**.
    """

    __slots__ = ("_done", "_fill_value", "_it", "_size", "_strategy")

    def __init__(
        self,
        iterable: Iterable[T],
        size: int,
        strategy: ChunkStrategy = "dropEnd",
        fill_value: Option[T] = NONE,
    ) -> None:
        if size <= 0:
            msg = f"Cannot yield chunks of size <= 0 (got {size})"
            raise InvalidArgumentError(msg)
        if strategy not in CHUNK_STRATEGIES:
            msg = f"Unrecognised chunk strategy {strategy!r}, expected one of {sorted(CHUNK_STRATEGIES)}"
            raise InvalidArgumentError(msg)
        if not isinstance(fill_value, Option):
            msg = f"fill_value must be an Option, got {type(fill_value).__name__}"
            raise InvalidArgumentError(msg)
        if strategy == "fill" and fill_value.is_none():
            msg = "The `fill` chunk strategy requires a fill_value"
            raise InvalidArgumentError(msg)
        self._it = iter(iterable)
        self._size = size
        self._strategy = strategy
        self._fill_value = fill_value
        self._done = False
        logger.debug("chunk adapter created with size=%d strategy=%s", size, strategy)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, strategy={self._strategy!r})"

    def __next__(self) -> tuple[T, ...]:
        if self._done:
            raise StopIteration
        group = tuple(itertools.islice(self._it, self._size))
        if len(group) == self._size:
            return group
        self._done = True
        if not group:
            raise StopIteration
        return self._trailing(group)

    def _trailing(self, group: tuple[T, ...]) -> tuple[T, ...]:
        match self._strategy:
            case "keepEnd":
                return group
            case "fill":
                return group + (self._fill_value.unwrap(),) * (self._size - len(group))
            case "strict":
                logger.debug(
                    "strict chunking found %d leftover item(s) for size=%d",
                    len(group),
                    self._size,
                )
                raise IncompleteChunkError(group, self._size)
            case _:
                raise StopIteration


def chunk[T](
    iterable: Iterable[T],
    size: int,
    *,
    strategy: ChunkStrategy = "dropEnd",
    fill_value: Option[Any] = NONE,
) -> Iterator[tuple[T, ...]]:
    """Group elements into tuples of **size** elements.

    Each group is yielded as soon as it is full.

    See `Chunk` for the trailing group strategies.

    Args:
        iterable (Iterable[T]): Source elements.
        size (int): Number of elements in each group.
        strategy (ChunkStrategy): Trailing group policy. Defaults to `dropEnd`.
        fill_value (Option[Any]): Padding value for the `fill` strategy. Defaults to `NONE`.

    Returns:
        Iterator[tuple[T, ...]]: The groups.

    Raises:
        InvalidArgumentError: On invalid arguments, raised immediately.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.chunk([1, 2, 3, 4, 5], 2))
    [(1, 2), (3, 4)]
    >>> list(sc.chunk([1, 2, 3, 4, 5], 2, strategy="keepEnd"))
    [(1, 2), (3, 4), (5,)]
    >>> list(sc.chunk([1, 2, 3, 4, 5], 2, strategy="fill", fill_value=sc.Some(0)))
    [(1, 2), (3, 4), (5, 0)]
    >>> it = sc.chunk([1, 2, 3, 4, 5], 2, strategy="strict")
    >>> next(it), next(it)
    ((1, 2), (3, 4))
    >>> next(it)
    Traceback (most recent call last):
        ...
    streamchain._errors.IncompleteChunkError: Incomplete trailing chunk: got 1 of 2 items

    ```
    """
    return Chunk(iterable, size, strategy, fill_value)
