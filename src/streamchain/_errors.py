from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class StreamError(Exception):
    """Base class for every error raised by a streamchain adapter."""


class InvalidArgumentError(StreamError, ValueError):
    """An adapter was built with an argument it cannot work with.

    Raised eagerly, when the adapter function is called, before anything is pulled from the source.

    Example:
    ```python
    >>> import streamchain as sc
    >>> sc.take([1, 2, 3], -1)
    Traceback (most recent call last):
        ...
    streamchain._errors.InvalidArgumentError: Cannot take < 0 items (got -1)

    ```
    """


class IncompleteChunkError(StreamError, ValueError):
    """A `strict` chunking ended with a group smaller than the chunk size."""

    leftover: tuple[Any, ...]
    size: int

    def __init__(self, leftover: tuple[Any, ...], size: int) -> None:
        self.leftover = leftover
        self.size = size
        super().__init__(
            f"Incomplete trailing chunk: got {len(leftover)} of {size} items"
        )


class LengthMismatchError(StreamError, ValueError):
    """A `strict` zip found sources exhausted at different steps."""

    step: int
    exhausted: tuple[int, ...]

    def __init__(self, step: int, exhausted: Sequence[int]) -> None:
        self.step = step
        self.exhausted = tuple(exhausted)
        super().__init__(
            f"Iterables have different lengths: source(s) {list(self.exhausted)} "
            f"exhausted at step {step} before the others"
        )


__all__ = (
    "IncompleteChunkError",
    "InvalidArgumentError",
    "LengthMismatchError",
    "StreamError",
)
