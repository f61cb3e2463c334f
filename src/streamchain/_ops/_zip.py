from __future__ import annotations

import builtins
import logging
from collections.abc import Iterable, Iterator
from typing import Any, Final, Never, overload

from .._errors import InvalidArgumentError, LengthMismatchError
from .._results import NONE, Option
from .._types import ZIP_STRATEGIES, ZipStrategy

logger = logging.getLogger(__name__)

_EXHAUSTED: Final = object()
"""Private end-of-source marker, never handed out to callers."""


class Zip(Iterator[tuple[Any, ...]]):
    """Advance N sources in lockstep, yielding one tuple per step.

    Values in each tuple follow the order of the sources.

    When the sources have unequal lengths, **strategy** decides:

    - `shortest`: stop at the first exhausted source. Sources after it are not pulled for that step.
    - `longest`: go on until every source is exhausted. Exhausted sources contribute the value of **fill_value**, or the `NONE` marker itself if it is `NONE`.
    - `strict`: every source is pulled at each step. All of them ending together stops cleanly, otherwise `LengthMismatchError` is raised.

    Args:
        iterables (Iterable[Iterable[Any]]): The sources.
        strategy (ZipStrategy): Unequal lengths policy. Defaults to `shortest`.
        fill_value (Option[Any]): Padding for the `longest` strategy. Defaults to `NONE`.

    Raises:
        InvalidArgumentError: On an unknown **strategy**, or a **fill_value** that is not an `Option`.
    """

    __slots__ = ("_active", "_done", "_exhausted", "_fill", "_iterators", "_step", "_strategy")

    def __init__(
        self,
        iterables: Iterable[Iterable[Any]],
        strategy: ZipStrategy = "shortest",
        fill_value: Option[Any] = NONE,
    ) -> None:
        if strategy not in ZIP_STRATEGIES:
            msg = f"Unrecognised zip strategy {strategy!r}, expected one of {sorted(ZIP_STRATEGIES)}"
            raise InvalidArgumentError(msg)
        if not isinstance(fill_value, Option):
            msg = f"fill_value must be an Option, got {type(fill_value).__name__}"
            raise InvalidArgumentError(msg)
        self._iterators = [iter(it) for it in iterables]
        self._strategy = strategy
        self._fill: Any = fill_value.unwrap() if fill_value.is_some() else NONE
        self._exhausted = [False] * len(self._iterators)
        self._active = len(self._iterators)
        self._step = 0
        self._done = not self._iterators
        logger.debug(
            "zip adapter created over %d source(s) with strategy=%s",
            len(self._iterators),
            strategy,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(sources={len(self._iterators)}, strategy={self._strategy!r})"

    def __next__(self) -> tuple[Any, ...]:
        if self._done:
            raise StopIteration
        match self._strategy:
            case "longest":
                values = self._next_longest()
            case "strict":
                values = self._next_strict()
            case _:
                values = self._next_shortest()
        self._step += 1
        return values

    def _stop(self) -> Never:
        self._done = True
        raise StopIteration

    def _next_shortest(self) -> tuple[Any, ...]:
        values: list[Any] = []
        for it in self._iterators:
            value = next(it, _EXHAUSTED)
            if value is _EXHAUSTED:
                self._stop()
            values.append(value)
        return tuple(values)

    def _next_longest(self) -> tuple[Any, ...]:
        values: list[Any] = []
        for idx, it in builtins.enumerate(self._iterators):
            if self._exhausted[idx]:
                values.append(self._fill)
                continue
            value = next(it, _EXHAUSTED)
            if value is _EXHAUSTED:
                self._exhausted[idx] = True
                self._active -= 1
                values.append(self._fill)
            else:
                values.append(value)
        if self._active == 0:
            self._stop()
        return tuple(values)

    def _next_strict(self) -> tuple[Any, ...]:
        values = [next(it, _EXHAUSTED) for it in self._iterators]
        ended = [idx for idx, value in builtins.enumerate(values) if value is _EXHAUSTED]
        if not ended:
            return tuple(values)
        if len(ended) == len(values):
            self._stop()
        self._done = True
        logger.debug(
            "strict zip: source(s) %s exhausted at step %d", ended, self._step
        )
        raise LengthMismatchError(self._step, ended)


@overload
def zip[T1](
    iter1: Iterable[T1],
    /,
    *,
    strategy: ZipStrategy = ...,
    fill_value: Option[Any] = ...,
) -> Iterator[tuple[T1]]: ...
@overload
def zip[T1, T2](
    iter1: Iterable[T1],
    iter2: Iterable[T2],
    /,
    *,
    strategy: ZipStrategy = ...,
    fill_value: Option[Any] = ...,
) -> Iterator[tuple[T1, T2]]: ...
@overload
def zip[T1, T2, T3](
    iter1: Iterable[T1],
    iter2: Iterable[T2],
    iter3: Iterable[T3],
    /,
    *,
    strategy: ZipStrategy = ...,
    fill_value: Option[Any] = ...,
) -> Iterator[tuple[T1, T2, T3]]: ...
@overload
def zip(
    *iterables: Iterable[Any],
    strategy: ZipStrategy = ...,
    fill_value: Option[Any] = ...,
) -> Iterator[tuple[Any, ...]]: ...
def zip(
    *iterables: Iterable[Any],
    strategy: ZipStrategy = "shortest",
    fill_value: Option[Any] = NONE,
) -> Iterator[tuple[Any, ...]]:
    """Yield tuples whose i-th value comes from the i-th iterable.

    See `Zip` for the strategies. With no iterables, nothing is yielded.

    Args:
        *iterables (Iterable[Any]): The sources.
        strategy (ZipStrategy): Unequal lengths policy. Defaults to `shortest`.
        fill_value (Option[Any]): Padding for the `longest` strategy. Defaults to `NONE`.

    Returns:
        Iterator[tuple[Any, ...]]: One tuple per step.

    Raises:
        InvalidArgumentError: On an unknown **strategy**, raised immediately.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.zip("abcd", range(3)))
    [('a', 0), ('b', 1), ('c', 2)]
    >>> list(sc.zip("abcd", range(3), strategy="longest", fill_value=sc.Some("X")))
    [('a', 0), ('b', 1), ('c', 2), ('d', 'X')]
    >>> list(sc.zip("ab", [0], strategy="longest"))
    [('a', 0), ('b', NONE)]
    >>> it = sc.zip("abcd", range(3), strategy="strict")
    >>> [next(it) for _ in range(3)]
    [('a', 0), ('b', 1), ('c', 2)]
    >>> next(it)
    Traceback (most recent call last):
        ...
    streamchain._errors.LengthMismatchError: Iterables have different lengths: source(s) [1] exhausted at step 3 before the others

    ```
    """
    return Zip(iterables, strategy, fill_value)
