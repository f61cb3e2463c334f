from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, overload

import more_itertools as mit

from . import _ops as ops
from ._common import CommonMethods, convert_data
from ._results import NONE, Option, Some
from ._types import (
    ChunkStrategy,
    Consumer,
    Enumerated,
    Equality,
    Fold,
    Mapping,
    Predicate,
    Update,
    ZipStrategy,
)

if TYPE_CHECKING:
    from ._eager import Seq


class Iter[T](CommonMethods[T], Iterator[T]):
    """A chainable wrapper around Python's `Iterator` Protocol, exposing every streamchain adapter as a method.

    Implements the `Iterator` Protocol from `collections.abc`, so it can be used as a standard iterator.

    - Every method returning an `Iter` is lazy: nothing is pulled from the source until the result is iterated.
    - Once an `Iter` is exhausted, it cannot be reused or reset.

    If you need to reuse the data, collect it into a `Seq` first with `.collect()`, and get a new `Iter` with `Seq.iter()`.

    Callbacks given to `map`, `filter`, `take_while`, `drop_while`, `peek` and `flat_map` may accept the element only, or the element and its index.

    Args:
        data (Iterable[T]): Any object that can be iterated over.

    Example:
    ```python
    >>> import streamchain as sc
    >>> sc.Iter(range(10)).filter(lambda x: x % 3 == 0).map(lambda x, i: (i, x)).collect()
    Seq((0, 0), (1, 3), (2, 6), (3, 9))

    ```
    """

    _inner: Iterator[T]

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)  # pyright: ignore[reportIncompatibleVariableOverride]

    def __next__(self) -> T:
        return next(self._inner)

    def next(self) -> Option[T]:
        """Return the next element in the iterator, wrapped in an `Option`.

        Note:
            `.__next__()` is the method called when iterating over the `Iter` instance.

            `Iter.next()` handles exhaustion without exceptions, by returning `NONE`.

        Returns:
            Option[T]: `Some[T]`, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import streamchain as sc
        >>> it = sc.Iter([1, None])
        >>> it.next()
        Some(value=1)
        >>> it.next()
        Some(value=None)
        >>> it.next()
        NONE

        ```
        """
        try:
            return Some(next(self._inner))
        except StopIteration:
            return NONE

    # constructors ------------------------------------------------------------
    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if 'data' is not an Iterable.

        Returns:
            Iter[U]: A new Iter instance containing the provided data.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(convert_data(data, *more_data))

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iter` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use `Iter.take()` to limit the number of items taken.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter.from_count(10, 2).take(3).collect()
        Seq(10, 12, 14)

        ```
        """
        return Iter(ops.count(start, step))

    @staticmethod
    def from_fn[U](seed: U, update: Update[U]) -> Iter[U]:
        """Create an infinite `Iter` yielding **seed**, then `seed = update(seed, index)` repeatedly.

        **Warning** ⚠️
            This creates an infinite iterator.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter.from_fn(1, lambda x: x * 3).take(4).collect()
        Seq(1, 3, 9, 27)

        ```
        """
        return Iter(ops.iterate(seed, update))

    @staticmethod
    def from_repeat[U](value: U, times: int | None = None) -> Iter[U]:
        """Create an `Iter` repeating **value** forever, or **times** times.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter.from_repeat("x", 2).collect()
        Seq('x', 'x')

        ```
        """
        return Iter(ops.repeat(value, times))

    # terminals ------------------------------------------------------------
    def collect(self) -> Seq[T]:
        """Consume the `Iter` into a `Seq`.

        Returns:
            Seq[T]: The collected elements.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter("ab").collect()
        Seq('a', 'b')

        ```
        """
        from ._eager import Seq

        return Seq(self._inner)

    def for_each(self, func: Consumer[T]) -> None:
        """Consume the `Iter`, calling **func** on each element.

        Args:
            func (Consumer[T]): Function of the element, and optionally its index.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter("ab").for_each(lambda e, i: print(i, e))
        0 a
        1 b

        ```
        """
        mit.consume(ops.peek(self._inner, func))

    # simple adapters ------------------------------------------------------------
    def map[R](self, func: Mapping[T, R]) -> Iter[R]:
        """Map each element through **func**.

        Args:
            func (Mapping[T, R]): Function of the element, and optionally its index.

        Returns:
            Iter[R]: The transformed elements.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter([1, 2]).map(lambda x: x + 1).collect()
        Seq(2, 3)

        ```
        """
        return self._iter(ops.map, func)

    def filter(self, func: Predicate[T]) -> Iter[T]:
        """Keep the elements for which **func** is truthy.

        The optional index is the position of the element in the source.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter((1, 2, 3)).filter(lambda x: x > 1).collect()
        Seq(2, 3)

        ```
        """
        return self._iter(ops.filter, func)

    def take(self, n: int) -> Iter[T]:
        """Yield the first **n** elements, or fewer if the source ends sooner.

        Raises `InvalidArgumentError` immediately if **n** is negative.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter([1, 2, 3]).take(2).collect()
        Seq(1, 2)

        ```
        """
        return self._iter(ops.take, n)

    def drop(self, n: int) -> Iter[T]:
        """Skip the first **n** elements.

        Raises `InvalidArgumentError` immediately if **n** is negative.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter((1, 2, 3)).drop(1).collect()
        Seq(2, 3)

        ```
        """
        return self._iter(ops.drop, n)

    def take_while(self, predicate: Predicate[T]) -> Iter[T]:
        """Take items while **predicate** holds.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter((1, 2, 0, 3)).take_while(lambda x: x > 0).collect()
        Seq(1, 2)

        ```
        """
        return self._iter(ops.take_while, predicate)

    def drop_while(self, predicate: Predicate[T]) -> Iter[T]:
        """Drop items while **predicate** holds.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter((1, 2, 0, 3)).drop_while(lambda x: x > 0).collect()
        Seq(0, 3)

        ```
        """
        return self._iter(ops.drop_while, predicate)

    def peek(self, func: Consumer[T]) -> Iter[T]:
        """Call **func** on each element as it goes through, without changing it.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter([1, 2]).peek(lambda x: print(x)).map(lambda x: x * 10).collect()
        1
        2
        Seq(10, 20)

        ```
        """
        return self._iter(ops.peek, func)

    def flat_map[R](self, func: Mapping[T, Iterable[R]]) -> Iter[R]:
        """Map each element to an iterable and flatten the result by one level.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter(["ab", "c"]).flat_map(lambda s: s.upper()).collect()
        Seq('A', 'B', 'C')

        ```
        """
        return self._iter(ops.flat_map, func)

    def cycle(self) -> Iter[T]:
        """Repeat the sequence indefinitely.

        **Warning** ⚠️
            This creates an infinite iterator, unless the source is empty.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter((1, 2)).cycle().take(5).collect()
        Seq(1, 2, 1, 2, 1)

        ```
        """
        return self._iter(ops.cycle)

    def chain(self, *others: Iterable[T]) -> Iter[T]:
        """Yield this iterator's elements, then those of each of **others**.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter([1]).chain([2], (3, 4)).collect()
        Seq(1, 2, 3, 4)

        ```
        """

        def _chain(data: Iterable[T]) -> Iterator[T]:
            return ops.chain(data, *others)

        return self._iter(_chain)

    def enumerate(self, start: int = 0) -> Iter[Enumerated[T]]:
        """Return an `Iter` of `(idx, value)` pairs, **idx** starting at **start**.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter(["a", "b"]).enumerate().collect()
        Seq((0, 'a'), (1, 'b'))

        ```
        """
        return self._iter(ops.enumerate, start)

    # buffered adapters ------------------------------------------------------------
    def window(self, size: int) -> Iter[tuple[T, ...]]:
        """Yield every contiguous window of **size** elements, as tuples.

        Raises `InvalidArgumentError` immediately if **size** is not strictly positive.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter([1, 2, 3, 4]).window(3).collect()
        Seq((1, 2, 3), (2, 3, 4))

        ```
        """
        return self._iter(ops.window, size)

    def chunk(
        self,
        size: int,
        *,
        strategy: ChunkStrategy = "dropEnd",
        fill_value: Option[Any] = NONE,
    ) -> Iter[tuple[T, ...]]:
        """Group elements into tuples of **size** elements.

        See `chunk()` for the trailing group strategies.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter("ABCDEFG").chunk(3, strategy="keepEnd").collect()
        Seq(('A', 'B', 'C'), ('D', 'E', 'F'), ('G',))

        ```
        """
        return self._iter(ops.chunk, size, strategy=strategy, fill_value=fill_value)

    # stateful adapters ------------------------------------------------------------
    def dedup(self, eq: Equality[T] = operator.eq) -> Iter[T]:
        """Collapse runs of consecutive equal elements.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter("aabbbcaa").dedup().join("")
        'abca'

        ```
        """
        return self._iter(ops.dedup, eq=eq)

    def scan[U](self, fold: Fold[U, T], initial: Option[U] = NONE) -> Iter[U]:
        """Yield every intermediate value of a left fold.

        Without **initial**, the first element is the seed and is yielded as-is.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter([1, 2, 3]).scan(lambda acc, x: acc * x, sc.Some(10)).collect()
        Seq(10, 20, 60)

        ```
        """
        return self._iter(ops.scan, fold, initial)

    def zip(
        self,
        *others: Iterable[Any],
        strategy: ZipStrategy = "shortest",
        fill_value: Option[Any] = NONE,
    ) -> Iter[tuple[Any, ...]]:
        """Yield tuples pairing this iterator's elements with those of **others**.

        See `zip()` for the strategies.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter([1, 2]).zip([10, 20]).collect()
        Seq((1, 10), (2, 20))
        >>> sc.Iter([1, 2]).zip([10], strategy="longest", fill_value=sc.Some(0)).collect()
        Seq((1, 10), (2, 0))

        ```
        """
        return self._iter(ops.zip, *others, strategy=strategy, fill_value=fill_value)
