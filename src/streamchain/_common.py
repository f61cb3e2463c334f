from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Concatenate, Self

import cytoolz as cz
import more_itertools as mit

from ._core import CommonBase

if TYPE_CHECKING:
    from ._lazy import Iter


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)  # type: ignore[return-value]


class CommonMethods[T](CommonBase[Iterable[T]]):
    _inner: Iterable[T]

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._inner!r})"

    def _iter[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        from ._lazy import Iter

        return Iter(factory(self._inner, *args, **kwargs))

    def eq(self, other: Self) -> bool:
        """Check if two Iterables are equal based on their data.

        Note:
            This will consume any `Iter` instances involved in the comparison (**self** and/or **other**).

        Args:
            other (Self): Another instance of `Iter[T]|Seq[T]` to compare against.

        Returns:
            bool: True if the underlying data are equal, False otherwise.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter((1, 2, 3)).eq(sc.Iter((1, 2, 3)))
        True
        >>> sc.Iter((1, 2, 3)).eq(sc.Seq([1, 2]))
        False

        ```
        """
        return tuple(self._inner) == tuple(other._inner)

    def join(self: CommonMethods[str], sep: str) -> str:
        """Join all elements of the `Iterable` into a single `string`, with a specified separator.

        Args:
            sep (str): Separator to use between elements.

        Returns:
            str: The joined string.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter("abc").dedup().join("-")
        'a-b-c'

        ```
        """
        return self.into(functools.partial(str.join, sep))

    def reduce(self, func: Callable[[T, T], T]) -> T:
        """Apply a function of two arguments cumulatively to the items of the iterable, from left to right.

        `scan` yields every intermediate value of this computation.

        Args:
            func (Callable[[T, T], T]): Function to apply cumulatively to the items of the iterable.

        Returns:
            T: Single value resulting from cumulative reduction.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Seq([1, 2, 3]).reduce(lambda a, b: a + b)
        6

        ```
        """
        return functools.reduce(func, self._inner)

    def first(self) -> T:
        """Return the first element.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter.from_count(5).first()
        5

        ```
        """
        return cz.itertoolz.first(self._inner)

    def last(self) -> T:
        """Return the last element.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Seq([7, 8, 9]).last()
        9

        ```
        """
        return mit.last(self._inner)

    def length(self) -> int:
        """Return the length of the Iterable.

        Like the builtin len but works on lazy sequences, by consuming them.

        Returns:
            int: The count of elements.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Iter("abcde").window(2).length()
        4

        ```
        """
        return mit.ilen(self._inner)
