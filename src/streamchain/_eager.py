from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import overload

from ._common import CommonMethods, convert_data
from ._core import get_config
from ._lazy import Iter


class Seq[T](CommonMethods[T], Sequence[T]):
    """`Seq` represent an in memory, immutable, ordered collection of elements.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable collection.

    The underlying data structure is a `tuple`.

    It is what `Iter.collect()` returns, and `Seq.iter()` gives a fresh `Iter` over it.

    Args:
        data (Iterable[T]): The elements to store.
    """

    _inner: tuple[T, ...]

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = data if isinstance(data, tuple) else tuple(data)  # pyright: ignore[reportIncompatibleVariableOverride]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    def __len__(self) -> int:
        return len(self._inner)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if 'data' is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)

        ```
        """
        return Seq(convert_data(data, *more_data))

    def iter(self) -> Iter[T]:
        """Get an `Iter` over the elements of the `Seq`.

        The `Seq` is left untouched, so this can be called any number of times.

        Returns:
            Iter[T]: A new lazy iterator.

        Example:
        ```python
        >>> import streamchain as sc
        >>> data = sc.Seq([1, 2, 3])
        >>> data.iter().window(2).collect()
        Seq((1, 2), (2, 3))
        >>> data.iter().scan(lambda a, e: a + e).collect()
        Seq(1, 3, 6)

        ```
        """
        return Iter(self._inner)
