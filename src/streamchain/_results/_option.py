from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """An explicit optional value: either `Some(value)` or `NONE`.

    Used wherever an adapter needs to tell "no value was given" apart from any value an iterable may contain, `None` included.
    """

    __slots__ = ()

    @staticmethod
    def from_[U](value: U | None) -> Option[U]:
        """Build an `Option` from a value that may be `None`.

        Args:
            value (U | None): The value to wrap.

        Returns:
            Option[U]: `NONE` if **value** is `None`, `Some(value)` otherwise.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Option.from_(3)
        Some(value=3)
        >>> sc.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Some(2).is_some()
        True
        >>> sc.NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Some(2).is_none()
        False
        >>> sc.NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Some("car").unwrap()
        'car'
        >>> sc.NONE.unwrap()
        Traceback (most recent call last):
            ...
        streamchain._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with a provided message.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Args:
            default (T): The value to return if the option is `NONE`.

        Returns:
            T: The contained value or **default**.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Some("car").unwrap_or("bike")
        'car'
        >>> sc.NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else default

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value.

        Args:
            f (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: The mapped value, or `NONE`.

        Example:
        ```python
        >>> import streamchain as sc
        >>> sc.Some("Hello, World!").map(len)
        Some(value=13)
        >>> sc.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
