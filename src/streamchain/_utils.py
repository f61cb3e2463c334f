from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsEquals(Protocol):
    """Objects exposing an explicit `equals` method, as an alternative to `__eq__`."""

    def equals(self, other: Any, /) -> bool: ...


def equals(left: object, right: object) -> bool:
    """Compare two objects for equality.

    First compares by identity and `==`.
    If that fails and **left** supports the `SupportsEquals` protocol, defer to `left.equals(right)`.

    Args:
        left (object): Left operand.
        right (object): Right operand.

    Returns:
        bool: Whether the two objects are considered equal.

    Example:
    ```python
    >>> import streamchain as sc
    >>> sc.equals(1, 1)
    True
    >>> class Point:
    ...     def __init__(self, x: int) -> None:
    ...         self.x = x
    ...     def equals(self, other: object) -> bool:
    ...         return isinstance(other, Point) and other.x == self.x
    >>> sc.equals(Point(1), Point(1))
    True
    >>> sc.equals(Point(1), Point(2))
    False
    >>> sc.equals(1, "1")
    False

    ```
    """
    if left is right or left == right:
        return True
    if isinstance(left, SupportsEquals):
        return bool(left.equals(right))
    return False


def _required_positional(func: Callable[..., Any]) -> int | None:
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins and classes without introspectable signatures
        return 1
    count = 0
    positional = False
    for param in sig.parameters.values():
        match param.kind:
            case inspect.Parameter.VAR_POSITIONAL:
                return None
            case inspect.Parameter.POSITIONAL_ONLY | inspect.Parameter.POSITIONAL_OR_KEYWORD:
                positional = True
                if param.default is inspect.Parameter.empty:
                    count += 1
            case _:
                pass
    # `int(x=0, /)` style signatures still get the element
    return max(count, 1) if positional else count


def with_arity[R](func: Callable[..., R], max_args: int) -> Callable[..., R]:
    """Adapt **func** so it can always be called with **max_args** positional arguments.

    Callbacks given to adapters may accept fewer arguments than the adapter supplies (e.g. a `map` callback that ignores the index).

    The number of required positional parameters is read once from the signature, and trailing arguments are dropped accordingly.

    A callable with only optional positional parameters still receives the first argument.

    Callables without an introspectable signature are treated as taking a single argument.

    Callables taking `*args` receive every argument, the index included.

    Note:
        Builtins only expose a signature on some interpreter versions.
        `print` is seen as `(*args, ...)` on Python 3.13 and receives the index, so `Iter("ab").for_each(print)` prints `a 0` then `b 1`.
        Where `inspect.signature(print)` raises, it only receives the element.
        Pass a lambda to pin the arguments down.

    Args:
        func (Callable[..., R]): The user supplied callback.
        max_args (int): The number of arguments the adapter passes.

    Returns:
        Callable[..., R]: A callable accepting exactly **max_args** positional arguments.

    Example:
    ```python
    >>> from streamchain._utils import with_arity
    >>> with_arity(lambda e: e * 2, 2)(3, 0)
    6
    >>> with_arity(lambda e, i: e * i, 2)(3, 4)
    12
    >>> with_arity(len, 2)("abc", 4)
    3

    ```
    """
    accepted = _required_positional(func)
    if accepted is None or accepted >= max_args:
        return func
    match accepted:
        case 1:
            return lambda first, *_: func(first)
        case 0:
            return lambda *_: func()
        case _:
            return lambda *args: func(*args[:accepted])
