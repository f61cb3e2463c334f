"""Single-state adapters.

Each function validates its arguments eagerly and returns a lazy iterator.

Callbacks receive the element, and the 0-based index when they accept a second positional argument.
"""

from __future__ import annotations

import builtins
import itertools
from collections.abc import Iterable, Iterator
from typing import overload

import cytoolz as cz

from .._errors import InvalidArgumentError
from .._types import Consumer, Enumerated, Mapping, Predicate, Update
from .._utils import with_arity


def map[T, R](iterable: Iterable[T], mapping: Mapping[T, R]) -> Iterator[R]:
    """Apply **mapping** to each element.

    Args:
        iterable (Iterable[T]): Source elements.
        mapping (Mapping[T, R]): Function of the element, and optionally its index.

    Returns:
        Iterator[R]: The mapped elements, one per source element.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.map([1, 2, 3], lambda x: x * 2))
    [2, 4, 6]
    >>> list(sc.map("abc", lambda e, i: e * (i + 1)))
    ['a', 'bb', 'ccc']

    ```
    """
    return builtins.map(with_arity(mapping, 2), iterable, itertools.count())


def filter[T](iterable: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Keep the elements for which **predicate** is truthy.

    The index given to the predicate is the position of the element in the source, so every consumed element gets one.

    Args:
        iterable (Iterable[T]): Source elements.
        predicate (Predicate[T]): Function of the element, and optionally its index.

    Returns:
        Iterator[T]: The elements satisfying the predicate.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.filter(range(6), lambda x: x % 2 == 0))
    [0, 2, 4]
    >>> "".join(sc.filter("abcdef", lambda _, i: i % 2 == 0))
    'ace'

    ```
    """
    func = with_arity(predicate, 2)
    return (e for i, e in builtins.enumerate(iterable) if func(e, i))


def take[T](iterable: Iterable[T], limit: int) -> Iterator[T]:
    """Yield the first **limit** elements, or fewer if the source ends sooner.

    Args:
        iterable (Iterable[T]): Source elements.
        limit (int): Number of elements to take.

    Returns:
        Iterator[T]: At most **limit** elements.

    Raises:
        InvalidArgumentError: If **limit** is negative.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.take("abcdefg", 3))
    ['a', 'b', 'c']
    >>> list(sc.take([1, 2], 5))
    [1, 2]

    ```
    """
    if limit < 0:
        msg = f"Cannot take < 0 items (got {limit})"
        raise InvalidArgumentError(msg)
    return cz.itertoolz.take(limit, iterable)


def drop[T](iterable: Iterable[T], limit: int) -> Iterator[T]:
    """Skip the first **limit** elements and yield everything after.

    Args:
        iterable (Iterable[T]): Source elements.
        limit (int): Number of elements to drop.

    Returns:
        Iterator[T]: The elements after the first **limit**.

    Raises:
        InvalidArgumentError: If **limit** is negative.

    Example:
    ```python
    >>> import streamchain as sc
    >>> "".join(sc.drop("abcdefg", 3))
    'defg'

    ```
    """
    if limit < 0:
        msg = f"Cannot drop < 0 items (got {limit})"
        raise InvalidArgumentError(msg)
    return itertools.islice(iterable, limit, None)


def take_while[T](iterable: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Yield elements while **predicate** holds, then stop for good.

    Args:
        iterable (Iterable[T]): Source elements.
        predicate (Predicate[T]): Function of the element, and optionally its index.

    Returns:
        Iterator[T]: The longest prefix satisfying the predicate.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.take_while([1, 2, 0, 3], lambda x: x > 0))
    [1, 2]

    ```
    """
    func = with_arity(predicate, 2)

    def _take_while() -> Iterator[T]:
        for i, e in builtins.enumerate(iterable):
            if not func(e, i):
                return
            yield e

    return _take_while()


def drop_while[T](iterable: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Skip elements while **predicate** holds, then yield the rest unconditionally.

    The predicate is only evaluated on the skipped elements and on the first failing one.

    Args:
        iterable (Iterable[T]): Source elements.
        predicate (Predicate[T]): Function of the element, and optionally its index.

    Returns:
        Iterator[T]: The elements from the first one failing the predicate.

    Example:
    ```python
    >>> import streamchain as sc
    >>> "".join(sc.drop_while("abcdefg", lambda e: e in "abc efg"))
    'defg'

    ```
    """
    func = with_arity(predicate, 2)

    def _drop_while() -> Iterator[T]:
        it = iter(iterable)
        for i, e in builtins.enumerate(it):
            if not func(e, i):
                yield e
                yield from it
                return

    return _drop_while()


def peek[T](iterable: Iterable[T], consumer: Consumer[T]) -> Iterator[T]:
    """Call **consumer** on each element just before yielding it unchanged.

    Args:
        iterable (Iterable[T]): Source elements.
        consumer (Consumer[T]): Side-effecting function of the element, and optionally its index.

    Returns:
        Iterator[T]: The source elements.

    Example:
    ```python
    >>> import streamchain as sc
    >>> seen = []
    >>> list(sc.peek("ab", lambda e, i: seen.append((e, i))))
    ['a', 'b']
    >>> seen
    [('a', 0), ('b', 1)]

    ```
    """
    func = with_arity(consumer, 2)

    def _peek() -> Iterator[T]:
        for i, e in builtins.enumerate(iterable):
            func(e, i)
            yield e

    return _peek()


def flat_map[T, R](iterable: Iterable[T], mapping: Mapping[T, Iterable[R]]) -> Iterator[R]:
    """Map each element to an iterable and flatten the results by one level.

    Each inner iterable is drained before the next source element is pulled.

    Args:
        iterable (Iterable[T]): Source elements.
        mapping (Mapping[T, Iterable[R]]): Function of the element, and optionally its index, returning an iterable.

    Returns:
        Iterator[R]: The concatenated inner elements.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.flat_map(range(3), lambda e: (e, -e)))
    [0, 0, 1, -1, 2, -2]

    ```
    """
    return itertools.chain.from_iterable(
        builtins.map(with_arity(mapping, 2), iterable, itertools.count())
    )


@overload
def repeat[T](value: T) -> Iterator[T]: ...
@overload
def repeat[T](value: T, times: int) -> Iterator[T]: ...
def repeat[T](value: T, times: int | None = None) -> Iterator[T]:
    """Yield **value** indefinitely, or exactly **times** times.

    **Warning** ⚠️
        Without **times**, this creates an infinite iterator.

    Args:
        value (T): The value to repeat.
        times (int | None): Number of repetitions. Defaults to None (forever).

    Returns:
        Iterator[T]: The repeated value.

    Raises:
        InvalidArgumentError: If **times** is negative.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.repeat("a", 3))
    ['a', 'a', 'a']
    >>> list(sc.take(sc.repeat(0), 2))
    [0, 0]

    ```
    """
    if times is None:
        return itertools.repeat(value)
    if times < 0:
        msg = f"Cannot repeat < 0 times (got {times})"
        raise InvalidArgumentError(msg)
    return itertools.repeat(value, times)


def iterate[T](seed: T, update: Update[T]) -> Iterator[T]:
    """Yield **seed**, then successive values of `seed = update(seed, index)`.

    **Warning** ⚠️
        This creates an infinite iterator.

    Args:
        seed (T): The first value.
        update (Update[T]): Function of the previous value, and optionally an index starting at 0.

    Returns:
        Iterator[T]: The successive values.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.take(sc.iterate(1, lambda e: e * 2), 5))
    [1, 2, 4, 8, 16]
    >>> list(sc.take(sc.iterate(0, lambda e, i: e + i), 5))
    [0, 0, 1, 3, 6]

    ```
    """
    func = with_arity(update, 2)

    def _iterate() -> Iterator[T]:
        current = seed
        for i in itertools.count():
            yield current
            current = func(current, i)

    return _iterate()


def count(start: int = 0, step: int = 1) -> Iterator[int]:
    """Yield `start, start + step, start + 2 * step, ...` indefinitely.

    **Warning** ⚠️
        This creates an infinite iterator.

    Args:
        start (int): First value. Defaults to 0.
        step (int): Difference between consecutive values. Defaults to 1.

    Returns:
        Iterator[int]: The arithmetic progression.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.take(sc.count(10, 2), 3))
    [10, 12, 14]

    ```
    """
    return itertools.count(start, step)


def chain[T](*iterables: Iterable[T]) -> Iterator[T]:
    """Yield every element of the first iterable, then of the second, and so on.

    A source is only iterated once the previous one is exhausted.

    Args:
        *iterables (Iterable[T]): The sources, in order.

    Returns:
        Iterator[T]: The concatenated elements.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.chain("ab", [], (1, 2)))
    ['a', 'b', 1, 2]

    ```
    """
    return cz.itertoolz.concat(iterables)


def enumerate[T](iterable: Iterable[T], start: int = 0) -> Iterator[Enumerated[T]]:
    """Pair each element with its index.

    Args:
        iterable (Iterable[T]): Source elements.
        start (int): First index. Defaults to 0.

    Returns:
        Iterator[Enumerated[T]]: `(idx, value)` named tuples.

    Example:
    ```python
    >>> import streamchain as sc
    >>> list(sc.enumerate("ab", 1))
    [(1, 'a'), (2, 'b')]

    ```
    """
    return itertools.starmap(Enumerated, builtins.enumerate(iterable, start))
