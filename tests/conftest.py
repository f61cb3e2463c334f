"""Shared fixtures for the streamchain test suite."""

from collections.abc import Callable, Iterable, Iterator

import pytest


class PullCounter[T](Iterator[T]):
    """Iterator recording how many elements were pulled from it."""

    __slots__ = ("_it", "pulls")

    def __init__(self, data: Iterable[T]) -> None:
        self._it = iter(data)
        self.pulls = 0

    def __next__(self) -> T:
        element = next(self._it)
        self.pulls += 1
        return element


@pytest.fixture
def counted() -> Callable[[Iterable[object]], PullCounter[object]]:
    """Wrap an iterable so tests can check how far an adapter pulled it."""
    return PullCounter


def alph(n: int) -> Iterator[str]:
    return iter("abcdefghijklmnopqrstuvwxyz"[:n])


def num(n: int) -> Iterator[int]:
    return iter(range(n))


@pytest.fixture(name="alph")
def alph_fixture() -> Callable[[int], Iterator[str]]:
    """First **n** letters of the alphabet, as a one-shot iterator."""
    return alph


@pytest.fixture(name="num")
def num_fixture() -> Callable[[int], Iterator[int]]:
    """`0..n` as a one-shot iterator."""
    return num


def bang(*_: object) -> object:
    msg = "This callback should never be called"
    raise AssertionError(msg)


@pytest.fixture(name="bang")
def bang_fixture() -> Callable[..., object]:
    """A callback failing the test if an adapter ever calls it."""
    return bang
