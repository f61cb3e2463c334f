from __future__ import annotations

from dataclasses import dataclass, replace

from ._format import seq_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Display settings shared by the streamchain wrappers.

    These only affect how collected data is rendered, never what an adapter yields.

    Args:
        max_items (int): Maximum number of elements rendered by `Seq.__repr__`. Defaults to 20.
        max_width (int): Maximum number of characters rendered by `Seq.__repr__`. Defaults to 200.
    """

    max_items: int = 20
    max_width: int = 200

    def iter_repr(self, data: tuple[object, ...]) -> str:
        return seq_repr(data, self.max_items, self.max_width)


_CONFIG = Config()


def get_config() -> Config:
    """Return the active display configuration.

    Example:
    ```python
    >>> import streamchain as sc
    >>> sc.get_config().max_items
    20

    ```
    """
    return _CONFIG


def set_config(**changes: int) -> Config:
    """Replace fields of the active configuration and return the new one.

    Args:
        **changes (int): Fields of `Config` to update.

    Returns:
        Config: The configuration now in effect.

    Example:
    ```python
    >>> import streamchain as sc
    >>> previous = sc.get_config()
    >>> sc.set_config(max_items=2)
    Config(max_items=2, max_width=200)
    >>> sc.Seq(range(5))
    Seq(0, 1, ...)
    >>> sc.set_config(max_items=previous.max_items)
    Config(max_items=20, max_width=200)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
