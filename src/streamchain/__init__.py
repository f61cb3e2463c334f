"""Lazy, composable operators over iterables.

Every operator is a plain function taking an iterable first and returning an iterator, and is also available as a method on `Iter` for fluent chaining.

```python
>>> import streamchain as sc
>>> sc.Iter.from_count().filter(lambda x: x % 2).window(2).take(3).collect()
Seq((1, 3), (3, 5), (5, 7))

```
"""

import logging

from ._core import Config, get_config, set_config
from ._eager import Seq
from ._errors import (
    IncompleteChunkError,
    InvalidArgumentError,
    LengthMismatchError,
    StreamError,
)
from ._lazy import Iter
from ._ops import (
    Chunk,
    Cycle,
    Dedup,
    Scan,
    Window,
    Zip,
    chain,
    chunk,
    count,
    cycle,
    dedup,
    drop,
    drop_while,
    enumerate,
    filter,
    flat_map,
    iterate,
    map,
    peek,
    repeat,
    scan,
    take,
    take_while,
    window,
    windowed,
    zip,
)
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._types import ChunkStrategy, Enumerated, ZipStrategy
from ._utils import SupportsEquals, equals

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Chunk",
    "ChunkStrategy",
    "Config",
    "Cycle",
    "Dedup",
    "Enumerated",
    "IncompleteChunkError",
    "InvalidArgumentError",
    "Iter",
    "LengthMismatchError",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Scan",
    "Seq",
    "Some",
    "StreamError",
    "SupportsEquals",
    "Window",
    "Zip",
    "ZipStrategy",
    "chain",
    "chunk",
    "count",
    "cycle",
    "dedup",
    "drop",
    "drop_while",
    "enumerate",
    "equals",
    "filter",
    "flat_map",
    "get_config",
    "iterate",
    "map",
    "peek",
    "repeat",
    "scan",
    "set_config",
    "take",
    "take_while",
    "window",
    "windowed",
    "zip",
]
