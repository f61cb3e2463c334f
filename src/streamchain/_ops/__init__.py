from ._buffered import Chunk, Window, chunk, window, windowed
from ._simple import (
    chain,
    count,
    drop,
    drop_while,
    enumerate,
    filter,
    flat_map,
    iterate,
    map,
    peek,
    repeat,
    take,
    take_while,
)
from ._stateful import Cycle, Dedup, Scan, cycle, dedup, scan
from ._zip import Zip, zip

__all__ = [
    "Chunk",
    "Cycle",
    "Dedup",
    "Scan",
    "Window",
    "Zip",
    "chain",
    "chunk",
    "count",
    "cycle",
    "dedup",
    "drop",
    "drop_while",
    "enumerate",
    "filter",
    "flat_map",
    "iterate",
    "map",
    "peek",
    "repeat",
    "scan",
    "take",
    "take_while",
    "window",
    "windowed",
    "zip",
]
