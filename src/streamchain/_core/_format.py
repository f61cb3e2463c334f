from collections.abc import Sequence
from typing import Any


def seq_repr(v: Sequence[Any], max_items: int = 20, max_width: int = 200) -> str:
    if len(v) > max_items:
        text = ", ".join(repr(x) for x in v[:max_items]) + ", ..."
    else:
        text = repr(tuple(v))[1:-1]
    return text if len(text) <= max_width else text[: max_width - 3] + "..."
