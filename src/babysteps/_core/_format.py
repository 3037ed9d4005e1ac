from collections.abc import Sequence
from typing import Any


def items_repr(v: Sequence[Any], max_items: int = 20) -> str:
    body = ", ".join(repr(item) for item in v[:max_items])
    match len(v):
        case 1:
            return body + ","
        case n if n > max_items:
            return body + ", ..."
        case _:
            return body
