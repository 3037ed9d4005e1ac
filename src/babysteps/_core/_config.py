from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ._format import items_repr
from ._guards import require_positive


@dataclass(slots=True)
class Config:
    """Process-wide settings for how babysteps wrappers render themselves.

    Args:
        max_items (int): Maximum number of elements shown by the `repr` of a materialized collection.
    """

    max_items: int = 20

    def iter_repr(self, data: Iterable[Any]) -> str:
        """Render the wrapped data of a `Seq` or an `Iter`.

        Lazy iterators are never consumed: only their type name is shown.

        Args:
            data (Iterable[Any]): The wrapped data.

        Returns:
            str: The inner part of the repr, without the wrapper name.
        """
        match data:
            case tuple() | list():
                return items_repr(data, self.max_items)
            case _:
                return f"<{data.__class__.__name__}>"


_CONFIG = Config()


def get_config() -> Config:
    return _CONFIG


def set_config(*, max_items: int) -> None:
    """Change the process-wide repr settings.

    Args:
        max_items (int): Maximum number of elements shown by the `repr` of a `Seq`.

    Example:
    ```python
    >>> import babysteps as bs
    >>> bs.set_config(max_items=2)
    >>> bs.Seq((1, 2, 3))
    Seq(1, 2, ...)
    >>> bs.set_config(max_items=20)

    ```
    """
    _CONFIG.max_items = require_positive(max_items, "max_items")
