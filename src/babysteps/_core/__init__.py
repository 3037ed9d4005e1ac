from ._config import Config, get_config, set_config
from ._deprecation import deprecated
from ._guards import require_non_negative, require_not_none, require_positive
from ._main import CommonBase, Pipeable

__all__ = [
    "CommonBase",
    "Config",
    "Pipeable",
    "deprecated",
    "get_config",
    "require_non_negative",
    "require_not_none",
    "require_positive",
    "set_config",
]
