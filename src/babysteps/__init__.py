from . import consumers, functions, predicates
from ._core import Pipeable, get_config, set_config
from ._eager import Seq
from ._errors import (
    BabystepsError,
    InvalidArgumentError,
    NullArgumentError,
    OptionUnwrapError,
    OutOfElementsError,
    ResultUnwrapError,
)
from ._lazy import Iter
from ._results import NONE, Err, NoneOption, Ok, Option, Result, Some
from ._tuples import Tuple2, Tuple3, Tuple4, Tuple5

__all__ = [
    "NONE",
    "BabystepsError",
    "Err",
    "InvalidArgumentError",
    "Iter",
    "NoneOption",
    "NullArgumentError",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "OutOfElementsError",
    "Pipeable",
    "Result",
    "ResultUnwrapError",
    "Seq",
    "Some",
    "Tuple2",
    "Tuple3",
    "Tuple4",
    "Tuple5",
    "consumers",
    "functions",
    "get_config",
    "predicates",
    "set_config",
]
