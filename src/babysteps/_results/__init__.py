from ._option import NONE, NoneOption, Option, Some
from ._result import Err, Ok, Result, catch

__all__ = [
    "NONE",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "Result",
    "Some",
    "catch",
]
