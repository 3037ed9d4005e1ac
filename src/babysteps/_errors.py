class BabystepsError(Exception):
    """Base class for the argument errors raised by babysteps."""


class NullArgumentError(BabystepsError, TypeError):
    """A required argument was `None`.

    Raised eagerly, when the operator or combinator is built, never on first use.
    """


class InvalidArgumentError(BabystepsError, ValueError):
    """A numeric argument (a size, a step...) is not a positive integer."""


class OutOfElementsError(StopIteration):
    """`next()` was called on an operator whose source is exhausted.

    Subclasses `StopIteration`, so `for` loops and consumers of the iterator protocol end normally.
    """


class OptionUnwrapError(RuntimeError): ...


class ResultUnwrapError(RuntimeError): ...
