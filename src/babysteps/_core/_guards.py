from .._errors import InvalidArgumentError, NullArgumentError


def require_not_none[T](value: T | None, name: str) -> T:
    if value is None:
        msg = f"{name} must not be None"
        raise NullArgumentError(msg)
    return value


def require_positive(value: int, name: str) -> int:
    # bool is an int subclass, but `chunked(True)` is always a caller mistake
    if isinstance(value, bool) or not isinstance(require_not_none(value, name), int):
        msg = f"{name} must be a positive integer, got {value!r}"
        raise InvalidArgumentError(msg)
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        raise InvalidArgumentError(msg)
    return value


def require_non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(require_not_none(value, name), int):
        msg = f"{name} must be a non-negative integer, got {value!r}"
        raise InvalidArgumentError(msg)
    if value < 0:
        msg = f"{name} must not be negative, got {value}"
        raise InvalidArgumentError(msg)
    return value
