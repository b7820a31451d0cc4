"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. This approach makes error handling explicit and
testable.

Both variants expose ``is_success`` / ``is_failure``. Reading the wrong side
(``value`` of a Failure, ``error`` of a Success) raises ResultAccessError:
that is a programming error, not a domain failure.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure(error="Division by zero")
        return Success(value=a / b)

    result = divide(10, 2)
    match result:
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


class ResultAccessError(RuntimeError):
    """Raised when the inactive side of a Result is read."""


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> Any:
        """Success carries no error.

        Raises:
            ResultAccessError: Always.
        """
        raise ResultAccessError("Cannot read error of a Success result")


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> Any:
        """Failure carries no value.

        Raises:
            ResultAccessError: Always.
        """
        raise ResultAccessError(f"Cannot read value of a Failure result: {self.error}")


# Type alias for Result union
Result: TypeAlias = Union[Success[T], Failure[E]]


def as_result(obj: Any) -> "Success[Any] | Failure[Any]":
    """Wrap a bare value in Success, pass Results through unchanged.

    Lets handlers return a plain value for the success path.

    Args:
        obj: Handler return value.

    Returns:
        ``obj`` if it already is a Success or Failure, else ``Success(value=obj)``.

    Example:
        >>> as_result(42)
        Success(value=42)
        >>> as_result(Failure(error="boom"))
        Failure(error='boom')
    """
    if isinstance(obj, (Success, Failure)):
        return obj
    return Success(value=obj)
