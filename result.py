"""Result type to represent success or failure of operations.

A result is either ``Ok(value)`` or ``Err(error)``. Both variants are frozen
dataclasses, so every transformation builds a new result instead of
changing the one it was called on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Literal, NoReturn, TypeGuard, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class UnwrapError(Exception):
    """Raised when a value is extracted from the wrong variant.

    Attributes:
        error: The payload held by the result that was unwrapped.
    """

    def __init__(self, message: str, error: Any) -> None:
        super().__init__(message)
        self.error = error


def _unwrap_failed(msg: str, payload: Any) -> NoReturn:
    raise UnwrapError(f"{msg}: {payload}", payload)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Success variant holding ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    @property
    def val(self) -> T:
        """Return the contained value."""
        return self.value

    def is_ok(self) -> Literal[True]:
        return True

    def is_ok_and(self, fn: Callable[[T], bool]) -> bool:
        return fn(self.value)

    def is_err(self) -> Literal[False]:
        return False

    def is_err_and(self, fn: Callable[[Any], bool]) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        """Apply ``fn`` to the value and wrap the outcome in a new ``Ok``.

        Example:
            >>> ok(2).map(lambda v: v * 2)
            Ok(4)
        """
        return Ok(fn(self.value))

    def map_or(self, fn: Callable[[T], U], default: U) -> U:
        return fn(self.value)

    def map_or_else(self, fn: Callable[[T], U], default_fn: Callable[[Any], U]) -> U:
        return fn(self.value)

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def inspect(self, fn: Callable[[T], Any]) -> Ok[T]:
        """Call ``fn`` with the value for its side effect and return self."""
        fn(self.value)
        return self

    def inspect_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def expect(self, msg: str) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise UnwrapError with ``"{msg}: {value}"``."""
        _unwrap_failed(msg, self.value)

    def unwrap_err(self) -> NoReturn:
        _unwrap_failed("called unwrap_err() on an Ok value", self.value)


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failure variant holding ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    @property
    def val(self) -> E:
        """Return the contained error."""
        return self.error

    def is_ok(self) -> Literal[False]:
        return False

    def is_ok_and(self, fn: Callable[[Any], bool]) -> bool:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def is_err_and(self, fn: Callable[[E], bool]) -> bool:
        return fn(self.error)

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_or(self, fn: Callable[[Any], U], default: U) -> U:
        return default

    def map_or_else(self, fn: Callable[[Any], U], default_fn: Callable[[E], U]) -> U:
        return default_fn(self.error)

    def map_err(self, fn: Callable[[E], U]) -> Err[U]:
        """Apply ``fn`` to the error and wrap the outcome in a new ``Err``.

        Example:
            >>> err("boom").map_err(str.upper)
            Err('BOOM')
        """
        return Err(fn(self.error))

    def inspect(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def inspect_err(self, fn: Callable[[E], Any]) -> Err[E]:
        """Call ``fn`` with the error for its side effect and return self."""
        fn(self.error)
        return self

    def expect(self, msg: str) -> NoReturn:
        """Raise UnwrapError with ``"{msg}: {error}"``."""
        _unwrap_failed(msg, self.error)

    def unwrap(self) -> NoReturn:
        """Raise the contained error.

        Errors that are not exceptions are carried by an UnwrapError instead.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(str(self.error), self.error)

    def expect_err(self, msg: str) -> E:
        return self.error

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    """Create a successful result."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Create a failed result."""
    return Err(error)


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    return isinstance(result, Err)


def match(
    result: Result[T, E],
    on_ok: Callable[[T], U],
    on_err: Callable[[E], U],
) -> U:
    """Call ``on_ok`` with the value of an Ok, or ``on_err`` with the error of an Err.

    Args:
        result: The result to dispatch on.
        on_ok: Called with the contained value when ``result`` is Ok.
        on_err: Called with the contained error when ``result`` is Err.

    Returns:
        Whatever the invoked callback returns.

    Raises:
        TypeError: If ``result`` is neither Ok nor Err.
    """
    if isinstance(result, Ok):
        return on_ok(result.value)
    if isinstance(result, Err):
        return on_err(result.error)
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")
