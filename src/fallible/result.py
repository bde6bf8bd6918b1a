"""Result type for explicit error handling.

Provides a Result[T, E] type with Ok and Err variants. Both are immutable
value carriers; chains built with map() and and_then() stop at the first Err
and hand it back unchanged.

Usage:
    def parse_port(raw: str) -> Result[int, ValueError]:
        try:
            return Ok(int(raw))
        except ValueError as e:
            return Err(e)

    port = parse_port(text).map(lambda p: p + 1).unwrap_or(8080)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar, cast, final

from fallible.exceptions import UnwrapError
from fallible.sentinel import is_absent

if TYPE_CHECKING:
    from collections.abc import Callable

    from fallible.option import Option

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Represents a successful result containing a value."""

    _value: T

    def is_ok(self) -> bool:
        """Returns True if this is an Ok result."""
        return True

    def is_err(self) -> bool:
        """Returns False for Ok results."""
        return False

    def unwrap(self) -> T:
        """Returns the contained value."""
        return self._value

    def unwrap_or(self, default: T) -> T:
        """Returns the contained value, ignoring the default."""
        return self._value

    def unwrap_err(self) -> object:
        """Raises UnwrapError since this is not an Err."""
        raise UnwrapError("Called unwrap_err on Ok value", self._value)

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Applies fn to the contained value, returning Ok(fn(value))."""
        return Ok(fn(self._value))

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Returns self unchanged since this is Ok."""
        return cast("Result[T, F]", self)

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Applies fn to the contained value, returning its result."""
        return fn(self._value)

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Returns self unchanged since this is Ok."""
        return cast("Result[T, F]", self)

    def ok(self) -> Option[T]:
        """Converts to Some(value), or Nothing() when the value is absent."""
        from fallible.option import Nothing, Some

        if is_absent(self._value):
            return Nothing()
        return Some(self._value)


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failed result containing an error."""

    _error: E

    def is_ok(self) -> bool:
        """Returns False for Err results."""
        return False

    def is_err(self) -> bool:
        """Returns True if this is an Err result."""
        return True

    def unwrap[_T](self) -> _T:  # noqa: UP049 # pyright: ignore[reportInvalidTypeVarUse]
        """Raises the contained error.

        Exception instances are re-raised as-is, keeping their identity and
        traceback. Any other payload is reported through UnwrapError.
        """
        if isinstance(self._error, BaseException):
            raise self._error
        raise UnwrapError(f"Called unwrap on Err value: {self._error!r}", self._error)

    def unwrap_or[_T](self, default: _T) -> _T:  # noqa: UP049
        """Returns the default value."""
        return default

    def unwrap_err(self) -> E:
        """Returns the contained error."""
        return self._error

    def map[_T, _U](  # noqa: UP049
        self, fn: Callable[[_T], _U]  # pyright: ignore[reportInvalidTypeVarUse]
    ) -> Result[_U, E]:
        """Returns self unchanged since this is Err."""
        return cast("Result[_U, E]", self)

    def map_err[_F](self, fn: Callable[[E], _F]) -> Result[object, _F]:  # noqa: UP049
        """Applies fn to the contained error, returning Err(fn(error))."""
        return Err(fn(self._error))

    def and_then[_T, _U](  # noqa: UP049
        self, fn: Callable[[_T], Result[_U, E]]  # pyright: ignore[reportInvalidTypeVarUse]
    ) -> Result[_U, E]:
        """Returns self unchanged since this is Err."""
        return cast("Result[_U, E]", self)

    def or_else[_F](self, fn: Callable[[E], Result[object, _F]]) -> Result[object, _F]:  # noqa: UP049
        """Applies fn to the contained error, returning its result."""
        return fn(self._error)

    def ok(self) -> Option[object]:
        """Discards the error and returns Nothing()."""
        from fallible.option import Nothing

        return Nothing()


# Type alias for Result
Result = Ok[T] | Err[E]
