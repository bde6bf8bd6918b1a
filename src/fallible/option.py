"""Option type for values that may be absent.

Provides an Option[T] type with Some and Nothing variants. Some never holds
an absent value: constructing Some(None) or Some(UNDEFINED) raises
InvalidConstructionError at the call site.

Usage:
    def find_user(user_id: int) -> Option[User]:
        user = users.get(user_id)
        return Nothing() if user is None else Some(user)

    name = find_user(7).map(lambda u: u.name).unwrap_or("anonymous")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar, final

from fallible.exceptions import InvalidConstructionError, UnwrapError
from fallible.result import Err, Ok
from fallible.sentinel import is_absent

if TYPE_CHECKING:
    from collections.abc import Callable

    from fallible.result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@final
@dataclass(frozen=True, slots=True)
class Some[T]:
    """Represents a present value."""

    _value: T

    def __post_init__(self) -> None:
        if is_absent(self._value):
            raise InvalidConstructionError(f"Some cannot be constructed with {self._value!r}")

    def is_some(self) -> bool:
        """Returns True if a value is present."""
        return True

    def is_none(self) -> bool:
        """Returns False for Some options."""
        return False

    def unwrap(self) -> T:
        """Returns the contained value."""
        return self._value

    def unwrap_or(self, default: T) -> T:
        """Returns the contained value, ignoring the default."""
        return self._value

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        """Returns the contained value without calling fn."""
        return self._value

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        """Returns Some(fn(value)).

        fn must not return an absent value; doing so raises
        InvalidConstructionError just like calling Some() directly.
        """
        return Some(fn(self._value))

    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Applies fn to the contained value, returning its option."""
        return fn(self._value)

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        """Returns self unchanged since a value is present."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keeps the value only when predicate(value) is true."""
        if predicate(self._value):
            return self
        return Nothing()

    def ok_or(self, error: E) -> Result[T, E]:
        """Converts to Ok(value)."""
        return Ok(self._value)


@final
@dataclass(frozen=True, slots=True)
class Nothing:
    """Represents an absent value."""

    def is_some(self) -> bool:
        """Returns False for Nothing."""
        return False

    def is_none(self) -> bool:
        """Returns True for Nothing."""
        return True

    def unwrap[_T](self) -> _T:  # noqa: UP049 # pyright: ignore[reportInvalidTypeVarUse]
        """Raises UnwrapError since there is no value."""
        raise UnwrapError("Cannot unwrap Nothing option")

    def unwrap_or[_T](self, default: _T) -> _T:  # noqa: UP049
        """Returns the default value."""
        return default

    def unwrap_or_else[_T](self, fn: Callable[[], _T]) -> _T:  # noqa: UP049
        """Returns fn()."""
        return fn()

    def map[_T, _U](  # noqa: UP049
        self, fn: Callable[[_T], _U]  # pyright: ignore[reportInvalidTypeVarUse]
    ) -> Option[_U]:
        """Returns self unchanged since there is no value."""
        return self

    def and_then[_T, _U](  # noqa: UP049
        self, fn: Callable[[_T], Option[_U]]  # pyright: ignore[reportInvalidTypeVarUse]
    ) -> Option[_U]:
        """Returns self unchanged since there is no value."""
        return self

    def or_else[_T](self, fn: Callable[[], Option[_T]]) -> Option[_T]:  # noqa: UP049
        """Returns fn()."""
        return fn()

    def filter[_T](self, predicate: Callable[[_T], bool]) -> Option[_T]:  # noqa: UP049
        """Returns self unchanged since there is no value."""
        return self

    def ok_or[_E](self, error: _E) -> Result[object, _E]:  # noqa: UP049
        """Converts to Err(error)."""
        return Err(error)


# Type alias for Option
Option = Some[T] | Nothing
