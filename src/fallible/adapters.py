"""Adapters that turn plain functions into Result- or Option-returning ones.

wrap_with_result() is the single place where raised exceptions become data:
the wrapped function's exception or empty return value (UNDEFINED, None,
NaN, infinity) comes back as an Err. wrap_with_option() only maps absent
return values to Nothing and lets exceptions propagate.

Usage:
    @wrap_with_result
    def ratio(a: float, b: float) -> float:
        return a / b

    ratio(1, 0)       # Err(ZeroDivisionError(...))
    ratio(1.0, 4.0)   # Ok(0.25)

    lookup = wrap_with_option(settings.get)
    lookup("missing")  # Nothing()
"""

from __future__ import annotations

import functools
import logging
import math
import numbers
from decimal import Decimal
from typing import TYPE_CHECKING, overload

from fallible.config import DEFAULT_POLICY
from fallible.exceptions import InvalidReturnError
from fallible.option import Nothing, Some
from fallible.result import Err, Ok
from fallible.sentinel import UNDEFINED, is_absent

if TYPE_CHECKING:
    from collections.abc import Callable

    from fallible.config import AdapterPolicy
    from fallible.option import Option
    from fallible.result import Result


logger = logging.getLogger(__name__)

UNDEFINED_MESSAGE = "Function returned undefined"
NULL_MESSAGE = "Function returned null"
NAN_MESSAGE = "Function returned NaN"
INFINITY_MESSAGE = "Function returned Infinity or -Infinity"


def _is_nan(value: object) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, numbers.Real) and not isinstance(value, numbers.Integral):
        # Compare in the value's own precision; float() would overflow wide types.
        return bool(value != value)
    return False


def _is_infinite(value: object) -> bool:
    if isinstance(value, Decimal):
        return value.is_infinite()
    if isinstance(value, numbers.Real) and not isinstance(value, numbers.Integral):
        return bool(value == math.inf or value == -math.inf)
    return False


def _rejected(message: str, value: object, name: str) -> Err[InvalidReturnError]:
    logger.debug("%s: %s", name, message)
    return Err(InvalidReturnError(message, value))


def normalize_return[T](
    value: T, policy: AdapterPolicy = DEFAULT_POLICY, name: str = "<value>"
) -> Result[T, Exception]:
    """Map a raw return value onto Ok or Err.

    Checks run in order: UNDEFINED, None, NaN, infinity. Anything that
    survives them is returned as Ok(value).
    """
    if value is UNDEFINED:
        return _rejected(UNDEFINED_MESSAGE, value, name)
    if value is None:
        return _rejected(NULL_MESSAGE, value, name)
    if policy.reject_nan and _is_nan(value):
        return _rejected(NAN_MESSAGE, value, name)
    if policy.reject_infinity and _is_infinite(value):
        return _rejected(INFINITY_MESSAGE, value, name)
    return Ok(value)


@overload
def wrap_with_result[**P, T](
    fn: Callable[P, T], *, policy: AdapterPolicy | None = None
) -> Callable[P, Result[T, Exception]]: ...


@overload
def wrap_with_result[**P, T](
    fn: None = None, *, policy: AdapterPolicy | None = None
) -> Callable[[Callable[P, T]], Callable[P, Result[T, Exception]]]: ...


def wrap_with_result[**P, T](
    fn: Callable[P, T] | None = None, *, policy: AdapterPolicy | None = None
) -> Callable[P, Result[T, Exception]] | Callable[[Callable[P, T]], Callable[P, Result[T, Exception]]]:
    """Wrap fn so that it always returns a Result instead of raising.

    The wrapped function is called exactly once per call with the arguments
    passed through untouched. Exceptions (but not KeyboardInterrupt,
    SystemExit or other BaseException-only signals) become Err(exc) with the
    original exception object, as do exceptions raised while inspecting the
    return value. Return values go through normalize_return().

    Can be used as ``wrap_with_result(fn)``, ``@wrap_with_result`` or
    ``@wrap_with_result(policy=...)``.

    Args:
        fn: The function to wrap.
        policy: Overrides DEFAULT_POLICY for the numeric checks and logging.

    Returns:
        The wrapped function, or a decorator when fn is omitted.
    """
    active = DEFAULT_POLICY if policy is None else policy

    def decorate(func: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
        name = getattr(func, "__qualname__", repr(func))

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
            try:
                return normalize_return(func(*args, **kwargs), active, name)
            except Exception as e:
                if active.log_captured:
                    logger.debug("Captured %s from %s", type(e).__name__, name, exc_info=True)
                return Err(e)

        return wrapper

    if fn is None:
        return decorate
    return decorate(fn)


def wrap_with_option[**P, T](fn: Callable[P, T | None]) -> Callable[P, Option[T]]:
    """Wrap fn so that None or UNDEFINED results become Nothing().

    Every other value, including 0, "", NaN and infinity, becomes Some(value).
    Exceptions raised by fn are not caught.
    """

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Option[T]:
        value = fn(*args, **kwargs)
        if is_absent(value):
            return Nothing()
        return Some(value)

    return wrapper
