"""Exceptions raised by fallible."""

from __future__ import annotations


class FallibleException(Exception):
    """Base class for all errors raised by fallible."""


class InvalidConstructionError(FallibleException, ValueError):
    """Raised when Some() is given an absent value (None or UNDEFINED)."""


class UnwrapError(FallibleException):
    """Raised when a container has no payload of the requested kind.

    Covers unwrap() on Nothing, unwrap_err() on Ok, and unwrap() on an Err
    whose payload is not an exception instance (kept on ``payload``).
    """

    def __init__(self, message: str, payload: object = None) -> None:
        self.payload = payload
        super().__init__(message)


class InvalidReturnError(FallibleException):
    """A wrapped function returned a value treated as a failure."""

    def __init__(self, message: str, value: object) -> None:
        self.value = value
        super().__init__(message)


class ConfigError(FallibleException):
    """Raised when adapter policy configuration is invalid."""
