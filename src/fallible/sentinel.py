"""Absent-value markers shared by the containers and adapters."""

from __future__ import annotations

from typing import final


@final
class UNDEFINED:
    """Sentinel: no value was provided.

    Distinct from ``None``, which is an explicit empty value. Functions wrapped
    by the adapters may return it to report that nothing was produced.

    Note: This is a class used as a sentinel, not instantiated.
    """

    def __new__(cls) -> UNDEFINED:
        raise TypeError("UNDEFINED is a sentinel and should not be instantiated")


def is_absent(value: object) -> bool:
    """Returns True for None and UNDEFINED."""
    return value is None or value is UNDEFINED
