"""Shared pytest fixtures for test modules."""

from __future__ import annotations

from typing import Any

import pytest


class CallCounter:
    """Callable stub that records how often it was invoked."""

    def __init__(self, return_value: Any = None) -> None:
        self.return_value = return_value
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((args, kwargs))
        return self.return_value

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter() -> CallCounter:
    """A call-counting stub returning 1 unless return_value is changed."""
    return CallCounter(return_value=1)
