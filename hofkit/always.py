"""Function objects that ignore their arguments and return a fixed value."""

from __future__ import annotations

import copy
from typing import Any

__all__ = ["Always", "always", "always_ref"]

_NO_VALUE = object()


class Always:
    """Callable that returns the same value whatever it is called with.

    By default each call returns a shallow copy of the stored value, so
    callers cannot change it through the result. With ``by_ref=True`` the
    stored object itself is returned.
    """

    __slots__ = ("_value", "_by_ref")

    def __init__(self, value: Any = None, *, by_ref: bool = False) -> None:
        self._value = value
        self._by_ref = by_ref

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self._by_ref:
            return self._value
        return copy.copy(self._value)

    def __repr__(self) -> str:
        kind = "always_ref" if self._by_ref else "always"
        return f"{kind}({self._value!r})"


def always(*args: Any) -> Always:
    """Build a function that always returns the given value.

    Called with no argument, the function returns ``None``.
    """
    if len(args) > 1:
        raise TypeError(f"always() takes at most 1 argument ({len(args)} given)")
    value = args[0] if args else None
    return Always(value)


def always_ref(value: Any) -> Always:
    """Build a function that always returns ``value`` itself, never a copy."""
    return Always(value, by_ref=True)