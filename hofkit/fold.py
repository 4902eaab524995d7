"""Adaptor that folds a binary function over its arguments."""

from __future__ import annotations

import copy
import functools
from typing import Any, Callable

__all__ = ["FoldAdaptor", "fold"]

_NO_STATE = object()


class FoldAdaptor:
    """Left fold of a binary function over the call arguments.

    With an initial state, each call starts from a copy of that state and
    an empty call returns it. Without one, the first argument is the
    initial state and at least one argument is required.
    """

    __slots__ = ("f", "_state")

    def __init__(self, f: Callable[[Any, Any], Any], state: Any = _NO_STATE) -> None:
        if not callable(f):
            raise TypeError(f"fold() needs a callable, got {type(f).__name__}")
        self.f = f
        self._state = state

    @property
    def has_state(self) -> bool:
        return self._state is not _NO_STATE

    def __call__(self, *args: Any) -> Any:
        if self.has_state:
            return functools.reduce(self.f, args, copy.copy(self._state))
        if not args:
            raise TypeError("fold without an initial state needs at least one argument")
        return functools.reduce(self.f, args)

    def __repr__(self) -> str:
        if self.has_state:
            return f"fold({self.f!r}, {self._state!r})"
        return f"fold({self.f!r})"


def fold(f: Callable[[Any, Any], Any], *args: Any) -> FoldAdaptor:
    """Build a fold of ``f``, optionally from an initial state."""
    if len(args) > 1:
        raise TypeError(f"fold() takes at most one initial state ({len(args)} given)")
    return FoldAdaptor(f, *args)