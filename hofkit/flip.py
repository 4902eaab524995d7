"""Adaptor that swaps the first two arguments of a function."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["FlipAdaptor", "flip"]


class FlipAdaptor:
    """Calls ``f(y, x, *rest)`` when called as ``(x, y, *rest)``."""

    __slots__ = ("f",)

    def __init__(self, f: Callable[..., Any]) -> None:
        if not callable(f):
            raise TypeError(f"flip() needs a callable, got {type(f).__name__}")
        self.f = f

    def __call__(self, x: Any, y: Any, *args: Any) -> Any:
        return self.f(y, x, *args)

    def __repr__(self) -> str:
        return f"flip({self.f!r})"


def flip(f: Callable[..., Any]) -> FlipAdaptor:
    """Wrap ``f`` so that its first two parameters are swapped."""
    return FlipAdaptor(f)