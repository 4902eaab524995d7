"""Adaptor that zips several functions with the call arguments."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["CombineAdaptor", "combine"]


def _require_callable(f: Any, role: str) -> None:
    if not callable(f):
        raise TypeError(f"combine() needs a callable {role}, got {type(f).__name__}")


class CombineAdaptor:
    """Calls ``f(g1(x1), g2(x2), ...)`` when called as ``(x1, x2, ...)``.

    The number of call arguments must equal the number of functions ``gs``.
    """

    __slots__ = ("f", "gs")

    def __init__(self, f: Callable[..., Any], *gs: Callable[[Any], Any]) -> None:
        _require_callable(f, "main function")
        for g in gs:
            _require_callable(g, "argument function")
        self.f = f
        self.gs = gs

    def __call__(self, *args: Any) -> Any:
        if len(args) != len(self.gs):
            raise TypeError(
                f"combined function takes exactly {len(self.gs)} argument(s), "
                f"got {len(args)}"
            )
        return self.f(*(g(x) for g, x in zip(self.gs, args)))

    def __repr__(self) -> str:
        inner = ", ".join(repr(g) for g in (self.f, *self.gs))
        return f"combine({inner})"


def combine(f: Callable[..., Any], *args: Callable[[Any], Any]) -> CombineAdaptor:
    """Combine ``f`` with one function per call argument."""
    return CombineAdaptor(f, *args)