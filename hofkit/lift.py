"""Wrap a function in a function object for use with higher-order functions."""

from __future__ import annotations

import functools
from typing import Any, Callable

__all__ = ["LiftAdaptor", "lift", "lift_class"]


def _require_callable(f: Any) -> None:
    if not callable(f):
        raise TypeError(f"lift needs a callable, got {type(f).__name__}")


class LiftAdaptor:
    """Function object that forwards every call to the wrapped function."""

    def __init__(self, f: Callable[..., Any]) -> None:
        _require_callable(f)
        self.f = f
        functools.update_wrapper(self, f, updated=())

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.f(*args, **kwargs)

    def __repr__(self) -> str:
        return f"lift({self.f!r})"


def lift(f: Callable[..., Any]) -> LiftAdaptor:
    """Wrap ``f`` in a function object."""
    return LiftAdaptor(f)


def lift_class(name: str, f: Callable[..., Any]) -> type:
    """Declare a class named ``name`` whose instances call ``f``."""
    if not isinstance(name, str) or not name.isidentifier():
        raise ValueError(f"class name must be an identifier, got {name!r}")
    _require_callable(f)

    def __call__(self: Any, *args: Any, **kwargs: Any) -> Any:
        return f(*args, **kwargs)

    def __repr__(self: Any) -> str:
        return f"{name}()"

    return type(
        name,
        (),
        {
            "__slots__": (),
            "__call__": __call__,
            "__repr__": __repr__,
            "__doc__": f"Function object forwarding to {f!r}.",
        },
    )