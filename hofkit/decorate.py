"""Build simple decorators out of a function taking data, a function and args."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["DecorateAdaptor", "Decoration", "DecoratorInvoke", "decorate"]


def _require_callable(f: Any, what: str) -> None:
    if not callable(f):
        raise TypeError(f"{what} must be callable, got {type(f).__name__}")


class DecoratorInvoke:
    """A decorated function: calls ``decorator(data, function, *args)``."""

    __slots__ = ("decorator", "data", "function")

    def __init__(self, decorator: Callable[..., Any], data: Any, function: Callable[..., Any]) -> None:
        self.decorator = decorator
        self.data = data
        self.function = function

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.decorator(self.data, self.function, *args, **kwargs)

    def __repr__(self) -> str:
        return f"decorate({self.decorator!r})({self.data!r})({self.function!r})"


class Decoration:
    """A decorator with its data bound; applying it to a function decorates it."""

    __slots__ = ("decorator", "data")

    def __init__(self, decorator: Callable[..., Any], data: Any) -> None:
        self.decorator = decorator
        self.data = data

    def __call__(self, f: Callable[..., Any]) -> DecoratorInvoke:
        _require_callable(f, "decorated function")
        return DecoratorInvoke(self.decorator, self.data, f)

    def __repr__(self) -> str:
        return f"decorate({self.decorator!r})({self.data!r})"


class DecorateAdaptor:
    """Turns ``f(data, function, *args)`` into a decorator factory."""

    __slots__ = ("f",)

    def __init__(self, f: Callable[..., Any]) -> None:
        _require_callable(f, "decorator implementation")
        self.f = f

    def __call__(self, data: Any) -> Decoration:
        return Decoration(self.f, data)

    def __repr__(self) -> str:
        return f"decorate({self.f!r})"


def decorate(f: Callable[..., Any]) -> DecorateAdaptor:
    """Build a decorator factory: ``decorate(f)(x)(g)(*xs) == f(x, g, *xs)``."""
    return DecorateAdaptor(f)