"""Select one of the arguments a function is called with."""

from __future__ import annotations

from typing import Any

__all__ = ["ArgSelector", "arg", "arg_c"]


def _check_index(n: Any) -> int:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"argument index must be an integer, got {type(n).__name__}")
    if n < 1:
        raise ValueError(f"argument index starts at 1, got {n}")
    return n


def _select(n: int, args: tuple[Any, ...]) -> Any:
    if n > len(args):
        raise TypeError(
            f"selecting argument {n} needs at least {n} argument(s), got {len(args)}"
        )
    return args[n - 1]


class ArgSelector:
    """Callable that returns its n-th argument, counting from 1."""

    __slots__ = ("n",)

    def __init__(self, n: int) -> None:
        self.n = _check_index(n)

    def __call__(self, *args: Any) -> Any:
        return _select(self.n, args)

    def __repr__(self) -> str:
        return f"arg({self.n})"


def arg(n: int) -> ArgSelector:
    """Build a function that returns its ``n``-th argument (1-based)."""
    return ArgSelector(n)


def arg_c(n: int, *args: Any) -> Any:
    """Return the ``n``-th of ``args`` (1-based)."""
    return _select(_check_index(n), args)