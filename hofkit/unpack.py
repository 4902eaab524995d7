"""Call a function with the elements of a tuple-like sequence as arguments."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["is_unpackable", "unpack_sequence"]

_UNPACKABLE_TYPES: tuple[type, ...] = (tuple, list)


def is_unpackable(seq: Any) -> bool:
    """Tell whether ``seq`` (an object or a type) can be unpacked into a call.

    Tuples, named tuples and lists can be unpacked; anything else cannot.
    """
    if isinstance(seq, type):
        return issubclass(seq, _UNPACKABLE_TYPES)
    return isinstance(seq, _UNPACKABLE_TYPES)


def unpack_sequence(f: Callable[..., Any], seq: Any) -> Any:
    """Return ``f(*seq)`` for an unpackable ``seq``."""
    if not callable(f):
        raise TypeError(f"unpack needs a callable, got {type(f).__name__}")
    if not is_unpackable(seq):
        raise TypeError(f"cannot unpack a {type(seq).__name__}")
    return f(*seq)