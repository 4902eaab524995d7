"""Decay-copy: hand back a value detached from the caller's object."""

from __future__ import annotations

import copy
from typing import TypeVar

T = TypeVar("T")

__all__ = ["decay"]


def decay(x: T) -> T:
    """Return a shallow copy of ``x``.

    Immutable values come back unchanged. Containers and other mutable
    objects come back as a fresh object of the same type. An object that
    refuses to be copied raises the error its copy hook raises.
    """
    return copy.copy(x)