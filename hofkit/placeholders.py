"""Placeholders that build functions out of Python operators.

Numbered placeholders ``_1`` .. ``_9`` build bind expressions: calling the
expression substitutes the n-th call argument for ``_n`` and evaluates any
nested bind expressions with the same arguments.

The unnamed placeholder ``_`` builds plain functions: ``_ + _`` is a binary
addition, ``_ - 1`` subtracts one from its argument and ``2 * _`` doubles it.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

__all__ = [
    "Placeholder",
    "BindExpression",
    "UnnamedPlaceholder",
    "PartialOperator",
    "is_placeholder",
    "_",
    "_1",
    "_2",
    "_3",
    "_4",
    "_5",
    "_6",
    "_7",
    "_8",
    "_9",
]


def _call(f: Callable[..., Any], *args: Any) -> Any:
    return f(*args)


class BindExpression:
    """A deferred call of ``op`` whose arguments may hold placeholders."""

    __slots__ = ("op", "args")

    def __init__(self, op: Callable[..., Any], *args: Any) -> None:
        self.op = op
        self.args = args

    def __call__(self, *args: Any) -> Any:
        return self.op(*(_resolve(bound, args) for bound in self.args))

    def __repr__(self) -> str:
        name = getattr(self.op, "__name__", repr(self.op))
        inner = ", ".join(repr(a) for a in self.args)
        return f"BindExpression({name}, {inner})"


def _resolve(bound: Any, args: tuple[Any, ...]) -> Any:
    if isinstance(bound, Placeholder):
        if bound.n > len(args):
            raise TypeError(
                f"placeholder {bound!r} needs at least {bound.n} "
                f"argument(s), got {len(args)}"
            )
        return args[bound.n - 1]
    if isinstance(bound, BindExpression):
        return bound(*args)
    return bound


def _forward(op: Callable[[Any, Any], Any]) -> Callable[[Any, Any], BindExpression]:
    def method(self: Placeholder, other: Any) -> BindExpression:
        return BindExpression(op, self, other)

    return method


def _reflected(op: Callable[[Any, Any], Any]) -> Callable[[Any, Any], BindExpression]:
    def method(self: Placeholder, other: Any) -> BindExpression:
        return BindExpression(op, other, self)

    return method


def _unary(op: Callable[[Any], Any]) -> Callable[[Any], BindExpression]:
    def method(self: Placeholder) -> BindExpression:
        return BindExpression(op, self)

    return method


class Placeholder:
    """The n-th argument of a bind expression, counting from 1."""

    __slots__ = ("n",)

    def __init__(self, n: int) -> None:
        if not isinstance(n, int) or isinstance(n, bool) or n < 1:
            raise ValueError(f"placeholder index must be a positive integer, got {n!r}")
        self.n = n

    def __call__(self, *args: Any) -> BindExpression:
        """Defer calling the n-th argument with ``args``."""
        return BindExpression(_call, self, *args)

    def __repr__(self) -> str:
        return f"_{self.n}"

    def __hash__(self) -> int:
        return hash((Placeholder, self.n))

    __add__ = _forward(operator.add)
    __radd__ = _reflected(operator.add)
    __sub__ = _forward(operator.sub)
    __rsub__ = _reflected(operator.sub)
    __mul__ = _forward(operator.mul)
    __rmul__ = _reflected(operator.mul)
    __truediv__ = _forward(operator.truediv)
    __rtruediv__ = _reflected(operator.truediv)
    __floordiv__ = _forward(operator.floordiv)
    __rfloordiv__ = _reflected(operator.floordiv)
    __mod__ = _forward(operator.mod)
    __rmod__ = _reflected(operator.mod)
    __rshift__ = _forward(operator.rshift)
    __rrshift__ = _reflected(operator.rshift)
    __lshift__ = _forward(operator.lshift)
    __rlshift__ = _reflected(operator.lshift)
    __and__ = _forward(operator.and_)
    __rand__ = _reflected(operator.and_)
    __xor__ = _forward(operator.xor)
    __rxor__ = _reflected(operator.xor)
    __or__ = _forward(operator.or_)
    __ror__ = _reflected(operator.or_)
    __gt__ = _forward(operator.gt)
    __lt__ = _forward(operator.lt)
    __ge__ = _forward(operator.ge)
    __le__ = _forward(operator.le)
    __eq__ = _forward(operator.eq)  # type: ignore[assignment]
    __ne__ = _forward(operator.ne)  # type: ignore[assignment]
    __invert__ = _unary(operator.invert)
    __pos__ = _unary(operator.pos)
    __neg__ = _unary(operator.neg)


class PartialOperator:
    """A binary operator with one operand already fixed."""

    __slots__ = ("op", "value", "bound_left")

    def __init__(self, op: Callable[[Any, Any], Any], value: Any, bound_left: bool) -> None:
        self.op = op
        self.value = value
        self.bound_left = bound_left

    def __call__(self, x: Any) -> Any:
        if self.bound_left:
            return self.op(self.value, x)
        return self.op(x, self.value)

    def __repr__(self) -> str:
        name = getattr(self.op, "__name__", repr(self.op))
        side = "left" if self.bound_left else "right"
        return f"PartialOperator({name}, {self.value!r}, {side})"


class _UnaryOperator:
    """A unary operator applied to its single argument."""

    __slots__ = ("op",)

    def __init__(self, op: Callable[[Any], Any]) -> None:
        self.op = op

    def __call__(self, x: Any) -> Any:
        return self.op(x)

    def __repr__(self) -> str:
        return f"_UnaryOperator({getattr(self.op, '__name__', repr(self.op))})"


def _unnamed_forward(op: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    def method(self: UnnamedPlaceholder, other: Any) -> Any:
        if isinstance(other, UnnamedPlaceholder):
            return op
        return PartialOperator(op, other, bound_left=False)

    return method


def _unnamed_reflected(op: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    def method(self: UnnamedPlaceholder, other: Any) -> Any:
        return PartialOperator(op, other, bound_left=True)

    return method


def _unnamed_unary(op: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def method(self: UnnamedPlaceholder) -> _UnaryOperator:
        return _UnaryOperator(op)

    return method


class UnnamedPlaceholder:
    """The ``_`` placeholder: each operator yields an ordinary function."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "_"

    def __hash__(self) -> int:
        return hash(UnnamedPlaceholder)

    __add__ = _unnamed_forward(operator.add)
    __radd__ = _unnamed_reflected(operator.add)
    __sub__ = _unnamed_forward(operator.sub)
    __rsub__ = _unnamed_reflected(operator.sub)
    __mul__ = _unnamed_forward(operator.mul)
    __rmul__ = _unnamed_reflected(operator.mul)
    __truediv__ = _unnamed_forward(operator.truediv)
    __rtruediv__ = _unnamed_reflected(operator.truediv)
    __floordiv__ = _unnamed_forward(operator.floordiv)
    __rfloordiv__ = _unnamed_reflected(operator.floordiv)
    __mod__ = _unnamed_forward(operator.mod)
    __rmod__ = _unnamed_reflected(operator.mod)
    __rshift__ = _unnamed_forward(operator.rshift)
    __rrshift__ = _unnamed_reflected(operator.rshift)
    __lshift__ = _unnamed_forward(operator.lshift)
    __rlshift__ = _unnamed_reflected(operator.lshift)
    __and__ = _unnamed_forward(operator.and_)
    __rand__ = _unnamed_reflected(operator.and_)
    __xor__ = _unnamed_forward(operator.xor)
    __rxor__ = _unnamed_reflected(operator.xor)
    __or__ = _unnamed_forward(operator.or_)
    __ror__ = _unnamed_reflected(operator.or_)
    __gt__ = _unnamed_forward(operator.gt)
    __lt__ = _unnamed_forward(operator.lt)
    __ge__ = _unnamed_forward(operator.ge)
    __le__ = _unnamed_forward(operator.le)
    __eq__ = _unnamed_forward(operator.eq)  # type: ignore[assignment]
    __ne__ = _unnamed_forward(operator.ne)  # type: ignore[assignment]
    __invert__ = _unnamed_unary(operator.invert)
    __pos__ = _unnamed_unary(operator.pos)
    __neg__ = _unnamed_unary(operator.neg)


def is_placeholder(obj: Any) -> int:
    """Return the index of a numbered placeholder, or 0 for anything else."""
    if isinstance(obj, Placeholder):
        return obj.n
    return 0


_1 = Placeholder(1)
_2 = Placeholder(2)
_3 = Placeholder(3)
_4 = Placeholder(4)
_5 = Placeholder(5)
_6 = Placeholder(6)
_7 = Placeholder(7)
_8 = Placeholder(8)
_9 = Placeholder(9)

_ = UnnamedPlaceholder()