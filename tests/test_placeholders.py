import operator

import pytest

from hofkit.placeholders import (
    BindExpression,
    PartialOperator,
    Placeholder,
    UnnamedPlaceholder,
    _,
    _1,
    _2,
    _9,
    is_placeholder,
)


def square(x):
    return x * x


@pytest.mark.parametrize(
    "op, a, b, expected",
    [
        (operator.add, 2, 1, 3),
        (operator.sub, 2, 1, 1),
        (operator.mul, 2, 1, 2),
        (operator.truediv, 2, 1, 2),
        (operator.mod, 2, 1, 0),
        (operator.rshift, 2, 1, 1),
        (operator.lshift, 2, 1, 4),
        (operator.gt, 2, 1, True),
        (operator.lt, 2, 1, False),
        (operator.le, 2, 1, False),
        (operator.ge, 2, 1, True),
        (operator.eq, 2, 1, False),
        (operator.ne, 2, 1, True),
        (operator.and_, 2, 1, 0),
        (operator.xor, 2, 1, 3),
        (operator.or_, 2, 1, 3),
        (operator.and_, True, False, False),
        (operator.or_, True, False, True),
    ],
)
def test_numbered_binary_operators(op, a, b, expected):
    f = op(Placeholder(1), Placeholder(2))
    assert f(a, b) == expected


@pytest.mark.parametrize(
    "op, a, expected",
    [
        (operator.invert, 2, -3),
        (operator.pos, 2, 2),
        (operator.neg, 2, -2),
    ],
)
def test_numbered_unary_operators(op, a, expected):
    f = op(Placeholder(1))
    assert f(a) == expected


def test_square_add_with_nested_bind():
    f = _1 + BindExpression(square, _2)
    assert f(2, 4) == 18


def test_placeholder_call_defers_invocation():
    f = _1(3)
    assert f(square) == 9


def test_nested_bind_expressions():
    f = Placeholder(1) + (Placeholder(2) * Placeholder(3))
    assert f(1, 2, 3) == 7


def test_floor_division():
    f = Placeholder(1) // Placeholder(2)
    assert f(7, 2) == 3


def test_value_on_left_of_numbered_placeholder():
    first = Placeholder(1)
    assert (2 - first)(1) == 1
    assert (10 > first)(3) is True


def test_missing_argument_raises():
    f = Placeholder(1) + Placeholder(2)
    with pytest.raises(TypeError):
        f(1)


def test_invalid_placeholder_index():
    with pytest.raises(ValueError):
        Placeholder(0)


@pytest.mark.parametrize(
    "op, a, b, expected",
    [
        (operator.add, 2, 1, 3),
        (operator.sub, 2, 1, 1),
        (operator.mul, 2, 1, 2),
        (operator.truediv, 2, 1, 2),
        (operator.mod, 2, 1, 0),
        (operator.rshift, 2, 1, 1),
        (operator.lshift, 2, 1, 4),
        (operator.gt, 2, 1, True),
        (operator.lt, 2, 1, False),
        (operator.le, 2, 1, False),
        (operator.ge, 2, 1, True),
        (operator.eq, 2, 1, False),
        (operator.ne, 2, 1, True),
        (operator.and_, 2, 1, 0),
        (operator.xor, 2, 1, 3),
        (operator.or_, 2, 1, 3),
        (operator.and_, True, False, False),
        (operator.or_, True, False, True),
    ],
)
def test_unnamed_binary_operators(op, a, b, expected):
    f = op(UnnamedPlaceholder(), UnnamedPlaceholder())
    assert f(a, b) == expected


@pytest.mark.parametrize(
    "op, value, x, expected",
    [
        (operator.add, 2, 1, 3),
        (operator.sub, 2, 1, 1),
        (operator.mul, 2, 1, 2),
        (operator.truediv, 2, 1, 2),
        (operator.mod, 2, 1, 0),
        (operator.rshift, 2, 1, 1),
        (operator.lshift, 2, 1, 4),
        (operator.gt, 2, 1, True),
        (operator.lt, 2, 1, False),
        (operator.le, 2, 1, False),
        (operator.ge, 2, 1, True),
        (operator.eq, 2, 1, False),
        (operator.ne, 2, 1, True),
        (operator.and_, 2, 1, 0),
        (operator.xor, 2, 1, 3),
        (operator.or_, 2, 1, 3),
        (operator.and_, True, False, False),
        (operator.or_, True, False, True),
    ],
)
def test_unnamed_value_on_left(op, value, x, expected):
    f = op(value, UnnamedPlaceholder())
    assert f(x) == expected


@pytest.mark.parametrize(
    "op, value, x, expected",
    [
        (operator.add, 1, 2, 3),
        (operator.sub, 1, 2, 1),
        (operator.mul, 1, 2, 2),
        (operator.truediv, 1, 2, 2),
        (operator.mod, 1, 2, 0),
        (operator.rshift, 1, 2, 1),
        (operator.lshift, 1, 2, 4),
        (operator.gt, 1, 2, True),
        (operator.lt, 1, 2, False),
        (operator.le, 1, 2, False),
        (operator.ge, 1, 2, True),
        (operator.eq, 1, 2, False),
        (operator.ne, 1, 2, True),
        (operator.and_, 1, 2, 0),
        (operator.xor, 1, 2, 3),
        (operator.or_, 1, 2, 3),
        (operator.and_, False, True, False),
        (operator.or_, False, True, True),
    ],
)
def test_unnamed_value_on_right(op, value, x, expected):
    f = op(UnnamedPlaceholder(), value)
    assert f(x) == expected


@pytest.mark.parametrize(
    "op, x, expected",
    [
        (operator.invert, 2, -3),
        (operator.pos, 2, 2),
        (operator.neg, 2, -2),
    ],
)
def test_unnamed_unary_operators(op, x, expected):
    f = op(UnnamedPlaceholder())
    assert f(x) == expected


def test_partial_operator_sides():
    assert PartialOperator(lambda a, b: a - b, 10, bound_left=True)(4) == 6
    assert PartialOperator(lambda a, b: a - b, 10, bound_left=False)(4) == -6


def test_is_placeholder():
    assert is_placeholder(_1) == 1
    assert is_placeholder(_9) == 9
    assert is_placeholder(_) == 0
    assert is_placeholder(3) == 0
    assert is_placeholder(_1 + _2) == 0