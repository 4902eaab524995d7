import pytest

from hofkit.arg import arg
from hofkit.flip import FlipAdaptor, flip
from hofkit.placeholders import _


def test_flip_subtract():
    assert 3 == flip(_ - _)(2, 5)


@pytest.mark.parametrize(
    "n, plain, flipped",
    [(1, 1, 2), (2, 2, 1), (3, 3, 3)],
)
def test_flip_arg(n, plain, flipped):
    assert plain == arg(n)(1, 2, 3, 4)
    assert flipped == flip(arg(n))(1, 2, 3, 4)


def test_flip_with_none_pointer():
    def f(i, pointer):
        return i

    assert flip(f)(None, 2) == 2


def test_flip_twice_is_identity():
    g = flip(flip(_ - _))
    assert g(10, 4) == (_ - _)(10, 4)


def test_flip_needs_two_arguments():
    with pytest.raises(TypeError):
        flip(_ - _)(1)


def test_flip_needs_callable():
    with pytest.raises(TypeError):
        FlipAdaptor(5)