import pytest

from hofkit.decay import decay


def test_immutable_value_unchanged():
    assert decay(5) == 5
    assert decay("text") == "text"


def test_list_is_copied():
    original = [1, 2, 3]
    result = decay(original)
    assert result == original
    result.append(4)
    assert original == [1, 2, 3]


def test_copy_is_shallow():
    inner = [1]
    original = [inner]
    result = decay(original)
    assert result[0] is inner


def test_dict_round_trip():
    original = {"a": 1}
    result = decay(original)
    assert result == original
    result["b"] = 2
    assert original == {"a": 1}


def test_type_is_preserved():
    original = {1, 2}
    result = decay(original)
    assert isinstance(result, set)
    assert result == {1, 2}
    result.add(3)
    assert original == {1, 2}


class _Uncopyable:
    def __copy__(self):
        raise TypeError("not copyable")


def test_uncopyable_raises():
    with pytest.raises(TypeError):
        decay(_Uncopyable())