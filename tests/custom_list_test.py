import pytest

from devtypes.datastructures import CustomList


def test_get_valid_indices_matches_builtin_list_behavior():
    data = [10, 20, 30, 40]
    cl = CustomList(data)
    for i in range(-len(data), len(data)):
        assert cl.get(i) == data[i]
        assert cl[i] == data[i]


def test_get_out_of_range_returns_default():
    cl = CustomList([1, 2])
    assert cl.get(5) is None
    assert cl.get(-3, "d") == "d"
    with pytest.raises(IndexError):
        cl[2]


def test_append_grows_past_initial_capacity():
    cl = CustomList()
    for i in range(100):
        cl.append(i)
    assert len(cl) == 100
    assert cl.to_py() == list(range(100))


def test_pop_shifts_left_and_shrinks():
    cl = CustomList(range(64))
    assert cl.pop(0) == 0
    assert cl[0] == 1
    assert cl.pop() == 63
    while len(cl) > 2:
        cl.pop(1)
    assert cl.to_py() == [1, 62]
    assert cl._capacity < 64


def test_pop_errors():
    with pytest.raises(IndexError):
        CustomList().pop()
    with pytest.raises(IndexError):
        CustomList([1]).pop(3)


def test_find_index_and_index():
    cl = CustomList(["a", "b", "a"])
    assert cl.find_index(lambda v: v == "a") == 0
    assert cl.find_index(lambda v: v == "z") == -1
    assert cl.index("b") == 1
    with pytest.raises(ValueError):
        cl.index("z")
    assert "b" in cl
    assert "z" not in cl


def test_slice_and_setitem():
    cl = CustomList(range(6))
    assert cl[1:4] == [1, 2, 3]
    assert cl[::-2] == [5, 3, 1]
    cl[-1] = 50
    assert cl[5] == 50


def test_equality_with_sequences():
    assert CustomList([1, 2]) == [1, 2]
    assert CustomList([1, 2]) == (1, 2)
    assert CustomList([1, 2]) == CustomList([1, 2])
    assert CustomList([1, 2]) != [2, 1]
    assert CustomList([1]) != [1, 2]


def test_clear():
    cl = CustomList(range(10))
    cl.clear()
    assert len(cl) == 0
    assert not cl
    cl.append("x")
    assert cl.to_py() == ["x"]
