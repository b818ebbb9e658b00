import pytest
from hypothesis import given
from hypothesis import strategies as st

from cslib.vector import Vector


def test_empty_vector():
    vec = Vector()
    assert len(vec) == 0
    assert vec.is_empty()
    assert str(vec) == "{}"


def test_filled_creates_copies_of_value():
    vec = Vector.filled(4, 7)
    assert list(vec) == [7, 7, 7, 7]
    assert len(vec) == 4


def test_filled_zero_is_empty():
    assert Vector.filled(0, 1).is_empty()


def test_filled_negative_raises():
    with pytest.raises(ValueError):
        Vector.filled(-1, 0)


def test_add_and_get():
    vec = Vector()
    vec.add("a")
    vec.add("b")
    assert vec.get(0) == "a"
    assert vec.get(1) == "b"
    assert not vec.is_empty()


def test_get_out_of_range():
    vec = Vector([1, 2])
    with pytest.raises(IndexError, match="get: index out of range"):
        vec.get(2)
    with pytest.raises(IndexError, match="get: index out of range"):
        vec.get(-1)


def test_set_replaces_value():
    vec = Vector([1, 2, 3])
    vec.set(1, 20)
    assert list(vec) == [1, 20, 3]


def test_set_out_of_range():
    with pytest.raises(IndexError, match="set: index out of range"):
        Vector().set(0, 1)


def test_insert_shifts_right():
    vec = Vector([1, 3])
    vec.insert(1, 2)
    vec.insert(0, 0)
    vec.insert(4, 4)
    assert list(vec) == [0, 1, 2, 3, 4]


def test_insert_out_of_range():
    vec = Vector([1])
    with pytest.raises(IndexError, match="insert: index out of range"):
        vec.insert(2, 9)
    with pytest.raises(IndexError, match="insert: index out of range"):
        vec.insert(-1, 9)


def test_remove_shifts_left():
    vec = Vector([1, 2, 3])
    vec.remove(1)
    assert list(vec) == [1, 3]


def test_remove_out_of_range():
    with pytest.raises(IndexError, match="remove: index out of range"):
        Vector([1]).remove(1)


def test_subscript_read_write():
    vec = Vector([5, 6])
    vec[0] = 50
    assert vec[0] == 50
    assert vec[1] == 6


def test_subscript_out_of_range():
    vec = Vector([1])
    with pytest.raises(IndexError, match="Selection index out of range"):
        vec[1]
    with pytest.raises(IndexError, match="Selection index out of range"):
        vec[-1] = 0
    assert list(vec) == [1]
    assert len(vec) == 1


def test_clear():
    vec = Vector([1, 2])
    vec.clear()
    assert vec.is_empty()
    assert len(vec) == 0


def test_concatenation_leaves_operands():
    a = Vector([1, 2])
    b = Vector([3])
    c = a + b
    assert list(c) == [1, 2, 3]
    assert list(a) == [1, 2]
    assert list(b) == [3]


def test_iadd_vector_and_value():
    vec = Vector([1])
    vec += Vector([2, 3])
    vec += 4
    assert list(vec) == [1, 2, 3, 4]


def test_iadd_self():
    vec = Vector([1, 2])
    vec += vec
    assert list(vec) == [1, 2, 1, 2]


def test_equality():
    assert Vector([1, 2]) == Vector([1, 2])
    assert not Vector([1, 2]) == Vector([2, 1])


def test_map_all_visits_in_order():
    seen = []
    Vector([3, 1, 2]).map_all(seen.append)
    assert seen == [3, 1, 2]


def test_str_numbers():
    assert str(Vector([1, 2, 3])) == "{1, 2, 3}"


def test_str_quotes_strings():
    assert str(Vector(["a", "b"])) == '{"a", "b"}'


def test_repr_roundtrip_content():
    vec = Vector([1, "x"])
    assert repr(vec) == "Vector([1, 'x'])"


@given(st.lists(st.integers()))
def test_add_each_matches_list(values):
    vec = Vector()
    for v in values:
        vec.add(v)
    assert list(vec) == values
    assert len(vec) == len(values)


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_concat_length(a, b):
    assert len(Vector(a) + Vector(b)) == len(a) + len(b)


@given(st.lists(st.integers(), min_size=1), st.data())
def test_insert_then_remove_restores(values, data):
    index = data.draw(st.integers(min_value=0, max_value=len(values)))
    vec = Vector(values)
    vec.insert(index, object())
    vec.remove(index)
    assert list(vec) == values