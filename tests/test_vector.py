"""
Tests for VECMATtools/vector.py

Construction, parsing, bounds-checked access, reductions and value semantics
of the Vector type.
"""

import time

import numpy as np
import pytest

from VECMATtools import Vector, IndexOutOfBoundsError


def test_default_vector_is_three_zeros():
    v = Vector()
    assert len(v) == 3
    assert v.length() == 3
    assert v.dtype == np.int64
    assert list(v) == [0, 0, 0]


def test_empty_vector_is_valid():
    v = Vector(0)
    assert v.length() == 0
    assert list(v) == []
    assert v.sum() == 0
    assert v.norm() == 0.0


def test_invalid_construction_arguments():
    with pytest.raises(ValueError):
        Vector(-1)
    with pytest.raises(TypeError):
        Vector(2.5)
    with pytest.raises(TypeError):
        Vector(3, dtype=bool)
    with pytest.raises(TypeError):
        Vector(3, dtype=np.complex128)


def test_from_sequence_copies_and_infers_dtype():
    data = np.array([1, 2, 3], dtype=np.int64)
    v = Vector.from_sequence(data)
    data[0] = 99
    assert list(v) == [1, 2, 3]
    assert v.dtype == np.int64

    f = Vector.from_sequence([0.5, 1.5])
    assert f.dtype == np.float64

    empty = Vector.from_sequence([])
    assert empty.length() == 0
    assert empty.dtype == np.int64


def test_from_sequence_with_explicit_dtype():
    v = Vector.from_sequence([1, 2, 3], dtype=np.float32)
    assert v.dtype == np.float32
    assert list(v) == [1.0, 2.0, 3.0]


def test_from_sequence_rejects_nested_input():
    with pytest.raises(ValueError):
        Vector.from_sequence([[1, 2], [3, 4]])


def test_from_sequence_of_vector_is_a_copy():
    v = Vector.from_sequence([1, 2])
    w = Vector.from_sequence(v)
    w[0] = 10
    assert v[0] == 1


def test_from_string_digit_runs():
    assert list(Vector.from_string("1,2,3")) == [1, 2, 3]
    assert list(Vector.from_string("12abc345")) == [12, 345]
    assert list(Vector.from_string("[ 7, 8, 9 ]")) == [7, 8, 9]


def test_from_string_discards_signs_and_points():
    assert list(Vector.from_string("a-1b--2")) == [1, 2]
    assert list(Vector.from_string("3.14")) == [3, 14]


def test_from_string_without_digits_is_empty():
    assert Vector.from_string("").length() == 0
    assert Vector.from_string("no numbers here").length() == 0
    # non-ASCII digits are separators too
    assert Vector.from_string("١٢").length() == 0


def test_from_string_stops_at_out_of_range_run():
    v = Vector.from_string("1 2 300 4", dtype=np.int8)
    assert list(v) == [1, 2, 127]
    assert v.dtype == np.int8

    w = Vector.from_string("1 2 99999999999999999999 4")
    assert len(w) == 3
    assert list(w) == [1, 2, np.iinfo(np.int64).max]


def test_from_string_long_digit_run_is_fast():
    t0 = time.perf_counter()
    v = Vector.from_string("1," + "9" * 200000)
    dt = time.perf_counter() - t0
    assert list(v) == [1, np.iinfo(np.int64).max]
    assert dt < 1.0


def test_from_string_float_dtype():
    v = Vector.from_string("x=3, y=4", dtype=np.float64)
    assert v.dtype == np.float64
    assert list(v) == [3.0, 4.0]


def test_get_and_set():
    v = Vector(3)
    v[1] = 5
    v.set(2, 7)
    assert v.get(1) == 5
    assert v[2] == 7
    assert list(v) == [0, 5, 7]


def test_out_of_range_access_fails_without_mutation():
    v = Vector.from_sequence([1, 2, 3])
    with pytest.raises(IndexOutOfBoundsError) as exc:
        v[5]
    assert exc.value.index == 5
    assert exc.value.length == 3

    with pytest.raises(IndexOutOfBoundsError):
        v.set(3, 10)
    with pytest.raises(IndexOutOfBoundsError):
        v[-1] = 10
    assert list(v) == [1, 2, 3]


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        Vector(2).get(2)


def test_non_integer_index():
    with pytest.raises(TypeError):
        Vector(3)["0"]
    with pytest.raises(TypeError):
        Vector(3)[1.0]


def test_numpy_integer_index():
    v = Vector.from_sequence([4, 5, 6])
    assert v[np.int64(2)] == 6


def test_sum():
    assert Vector.from_sequence([1, 2, 3]).sum() == 6
    assert Vector.from_sequence([0.5, 0.25]).sum() == 0.75
    assert Vector.from_sequence([1, 2, 3], use_numba=False).sum() == 6


def test_sum_wraps_like_the_element_type():
    v = Vector.from_sequence([100, 100], dtype=np.int8)
    assert v.sum() == -56


def test_norm():
    assert np.isclose(Vector.from_sequence([3, 4]).norm(), 5.0, atol=1e-9)
    assert np.isclose(Vector.from_sequence([3.0, 4.0]).norm(), 5.0, atol=1e-9)
    assert np.isclose(Vector.from_sequence([3, 4], dtype=np.int16).norm(), 5.0, atol=1e-9)
    assert isinstance(Vector.from_sequence([1, 2]).norm(), float)


def test_norm_does_not_overflow_integer_squares():
    big = 4 * 10**9
    v = Vector.from_sequence([big, 0])
    assert np.isclose(v.norm(), float(big))


def test_iteration_is_restartable():
    v = Vector.from_sequence([1, 2, 3])
    assert list(v) == list(v)
    assert [e for e in v] == [1, 2, 3]


def test_mutation_through_enumerate():
    v = Vector.from_sequence([1, 2, 3])
    for i, e in enumerate(v):
        v[i] = e * 10
    assert list(v) == [10, 20, 30]


def test_copy_is_independent():
    v = Vector.from_sequence([1, 2, 3])
    w = v.copy()
    w[0] = 0
    assert v[0] == 1
    assert w == Vector.from_sequence([0, 2, 3])


def test_to_array_is_a_copy():
    v = Vector.from_sequence([1, 2, 3])
    arr = v.to_array()
    arr[0] = 42
    assert v[0] == 1


def test_equality():
    assert Vector.from_sequence([1, 2]) == Vector.from_sequence([1, 2])
    assert Vector.from_sequence([1, 2]) != Vector.from_sequence([1, 2, 0])
    assert Vector.from_sequence([1, 2]) != [1, 2]


def test_repr_and_str():
    v = Vector.from_sequence([1, 2, 3])
    assert repr(v) == "Vector([1, 2, 3], dtype=int64)"
    assert str(v) == "[ 1, 2, 3 ]"


def test_debug_prints(capsys):
    Vector(2, debug=True)
    out = capsys.readouterr().out
    assert "Vector: length=2" in out
