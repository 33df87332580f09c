import numpy as np

from quantseq import quantile_seq, quantiles
from quantseq.arrays import apply_along_axis, flatten, ndim

M = [[1, 2, 3], [4, 5, 6]]


def test_reduce_rows_and_columns():
    assert quantile_seq(M, 0.5, 1) == [2, 5]
    assert quantile_seq(M, 0.5, 0) == [2.5, 3.5, 4.5]
    assert quantile_seq(M, 0.5, axis=0) == [2.5, 3.5, 4.5]


def test_sorted_with_axis():
    assert quantile_seq(M, 0.5, True, 1) == [2, 5]
    assert quantile_seq(M, 1, False, 0) == [4, 5, 6]


def test_sequence_result_adds_inner_axis():
    data = [[1, 2, 3, 4], [5, 6, 7, 8]]
    assert quantile_seq(data, 2, 1) == [[2, 3], [6, 7]]
    assert quantile_seq(data, [0, 1], 1) == [[1, 4], [5, 8]]


def test_three_dimensional():
    cube = [[[1, 2], [3, 4]], [[5, 6], [7, 8]]]
    assert quantile_seq(cube, 0.5, 0) == [[3, 4], [5, 6]]
    assert quantile_seq(cube, 0.5, 1) == [[2, 3], [6, 7]]
    assert quantile_seq(cube, 0.5, 2) == [[1.5, 3.5], [5.5, 7.5]]


def test_one_dimensional_axis_zero_is_plain_quantile():
    assert quantile_seq([3, -1, 5, 7], 0.5, 0) == 4


def test_numpy_input_gives_numpy_output():
    arr = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    out = quantile_seq(arr, 0.5, axis=0)
    assert isinstance(out, np.ndarray)
    np.testing.assert_allclose(out, [2.5, 3.5, 4.5])
    np.testing.assert_allclose(out, np.quantile(arr, 0.5, axis=0))
    np.testing.assert_allclose(quantile_seq(arr, [0.25, 0.75], axis=1), np.quantile(arr, [0.25, 0.75], axis=1).T)


def test_axis_does_not_mutate_input():
    data = [[9, 1, 5], [3, 7, 2]]
    quantile_seq(data, 0.5, 1)
    quantile_seq(data, 0.5, 0)
    assert data == [[9, 1, 5], [3, 7, 2]]


def test_collection_helpers():
    assert flatten([[1, [2, 3]], (4,), np.array([5, 6])]) == [1, 2, 3, 4, 5, 6]
    assert ndim([[1, 2], [3, 4]]) == 2
    assert ndim(np.zeros((2, 3, 4))) == 3
    assert ndim([]) == 1
    assert apply_along_axis([[1, 2], [3, 4]], 1, sum) == [3, 7]
    assert apply_along_axis([[1, 2], [3, 4]], 0, sum) == [4, 6]


def test_quantiles_helper_along_axis_treats_one_as_median():
    data = [[1, 2, 3], [4, 5, 6]]
    assert quantiles(data, 1, axis=1) == [[2], [5]]
    assert quantiles(data, 1, axis=0) == [[2.5], [3.5], [4.5]]
    assert quantiles(data, 2, axis=1) == quantile_seq(data, 2, axis=1)
