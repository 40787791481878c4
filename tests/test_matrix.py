import numpy as np
import pytest

from nn_playground.matrix import DimensionError, matrix_difference, matrix_product, outer_like_product, transpose


def test_matrix_product():
    np.testing.assert_array_equal(matrix_product([[1, 2]], [[1], [2]]), [[5]])
    np.testing.assert_array_equal(
        matrix_product([[1, 2], [3, 4]], [[1, 0, 2], [0, 1, 1]]),
        [[1, 2, 4], [3, 4, 10]],
    )


def test_matrix_product_dimension_mismatch():
    with pytest.raises(DimensionError, match=r"1x2 \* 3x2"):
        matrix_product([[1, 2]], [[1, 2], [3, 4], [5, 6]])


def test_dimension_error_is_value_error():
    with pytest.raises(ValueError):
        matrix_product([[1, 2]], [[1, 2, 3]])


def test_matrix_product_rejects_vectors():
    with pytest.raises(DimensionError):
        matrix_product([1, 2], [[1], [2]])


def test_outer_like_product():
    result = outer_like_product([[1, 2, 3]], [[10], [20]])
    np.testing.assert_array_equal(result, [[10, 20, 30], [20, 40, 60]])
    assert result.shape == (2, 3)


def test_outer_like_product_requires_row_and_column():
    with pytest.raises(DimensionError):
        outer_like_product([[1, 2], [3, 4]], [[1], [2]])
    with pytest.raises(DimensionError):
        outer_like_product([[1, 2]], [[1, 2]])


def test_matrix_difference():
    np.testing.assert_array_equal(matrix_difference([[5, 5], [1, 0]], [[1, 2], [3, 4]]), [[4, 3], [-2, -4]])


def test_matrix_difference_shape_mismatch():
    with pytest.raises(DimensionError, match="2x2 - 1x2"):
        matrix_difference([[1, 2], [3, 4]], [[1, 2]])


def test_transpose():
    np.testing.assert_array_equal(transpose([[1, 2, 3], [4, 5, 6]]), [[1, 4], [2, 5], [3, 6]])
    assert transpose([]).tolist() == []


def test_transpose_returns_copy():
    matrix = np.array([[1.0, 2.0]])
    result = transpose(matrix)
    result[0, 0] = 100.0
    assert matrix[0, 0] == 1.0
