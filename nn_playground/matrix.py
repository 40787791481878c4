'''
Name: NN Playground
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/08/04
'''
import numpy as np


class DimensionError(ValueError):
    """矩陣或向量的維度不符合運算要求。"""


def _as_matrix(matrix, name):
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2:
        raise DimensionError(f"{name} 必須是二維矩陣，目前維度為 {matrix.ndim}")
    return matrix


def _shape(matrix):
    return f"{matrix.shape[0]}x{matrix.shape[1]}"


def matrix_product(a, b):
    """
    標準矩陣乘法 (m x n) * (n x l) -> (m x l)。

    參數:
        a: 左矩陣。
        b: 右矩陣。

    返回:
        np.array: 乘積矩陣。
    """
    a = _as_matrix(a, 'a')
    b = _as_matrix(b, 'b')
    if a.shape[1] != b.shape[0]:
        raise DimensionError(f"Cannot multiply matrices: ({_shape(a)} * {_shape(b)})")
    return np.dot(a, b)


def outer_like_product(a, b):
    """
    以 1 x n 的 a 和 m x 1 的 b 建立 m x n 矩陣，
    result[i][j] = a[0][j] * b[i][0]。
    反向傳播時用來產生權重的修正量。
    """
    a = _as_matrix(a, 'a')
    b = _as_matrix(b, 'b')
    if a.shape[0] != 1 or b.shape[1] != 1:
        raise DimensionError(f"Cannot build outer product: ({_shape(a)} x {_shape(b)}), expected (1xn x mx1)")
    return b[:, 0:1] * a[0]


def matrix_difference(a, b):
    """逐元素相減 a - b，兩個矩陣的大小必須相同。"""
    a = _as_matrix(a, 'a')
    b = _as_matrix(b, 'b')
    if a.shape != b.shape:
        raise DimensionError(f"Cannot subtract matrices: ({_shape(a)} - {_shape(b)})")
    return a - b


def transpose(matrix):
    """轉置矩陣，空的輸入回傳空的結果。"""
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.size == 0 and matrix.ndim < 2:
        return np.empty((0, 0))
    return _as_matrix(matrix, 'matrix').T.copy()
