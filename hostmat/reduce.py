"""Sums over the elements of a matrix, plain or after an element-wise transform."""

from __future__ import annotations

from typing import Callable

import numpy as np

from hostmat.matrix import HostMatrix


def square(x):
    """``x * x``; works on scalars and arrays alike."""
    return x * x


def inverse_square(x):
    """``1 / (x * x)``; works on scalars and arrays alike."""
    return 1 / (x * x)


def _total(matrix: HostMatrix, values: np.ndarray, init) -> float:
    return float(matrix.dtype.type(init + values.sum(dtype=np.float64)))


def reduce_sum(matrix: HostMatrix, init=0.0) -> float:
    """``init`` plus the sum of all elements, rounded to the matrix's element type."""
    return _total(matrix, matrix.data.reshape(-1), init)


def transform_reduce_sum(matrix: HostMatrix, unary_op: Callable, init=0.0) -> float:
    """``init`` plus the sum of ``unary_op`` applied to every element.

    ``unary_op`` is first given the whole array of elements; if it cannot
    handle an array it is applied to the elements one at a time.
    """
    dtype = matrix.dtype
    flat = matrix.data.reshape(-1)
    try:
        mapped = np.asarray(unary_op(flat), dtype=dtype)
    except (TypeError, ValueError):
        mapped = None
    if mapped is None or mapped.shape != flat.shape:
        mapped = np.fromiter((unary_op(x) for x in flat), dtype=dtype, count=flat.size)
    return _total(matrix, mapped, init)