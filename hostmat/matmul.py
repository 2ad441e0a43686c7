"""Matrix-matrix products."""

from __future__ import annotations

import operator

import numpy as np

from hostmat.matrix import HostMatrix
from hostmat.policy import MM


def check_matmul_compatible_size(lhs: HostMatrix, rhs: HostMatrix) -> bool:
    """True when ``lhs`` has as many columns as ``rhs`` has rows."""
    return lhs.cols == rhs.rows


def _tiled(a: np.ndarray, b: np.ndarray, c: np.ndarray, tile: int) -> None:
    rows, inner = a.shape
    cols = b.shape[1]
    c[...] = 0
    for i in range(0, rows, tile):
        for j in range(0, cols, tile):
            block = c[i:i + tile, j:j + tile]
            for k in range(0, inner, tile):
                block += a[i:i + tile, k:k + tile] @ b[k:k + tile, j:j + tile]


def matmul(
    a: HostMatrix,
    b: HostMatrix,
    implementation: MM = MM.BASE,
    out: HostMatrix | None = None,
    tile: int = 16,
) -> HostMatrix:
    """Return ``a @ b``, written into ``out`` when it is given.

    Raises ValueError when the inner dimensions differ or ``out`` has the
    wrong shape, and TypeError for an unknown implementation.
    """
    if not isinstance(implementation, MM):
        raise TypeError(f"unsupported matrix-multiplication implementation: {implementation!r}")
    tile = operator.index(tile)
    if tile <= 0:
        raise ValueError("tile size must be positive")
    if not check_matmul_compatible_size(a, b):
        raise ValueError("Incompatible length matrix-matrix product")
    if out is None:
        out = HostMatrix(a.rows, b.cols, 0.0, dtype=a.dtype)
    elif out.shape != (a.rows, b.cols):
        raise ValueError("Incompatible output size for matrix-matrix product")
    if implementation is MM.BASE:
        out.data[...] = a.data @ b.data
    else:
        _tiled(a.data, b.data, out.data, tile)
    return out