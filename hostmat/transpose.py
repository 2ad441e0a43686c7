"""Matrix transposition."""

from __future__ import annotations

import operator

import numpy as np

from hostmat.matrix import HostMatrix
from hostmat.policy import Trans


def check_transposition_compatible_size(lhs: HostMatrix, rhs: HostMatrix) -> bool:
    """True when ``rhs`` has the shape of the transpose of ``lhs``."""
    return lhs.cols == rhs.rows and lhs.rows == rhs.cols


def _tiled(src: np.ndarray, dst: np.ndarray, tile: int) -> None:
    rows, cols = src.shape
    for i in range(0, rows, tile):
        for j in range(0, cols, tile):
            dst[j:j + tile, i:i + tile] = src[i:i + tile, j:j + tile].T


def transpose(
    a: HostMatrix,
    implementation: Trans = Trans.BASE,
    out: HostMatrix | None = None,
    tile: int = 32,
) -> HostMatrix:
    """Return the transpose of ``a``, written into ``out`` when it is given.

    Raises ValueError when ``out`` does not have the transposed shape, and
    TypeError for an unknown implementation.
    """
    if not isinstance(implementation, Trans):
        raise TypeError(f"unsupported transposition implementation: {implementation!r}")
    tile = operator.index(tile)
    if tile <= 0:
        raise ValueError("tile size must be positive")
    if out is None:
        out = HostMatrix(a.cols, a.rows, 0.0, dtype=a.dtype)
    elif not check_transposition_compatible_size(a, out):
        raise ValueError("Incompatible sizes for matrix transposition")
    if implementation is Trans.BASE:
        out.data[...] = a.data.T
    else:
        _tiled(a.data, out.data, tile)
    return out