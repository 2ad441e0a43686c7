"""Fill a matrix with a constant, an arithmetic sequence or random values."""

from __future__ import annotations

import numpy as np

from hostmat.matrix import HostMatrix

_default_rng = np.random.default_rng()


def fill_const(matrix: HostMatrix, value) -> None:
    """Set every element of ``matrix`` to ``value``."""
    matrix.fill(value)


def fill_iota(matrix: HostMatrix, start) -> None:
    """Set the elements, in row-major order, to ``start``, ``start + 1``, ..."""
    sequence = start + np.arange(matrix.size(), dtype=np.float64)
    matrix.data[...] = sequence.reshape(matrix.shape)


def fill_rand(matrix: HostMatrix, rng: np.random.Generator | None = None) -> None:
    """Set every element to a value drawn uniformly from [0, 1).

    Without ``rng`` a generator seeded once per process is used, so successive
    calls give different values.
    """
    generator = _default_rng if rng is None else rng
    matrix.data[...] = generator.random(matrix.shape, dtype=matrix.dtype)