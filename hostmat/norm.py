"""Matrix norms."""

from __future__ import annotations

import math

from hostmat.matrix import HostMatrix
from hostmat.policy import Norm
from hostmat.reduce import square, transform_reduce_sum


def frobenius_norm(matrix: HostMatrix, implementation: Norm = Norm.BASE) -> float:
    """Square root of the sum of the squares of all elements."""
    if not isinstance(implementation, Norm):
        raise TypeError(f"unsupported norm implementation: {implementation!r}")
    total = transform_reduce_sum(matrix, square, 0.0)
    return float(matrix.dtype.type(math.sqrt(total)))