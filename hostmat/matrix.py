"""Dense row-major matrices of floating-point values with tolerant comparison."""

from __future__ import annotations

import operator
import sys
from numbers import Real
from typing import Iterator, TextIO

import numpy as np

_TOLERANCES = {
    np.dtype(np.float32): 1e-3,
    np.dtype(np.float64): 1e-6,
}


class HostMatrix:
    """A rows x cols matrix of float32 or float64 values stored row by row."""

    __slots__ = ("_data",)
    # Keep numpy from treating the matrix as a sequence in mixed expressions.
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows, cols, value=0.0, dtype=np.float64):
        dt = np.dtype(dtype)
        if dt not in _TOLERANCES:
            raise TypeError(f"unsupported element type: {dt}")
        rows = operator.index(rows)
        cols = operator.index(cols)
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self._data = np.full((rows, cols), value, dtype=dt)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "HostMatrix":
        matrix = cls.__new__(cls)
        matrix._data = array
        return matrix

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def data(self) -> np.ndarray:
        """The underlying two-dimensional array (shared, not copied)."""
        return self._data

    def tol(self) -> float:
        """Absolute tolerance used when comparing elements."""
        return _TOLERANCES[self._data.dtype]

    def size(self) -> int:
        return self._data.size

    def copy(self) -> "HostMatrix":
        return self._wrap(self._data.copy())

    def fill(self, value) -> None:
        self._data.fill(value)

    def copy_from(self, other: "HostMatrix") -> None:
        """Copy the elements of ``other``, in order, into the leading elements of this matrix."""
        count = other.size()
        if count > self.size():
            raise ValueError("source matrix does not fit into destination")
        self._data.reshape(-1)[:count] = other._data.reshape(-1)

    def __len__(self) -> int:
        return self._data.size

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.reshape(-1).tolist())

    def _locate(self, key):
        if isinstance(key, tuple):
            row, col = key
            return self._data, (operator.index(row), operator.index(col))
        try:
            return self._data.reshape(-1), operator.index(key)
        except TypeError:
            raise TypeError(f"invalid matrix index: {key!r}") from None

    def __getitem__(self, key) -> float:
        array, index = self._locate(key)
        return array[index].item()

    def __setitem__(self, key, value) -> None:
        array, index = self._locate(key)
        array[index] = value

    def __eq__(self, other):
        if not isinstance(other, HostMatrix):
            return NotImplemented
        if not check_equal_size(self, other):
            return False
        return not bool(np.any(np.abs(self._data - other._data) > self.tol()))

    def __repr__(self) -> str:
        return f"HostMatrix(rows={self.rows}, cols={self.cols}, dtype={self.dtype.name})"

    def _require_same_size(self, other: "HostMatrix", operation: str) -> None:
        if not check_equal_size(self, other):
            raise ValueError(f"Incompatible sizes for matrix-matrix {operation}")

    def __iadd__(self, other):
        if not isinstance(other, HostMatrix):
            return NotImplemented
        self._require_same_size(other, "addition")
        self._data += other._data
        return self

    def __add__(self, other):
        if not isinstance(other, HostMatrix):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __isub__(self, other):
        if not isinstance(other, HostMatrix):
            return NotImplemented
        self._require_same_size(other, "subtraction")
        self._data -= other._data
        return self

    def __sub__(self, other):
        if not isinstance(other, HostMatrix):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __imul__(self, other):
        if isinstance(other, HostMatrix):
            self._require_same_size(other, "Hadamard product")
            self._data *= other._data
            return self
        if isinstance(other, Real):
            self._data *= self._data.dtype.type(other)
            return self
        return NotImplemented

    def __mul__(self, other):
        if not isinstance(other, (HostMatrix, Real)):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return self * other


def check_equal_size(lhs: HostMatrix, rhs: HostMatrix) -> bool:
    """True when both matrices have the same number of rows and columns."""
    return lhs.rows == rhs.rows and lhs.cols == rhs.cols


def swap(a: HostMatrix, b: HostMatrix) -> None:
    """Exchange the contents of two matrices."""
    a._data, b._data = b._data, a._data


def print_matrix(matrix: HostMatrix, file: TextIO | None = None) -> None:
    """Write the matrix row by row, each row between bracket lines."""
    out = sys.stdout if file is None else file
    for row in matrix.data:
        out.write("[\n")
        out.write("".join(f"{float(x):g} " for x in row))
        out.write("]\n")
    out.write("\n")