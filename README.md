# hostmat

Dense row-major matrices of `float32` or `float64` values, built on NumPy. It has:

- `hostmat.matrix.HostMatrix`: element-wise arithmetic (`+`, `-` and the Hadamard product `*` between matrices of equal shape, and `*` with a scalar on either side, plus the in-place forms). A shape mismatch raises `ValueError`.
- equality within a per-dtype tolerance (`HostMatrix.tol()`: `1e-3` for `float32`, `1e-6` for `float64`); matrices of different shapes are never equal.
- element access by flat index (`m[i]`) or by row and column (`m[r, c]`), iteration in row-major order, `copy()`, `fill()` and `copy_from()`.
- `check_equal_size`, `swap` and `print_matrix` in `hostmat.matrix`.
- `hostmat.fill`: `fill_const`, `fill_iota` (an increasing sequence) and `fill_rand` (uniform values in [0, 1), optionally from a given `numpy.random.Generator`).
- `hostmat.reduce`: `reduce_sum` and `transform_reduce_sum`, with the helpers `square` and `inverse_square`.
- `hostmat.matmul.matmul` and `hostmat.transpose.transpose`, each with a straightforward (`MM.BASE` / `Trans.BASE`) and a tiled (`MM.TILED` / `Trans.TILED`) strategy, an optional `out` matrix and a `tile` size.
- `hostmat.norm.frobenius_norm`.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
import numpy as np
from hostmat.matrix import HostMatrix, print_matrix
from hostmat.fill import fill_iota, fill_rand
from hostmat.reduce import reduce_sum, transform_reduce_sum, square
from hostmat.matmul import matmul
from hostmat.transpose import transpose
from hostmat.norm import frobenius_norm
from hostmat.policy import MM, Trans, Norm

a = HostMatrix(2, 5, 2.0, np.float64)
b = HostMatrix(2, 5, 3.0, np.float64)
c = a + b                      # every element is 5
c *= b                         # Hadamard product: every element is 15
assert c == HostMatrix(2, 5, 15.0, np.float64)

fill_iota(a, 1.0)              # 1, 2, ..., 10
print(reduce_sum(a, 0.0))                     # 55.0
print(transform_reduce_sum(a, square, 0.0))   # 385.0

x = HostMatrix(5, 3, 0.0, np.float64)
y = HostMatrix(3, 2, 0.0, np.float64)
fill_rand(x)
fill_rand(y)
p = matmul(x, y, MM.TILED)     # 5 x 2 product
t = transpose(x, Trans.BASE)   # 3 x 5 transpose

print(frobenius_norm(a, Norm.BASE))
print_matrix(t)
```

If the shapes do not fit, `matmul`, `transpose` and the arithmetic operators raise `ValueError`; an implementation value of the wrong kind raises `TypeError`.

## Demo

The package has a command that exercises every feature and prints `true` or `false` for each check:

```
hostmat-demo
```

Options: `--double` uses `float64` instead of `float32`, `--rounds N` runs at most `N` rounds in each section, and `--seed S` seeds the random fills.

## What it does not do

Everything runs on the CPU through NumPy. There are no GPU matrices and no backends that call vendor linear-algebra libraries; `MM`, `Trans` and `Norm` offer only the strategies listed above.