import math

import numpy as np
import pytest

from hostmat.fill import fill_const, fill_iota, fill_rand
from hostmat.matrix import HostMatrix
from hostmat.norm import frobenius_norm
from hostmat.policy import MM, Norm


def _sizes(count, r=5, c=2):
    for _ in range(count):
        yield r, c
        r, c = c * 5, r * 2


@pytest.mark.parametrize("dtype,rel", [(np.float64, 1e-9), (np.float32, 1e-5)])
def test_frobenius_norm_cases(dtype, rel):
    rng = np.random.default_rng(3)
    for r, c in _sizes(5):
        a = HostMatrix(r, c, dtype=dtype)
        fill_rand(a, rng)
        expected = math.sqrt(r * c / 3.0)
        assert frobenius_norm(a, Norm.BASE) == pytest.approx(expected, abs=0.99)

        fill_const(a, 3)
        expected = math.sqrt(3.0 * 3.0 * r * c)
        assert frobenius_norm(a, Norm.BASE) == pytest.approx(expected, rel=rel)

        fill_iota(a, 1)
        n1 = float(r * c)
        n2 = float(r * r * c * c)
        n3 = float(r * r * r * c * c * c)
        expected = math.sqrt(n3 / 3 + n2 / 2 + n1 / 6)
        assert frobenius_norm(a, Norm.BASE) == pytest.approx(expected, rel=rel)


def test_known_norm():
    a = HostMatrix(1, 2)
    a[0] = 3.0
    a[1] = 4.0
    assert frobenius_norm(a) == 5.0


def test_bad_implementation():
    with pytest.raises(TypeError):
        frobenius_norm(HostMatrix(2, 2), MM.BASE)