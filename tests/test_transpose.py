import numpy as np
import pytest

from hostmat.fill import fill_iota, fill_rand
from hostmat.matrix import HostMatrix
from hostmat.policy import MM, Trans
from hostmat.transpose import check_transposition_compatible_size, transpose


def _sizes(count, r=5, c=2):
    for _ in range(count):
        yield r, c
        r, c = c * 5, r * 2


@pytest.mark.parametrize("dtype", [np.float64, np.float32])
def test_transpose_round_trips_and_agree(dtype):
    rng = np.random.default_rng(11)
    for r, c in _sizes(5):
        x = HostMatrix(r, c, dtype=dtype)
        y = HostMatrix(r, c, dtype=dtype)
        x0 = HostMatrix(r, c, dtype=dtype)
        y0 = HostMatrix(r, c, dtype=dtype)
        b0 = HostMatrix(c, r, dtype=dtype)
        t0 = HostMatrix(c, r, dtype=dtype)
        err = HostMatrix(99, 99, dtype=dtype)

        fill_rand(x, rng)
        y.copy_from(x)
        assert x == y

        with pytest.raises(ValueError):
            transpose(x, Trans.BASE, out=err)
        with pytest.raises(ValueError):
            transpose(y, Trans.TILED, out=err)

        transpose(x, Trans.BASE, out=b0, tile=8)
        transpose(b0, Trans.BASE, out=x0, tile=8)
        b1 = transpose(x, Trans.BASE, tile=16)
        x1 = transpose(b1, Trans.BASE, tile=16)
        b2 = transpose(x, Trans.BASE, tile=32)
        x2 = transpose(b2, Trans.BASE, tile=32)

        transpose(y, Trans.TILED, out=t0, tile=8)
        transpose(t0, Trans.TILED, out=y0, tile=8)
        t1 = transpose(y, Trans.TILED, tile=16)
        y1 = transpose(t1, Trans.TILED, tile=16)
        t2 = transpose(y, Trans.TILED, tile=32)
        y2 = transpose(t2, Trans.TILED, tile=32)

        assert x == x0
        assert x == x1
        assert x == x2
        assert y == y0
        assert y == y1
        assert y == y2

        assert b0 == t0
        assert b1 == t1
        assert b2 == t2
        assert b0 == b1
        assert b1 == b2
        assert t0 == t1
        assert t1 == t2


@pytest.mark.parametrize("implementation", [Trans.BASE, Trans.TILED])
def test_known_transpose(implementation):
    a = HostMatrix(2, 3)
    fill_iota(a, 1)
    b = transpose(a, implementation, tile=2)
    assert b.shape == (3, 2)
    assert list(b) == [1.0, 4.0, 2.0, 5.0, 3.0, 6.0]


def test_out_is_returned():
    a = HostMatrix(3, 1, 2.0)
    out = HostMatrix(1, 3)
    assert transpose(a, Trans.TILED, out=out) is out
    assert list(out) == [2.0, 2.0, 2.0]


def test_bad_implementation_and_tile():
    a = HostMatrix(2, 2)
    with pytest.raises(TypeError):
        transpose(a, MM.BASE)
    with pytest.raises(ValueError):
        transpose(a, Trans.TILED, tile=-1)


def test_check_transposition_compatible_size():
    assert check_transposition_compatible_size(HostMatrix(5, 2), HostMatrix(2, 5)) is True
    assert check_transposition_compatible_size(HostMatrix(5, 2), HostMatrix(5, 2)) is False