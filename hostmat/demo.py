"""Command-line walk through the matrix operations, printing one check per line."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

import numpy as np

from hostmat.fill import fill_const, fill_iota, fill_rand
from hostmat.matmul import matmul
from hostmat.matrix import HostMatrix, print_matrix, swap
from hostmat.norm import frobenius_norm
from hostmat.policy import MM, Norm, Trans
from hostmat.reduce import reduce_sum
from hostmat.transpose import transpose

RULE = "-" * 56
LONG_RULE = "-" * 57

# Number of rounds each section runs, per element type.
_ROUNDS = {
    np.dtype(np.float32): {
        "constructors": 7,
        "algorithms": 8,
        "reduce": 3,
        "arithmetic": 8,
        "matmul": 7,
        "transpose": 7,
        "norm": 6,
    },
    np.dtype(np.float64): {
        "constructors": 8,
        "algorithms": 8,
        "reduce": 8,
        "arithmetic": 8,
        "matmul": 7,
        "transpose": 8,
        "norm": 8,
    },
}


def _flag(value: bool, out: TextIO) -> None:
    print("true" if value else "false", file=out)


def _constructors(dtype, rounds: int, out: TextIO) -> None:
    print("Test Matrix constructors", file=out)
    r, c = 2, 5
    for n in range(1, rounds + 1):
        a = HostMatrix(r, c, n, dtype=dtype)
        mve1 = HostMatrix(r, c, dtype=dtype)
        mve2 = HostMatrix(2, 1, dtype=dtype)
        print(f"r = {r} c = {c}", file=out)
        print(RULE, file=out)
        cpy0 = a.copy()
        cpy1 = cpy0.copy()
        cpy2 = cpy0.copy()
        print(RULE, file=out)
        _flag(cpy0 == a, out)
        _flag(cpy1 == a, out)
        _flag(cpy1 == a, out)
        print(RULE, file=out)
        mve0 = HostMatrix(0, 0, dtype=dtype)
        swap(mve0, cpy0)
        swap(mve1, cpy1)
        swap(mve2, cpy2)
        print(RULE, file=out)
        _flag(mve0 != cpy0, out)
        _flag(mve1 != cpy1, out)
        _flag(mve2 != cpy2, out)
        _flag(mve0 == a, out)
        _flag(mve1 == a, out)
        _flag(mve2 == a, out)
        print(RULE, file=out)
        r, c = c * 5, r * 2


def _algorithms(dtype, rounds: int, out: TextIO) -> None:
    print("Test Matrix algorithms", file=out)
    r, c = 2, 5
    for n in range(1, rounds + 1):
        a = HostMatrix(r, c, n, dtype=dtype)
        b = HostMatrix(r, c, n + 1, dtype=dtype)
        cm = HostMatrix(r, c, dtype=dtype)
        d = HostMatrix(r, c, n, dtype=dtype)
        e = HostMatrix(r, c, n + 1, dtype=dtype)
        print(f"r = {r} c = {c}", file=out)
        print(LONG_RULE, file=out)
        _flag(a != b, out)
        _flag(a != cm, out)
        _flag(b != cm, out)
        _flag(a == d, out)
        _flag(b == e, out)
        print(LONG_RULE, file=out)
        b.copy_from(a)
        cm.copy_from(a)
        print(LONG_RULE, file=out)
        _flag(a == b, out)
        _flag(a == cm, out)
        _flag(b == cm, out)
        _flag(a == d, out)
        _flag(b != e, out)
        tol = a.tol()
        print(RULE, file=out)
        print(f"tol = {tol:g}", file=out)
        fill_const(a, n + tol / 2.0)
        fill_const(b, n + tol * 2.0)
        fill_const(cm, n + 1)
        print(RULE, file=out)
        _flag(a != b, out)
        _flag(a != cm, out)
        _flag(a == d, out)
        _flag(a != e, out)
        _flag(cm == e, out)
        print(RULE, file=out)
        r, c = c * 5, r * 2


def _reduce_and_rand(dtype, rounds: int, rng, out: TextIO) -> None:
    print("Test reduce and rand", file=out)
    scalar = np.dtype(dtype).type
    r, c = 2, 5
    for n in range(1, rounds + 1):
        x = HostMatrix(r, c, dtype=dtype)
        y = HostMatrix(r, c, n, dtype=dtype)
        fill_const(x, n)
        fill_iota(y, 1)
        sum_x = reduce_sum(x, 0.0)
        sum_y = reduce_sum(y, 0.0)
        s_x = scalar(x.size())
        s_y = scalar(y.size())
        res_x = scalar(n) * s_x
        res_y = s_y / scalar(2) * (s_y + scalar(1))
        print(RULE, file=out)
        _flag(abs(sum_x - float(res_x)) < x.tol(), out)
        _flag(abs(sum_y - float(res_y)) < y.tol(), out)
        print(RULE, file=out)
        if n == 1:
            print_matrix(x, out)
        fill_rand(x, rng)
        z = x.copy()
        _flag(x == z, out)
        if n == 1:
            print_matrix(x, out)
        fill_rand(x, rng)
        _flag(x != z, out)
        if n == 1:
            print_matrix(x, out)
        fill_rand(x, rng)
        if n == 1:
            print_matrix(x, out)
        _flag(x != z, out)
        if n == 1:
            print_matrix(y, out)
        fill_rand(y, rng)
        if n == 1:
            print_matrix(y, out)
        _flag(y != z, out)
        print(RULE, file=out)
        r, c = c * 5, r * 2


def _arithmetic(dtype, rounds: int, out: TextIO) -> None:
    print("Test Matrix arithmetics", file=out)
    r, c = 2, 5
    for _ in range(rounds):
        a0 = HostMatrix(r, c, 2, dtype=dtype)
        b0 = HostMatrix(r, c, 3, dtype=dtype)
        check = HostMatrix(r, c, dtype=dtype)
        err = HostMatrix(r, r, dtype=dtype)
        print(f"r = {r} c = {c}", file=out)
        try:
            a0 + err
        except ValueError as exc:
            print(f"Caught exception: {exc}", file=out)

        def expect(result: HostMatrix, value: float) -> None:
            print(RULE, file=out)
            fill_const(check, value)
            _flag(result == check, out)

        c0 = a0 + b0
        expect(c0, 5)
        c0 += b0
        expect(c0, 8)
        c1 = a0 + b0 + c0
        expect(c1, 13)
        c1 = a0 + b0 + c0 + c1
        expect(c1, 26)
        c1 -= c0
        expect(c1, 18)
        c2 = c1 - b0
        expect(c2, 15)
        c2 = c1 - a0 - b0 - c0
        expect(c2, 5)
        c3 = c2 * a0
        expect(c3, 10)
        c3 *= b0
        expect(c3, 30)
        c3 = c3 * (a0 + b0 + c0) * c2
        expect(c3, 1950)
        c4 = a0 * a0 * a0 * a0 * a0 * a0 * a0 * a0
        expect(c4, 256)
        c4 = c4 * 2.0 * 4.0 * a0
        expect(c4, 4096)
        print(RULE, file=out)
        r, c = c * 5, r * 2


def _multiplication(dtype, rounds: int, rng, out: TextIO) -> None:
    print("Test Matrix multiplication", file=out)
    l, m, n = 5, 3, 2
    for _ in range(rounds):
        a0 = HostMatrix(l, m, dtype=dtype)
        b0 = HostMatrix(m, n, dtype=dtype)
        c0 = HostMatrix(l, n, dtype=dtype)
        err = HostMatrix(99, 99, dtype=dtype)
        print(f"l = {l} m = {m} n = {n}", file=out)
        try:
            matmul(a0, err, MM.BASE, tile=32)
        except ValueError as exc:
            print(f"Caught exception: {exc}", file=out)
        fill_rand(a0, rng)
        fill_rand(b0, rng)
        print(RULE, file=out)
        _flag(a0 != b0, out)
        print(RULE, file=out)
        matmul(a0, b0, MM.BASE, out=c0, tile=32)
        c1 = matmul(a0, b0, MM.TILED, tile=32)
        print(RULE, file=out)
        _flag(c0 == c1, out)
        print(RULE, file=out)
        l, m, n = n * 5, m * 3, l * 2


def _transposition(dtype, rounds: int, rng, out: TextIO) -> None:
    print("Test Matrix transposition", file=out)
    r, c = 5, 2
    for _ in range(rounds):
        a = HostMatrix(r, c, dtype=dtype)
        b0 = HostMatrix(c, r, dtype=dtype)
        c0 = HostMatrix(r, c, dtype=dtype)
        err = HostMatrix(99, 99, dtype=dtype)
        print(f"r = {r} c = {c}", file=out)
        try:
            transpose(a, Trans.BASE, out=err, tile=32)
        except ValueError as exc:
            print(f"Caught exception: {exc}", file=out)
        fill_rand(a, rng)
        print(RULE, file=out)
        transpose(a, Trans.BASE, out=b0, tile=32)
        transpose(b0, Trans.BASE, out=c0, tile=32)
        b1 = transpose(a, Trans.TILED, tile=32)
        c1 = transpose(b1, Trans.TILED, tile=32)
        print(RULE, file=out)
        _flag(a == c0, out)
        _flag(a == c1, out)
        _flag(b0 == b1, out)
        print(RULE, file=out)
        r, c = c * 5, r * 2


def _norm(dtype, rounds: int, rng, out: TextIO) -> None:
    print("Test Matrix Frobenius Norm", file=out)
    scalar = np.dtype(dtype).type
    r, c = 5, 2
    for i in range(1, rounds + 1):
        a = HostMatrix(r, c, dtype=dtype)
        print(f"r = {r} c = {c}", file=out)
        fill_rand(a, rng)
        frobenius_norm(a, Norm.BASE)
        print(RULE, file=out)
        print(RULE, file=out)
        fill_const(a, 3)
        res_base = frobenius_norm(a, Norm.BASE)
        res = float(np.sqrt(scalar(3.0 * 3.0 * r * c)))
        _flag(abs(res_base - res) < a.tol(), out)
        print(RULE, file=out)
        if i < 5:
            n1 = scalar(r * c)
            n2 = scalar(r * r * c * c)
            n3 = scalar(r * r * r * c * c * c)
            expected = float(np.sqrt(n3 / scalar(3) + n2 / scalar(2) + n1 / scalar(6)))
            fill_iota(a, 1)
            res_base = frobenius_norm(a, Norm.BASE)
            _flag(abs(res_base - expected) < 0.2, out)
            print(RULE, file=out)
        r, c = c * 5, r * 2
    print(RULE, file=out)


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hostmat-demo",
        description="Exercise the matrix operations and print the outcome of each check.",
    )
    parser.add_argument("--double", action="store_true", help="use float64 instead of float32")
    parser.add_argument(
        "--rounds",
        type=_positive_int,
        default=None,
        help="run at most this many rounds in each section",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random fills")
    return parser


def main(argv=None) -> int:
    """Run every section of the demonstration and return the exit status."""
    args = _parser().parse_args(argv)
    dtype = np.dtype(np.float64 if args.double else np.float32)
    rng = np.random.default_rng(args.seed)
    out = sys.stdout

    def rounds(section: str) -> int:
        count = _ROUNDS[dtype][section]
        return count if args.rounds is None else min(count, args.rounds)

    _constructors(dtype, rounds("constructors"), out)
    _algorithms(dtype, rounds("algorithms"), out)
    _reduce_and_rand(dtype, rounds("reduce"), rng, out)
    _arithmetic(dtype, rounds("arithmetic"), out)
    _multiplication(dtype, rounds("matmul"), rng, out)
    _transposition(dtype, rounds("transpose"), rng, out)
    _norm(dtype, rounds("norm"), rng, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())