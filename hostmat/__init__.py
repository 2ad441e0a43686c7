"""Dense host matrices with tolerance-aware comparison, fills, reductions, matmul, transpose and Frobenius norm."""

__version__ = "1.0.0"

__all__ = ["policy", "matrix", "fill", "reduce", "matmul", "transpose", "norm", "demo"]