"""Selectors for the algorithm used by matrix multiplication, transposition and norms."""

from __future__ import annotations

from enum import Enum


class MM(Enum):
    """Matrix-multiplication implementations."""

    BASE = "base"
    TILED = "tiled"


class Trans(Enum):
    """Matrix-transposition implementations."""

    BASE = "base"
    TILED = "tiled"


class Norm(Enum):
    """Matrix-norm implementations."""

    BASE = "base"