"""Vectors and matrices: numpy-backed GF(2) and generic ring entries."""

from pyntl.linalg.generic import (
    Mat,
    MatZZ,
    MatZZ_p,
    Vec,
    VecZZ,
    VecZZ_p,
    inner_product,
)
from pyntl.linalg.gf2 import MatGF2, VecGF2, gauss, matrix_rank

__all__ = [
    "Mat",
    "MatGF2",
    "MatZZ",
    "MatZZ_p",
    "Vec",
    "VecGF2",
    "VecZZ",
    "VecZZ_p",
    "gauss",
    "inner_product",
    "matrix_rank",
]
