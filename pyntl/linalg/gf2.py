"""Vectors and matrices over GF(2).

Entries are stored as ``numpy.uint8`` arrays holding 0/1. Addition is XOR,
products are integer products reduced mod 2.

Notes
-----
:meth:`MatGF2.gauss` brings a matrix to reduced row-echelon form in place:
for each column it takes the first row at or below the current pivot row
with a 1 in that column, swaps it up, and XORs it into every other row
with a 1 in that column (above and below). The number of pivots is the
rank. :func:`matrix_rank` runs the same elimination on a copy.

Examples
--------
>>> m = MatGF2([[1, 1, 0], [0, 1, 1], [1, 0, 1]])
>>> matrix_rank(m)
2
>>> m.gauss()
2
>>> print(m)
[[1 0 1]
 [0 1 1]
 [0 0 0]]
"""

from typing import Any, Iterator, Optional, Sequence, Tuple, Union

import numpy as np
from scipy.linalg import toeplitz

from pyntl.core.exceptions import DimensionMismatch, InvModError
from pyntl.fields.gf2 import GF2
from pyntl.integers.number_theory import get_rng
from pyntl.utils.logging import get_logger

logger = get_logger(__name__)


def _as_bits(data: Any, ndim: int) -> np.ndarray:
    arr = np.asarray(
        [[int(x) for x in row] for row in data] if ndim == 2 else [int(x) for x in data],
        dtype=np.int64,
    )
    if arr.size == 0:
        arr = arr.reshape((0,) * ndim)
    if arr.ndim != ndim:
        raise DimensionMismatch(f"Expected {ndim}-dimensional data, got shape {arr.shape}")
    return (arr & 1).astype(np.uint8)


class VecGF2:
    """Vector over GF(2).

    Parameters
    ----------
    data : int or iterable, optional
        Length of a zero vector, or the entries (ints, bools or ``GF2``).

    Examples
    --------
    >>> a = VecGF2([1, 0, 1, 1])
    >>> b = VecGF2([1, 1, 0, 1])
    >>> print(a + b)
    [0 1 1 0]
    >>> inner_product(a, b)
    GF2(0)
    """

    __slots__ = ("_bits",)

    def __init__(self, data: Union[int, Sequence[Any], np.ndarray] = 0):
        if isinstance(data, VecGF2):
            self._bits = data._bits.copy()
        elif isinstance(data, (int, np.integer)):
            self._bits = np.zeros(int(data), dtype=np.uint8)
        else:
            self._bits = _as_bits(data, 1)

    @classmethod
    def _wrap(cls, bits: np.ndarray) -> "VecGF2":
        obj = object.__new__(cls)
        obj._bits = bits.astype(np.uint8, copy=False)
        return obj

    @classmethod
    def random(cls, n: int, rng: Optional[np.random.Generator] = None) -> "VecGF2":
        return cls._wrap(get_rng(rng).integers(0, 2, size=n, dtype=np.uint8))

    @property
    def bits(self) -> np.ndarray:
        """Underlying ``uint8`` array (not a copy)."""
        return self._bits

    def __len__(self) -> int:
        return len(self._bits)

    def __getitem__(self, i: int) -> GF2:
        return GF2(int(self._bits[i]))

    def __setitem__(self, i: int, value: Any) -> None:
        self._bits[i] = int(value) & 1

    def __iter__(self) -> Iterator[GF2]:
        return (GF2(int(b)) for b in self._bits)

    def copy(self) -> "VecGF2":
        return VecGF2._wrap(self._bits.copy())

    def is_zero(self) -> bool:
        return not self._bits.any()

    def to_list(self) -> list:
        return [int(b) for b in self._bits]

    def _check(self, other: "VecGF2") -> None:
        if len(self) != len(other):
            raise DimensionMismatch(f"Vector lengths differ: {len(self)} vs {len(other)}")

    def __add__(self, other: Any) -> "VecGF2":
        if not isinstance(other, VecGF2):
            return NotImplemented
        self._check(other)
        return VecGF2._wrap(self._bits ^ other._bits)

    __sub__ = __add__

    def __neg__(self) -> "VecGF2":
        return self.copy()

    def __mul__(self, scalar: Any) -> "VecGF2":
        if isinstance(scalar, (VecGF2, MatGF2)):
            return NotImplemented
        return VecGF2._wrap(self._bits * (int(scalar) & 1))

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecGF2):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._bits, other._bits))

    __hash__ = None

    def __str__(self) -> str:
        return "[" + " ".join(str(int(b)) for b in self._bits) + "]"

    def __repr__(self) -> str:
        return f"VecGF2({self})"


def inner_product(a: VecGF2, b: VecGF2) -> GF2:
    """Dot product of two GF(2) vectors.

    Raises
    ------
    DimensionMismatch
        If the lengths differ.
    """
    a._check(b)
    return GF2(int(np.sum(a._bits & b._bits)) & 1)


class MatGF2:
    """Matrix over GF(2).

    Parameters
    ----------
    data : sequence of rows or 2-D array, optional
        Entries; ints, bools and ``GF2`` are accepted.

    Examples
    --------
    >>> a = MatGF2([[1, 1], [0, 1]])
    >>> print(a * a)
    [[1 0]
     [0 1]]
    """

    __slots__ = ("_bits",)

    def __init__(self, data: Any = None):
        if data is None:
            self._bits = np.zeros((0, 0), dtype=np.uint8)
        elif isinstance(data, MatGF2):
            self._bits = data._bits.copy()
        else:
            self._bits = _as_bits(data, 2)

    @classmethod
    def _wrap(cls, bits: np.ndarray) -> "MatGF2":
        obj = object.__new__(cls)
        obj._bits = bits.astype(np.uint8, copy=False)
        return obj

    @classmethod
    def zeros(cls, nrows: int, ncols: int) -> "MatGF2":
        return cls._wrap(np.zeros((nrows, ncols), dtype=np.uint8))

    @classmethod
    def identity(cls, n: int) -> "MatGF2":
        return cls._wrap(np.eye(n, dtype=np.uint8))

    @classmethod
    def random(
        cls, nrows: int, ncols: int, rng: Optional[np.random.Generator] = None
    ) -> "MatGF2":
        return cls._wrap(get_rng(rng).integers(0, 2, size=(nrows, ncols), dtype=np.uint8))

    @classmethod
    def toeplitz(cls, column: Sequence[Any], row: Sequence[Any]) -> "MatGF2":
        """Toeplitz matrix with the given first column and first row.

        ``row[0]`` is ignored in favour of ``column[0]``.
        """
        col = _as_bits(column, 1)
        first = _as_bits(row, 1)
        return cls._wrap(toeplitz(col, first).astype(np.uint8))

    # -- access ---------------------------------------------------------------

    @property
    def bits(self) -> np.ndarray:
        """Underlying ``uint8`` array (not a copy)."""
        return self._bits

    @property
    def shape(self) -> Tuple[int, int]:
        return self._bits.shape

    @property
    def nrows(self) -> int:
        return self._bits.shape[0]

    @property
    def ncols(self) -> int:
        return self._bits.shape[1]

    def __getitem__(self, index: Any) -> Union[GF2, VecGF2]:
        if isinstance(index, tuple):
            return GF2(int(self._bits[index]))
        return VecGF2._wrap(self._bits[index].copy())

    def __setitem__(self, index: Tuple[int, int], value: Any) -> None:
        self._bits[index] = int(value) & 1

    def row(self, i: int) -> VecGF2:
        return self[i]

    def column(self, j: int) -> VecGF2:
        return VecGF2._wrap(self._bits[:, j].copy())

    def copy(self) -> "MatGF2":
        return MatGF2._wrap(self._bits.copy())

    def is_zero(self) -> bool:
        return not self._bits.any()

    def to_list(self) -> list:
        return [[int(b) for b in row] for row in self._bits]

    # -- arithmetic -----------------------------------------------------------

    def __add__(self, other: Any) -> "MatGF2":
        if not isinstance(other, MatGF2):
            return NotImplemented
        if self.shape != other.shape:
            raise DimensionMismatch(f"Matrix shapes differ: {self.shape} vs {other.shape}")
        return MatGF2._wrap(self._bits ^ other._bits)

    __sub__ = __add__

    def __neg__(self) -> "MatGF2":
        return self.copy()

    def __mul__(self, other: Any) -> Union["MatGF2", VecGF2]:
        if isinstance(other, MatGF2):
            if self.ncols != other.nrows:
                raise DimensionMismatch(
                    f"Cannot multiply {self.shape} by {other.shape} matrix"
                )
            prod = self._bits.astype(np.int64) @ other._bits.astype(np.int64)
            return MatGF2._wrap(prod % 2)
        if isinstance(other, VecGF2):
            if self.ncols != len(other):
                raise DimensionMismatch(
                    f"Cannot multiply {self.shape} matrix by vector of length {len(other)}"
                )
            prod = self._bits.astype(np.int64) @ other._bits.astype(np.int64)
            return VecGF2._wrap(prod % 2)
        if isinstance(other, (int, GF2)):
            return MatGF2._wrap(self._bits * (int(other) & 1))
        return NotImplemented

    __matmul__ = __mul__

    def __rmul__(self, other: Any) -> Union["MatGF2", VecGF2]:
        if isinstance(other, VecGF2):
            if len(other) != self.nrows:
                raise DimensionMismatch(
                    f"Cannot multiply vector of length {len(other)} by {self.shape} matrix"
                )
            prod = other._bits.astype(np.int64) @ self._bits.astype(np.int64)
            return VecGF2._wrap(prod % 2)
        if isinstance(other, (int, GF2)):
            return MatGF2._wrap(self._bits * (int(other) & 1))
        return NotImplemented

    def transpose(self) -> "MatGF2":
        return MatGF2._wrap(self._bits.T.copy())

    @property
    def T(self) -> "MatGF2":
        return self.transpose()

    # -- elimination ----------------------------------------------------------

    def gauss(self) -> int:
        """Reduce to row-echelon form in place (fully reduced).

        Returns
        -------
        int
            Rank (number of pivots).
        """
        m = self._bits
        rows, cols = m.shape
        pivot_row = 0
        for col in range(cols):
            if pivot_row >= rows:
                break
            candidates = np.nonzero(m[pivot_row:, col])[0]
            if candidates.size == 0:
                continue
            row = pivot_row + int(candidates[0])
            if row != pivot_row:
                m[[pivot_row, row]] = m[[row, pivot_row]]
            hits = np.nonzero(m[:, col])[0]
            for r in hits:
                if r != pivot_row:
                    m[r] ^= m[pivot_row]
            pivot_row += 1
        logger.debug(f"gauss: {rows}x{cols} matrix has rank {pivot_row}")
        return pivot_row

    def rank(self) -> int:
        return matrix_rank(self)

    def determinant(self) -> GF2:
        """1 if the square matrix is invertible, else 0."""
        if self.nrows != self.ncols:
            raise DimensionMismatch(f"Determinant of non-square {self.shape} matrix")
        return GF2(1 if matrix_rank(self) == self.nrows else 0)

    def inverse(self) -> "MatGF2":
        """Inverse of a square matrix by Gauss-Jordan on ``[A | I]``.

        Raises
        ------
        DimensionMismatch
            If the matrix is not square.
        InvModError
            If the matrix is singular.
        """
        n = self.nrows
        if n != self.ncols:
            raise DimensionMismatch(f"Inverse of non-square {self.shape} matrix")
        aug = MatGF2._wrap(np.hstack([self._bits, np.eye(n, dtype=np.uint8)]))
        aug.gauss()
        if not np.array_equal(aug._bits[:, :n], np.eye(n, dtype=np.uint8)):
            raise InvModError(self, "GF(2)")
        return MatGF2._wrap(aug._bits[:, n:].copy())

    def solve(self, b: VecGF2) -> VecGF2:
        """Solve ``self * x == b`` for square, invertible ``self``."""
        if len(b) != self.nrows:
            raise DimensionMismatch(
                f"Right-hand side has length {len(b)}, matrix has {self.nrows} rows"
            )
        return self.inverse() * b

    # -- comparison and display -----------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatGF2):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._bits, other._bits))

    __hash__ = None

    def __str__(self) -> str:
        rows = ["[" + " ".join(str(int(b)) for b in row) + "]" for row in self._bits]
        return "[" + "\n ".join(rows) + "]"

    def __repr__(self) -> str:
        return f"MatGF2({self.to_list()})"


def gauss(m: MatGF2) -> int:
    """In-place reduced row-echelon form; returns the rank."""
    return m.gauss()


def matrix_rank(m: MatGF2) -> int:
    """Rank of ``m``; ``m`` itself is left unchanged."""
    return m.copy().gauss()
