"""Vectors and matrices over any ring.

``Vec`` and ``Mat`` store ring elements in plain Python lists and do all
arithmetic through the element operators, so the same code handles ZZ,
ZZ_p, zz_p and ZZ_pE entries. ``VecZZ``, ``VecZZ_p``, ``MatZZ`` and
``MatZZ_p`` fix the ring.

Notes
-----
Every size mismatch raises ``DimensionMismatch``; mixing rings raises
``ModulusMismatch``. Elimination routines (``gauss``, ``rank``,
``inverse``, ``solve``) need a field; ``determinant`` also works over ZZ via
fraction-free (Bareiss) elimination.
"""

from typing import Any, Iterator, List, Optional, Sequence, Tuple, Union

from pyntl.core.exceptions import DimensionMismatch, InvModError, ModulusMismatch
from pyntl.core.rings import Ring
from pyntl.fields.gf2 import GF2
from pyntl.fields.prime import PrimeField
from pyntl.integers.zz import ZZ, ZZ_RING
from pyntl.linalg.gf2 import VecGF2
from pyntl.linalg.gf2 import inner_product as _gf2_inner_product


def _infer_ring(entries: Sequence[Any], ring: Optional[Ring]) -> Ring:
    if ring is not None:
        return ring
    for e in entries:
        r = getattr(e, "ring", None)
        if r is not None and not isinstance(e, ZZ):
            return r
    return ZZ_RING


class Vec:
    """Vector over a ring.

    Parameters
    ----------
    entries : int or iterable, optional
        Length of a zero vector, or the entries.
    ring : Ring, optional
        Entry ring; inferred from the first ring element in ``entries``
        (ZZ if there is none).
    """

    __slots__ = ("_ring", "_entries")

    def __init__(self, entries: Union[int, Sequence[Any]] = 0, ring: Optional[Ring] = None):
        if isinstance(entries, Vec):
            ring = entries._ring if ring is None else ring
            entries = entries._entries
        if isinstance(entries, int):
            self._ring = _infer_ring((), ring)
            self._entries = [self._ring.zero() for _ in range(entries)]
        else:
            entries = list(entries)
            self._ring = _infer_ring(entries, ring)
            self._entries = [self._ring(e) for e in entries]

    def _new(self, entries: List[Any]) -> "Vec":
        obj = object.__new__(type(self))
        obj._ring = self._ring
        obj._entries = entries
        return obj

    @property
    def ring(self) -> Ring:
        return self._ring

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, i: int) -> Any:
        return self._entries[i]

    def __setitem__(self, i: int, value: Any) -> None:
        self._entries[i] = self._ring(value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def append(self, value: Any) -> None:
        self._entries.append(self._ring(value))

    def resize(self, n: int) -> None:
        """Truncate or pad with zeros to length ``n``."""
        if n < len(self._entries):
            del self._entries[n:]
        else:
            self._entries.extend(self._ring.zero() for _ in range(n - len(self._entries)))

    def copy(self) -> "Vec":
        return self._new(list(self._entries))

    def is_zero(self) -> bool:
        return all(e.is_zero() for e in self._entries)

    def _check(self, other: "Vec") -> None:
        if other._ring != self._ring:
            raise ModulusMismatch(self._ring, other._ring)
        if len(other) != len(self):
            raise DimensionMismatch(f"Vector lengths differ: {len(self)} vs {len(other)}")

    def __add__(self, other: Any) -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        self._check(other)
        return self._new([a + b for a, b in zip(self._entries, other._entries)])

    def __sub__(self, other: Any) -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        self._check(other)
        return self._new([a - b for a, b in zip(self._entries, other._entries)])

    def __neg__(self) -> "Vec":
        return self._new([-a for a in self._entries])

    def __mul__(self, scalar: Any) -> "Vec":
        if isinstance(scalar, (Vec, Mat)):
            return NotImplemented
        s = self._ring(scalar)
        return self._new([a * s for a in self._entries])

    __rmul__ = __mul__

    def dot(self, other: "Vec") -> Any:
        """Inner product ``sum(a_i * b_i)``."""
        self._check(other)
        total = self._ring.zero()
        for a, b in zip(self._entries, other._entries):
            total = total + a * b
        return total

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return other._ring == self._ring and other._entries == self._entries

    __hash__ = None

    def __str__(self) -> str:
        return "[" + " ".join(str(e) for e in self._entries) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class Mat:
    """Dense matrix over a ring.

    Parameters
    ----------
    rows : sequence of sequences, optional
        Row-major entries.
    ring : Ring, optional
        Entry ring; inferred like :class:`Vec`.

    Examples
    --------
    >>> a = MatZZ([[1, 2], [3, 4]])
    >>> print(a * a)
    [[7 10]
     [15 22]]
    >>> a.determinant()
    ZZ(-2)
    """

    __slots__ = ("_ring", "_rows", "_ncols")

    def __init__(self, rows: Any = None, ring: Optional[Ring] = None):
        if isinstance(rows, Mat):
            ring = rows._ring if ring is None else ring
            rows = rows._rows
        rows = [list(r) for r in (rows or [])]
        widths = {len(r) for r in rows}
        if len(widths) > 1:
            raise DimensionMismatch(f"Ragged rows with lengths {sorted(widths)}")
        flat = [e for r in rows for e in r]
        self._ring = _infer_ring(flat, ring)
        self._rows = [[self._ring(e) for e in r] for r in rows]
        self._ncols = widths.pop() if widths else 0

    @classmethod
    def _wrap(cls, ring: Ring, rows: List[List[Any]], ncols: int) -> "Mat":
        obj = object.__new__(cls)
        obj._ring = ring
        obj._rows = rows
        obj._ncols = ncols
        return obj

    def _new(self, rows: List[List[Any]], ncols: Optional[int] = None) -> "Mat":
        return self._wrap(self._ring, rows, self._ncols if ncols is None else ncols)

    @classmethod
    def zeros(cls, nrows: int, ncols: int, ring: Ring = ZZ_RING) -> "Mat":
        return cls._wrap(ring, [[ring.zero() for _ in range(ncols)] for _ in range(nrows)], ncols)

    @classmethod
    def identity(cls, n: int, ring: Ring = ZZ_RING) -> "Mat":
        m = cls.zeros(n, n, ring)
        for i in range(n):
            m._rows[i][i] = ring.one()
        return m

    # -- access ---------------------------------------------------------------

    @property
    def ring(self) -> Ring:
        return self._ring

    @property
    def nrows(self) -> int:
        return len(self._rows)

    @property
    def ncols(self) -> int:
        return self._ncols

    @property
    def shape(self) -> Tuple[int, int]:
        return self.nrows, self._ncols

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, tuple):
            i, j = index
            return self._rows[i][j]
        return Vec(self._rows[index], ring=self._ring)

    def __setitem__(self, index: Tuple[int, int], value: Any) -> None:
        i, j = index
        self._rows[i][j] = self._ring(value)

    def copy(self) -> "Mat":
        return self._new([list(r) for r in self._rows])

    def to_list(self) -> List[List[Any]]:
        return [list(r) for r in self._rows]

    # -- arithmetic -----------------------------------------------------------

    def _check_same(self, other: "Mat") -> None:
        if other._ring != self._ring:
            raise ModulusMismatch(self._ring, other._ring)
        if other.shape != self.shape:
            raise DimensionMismatch(f"Matrix shapes differ: {self.shape} vs {other.shape}")

    def __add__(self, other: Any) -> "Mat":
        if not isinstance(other, Mat):
            return NotImplemented
        self._check_same(other)
        return self._new([[a + b for a, b in zip(r, s)] for r, s in zip(self._rows, other._rows)])

    def __sub__(self, other: Any) -> "Mat":
        if not isinstance(other, Mat):
            return NotImplemented
        self._check_same(other)
        return self._new([[a - b for a, b in zip(r, s)] for r, s in zip(self._rows, other._rows)])

    def __neg__(self) -> "Mat":
        return self._new([[-a for a in r] for r in self._rows])

    def __mul__(self, other: Any) -> Union["Mat", Vec]:
        if isinstance(other, Mat):
            if other._ring != self._ring:
                raise ModulusMismatch(self._ring, other._ring)
            if self._ncols != other.nrows:
                raise DimensionMismatch(f"Cannot multiply {self.shape} by {other.shape} matrix")
            zero = self._ring.zero()
            cols = list(zip(*other._rows)) if other._rows else [()] * other._ncols
            out = []
            for r in self._rows:
                row = []
                for c in cols:
                    acc = zero
                    for a, b in zip(r, c):
                        acc = acc + a * b
                    row.append(acc)
                out.append(row)
            return self._new(out, other._ncols)
        if isinstance(other, Vec):
            if other._ring != self._ring:
                raise ModulusMismatch(self._ring, other._ring)
            if self._ncols != len(other):
                raise DimensionMismatch(
                    f"Cannot multiply {self.shape} matrix by vector of length {len(other)}"
                )
            return Vec([Vec(r, ring=self._ring).dot(other) for r in self._rows], ring=self._ring)
        s = self._ring(other)
        return self._new([[a * s for a in r] for r in self._rows])

    __matmul__ = __mul__

    def __rmul__(self, other: Any) -> Union["Mat", Vec]:
        if isinstance(other, Vec):
            return self.transpose() * other
        return self * other

    def transpose(self) -> "Mat":
        if not self._rows:
            return self._wrap(self._ring, [[] for _ in range(self._ncols)], 0)
        rows = [list(c) for c in zip(*self._rows)]
        return self._wrap(self._ring, rows, self.nrows)

    @property
    def T(self) -> "Mat":
        return self.transpose()

    # -- elimination ----------------------------------------------------------

    def _require_field(self, what: str) -> None:
        if not self._ring.is_field:
            raise TypeError(f"{what} needs a field, got {self._ring}")

    def gauss(self) -> int:
        """Reduced row-echelon form in place; returns the rank (fields only)."""
        self._require_field("gauss")
        m = self._rows
        pivot_row = 0
        for col in range(self._ncols):
            if pivot_row >= len(m):
                break
            row = next((r for r in range(pivot_row, len(m)) if not m[r][col].is_zero()), None)
            if row is None:
                continue
            m[pivot_row], m[row] = m[row], m[pivot_row]
            inv_p = m[pivot_row][col].inverse()
            m[pivot_row] = [a * inv_p for a in m[pivot_row]]
            for r in range(len(m)):
                c = m[r][col]
                if r != pivot_row and not c.is_zero():
                    m[r] = [a - c * b for a, b in zip(m[r], m[pivot_row])]
            pivot_row += 1
        return pivot_row

    def rank(self) -> int:
        return self.copy().gauss()

    def determinant(self) -> Any:
        """Determinant; Bareiss elimination outside fields.

        Raises
        ------
        DimensionMismatch
            If the matrix is not square.
        """
        n = self.nrows
        if n != self._ncols:
            raise DimensionMismatch(f"Determinant of non-square {self.shape} matrix")
        ring = self._ring
        if n == 0:
            return ring.one()
        m = [list(r) for r in self._rows]
        sign = ring.one()
        prev = ring.one()
        for k in range(n - 1):
            if m[k][k].is_zero():
                swap = next((r for r in range(k + 1, n) if not m[r][k].is_zero()), None)
                if swap is None:
                    return ring.zero()
                m[k], m[swap] = m[swap], m[k]
                sign = -sign
            for i in range(k + 1, n):
                for j in range(k + 1, n):
                    num = m[i][j] * m[k][k] - m[i][k] * m[k][j]
                    m[i][j] = ring.exact_quotient(num, prev)
            prev = m[k][k]
        return sign * m[n - 1][n - 1]

    def inverse(self) -> "Mat":
        """Inverse by Gauss-Jordan on ``[A | I]`` (fields only).

        Raises
        ------
        DimensionMismatch
            If the matrix is not square.
        InvModError
            If the matrix is singular.
        """
        self._require_field("inverse")
        n = self.nrows
        if n != self._ncols:
            raise DimensionMismatch(f"Inverse of non-square {self.shape} matrix")
        ident = Mat.identity(n, self._ring)
        aug = self._wrap(
            self._ring, [r + i for r, i in zip(self._rows, ident._rows)], 2 * n
        )
        if aug.gauss() < n or any(
            not aug._rows[i][i].is_one() for i in range(n)
        ):
            raise InvModError(self, self._ring)
        return self._new([r[n:] for r in aug._rows], n)

    def solve(self, b: Vec) -> Vec:
        """Solve ``self * x == b`` for square invertible ``self``."""
        if len(b) != self.nrows:
            raise DimensionMismatch(
                f"Right-hand side has length {len(b)}, matrix has {self.nrows} rows"
            )
        return self.inverse() * b

    # -- comparison and display -----------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat):
            return NotImplemented
        return other._ring == self._ring and other.shape == self.shape and other._rows == self._rows

    __hash__ = None

    def __str__(self) -> str:
        rows = ["[" + " ".join(str(e) for e in r) + "]" for r in self._rows]
        return "[" + "\n ".join(rows) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[[str(e) for e in r] for r in self._rows]})"


# =============================================================================
# Fixed-ring aliases
# =============================================================================


class VecZZ(Vec):
    """Vector of ``ZZ``."""

    __slots__ = ()

    def __init__(self, entries: Union[int, Sequence[Any]] = 0):
        super().__init__(entries, ring=ZZ_RING)


class VecZZ_p(Vec):
    """Vector of ``ZZ_p`` (current modulus unless ``modulus`` is given)."""

    __slots__ = ()

    def __init__(self, entries: Union[int, Sequence[Any]] = 0, modulus: Any = None):
        super().__init__(entries, ring=PrimeField.resolve(modulus))


class MatZZ(Mat):
    """Matrix of ``ZZ``."""

    __slots__ = ()

    def __init__(self, rows: Any = None):
        super().__init__(rows, ring=ZZ_RING)


class MatZZ_p(Mat):
    """Matrix of ``ZZ_p`` (current modulus unless ``modulus`` is given)."""

    __slots__ = ()

    def __init__(self, rows: Any = None, modulus: Any = None):
        super().__init__(rows, ring=PrimeField.resolve(modulus))


def inner_product(a: Union[Vec, VecGF2], b: Union[Vec, VecGF2]) -> Any:
    """Inner product of two vectors of the same ring and length.

    Raises
    ------
    DimensionMismatch
        If the lengths differ.
    """
    if isinstance(a, VecGF2) and isinstance(b, VecGF2):
        return _gf2_inner_product(a, b)
    if isinstance(a, Vec) and isinstance(b, Vec):
        return a.dot(b)
    raise TypeError(f"inner_product of {type(a).__name__} and {type(b).__name__}")
