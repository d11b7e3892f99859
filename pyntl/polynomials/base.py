"""Dense univariate polynomials over a ring.

:class:`Polynomial` holds a coefficient list (index 0 is the constant term)
together with the :class:`~pyntl.core.rings.Ring` the coefficients live in.
Every algorithm here uses only the ring interface, so the same code serves
``ZZX``, ``ZZ_pX``, ``zz_pX``, ``GF2X`` and ``ZZ_pEX``.

Notes
-----
- Trailing zero coefficients are trimmed after every operation, so the
  degree is well defined (-1 for the zero polynomial)
- Reading a coefficient outside ``[0, degree]`` returns the ring's zero
- ``set_coeff`` mutates in place and re-trims; all other operations
  return new polynomials
- Division uses ``Ring.exact_quotient``; over a field it always succeeds,
  over ZZ it stops at the first leading term that does not divide exactly
- Polynomials display as ``[c0 c1 ... cn]``; zero displays as ``[0]``
"""

from typing import Any, Iterable, Iterator, List, Optional, Tuple

from pyntl.core.exceptions import DivisionByZero, ModulusMismatch
from pyntl.core.rings import Ring
from pyntl.integers.zz import ZZ


class Polynomial:
    """Polynomial with coefficients in a :class:`Ring`.

    Parameters
    ----------
    coeffs : iterable or scalar, optional
        Coefficients from the constant term upward, a single scalar for a
        constant polynomial, or another polynomial to copy. Empty or None
        gives the zero polynomial.
    ring : Ring, optional
        Coefficient ring. Subclasses supply a default.

    Examples
    --------
    >>> from pyntl.polynomials import ZZX
    >>> f = ZZX([1, 2, 3])
    >>> f.degree, f(2), str(f)
    (2, ZZ(17), '[1 2 3]')
    """

    __slots__ = ("_ring", "_coeffs")

    def __init__(self, coeffs: Any = None, ring: Optional[Ring] = None):
        self._ring = self._default_ring() if ring is None else ring
        self._coeffs = self._coerce_coeffs(coeffs)
        self._trim()

    @classmethod
    def _default_ring(cls) -> Ring:
        raise TypeError(f"{cls.__name__} needs an explicit coefficient ring")

    def _coerce_coeffs(self, coeffs: Any) -> List[Any]:
        ring = self._ring
        if coeffs is None:
            return []
        if isinstance(coeffs, Polynomial):
            if coeffs._ring != ring:
                raise ModulusMismatch(coeffs._ring, ring)
            return list(coeffs._coeffs)
        if isinstance(coeffs, (int, ZZ)) or hasattr(coeffs, "ring"):
            return [ring(coeffs)]
        return [ring(c) for c in coeffs]

    @classmethod
    def _from_ring(cls, ring: Ring, coeffs: Iterable[Any] = ()) -> "Polynomial":
        """Build without re-coercing coefficients already in ``ring``."""
        obj = object.__new__(cls)
        obj._ring = ring
        obj._coeffs = list(coeffs)
        obj._trim()
        return obj

    def _new(self, coeffs: Iterable[Any]) -> "Polynomial":
        return self._from_ring(self._ring, coeffs)

    def _trim(self) -> None:
        c = self._coeffs
        while c and c[-1].is_zero():
            c.pop()

    # -- basic access ---------------------------------------------------------

    @property
    def ring(self) -> Ring:
        return self._ring

    @property
    def degree(self) -> int:
        """Index of the highest nonzero coefficient (-1 for zero)."""
        return len(self._coeffs) - 1

    def coeff(self, i: int) -> Any:
        """Coefficient of ``x^i``; zero outside ``[0, degree]``."""
        if 0 <= i < len(self._coeffs):
            return self._coeffs[i]
        return self._ring.zero()

    def set_coeff(self, i: int, c: Any = 1) -> None:
        """Set the coefficient of ``x^i`` in place.

        Extends with zeros when ``i > degree`` and re-trims afterwards, so
        writing zero at the top lowers the degree.

        Raises
        ------
        ValueError
            If ``i < 0``.
        """
        if i < 0:
            raise ValueError(f"Coefficient index must be >= 0, got {i}")
        zero = self._ring.zero()
        while len(self._coeffs) <= i:
            self._coeffs.append(zero)
        self._coeffs[i] = self._ring(c)
        self._trim()

    def leading(self) -> Any:
        """Leading coefficient (zero for the zero polynomial)."""
        return self._coeffs[-1] if self._coeffs else self._ring.zero()

    def constant(self) -> Any:
        """Constant term."""
        return self.coeff(0)

    def coefficients(self) -> List[Any]:
        """Copy of the trimmed coefficient list."""
        return list(self._coeffs)

    def is_zero(self) -> bool:
        return not self._coeffs

    def is_one(self) -> bool:
        return len(self._coeffs) == 1 and self._coeffs[0].is_one()

    def is_monic(self) -> bool:
        return bool(self._coeffs) and self._coeffs[-1].is_one()

    def copy(self) -> "Polynomial":
        return self._new(self._coeffs)

    def __bool__(self) -> bool:
        return bool(self._coeffs)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._coeffs)

    def __getitem__(self, i: int) -> Any:
        return self.coeff(i)

    def __setitem__(self, i: int, c: Any) -> None:
        self.set_coeff(i, c)

    @classmethod
    def monomial(cls, degree: int = 1, coefficient: Any = 1, ring: Optional[Ring] = None) -> "Polynomial":
        """Return ``coefficient * x^degree``."""
        if degree < 0:
            raise ValueError(f"Monomial degree must be >= 0, got {degree}")
        if ring is None:
            ring = cls._default_ring()
        coeffs = [ring.zero()] * degree + [ring(coefficient)]
        return cls._from_ring(ring, coeffs)

    # -- coercion -------------------------------------------------------------

    def _coerce(self, other: Any) -> Any:
        if isinstance(other, Polynomial):
            if type(other) is not type(self):
                return NotImplemented
            if other._ring != self._ring:
                raise ModulusMismatch(self._ring, other._ring)
            return other
        if isinstance(other, (int, ZZ)) or hasattr(other, "ring"):
            return self._new([self._ring(other)])
        return NotImplemented

    # -- evaluation -----------------------------------------------------------

    def __call__(self, x: Any) -> Any:
        """Evaluate at ``x`` by Horner's rule."""
        if isinstance(x, (int, ZZ)):
            x = self._ring(x)
        result = self._ring.zero()
        for c in reversed(self._coeffs):
            result = result * x + c
        return result

    # -- ring operations ------------------------------------------------------

    def __add__(self, other: Any) -> "Polynomial":
        g = self._coerce(other)
        if g is NotImplemented:
            return NotImplemented
        a, b = self._coeffs, g._coeffs
        if len(a) < len(b):
            a, b = b, a
        out = list(a)
        for i, c in enumerate(b):
            out[i] = out[i] + c
        return self._new(out)

    __radd__ = __add__

    def __neg__(self) -> "Polynomial":
        return self._new([-c for c in self._coeffs])

    def __pos__(self) -> "Polynomial":
        return self

    def __sub__(self, other: Any) -> "Polynomial":
        g = self._coerce(other)
        if g is NotImplemented:
            return NotImplemented
        return self + (-g)

    def __rsub__(self, other: Any) -> "Polynomial":
        g = self._coerce(other)
        if g is NotImplemented:
            return NotImplemented
        return g + (-self)

    def __mul__(self, other: Any) -> "Polynomial":
        g = self._coerce(other)
        if g is NotImplemented:
            return NotImplemented
        a, b = self._coeffs, g._coeffs
        if not a or not b:
            return self._new([])
        zero = self._ring.zero()
        out = [zero] * (len(a) + len(b) - 1)
        for i, ai in enumerate(a):
            if ai.is_zero():
                continue
            for j, bj in enumerate(b):
                out[i + j] = out[i + j] + ai * bj
        return self._new(out)

    __rmul__ = __mul__

    def __pow__(self, exponent: int) -> "Polynomial":
        if not isinstance(exponent, (int, ZZ)):
            return NotImplemented
        e = int(exponent)
        if e < 0:
            raise ValueError(f"Negative exponent {e} for polynomial power")
        result = self._new([self._ring.one()])
        base = self
        while e:
            if e & 1:
                result = result * base
            e >>= 1
            if e:
                base = base * base
        return result

    def power(self, e: int) -> "Polynomial":
        return self**e

    # -- division -------------------------------------------------------------

    def divrem(self, other: Any) -> Tuple["Polynomial", "Polynomial"]:
        """Schoolbook long division.

        Parameters
        ----------
        other : Polynomial or scalar
            Divisor.

        Returns
        -------
        Tuple[Polynomial, Polynomial]
            ``(q, r)``. Over a field ``self == q*other + r`` with
            ``r.degree < other.degree``. Over ZZ the loop stops at the first
            leading term that ``other.leading()`` does not divide exactly, so
            ``self == q*other + r`` still holds but ``r`` may have degree
            ``>= other.degree``.

        Raises
        ------
        DivisionByZero
            If ``other`` is zero.
        """
        g = self._coerce(other)
        if g is NotImplemented:
            raise TypeError(f"Cannot divide {type(self).__name__} by {type(other).__name__}")
        if g.is_zero():
            raise DivisionByZero(f"Polynomial division of {self} by zero")

        ring = self._ring
        dg = g.degree
        lc = g.leading()
        r = list(self._coeffs)
        q = [ring.zero()] * max(len(r) - dg, 0)
        while len(r) - 1 >= dg:
            shift = len(r) - 1 - dg
            t = ring.exact_quotient(r[-1], lc)
            if t is None:
                break
            q[shift] = t
            for j, gc in enumerate(g._coeffs):
                r[shift + j] = r[shift + j] - t * gc
            while r and r[-1].is_zero():
                r.pop()
        return self._new(q), self._new(r)

    def __floordiv__(self, other: Any) -> "Polynomial":
        if self._coerce(other) is NotImplemented:
            return NotImplemented
        return self.divrem(other)[0]

    def __rfloordiv__(self, other: Any) -> "Polynomial":
        g = self._coerce(other)
        if g is NotImplemented:
            return NotImplemented
        return g.divrem(self)[0]

    def __mod__(self, other: Any) -> "Polynomial":
        if self._coerce(other) is NotImplemented:
            return NotImplemented
        return self.divrem(other)[1]

    def __rmod__(self, other: Any) -> "Polynomial":
        g = self._coerce(other)
        if g is NotImplemented:
            return NotImplemented
        return g.divrem(self)[1]

    def __divmod__(self, other: Any) -> Tuple["Polynomial", "Polynomial"]:
        if self._coerce(other) is NotImplemented:
            return NotImplemented
        return self.divrem(other)

    def divides(self, other: Any) -> bool:
        """Return True if ``self`` divides ``other`` exactly."""
        g = self._coerce(other)
        if self.is_zero():
            return g.is_zero()
        return g.divrem(self)[1].is_zero()

    # -- calculus -------------------------------------------------------------

    def derivative(self) -> "Polynomial":
        """Formal derivative; may vanish in positive characteristic."""
        return self._new([c * i for i, c in enumerate(self._coeffs)][1:])

    # -- comparison and display -----------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Polynomial):
            return (
                type(other) is type(self)
                and other._ring == self._ring
                and other._coeffs == self._coeffs
            )
        if isinstance(other, (int, ZZ)) or hasattr(other, "ring"):
            try:
                c = self._ring(other)
            except ModulusMismatch:
                return False
            if c != other:
                return False
            return self._coeffs == self._new([c])._coeffs
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # constants hash like the scalar they compare equal to
        if len(self._coeffs) <= 1:
            return hash(self._coeffs[0]) if self._coeffs else hash(0)
        return hash(tuple(hash(c) for c in self._coeffs))

    def __str__(self) -> str:
        if not self._coeffs:
            return "[0]"
        return "[" + " ".join(str(c) for c in self._coeffs) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self}, ring={self._ring!r})"
