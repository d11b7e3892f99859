"""Polynomials with integer coefficients.

Notes
-----
ZZ is not a field, so ``divrem`` is only exact when the divisor's leading
coefficient divides every intermediate leading term; otherwise it returns
the partial quotient reached so far (``f == q*g + r`` still holds, but
``r.degree`` may be ``>= g.degree``). Use :meth:`ZZX.pseudo_divrem` for a
division that always completes.

The gcd is computed with a primitive pseudo-remainder sequence: the
contents are split off, pseudo-remainders are reduced to their primitive
part at every step, and the gcd of the contents is multiplied back in.
"""

import functools
from typing import List, Tuple

from pyntl.integers.zz import ZZ, ZZ_RING, IntegerRing, gcd as zz_gcd
from pyntl.polynomials.base import Polynomial


class ZZX(Polynomial):
    """Polynomial over the integers.

    Parameters
    ----------
    coeffs : iterable or scalar, optional
        Coefficients from the constant term upward.

    Examples
    --------
    >>> f = ZZX([-1, 0, 1])
    >>> content, factors = f.factor()
    >>> [str(g) for g, _ in factors]
    ['[-1 1]', '[1 1]']
    """

    __slots__ = ()

    def __init__(self, coeffs=None):
        super().__init__(coeffs, ring=ZZ_RING)

    @classmethod
    def _default_ring(cls) -> IntegerRing:
        return ZZ_RING

    # -- content --------------------------------------------------------------

    def content(self) -> ZZ:
        """Gcd of the coefficients, signed like the leading coefficient.

        The sign convention makes :meth:`primitive_part` have a positive
        leading coefficient. ``content`` of zero is 0.
        """
        c = ZZ(0)
        for a in self._coeffs:
            c = zz_gcd(c, a)
        if self._coeffs and self.leading() < 0:
            c = -c
        return c

    def primitive_part(self) -> "ZZX":
        """``self / content(self)`` (zero for zero)."""
        c = self.content()
        if c.is_zero():
            return self.copy()
        return self._new([a // c for a in self._coeffs])

    # -- division -------------------------------------------------------------

    def pseudo_divrem(self, other) -> Tuple["ZZX", "ZZX"]:
        """Pseudo-division.

        Returns
        -------
        Tuple[ZZX, ZZX]
            ``(q, r)`` with ``lc(g)^(deg f - deg g + 1) * f == q*g + r`` and
            ``r.degree < g.degree``.

        Raises
        ------
        DivisionByZero
            If ``other`` is zero.
        """
        g = self._coerce(other)
        if g.is_zero():
            return self.divrem(g)
        k = max(self.degree - g.degree + 1, 0)
        scaled = self * (g.leading() ** k)
        return scaled.divrem(g)

    def pseudo_rem(self, other) -> "ZZX":
        return self.pseudo_divrem(other)[1]

    # -- gcd ------------------------------------------------------------------

    def gcd(self, other) -> "ZZX":
        """Greatest common divisor with positive leading coefficient.

        Examples
        --------
        >>> str(ZZX([-2, 0, 2]).gcd(ZZX([4, 4])))   # 2x^2 - 2, 4x + 4
        '[2 2]'
        """
        g = self._coerce(other)
        if self.is_zero():
            return g.primitive_part() * abs(g.content())
        if g.is_zero():
            return self.primitive_part() * abs(self.content())

        c = zz_gcd(self.content(), g.content())
        a, b = self.primitive_part(), g.primitive_part()
        if a.degree < b.degree:
            a, b = b, a
        while not b.is_zero():
            r = a.pseudo_rem(b)
            a, b = b, r.primitive_part()
        return a.primitive_part() * c

    def __repr__(self) -> str:
        return f"ZZX({self})"

    # -- special polynomials ----------------------------------------------------

    @classmethod
    def cyclotomic(cls, n: int) -> "ZZX":
        """The ``n``-th cyclotomic polynomial.

        Computed as ``(x^n - 1)`` divided by ``Phi_d`` for every proper
        divisor ``d`` of ``n``.

        Raises
        ------
        ValueError
            If ``n < 1``.

        Examples
        --------
        >>> str(ZZX.cyclotomic(4))
        '[1 0 1]'
        """
        if n < 1:
            raise ValueError(f"Cyclotomic index must be >= 1, got {n}")
        return _cyclotomic(n).copy()

    # -- factoring ------------------------------------------------------------

    def factor(self) -> Tuple[ZZ, List[Tuple["ZZX", int]]]:
        """Split off the content, powers of ``x`` and integer-root linear factors.

        Returns
        -------
        Tuple[ZZ, List[Tuple[ZZX, int]]]
            ``(c, [(g_1, m_1), ...])`` with ``self == c * prod(g_i ** m_i)``.
            Factors are primitive with positive leading coefficient and are
            sorted by degree, then coefficients. Whatever remains after the
            linear factors is reported as one factor of multiplicity 1 and
            is not necessarily irreducible.
        """
        if self.is_zero():
            return ZZ(0), []
        c = self.content()
        g = self.primitive_part()
        if g.degree == 0:
            return c * g.constant(), []

        factors: List[Tuple[ZZX, int]] = []

        shift = 0
        while shift < len(g._coeffs) and g._coeffs[shift].is_zero():
            shift += 1
        if shift:
            factors.append((self.monomial(1), shift))
            g = self._new(g._coeffs[shift:])

        if g.degree >= 1:
            for root in _integer_root_candidates(g.constant()):
                linear = self._new([ZZ(-root), ZZ(1)])
                multiplicity = 0
                while g.degree >= 1 and g(root).is_zero():
                    g = g.divrem(linear)[0]
                    multiplicity += 1
                if multiplicity:
                    factors.append((linear, multiplicity))

        if g.degree >= 1:
            factors.append((g, 1))
        elif not g.constant().is_one():
            c = c * g.constant()

        factors.sort(key=lambda fm: (fm[0].degree, [int(a) for a in fm[0]]))
        return c, factors


def _integer_root_candidates(constant: ZZ) -> List[int]:
    """Divisors of ``constant`` with both signs, smallest magnitude first."""
    n = abs(int(constant))
    divisors = set()
    i = 1
    while i * i <= n:
        if n % i == 0:
            divisors.add(i)
            divisors.add(n // i)
        i += 1
    out = []
    for d in sorted(divisors):
        out.extend((d, -d))
    return out


@functools.lru_cache(maxsize=128)
def _cyclotomic(n: int) -> ZZX:
    f = ZZX([-1] + [0] * (n - 1) + [1])
    for d in range(1, n):
        if n % d == 0:
            f = f.divrem(_cyclotomic(d))[0]
    return f
