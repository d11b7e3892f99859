"""Polynomials over a finite field.

Adds the Euclidean-domain operations that need coefficient inverses:
monic gcd, extended gcd, modular inverse and exponentiation, modular
composition, irreducibility testing, distinct-degree factorisation and
root finding.

Notes
-----
Irreducibility follows Ben-Or: a monic ``f`` of degree ``d`` over a field
with ``q`` elements is irreducible iff ``gcd(x^(q^i) - x, f) == 1`` for every
``1 <= i <= d // 2``. Degree 2 and 3 polynomials over small fields
(``irreducibility.root_scan_limit``) take the shortcut of scanning for a
root, which is equivalent at those degrees.

References
----------
M. Ben-Or, "Probabilistic algorithms in finite fields", FOCS 1981.
"""

from typing import Any, List, Tuple

from pyntl.configs import get_setting
from pyntl.core.constants import DEFAULT_ROOT_SCAN_LIMIT
from pyntl.core.exceptions import DivisionByZero, InvariantViolation, InvModError
from pyntl.polynomials.base import Polynomial


class FieldPolynomial(Polynomial):
    """Polynomial whose coefficient ring is a field."""

    __slots__ = ()

    def x(self) -> "FieldPolynomial":
        """The polynomial ``x`` over the same field."""
        return self.monomial(1, 1, ring=self._ring)

    def make_monic(self) -> "FieldPolynomial":
        """Divide by the leading coefficient (zero stays zero)."""
        if self.is_zero() or self.is_monic():
            return self.copy()
        inv_lc = self.leading().inverse()
        return self._new([c * inv_lc for c in self._coeffs])

    # -- gcd ------------------------------------------------------------------

    def gcd(self, other: Any) -> "FieldPolynomial":
        """Monic greatest common divisor (zero only if both are zero).

        Examples
        --------
        >>> from pyntl.polynomials import ZZ_pX
        >>> f = ZZ_pX([16, 0, 1], modulus=17)   # x^2 - 1
        >>> g = ZZ_pX([1, 1], modulus=17)       # x + 1
        >>> str(f.gcd(g))
        '[1 1]'
        """
        a, b = self, self._coerce(other)
        while not b.is_zero():
            a, b = b, a % b
        return a.make_monic()

    def xgcd(self, other: Any) -> Tuple["FieldPolynomial", "FieldPolynomial", "FieldPolynomial"]:
        """Extended gcd.

        Returns
        -------
        Tuple[FieldPolynomial, FieldPolynomial, FieldPolynomial]
            ``(d, s, t)`` with ``d == s*self + t*other`` and ``d`` monic
            (or zero when both inputs are zero).
        """
        zero, one = self._new([]), self._new([self._ring.one()])
        old_r, r = self, self._coerce(other)
        old_s, s = one, zero
        old_t, t = zero, one
        while not r.is_zero():
            q, rem = old_r.divrem(r)
            old_r, r = r, rem
            old_s, s = s, old_s - q * s
            old_t, t = t, old_t - q * t
        if old_r.is_zero():
            return old_r, old_s, old_t
        inv_lc = old_r.leading().inverse()
        return old_r * inv_lc, old_s * inv_lc, old_t * inv_lc

    def inverse_mod(self, modulus: Any) -> "FieldPolynomial":
        """Inverse of ``self`` modulo ``modulus``.

        Raises
        ------
        DivisionByZero
            If ``modulus`` is zero.
        InvModError
            If ``gcd(self, modulus) != 1``.
        """
        m = self._coerce(modulus)
        if m.is_zero():
            raise DivisionByZero("Inverse modulo the zero polynomial")
        d, s, _ = (self % m).xgcd(m)
        if not d.is_one():
            raise InvModError(self, m)
        return s % m

    # -- modular arithmetic ---------------------------------------------------

    def power_mod(self, e: Any, modulus: Any) -> "FieldPolynomial":
        """``self^e mod modulus``; negative ``e`` uses :meth:`inverse_mod`."""
        m = self._coerce(modulus)
        e = int(e)
        base = self % m
        if e < 0:
            base = base.inverse_mod(m)
            e = -e
        result = self._new([self._ring.one()]) % m
        while e:
            if e & 1:
                result = (result * base) % m
            e >>= 1
            if e:
                base = (base * base) % m
        return result

    def compose_mod(self, g: Any, modulus: Any) -> "FieldPolynomial":
        """``self(g) mod modulus`` by Horner's rule."""
        m = self._coerce(modulus)
        g = self._coerce(g) % m
        result = self._new([])
        for c in reversed(self._coeffs):
            result = (result * g + c) % m
        return result

    def min_poly_mod(self, modulus: Any) -> "FieldPolynomial":
        """Minimal polynomial of ``self`` in ``F[x] / (modulus)``.

        The smallest monic ``m`` with ``m(self) == 0 (mod modulus)``, found
        as the first linear dependency among ``1, g, g^2, ...`` reduced mod
        ``modulus``.

        Raises
        ------
        ValueError
            If ``modulus`` has degree < 1.
        """
        f = self._coerce(modulus)
        n = f.degree
        if n < 1:
            raise ValueError(f"Modulus must have degree >= 1, got {n}")
        zero, one = self._ring.zero(), self._ring.one()
        g = self % f
        power = self._new([one]) % f
        basis = []
        for k in range(n + 1):
            vec = [power.coeff(i) for i in range(n)]
            combo = [zero] * k + [one]
            for pivot, bvec, bcombo in basis:
                c = vec[pivot]
                if c.is_zero():
                    continue
                vec = [v - c * b for v, b in zip(vec, bvec)]
                for i, b in enumerate(bcombo):
                    combo[i] = combo[i] - c * b
            pivot = next((i for i, v in enumerate(vec) if not v.is_zero()), None)
            if pivot is None:
                return self._new(combo)
            inv_p = vec[pivot].inverse()
            basis.append((pivot, [v * inv_p for v in vec], [c * inv_p for c in combo]))
            power = (power * g) % f
        raise InvariantViolation(f"No linear dependency among {n + 1} powers mod {f}")

    # -- factoring ------------------------------------------------------------

    def roots(self) -> List[Any]:
        """Distinct roots, found by scanning every field element.

        Raises
        ------
        ValueError
            If the field is larger than ``enumeration.max_elements``.
        """
        if self.degree <= 0:
            return []
        return [a for a in self._ring.elements() if self(a).is_zero()]

    def is_irreducible(self) -> bool:
        """Irreducibility over the coefficient field.

        Constants (including zero) are not irreducible; every degree-1
        polynomial is.

        Examples
        --------
        >>> from pyntl.polynomials import GF2X
        >>> GF2X([1, 1, 1]).is_irreducible(), GF2X([1, 0, 1]).is_irreducible()
        (True, False)
        """
        d = self.degree
        if d <= 0:
            return False
        if d == 1:
            return True
        q = self._ring.order
        limit = get_setting("irreducibility", "root_scan_limit", DEFAULT_ROOT_SCAN_LIMIT)
        if d <= 3 and q <= limit:
            return not any(self(a).is_zero() for a in self._ring.elements())

        f = self.make_monic()
        x = f.x()
        h = x
        for _ in range(d // 2):
            h = h.power_mod(q, f)
            if not f.gcd(h - x).is_one():
                return False
        return True

    def distinct_degree_factorization(self) -> List[Tuple["FieldPolynomial", int]]:
        """Split a square-free polynomial by the degree of its factors.

        Returns
        -------
        List[Tuple[FieldPolynomial, int]]
            Pairs ``(g, i)`` where ``g`` is the monic product of all
            irreducible factors of degree ``i``.

        Notes
        -----
        The input is made monic first; repeated factors are not detected.
        """
        result = []
        f = self.make_monic()
        if f.degree <= 0:
            return result
        q = self._ring.order
        x = f.x()
        h = x
        i = 0
        while f.degree >= 2 * (i + 1):
            i += 1
            h = h.power_mod(q, f)
            g = f.gcd(h - x)
            if not g.is_one():
                result.append((g, i))
                f = f // g
                h = h % f
        if f.degree > 0:
            result.append((f, f.degree))
        return result

    def square_free_part(self) -> "FieldPolynomial":
        """Monic ``f / gcd(f, f')`` (``f`` itself when ``f' == 0``)."""
        f = self.make_monic()
        df = f.derivative()
        if df.is_zero():
            return f
        return f // f.gcd(df)
