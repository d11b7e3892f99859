"""Polynomials over the prime fields and GF(2).

Each class fixes the coefficient field. ``ZZ_pX`` and ``zz_pX`` take the
modulus from the corresponding context slot unless one is passed
explicitly, and keep it for their whole life.
"""

from typing import Any, Optional

import numpy as np

from pyntl.fields.gf2 import GF2_RING, BinaryField
from pyntl.fields.small_p import SmallPrimeField
from pyntl.fields.prime import PrimeField
from pyntl.polynomials.field import FieldPolynomial


class _ResiduePolynomial(FieldPolynomial):
    """Polynomial over a residue field selected by ``field_class``."""

    __slots__ = ()

    field_class = PrimeField

    def __init__(self, coeffs: Any = None, modulus: Any = None):
        super().__init__(coeffs, ring=self.field_class.resolve(modulus))

    @classmethod
    def _default_ring(cls):
        return cls.field_class.current()

    @property
    def modulus(self) -> int:
        return self._ring.modulus

    @classmethod
    def random(
        cls,
        n: int,
        modulus: Any = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "_ResiduePolynomial":
        """Random polynomial of degree < ``n``."""
        ring = cls.field_class.resolve(modulus)
        return cls._from_ring(ring, [ring.random(rng) for _ in range(n)])


class ZZ_pX(_ResiduePolynomial):
    """Polynomial over ``ZZ_p``.

    Parameters
    ----------
    coeffs : iterable or scalar, optional
        Coefficients from the constant term upward.
    modulus : int, ZZ or PrimeField, optional
        Coefficient modulus; the current ``ZZ_p`` modulus when omitted.

    Examples
    --------
    >>> f = ZZ_pX([16, 0, 1], modulus=17)
    >>> q, r = f.divrem(ZZ_pX([1, 1], modulus=17))
    >>> str(q), str(r)
    ('[16 1]', '[0]')
    """

    __slots__ = ()

    field_class = PrimeField


class zz_pX(_ResiduePolynomial):
    """Polynomial over ``zz_p`` (word-sized modulus)."""

    __slots__ = ()

    field_class = SmallPrimeField


class GF2X(FieldPolynomial):
    """Polynomial over GF(2).

    Parameters
    ----------
    coeffs : iterable or scalar, optional
        Coefficients (bits) from the constant term upward.
    """

    __slots__ = ()

    def __init__(self, coeffs: Any = None):
        super().__init__(coeffs, ring=GF2_RING)

    @classmethod
    def _default_ring(cls) -> BinaryField:
        return GF2_RING

    @classmethod
    def random(cls, n: int, rng: Optional[np.random.Generator] = None) -> "GF2X":
        """Random polynomial of degree < ``n``."""
        return cls._from_ring(GF2_RING, [GF2_RING.random(rng) for _ in range(n)])

    @classmethod
    def from_int(cls, bits: int) -> "GF2X":
        """Polynomial whose coefficient ``i`` is bit ``i`` of ``bits``."""
        return cls([(bits >> i) & 1 for i in range(int(bits).bit_length())])

    def to_int(self) -> int:
        """Inverse of :meth:`from_int`."""
        return sum(c.rep << i for i, c in enumerate(self._coeffs))
