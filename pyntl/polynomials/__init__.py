"""Dense univariate polynomials.

Modules
-------
base
    ``Polynomial``: arithmetic, long division, derivative, evaluation.
field
    ``FieldPolynomial``: gcd, xgcd, modular arithmetic, irreducibility.
zzx
    ``ZZX``: content, primitive part, pseudo-division, cyclotomic, factor.
modular
    ``ZZ_pX``, ``zz_pX`` and ``GF2X``.
extension
    ``ZZ_pEX`` over GF(p^k); imported from ``pyntl.polynomials.extension``
    because it sits on top of :mod:`pyntl.fields.extension`.
"""

from pyntl.polynomials.base import Polynomial
from pyntl.polynomials.field import FieldPolynomial
from pyntl.polynomials.modular import GF2X, ZZ_pX, zz_pX
from pyntl.polynomials.zzx import ZZX

__all__ = [
    "Polynomial",
    "FieldPolynomial",
    "GF2X",
    "ZZ_pX",
    "zz_pX",
    "ZZX",
]
