"""Finite fields.

Modules
-------
modular
    Residue classes modulo an integer, shared by ``ZZ_p`` and ``zz_p``.
prime
    ``ZZ_p`` and ``PrimeField`` (arbitrary-precision modulus).
small_p
    ``zz_p`` and ``SmallPrimeField`` (modulus below ``2**62``).
gf2
    ``GF2`` and ``BinaryField``.
extension
    ``ZZ_pE`` and ``ExtensionField`` (GF(p^k)); imported from
    ``pyntl.fields.extension`` because it is built on polynomials.
"""

from pyntl.fields.gf2 import GF2, GF2_RING, BinaryField
from pyntl.fields.modular import ResidueElement, ResidueRing, inv, rep
from pyntl.fields.prime import PrimeField, ZZ_p
from pyntl.fields.small_p import SmallPrimeField, zz_p

__all__ = [
    "GF2",
    "GF2_RING",
    "BinaryField",
    "ResidueElement",
    "ResidueRing",
    "inv",
    "rep",
    "SmallPrimeField",
    "zz_p",
    "PrimeField",
    "ZZ_p",
]
