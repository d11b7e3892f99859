"""Prime field elements with arbitrary-precision modulus.

Examples
--------
>>> from pyntl.core.context import init_modulus
>>> init_modulus(17)
>>> ZZ_p(5) * ZZ_p(10)
ZZ_p(16, modulus=17)
>>> ZZ_p(5).inverse()
ZZ_p(7, modulus=17)
"""

from pyntl.core.context import PRIME_CONTEXT
from pyntl.fields.modular import ResidueElement, ResidueRing
from pyntl.integers.zz import ZZ


class PrimeField(ResidueRing):
    """``ZZ/pZZ`` for a modulus ``p > 1`` of any size."""

    context = PRIME_CONTEXT


class ZZ_p(ResidueElement):
    """Residue modulo a big integer.

    ``rep`` is returned as :class:`~pyntl.integers.zz.ZZ`.
    """

    __slots__ = ()

    ring_class = PrimeField

    @property
    def rep(self) -> ZZ:
        return ZZ(self._rep)


PrimeField.element_class = ZZ_p
