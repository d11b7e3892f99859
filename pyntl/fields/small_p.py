"""Prime field elements with a machine-word modulus.

``zz_p`` behaves like ``ZZ_p`` but its modulus lives in a separate context
slot and must stay below ``2**62``. :func:`~pyntl.core.context.init_fft_modulus`
selects one of the NTT-friendly primes in
:data:`~pyntl.core.constants.FFT_PRIMES`.
"""

from pyntl.core.context import SMALL_CONTEXT
from pyntl.fields.modular import ResidueElement, ResidueRing


class SmallPrimeField(ResidueRing):
    """``ZZ/pZZ`` for ``1 < p < 2**62``."""

    context = SMALL_CONTEXT


class zz_p(ResidueElement):
    """Residue modulo a word-sized integer; ``rep`` is a plain ``int``."""

    __slots__ = ()

    ring_class = SmallPrimeField


SmallPrimeField.element_class = zz_p
