"""Polynomials over an extension field GF(p^k).

``ZZ_pEX`` reuses every field-polynomial algorithm; coefficients are
``ZZ_pE`` elements, so a ``ZZ_pEX`` prints as nested brackets, e.g.
``[[1 1] [0 1]]``.
"""

from typing import Any, Optional

import numpy as np

from pyntl.fields.extension import ExtensionField
from pyntl.polynomials.field import FieldPolynomial


class ZZ_pEX(FieldPolynomial):
    """Polynomial over ``ZZ_pE``.

    Parameters
    ----------
    coeffs : iterable or scalar, optional
        Coefficients from the constant term upward; each is coerced into
        the extension field (lists become ``ZZ_pE`` representatives).
    modulus : ExtensionField or ZZ_pX, optional
        Coefficient field; the current extension field when omitted.
    """

    __slots__ = ()

    def __init__(self, coeffs: Any = None, modulus: Any = None):
        super().__init__(coeffs, ring=ExtensionField.resolve(modulus))

    @classmethod
    def _default_ring(cls) -> ExtensionField:
        return ExtensionField.current()

    @classmethod
    def random(
        cls,
        n: int,
        modulus: Any = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "ZZ_pEX":
        """Random polynomial of degree < ``n``."""
        field = ExtensionField.resolve(modulus)
        return cls._from_ring(field, [field.random(rng) for _ in range(n)])
