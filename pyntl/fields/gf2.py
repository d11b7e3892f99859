"""The two-element field GF(2).

Addition and subtraction are XOR, multiplication is AND, negation is the
identity. No context is involved.
"""

from typing import Any, Hashable, Iterator, Optional

import numpy as np

from pyntl.core.exceptions import InvModError, ModulusMismatch
from pyntl.core.rings import Field
from pyntl.integers.number_theory import get_rng
from pyntl.integers.zz import ZZ, to_int


class BinaryField(Field):
    """GF(2)."""

    def __call__(self, value: Any) -> "GF2":
        return GF2(value)

    @property
    def characteristic(self) -> int:
        return 2

    @property
    def order(self) -> int:
        return 2

    @property
    def modulus(self) -> int:
        return 2

    def _key(self) -> Hashable:
        return 2

    def _iter_elements(self) -> Iterator["GF2"]:
        yield GF2_ZERO
        yield GF2_ONE

    def random(self, rng: Optional[np.random.Generator] = None) -> "GF2":
        return GF2(int(get_rng(rng).integers(0, 2)))

    def exact_quotient(self, a: "GF2", b: "GF2") -> "GF2":
        return a / b

    def __repr__(self) -> str:
        return "GF2"


GF2_RING = BinaryField()


class GF2:
    """Element of GF(2).

    Parameters
    ----------
    value : int, bool, ZZ or GF2, optional
        Reduced mod 2 (default 0).

    Examples
    --------
    >>> GF2(1) + GF2(1)
    GF2(0)
    >>> GF2(3) * GF2(1)
    GF2(1)
    """

    __slots__ = ("_bit",)

    def __init__(self, value: Any = 0):
        if isinstance(value, GF2):
            self._bit = value._bit
        elif hasattr(value, "ring") and not isinstance(value, ZZ):
            raise ModulusMismatch(value.ring, GF2_RING)
        else:
            self._bit = to_int(value) & 1

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> "GF2":
        return GF2_RING.random(rng)

    @property
    def ring(self) -> BinaryField:
        return GF2_RING

    @property
    def modulus(self) -> int:
        return 2

    @property
    def rep(self) -> int:
        return self._bit

    def is_zero(self) -> bool:
        return self._bit == 0

    def is_one(self) -> bool:
        return self._bit == 1

    def __bool__(self) -> bool:
        return self._bit == 1

    def __int__(self) -> int:
        return self._bit

    def __index__(self) -> int:
        return self._bit

    @staticmethod
    def _coerce(other: Any) -> Any:
        if isinstance(other, GF2):
            return other._bit
        if isinstance(other, (int, ZZ)):
            return to_int(other) & 1
        return NotImplemented

    def __add__(self, other: Any) -> "GF2":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return GF2(self._bit ^ o)

    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__
    __xor__ = __add__
    __rxor__ = __add__

    def __mul__(self, other: Any) -> "GF2":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return GF2(self._bit & o)

    __rmul__ = __mul__
    __and__ = __mul__
    __rand__ = __mul__

    def __neg__(self) -> "GF2":
        return self

    def __pos__(self) -> "GF2":
        return self

    def inverse(self) -> "GF2":
        """Return 1 for 1.

        Raises
        ------
        InvModError
            For zero.
        """
        if self._bit == 0:
            raise InvModError(0, 2)
        return self

    def __truediv__(self, other: Any) -> "GF2":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self * GF2(o).inverse()

    def __rtruediv__(self, other: Any) -> "GF2":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return GF2(o) * self.inverse()

    def __pow__(self, exponent: Any) -> "GF2":
        if not isinstance(exponent, (int, ZZ)):
            return NotImplemented
        e = to_int(exponent)
        if e == 0:
            return GF2_ONE
        if e < 0:
            return self.inverse()
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (int, ZZ)):
            return self._bit == to_int(other)
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._bit == o

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._bit)

    def __str__(self) -> str:
        return str(self._bit)

    def __repr__(self) -> str:
        return f"GF2({self._bit})"


GF2_ZERO = GF2(0)
GF2_ONE = GF2(1)
