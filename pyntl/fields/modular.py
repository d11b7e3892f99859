"""Residue classes modulo an integer.

Shared implementation behind ``ZZ_p`` (big modulus) and ``zz_p``
(machine-word modulus). Each element carries the ring it was built in, so
arithmetic reduces against the modulus captured at construction rather than
whatever the global context holds later.

Notes
-----
- The representative is always the least non-negative residue
- Plain ``int`` and ``ZZ`` operands are coerced into the element's ring
- Combining elements of different moduli raises ``ModulusMismatch``
- Equality across moduli is False; hashing uses the representative only
"""

from typing import Any, Hashable, Iterator, Optional, Type

import numpy as np

from pyntl.core.context import ModulusContext, require_initialized
from pyntl.core.exceptions import InvModError, ModulusMismatch
from pyntl.core.rings import Field
from pyntl.integers.number_theory import _random_below, get_rng
from pyntl.integers.zz import ZZ, gcdx, to_int


class ResidueRing(Field):
    """Integers modulo ``n`` (treated as a field; non-units raise on inversion).

    Parameters
    ----------
    modulus : int or ZZ
        Modulus, validated by the subclass's context.
    """

    #: Context supplying the default modulus.
    context: ModulusContext
    #: Element type produced by this ring.
    element_class: Type["ResidueElement"]

    def __init__(self, modulus: Any):
        self._modulus = self.context._validate(modulus)

    @classmethod
    def current(cls) -> "ResidueRing":
        """Ring for the modulus currently held by the context.

        Raises
        ------
        InvalidModulus
            If the context is uninitialised.
        """
        return cls(require_initialized(cls.context))

    @classmethod
    def resolve(cls, modulus: Any = None) -> "ResidueRing":
        """Turn None, an integer or a ring of this class into a ring."""
        if modulus is None:
            return cls.current()
        if isinstance(modulus, cls):
            return modulus
        return cls(modulus)

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def characteristic(self) -> int:
        return self._modulus

    @property
    def order(self) -> int:
        return self._modulus

    def _key(self) -> Hashable:
        return self._modulus

    def __call__(self, value: Any) -> "ResidueElement":
        return self.element_class._make(self, self.reduce(value))

    def reduce(self, value: Any) -> int:
        """Canonical representative of ``value`` in ``[0, modulus)``.

        Raises
        ------
        ModulusMismatch
            If ``value`` is an element of a different ring.
        """
        if isinstance(value, ResidueElement):
            if value.ring != self:
                raise ModulusMismatch(value.ring, self)
            return value._rep
        if isinstance(value, ZZ):
            return value.value % self._modulus
        if hasattr(value, "ring"):
            raise ModulusMismatch(value.ring, self)
        return to_int(value) % self._modulus

    def _iter_elements(self) -> Iterator["ResidueElement"]:
        for i in range(self._modulus):
            yield self.element_class._make(self, i)

    def random(self, rng: Optional[np.random.Generator] = None) -> "ResidueElement":
        return self.element_class._make(self, _random_below(self._modulus, get_rng(rng)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._modulus})"

    def __str__(self) -> str:
        return f"{self.element_class.__name__}[{self._modulus}]"


class ResidueElement:
    """Element of a :class:`ResidueRing`.

    Parameters
    ----------
    value : int, ZZ or element, optional
        Value to reduce (default 0).
    modulus : int, ZZ or ResidueRing, optional
        Explicit modulus; the context's current modulus when omitted.

    Raises
    ------
    InvalidModulus
        If no modulus is given and the context is uninitialised.
    """

    __slots__ = ("_ring", "_rep")

    ring_class: Type[ResidueRing]

    def __init__(self, value: Any = 0, modulus: Any = None):
        ring = self.ring_class.resolve(modulus)
        self._ring = ring
        self._rep = ring.reduce(value)

    @classmethod
    def _make(cls, ring: ResidueRing, rep: int) -> "ResidueElement":
        obj = object.__new__(cls)
        obj._ring = ring
        obj._rep = rep
        return obj

    @classmethod
    def random(
        cls, modulus: Any = None, rng: Optional[np.random.Generator] = None
    ) -> "ResidueElement":
        """Uniformly random element."""
        return cls.ring_class.resolve(modulus).random(rng)

    @property
    def ring(self) -> ResidueRing:
        return self._ring

    @property
    def modulus(self) -> int:
        return self._ring.modulus

    @property
    def rep(self) -> Any:
        """Canonical representative."""
        return self._rep

    def is_zero(self) -> bool:
        return self._rep == 0

    def is_one(self) -> bool:
        return self._rep == 1

    def __bool__(self) -> bool:
        return self._rep != 0

    def __int__(self) -> int:
        return self._rep

    def _coerce(self, other: Any) -> Any:
        if isinstance(other, ResidueElement):
            if type(other) is not type(self):
                return NotImplemented
            if other._ring != self._ring:
                raise ModulusMismatch(self._ring, other._ring)
            return other._rep
        if isinstance(other, (int, ZZ)):
            return to_int(other) % self._ring.modulus
        return NotImplemented

    def _new(self, rep: int) -> "ResidueElement":
        return self._make(self._ring, rep % self._ring.modulus)

    # -- arithmetic -----------------------------------------------------------

    def __add__(self, other: Any) -> "ResidueElement":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._new(self._rep + o)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "ResidueElement":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._new(self._rep - o)

    def __rsub__(self, other: Any) -> "ResidueElement":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._new(o - self._rep)

    def __mul__(self, other: Any) -> "ResidueElement":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._new(self._rep * o)

    __rmul__ = __mul__

    def __neg__(self) -> "ResidueElement":
        return self._new(-self._rep)

    def __pos__(self) -> "ResidueElement":
        return self

    def inverse(self) -> "ResidueElement":
        """Multiplicative inverse via the extended Euclidean algorithm.

        Raises
        ------
        InvModError
            If ``gcd(rep, modulus) != 1`` (in particular for zero).
        """
        d, s, _ = gcdx(self._rep, self._ring.modulus)
        if d != 1:
            raise InvModError(self.rep, self._ring.modulus)
        return self._new(to_int(s))

    def __truediv__(self, other: Any) -> "ResidueElement":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self * self._make(self._ring, o).inverse()

    def __rtruediv__(self, other: Any) -> "ResidueElement":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._make(self._ring, o) * self.inverse()

    def __pow__(self, exponent: Any) -> "ResidueElement":
        if not isinstance(exponent, (int, ZZ)):
            return NotImplemented
        e = to_int(exponent)
        if e < 0:
            return self.inverse() ** (-e)
        return self._make(self._ring, pow(self._rep, e, self._ring.modulus))

    # -- comparison -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResidueElement):
            return (
                type(other) is type(self)
                and other._ring == self._ring
                and other._rep == self._rep
            )
        if isinstance(other, (int, ZZ)):
            # only the canonical representative equals an int, matching __hash__
            return self._rep == to_int(other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._rep)

    def __str__(self) -> str:
        return str(self._rep)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rep}, modulus={self._ring.modulus})"


def inv(a: Any) -> Any:
    """Multiplicative inverse of any field element."""
    return a.inverse()


def rep(a: Any) -> Any:
    """Canonical representative of a residue or extension element."""
    return a.rep
