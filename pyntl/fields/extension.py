"""Extension fields GF(p^k).

An :class:`ExtensionField` is ``ZZ_p[x] / (P)`` for a modulus polynomial
``P`` of degree ``k >= 1``. Elements (:class:`ZZ_pE`) hold a ``ZZ_pX``
representative of degree ``< k`` that is reduced after every operation.

Notes
-----
A third context slot holds the current extension field, analogous to the
``ZZ_p`` modulus. :func:`init_extension` logs a warning (but does not fail)
when ``P`` is reducible; inversion in such a ring can then hit a
non-constant gcd, which raises ``InvariantViolation``.

Examples
--------
>>> from pyntl.core.context import init_modulus
>>> from pyntl.polynomials import ZZ_pX
>>> init_modulus(2)
>>> init_extension(ZZ_pX([1, 1, 1]))      # GF(4) = GF(2)[x] / (x^2 + x + 1)
>>> a = ZZ_pE([0, 1])                     # the class of x
>>> str(a * a), str(a.inverse())
('[1 1]', '[1 1]')
"""

import itertools
from typing import Any, Callable, Hashable, Iterator, Optional

import numpy as np

from pyntl.configs import get_setting
from pyntl.core.context import ContextSnapshot, ModulusContext, require_initialized
from pyntl.core.exceptions import (
    InvalidModulus,
    InvariantViolation,
    InvModError,
    ModulusMismatch,
)
from pyntl.core.rings import Field
from pyntl.fields.prime import PrimeField, ZZ_p
from pyntl.integers.zz import ZZ, to_int
from pyntl.polynomials.modular import ZZ_pX
from pyntl.utils.logging import get_logger

logger = get_logger(__name__)


class ExtensionField(Field):
    """GF(p^k) as ``ZZ_p[x] / (P)``.

    Parameters
    ----------
    modulus : ZZ_pX
        Defining polynomial of degree >= 1. Its coefficient field is the
        base field. The polynomial is copied.

    Raises
    ------
    InvalidModulus
        If ``modulus`` is not a ``ZZ_pX`` of degree >= 1.
    """

    def __init__(self, modulus: ZZ_pX):
        if isinstance(modulus, ExtensionField):
            modulus = modulus.modulus
        if not isinstance(modulus, ZZ_pX):
            raise InvalidModulus(
                f"Extension modulus must be a ZZ_pX, got {type(modulus).__name__}"
            )
        if modulus.degree < 1:
            raise InvalidModulus(f"Extension modulus must have degree >= 1, got {modulus}")
        self._modulus = modulus.copy()

    @classmethod
    def current(cls) -> "ExtensionField":
        """Field held by the extension context.

        Raises
        ------
        InvalidModulus
            If no extension modulus has been initialised.
        """
        return require_initialized(EXTENSION_CONTEXT)

    @classmethod
    def resolve(cls, modulus: Any = None) -> "ExtensionField":
        if modulus is None:
            return cls.current()
        if isinstance(modulus, ExtensionField):
            return modulus
        return cls(modulus)

    @property
    def modulus(self) -> ZZ_pX:
        """Defining polynomial (a copy)."""
        return self._modulus.copy()

    @property
    def base_field(self) -> PrimeField:
        return self._modulus.ring

    @property
    def degree(self) -> int:
        return self._modulus.degree

    @property
    def characteristic(self) -> int:
        return self.base_field.modulus

    @property
    def order(self) -> int:
        return self.base_field.modulus ** self.degree

    def _key(self) -> Hashable:
        return (self.base_field.modulus, tuple(int(c) for c in self._modulus))

    def __call__(self, value: Any) -> "ZZ_pE":
        return ZZ_pE._make(self, self.reduce(value))

    def reduce(self, value: Any) -> ZZ_pX:
        """Representative of ``value`` reduced modulo ``P``.

        Accepts ``ZZ_pE``, ``ZZ_pX``, base-field elements, integers and
        coefficient lists.

        Raises
        ------
        ModulusMismatch
            If ``value`` belongs to a different field.
        """
        if isinstance(value, ZZ_pE):
            if value.ring != self:
                raise ModulusMismatch(value.ring, self)
            return value._rep
        if isinstance(value, ZZ_pX):
            if value.ring != self.base_field:
                raise ModulusMismatch(value.ring, self.base_field)
            return value % self._modulus
        return ZZ_pX(value, modulus=self.base_field) % self._modulus

    def _iter_elements(self) -> Iterator["ZZ_pE"]:
        base = list(self.base_field.elements())
        for coeffs in itertools.product(base, repeat=self.degree):
            yield ZZ_pE._make(self, ZZ_pX(list(coeffs), modulus=self.base_field))

    def random(self, rng: Optional[np.random.Generator] = None) -> "ZZ_pE":
        return ZZ_pE._make(self, ZZ_pX.random(self.degree, self.base_field, rng))

    def __repr__(self) -> str:
        return f"ExtensionField({self._modulus}, p={self.characteristic})"

    def __str__(self) -> str:
        return f"GF({self.characteristic}^{self.degree})"


class ZZ_pE:
    """Element of an :class:`ExtensionField`.

    Parameters
    ----------
    value : ZZ_pE, ZZ_pX, ZZ_p, int or list, optional
        Value to reduce modulo ``P`` (default 0).
    modulus : ExtensionField or ZZ_pX, optional
        Explicit field; the current extension field when omitted.

    Raises
    ------
    InvalidModulus
        If no field is given and the extension context is uninitialised.
    """

    __slots__ = ("_ring", "_rep")

    def __init__(self, value: Any = 0, modulus: Any = None):
        ring = ExtensionField.resolve(modulus)
        self._ring = ring
        self._rep = ring.reduce(value)

    @classmethod
    def _make(cls, ring: ExtensionField, rep: ZZ_pX) -> "ZZ_pE":
        obj = object.__new__(cls)
        obj._ring = ring
        obj._rep = rep
        return obj

    @classmethod
    def random(
        cls, modulus: Any = None, rng: Optional[np.random.Generator] = None
    ) -> "ZZ_pE":
        return ExtensionField.resolve(modulus).random(rng)

    @property
    def ring(self) -> ExtensionField:
        return self._ring

    @property
    def modulus(self) -> ZZ_pX:
        return self._ring.modulus

    @property
    def rep(self) -> ZZ_pX:
        """Reduced representative (a copy)."""
        return self._rep.copy()

    def is_zero(self) -> bool:
        return self._rep.is_zero()

    def is_one(self) -> bool:
        return self._rep.is_one()

    def __bool__(self) -> bool:
        return not self._rep.is_zero()

    def _coerce(self, other: Any) -> Any:
        if isinstance(other, ZZ_pE):
            if other._ring != self._ring:
                raise ModulusMismatch(self._ring, other._ring)
            return other._rep
        if isinstance(other, (int, ZZ, ZZ_p, ZZ_pX)):
            return self._ring.reduce(other)
        return NotImplemented

    def _new(self, rep: ZZ_pX) -> "ZZ_pE":
        return self._make(self._ring, rep % self._ring._modulus)

    # -- arithmetic -----------------------------------------------------------

    def __add__(self, other: Any) -> "ZZ_pE":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._make(self._ring, self._rep + o)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "ZZ_pE":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._make(self._ring, self._rep - o)

    def __rsub__(self, other: Any) -> "ZZ_pE":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._make(self._ring, o - self._rep)

    def __mul__(self, other: Any) -> "ZZ_pE":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._new(self._rep * o)

    __rmul__ = __mul__

    def __neg__(self) -> "ZZ_pE":
        return self._make(self._ring, -self._rep)

    def __pos__(self) -> "ZZ_pE":
        return self

    def inverse(self) -> "ZZ_pE":
        """Inverse via the polynomial extended Euclidean algorithm.

        Raises
        ------
        InvModError
            If ``self`` is zero.
        InvariantViolation
            If ``gcd(rep, P)`` is not a constant, i.e. ``P`` is reducible.
        """
        P = self._ring._modulus
        if self.is_zero():
            raise InvModError(self, P)
        g, s, _ = self._rep.xgcd(P)
        if g.degree != 0:
            raise InvariantViolation(
                f"Extension modulus {P} is not irreducible: gcd({self}, P) = {g}"
            )
        return self._new(s * g.constant().inverse())

    def __truediv__(self, other: Any) -> "ZZ_pE":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self * self._make(self._ring, o).inverse()

    def __rtruediv__(self, other: Any) -> "ZZ_pE":
        o = self._coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._make(self._ring, o) * self.inverse()

    def __pow__(self, exponent: Any) -> "ZZ_pE":
        if not isinstance(exponent, (int, ZZ)):
            return NotImplemented
        e = to_int(exponent)
        if e < 0:
            return self.inverse() ** (-e)
        return self._make(self._ring, self._rep.power_mod(e, self._ring._modulus))

    def power(self, e: int) -> "ZZ_pE":
        return self**e

    # -- comparison -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ZZ_pE):
            return other._ring == self._ring and other._rep == self._rep
        if isinstance(other, (int, ZZ, ZZ_p, ZZ_pX)):
            return self._rep == other
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
        return f"ZZ_pE({self._rep}, modulus={self._ring._modulus})"


# =============================================================================
# Extension context
# =============================================================================


def validate_extension_modulus(modulus: Any) -> ExtensionField:
    """Build the field for ``modulus`` and warn if it is reducible.

    Raises
    ------
    InvalidModulus
        If ``modulus`` is not a ``ZZ_pX`` of degree >= 1.
    """
    field = ExtensionField.resolve(modulus)
    if get_setting("irreducibility", "check_extension_modulus", True):
        if not field._modulus.is_irreducible():
            logger.warning(
                f"Extension modulus {field._modulus} is not irreducible over "
                f"ZZ_p({field.characteristic}); inversion may fail"
            )
    return field


EXTENSION_CONTEXT = ModulusContext("ZZ_pE", validate_extension_modulus, uninitialized=None)


def init_extension(modulus: Any) -> None:
    """Set the current extension field to ``ZZ_p[x] / (modulus)``.

    Raises
    ------
    InvalidModulus
        If ``modulus`` is not a ``ZZ_pX`` of degree >= 1.
    """
    EXTENSION_CONTEXT.init(modulus)


def current_extension() -> Optional[ZZ_pX]:
    """Return the current extension modulus, or None when uninitialised."""
    field = EXTENSION_CONTEXT.current()
    return None if field is None else field.modulus


def save_extension() -> ContextSnapshot:
    """Capture the current extension field."""
    return EXTENSION_CONTEXT.snapshot()


def using_extension(modulus: Any):
    """Context manager running its block in the extension ``ZZ_p[x] / (modulus)``."""
    return EXTENSION_CONTEXT.scoped(modulus)


def with_extension(modulus: Any, body: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run ``body`` with the extension field set to ``modulus`` and restore afterwards."""
    return EXTENSION_CONTEXT.run(modulus, body, *args, **kwargs)
