"""Arbitrary-precision integers.

:class:`ZZ` is an immutable signed integer value type on top of Python's
native big integers, with floor-division semantics and errors from
:mod:`pyntl.core.exceptions`.

Notes
-----
- ``//``, ``%`` and ``divmod`` round the quotient toward negative infinity;
  the remainder carries the sign of the divisor
- Division by zero raises ``DivisionByZero``
- ``gcd`` is non-negative with ``gcd(0, 0) == 0``
- ``gcdx(a, b)`` returns ``(d, s, t)`` with ``d == a*s + b*t``
- ``ZZ`` compares and hashes equal to the matching ``int``
"""

import functools
import operator
from typing import Any, Hashable, Tuple, Union

from pyntl.core.exceptions import DivisionByZero, InvModError, ModulusMismatch
from pyntl.core.rings import Ring

IntLike = Union[int, "ZZ"]


def to_int(value: Any) -> int:
    """Convert an ``int``/``ZZ`` (or anything with ``__index__``) to ``int``.

    Raises
    ------
    TypeError
        If ``value`` is not integral.
    """
    if isinstance(value, ZZ):
        return value._value
    return operator.index(value)


def _other(value: Any) -> Any:
    if isinstance(value, ZZ):
        return value._value
    if isinstance(value, int):
        return value
    return NotImplemented


@functools.total_ordering
class ZZ:
    """Signed arbitrary-precision integer.

    Parameters
    ----------
    value : int, ZZ or str, optional
        Initial value; strings are parsed as decimal (default 0).

    Examples
    --------
    >>> a = ZZ("123456789012345678901234567890")
    >>> (a * a) % 7
    ZZ(1)
    >>> ZZ(-7) // 2, ZZ(-7) % 2
    (ZZ(-4), ZZ(1))
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = 0):
        if isinstance(value, ZZ):
            self._value = value._value
        elif isinstance(value, str):
            self._value = int(value.strip().replace("_", ""), 10)
        else:
            self._value = operator.index(value)

    @property
    def ring(self) -> "IntegerRing":
        return ZZ_RING

    @property
    def value(self) -> int:
        return self._value

    # -- predicates -----------------------------------------------------------

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == 1

    def is_odd(self) -> bool:
        return self._value & 1 == 1

    def is_even(self) -> bool:
        return self._value & 1 == 0

    def sign(self) -> int:
        """Return -1, 0 or 1."""
        return (self._value > 0) - (self._value < 0)

    def num_bits(self) -> int:
        """Bit length of ``|self|`` (0 for zero)."""
        return abs(self._value).bit_length()

    def num_bytes(self) -> int:
        """Byte length of ``|self|`` (0 for zero)."""
        return (self.num_bits() + 7) // 8

    def bit(self, i: int) -> int:
        """Return bit ``i`` of ``|self|``."""
        if i < 0:
            raise ValueError(f"Bit index must be >= 0, got {i}")
        return (abs(self._value) >> i) & 1

    def inverse(self) -> "ZZ":
        """Inverse in the integers; only defined for 1 and -1."""
        if self._value in (1, -1):
            return self
        raise InvModError(self, "ZZ")

    # -- conversions ----------------------------------------------------------

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __float__(self) -> float:
        return float(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"ZZ({self._value})"

    # -- comparison -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return self._value == o

    def __lt__(self, other: Any) -> bool:
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return self._value < o

    def __hash__(self) -> int:
        return hash(self._value)

    # -- arithmetic -----------------------------------------------------------

    def __neg__(self) -> "ZZ":
        return ZZ(-self._value)

    def __pos__(self) -> "ZZ":
        return self

    def __abs__(self) -> "ZZ":
        return ZZ(abs(self._value))

    def __add__(self, other: Any) -> "ZZ":
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return ZZ(self._value + o)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "ZZ":
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return ZZ(self._value - o)

    def __rsub__(self, other: Any) -> "ZZ":
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return ZZ(o - self._value)

    def __mul__(self, other: Any) -> "ZZ":
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return ZZ(self._value * o)

    __rmul__ = __mul__

    def __floordiv__(self, other: Any) -> "ZZ":
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return div(self, o)

    def __rfloordiv__(self, other: Any) -> "ZZ":
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return div(o, self)

    def __mod__(self, other: Any) -> "ZZ":
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return rem(self, o)

    def __rmod__(self, other: Any) -> "ZZ":
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return rem(o, self)

    def __divmod__(self, other: Any) -> Tuple["ZZ", "ZZ"]:
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return divrem(self, o)

    def __rdivmod__(self, other: Any) -> Tuple["ZZ", "ZZ"]:
        o = _other(other)
        if o is NotImplemented:
            return NotImplemented
        return divrem(o, self)

    def __pow__(self, exponent: Any, modulus: Any = None) -> "ZZ":
        e = _other(exponent)
        if e is NotImplemented:
            return NotImplemented
        if modulus is not None:
            from pyntl.integers.number_theory import power_mod

            return power_mod(self, e, modulus)
        if e < 0:
            raise ValueError(f"Negative exponent {e} for ZZ power")
        return ZZ(self._value**e)

    def __lshift__(self, n: int) -> "ZZ":
        return ZZ(self._value << n)

    def __rshift__(self, n: int) -> "ZZ":
        return ZZ(self._value >> n)


# =============================================================================
# Free functions
# =============================================================================


def divrem(a: IntLike, b: IntLike) -> Tuple[ZZ, ZZ]:
    """Floor division with remainder.

    Raises
    ------
    DivisionByZero
        If ``b == 0``.
    """
    x, y = to_int(a), to_int(b)
    if y == 0:
        raise DivisionByZero(f"Integer division of {x} by zero")
    q, r = divmod(x, y)
    return ZZ(q), ZZ(r)


def div(a: IntLike, b: IntLike) -> ZZ:
    """Floor quotient ``a // b``."""
    return divrem(a, b)[0]


def rem(a: IntLike, b: IntLike) -> ZZ:
    """Remainder with the sign of ``b``."""
    return divrem(a, b)[1]


def gcd(a: IntLike, b: IntLike) -> ZZ:
    """Non-negative greatest common divisor; ``gcd(0, 0) == 0``."""
    x, y = abs(to_int(a)), abs(to_int(b))
    while y:
        x, y = y, x % y
    return ZZ(x)


def gcdx(a: IntLike, b: IntLike) -> Tuple[ZZ, ZZ, ZZ]:
    """Extended Euclidean algorithm.

    Parameters
    ----------
    a, b : int or ZZ
        Operands.

    Returns
    -------
    Tuple[ZZ, ZZ, ZZ]
        ``(d, s, t)`` with ``d = gcd(a, b) >= 0`` and ``d == a*s + b*t``.

    Examples
    --------
    >>> d, s, t = gcdx(240, 46)
    >>> d, 240 * s + 46 * t
    (ZZ(2), ZZ(2))
    """
    old_r, r = to_int(a), to_int(b)
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    if old_r < 0:
        old_r, old_s, old_t = -old_r, -old_s, -old_t
    return ZZ(old_r), ZZ(old_s), ZZ(old_t)


def lcm(a: IntLike, b: IntLike) -> ZZ:
    """Non-negative least common multiple (0 if either operand is 0)."""
    x, y = to_int(a), to_int(b)
    if x == 0 or y == 0:
        return ZZ(0)
    return ZZ(abs(x * y) // to_int(gcd(x, y)))


def num_bits(a: IntLike) -> int:
    return ZZ(a).num_bits()


def num_bytes(a: IntLike) -> int:
    return ZZ(a).num_bytes()


def bit(a: IntLike, i: int) -> int:
    """Bit ``i`` of ``|a|``."""
    return ZZ(a).bit(i)


def sign(a: IntLike) -> int:
    return ZZ(a).sign()


class IntegerRing(Ring):
    """The ring of integers."""

    is_field = False

    def __call__(self, value: Any) -> ZZ:
        if not isinstance(value, ZZ) and hasattr(value, "ring"):
            raise ModulusMismatch(value.ring, self)
        return ZZ(value)

    @property
    def characteristic(self) -> int:
        return 0

    def _key(self) -> Hashable:
        return "ZZ"

    def exact_quotient(self, a: ZZ, b: ZZ):
        """Return ``a / b`` if ``b`` divides ``a`` exactly, else None."""
        if b.is_zero():
            raise DivisionByZero(f"Division of {a} by zero in ZZ")
        q, r = divmod(a.value, b.value)
        return ZZ(q) if r == 0 else None

    def __repr__(self) -> str:
        return "ZZ"


ZZ_RING = IntegerRing()
