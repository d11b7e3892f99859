"""Ring capability interface.

Polynomials, vectors and matrices are written once against :class:`Ring`
and work for every coefficient type the package provides: integers,
prime fields (big and machine-word moduli), GF(2) and GF(p^k).

Notes
-----
A ring is a small value object. Two rings are equal when they describe the
same mathematical ring (same kind, same modulus), which is what decides
whether elements and polynomials may be combined.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterator, Optional

from pyntl.configs import get_setting
from pyntl.core.constants import DEFAULT_MAX_ELEMENTS
from pyntl.core.exceptions import DivisionByZero


class Ring(ABC):
    """Abstract commutative ring with identity.

    Subclasses provide element coercion, the characteristic and, for
    finite rings, the order and an element enumeration.
    """

    #: True when every nonzero element is invertible.
    is_field: bool = False

    @abstractmethod
    def __call__(self, value: Any) -> Any:
        """Coerce ``value`` into an element of this ring."""

    @property
    @abstractmethod
    def characteristic(self) -> int:
        """Additive order of one (0 for the integers)."""

    @abstractmethod
    def _key(self) -> Hashable:
        """Value identifying the ring, used for equality and hashing."""

    @property
    def order(self) -> Optional[int]:
        """Number of elements, or None if infinite."""
        return None

    def zero(self) -> Any:
        """Additive identity."""
        return self(0)

    def one(self) -> Any:
        """Multiplicative identity."""
        return self(1)

    def contains(self, value: Any) -> bool:
        """Return True if ``value`` is already an element of this ring."""
        return getattr(value, "ring", None) == self

    def elements(self) -> Iterator[Any]:
        """Iterate over all elements of a finite ring.

        Raises
        ------
        ValueError
            If the ring is infinite or larger than ``enumeration.max_elements``.
        """
        size = self.order
        if size is None:
            raise ValueError(f"Cannot enumerate the infinite ring {self}")
        limit = get_setting("enumeration", "max_elements", DEFAULT_MAX_ELEMENTS)
        if size > limit:
            raise ValueError(f"{self} has {size} elements, above the limit {limit}")
        return self._iter_elements()

    def _iter_elements(self) -> Iterator[Any]:
        raise NotImplementedError

    def random(self, rng: Any = None) -> Any:
        """Return a uniformly random element (finite rings only)."""
        raise NotImplementedError(f"{self} does not support random elements")

    def exact_quotient(self, a: Any, b: Any) -> Optional[Any]:
        """Return ``q`` with ``q * b == a``, or None if no such ``q`` exists.

        Over a field this is ``a / b``.

        Raises
        ------
        DivisionByZero
            If ``b`` is zero.
        """
        if b.is_zero():
            raise DivisionByZero(f"Division by zero in {self}")
        return a * b.inverse()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ring):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))


class Field(Ring):
    """A ring in which every nonzero element has an inverse."""

    is_field = True
