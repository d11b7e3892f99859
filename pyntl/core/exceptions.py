"""Error kinds raised by the engine.

Every error derives from :class:`NTLError` and from the closest built-in
exception, so callers may catch either the package root or the familiar
Python type.

Notes
-----
Errors are raised at the point of violation and never retried or
suppressed internally. Scoped context helpers restore their slot in a
``finally`` block and let the error propagate.
"""

from typing import Any


class NTLError(Exception):
    """Base class for all pyntl errors."""


class InvalidModulus(NTLError, ValueError):
    """Modulus <= 1 passed to a context, or element built with no modulus set."""


class DivisionByZero(NTLError, ZeroDivisionError):
    """Integer or polynomial division by zero."""


class InvModError(NTLError, ArithmeticError):
    """Multiplicative inverse requested for a non-invertible element.

    Parameters
    ----------
    value : Any
        Element whose inverse was requested.
    modulus : Any
        Modulus (integer or polynomial) the inverse was taken against.

    Attributes
    ----------
    value : Any
        The non-invertible operand.
    modulus : Any
        The modulus it shares a factor with.
    """

    def __init__(self, value: Any, modulus: Any):
        self.value = value
        self.modulus = modulus
        super().__init__(
            f"InvModError: gcd(a, n) != 1 for a = {value}, n = {modulus}"
        )


class DimensionMismatch(NTLError, ValueError):
    """Vector or matrix operands of incompatible sizes."""


class InvariantViolation(NTLError, RuntimeError):
    """Internal consistency failure.

    Raised for instance when inverting in an extension field whose modulus
    turns out not to be irreducible.
    """


class ModulusMismatch(NTLError, ValueError):
    """Operands carry different moduli (or coefficient rings)."""

    def __init__(self, left: Any, right: Any):
        self.left = left
        self.right = right
        super().__init__(f"Cannot combine elements of {left} and {right}")
