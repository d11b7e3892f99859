"""Core package initialization."""

from pyntl.core.constants import (
    FFT_PRIMES,
    SMALL_MODULUS_BOUND,
    UNINITIALIZED_MODULUS,
)
from pyntl.core.context import (
    PRIME_CONTEXT,
    SMALL_CONTEXT,
    ContextSnapshot,
    ModulusContext,
    current_modulus,
    current_small_modulus,
    init_fft_modulus,
    init_modulus,
    init_small_modulus,
    save_modulus,
    save_small_modulus,
    using_modulus,
    using_small_modulus,
    with_modulus,
    with_small_modulus,
)
from pyntl.core.exceptions import (
    DimensionMismatch,
    DivisionByZero,
    InvalidModulus,
    InvariantViolation,
    InvModError,
    ModulusMismatch,
    NTLError,
)
from pyntl.core.rings import Field, Ring

__all__ = [
    # Constants
    "FFT_PRIMES",
    "SMALL_MODULUS_BOUND",
    "UNINITIALIZED_MODULUS",
    # Context
    "PRIME_CONTEXT",
    "SMALL_CONTEXT",
    "ContextSnapshot",
    "ModulusContext",
    "current_modulus",
    "current_small_modulus",
    "init_fft_modulus",
    "init_modulus",
    "init_small_modulus",
    "save_modulus",
    "save_small_modulus",
    "using_modulus",
    "using_small_modulus",
    "with_modulus",
    "with_small_modulus",
    # Errors
    "DimensionMismatch",
    "DivisionByZero",
    "InvalidModulus",
    "InvariantViolation",
    "InvModError",
    "ModulusMismatch",
    "NTLError",
    # Rings
    "Field",
    "Ring",
]
