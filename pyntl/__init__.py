"""pyntl: arbitrary-precision integers, finite fields, polynomials and GF(2) linear algebra.

Subpackages
-----------
core
    Ring interface, modulus contexts, constants and the error hierarchy.
integers
    ``ZZ`` and integer number theory (primality, modular powers, CRT).
fields
    ``ZZ_p``, ``zz_p``, ``GF2`` and the extension field ``ZZ_pE``.
polynomials
    ``ZZX``, ``ZZ_pX``, ``zz_pX``, ``GF2X`` and ``ZZ_pEX``.
linalg
    ``VecGF2`` / ``MatGF2`` with Gaussian elimination, and generic
    vectors and matrices over any ring.
configs
    YAML settings and profiles.

Examples
--------
>>> from pyntl import ZZ_p, using_modulus
>>> with using_modulus(17):
...     a = ZZ_p(5)
...     str(a * 10), str(a.inverse())
('16', '7')
"""

from pyntl.configs import active_config, get_setting, list_profiles, reset_config, use_profile
from pyntl.utils import get_logger, set_log_level

from pyntl.core import (
    FFT_PRIMES,
    PRIME_CONTEXT,
    SMALL_CONTEXT,
    SMALL_MODULUS_BOUND,
    UNINITIALIZED_MODULUS,
    ContextSnapshot,
    DimensionMismatch,
    DivisionByZero,
    Field,
    InvalidModulus,
    InvariantViolation,
    InvModError,
    ModulusContext,
    ModulusMismatch,
    NTLError,
    Ring,
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
from pyntl.integers import (
    ZZ,
    ZZ_RING,
    IntegerRing,
    PrimeSeq,
    bit,
    crt,
    div,
    divrem,
    gcd,
    gcdx,
    inv_mod,
    lcm,
    num_bits,
    num_bytes,
    power_mod,
    prob_prime,
    random_bits,
    random_bnd,
    random_len,
    random_prime,
    rem,
    set_seed,
    sign,
)
from pyntl.fields import (
    GF2,
    GF2_RING,
    BinaryField,
    PrimeField,
    SmallPrimeField,
    ZZ_p,
    inv,
    rep,
    zz_p,
)
from pyntl.polynomials import GF2X, ZZX, FieldPolynomial, Polynomial, ZZ_pX, zz_pX

# Extension modules depend on both fields and polynomials.
from pyntl.fields.extension import (
    EXTENSION_CONTEXT,
    ExtensionField,
    ZZ_pE,
    current_extension,
    init_extension,
    save_extension,
    using_extension,
    with_extension,
)
from pyntl.polynomials.extension import ZZ_pEX

from pyntl.linalg import (
    Mat,
    MatGF2,
    MatZZ,
    MatZZ_p,
    Vec,
    VecGF2,
    VecZZ,
    VecZZ_p,
    gauss,
    inner_product,
    matrix_rank,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration and logging
    "active_config",
    "get_setting",
    "list_profiles",
    "reset_config",
    "use_profile",
    "get_logger",
    "set_log_level",
    # Core
    "FFT_PRIMES",
    "PRIME_CONTEXT",
    "SMALL_CONTEXT",
    "EXTENSION_CONTEXT",
    "SMALL_MODULUS_BOUND",
    "UNINITIALIZED_MODULUS",
    "ContextSnapshot",
    "ModulusContext",
    "Field",
    "Ring",
    "current_modulus",
    "current_small_modulus",
    "current_extension",
    "init_fft_modulus",
    "init_modulus",
    "init_small_modulus",
    "init_extension",
    "save_modulus",
    "save_small_modulus",
    "save_extension",
    "using_modulus",
    "using_small_modulus",
    "using_extension",
    "with_modulus",
    "with_small_modulus",
    "with_extension",
    # Errors
    "DimensionMismatch",
    "DivisionByZero",
    "InvalidModulus",
    "InvariantViolation",
    "InvModError",
    "ModulusMismatch",
    "NTLError",
    # Integers
    "ZZ",
    "ZZ_RING",
    "IntegerRing",
    "PrimeSeq",
    "bit",
    "crt",
    "div",
    "divrem",
    "gcd",
    "gcdx",
    "inv_mod",
    "lcm",
    "num_bits",
    "num_bytes",
    "power_mod",
    "prob_prime",
    "random_bits",
    "random_bnd",
    "random_len",
    "random_prime",
    "rem",
    "set_seed",
    "sign",
    # Fields
    "GF2",
    "GF2_RING",
    "BinaryField",
    "ExtensionField",
    "PrimeField",
    "SmallPrimeField",
    "ZZ_p",
    "ZZ_pE",
    "inv",
    "rep",
    "zz_p",
    # Polynomials
    "FieldPolynomial",
    "GF2X",
    "Polynomial",
    "ZZX",
    "ZZ_pEX",
    "ZZ_pX",
    "zz_pX",
    # Linear algebra
    "Mat",
    "MatGF2",
    "MatZZ",
    "MatZZ_p",
    "Vec",
    "VecGF2",
    "VecZZ",
    "VecZZ_p",
    "gauss",
    "inner_product",
    "matrix_rank",
]
