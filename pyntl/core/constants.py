"""Engine constants.

Defaults here are used whenever the active configuration does not carry
the corresponding key (see ``pyntl/configs/base.yaml``).
"""

from typing import Tuple

# Context slots
UNINITIALIZED_MODULUS: int = 0  # prime layers before any init
SMALL_MODULUS_BOUND: int = 2**62  # zz_p moduli must stay below this

# NTT-friendly primes (p = c * 2^k + 1) selectable by index
FFT_PRIMES: Tuple[int, ...] = (
    7681,
    65537,
    786433,
    5767169,
    7340033,
    23068673,
    104857601,
    167772161,
    469762049,
    998244353,
)

# Number theory
DEFAULT_NUM_TRIALS: int = 10  # Miller-Rabin rounds
DEFAULT_SMALL_PRIMES_BOUND: int = 1000  # trial division bound
DEFAULT_PRIME_SEQ_LIMIT: int = 10**9  # PrimeSeq yields 0 past this

# Polynomials
DEFAULT_ROOT_SCAN_LIMIT: int = 1000  # max field order for the root-scan shortcut
DEFAULT_MAX_ELEMENTS: int = 10**6  # Ring.elements() guard
