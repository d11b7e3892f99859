"""Big integers and number-theoretic functions.

Modules
-------
zz
    The ``ZZ`` value type, floor division, gcd and extended gcd.
number_theory
    Modular exponentiation, primality, random integers, CRT, PrimeSeq.
"""

from pyntl.integers.number_theory import (
    PrimeSeq,
    crt,
    inv_mod,
    power_mod,
    prob_prime,
    random_bits,
    random_bnd,
    random_len,
    random_prime,
    set_seed,
)
from pyntl.integers.zz import (
    ZZ,
    ZZ_RING,
    IntegerRing,
    bit,
    div,
    divrem,
    gcd,
    gcdx,
    lcm,
    num_bits,
    num_bytes,
    rem,
    sign,
)

__all__ = [
    "ZZ",
    "ZZ_RING",
    "IntegerRing",
    "bit",
    "div",
    "divrem",
    "gcd",
    "gcdx",
    "lcm",
    "num_bits",
    "num_bytes",
    "rem",
    "sign",
    "PrimeSeq",
    "crt",
    "inv_mod",
    "power_mod",
    "prob_prime",
    "random_bits",
    "random_bnd",
    "random_len",
    "random_prime",
    "set_seed",
]
