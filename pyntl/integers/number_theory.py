"""Number-theoretic functions on big integers.

Modular exponentiation, Miller-Rabin primality, uniform random integers,
random primes, Chinese remaindering and an incremental prime enumerator.

Notes
-----
Randomness comes from a module-level ``numpy.random.Generator``. Call
:func:`set_seed` for reproducible runs. Integers wider than 64 bits are
drawn from ``Generator.bytes`` with rejection sampling so the result is
uniform for any bound.

Trial counts and limits default to the active configuration
(``primality.*``, ``prime_seq.limit``).
"""

import functools
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from pyntl.configs import get_setting
from pyntl.core.constants import (
    DEFAULT_NUM_TRIALS,
    DEFAULT_PRIME_SEQ_LIMIT,
    DEFAULT_SMALL_PRIMES_BOUND,
)
from pyntl.core.exceptions import DimensionMismatch, InvalidModulus, InvModError
from pyntl.integers.zz import ZZ, IntLike, gcdx, to_int
from pyntl.utils.logging import get_logger

logger = get_logger(__name__)

_RNG = np.random.default_rng()


def set_seed(seed: Optional[int] = None) -> None:
    """Reseed the generator used by every random function in the package.

    Parameters
    ----------
    seed : int, optional
        Seed value. None draws fresh OS entropy.
    """
    global _RNG
    _RNG = np.random.default_rng(seed)


def get_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return ``rng`` if given, else the package generator."""
    return _RNG if rng is None else rng


def _random_below(bound: int, rng: np.random.Generator) -> int:
    """Uniform integer in ``[0, bound)`` for any positive ``bound``."""
    if bound < 2**63:
        return int(rng.integers(0, bound))
    k = (bound - 1).bit_length()
    nbytes = (k + 7) // 8
    mask = (1 << k) - 1
    while True:
        x = int.from_bytes(rng.bytes(nbytes), "little") & mask
        if x < bound:
            return x


# =============================================================================
# Modular exponentiation
# =============================================================================


def power_mod(a: IntLike, e: IntLike, n: IntLike) -> ZZ:
    """Compute ``a^e mod n``.

    Parameters
    ----------
    a : int or ZZ
        Base.
    e : int or ZZ
        Exponent. Negative exponents use the inverse of ``a`` mod ``n``.
    n : int or ZZ
        Modulus, must be > 1.

    Returns
    -------
    ZZ
        Result in ``[0, n)``.

    Raises
    ------
    InvalidModulus
        If ``n <= 1``.
    InvModError
        If ``e < 0`` and ``a`` is not invertible mod ``n``.

    Examples
    --------
    >>> power_mod(2, 10, 1000)
    ZZ(24)
    >>> power_mod(3, -1, 7)
    ZZ(5)
    """
    base, exp, mod = to_int(a), to_int(e), to_int(n)
    if mod <= 1:
        raise InvalidModulus(f"Modulus must be > 1, got {mod}")
    if exp < 0:
        return power_mod(inv_mod(base, mod), -exp, mod)
    return ZZ(pow(base, exp, mod))


def inv_mod(a: IntLike, n: IntLike) -> ZZ:
    """Inverse of ``a`` modulo ``n``.

    Raises
    ------
    InvalidModulus
        If ``n <= 1``.
    InvModError
        If ``gcd(a, n) != 1``.
    """
    x, mod = to_int(a), to_int(n)
    if mod <= 1:
        raise InvalidModulus(f"Modulus must be > 1, got {mod}")
    d, s, _ = gcdx(x % mod, mod)
    if d != 1:
        raise InvModError(ZZ(x % mod), ZZ(mod))
    return ZZ(to_int(s) % mod)


# =============================================================================
# Primality
# =============================================================================


@functools.lru_cache(maxsize=8)
def _small_primes(bound: int) -> Tuple[int, ...]:
    """Primes below ``bound`` by the sieve of Eratosthenes."""
    if bound < 3:
        return ()
    sieve = np.ones(bound, dtype=bool)
    sieve[:2] = False
    for i in range(2, int(bound**0.5) + 1):
        if sieve[i]:
            sieve[i * i :: i] = False
    return tuple(int(p) for p in np.nonzero(sieve)[0])


def _miller_rabin_witness(a: int, n: int, d: int, s: int) -> bool:
    """Return True if ``a`` proves ``n`` composite."""
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return False
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return False
    return True


def prob_prime(
    n: IntLike,
    num_trials: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> bool:
    """Probabilistic primality test.

    Parameters
    ----------
    n : int or ZZ
        Candidate.
    num_trials : int, optional
        Miller-Rabin rounds (default ``primality.num_trials``).
    rng : numpy.random.Generator, optional
        Source of random bases.

    Returns
    -------
    bool
        False if ``n`` is certainly composite (or <= 1); True if ``n`` passed
        trial division and every round. A composite passes with probability
        at most ``4**-num_trials``.

    Examples
    --------
    >>> prob_prime(1000000007)
    True
    >>> prob_prime(100)
    False
    """
    m = to_int(n)
    if m <= 1:
        return False
    if num_trials is None:
        num_trials = get_setting("primality", "num_trials", DEFAULT_NUM_TRIALS)
    bound = get_setting("primality", "small_primes_bound", DEFAULT_SMALL_PRIMES_BOUND)

    for p in _small_primes(bound):
        if m == p:
            return True
        if m % p == 0:
            return False
    if m < bound * bound:
        return True

    d, s = m - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    gen = get_rng(rng)
    for _ in range(num_trials):
        a = 2 + _random_below(m - 3, gen)
        if _miller_rabin_witness(a, m, d, s):
            return False
    return True


# =============================================================================
# Random integers
# =============================================================================


def random_bnd(n: IntLike, rng: Optional[np.random.Generator] = None) -> ZZ:
    """Uniform random integer in ``[0, n)``.

    Raises
    ------
    ValueError
        If ``n <= 0``.
    """
    bound = to_int(n)
    if bound <= 0:
        raise ValueError(f"Bound must be > 0, got {bound}")
    return ZZ(_random_below(bound, get_rng(rng)))


def random_bits(k: int, rng: Optional[np.random.Generator] = None) -> ZZ:
    """Uniform random integer in ``[0, 2^k)``.

    Raises
    ------
    ValueError
        If ``k < 0``.
    """
    if k < 0:
        raise ValueError(f"Number of bits must be >= 0, got {k}")
    if k == 0:
        return ZZ(0)
    return ZZ(_random_below(1 << k, get_rng(rng)))


def random_len(k: int, rng: Optional[np.random.Generator] = None) -> ZZ:
    """Random integer of exactly ``k`` bits (top bit set)."""
    if k <= 0:
        raise ValueError(f"Length must be > 0, got {k}")
    if k == 1:
        return ZZ(1)
    return ZZ((1 << (k - 1)) | to_int(random_bits(k - 1, rng)))


def random_prime(
    k: int,
    num_trials: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> ZZ:
    """Random probable prime of exactly ``k`` bits.

    Raises
    ------
    ValueError
        If ``k < 2``.
    """
    if k < 2:
        raise ValueError(f"No primes of {k} bits")
    gen = get_rng(rng)
    attempts = 0
    while True:
        attempts += 1
        candidate = random_len(k, gen)
        if k > 2:
            candidate = ZZ(to_int(candidate) | 1)
        if prob_prime(candidate, num_trials, gen):
            logger.debug(f"random_prime({k}) found {candidate} after {attempts} candidates")
            return candidate


# =============================================================================
# Chinese remaindering
# =============================================================================


def crt(residues: Sequence[IntLike], moduli: Sequence[IntLike]) -> ZZ:
    """Combine ``x = r_i mod m_i`` into ``x mod prod(m_i)``.

    Parameters
    ----------
    residues : Sequence[int or ZZ]
        Residues ``r_i``.
    moduli : Sequence[int or ZZ]
        Pairwise coprime moduli ``m_i > 1``.

    Returns
    -------
    ZZ
        The unique solution in ``[0, prod(m_i))``.

    Raises
    ------
    DimensionMismatch
        If the sequences have different lengths.
    InvModError
        If two moduli share a factor.

    Examples
    --------
    >>> crt([2, 3, 2], [3, 5, 7])
    ZZ(23)
    """
    if len(residues) != len(moduli):
        raise DimensionMismatch(
            f"crt: {len(residues)} residues but {len(moduli)} moduli"
        )
    x, m = 0, 1
    for r_i, m_i in zip(residues, moduli):
        r, n = to_int(r_i), to_int(m_i)
        if n <= 1:
            raise InvalidModulus(f"Modulus must be > 1, got {n}")
        # x + m*k = r (mod n)  =>  k = (r - x) * m^-1 (mod n)
        k = (r - x) * to_int(inv_mod(m, n)) % n
        x += m * k
        m *= n
    return ZZ(x % m)


# =============================================================================
# Prime enumeration
# =============================================================================


class PrimeSeq:
    """Enumerate primes in increasing order.

    Parameters
    ----------
    limit : int, optional
        Stop after this value (default ``prime_seq.limit``); :meth:`next`
        then returns 0.

    Examples
    --------
    >>> ps = PrimeSeq()
    >>> [ps.next() for _ in range(5)]
    [2, 3, 5, 7, 11]
    >>> ps.reset(100)
    >>> ps.next()
    101
    """

    def __init__(self, limit: Optional[int] = None):
        if limit is None:
            limit = get_setting("prime_seq", "limit", DEFAULT_PRIME_SEQ_LIMIT)
        self.limit = int(limit)
        self._current = 1

    def next(self) -> int:
        """Return the next prime, or 0 once the limit is passed."""
        candidate = self._current + 1
        while candidate < self.limit and not prob_prime(candidate):
            candidate += 1
        if candidate >= self.limit:
            self._current = self.limit
            return 0
        self._current = candidate
        return candidate

    def reset(self, start: int = 1) -> None:
        """Restart so that the next prime returned is the first one >= ``start``."""
        self._current = max(1, int(start) - 1)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        p = self.next()
        if p == 0:
            raise StopIteration
        return p
