"""Integration tests for end-to-end number-theory workflows.

Each test strings several subsystems together the way client code does:
switching moduli around computations, moving data between integer and
modular representations, building extension fields from polynomials found
to be irreducible, and solving linear systems over GF(2).
"""

from typing import List

import pytest

from pyntl import (
    GF2,
    GF2X,
    MatGF2,
    Mat,
    PrimeSeq,
    ZZ,
    ZZ_pE,
    ZZ_pX,
    ZZX,
    crt,
    current_modulus,
    gcd,
    init_extension,
    init_modulus,
    inv_mod,
    matrix_rank,
    power_mod,
    prob_prime,
    random_prime,
    using_modulus,
    with_modulus,
)


# =============================================================================
# Helpers
# =============================================================================


def _reduce_poly(f: ZZX) -> ZZ_pX:
    """Map an integer polynomial into ZZ_p[x] for the current modulus."""
    return ZZ_pX([int(c) for c in f])


# =============================================================================
# Modular reconstruction
# =============================================================================


class TestMultiModularEvaluation:
    """Evaluate an integer polynomial modulo several primes and recombine."""

    def test_crt_recovers_integer_value(self):
        """Test that CRT of modular evaluations equals the integer evaluation."""
        f = ZZX([3, -5, 0, 7])
        point = 1000
        expected = f(point)
        assert expected == 7 * 10**9 - 5000 + 3

        primes: List[int] = []
        residues: List[ZZ] = []
        product = 1
        seq = PrimeSeq()
        seq.reset(1000)
        while product <= 2 * abs(int(expected)):
            p = seq.next()
            residues.append(with_modulus(p, lambda: _reduce_poly(f)(point).rep))
            primes.append(p)
            product *= p

        assert crt(residues, primes) == expected
        assert all(prob_prime(p) for p in primes)

    def test_context_restored_after_loop(self):
        """Test that scoped evaluations leave the outer modulus alone."""
        init_modulus(101)
        for p in (3, 5, 7):
            with using_modulus(p):
                assert current_modulus() == p
        assert current_modulus() == 101


class TestRsaRoundTrip:
    """Textbook RSA with CRT decryption built from the integer primitives."""

    def test_encrypt_decrypt(self, rng):
        """Test m^(e*d) = m (mod n) with CRT recombination."""
        p = random_prime(64, rng=rng)
        q = random_prime(64, rng=rng)
        while q == p:
            q = random_prime(64, rng=rng)
        n = p * q
        phi = (p - 1) * (q - 1)
        e = 65537
        while gcd(e, phi) != 1:
            e += 2
        d = inv_mod(e, phi)

        message = ZZ(123456789)
        cipher = power_mod(message, e, n)
        mp = power_mod(cipher, d % (p - 1), p)
        mq = power_mod(cipher, d % (q - 1), q)
        assert crt([mp, mq], [p, q]) == message
        assert power_mod(cipher, d, n) == message


# =============================================================================
# Finite fields
# =============================================================================


class TestAesField:
    """Build GF(2^8) from the AES polynomial."""

    AES = [1, 1, 0, 1, 1, 0, 0, 0, 1]

    def test_generator_order(self):
        """Test that x + 1 generates the multiplicative group of order 255."""
        assert GF2X(self.AES).is_irreducible()
        init_modulus(2)
        init_extension(ZZ_pX(self.AES))
        g = ZZ_pE([1, 1])
        assert (g**255).is_one()
        for d in (3, 5, 17):
            assert not (g ** (255 // d)).is_one()

    def test_known_inverse(self):
        """Test the AES S-box inverse of 0x53, which is 0xCA."""
        init_modulus(2)
        init_extension(ZZ_pX(self.AES))
        a = ZZ_pE([(0x53 >> i) & 1 for i in range(8)])
        inv_bits = sum(int(c) << i for i, c in enumerate(a.inverse().rep))
        assert inv_bits == 0xCA


class TestFactorDegrees:
    """Split a product of irreducibles by factor degree."""

    def test_distinct_degree_over_zz17(self, mod17):
        """Test DDF of (x - 1)(x - 2)(x^2 + 3) * cubic."""
        cubic = next(
            f for f in (ZZ_pX([c, 1, 0, 1]) for c in range(1, 17)) if f.is_irreducible()
        )
        linear = ZZ_pX([16, 1]) * ZZ_pX([15, 1])
        quadratic = ZZ_pX([3, 0, 1])
        assert quadratic.is_irreducible()

        parts = (linear * quadratic * cubic).distinct_degree_factorization()
        assert [d for _, d in parts] == [1, 2, 3]
        assert parts[0][0] == linear
        assert parts[1][0] == quadratic
        assert parts[2][0] == cubic

    @pytest.mark.parametrize("p,n_roots", [(17, 2), (19, 0), (13, 2)])
    def test_cyclotomic_splitting(self, p, n_roots):
        """Test that Phi_4 has roots mod p exactly when p = 1 (mod 4)."""
        with using_modulus(p):
            assert len(_reduce_poly(ZZX.cyclotomic(4)).roots()) == n_roots

    def test_phi8_splits_mod_17(self):
        """Test that Phi_8 splits completely mod 17."""
        with using_modulus(17):
            roots = _reduce_poly(ZZX.cyclotomic(8)).roots()
        assert sorted(int(r) for r in roots) == [2, 8, 9, 15]

    def test_min_poly_of_extension_element(self, mod17):
        """Test the minimal polynomial of 1 + sqrt(3) over ZZ_17."""
        P = ZZ_pX([14, 0, 1])
        m = ZZ_pX([1, 1]).min_poly_mod(P)
        assert str(m) == "[15 15 1]"
        init_extension(P)
        a = ZZ_pE([1, 1])
        assert a * a - a * 2 - 2 == 0


# =============================================================================
# Linear algebra over GF(2)
# =============================================================================


class TestGF2Systems:
    """Solve random linear systems over GF(2)."""

    def test_random_invertible_system(self, rng):
        """Test solve against a random invertible matrix."""
        n = 12
        a = MatGF2.random(n, n, rng)
        while matrix_rank(a) < n:
            a = MatGF2.random(n, n, rng)
        x = MatGF2.random(n, 1, rng).column(0)
        b = a * x
        assert a.solve(b) == x

    def test_generic_and_packed_ranks_agree(self, rng):
        """Test that the numpy and generic eliminations agree."""
        for _ in range(5):
            m = MatGF2.random(6, 9, rng)
            generic = Mat([[GF2(bit) for bit in row] for row in m.to_list()])
            assert generic.rank() == matrix_rank(m)
