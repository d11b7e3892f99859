"""Unit tests for extension fields GF(p^k) and polynomials over them."""

from unittest import mock

import pytest

from pyntl.configs import use_profile
from pyntl.core.context import init_modulus
from pyntl.core.exceptions import (
    InvalidModulus,
    InvariantViolation,
    InvModError,
    ModulusMismatch,
)
from pyntl.fields import extension
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
from pyntl.fields.prime import ZZ_p
from pyntl.polynomials import ZZ_pX
from pyntl.polynomials.extension import ZZ_pEX


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def gf4() -> ExtensionField:
    """GF(4) = GF(2)[x] / (x^2 + x + 1), installed as the current extension."""
    init_modulus(2)
    init_extension(ZZ_pX([1, 1, 1]))
    return ExtensionField.current()


@pytest.fixture
def gf289() -> ExtensionField:
    """GF(17^2) = ZZ_17[x] / (x^2 - 3), installed as the current extension."""
    init_modulus(17)
    init_extension(ZZ_pX([14, 0, 1]))
    return ExtensionField.current()


@pytest.fixture
def no_extension(monkeypatch):
    """Clear the extension slot for one test."""
    monkeypatch.setattr(EXTENSION_CONTEXT, "_value", None)


# =============================================================================
# ExtensionField
# =============================================================================


class TestExtensionField:
    """Test the field object."""

    def test_properties(self, gf4):
        """Test degree, characteristic and order."""
        assert gf4.degree == 2
        assert gf4.characteristic == 2
        assert gf4.order == 4
        assert str(gf4) == "GF(2^2)"
        assert str(gf4.modulus) == "[1 1 1]"

    def test_modulus_is_copied(self, gf4):
        """Test that callers cannot mutate the defining polynomial."""
        P = gf4.modulus
        P.set_coeff(0, 0)
        assert str(gf4.modulus) == "[1 1 1]"

    def test_equality(self):
        """Test equality by characteristic and modulus."""
        a = ExtensionField(ZZ_pX([1, 1, 1], modulus=2))
        b = ExtensionField(ZZ_pX([1, 1, 1], modulus=2))
        c = ExtensionField(ZZ_pX([1, 1, 0, 1], modulus=2))
        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_invalid_moduli(self):
        """Test that constants and non-polynomials are rejected."""
        with pytest.raises(InvalidModulus):
            ExtensionField(ZZ_pX([1], modulus=2))
        with pytest.raises(InvalidModulus):
            ExtensionField([1, 1, 1])

    def test_elements(self, gf4):
        """Test enumeration of GF(4)."""
        elements = [str(e) for e in gf4.elements()]
        assert elements == ["[0]", "[0 1]", "[1]", "[1 1]"]

    def test_random(self, gf289, rng):
        """Test random elements lie in the field."""
        e = gf289.random(rng)
        assert e.ring == gf289
        assert e.rep.degree < 2


# =============================================================================
# ZZ_pE elements
# =============================================================================


class TestGF4:
    """Test arithmetic in GF(4)."""

    def test_square_of_generator(self, gf4):
        """Test x * x = x + 1."""
        a = ZZ_pE([0, 1])
        assert str(a * a) == "[1 1]"

    def test_inverse(self, gf4):
        """Test inv(x) = x + 1."""
        a = ZZ_pE([0, 1])
        assert str(a.inverse()) == "[1 1]"
        assert a * a.inverse() == 1
        assert a / a == 1

    def test_multiplicative_group_order(self, gf4):
        """Test that every nonzero element satisfies e^3 = 1."""
        for e in gf4.elements():
            if not e.is_zero():
                assert (e**3).is_one()

    def test_characteristic_two(self, gf4):
        """Test e + e = 0."""
        a = ZZ_pE([1, 1])
        assert (a + a).is_zero()
        assert -a == a

    def test_zero_inverse(self, gf4):
        """Test InvModError for zero."""
        with pytest.raises(InvModError):
            ZZ_pE(0).inverse()


class TestGF289:
    """Test arithmetic in GF(17^2)."""

    def test_inverse_and_group_order(self, gf289):
        """Test inversion and Lagrange's theorem."""
        a = ZZ_pE([1, 1])
        assert a * a.inverse() == 1
        assert a ** (17**2 - 1) == 1
        assert a**-1 == a.inverse()

    def test_frobenius(self, gf289):
        """Test (1 + x)^17 = 1 - x because x^17 = -x."""
        assert str(ZZ_pE([1, 1]) ** 17) == "[1 16]"

    def test_scalar_operands(self, gf289):
        """Test mixing with ints and base-field elements."""
        a = ZZ_pE([1, 1])
        assert str(a + 1) == "[2 1]"
        assert str(2 * a) == "[2 2]"
        assert str(a - ZZ_p(1)) == "[0 1]"
        assert str(1 - a) == "[0 16]"
        assert ZZ_pE(5) == 5

    def test_reduction(self, gf289):
        """Test that representatives are reduced modulo P."""
        assert str(ZZ_pE([0, 0, 1])) == "[3]"
        assert str(ZZ_pE(ZZ_pX([1, 0, 1]))) == "[4]"

    def test_repr(self, gf289):
        """Test repr format."""
        assert repr(ZZ_pE([0, 1])) == "ZZ_pE([0 1], modulus=[14 0 1])"

    def test_hash(self, gf289):
        """Test hashing by representative."""
        assert hash(ZZ_pE([1, 2])) == hash(ZZ_pE([1, 2, 17]))

    def test_scalar_equality_matches_hash(self, gf289):
        """Test that constants equal and hash like their base representative."""
        one = ZZ_pE(1)
        assert one == 1
        assert hash(one) == hash(1)
        assert one in {1}
        assert {ZZ_p(1): "found"}[one] == "found"
        assert ZZ_pE(16) != -1
        assert ZZ_pE([1, 1]) == ZZ_pX([1, 1])
        assert hash(ZZ_pE([1, 1])) == hash(ZZ_pX([1, 1]))


class TestExtensionMismatch:
    """Test combining elements of different fields."""

    def test_different_moduli(self, gf4):
        """Test ModulusMismatch between GF(4) and GF(8)."""
        a = ZZ_pE([0, 1])
        b = ZZ_pE([0, 1], modulus=ZZ_pX([1, 1, 0, 1], modulus=2))
        with pytest.raises(ModulusMismatch):
            a + b
        assert a != b

    def test_elements_keep_their_field(self, gf4):
        """Test that switching the context does not affect old elements."""
        a = ZZ_pE([0, 1])
        init_extension(ZZ_pX([1, 1, 0, 1]))
        assert str(a * a) == "[1 1]"
        assert ZZ_pE([0, 1]).ring.degree == 3


# =============================================================================
# Extension context
# =============================================================================


class TestExtensionContext:
    """Test the extension modulus slot."""

    def test_uninitialized(self, no_extension):
        """Test default construction without a field."""
        assert current_extension() is None
        with pytest.raises(InvalidModulus):
            ZZ_pE([1])
        with pytest.raises(InvalidModulus):
            ZZ_pEX([1])

    def test_current_extension_is_a_copy(self, gf4):
        """Test that the returned modulus is independent."""
        P = current_extension()
        assert str(P) == "[1 1 1]"
        P.set_coeff(1, 0)
        assert str(current_extension()) == "[1 1 1]"

    def test_save_restore(self, gf4):
        """Test snapshot round trip."""
        saved = save_extension()
        init_extension(ZZ_pX([1, 1, 0, 1]))
        saved.restore()
        assert ExtensionField.current() == gf4

    def test_with_extension(self, gf4):
        """Test scoped switching, including after an error."""
        gf8 = ZZ_pX([1, 1, 0, 1])
        assert with_extension(gf8, lambda: ExtensionField.current().degree) == 3
        with pytest.raises(ZeroDivisionError):
            with_extension(gf8, lambda: 1 / 0)
        assert ExtensionField.current() == gf4
        with using_extension(gf8) as field:
            assert field.order == 8
        assert ExtensionField.current() == gf4

    def test_reducible_modulus_warns(self):
        """Test that a reducible modulus logs a warning but is accepted."""
        init_modulus(2)
        with mock.patch.object(extension.logger, "warning") as warning:
            init_extension(ZZ_pX([1, 0, 1]))
        warning.assert_called_once()
        assert "not irreducible" in warning.call_args[0][0]
        assert str(current_extension()) == "[1 0 1]"

    def test_reducible_modulus_inverse_fails(self):
        """Test InvariantViolation when gcd(rep, P) is not constant."""
        init_modulus(2)
        with mock.patch.object(extension.logger, "warning"):
            init_extension(ZZ_pX([1, 0, 1]))
        with pytest.raises(InvariantViolation):
            ZZ_pE([1, 1]).inverse()
        assert str(ZZ_pE([0, 1]).inverse()) == "[0 1]"

    def test_check_disabled_by_profile(self):
        """Test that the fast profile skips the irreducibility check."""
        use_profile("fast")
        init_modulus(2)
        with mock.patch.object(extension.logger, "warning") as warning:
            init_extension(ZZ_pX([1, 0, 1]))
        warning.assert_not_called()


# =============================================================================
# ZZ_pEX
# =============================================================================


class TestZZpEX:
    """Test polynomials over GF(4)."""

    def test_coefficients_from_lists(self, gf4):
        """Test that nested lists become extension elements."""
        f = ZZ_pEX([[0, 1], [1]])
        assert str(f) == "[[0 1] [1]]"
        assert f.degree == 1
        assert str(ZZ_pEX()) == "[0]"

    def test_division_over_gf4(self, gf4):
        """Test y^2 + y + 1 = (y + x)(y + x + 1) over GF(4)."""
        a = ZZ_pE([0, 1])
        g = ZZ_pEX([1, 1, 1])
        f = ZZ_pEX([a, 1])
        q, r = g.divrem(f)
        assert r.is_zero()
        assert str(q) == "[[1 1] [1]]"

    def test_roots_and_irreducibility(self, gf4):
        """Test root finding and irreducibility over GF(4)."""
        a = ZZ_pE([0, 1])
        g = ZZ_pEX([1, 1, 1])
        assert [str(r) for r in g.roots()] == ["[0 1]", "[1 1]"]
        assert not g.is_irreducible()
        assert ZZ_pEX([a, 1, 1]).is_irreducible()

    def test_gcd_is_monic(self, gf4):
        """Test that the gcd is made monic."""
        a = ZZ_pE([0, 1])
        f = ZZ_pEX([a, 1])
        g = ZZ_pEX([1, 1, 1])
        assert g.gcd(f * a) == f

    def test_random(self, gf4, rng):
        """Test random polynomial degree bound."""
        assert ZZ_pEX.random(3, rng=rng).degree < 3

    def test_field_mismatch(self, gf4):
        """Test ModulusMismatch across extension fields."""
        other = ExtensionField(ZZ_pX([1, 1, 0, 1], modulus=2))
        with pytest.raises(ModulusMismatch):
            ZZ_pEX([1, 1]) + ZZ_pEX([1, 1], modulus=other)
