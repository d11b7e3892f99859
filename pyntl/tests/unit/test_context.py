"""Unit tests for modulus contexts, configuration profiles and logging.

These tests exercise the global modulus slots (save/restore, scoped
switching, nesting and exception safety), the YAML configuration layer and
the logger factory.
"""

import logging

import pytest

from pyntl.configs import (
    _deep_merge,
    active_config,
    get_setting,
    list_profiles,
    load_base_config,
    load_profile,
    reset_config,
    use_profile,
)
from pyntl.core.constants import FFT_PRIMES, UNINITIALIZED_MODULUS
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
    require_initialized,
    save_modulus,
    save_small_modulus,
    using_modulus,
    using_small_modulus,
    validate_modulus,
    with_modulus,
    with_small_modulus,
)
from pyntl.core.exceptions import InvalidModulus, InvariantViolation, ModulusMismatch
from pyntl.fields.small_p import zz_p
from pyntl.fields.prime import ZZ_p
from pyntl.utils.logging import get_logger, set_log_level


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def fresh_context() -> ModulusContext:
    """A private slot that has never been initialised."""
    return ModulusContext("test", validate_modulus)


@pytest.fixture
def uninitialized_prime(monkeypatch):
    """Clear the ZZ_p slot for one test."""
    monkeypatch.setattr(PRIME_CONTEXT, "_value", UNINITIALIZED_MODULUS)


# =============================================================================
# ZZ_p slot
# =============================================================================


class TestInitModulus:
    """Test setting and reading the ZZ_p modulus."""

    def test_init_and_read(self):
        """Test that init_modulus sets current_modulus."""
        init_modulus(17)
        assert current_modulus() == 17

    @pytest.mark.parametrize("bad", [1, 0, -5])
    def test_rejects_small_moduli(self, bad):
        """Test that moduli <= 1 are rejected and the slot is untouched."""
        init_modulus(17)
        with pytest.raises(InvalidModulus):
            init_modulus(bad)
        assert current_modulus() == 17

    def test_rejects_non_integers(self):
        """Test that a non-integral modulus is rejected."""
        with pytest.raises(InvalidModulus):
            init_modulus("17")

    def test_invalid_modulus_is_value_error(self):
        """Test the built-in base class of InvalidModulus."""
        with pytest.raises(ValueError):
            init_modulus(1)

    def test_uninitialized_construction_fails(self, uninitialized_prime):
        """Test that ZZ_p needs a modulus."""
        assert current_modulus() == 0
        with pytest.raises(InvalidModulus, match="not initialised"):
            ZZ_p(3)

    def test_explicit_modulus_without_context(self, uninitialized_prime):
        """Test that an explicit modulus bypasses the slot."""
        assert ZZ_p(20, modulus=7) == 6


class TestSnapshots:
    """Test save/restore of a slot."""

    def test_save_restore(self):
        """Test the basic round trip."""
        init_modulus(17)
        saved = save_modulus()
        init_modulus(19)
        assert current_modulus() == 19
        saved.restore()
        assert current_modulus() == 17

    def test_restore_uninitialized_value(self, fresh_context):
        """Test that restoring writes the uninitialised value verbatim."""
        snap = fresh_context.snapshot()
        fresh_context.init(7)
        snap.restore()
        assert fresh_context.current() == 0
        assert not fresh_context.is_initialized()

    def test_restore_without_save(self, fresh_context):
        """Test that restoring an empty snapshot fails."""
        with pytest.raises(InvariantViolation):
            ContextSnapshot(fresh_context).restore()

    def test_snapshot_value(self):
        """Test that the snapshot exposes the captured value."""
        init_modulus(101)
        assert save_modulus().value == 101


class TestWithModulus:
    """Test scoped modulus switching."""

    def test_body_sees_temporary_modulus(self):
        """Test that the body runs under the new modulus."""
        init_modulus(17)
        assert with_modulus(19, current_modulus) == 19
        assert current_modulus() == 17

    def test_arguments_are_forwarded(self):
        """Test args and kwargs forwarding."""

        def body(a, b=0):
            return (ZZ_p(a) * b).rep

        assert with_modulus(7, body, 3, b=5) == 1

    def test_restores_after_exception(self):
        """Test that a failing body still restores and re-raises."""
        init_modulus(17)

        def body():
            assert current_modulus() == 19
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            with_modulus(19, body)
        assert current_modulus() == 17

    def test_nesting(self):
        """Test that nested scopes unwind in order."""
        init_modulus(17)
        inner = with_modulus(5, lambda: (current_modulus(), with_modulus(7, current_modulus)))
        assert inner == (5, 7)
        assert current_modulus() == 17

    def test_context_manager(self):
        """Test using_modulus as a with-statement."""
        init_modulus(17)
        with using_modulus(23) as p:
            assert p == 23
            assert ZZ_p(30) == 7
        assert current_modulus() == 17

    def test_invalid_modulus_leaves_slot(self):
        """Test that a rejected scoped modulus restores the old one."""
        init_modulus(17)
        with pytest.raises(InvalidModulus):
            with_modulus(1, current_modulus)
        assert current_modulus() == 17


class TestElementsCaptureModulus:
    """Test that elements keep their ring after the context changes."""

    def test_arithmetic_uses_captured_modulus(self):
        """Test that a ZZ_p built under 17 stays mod 17."""
        init_modulus(17)
        a = ZZ_p(5)
        init_modulus(19)
        assert (a * 10).rep == 16
        assert a.modulus == 17

    def test_mixing_moduli_raises(self):
        """Test ModulusMismatch between different moduli."""
        a = ZZ_p(5, modulus=17)
        b = ZZ_p(5, modulus=19)
        with pytest.raises(ModulusMismatch):
            a + b
        assert a != b


# =============================================================================
# zz_p slot
# =============================================================================


class TestSmallModulus:
    """Test the machine-word modulus slot."""

    def test_independent_of_prime_slot(self):
        """Test that the two slots do not interfere."""
        init_modulus(17)
        init_small_modulus(13)
        assert current_modulus() == 17
        assert current_small_modulus() == 13
        assert zz_p(20) == 7

    def test_upper_bound(self):
        """Test the 2^62 bound."""
        init_small_modulus(2**62 - 1)
        with pytest.raises(InvalidModulus):
            init_small_modulus(2**62)

    def test_fft_primes(self):
        """Test selection by table index."""
        init_fft_modulus(0)
        assert current_small_modulus() == FFT_PRIMES[0]
        init_fft_modulus(len(FFT_PRIMES) - 1)
        assert current_small_modulus() == FFT_PRIMES[-1]
        with pytest.raises(InvalidModulus):
            init_fft_modulus(len(FFT_PRIMES))
        with pytest.raises(InvalidModulus):
            init_fft_modulus(-1)

    def test_scoped_switching(self):
        """Test save/with/using on the small slot."""
        init_small_modulus(13)
        saved = save_small_modulus()
        assert with_small_modulus(7, current_small_modulus) == 7
        with using_small_modulus(11):
            assert current_small_modulus() == 11
        init_small_modulus(3)
        saved.restore()
        assert current_small_modulus() == 13


class TestRequireInitialized:
    """Test the helper used by default constructors."""

    def test_explicit_wins(self, fresh_context):
        """Test that an explicit value is returned untouched."""
        assert require_initialized(fresh_context, 11) == 11

    def test_uninitialized(self, fresh_context):
        """Test the error for an empty slot."""
        with pytest.raises(InvalidModulus, match="test modulus"):
            require_initialized(fresh_context)

    def test_initialized(self, fresh_context):
        """Test that the slot value is returned."""
        fresh_context.init(5)
        assert require_initialized(fresh_context) == 5

    def test_small_slot_is_shared_object(self):
        """Test that the module-level slot is what the helpers use."""
        init_small_modulus(29)
        assert require_initialized(SMALL_CONTEXT) == 29


# =============================================================================
# Configuration
# =============================================================================


class TestConfiguration:
    """Test YAML configuration loading and profiles."""

    def test_base_values(self):
        """Test values from base.yaml."""
        config = load_base_config()
        assert config["primality"]["num_trials"] == 10
        assert config["enumeration"]["max_elements"] == 1000000
        assert active_config() == config

    def test_list_profiles(self):
        """Test that every shipped profile is listed."""
        assert list_profiles() == ["debug", "fast", "thorough"]

    def test_profile_is_merged_over_base(self):
        """Test deep merging of a profile."""
        config = load_profile("thorough")
        assert config["primality"]["num_trials"] == 40
        assert config["primality"]["small_primes_bound"] == 10000
        assert config["irreducibility"]["root_scan_limit"] == 1000

    def test_use_profile_and_reset(self):
        """Test switching the active configuration."""
        use_profile("fast")
        assert get_setting("primality", "num_trials") == 4
        assert get_setting("irreducibility", "check_extension_modulus") is False
        reset_config()
        assert get_setting("primality", "num_trials") == 10

    def test_overrides(self):
        """Test overrides merged over a profile."""
        use_profile("thorough", overrides={"primality": {"num_trials": 3}})
        assert get_setting("primality", "num_trials") == 3
        assert get_setting("primality", "small_primes_bound") == 10000

    def test_missing_profile(self):
        """Test that an unknown profile raises."""
        with pytest.raises(FileNotFoundError):
            load_profile("does-not-exist")

    def test_get_setting_default(self):
        """Test the default for missing keys and sections."""
        assert get_setting("primality", "missing", 5) == 5
        assert get_setting("missing", "key") is None

    def test_deep_merge_does_not_mutate(self):
        """Test that merging leaves its inputs alone."""
        base = {"a": {"x": 1, "y": 2}, "b": 1}
        merged = _deep_merge(base, {"a": {"y": 3}})
        assert merged == {"a": {"x": 1, "y": 3}, "b": 1}
        assert base["a"]["y"] == 2


# =============================================================================
# Logging
# =============================================================================


class TestLogging:
    """Test the logger factory."""

    def test_logger_names(self):
        """Test the pyntl prefix."""
        assert get_logger("custom").name == "pyntl.custom"
        assert get_logger("pyntl.core.context").name == "pyntl.core.context"

    def test_logger_is_cached(self):
        """Test that repeated calls return the same configured logger."""
        first = get_logger("cached")
        second = get_logger("cached")
        assert first is second
        assert len(first.handlers) == 1
        assert first.propagate is False

    def test_default_level_from_config(self):
        """Test that the configured level is applied."""
        assert get_logger("level_check").level == logging.WARNING

    def test_set_log_level(self):
        """Test changing the level of every logger."""
        logger = get_logger("switchable")
        try:
            set_log_level("DEBUG")
            assert logger.level == logging.DEBUG
        finally:
            set_log_level("WARNING")
        assert logger.level == logging.WARNING
