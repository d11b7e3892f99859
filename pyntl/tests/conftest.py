"""Shared fixtures.

The modulus slots and the active configuration are process-wide, so every
test runs against a snapshot that is restored afterwards.
"""

import numpy as np
import pytest

from pyntl.configs import reset_config
from pyntl.core.context import PRIME_CONTEXT, SMALL_CONTEXT
from pyntl.fields.extension import EXTENSION_CONTEXT
from pyntl.integers.number_theory import set_seed


@pytest.fixture(autouse=True)
def isolated_contexts():
    """Save all three modulus slots and the config; restore after the test."""
    snapshots = [ctx.snapshot() for ctx in (PRIME_CONTEXT, SMALL_CONTEXT, EXTENSION_CONTEXT)]
    reset_config()
    set_seed(1234)
    yield
    for snap in snapshots:
        snap.restore()
    reset_config()


@pytest.fixture
def rng() -> np.random.Generator:
    """Deterministic generator for randomised tests."""
    return np.random.default_rng(42)


@pytest.fixture
def mod17():
    """ZZ_p modulus 17 for the duration of a test."""
    PRIME_CONTEXT.init(17)
    return 17
