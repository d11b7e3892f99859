"""Process-wide modulus context.

A :class:`ModulusContext` is a single mutable slot holding the "current"
modulus for one arithmetic layer. Elements read the slot when they are
constructed without an explicit modulus and keep that modulus for the rest
of their life, so the slot only decides *defaults*.

Notes
-----
There are three slots: the big prime modulus used by ``ZZ_p``, the
machine-word modulus used by ``zz_p`` (defined here) and the extension
modulus polynomial used by ``ZZ_pE`` (defined in
:mod:`pyntl.fields.extension`).

The slots are not synchronised. Code that runs in several threads should
pass explicit moduli to constructors instead of switching the slot.

Examples
--------
>>> init_modulus(17)
>>> with using_modulus(101):
...     current_modulus()
101
>>> current_modulus()
17
"""

import operator
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from pyntl.core.constants import (
    FFT_PRIMES,
    SMALL_MODULUS_BOUND,
    UNINITIALIZED_MODULUS,
)
from pyntl.core.exceptions import InvalidModulus, InvariantViolation
from pyntl.utils.logging import get_logger

logger = get_logger(__name__)


class ContextSnapshot:
    """Saved value of a :class:`ModulusContext` slot.

    Parameters
    ----------
    context : ModulusContext
        Slot to capture from and restore into.
    """

    def __init__(self, context: "ModulusContext"):
        self._context = context
        self._value: Any = None
        self._saved = False

    @property
    def value(self) -> Any:
        """Captured modulus (only meaningful after :meth:`save`)."""
        return self._value

    def save(self) -> "ContextSnapshot":
        """Capture the slot's current value.

        Returns
        -------
        ContextSnapshot
            ``self``, so ``ContextSnapshot(ctx).save()`` can be chained.
        """
        self._value = self._context._value
        self._saved = True
        return self

    def restore(self) -> None:
        """Write the captured value back into the slot.

        The value is written verbatim, including the uninitialised value,
        without running the slot's validator.

        Raises
        ------
        InvariantViolation
            If nothing was saved.
        """
        if not self._saved:
            raise InvariantViolation(
                f"Cannot restore {self._context.name} context: snapshot was never saved"
            )
        self._context._value = self._value
        logger.debug(f"{self._context.name} context restored to {self._value}")


class ModulusContext:
    """A single global modulus slot.

    Parameters
    ----------
    name : str
        Label used in log and error messages.
    validator : Callable[[Any], Any]
        Normalises a candidate modulus and raises ``InvalidModulus`` if it
        is unacceptable.
    uninitialized : Any, optional
        Value held before the first :meth:`init` (default 0).
    """

    def __init__(
        self,
        name: str,
        validator: Callable[[Any], Any],
        uninitialized: Any = UNINITIALIZED_MODULUS,
    ):
        self.name = name
        self._validate = validator
        self._uninitialized = uninitialized
        self._value: Any = uninitialized

    def init(self, modulus: Any) -> None:
        """Replace the slot's value after validation.

        Raises
        ------
        InvalidModulus
            If the validator rejects ``modulus``.
        """
        value = self._validate(modulus)
        self._value = value
        logger.debug(f"{self.name} context initialised to {value}")

    def current(self) -> Any:
        """Return the slot's value without side effects."""
        return self._value

    def is_initialized(self) -> bool:
        """Return True once the slot holds something other than its start value."""
        if self._uninitialized is None:
            return self._value is not None
        return self._value != self._uninitialized

    def snapshot(self) -> ContextSnapshot:
        """Return a snapshot that has already captured the current value."""
        return ContextSnapshot(self).save()

    @contextmanager
    def scoped(self, modulus: Any) -> Iterator[Any]:
        """Temporarily switch the slot, restoring it on every exit path.

        Parameters
        ----------
        modulus : Any
            Modulus active inside the block.

        Yields
        ------
        Any
            The validated modulus.
        """
        saved = self.snapshot()
        try:
            self.init(modulus)
            yield self._value
        finally:
            saved.restore()

    def run(self, modulus: Any, body: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Call ``body(*args, **kwargs)`` with the slot set to ``modulus``.

        Returns
        -------
        Any
            Whatever ``body`` returns.
        """
        with self.scoped(modulus):
            return body(*args, **kwargs)

    def __repr__(self) -> str:
        return f"ModulusContext({self.name!r}, current={self._value!r})"


def _as_int(modulus: Any) -> int:
    try:
        return operator.index(modulus)
    except TypeError:
        raise InvalidModulus(f"Modulus must be an integer, got {modulus!r}") from None


def validate_modulus(modulus: Any) -> int:
    """Check that ``modulus`` is an integer greater than 1.

    Returns
    -------
    int
        The modulus as a Python int.

    Raises
    ------
    InvalidModulus
        If ``modulus <= 1`` or not an integer.
    """
    p = _as_int(modulus)
    if p <= 1:
        raise InvalidModulus(f"Modulus must be > 1, got {p}")
    return p


def validate_small_modulus(modulus: Any) -> int:
    """Like :func:`validate_modulus` but also bounded by ``2**62``."""
    p = validate_modulus(modulus)
    if p >= SMALL_MODULUS_BOUND:
        raise InvalidModulus(f"Small modulus must be < 2^62, got {p}")
    return p


PRIME_CONTEXT = ModulusContext("ZZ_p", validate_modulus)
SMALL_CONTEXT = ModulusContext("zz_p", validate_small_modulus)


# =============================================================================
# ZZ_p slot
# =============================================================================


def init_modulus(p: Any) -> None:
    """Set the current modulus for ``ZZ_p``.

    Raises
    ------
    InvalidModulus
        If ``p <= 1``.
    """
    PRIME_CONTEXT.init(p)


def current_modulus() -> int:
    """Return the current ``ZZ_p`` modulus (0 when uninitialised)."""
    return PRIME_CONTEXT.current()


def save_modulus() -> ContextSnapshot:
    """Capture the current ``ZZ_p`` modulus."""
    return PRIME_CONTEXT.snapshot()


def using_modulus(p: Any):
    """Context manager running its block under ``ZZ_p`` modulus ``p``."""
    return PRIME_CONTEXT.scoped(p)


def with_modulus(p: Any, body: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run ``body`` under ``ZZ_p`` modulus ``p`` and restore the previous one.

    Parameters
    ----------
    p : int
        Temporary modulus.
    body : Callable
        Function to execute.
    *args, **kwargs
        Forwarded to ``body``.

    Returns
    -------
    Any
        Result of ``body``.

    Notes
    -----
    The previous modulus is restored even if ``body`` raises, and the error
    propagates unchanged. Calls nest.
    """
    return PRIME_CONTEXT.run(p, body, *args, **kwargs)


# =============================================================================
# zz_p slot
# =============================================================================


def init_small_modulus(p: Any) -> None:
    """Set the current modulus for ``zz_p``.

    Raises
    ------
    InvalidModulus
        If ``p <= 1`` or ``p >= 2**62``.
    """
    SMALL_CONTEXT.init(p)


def init_fft_modulus(index: int) -> None:
    """Set the ``zz_p`` modulus to the ``index``-th FFT prime.

    Raises
    ------
    InvalidModulus
        If ``index`` is outside the table.
    """
    if not 0 <= index < len(FFT_PRIMES):
        raise InvalidModulus(
            f"FFT prime index must be in [0, {len(FFT_PRIMES)}), got {index}"
        )
    SMALL_CONTEXT.init(FFT_PRIMES[index])


def current_small_modulus() -> int:
    """Return the current ``zz_p`` modulus (0 when uninitialised)."""
    return SMALL_CONTEXT.current()


def save_small_modulus() -> ContextSnapshot:
    """Capture the current ``zz_p`` modulus."""
    return SMALL_CONTEXT.snapshot()


def using_small_modulus(p: Any):
    """Context manager running its block under ``zz_p`` modulus ``p``."""
    return SMALL_CONTEXT.scoped(p)


def with_small_modulus(p: Any, body: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run ``body`` under ``zz_p`` modulus ``p`` and restore the previous one."""
    return SMALL_CONTEXT.run(p, body, *args, **kwargs)


def require_initialized(context: ModulusContext, explicit: Optional[Any] = None) -> Any:
    """Return ``explicit`` if given, else the slot's value.

    Raises
    ------
    InvalidModulus
        If no explicit value was given and the slot is uninitialised.
    """
    if explicit is not None:
        return explicit
    if not context.is_initialized():
        raise InvalidModulus(f"{context.name} modulus is not initialised")
    return context.current()
