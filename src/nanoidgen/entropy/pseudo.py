"""Fast non-secure entropy source backed by numpy's PCG64 generator.

Sources built without a seed share one process-wide stream that is seeded
once from ``os.urandom()`` when this module is imported. Call :func:`seed`
to reseed that shared stream, or pass ``seed=`` to get a private,
reproducible stream.

Never use this source for security-sensitive identifiers (session tokens,
password-reset links): its output is predictable from its state.
"""

from __future__ import annotations

import logging
import os
import threading

import numpy as np

from nanoidgen.entropy.base import EntropySource
from nanoidgen.entropy.registry import register_entropy_source

logger = logging.getLogger("nanoidgen")

_shared_lock = threading.Lock()
_shared_rng = np.random.default_rng(int.from_bytes(os.urandom(16), "little"))


def seed(value: int | None = None) -> None:
    """Reseed the process-wide pseudorandom stream.

    Affects every :class:`PseudoRandomSource` created without an explicit
    seed, including ones already in use.

    Args:
        value: New seed. ``None`` draws a fresh seed from ``os.urandom()``.
    """
    global _shared_rng
    if value is None:
        value = int.from_bytes(os.urandom(16), "little")
    with _shared_lock:
        _shared_rng = np.random.default_rng(value)
    logger.debug("Reseeded shared pseudorandom stream")


@register_entropy_source("pseudo")
class PseudoRandomSource(EntropySource):
    """PCG64 pseudorandom bytes: fast and reproducible, but not secure.

    Args:
        seed: Optional seed for a private stream. When omitted the source
            draws from the shared process-wide stream.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        if seed is None:
            self._rng: np.random.Generator | None = None
            self._lock = _shared_lock
        else:
            self._rng = np.random.default_rng(seed)
            self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Return ``'pseudo'``."""
        return "pseudo"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    @property
    def seeded(self) -> bool:
        """Whether this source owns a private, explicitly seeded stream."""
        return self._seed is not None

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* pseudorandom bytes.

        Args:
            n: Number of bytes to generate.

        Returns:
            Exactly *n* bytes.
        """
        with self._lock:
            rng = self._rng if self._rng is not None else _shared_rng
            return rng.bytes(n)

    def close(self) -> None:
        """Nothing to release."""
