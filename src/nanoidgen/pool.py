"""Entropy pool: a pre-filled block of random bytes served in slices.

The pool amortizes entropy-source calls. It owns one ``bytearray`` that is
always refilled whole, in place, and a cursor marking the first unused byte.
A numpy view over the same memory lets samplers operate on slices without
copying.

The pool is not thread-safe on its own; its owning generator serializes
access under its lock.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from nanoidgen.entropy.base import EntropySource

logger = logging.getLogger("nanoidgen")


class EntropyPool:
    """Fixed-capacity random byte buffer with a read cursor.

    Invariant: ``0 <= offset <= capacity``. ``offset == capacity`` means the
    pool is empty and must be refilled before another byte is consumed.
    A freshly constructed pool is empty.

    Args:
        source: Entropy source used for every refill.
        capacity: Buffer size in bytes (must be positive).

    Raises:
        ValueError: If *capacity* is not positive.
    """

    def __init__(self, source: EntropySource, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"Entropy pool capacity must be positive, got {capacity}")
        self._source = source
        self._buffer = bytearray(capacity)
        # Shares memory with _buffer; refills show through without copying.
        self._view = np.frombuffer(self._buffer, dtype=np.uint8)
        self._offset = capacity
        self._fills = 0
        self._bytes_drawn = 0

    @property
    def source(self) -> EntropySource:
        """The entropy source backing this pool."""
        return self._source

    @property
    def capacity(self) -> int:
        """Buffer size in bytes."""
        return len(self._buffer)

    @property
    def offset(self) -> int:
        """Index of the next unused byte."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of unused bytes left before a refill is required."""
        return len(self._buffer) - self._offset

    @property
    def fills(self) -> int:
        """Number of times the pool has been filled from its source."""
        return self._fills

    @property
    def bytes_drawn(self) -> int:
        """Total bytes requested from the source over the pool's lifetime."""
        return self._bytes_drawn

    def refill(self) -> None:
        """Overwrite the whole buffer with fresh bytes and reset the cursor.

        Raises:
            EntropyUnavailableError: If the source cannot provide bytes.
        """
        self._source.fill(self._buffer)
        self._offset = 0
        self._fills += 1
        self._bytes_drawn += len(self._buffer)
        logger.debug("Refilled entropy pool: %d bytes from %r", len(self._buffer), self._source.name)

    def take(self, n: int) -> np.ndarray:
        """Consume the next *n* bytes, refilling first if fewer remain.

        Args:
            n: Number of bytes to consume, at most ``capacity``.

        Returns:
            A uint8 view of the consumed bytes. The view aliases the pool
            and is only valid until the next refill.

        Raises:
            ValueError: If *n* exceeds the pool capacity.
        """
        if n > len(self._buffer):
            raise ValueError(f"Cannot take {n} bytes from a pool of {len(self._buffer)} bytes")
        if self.remaining < n:
            self.refill()
        start = self._offset
        self._offset = start + n
        return self._view[start : self._offset]

    def drain(self) -> np.ndarray:
        """Refill the pool and consume all of it.

        Returns:
            A uint8 view of the whole, freshly filled buffer. The view
            aliases the pool and is only valid until the next refill.
        """
        self.refill()
        self._offset = len(self._buffer)
        return self._view
