"""Deterministic mock entropy source for tests.

Replays a fixed byte pattern so tests can predict exactly which alphabet
units a generator emits, how many candidates it rejects and when it refills
its pool.
"""

from __future__ import annotations

from nanoidgen.entropy.base import EntropySource
from nanoidgen.entropy.registry import register_entropy_source


@register_entropy_source("mock_sequence")
class MockSequenceSource(EntropySource):
    """Cycles through *pattern* forever.

    Usage:
        - ``MockSequenceSource(range(256))``: every byte value once per cycle
        - ``MockSequenceSource([0xFF, 0x03])``: alternate reject/accept for
          small alphabets

    Args:
        pattern: Byte values to replay. Defaults to ``0..255``.

    Attributes:
        call_count: Number of ``get_random_bytes()``/``fill()`` calls served.
        bytes_served: Total number of bytes handed out.
    """

    def __init__(self, pattern: bytes | list[int] | range | None = None) -> None:
        data = bytes(range(256)) if pattern is None else bytes(pattern)
        if not data:
            raise ValueError("MockSequenceSource pattern must not be empty")
        self._pattern = data
        self._position = 0
        self.call_count = 0
        self.bytes_served = 0

    @property
    def name(self) -> str:
        """Return ``'mock_sequence'``."""
        return "mock_sequence"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return the next *n* bytes of the repeating pattern.

        Args:
            n: Number of bytes to generate.

        Returns:
            Exactly *n* bytes.
        """
        self.call_count += 1
        self.bytes_served += n
        period = len(self._pattern)
        start = self._position
        self._position = (start + n) % period
        repeats = (start + n) // period + 1
        return (self._pattern * repeats)[start : start + n]

    def close(self) -> None:
        """Nothing to release."""
