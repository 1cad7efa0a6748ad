"""Base class for index samplers.

An index sampler turns random bytes from an entropy pool into alphabet
indices in ``[0, size)``, each equally likely. It also decides how large the
pool must be for its access pattern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from nanoidgen.alphabet import compute_mask

if TYPE_CHECKING:
    import numpy as np

    from nanoidgen.pool import EntropyPool
    from nanoidgen.sampling.types import SampleOutcome


class IndexSampler(ABC):
    """Abstract base class for alphabet index samplers.

    Samplers are immutable after construction; all mutable state lives in
    the pool and output buffer passed to :meth:`sample`.

    Args:
        size: Alphabet size.
        length: Number of indices produced per call.
    """

    def __init__(self, size: int, length: int) -> None:
        self._size = size
        self._length = length
        self._mask = compute_mask(size)

    @property
    @abstractmethod
    def name(self) -> str:
        """Registered sampler identifier."""

    @property
    def size(self) -> int:
        return self._size

    @property
    def length(self) -> int:
        return self._length

    @property
    def mask(self) -> int:
        """Bit mask folding a candidate into ``[0, mask]``."""
        return self._mask

    @abstractmethod
    def pool_capacity(self, pool_factor: int) -> int:
        """Return the entropy pool size, in bytes, this sampler needs.

        Args:
            pool_factor: Tunable multiplier trading memory for fewer refills.
        """

    @abstractmethod
    def sample(self, pool: EntropyPool, out: np.ndarray) -> SampleOutcome:
        """Fill *out* with ``length`` uniformly distributed indices.

        Args:
            pool: Entropy pool to draw from; refilled as needed.
            out: Integer array of at least ``length`` entries, overwritten
                in place.

        Returns:
            How many candidates were scanned and rejected.
        """
