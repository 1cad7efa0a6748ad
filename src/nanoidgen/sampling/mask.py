"""Direct-mask sampler for power-of-two alphabets.

When the alphabet size is a power of two no larger than 256, ``byte & mask``
maps the 256 byte values onto the alphabet exactly ``256 / size`` times
each, so every masked byte is a valid, unbiased index. Each output unit
costs exactly one byte and nothing is ever rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from nanoidgen.sampling.base import IndexSampler
from nanoidgen.sampling.registry import SamplerRegistry
from nanoidgen.sampling.types import SampleOutcome

if TYPE_CHECKING:
    from nanoidgen.pool import EntropyPool


@SamplerRegistry.register("mask")
class DirectMaskSampler(IndexSampler):
    """One byte per index, no rejection.

    The pool is sized as a multiple of ``length`` and consumed ``length``
    bytes at a time, so a call either finds enough bytes left or finds the
    pool exactly empty and refills it once.
    """

    def __init__(self, size: int, length: int, step_factor: float = 1.6) -> None:
        super().__init__(size, length)
        if size & (size - 1) or size > 256:
            raise ValueError(f"Direct-mask sampling needs a power of two <= 256, got {size}")

    @property
    def name(self) -> str:
        return "mask"

    def pool_capacity(self, pool_factor: int) -> int:
        return pool_factor * self._length * self._length

    def sample(self, pool: EntropyPool, out: np.ndarray) -> SampleOutcome:
        chunk = pool.take(self._length)
        np.bitwise_and(chunk, self._mask, out=out[: self._length])
        return SampleOutcome(scanned=self._length, rejected=0)
