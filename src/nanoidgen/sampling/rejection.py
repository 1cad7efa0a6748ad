"""Mask-and-reject sampler for arbitrary alphabet sizes.

Each candidate is masked down to ``[0, mask]`` where ``mask + 1`` is the
smallest power of two covering the alphabet, then kept only if it indexes
an existing unit. Rejecting instead of wrapping (``% size``) keeps every
accepted index equally likely. Because ``mask < 2 * size``, at least half of
all candidates are accepted, so the scan terminates almost surely.

Alphabets of up to 256 units draw one byte per candidate; larger alphabets
read 2- or 4-byte little-endian candidates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from nanoidgen.alphabet import candidate_width, compute_step
from nanoidgen.sampling.base import IndexSampler
from nanoidgen.sampling.registry import SamplerRegistry
from nanoidgen.sampling.types import SampleOutcome

if TYPE_CHECKING:
    from nanoidgen.pool import EntropyPool

_CANDIDATE_DTYPES: dict[int, np.dtype] = {
    1: np.dtype("u1"),
    2: np.dtype("<u2"),
    4: np.dtype("<u4"),
}


@SamplerRegistry.register("rejection")
class RejectionSampler(IndexSampler):
    """Scan blocks of ``step`` candidates, keeping the in-range ones.

    The whole pool is one block and is refilled at the start of every call:
    how much of a block a call consumes depends on how many candidates it
    rejects, so leftovers are never carried over to the next call.

    Args:
        size: Alphabet size.
        length: Indices produced per call.
        step_factor: Inflation applied to the expected block size.
    """

    def __init__(self, size: int, length: int, step_factor: float = 1.6) -> None:
        super().__init__(size, length)
        self._step = compute_step(self._mask, length, size, step_factor)
        self._width = candidate_width(self._mask)
        self._dtype = _CANDIDATE_DTYPES[self._width]

    @property
    def name(self) -> str:
        return "rejection"

    @property
    def step(self) -> int:
        """Candidates drawn per block."""
        return self._step

    @property
    def width(self) -> int:
        """Bytes per candidate."""
        return self._width

    def pool_capacity(self, pool_factor: int) -> int:
        # One block per refill; pool_factor does not apply.
        return self._step * self._width

    def sample(self, pool: EntropyPool, out: np.ndarray) -> SampleOutcome:
        length = self._length
        size = self._size
        filled = 0
        scanned = 0
        while filled < length:
            block = pool.drain().view(self._dtype)
            masked = block.astype(np.int64)
            np.bitwise_and(masked, self._mask, out=masked)
            hits = np.flatnonzero(masked < size)
            need = length - filled
            if hits.size >= need:
                # Stop scanning at the acceptance that completes the ID.
                hits = hits[:need]
                scanned += int(hits[-1]) + 1
            else:
                scanned += block.size
            out[filled : filled + hits.size] = masked[hits]
            filled += hits.size
        return SampleOutcome(scanned=scanned, rejected=scanned - length)
