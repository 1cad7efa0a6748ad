"""Tests for RejectionSampler."""

from __future__ import annotations

import numpy as np
import pytest

from nanoidgen.entropy import MockSequenceSource, SystemEntropySource
from nanoidgen.pool import EntropyPool
from nanoidgen.sampling.rejection import RejectionSampler


def _pool_for(sampler: RejectionSampler, source: MockSequenceSource | SystemEntropySource) -> EntropyPool:
    return EntropyPool(source, sampler.pool_capacity(6))


class TestRejectionSampler:
    def test_derived_constants(self) -> None:
        sampler = RejectionSampler(10, 10)
        assert sampler.name == "rejection"
        assert sampler.mask == 15
        assert sampler.step == 24
        assert sampler.width == 1

    def test_pool_capacity_is_one_block(self) -> None:
        sampler = RejectionSampler(10, 10)
        assert sampler.pool_capacity(6) == 24
        assert sampler.pool_capacity(1) == 24

    def test_step_factor_is_tunable(self) -> None:
        assert RejectionSampler(10, 10, step_factor=2.0).step == 30

    def test_wide_candidates_for_large_alphabets(self) -> None:
        sampler = RejectionSampler(300, 5)
        assert sampler.mask == 511
        assert sampler.width == 2
        assert sampler.pool_capacity(6) == sampler.step * 2

    def test_accepts_in_range_and_skips_rest(self) -> None:
        # size 3, mask 3, length 2, step 4; pattern repeats every block.
        source = MockSequenceSource([3, 0, 3, 1])
        sampler = RejectionSampler(3, 2)
        assert sampler.step == 4
        pool = _pool_for(sampler, source)
        out = np.zeros(2, dtype=np.int64)

        outcome = sampler.sample(pool, out)
        assert out.tolist() == [0, 1]
        assert outcome.scanned == 4
        assert outcome.rejected == 2
        assert outcome.accepted == 2

    def test_refills_at_start_of_every_call(self) -> None:
        source = MockSequenceSource([0, 1, 2, 0])
        sampler = RejectionSampler(3, 2)
        pool = _pool_for(sampler, source)
        out = np.zeros(2, dtype=np.int64)

        sampler.sample(pool, out)
        sampler.sample(pool, out)
        # Two leftover candidates from the first block are not reused.
        assert pool.fills == 2
        assert out.tolist() == [0, 1]

    def test_scan_stops_at_last_needed_acceptance(self) -> None:
        source = MockSequenceSource([3, 2, 1, 3])
        sampler = RejectionSampler(3, 2)
        pool = _pool_for(sampler, source)
        out = np.zeros(2, dtype=np.int64)

        outcome = sampler.sample(pool, out)
        assert out.tolist() == [2, 1]
        assert outcome.scanned == 3
        assert outcome.rejected == 1

    def test_retries_with_fresh_block_when_exhausted(self) -> None:
        # Pattern period 5 against a 4-byte block: first block [3, 3, 3, 3]
        # accepts nothing, later blocks accept one candidate each.
        source = MockSequenceSource([3, 3, 3, 3, 0])
        sampler = RejectionSampler(3, 2)
        pool = _pool_for(sampler, source)
        out = np.zeros(2, dtype=np.int64)

        outcome = sampler.sample(pool, out)
        assert out.tolist() == [0, 0]
        # Blocks: [3,3,3,3], [0,3,3,3], [3,0,...] -> scanned 4 + 4 + 2.
        assert outcome.scanned == 10
        assert outcome.rejected == 8
        assert pool.fills == 3

    def test_high_bits_are_masked_before_comparison(self) -> None:
        # 0xF0 & 3 == 0 (accepted), 0xFF & 3 == 3 (rejected), 0x0E & 3 == 2.
        source = MockSequenceSource([0xF0, 0xFF, 0x0E, 0xFF])
        sampler = RejectionSampler(3, 2)
        pool = _pool_for(sampler, source)
        out = np.zeros(2, dtype=np.int64)
        sampler.sample(pool, out)
        assert out.tolist() == [0, 2]

    def test_little_endian_wide_candidates(self) -> None:
        # size 300 -> mask 511, 2-byte candidates.
        # 0x012C & 511 == 300 (rejected), 0x0001 -> 1, 0x0102 -> 258.
        sampler = RejectionSampler(300, 2)
        pattern = [0x2C, 0x01, 0x01, 0x00, 0x02, 0x01]
        pattern += [0xFF, 0xFF] * (sampler.step - 3)
        source = MockSequenceSource(pattern)
        pool = _pool_for(sampler, source)
        out = np.zeros(2, dtype=np.int64)

        outcome = sampler.sample(pool, out)
        assert out.tolist() == [1, 258]
        assert outcome.rejected == 1

    @pytest.mark.parametrize("size", [3, 10, 37, 100, 255, 300, 5000, 70000])
    def test_indices_in_range(self, size: int) -> None:
        sampler = RejectionSampler(size, 50)
        pool = _pool_for(sampler, SystemEntropySource())
        out = np.zeros(50, dtype=np.int64)
        for _ in range(20):
            sampler.sample(pool, out)
            assert out.min() >= 0
            assert out.max() < size

    def test_acceptance_rate_at_least_half(self) -> None:
        """Worst case (size = 2**k + 1) still accepts about half of candidates."""
        sampler = RejectionSampler(129, 100)
        pool = _pool_for(sampler, SystemEntropySource())
        out = np.zeros(100, dtype=np.int64)
        scanned = 0
        for _ in range(200):
            scanned += sampler.sample(pool, out).scanned
        rate = 200 * 100 / scanned
        assert 0.45 < rate < 0.56
