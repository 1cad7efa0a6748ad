"""Tests for EntropyPool."""

from __future__ import annotations

import numpy as np
import pytest

from nanoidgen.entropy import MockSequenceSource
from nanoidgen.pool import EntropyPool


class TestEntropyPool:
    def test_starts_empty(self, counting_source: MockSequenceSource) -> None:
        pool = EntropyPool(counting_source, 16)
        assert pool.capacity == 16
        assert pool.offset == 16
        assert pool.remaining == 0
        assert pool.fills == 0
        assert counting_source.call_count == 0

    def test_rejects_non_positive_capacity(self, counting_source: MockSequenceSource) -> None:
        with pytest.raises(ValueError, match="positive"):
            EntropyPool(counting_source, 0)

    def test_refill_resets_offset(self, counting_source: MockSequenceSource) -> None:
        pool = EntropyPool(counting_source, 8)
        pool.refill()
        assert pool.offset == 0
        assert pool.remaining == 8
        assert pool.fills == 1
        assert pool.bytes_drawn == 8

    def test_take_serves_sequential_slices(self, counting_source: MockSequenceSource) -> None:
        pool = EntropyPool(counting_source, 8)
        pool.refill()
        assert pool.take(3).tolist() == [0, 1, 2]
        assert pool.take(3).tolist() == [3, 4, 5]
        assert pool.offset == 6
        assert pool.fills == 1

    def test_take_refills_when_short(self, counting_source: MockSequenceSource) -> None:
        pool = EntropyPool(counting_source, 8)
        pool.refill()
        pool.take(6)
        # Only 2 left; the next 4-byte take discards them and refills.
        assert pool.take(4).tolist() == [8, 9, 10, 11]
        assert pool.fills == 2
        assert pool.offset == 4

    def test_take_refills_empty_pool(self, counting_source: MockSequenceSource) -> None:
        pool = EntropyPool(counting_source, 4)
        assert pool.take(4).tolist() == [0, 1, 2, 3]
        assert pool.remaining == 0
        assert pool.take(4).tolist() == [4, 5, 6, 7]
        assert pool.fills == 2

    def test_take_larger_than_capacity_raises(self, counting_source: MockSequenceSource) -> None:
        pool = EntropyPool(counting_source, 4)
        with pytest.raises(ValueError, match="Cannot take"):
            pool.take(5)

    def test_take_returns_uint8_view(self, counting_source: MockSequenceSource) -> None:
        pool = EntropyPool(counting_source, 4)
        chunk = pool.take(2)
        assert isinstance(chunk, np.ndarray)
        assert chunk.dtype == np.uint8

    def test_drain_consumes_everything(self, counting_source: MockSequenceSource) -> None:
        pool = EntropyPool(counting_source, 4)
        pool.refill()
        block = pool.drain()
        # drain always refills first, even if bytes were left.
        assert block.tolist() == [4, 5, 6, 7]
        assert pool.remaining == 0
        assert pool.fills == 2

    def test_offset_never_exceeds_capacity(self, counting_source: MockSequenceSource) -> None:
        pool = EntropyPool(counting_source, 10)
        for n in (3, 3, 3, 3, 10, 1, 9, 2):
            pool.take(n)
            assert 0 <= pool.offset <= pool.capacity

    def test_bytes_drawn_accumulates(self, counting_source: MockSequenceSource) -> None:
        pool = EntropyPool(counting_source, 5)
        for _ in range(3):
            pool.refill()
        assert pool.bytes_drawn == 15
        assert counting_source.bytes_served == 15

    def test_source_property(self, counting_source: MockSequenceSource) -> None:
        pool = EntropyPool(counting_source, 5)
        assert pool.source is counting_source
