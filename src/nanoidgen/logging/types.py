"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GenerationRecord:
    """Immutable record of a single ID generation.

    The generated ID itself is deliberately not recorded.

    Attributes:
        timestamp_ns: Wall-clock time of generation (nanoseconds since epoch).
        elapsed_ms: Time spent inside the generator lock (milliseconds).
        path: Sampling path used (``'mask'`` or ``'rejection'``).
        length: Number of units in the ID.
        alphabet_size: Number of units in the alphabet.
        entropy_source: Name of the entropy source backing the pool.
        candidates_scanned: Candidates examined for this ID.
        candidates_rejected: Candidates discarded as out of range.
        pool_fills: Pool refills triggered while building this ID.
    """

    timestamp_ns: int
    elapsed_ms: float
    path: str
    length: int
    alphabet_size: int
    entropy_source: str
    candidates_scanned: int
    candidates_rejected: int
    pool_fills: int
