"""Data types for the index sampling subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SampleOutcome:
    """Bookkeeping for one filled index buffer.

    Attributes:
        scanned: Candidates examined, accepted or not.
        rejected: Candidates discarded because their masked value fell
            outside the alphabet.
    """

    scanned: int
    rejected: int

    @property
    def accepted(self) -> int:
        """Candidates that became output positions."""
        return self.scanned - self.rejected
