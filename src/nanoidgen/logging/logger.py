"""Diagnostic logger for per-call generation events.

Writes to the ``"nanoidgen"`` logger at the verbosity chosen by
``NanoIDSettings.log_level`` and, in diagnostic mode, keeps every
:class:`GenerationRecord` for later inspection. Records describe the cost
of a call, never the ID it produced.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from nanoidgen.config import NanoIDSettings
    from nanoidgen.logging.types import GenerationRecord

logger = logging.getLogger("nanoidgen")


class GenerationLogger:
    """Per-call diagnostic logger.

    Log levels:
        ``"none"``: Nothing is logged; records are kept only in
        diagnostic mode.

        ``"summary"``: One line per ID with path, cost and refill count.

        ``"full"``: The whole record as one JSON object.

    Not thread-safe; the owning generator calls it under its lock.
    """

    def __init__(self, settings: NanoIDSettings) -> None:
        self._log_level = settings.log_level
        self._diagnostic_mode = settings.diagnostic_mode
        self._records: list[GenerationRecord] = []

    @property
    def enabled(self) -> bool:
        """Whether records are consumed at all; generators skip building them otherwise."""
        return self._diagnostic_mode or self._log_level != "none"

    def log_generation(self, record: GenerationRecord) -> None:
        """Log a single generation event.

        Args:
            record: Immutable record of the call.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "id length=%d path=%s scanned=%d rejected=%d fills=%d source=%s total=%.3fms",
                record.length,
                record.path,
                record.candidates_scanned,
                record.candidates_rejected,
                record.pool_fills,
                record.entropy_source,
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("generation_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[GenerationRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        scanned = sum(r.candidates_scanned for r in self._records)
        rejected = sum(r.candidates_rejected for r in self._records)
        elapsed = [r.elapsed_ms for r in self._records]
        return {
            "total_ids": n,
            "total_scanned": scanned,
            "total_rejected": rejected,
            "rejection_rate": rejected / scanned if scanned else 0.0,
            "total_fills": sum(r.pool_fills for r in self._records),
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
        }
