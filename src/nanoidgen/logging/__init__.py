"""Diagnostic logging subsystem for nanoidgen.

Provides immutable per-call generation records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from nanoidgen.logging.logger import GenerationLogger
from nanoidgen.logging.types import GenerationRecord

__all__ = [
    "GenerationLogger",
    "GenerationRecord",
]
