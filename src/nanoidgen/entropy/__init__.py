"""Entropy source subsystem for nanoidgen.

Re-exports the ABC, registry, and all built-in source implementations
for convenient access::

    from nanoidgen.entropy import EntropySource, EntropySourceRegistry
    from nanoidgen.entropy import SystemEntropySource, PseudoRandomSource
"""

from nanoidgen.entropy.base import EntropySource
from nanoidgen.entropy.fallback import FallbackEntropySource
from nanoidgen.entropy.mock import MockSequenceSource
from nanoidgen.entropy.pseudo import PseudoRandomSource, seed
from nanoidgen.entropy.registry import EntropySourceRegistry, register_entropy_source
from nanoidgen.entropy.system import SystemEntropySource

__all__ = [
    "EntropySource",
    "EntropySourceRegistry",
    "FallbackEntropySource",
    "MockSequenceSource",
    "PseudoRandomSource",
    "SystemEntropySource",
    "register_entropy_source",
    "seed",
]
