"""Index sampling subsystem for nanoidgen.

Converts random bytes into uniformly distributed alphabet indices, either
by direct masking (power-of-two alphabets) or by mask-and-reject sampling.
"""

from nanoidgen.sampling.base import IndexSampler
from nanoidgen.sampling.mask import DirectMaskSampler
from nanoidgen.sampling.registry import SamplerRegistry
from nanoidgen.sampling.rejection import RejectionSampler
from nanoidgen.sampling.types import SampleOutcome

__all__ = [
    "DirectMaskSampler",
    "IndexSampler",
    "RejectionSampler",
    "SampleOutcome",
    "SamplerRegistry",
]
