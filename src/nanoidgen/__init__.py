"""nanoidgen: short, URL-safe, collision-resistant random IDs.

Builds reusable, thread-safe generators that sample uniformly from the
default 64-unit URL-safe alphabet or any caller-supplied alphabet, backed
by the OS CSPRNG or a fast seeded pseudorandom stream.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("nanoidgen")
except PackageNotFoundError:
    __version__ = "0.0.0"

from nanoidgen.alphabet import DEFAULT_ALPHABET, Alphabet
from nanoidgen.config import NanoIDSettings, resolve_settings
from nanoidgen.exceptions import (
    ConfigValidationError,
    EntropyUnavailableError,
    InvalidAlphabetError,
    InvalidLengthError,
    NanoIDError,
)
from nanoidgen.generator import (
    Generator,
    GeneratorConfig,
    GeneratorStats,
    custom,
    custom_ascii,
    custom_non_secure,
    new_generator,
    standard,
    standard_non_secure,
)

__all__ = [
    "DEFAULT_ALPHABET",
    "Alphabet",
    "ConfigValidationError",
    "EntropyUnavailableError",
    "Generator",
    "GeneratorConfig",
    "GeneratorStats",
    "InvalidAlphabetError",
    "InvalidLengthError",
    "NanoIDError",
    "NanoIDSettings",
    "__version__",
    "custom",
    "custom_ascii",
    "custom_non_secure",
    "new_generator",
    "resolve_settings",
    "standard",
    "standard_non_secure",
]
