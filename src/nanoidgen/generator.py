"""ID generators and the factories that build them.

A :class:`Generator` is built once and called many times. Construction
validates the length and alphabet, derives the mask and rejection step,
sizes and fills the entropy pool, and picks a sampling path. A call takes
the generator's lock, samples ``length`` indices into a reusable index
buffer, and materializes them into a new string.

Factories::

    gen = new_generator()                       # 21 units, default alphabet, secure
    gen = new_generator("0123456789", 10)       # custom alphabet
    gen = new_generator(length=8, secure=False) # fast, not for secrets
    gen()                                       # -> 'V1StGXR8_Z5jdHi6B-myT'
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from nanoidgen.alphabet import DEFAULT_ALPHABET, Alphabet, validate_length
from nanoidgen.config import NanoIDSettings, validate_settings
from nanoidgen.entropy import EntropySource, EntropySourceRegistry, FallbackEntropySource
from nanoidgen.exceptions import ConfigValidationError
from nanoidgen.logging import GenerationLogger, GenerationRecord
from nanoidgen.pool import EntropyPool
from nanoidgen.sampling import RejectionSampler, SampleOutcome, SamplerRegistry

logger = logging.getLogger("nanoidgen")


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Validated construction parameters of a generator.

    Attributes:
        alphabet: Units IDs are drawn from.
        length: Units per ID, in ``[2, 255]``.
        secure: Whether a cryptographically secure source was requested.
    """

    alphabet: Alphabet
    length: int
    secure: bool


@dataclass(frozen=True, slots=True)
class GeneratorStats:
    """Snapshot of a generator's lifetime counters.

    Attributes:
        ids_generated: Number of completed calls.
        bytes_drawn: Bytes requested from the entropy source, including
            the initial fill.
        candidates_rejected: Candidates discarded by rejection sampling.
        pool_fills: Number of pool fills, including the initial fill.
    """

    ids_generated: int
    bytes_drawn: int
    candidates_rejected: int
    pool_fills: int


class Generator:
    """Reusable, thread-safe ID generator.

    Calls on one instance are serialized by an internal lock covering
    sampling, any pool refills and string materialization. Distinct
    instances share no state.

    Prefer :func:`new_generator` over calling this constructor directly;
    it validates input and resolves the entropy source.

    Args:
        config: Validated generator parameters.
        source: Entropy source backing the pool.
        settings: Pool sizing and logging settings.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        source: EntropySource,
        settings: NanoIDSettings,
    ) -> None:
        self._config = config
        self._units = config.alphabet.units
        self._sampler = SamplerRegistry.build(
            config.alphabet.size, config.length, settings.step_factor
        )
        self._pool = EntropyPool(source, self._sampler.pool_capacity(settings.pool_factor))
        self._pool.refill()
        # Output buffer: reused by every call, never handed to callers.
        self._indices = np.zeros(config.length, dtype=np.int64)
        self._lock = threading.Lock()
        self._ids_generated = 0
        self._candidates_rejected = 0
        self._call_logger = GenerationLogger(settings)

        logger.debug(
            "Created generator: path=%s length=%d alphabet_size=%d mask=%d step=%s "
            "pool=%d source=%s",
            self._sampler.name,
            config.length,
            config.alphabet.size,
            self._sampler.mask,
            self.step,
            self._pool.capacity,
            source.name,
        )
        if config.secure and not source.is_secure:
            logger.warning(
                "Secure generator requested but entropy source %r is not cryptographically secure",
                source.name,
            )

    def __call__(self) -> str:
        """Generate one ID.

        Returns:
            A new string of exactly ``length`` alphabet units.

        Raises:
            EntropyUnavailableError: If the entropy source fails.
        """
        with self._lock:
            if not self._call_logger.enabled:
                self._sample()
                return "".join([self._units[i] for i in self._indices.tolist()])

            t0 = time.perf_counter()
            fills_before = self._pool.fills
            outcome = self._sample()
            result = "".join([self._units[i] for i in self._indices.tolist()])
            self._call_logger.log_generation(
                GenerationRecord(
                    timestamp_ns=time.time_ns(),
                    elapsed_ms=(time.perf_counter() - t0) * 1000.0,
                    path=self._sampler.name,
                    length=self._config.length,
                    alphabet_size=self._config.alphabet.size,
                    entropy_source=self._pool.source.name,
                    candidates_scanned=outcome.scanned,
                    candidates_rejected=outcome.rejected,
                    pool_fills=self._pool.fills - fills_before,
                )
            )
            return result

    def _sample(self) -> SampleOutcome:
        # Caller holds self._lock.
        outcome = self._sampler.sample(self._pool, self._indices)
        self._ids_generated += 1
        self._candidates_rejected += outcome.rejected
        return outcome

    def __repr__(self) -> str:
        return (
            f"Generator(length={self._config.length}, alphabet_size={self._config.alphabet.size}, "
            f"path={self._sampler.name!r}, source={self._pool.source.name!r})"
        )

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def length(self) -> int:
        return self._config.length

    @property
    def alphabet(self) -> Alphabet:
        return self._config.alphabet

    @property
    def mask(self) -> int:
        return self._sampler.mask

    @property
    def step(self) -> int | None:
        """Candidates per rejection block, or ``None`` on the direct-mask path."""
        if isinstance(self._sampler, RejectionSampler):
            return self._sampler.step
        return None

    @property
    def path(self) -> str:
        """Sampling path: ``'mask'`` or ``'rejection'``."""
        return self._sampler.name

    @property
    def source(self) -> EntropySource:
        return self._pool.source

    @property
    def pool_capacity(self) -> int:
        return self._pool.capacity

    @property
    def call_logger(self) -> GenerationLogger:
        """Diagnostic logger holding per-call records in diagnostic mode."""
        return self._call_logger

    def stats(self) -> GeneratorStats:
        """Return a consistent snapshot of the lifetime counters."""
        with self._lock:
            return GeneratorStats(
                ids_generated=self._ids_generated,
                bytes_drawn=self._pool.bytes_drawn,
                candidates_rejected=self._candidates_rejected,
                pool_fills=self._pool.fills,
            )


def build_entropy_source(
    settings: NanoIDSettings,
    secure: bool,
    seed: int | None = None,
) -> EntropySource:
    """Build the entropy source from settings, wrapping with fallback if needed.

    Args:
        settings: Settings naming the secure/insecure source and fallback mode.
        secure: Select ``secure_source_type`` instead of ``insecure_source_type``.
        seed: Seed for a private pseudorandom stream (non-secure only).

    Returns:
        An EntropySource, potentially wrapped in FallbackEntropySource.

    Raises:
        ConfigValidationError: If a source name is unknown, or a seed is
            given for a secure generator or a source that cannot take one.
    """
    if secure and seed is not None:
        raise ConfigValidationError("A seed can only be used with non-secure generators")

    name = settings.secure_source_type if secure else settings.insecure_source_type
    primary = EntropySourceRegistry.create(name, seed)

    if settings.fallback_mode == "error":
        return primary
    return FallbackEntropySource(primary, EntropySourceRegistry.create(settings.fallback_mode))


def new_generator(
    alphabet: str | Sequence[str] | None = None,
    length: int | None = None,
    secure: bool = True,
    *,
    ascii_only: bool = False,
    source: EntropySource | None = None,
    seed: int | None = None,
    settings: NanoIDSettings | None = None,
) -> Generator:
    """Validate configuration and build a reusable ID generator.

    Args:
        alphabet: Units to draw from; defaults to the 64-unit URL-safe
            alphabet ``a-zA-Z0-9-_``.
        length: Units per ID; defaults to ``settings.default_length`` (21).
        secure: Use the cryptographically secure source. Non-secure
            generators are faster but must never produce session tokens,
            reset links or anything else that has to be unguessable.
        ascii_only: Reject alphabets containing non-ASCII units.
        source: Explicit entropy source; overrides *secure*, *seed* and the
            source settings.
        seed: Seed for a private pseudorandom stream (non-secure only).
            Without one, non-secure generators share a process-wide stream
            seeded once at import time.
        settings: Settings to use; loaded from the environment if omitted.

    Returns:
        A ready-to-call Generator with its pool already filled.

    Raises:
        InvalidLengthError: If *length* is not an integer in ``[2, 255]``.
        InvalidAlphabetError: If *alphabet* is unusable.
        ConfigValidationError: If the settings or source selection are invalid.
    """
    if settings is None:
        settings = NanoIDSettings()
    validate_settings(settings)

    length = validate_length(settings.default_length if length is None else length)
    config = GeneratorConfig(
        alphabet=Alphabet.from_units(
            DEFAULT_ALPHABET if alphabet is None else alphabet, ascii_only=ascii_only
        ),
        length=length,
        secure=secure,
    )
    if source is None:
        source = build_entropy_source(settings, secure, seed)
    return Generator(config, source, settings)


def standard(length: int | None = None, **kwargs: Any) -> Generator:
    """Secure generator over the default alphabet (recommended length 21)."""
    return new_generator(None, length, secure=True, **kwargs)


def standard_non_secure(
    length: int | None = None,
    seed: int | None = None,
    **kwargs: Any,
) -> Generator:
    """Fast, non-secure generator over the default alphabet."""
    return new_generator(None, length, secure=False, seed=seed, **kwargs)


def custom(alphabet: str | Sequence[str], length: int | None = None, **kwargs: Any) -> Generator:
    """Secure generator over a caller-supplied alphabet."""
    return new_generator(alphabet, length, secure=True, **kwargs)


def custom_non_secure(
    alphabet: str | Sequence[str],
    length: int | None = None,
    seed: int | None = None,
    **kwargs: Any,
) -> Generator:
    """Fast, non-secure generator over a caller-supplied alphabet."""
    return new_generator(alphabet, length, secure=False, seed=seed, **kwargs)


def custom_ascii(alphabet: str, length: int | None = None, **kwargs: Any) -> Generator:
    """Secure generator over an alphabet restricted to ASCII units."""
    return new_generator(alphabet, length, secure=True, ascii_only=True, **kwargs)
