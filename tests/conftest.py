"""Shared pytest fixtures for nanoidgen tests.

Provides settings isolated from the environment, deterministic entropy
sources, and a few ready-built generators used across test modules.
"""

from __future__ import annotations

import pytest

from nanoidgen.config import NanoIDSettings
from nanoidgen.entropy import MockSequenceSource, PseudoRandomSource, SystemEntropySource
from nanoidgen.generator import Generator, new_generator


@pytest.fixture
def settings() -> NanoIDSettings:
    """Return default settings, ignoring any .env file."""
    return NanoIDSettings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def counting_source() -> MockSequenceSource:
    """Return a source replaying 0, 1, ..., 255 forever."""
    return MockSequenceSource(range(256))


@pytest.fixture
def seeded_source() -> PseudoRandomSource:
    """Return a pseudorandom source with a fixed seed for reproducibility."""
    return PseudoRandomSource(seed=42)


@pytest.fixture
def system_source() -> SystemEntropySource:
    return SystemEntropySource()


@pytest.fixture
def default_generator(settings: NanoIDSettings) -> Generator:
    """Secure 21-unit generator over the default alphabet."""
    return new_generator(settings=settings)


@pytest.fixture
def digits_generator(settings: NanoIDSettings) -> Generator:
    """Secure 10-unit generator over a 10-unit alphabet (rejection path)."""
    return new_generator("0123456789", 10, settings=settings)
