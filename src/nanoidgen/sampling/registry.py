"""Registry for index sampler implementations.

Uses a decorator pattern for registration. :meth:`SamplerRegistry.build`
picks the sampling path for an alphabet: the direct-mask path when every
masked byte is a valid index, the rejection path otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from nanoidgen.alphabet import uses_direct_mask

if TYPE_CHECKING:
    from collections.abc import Callable

    from nanoidgen.sampling.base import IndexSampler


class SamplerRegistry:
    """Registry mapping string names to IndexSampler classes."""

    _registry: ClassVar[dict[str, type[IndexSampler]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[IndexSampler]], type[IndexSampler]]:
        """Decorator that registers an IndexSampler class under *name*.

        Args:
            name: Sampling path identifier.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[IndexSampler]) -> type[IndexSampler]:
            if name in cls._registry:
                raise ValueError(f"Sampler '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[IndexSampler]:
        """Return the sampler class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown sampler '{name}'. Available: {available}")
        return cls._registry[name]

    @staticmethod
    def select(size: int) -> str:
        """Return the sampling path name for an alphabet of *size* units."""
        return "mask" if uses_direct_mask(size) else "rejection"

    @classmethod
    def build(cls, size: int, length: int, step_factor: float = 1.6) -> IndexSampler:
        """Instantiate the sampler appropriate for *size*.

        Args:
            size: Alphabet size.
            length: Indices produced per call.
            step_factor: Rejection block inflation (ignored by the mask path).

        Returns:
            A constructed IndexSampler.
        """
        klass = cls.get(cls.select(size))
        return klass(size, length, step_factor)  # type: ignore[call-arg]

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered sampler names."""
        return sorted(cls._registry)
