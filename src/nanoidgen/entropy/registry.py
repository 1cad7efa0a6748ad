"""Name-to-class lookup for entropy sources.

``NanoIDSettings.secure_source_type`` and ``insecure_source_type`` hold
registry keys. Built-in sources claim their keys with
``@register_entropy_source`` when their modules are imported. Sources
shipped by other distributions advertise themselves in the
``nanoidgen.entropy_sources`` entry-point group::

    [project.entry-points."nanoidgen.entropy_sources"]
    hardware = "vendor_rng.source:HardwareSource"

That group is scanned once, the first time a lookup misses.
"""

from __future__ import annotations

import importlib.metadata
import inspect
import logging
from typing import TYPE_CHECKING, ClassVar

from nanoidgen.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from nanoidgen.entropy.base import EntropySource

logger = logging.getLogger("nanoidgen")

_ENTRY_POINT_GROUP = "nanoidgen.entropy_sources"


def _takes_seed(source_cls: type) -> bool:
    try:
        return "seed" in inspect.signature(source_cls).parameters
    except (TypeError, ValueError):
        return False


class EntropySourceRegistry:
    """Class-level mapping of source names to :class:`EntropySource` classes.

    Decorator registrations always win over a plugin advertising the same
    name.
    """

    _registry: ClassVar[dict[str, type[EntropySource]]] = {}
    _entry_points_loaded: ClassVar[bool] = False

    @classmethod
    def register(cls, name: str) -> Callable[[type[EntropySource]], type[EntropySource]]:
        """Return a class decorator that files the class under *name*.

        Example::

            @EntropySourceRegistry.register("hardware")
            class HardwareSource(EntropySource):
                ...
        """

        def decorator(source_cls: type[EntropySource]) -> type[EntropySource]:
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[EntropySource]:
        """Return the class registered under *name*.

        Raises:
            KeyError: If neither a registration nor a plugin provides *name*.
        """
        if name not in cls._registry and not cls._entry_points_loaded:
            cls._load_entry_points()
        try:
            return cls._registry[name]
        except KeyError:
            known = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown entropy source: {name!r}. Available: {known}") from None

    @classmethod
    def create(cls, name: str, seed: int | None = None) -> EntropySource:
        """Instantiate the source registered under *name*.

        Args:
            name: Registry key.
            seed: Forwarded as ``seed=`` to sources whose constructor takes one.

        Raises:
            ConfigValidationError: If *name* is unknown, or a seed is given
                for a source that cannot be seeded.
        """
        try:
            source_cls = cls.get(name)
        except KeyError as exc:
            raise ConfigValidationError(str(exc.args[0])) from exc

        if seed is None:
            return source_cls()
        if not _takes_seed(source_cls):
            raise ConfigValidationError(f"Entropy source {name!r} does not accept a seed")
        return source_cls(seed=seed)  # type: ignore[call-arg]

    @classmethod
    def list_available(cls) -> list[str]:
        """Sorted names of every registered and discoverable source."""
        if not cls._entry_points_loaded:
            cls._load_entry_points()
        return sorted(cls._registry)

    @classmethod
    def _load_entry_points(cls) -> None:
        cls._entry_points_loaded = True
        try:
            eps = importlib.metadata.entry_points(group=_ENTRY_POINT_GROUP)
        except Exception:  # Intentional: broken metadata must not break lookups
            logger.warning("Failed to load entry points for %s", _ENTRY_POINT_GROUP, exc_info=True)
            return

        for ep in eps:
            if ep.name in cls._registry:
                continue
            try:
                cls._registry[ep.name] = ep.load()
            except Exception:  # Intentional: skip the bad plugin, keep the rest
                logger.warning(
                    "Failed to load entropy source entry point %r: %s",
                    ep.name,
                    ep.value,
                    exc_info=True,
                )
            else:
                logger.debug("Loaded entropy source %r from entry point", ep.name)

    @classmethod
    def _reset(cls) -> None:
        """Forget every registration. Test-only."""
        cls._registry.clear()
        cls._entry_points_loaded = False


register_entropy_source = EntropySourceRegistry.register
