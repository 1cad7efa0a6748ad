"""The contract every random-byte provider implements.

The entropy pool refills itself through :meth:`EntropySource.fill`, writing
straight into its own buffer. Sources that can only hand back fresh
``bytes`` objects implement :meth:`EntropySource.get_random_bytes` and
inherit a ``fill()`` that copies the result in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class EntropySource(ABC):
    """A provider of uniformly random bytes.

    A source either delivers every byte requested or raises
    :class:`~nanoidgen.exceptions.EntropyUnavailableError`; short reads are
    never returned. Sources are usable as context managers, which call
    :meth:`close` on exit.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key of this source, also used in log records."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """``False`` when the underlying device or stream cannot serve bytes."""

    @property
    def is_secure(self) -> bool:
        """``True`` if the bytes may back unguessable identifiers.

        Sources are insecure unless they say otherwise.
        """
        return False

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return a new ``bytes`` object of length *n*.

        Raises:
            EntropyUnavailableError: If the source cannot serve the request.
        """

    def fill(self, buffer: bytearray | memoryview) -> None:
        """Overwrite all of *buffer* in place.

        Raises:
            EntropyUnavailableError: If the source cannot serve the request.
        """
        buffer[:] = self.get_random_bytes(len(buffer))

    @abstractmethod
    def close(self) -> None:
        """Release any handle held by the source."""

    def health_check(self) -> dict[str, Any]:
        """Report ``source``, ``healthy`` and ``secure`` for diagnostics."""
        return {"source": self.name, "healthy": self.is_available, "secure": self.is_secure}

    def __enter__(self) -> EntropySource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, secure={self.is_secure})"
