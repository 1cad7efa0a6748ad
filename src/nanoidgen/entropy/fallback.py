"""Failover wrapper pairing a preferred source with a backup.

Selected by ``NanoIDSettings.fallback_mode``: any value other than
``"error"`` names the backup source. Only
:class:`~nanoidgen.exceptions.EntropyUnavailableError` triggers failover;
any other exception from the primary is a bug and propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from nanoidgen.entropy.base import EntropySource
from nanoidgen.exceptions import EntropyUnavailableError

logger = logging.getLogger("nanoidgen")

_T = TypeVar("_T")


class FallbackEntropySource(EntropySource):
    """Serves from *primary*, switching to *fallback* per request on failure.

    Every request tries the primary first, so a device that comes back is
    used again immediately. Because either source may serve any request,
    the pair counts as secure only when both members are.

    Args:
        primary: Preferred source.
        fallback: Source used for requests the primary cannot serve.

    Attributes:
        failovers: Number of requests served by the fallback.
    """

    def __init__(self, primary: EntropySource, fallback: EntropySource) -> None:
        self._primary = primary
        self._fallback = fallback
        self._last_source_used = primary.name
        self.failovers = 0

    @property
    def name(self) -> str:
        """``'<primary>+<fallback>'``."""
        return f"{self._primary.name}+{self._fallback.name}"

    @property
    def is_available(self) -> bool:
        return self._primary.is_available or self._fallback.is_available

    @property
    def is_secure(self) -> bool:
        return self._primary.is_secure and self._fallback.is_secure

    @property
    def last_source_used(self) -> str:
        """Name of the member that served the most recent request."""
        return self._last_source_used

    def _serve(self, request: Callable[[EntropySource], _T]) -> _T:
        try:
            result = request(self._primary)
        except EntropyUnavailableError:
            logger.warning(
                "Primary entropy source %r unavailable, falling back to %r",
                self._primary.name,
                self._fallback.name,
            )
            # A failing fallback raises straight to the caller.
            result = request(self._fallback)
            self.failovers += 1
            self._last_source_used = self._fallback.name
        else:
            self._last_source_used = self._primary.name
        return result

    def get_random_bytes(self, n: int) -> bytes:
        return self._serve(lambda source: source.get_random_bytes(n))

    def fill(self, buffer: bytearray | memoryview) -> None:
        self._serve(lambda source: source.fill(buffer))

    def close(self) -> None:
        try:
            self._primary.close()
        finally:
            self._fallback.close()

    def health_check(self) -> dict[str, Any]:
        """Combined status plus each member's own ``health_check()``."""
        status = super().health_check()
        status.update(
            primary=self._primary.health_check(),
            fallback=self._fallback.health_check(),
            last_source_used=self._last_source_used,
            failovers=self.failovers,
        )
        return status
