"""Operating-system CSPRNG source backing every secure generator."""

from __future__ import annotations

import os

from nanoidgen.entropy.base import EntropySource
from nanoidgen.entropy.registry import register_entropy_source


@register_entropy_source("system")
class SystemEntropySource(EntropySource):
    """Reads from ``os.urandom()`` (``getrandom(2)`` on Linux).

    Safe for session tokens, password-reset links and other identifiers an
    attacker must not be able to predict. Holds no handle, so ``close()``
    does nothing and the source stays usable afterwards.
    """

    @property
    def name(self) -> str:
        return "system"

    @property
    def is_available(self) -> bool:
        return True

    @property
    def is_secure(self) -> bool:
        return True

    def get_random_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError(f"Cannot read a negative number of bytes ({n})")
        return os.urandom(n)

    def fill(self, buffer: bytearray | memoryview) -> None:
        with memoryview(buffer) as view:
            view[:] = os.urandom(view.nbytes)

    def close(self) -> None:
        pass
