"""Alphabets and the mask/step arithmetic derived from them.

An alphabet is an ordered sequence of display units. A unit is usually one
character, but any non-empty string is accepted, so an alphabet may mix
ASCII, non-ASCII and multi-character units. Units need not be unique;
a repeated unit is simply drawn proportionally more often.

The helpers here are pure functions of the alphabet size and requested ID
length. Generators call them once at construction time.
"""

from __future__ import annotations

import math
import string
from collections.abc import Sequence
from dataclasses import dataclass

from nanoidgen.exceptions import InvalidAlphabetError, InvalidLengthError

MIN_LENGTH = 2
MAX_LENGTH = 255

MIN_ALPHABET_SIZE = 2
# Largest alphabet whose mask still fits in 32 bits.
MAX_ALPHABET_SIZE = 1 << 32

# Largest alphabet served straight from single bytes without rejection.
_BYTE_RANGE = 256

DEFAULT_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits + "-_"


@dataclass(frozen=True, slots=True)
class Alphabet:
    """Immutable ordered set of display units.

    Attributes:
        units: The display units, in sampling order.
        ascii_only: Whether the alphabet was validated as ASCII-only.
    """

    units: tuple[str, ...]
    ascii_only: bool = False

    @property
    def size(self) -> int:
        """Number of units (duplicates counted)."""
        return len(self.units)

    @property
    def is_power_of_two(self) -> bool:
        """Whether ``size`` is an exact power of two."""
        return self.size & (self.size - 1) == 0

    def __contains__(self, unit: object) -> bool:
        return unit in self.units

    def __str__(self) -> str:
        return "".join(self.units)

    @classmethod
    def from_units(cls, units: str | Sequence[str], ascii_only: bool = False) -> Alphabet:
        """Build and validate an alphabet.

        A ``str`` contributes one unit per character; any other sequence
        contributes one unit per element.

        Args:
            units: Alphabet characters or display units.
            ascii_only: Reject units containing non-ASCII characters.

        Returns:
            A validated Alphabet.

        Raises:
            InvalidAlphabetError: If the alphabet is too small or too large,
                holds a non-string or empty unit, or violates *ascii_only*.
        """
        if isinstance(units, (bytes, bytearray)):
            raise InvalidAlphabetError("Alphabet must be text, not bytes")
        try:
            items = tuple(units)
        except TypeError as exc:
            raise InvalidAlphabetError(
                f"Alphabet must be a string or a sequence of strings, got {type(units).__name__}"
            ) from exc

        if len(items) < MIN_ALPHABET_SIZE:
            raise InvalidAlphabetError(
                f"Alphabet must contain at least {MIN_ALPHABET_SIZE} units, got {len(items)}"
            )
        if len(items) > MAX_ALPHABET_SIZE:
            raise InvalidAlphabetError(
                f"Alphabet must contain at most {MAX_ALPHABET_SIZE} units, got {len(items)}"
            )
        for position, unit in enumerate(items):
            if not isinstance(unit, str) or not unit:
                raise InvalidAlphabetError(
                    f"Alphabet unit at position {position} must be a non-empty string, "
                    f"got {unit!r}"
                )
            if ascii_only and not unit.isascii():
                raise InvalidAlphabetError(
                    f"Alphabet unit {unit!r} at position {position} is outside the ASCII range"
                )
        return cls(units=items, ascii_only=ascii_only)


def validate_length(length: object) -> int:
    """Check that *length* is an integer in ``[MIN_LENGTH, MAX_LENGTH]``.

    Args:
        length: Requested ID length.

    Returns:
        The length as an ``int``.

    Raises:
        InvalidLengthError: If *length* is not an integer or is out of range.
    """
    # bool is an int subclass; True would otherwise pass as 1.
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"ID length must be an integer, got {type(length).__name__}")
    if length < MIN_LENGTH or length > MAX_LENGTH:
        raise InvalidLengthError(
            f"ID length must be between {MIN_LENGTH} and {MAX_LENGTH} (inclusive), got {length}"
        )
    return length


def compute_mask(size: int) -> int:
    """Return the smallest ``2**k - 1`` that covers indices ``[0, size)``.

    Equivalent to setting every bit at or below the highest set bit of
    ``size - 1``. The result satisfies ``size - 1 <= mask <= 2 * size - 1``
    so at least half of all masked values land inside the alphabet.

    Args:
        size: Alphabet size (at least 2).

    Returns:
        The bit mask.
    """
    return (2 << (((size - 1) | 1).bit_length() - 1)) - 1


def uses_direct_mask(size: int) -> bool:
    """Whether an alphabet of *size* units can skip rejection sampling.

    True when *size* is a power of two no larger than one byte's range,
    so ``byte & mask`` is always a valid index.
    """
    return size <= _BYTE_RANGE and size & (size - 1) == 0


def compute_step(mask: int, length: int, size: int, factor: float = 1.6) -> int:
    """Return how many candidates to draw per rejection-sampling block.

    The expected number of candidates needed for *length* acceptances is
    ``length * (mask + 1) / size``. *factor* inflates that estimate so a
    second block within one call is rare.

    Args:
        mask: Bit mask from :func:`compute_mask`.
        length: ID length.
        size: Alphabet size.
        factor: Inflation multiplier.

    Returns:
        Positive number of candidates per block.
    """
    return max(1, math.ceil(factor * mask * length / size))


def candidate_width(mask: int) -> int:
    """Return the number of random bytes consumed per rejection candidate.

    Widths are restricted to 1, 2 or 4 so candidates map onto unsigned
    numpy dtypes.
    """
    if mask <= 0xFF:
        return 1
    if mask <= 0xFFFF:
        return 2
    return 4
