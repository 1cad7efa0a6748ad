"""Exception hierarchy for nanoidgen.

All exceptions derive from NanoIDError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
Only construction can fail for configuration reasons; a generator call can
only fail if its entropy source does.
"""


class NanoIDError(Exception):
    """Base exception for all nanoidgen errors."""


class InvalidLengthError(NanoIDError, ValueError):
    """Requested ID length is outside ``[2, 255]``.

    Raised by the generator factories before any state is allocated.
    """


class InvalidAlphabetError(NanoIDError, ValueError):
    """Alphabet cannot be used to build IDs.

    Raised when the alphabet has fewer than 2 units, more than 2**32 units,
    contains a unit that is not a non-empty string, or (for ASCII-only
    generators) contains a unit outside the ASCII range.
    """


class ConfigValidationError(NanoIDError):
    """Configuration field validation failed.

    Raised when settings overrides contain unknown keys or fail type
    validation, or when a configured entropy source or fallback mode
    does not exist.
    """


class EntropyUnavailableError(NanoIDError):
    """No entropy source can provide bytes.

    Raised when the configured source fails and either no fallback
    is configured or the fallback also fails.
    """
