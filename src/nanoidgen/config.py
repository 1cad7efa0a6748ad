"""Configuration system for nanoidgen.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (NANOID_*) -> .env file -> field defaults.

Settings only tune how generators are built (which entropy source, how large
the entropy pool is, how much the rejection block is inflated). They are read
once by the factory; a running generator never consults them again.
Overrides are applied via resolve_settings() which creates a new settings
instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from nanoidgen.exceptions import ConfigValidationError

# Accepted values for the string-typed enumerations below.
FALLBACK_MODES: frozenset[str] = frozenset({"error", "system", "pseudo"})
LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})

# All known settings field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class NanoIDSettings(BaseSettings):
    """Settings for nanoidgen generators.

    Resolution order: init kwargs -> env vars (NANOID_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="NANOID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Factory defaults ---

    default_length: int = Field(
        default=21,
        ge=2,
        le=255,
        description="ID length used by the factories when none is given",
    )

    # --- Entropy sources ---

    secure_source_type: str = Field(
        default="system",
        description="Registered entropy source used for secure generators",
    )
    insecure_source_type: str = Field(
        default="pseudo",
        description="Registered entropy source used for non-secure generators",
    )
    fallback_mode: str = Field(
        default="error",
        description="Fallback entropy source: 'error', 'system', 'pseudo'",
    )

    # --- Entropy pool sizing ---

    pool_factor: int = Field(
        default=6,
        ge=1,
        description="Direct-mask pool holds pool_factor * length * length bytes",
    )
    step_factor: float = Field(
        default=1.6,
        ge=1.0,
        description="Inflation applied to the expected rejection-sampling block size",
    )

    # --- Logging ---

    log_level: str = Field(
        default="none",
        description="Per-call logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store a record of every generation in memory for analysis",
    )


_ALL_FIELDS = frozenset(NanoIDSettings.model_fields.keys())


def validate_settings(settings: NanoIDSettings) -> None:
    """Check the enumerated string fields of *settings*.

    Args:
        settings: Settings instance to check.

    Raises:
        ConfigValidationError: If ``fallback_mode`` or ``log_level`` holds
            an unknown value.
    """
    if settings.fallback_mode not in FALLBACK_MODES:
        raise ConfigValidationError(
            f"Unknown fallback_mode {settings.fallback_mode!r}. "
            f"Expected one of: {', '.join(sorted(FALLBACK_MODES))}"
        )
    if settings.log_level not in LOG_LEVELS:
        raise ConfigValidationError(
            f"Unknown log_level {settings.log_level!r}. "
            f"Expected one of: {', '.join(sorted(LOG_LEVELS))}"
        )


def resolve_settings(
    defaults: NanoIDSettings,
    overrides: dict[str, Any] | None,
) -> NanoIDSettings:
    """Create a new settings instance merging defaults with overrides.

    Args:
        defaults: The base settings loaded from the environment.
        overrides: Field overrides keyed by field name.

    Returns:
        A new NanoIDSettings with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown settings field: {key!r}")

    # model_copy(update=...) skips validation, so route through
    # model_validate to get type coercion and range checks.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        resolved = NanoIDSettings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid settings override: {exc}") from exc
    validate_settings(resolved)
    return resolved
