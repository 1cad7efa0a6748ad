"""Tests for nanoidgen.config.

Covers:
- Default values
- Environment variable loading (NANOID_* via monkeypatch)
- Field range validation
- resolve_settings merge logic and error wrapping
- validate_settings enumeration checks
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from nanoidgen.config import NanoIDSettings, resolve_settings, validate_settings
from nanoidgen.exceptions import ConfigValidationError


class TestDefaults:
    def test_defaults(self, settings: NanoIDSettings) -> None:
        assert settings.default_length == 21
        assert settings.secure_source_type == "system"
        assert settings.insecure_source_type == "pseudo"
        assert settings.fallback_mode == "error"
        assert settings.pool_factor == 6
        assert settings.step_factor == 1.6
        assert settings.log_level == "none"
        assert settings.diagnostic_mode is False

    def test_defaults_pass_validation(self, settings: NanoIDSettings) -> None:
        validate_settings(settings)


class TestEnvironment:
    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NANOID_DEFAULT_LENGTH", "12")
        monkeypatch.setenv("NANOID_POOL_FACTOR", "2")
        monkeypatch.setenv("NANOID_LOG_LEVEL", "summary")
        cfg = NanoIDSettings(_env_file=None)  # type: ignore[call-arg]
        assert cfg.default_length == 12
        assert cfg.pool_factor == 2
        assert cfg.log_level == "summary"

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NANOID_DEFAULT_LENGTH", "12")
        cfg = NanoIDSettings(_env_file=None, default_length=30)  # type: ignore[call-arg]
        assert cfg.default_length == 30

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("NANOID_STEP_FACTOR=2.5\n", encoding="utf-8")
        cfg = NanoIDSettings(_env_file=env_file)  # type: ignore[call-arg]
        assert cfg.step_factor == 2.5


class TestFieldValidation:
    @pytest.mark.parametrize("length", [1, 256])
    def test_default_length_bounds(self, length: int) -> None:
        with pytest.raises(ValidationError):
            NanoIDSettings(_env_file=None, default_length=length)  # type: ignore[call-arg]

    def test_pool_factor_positive(self) -> None:
        with pytest.raises(ValidationError):
            NanoIDSettings(_env_file=None, pool_factor=0)  # type: ignore[call-arg]

    def test_step_factor_at_least_one(self) -> None:
        with pytest.raises(ValidationError):
            NanoIDSettings(_env_file=None, step_factor=0.5)  # type: ignore[call-arg]


class TestValidateSettings:
    def test_unknown_fallback_mode(self) -> None:
        cfg = NanoIDSettings(_env_file=None, fallback_mode="hardware")  # type: ignore[call-arg]
        with pytest.raises(ConfigValidationError, match="fallback_mode"):
            validate_settings(cfg)

    def test_unknown_log_level(self) -> None:
        cfg = NanoIDSettings(_env_file=None, log_level="verbose")  # type: ignore[call-arg]
        with pytest.raises(ConfigValidationError, match="log_level"):
            validate_settings(cfg)


class TestResolveSettings:
    def test_no_overrides_returns_defaults(self, settings: NanoIDSettings) -> None:
        assert resolve_settings(settings, None) is settings
        assert resolve_settings(settings, {}) is settings

    def test_override_applied(self, settings: NanoIDSettings) -> None:
        resolved = resolve_settings(settings, {"pool_factor": 3})
        assert resolved.pool_factor == 3
        assert settings.pool_factor == 6

    def test_type_coercion(self, settings: NanoIDSettings) -> None:
        resolved = resolve_settings(settings, {"default_length": "10"})
        assert resolved.default_length == 10

    def test_unknown_key_raises(self, settings: NanoIDSettings) -> None:
        with pytest.raises(ConfigValidationError, match="no_such_field"):
            resolve_settings(settings, {"no_such_field": 1})

    def test_invalid_value_raises(self, settings: NanoIDSettings) -> None:
        with pytest.raises(ConfigValidationError, match="Invalid settings override"):
            resolve_settings(settings, {"default_length": 300})

    def test_invalid_enum_raises(self, settings: NanoIDSettings) -> None:
        with pytest.raises(ConfigValidationError, match="log_level"):
            resolve_settings(settings, {"log_level": "loud"})
