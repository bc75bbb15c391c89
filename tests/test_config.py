"""Tests for the config module."""

import pytest
from pydantic import ValidationError

from colpair.config import Settings, _env_flag


class TestEnvFlag:
    """Test boolean environment flag parsing."""

    def test_env_flag_true(self, monkeypatch):
        """Test that 'true' in any case is parsed as True."""
        monkeypatch.setenv("COLPAIR_TEST_FLAG", "TRUE")
        assert _env_flag("COLPAIR_TEST_FLAG") is True

    def test_env_flag_other_values(self, monkeypatch):
        """Test that anything other than 'true' is False."""
        monkeypatch.setenv("COLPAIR_TEST_FLAG", "yes")
        assert _env_flag("COLPAIR_TEST_FLAG") is False

    def test_env_flag_default(self, monkeypatch):
        """Test the default when the variable is unset."""
        monkeypatch.delenv("COLPAIR_TEST_FLAG", raising=False)
        assert _env_flag("COLPAIR_TEST_FLAG") is False
        assert _env_flag("COLPAIR_TEST_FLAG", "true") is True


class TestSettings:
    """Test Settings configuration."""

    def test_settings_explicit_values(self):
        """Test Settings with explicit values."""
        settings = Settings(
            palette_size=4,
            strict_references=True,
            mapping_default_mode="self_paired",
            log_level="DEBUG",
        )

        assert settings.palette_size == 4
        assert settings.strict_references is True
        assert settings.mapping_default_mode == "self_paired"
        assert settings.log_level == "DEBUG"

    def test_settings_rejects_empty_palette(self):
        """Test that a palette needs at least one slot."""
        with pytest.raises(ValidationError):
            Settings(palette_size=0)

    def test_settings_defaults_are_usable(self):
        """Test that default settings construct a valid palette size."""
        settings = Settings()
        assert settings.palette_size >= 1
