"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from jvmsig.core.config import JvmsigConfig, get_config, reload_config


class TestJvmsigConfig:
    """Tests for JvmsigConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        # Clear env and disable .env file loading
        with patch.dict(os.environ, {}, clear=True):
            config = JvmsigConfig(_env_file=None)

            assert config.max_signature_length == 65535
            assert config.fail_fast is False
            assert config.log_level == "WARNING"

    def test_env_override(self) -> None:
        """Test environment variable override."""
        with patch.dict(
            os.environ,
            {
                "JVMSIG_MAX_SIGNATURE_LENGTH": "1024",
                "JVMSIG_FAIL_FAST": "true",
                "JVMSIG_LOG_LEVEL": "DEBUG",
            },
        ):
            config = JvmsigConfig()
            assert config.max_signature_length == 1024
            assert config.fail_fast is True
            assert config.log_level == "DEBUG"

    def test_validation_max_length(self) -> None:
        """Test maximum signature length validation."""
        with patch.dict(os.environ, {"JVMSIG_MAX_SIGNATURE_LENGTH": "0"}):
            with pytest.raises(ValueError):
                JvmsigConfig()

        with patch.dict(os.environ, {"JVMSIG_MAX_SIGNATURE_LENGTH": "99999999"}):
            with pytest.raises(ValueError):
                JvmsigConfig()

    def test_validation_log_level(self) -> None:
        """Test log level validation."""
        with patch.dict(os.environ, {"JVMSIG_LOG_LEVEL": "LOUD"}):
            with pytest.raises(ValueError):
                JvmsigConfig()


class TestConfigCaching:
    """Tests for configuration caching."""

    def test_get_config_cached(self) -> None:
        """Test that get_config returns cached instance."""
        reload_config()  # Clear cache first
        config1 = get_config()
        config2 = get_config()
        assert config1 is config2

    def test_reload_config_clears_cache(self) -> None:
        """Test that reload_config clears cache."""
        config1 = get_config()
        config2 = reload_config()
        config3 = get_config()

        assert config1 is not config2
        assert config2 is config3
