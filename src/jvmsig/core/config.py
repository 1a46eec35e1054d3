"""Global configuration for jvmsig.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class JvmsigConfig(BaseSettings):
    """jvmsig configuration settings.

    Values can be overridden via environment variables with JVMSIG_ prefix.
    Example: JVMSIG_FAIL_FAST=true makes batch parsing stop at the first error.
    """

    # Parsing
    max_signature_length: int = Field(
        default=65535,
        ge=1,
        le=1048576,
        description="Longest signature text accepted by the parser (characters)",
    )

    # Batch parsing
    fail_fast: bool = Field(
        default=False,
        description="Abort a batch on the first grammar error instead of skipping the entry",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Log level used when the CLI configures logging",
    )

    model_config = {
        "env_prefix": "JVMSIG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> JvmsigConfig:
    """Get cached configuration instance.

    Returns:
        JvmsigConfig singleton instance.
    """
    return JvmsigConfig()


def reload_config() -> JvmsigConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh JvmsigConfig instance.
    """
    get_config.cache_clear()
    return get_config()
