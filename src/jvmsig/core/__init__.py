"""Core module containing configuration and error types.

Serialization lives in ``jvmsig.core.models`` and ``jvmsig.core.serializer``,
which depend on the signature package and are imported directly.
"""

from jvmsig.core.config import JvmsigConfig, get_config, reload_config
from jvmsig.core.errors import GrammarError, SerializationError

__all__ = [
    "GrammarError",
    "JvmsigConfig",
    "SerializationError",
    "get_config",
    "reload_config",
]
