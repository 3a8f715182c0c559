"""Foundation layer: exception types and configuration."""

from .config import FallibleSettings, clear_settings_cache, configure_logging, get_settings
from .errors import FallibleError, NoAttemptsError, UnwrapError

__all__ = [
    "FallibleError", "UnwrapError", "NoAttemptsError",
    "FallibleSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
