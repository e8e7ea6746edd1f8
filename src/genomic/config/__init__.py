"""Convenience exports for the configuration package."""

from .constants import *  # noqa: F401,F403
from .loader import ConfigError, load_config, save_config
from .logging_conf import JSONFormatter, configure_logging
from .schemas import CrossoverConfig, ReproductionConfig
from .settings import ENV_PREFIX, Settings, get_settings, reset_settings_cache

__all__ = [
    "ConfigError",
    "CrossoverConfig",
    "ENV_PREFIX",
    "JSONFormatter",
    "ReproductionConfig",
    "Settings",
    "configure_logging",
    "get_settings",
    "load_config",
    "reset_settings_cache",
    "save_config",
]
