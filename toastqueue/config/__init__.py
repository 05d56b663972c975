"""
Configuration Module
====================

Handles loading, saving, and validating the YAML configuration.
"""

from toastqueue.config.config_manager import (
    # Constants
    CONFIG_SCHEMA_VERSION,
    DEFAULT_AUTO_CLOSE_MS,

    # Data classes
    ToastPolicy,
    UIConfig,
    AppConfig,

    # Functions
    load_config,
    save_config,
    ensure_config,
    validate_config,
)

__all__ = [
    "CONFIG_SCHEMA_VERSION",
    "DEFAULT_AUTO_CLOSE_MS",
    "ToastPolicy",
    "UIConfig",
    "AppConfig",
    "load_config",
    "save_config",
    "ensure_config",
    "validate_config",
]
