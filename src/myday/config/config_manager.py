"""
Configuration manager for MyDay.

This module provides a cached access point to the Settings object.
"""

from typing import Any, Optional

from .settings import Settings


class ConfigManager:
    """Manages configuration loading and access."""

    def __init__(self, **overrides: Any):
        """Initialize the configuration manager.

        Args:
            overrides: Explicit values that take precedence over the
                environment, e.g. ``data_dir`` from a command line flag.
        """
        self._overrides = {k: v for k, v in overrides.items() if v is not None}
        self._settings: Optional[Settings] = None

    def load_config(self) -> Settings:
        if self._settings is None:
            self._settings = Settings(**self._overrides)
        return self._settings

    def get_config(self) -> Settings:
        return self.load_config()

    def reload_config(self) -> Settings:
        """Drop the cached settings and read them again."""
        self._settings = None
        return self.load_config()


_config_manager: Optional[ConfigManager] = None


def get_config() -> Settings:
    """Get the process-wide settings."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager.get_config()
