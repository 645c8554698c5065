"""
Configuration management for MyDay.
"""

from .config_manager import ConfigManager, get_config
from .settings import Settings

__all__ = ["ConfigManager", "get_config", "Settings"]
