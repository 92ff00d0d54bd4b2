"""Configuration package: settings model and cached manager."""

from sequential_thinking.config.config_manager import ConfigManager, config_manager, get_settings
from sequential_thinking.config.config_models import ServerSettings

__all__ = ["ConfigManager", "ServerSettings", "config_manager", "get_settings"]
