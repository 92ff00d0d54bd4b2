"""
Configuration management for the sequential thinking server.
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from sequential_thinking.config.config_models import ServerSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and caches server settings."""

    def __init__(self, project_root: Optional[Path] = None):
        self._project_root = project_root or Path.cwd()
        self._settings: Optional[ServerSettings] = None

        # Load environment variables from .env file
        dotenv_path = self._project_root / ".env"
        load_dotenv(dotenv_path=dotenv_path)
        logger.debug(f"Loading .env from {dotenv_path.resolve()}")

    @property
    def settings(self) -> ServerSettings:
        """Get server settings (cached)."""
        if self._settings is None:
            try:
                self._settings = ServerSettings()
                logger.info("Server settings loaded successfully")
            except ValidationError as e:
                logger.error(f"Failed to load server settings, using defaults: {e}")
                self._settings = ServerSettings.model_construct()
        return self._settings

    def reload(self) -> ServerSettings:
        """Drop cached settings and read them again."""
        self._settings = None
        return self.settings


# Global configuration manager instance
config_manager = ConfigManager()


def get_settings() -> ServerSettings:
    """Get the current server settings."""
    return config_manager.settings
