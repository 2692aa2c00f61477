"""Main application settings and configuration management.

This module composes the settings from the different modules (app,
directory) into a single `Settings` class. Values are read from environment
variables prefixed with ``DIRPASSWD_`` only. No ``.env`` file is read: the
tool runs as root and the working directory may be writable by anyone.
"""

import logging

from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .directory import DirectorySettings

logger = logging.getLogger(__name__)


class Settings(AppSettings, DirectorySettings):
    """The main settings class that aggregates all application configurations.

    Usage:
        - Access settings via the singleton instance `settings`, or build a
          fresh instance with `create_settings()` when overrides are needed.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIRPASSWD_",
        case_sensitive=True,
        extra="ignore",
    )


def create_settings(**overrides) -> Settings:
    """Create a settings instance, applying keyword overrides on top of the environment.

    Returns:
        Settings: Configured settings instance
    """
    settings_instance = Settings(**overrides)
    logger.debug(
        "Settings loaded: local store %s, trusted prefix %s",
        settings_instance.LOCAL_STORE_PATH,
        settings_instance.TRUSTED_LOCATION_PREFIX,
    )
    return settings_instance


# Create a singleton instance of the settings to be used across the application.
settings = create_settings()
