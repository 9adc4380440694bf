"""
Configuration module for votecore.

settings.py is the single entry point for configuration values.
"""

from votecore.infrastructure.config.async_database import AsyncDatabase
from votecore.infrastructure.config.settings import (
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
)


__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reload_settings",
    "find_env_file",
    "ENV_FILE_PATH",
    # Async database
    "AsyncDatabase",
]
