"""
Configuration management module.
"""

from .settings import (
    ApplicationSettings,
    ServerSettings,
    Settings,
    get_settings,
    load_settings,
)

__all__ = [
    "Settings",
    "ApplicationSettings",
    "ServerSettings",
    "get_settings",
    "load_settings",
]
