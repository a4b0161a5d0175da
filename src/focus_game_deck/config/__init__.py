"""Configuration management module.

This module provides the configuration document model, its persistence and
the encryption of secret fields.

Submodules:
    manager: ConfigurationManager for loading/saving the JSON document
    schema: Data classes defining the document (games, managed apps, integrations, ...)
    defaults: Sample document written on first run
    paths: AppPaths with the default config/log locations and launcher paths
    security: Secret field encryption using Fernet with a user/machine bound key

The configuration is stored as JSON in %APPDATA%/FocusGameDeck/config.json.
"""

from .manager import ConfigurationManager
from .paths import AppPaths
from .schema import AppEntry, ConfigurationDocument, GameEntry, OrderedCollection, Platform

__all__ = [
    "ConfigurationManager",
    "AppPaths",
    "AppEntry",
    "ConfigurationDocument",
    "GameEntry",
    "OrderedCollection",
    "Platform",
]
