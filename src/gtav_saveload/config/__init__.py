"""Configuration management module.

This module provides configuration storage, loading, and data models for the application.

Submodules:
    manager: ConfigurationManager for loading/saving XML configuration
    schema: Data classes defining configuration structure (Settings, TransferMode)
    paths: GamePaths with the GTA V profile layout and config file locations
    path_validator: Slot name validation to prevent writes outside Slots

The configuration is stored as XML in %APPDATA%/GTAVSaveLoad/configuration.xml.
"""

from .manager import ConfigurationManager
from .schema import AppConfiguration, Settings, TransferMode
from .paths import GamePaths

__all__ = [
    "ConfigurationManager",
    "AppConfiguration",
    "Settings",
    "TransferMode",
    "GamePaths",
]
