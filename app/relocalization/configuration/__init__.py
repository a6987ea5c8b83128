"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Engine settings class (for testing)
"""

from relocalization.configuration.localization import LocalizationSettings
from relocalization.configuration.settings import Settings, settings

__all__ = ["Settings", "LocalizationSettings", "settings"]
